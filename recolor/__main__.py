"""
Entry point for running recolor as a Python module: `python -m recolor`

The console script defined in pyproject.toml calls `recolor.main:main`
directly; both paths end up in the same main().
"""

from .main import main

if __name__ == "__main__":
    main()
