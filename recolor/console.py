"""
Shared Rich Console for diagnostics.

stdout carries recolor's data (the styled lines), so it is written directly
and never goes through Rich. Everything meant for a human, such as error
messages, configuration warnings and log records, goes to stderr through this
one console, so a pipeline like `cmd | recolor ... | less -R` never sees it.

Usage:
    from .console import err_console
    err_console.print("[red]error:[/red] something went wrong")
"""

from rich.console import Console

err_console = Console(stderr=True)
