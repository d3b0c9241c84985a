"""
Exceptions raised while validating recolor's command-line input.

Every error here is a startup-time error: it is raised before the first input
line is read, caught once in main(), and reported to stderr. Per-line
processing never raises, since a line that doesn't match is simply passed
through.
"""


class RecolorError(Exception):
    """Base exception for all recolor errors."""

    pass


class InvalidPattern(RecolorError):
    """Raised when the regular expression fails to compile."""

    def __init__(self, pattern: str, reason: str = ""):
        self.pattern = pattern
        self.reason = reason
        message = f"invalid regex {pattern!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class MalformedOverride(RecolorError):
    """Raised when a style override is not of the form key=style[,style...]."""

    def __init__(self, argument: str, message: str = ""):
        self.argument = argument
        super().__init__(
            message or f"invalid style override {argument!r}, expected key=style[,style...]"
        )


class UnknownStyleToken(RecolorError):
    """Raised when a style word is neither a color, an attribute, nor a #RRGGBB literal."""

    def __init__(self, token: str, argument: str | None = None):
        self.token = token
        self.argument = argument
        message = f"unknown style {token!r}"
        if argument is not None:
            message += f" in {argument!r}"
        super().__init__(message)


class DuplicateOverrideKey(RecolorError):
    """Raised when two overrides target the same capture group key."""

    def __init__(self, key: int | str, argument: str):
        self.key = key
        self.argument = argument
        super().__init__(f"duplicate style override for group {str(key)!r} in {argument!r}")
