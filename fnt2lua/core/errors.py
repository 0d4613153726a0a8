"""
Conversion errors raised by the core.

The GUI catches these and turns them into status messages; nothing here is
allowed to escape a button handler.
"""


class ConversionError(Exception):
    """Base class for every failure of a .fnt -> .lua conversion."""


class FntReadError(ConversionError):
    """Input file missing, unreadable or not valid UTF-8."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class FntParseError(ConversionError, ValueError):
    """The descriptor could not be decoded."""


class FntSyntaxError(FntParseError):
    """Structural XML error (only raised by a strict parser)."""

    def __init__(self, message: str, position=None):
        super().__init__(message)
        self.position = position  # (line, column) when known


class FntAttributeError(FntParseError):
    """An attribute value is not an integer in the expected range."""

    def __init__(self, element: str, attribute: str, value: str):
        super().__init__(
            f"Invalid value for <{element}> attribute '{attribute}': {value!r}"
        )
        self.element = element
        self.attribute = attribute
        self.value = value


class OutputWriteError(ConversionError):
    """The generated Lua could not be written."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = path
        self.reason = reason
