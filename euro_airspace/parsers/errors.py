"""
Exceptions raised while parsing airspace files.

Line level errors are recoverable: the file driver reports them to the
operation environment, which decides whether to skip the line or abort.
"""

from typing import Any, Optional


class AirspaceParseError(Exception):
    """Base class for airspace parsing errors."""

    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class AirspaceLineError(AirspaceParseError):
    """A single line could not be parsed."""

    def __init__(self, message: str, text: Optional[str] = None):
        super().__init__(message, details=text)
        self.text = text

    def __str__(self) -> str:
        if self.text is not None:
            return f"{super().__str__()}: \"{self.text}\""
        return super().__str__()


class MalformedCoordinateError(AirspaceLineError):
    """A coordinate required by a directive could not be read."""
    pass


class MalformedLineError(AirspaceLineError):
    """A directive value is incomplete or unreadable."""
    pass


class UnknownFileTypeError(AirspaceParseError):
    """No line of the file identified it as OpenAir or TNP."""
    pass


class ParseAbortedError(AirspaceParseError):
    """The parse was aborted after a line error."""

    def __init__(self, message: str, line_number: int, line: str):
        super().__init__(message, details=(line_number, line))
        self.line_number = line_number
        self.line = line
