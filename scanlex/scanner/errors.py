"""
Error types raised by the Scanner.

All of them are ordinary, recoverable results: the code driving the scanner
is expected to catch them and translate them into its own diagnostics.
"""
from typing import Optional

from .position import Position


class ScannerError(Exception):
    """Base exception class for scanning errors."""

    def __init__(self, message: str, position: Optional[Position] = None):
        super().__init__(message)
        self.message = message
        self.position = position


class EndOfInputError(ScannerError):
    """Raised by the safe read operations when the cursor is already at the end."""

    def __init__(self, position: Optional[Position] = None, message: str = "Reached unexpected end of input string"):
        super().__init__(message, position)


class UnexpectedCharacterError(ScannerError):
    """
    Raised when a required character, or character class, is absent at the cursor.

    Attributes:
        expected: Description of what was required (a literal or a class name).
        actual: The offending character, or None when the input ended instead.
    """

    def __init__(self, expected: str, actual: Optional[str], position: Optional[Position] = None, message: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        if message is None:
            received = f"'{actual}'" if actual is not None else "end of input"
            message = f"Expected {expected} but received {received}"
        super().__init__(message, position)


class InvalidNumberError(ScannerError, ValueError):
    """Raised when a consumed digit run cannot be converted to an integer."""

    def __init__(self, raw_text: str, position: Optional[Position] = None, reason: str = "Invalid integer string"):
        self.raw_text = raw_text
        super().__init__(f"{reason} '{raw_text}'", position)
