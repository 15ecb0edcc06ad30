# Scanner package
"""
Scanner: a forward-only character cursor for hand-written lexers.

Main components:
- Scanner: cursor primitives, predicate-driven consumption, literal matching
  and numeric literal extraction
- Position: scalar index with code-unit conversion helpers
- CompareOptions: comparison modes for literal matching
- ScannerError and subclasses: recoverable scanning errors
"""
from .scanner import Scanner, Predicate
from .position import Position
from .compare import CompareOptions
from .errors import ScannerError, EndOfInputError, UnexpectedCharacterError, InvalidNumberError
from .classification import is_digit, is_string_delimiter, is_whitespace, is_letter, is_alphanumeric

__all__ = [
    # Main classes
    "Scanner",
    "Position",
    "CompareOptions",
    "Predicate",

    # Errors
    "ScannerError",
    "EndOfInputError",
    "UnexpectedCharacterError",
    "InvalidNumberError",

    # Character classification
    "is_digit",
    "is_string_delimiter",
    "is_whitespace",
    "is_letter",
    "is_alphanumeric",
]
