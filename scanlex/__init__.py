"""
scanlex: a character-stream scanner to build lexers and small parsers on.
"""
from .scanner import (
    Scanner,
    Position,
    CompareOptions,
    ScannerError,
    EndOfInputError,
    UnexpectedCharacterError,
    InvalidNumberError,
)
from .config import ScannerConfig

__version__ = "0.1.0"

__all__ = [
    "Scanner",
    "Position",
    "CompareOptions",
    "ScannerConfig",
    "ScannerError",
    "EndOfInputError",
    "UnexpectedCharacterError",
    "InvalidNumberError",
]
