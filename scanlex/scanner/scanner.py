"""
Scanner: a forward-only cursor over a string, for building hand-written lexers.

The scanner reads one Unicode scalar (a one-character `str`) at a time. Safe
operations raise a ScannerError subclass on end of input or a missing
character; the `_unsafe_*` fast paths assume the caller already checked
`is_at_end()`. The cursor never moves backwards.
"""
import logging
from typing import Callable, Optional, Union

from .classification import is_alphanumeric, is_digit, is_letter, is_string_delimiter, is_whitespace
from .compare import CompareOptions, match_at
from .errors import EndOfInputError, InvalidNumberError, UnexpectedCharacterError
from .position import Position
from scanlex.config.config import ScannerConfig

logger = logging.getLogger(__name__)

Predicate = Callable[[str], bool]


class Scanner:
    """
    Manages an immutable source string and a cursor for sequential reading.

    Higher-level recognizers compose the primitives below; snapshot
    `position` before a run and call `span()` to get the text it covered.
    """

    # Classification predicates, usable as `scanner.is_digit`.
    is_digit = staticmethod(is_digit)
    is_string_delimiter = staticmethod(is_string_delimiter)
    is_whitespace = staticmethod(is_whitespace)
    is_letter = staticmethod(is_letter)
    is_alphanumeric = staticmethod(is_alphanumeric)

    def __init__(self, source: str = "", start: Union[Position, int] = 0, config: Optional[ScannerConfig] = None):
        """
        Initialize the scanner.

        Args:
            source: The text to scan. It is never modified.
            start: Position to start scanning from, for resuming mid-string.
            config: Scanner configuration. Uses defaults if not provided.

        Raises:
            ValueError: If `start` is not a position within `source`.
        """
        if not isinstance(source, str):
            raise TypeError(f"Scanner source must be a str, got {type(source).__name__}")
        start_index = start.index if isinstance(start, Position) else start
        if isinstance(start_index, bool) or not isinstance(start_index, int):
            raise ValueError(f"Scanner start must be a Position or int, got {type(start).__name__}")
        if not 0 <= start_index <= len(source):
            raise ValueError(f"Scanner start {start_index} is outside a source of length {len(source)}")

        self._source: str = source
        self._pos: int = start_index
        self._end: int = len(source)
        self._config = config or ScannerConfig()
        if start_index:
            logger.debug(f"Scanner resuming at position {start_index} of {self._end}")

    @classmethod
    def new_at(cls, source: str, position: Union[Position, int], config: Optional[ScannerConfig] = None) -> "Scanner":
        """Create a scanner over `source` whose cursor starts at `position`."""
        return cls(source, start=position, config=config)

    # --- Accessors ---

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> Position:
        """The current cursor position."""
        return Position(self._pos)

    @property
    def end(self) -> Position:
        """The past-the-end position of the source."""
        return Position(self._end)

    @property
    def config(self) -> ScannerConfig:
        return self._config

    def is_at_end(self) -> bool:
        """Whether no further reading is possible."""
        return self._pos >= self._end

    def span(self, start: Union[Position, int]) -> str:
        """
        Return the text between a previously snapshotted position and the cursor.

        Raises:
            ValueError: If `start` lies after the cursor.
        """
        start_index = int(start)
        if not 0 <= start_index <= self._pos:
            raise ValueError(f"Span start {start_index} must lie between 0 and the cursor ({self._pos})")
        return self._source[start_index:self._pos]

    def code_unit_offset(self, encoding: str = "utf-16") -> int:
        """The cursor expressed in code units of `encoding` (utf-8, utf-16 or utf-32)."""
        return self.position.to_code_unit_offset(self._source, encoding)

    # --- Cursor primitives ---

    def _unsafe_peek(self) -> str:
        """Character at the cursor. Only call after checking `is_at_end()`."""
        return self._source[self._pos]

    def _unsafe_advance(self) -> None:
        """Move past one character. Only call after checking `is_at_end()`."""
        assert self._pos < self._end, "advance past end of input"
        self._pos += 1

    def peek(self) -> str:
        """
        Look at the character at the cursor without advancing.

        Raises:
            EndOfInputError: If the cursor is at the end.
        """
        if self.is_at_end():
            raise EndOfInputError(self.position)
        return self._unsafe_peek()

    def advance(self) -> None:
        """
        Move the cursor forward by one character.

        Raises:
            EndOfInputError: If the cursor is at the end. The cursor is unchanged.
        """
        if self.is_at_end():
            raise EndOfInputError(self.position)
        self._unsafe_advance()

    def read(self) -> str:
        """Return the character at the cursor and move past it."""
        char = self.peek()
        self._unsafe_advance()
        return char

    def expect(self, atom: str) -> None:
        """
        Read one character and require it to be `atom`.

        The character is consumed even when it does not match, so a caller
        retrying after the error does not loop on the same character.

        Raises:
            EndOfInputError: If the cursor is at the end.
            UnexpectedCharacterError: If the character read differs from `atom`.
        """
        position = self.position
        char = self.read()
        if char != atom:
            raise UnexpectedCharacterError(
                f"'{atom}'", char, position,
                message=f"Expected '{atom}', received '{char}' instead",
            )

    # --- Predicate-driven consumption ---

    def advance_while(self, predicate: Predicate) -> None:
        """Advance while `predicate` holds. Stops at end of input or the first failing character."""
        while not self.is_at_end() and predicate(self._unsafe_peek()):
            self._unsafe_advance()

    def advance_until(self, predicate: Predicate) -> None:
        """Advance until `predicate` holds. Stops at end of input or the first matching character."""
        while not self.is_at_end() and not predicate(self._unsafe_peek()):
            self._unsafe_advance()

    def consume_while(self, predicate: Predicate) -> str:
        """Same as `advance_while`, returning the consumed text (possibly empty)."""
        start = self._pos
        self.advance_while(predicate)
        return self._source[start:self._pos]

    def consume_until(self, predicate: Predicate) -> str:
        """Same as `advance_until`, returning the consumed text (possibly empty)."""
        start = self._pos
        self.advance_until(predicate)
        return self._source[start:self._pos]

    def consume_remaining(self) -> str:
        """Return everything from the cursor to the end and move the cursor to the end."""
        remaining = self._source[self._pos:self._end]
        self._pos = self._end
        return remaining

    def skip_whitespace(self) -> None:
        """Advance to the first non-whitespace character."""
        self.advance_while(is_whitespace)

    # --- Lookahead and literal matching ---

    def peek_matches(self, predicate: Predicate) -> bool:
        """Whether the character at the cursor satisfies `predicate`. False at end of input."""
        return not self.is_at_end() and predicate(self._unsafe_peek())

    def next_equals(self, atom: str) -> bool:
        """Whether the character at the cursor is `atom`. False at end of input."""
        return not self.is_at_end() and self._unsafe_peek() == atom

    def advance_if_equals(self, literal: str, options: Optional[Union[CompareOptions, str]] = None) -> bool:
        """
        Advance past `literal` if it occurs exactly at the cursor.

        Args:
            literal: The text to match.
            options: Comparison mode. Defaults to the configured mode,
                which is an exact character-by-character match.

        Returns:
            True if the cursor moved past the match, False (cursor unchanged) otherwise.
        """
        if options is None:
            options = self._config.compare_options
        else:
            options = CompareOptions.parse(options)

        match_end = match_at(self._source, self._pos, literal, options)
        if match_end is None:
            return False
        self._pos = match_end
        return True

    # --- Numeric literals ---

    def _should_skip(self, skip_whitespace: Optional[bool]) -> bool:
        return self._config.skip_leading_whitespace if skip_whitespace is None else skip_whitespace

    def _require_digit(self, what: str) -> None:
        if self.is_at_end():
            raise UnexpectedCharacterError(
                what, None, self.position,
                message=f"Expected {what} but reached end of input",
            )
        char = self._unsafe_peek()
        if not is_digit(char):
            raise UnexpectedCharacterError(
                what, char, self.position,
                message=f"Expected {what} but received '{char}'",
            )

    def parse_int(self, skip_whitespace: Optional[bool] = None) -> int:
        """
        Consume a run of digits and convert it to an int.

        The digits are consumed even when the conversion fails.

        Raises:
            InvalidNumberError: If the run is empty or outside the configured integer range.
        """
        if self._should_skip(skip_whitespace):
            self.skip_whitespace()

        start = self.position
        digits = self.consume_while(is_digit)
        if not digits:
            raise InvalidNumberError(digits, start)

        value = int(digits)
        int_range = self._config.int_range
        if int_range is not None and value not in int_range:
            raise InvalidNumberError(digits, start, reason=f"Integer overflows {self._config.int_bits} bits:")
        return value

    def parse_int_string(self, skip_whitespace: Optional[bool] = None) -> str:
        """
        Consume a run of digits and return it as text.

        Raises:
            UnexpectedCharacterError: If the cursor is not on a digit. The cursor is unchanged.
        """
        if self._should_skip(skip_whitespace):
            self.skip_whitespace()

        self._require_digit("integer")
        return self.consume_while(is_digit)

    def parse_float_string(self, skip_whitespace: Optional[bool] = None) -> str:
        """
        Consume a decimal number of the form `digits ('.' digits)?` and return it as text.

        Raises:
            UnexpectedCharacterError: If the cursor is not on a digit, or if a
                '.' is not followed by a digit. In the second case the cursor
                stays past the '.'.
        """
        if self._should_skip(skip_whitespace):
            self.skip_whitespace()

        self._require_digit("float")
        start = self._pos
        self.advance_while(is_digit)

        if self.next_equals("."):
            self._unsafe_advance()
            self._require_digit("float")
            self.advance_while(is_digit)

        return self._source[start:self._pos]

    def __repr__(self) -> str:
        return f"Scanner(position={self._pos}, end={self._end})"
