"""
Position: an ordered index into a source string, counted in Unicode scalars.

Python strings are indexed by code point, so the scanner itself never deals
with storage width. The code-unit helpers here exist for callers that must
exchange offsets with UTF-8 or UTF-16 based tools (editors, browsers, byte
buffers).
"""
from dataclasses import dataclass
from typing import Dict

# code units per scalar: (below U+0080, below U+0800, below U+10000, astral)
_CODE_UNIT_WIDTHS: Dict[str, tuple] = {
    "utf-8": (1, 2, 3, 4),
    "utf-16": (1, 1, 1, 2),
    "utf-32": (1, 1, 1, 1),
}


def _normalize_encoding(encoding: str) -> str:
    name = encoding.strip().lower().replace("_", "-")
    if name in ("utf8", "utf16", "utf32"):
        name = f"utf-{name[3:]}"
    if name not in _CODE_UNIT_WIDTHS:
        raise ValueError(f"Unsupported encoding '{encoding}'. Expected one of: {', '.join(_CODE_UNIT_WIDTHS)}.")
    return name


def code_unit_width(char: str, encoding: str = "utf-16") -> int:
    """Return the number of code units `char` occupies in the given encoding."""
    widths = _CODE_UNIT_WIDTHS[_normalize_encoding(encoding)]
    cp = ord(char)
    if cp < 0x80:
        return widths[0]
    if cp < 0x800:
        return widths[1]
    if cp < 0x10000:
        return widths[2]
    return widths[3]


@dataclass(frozen=True, order=True)
class Position:
    """A scalar index into a source string."""
    index: int = 0

    def __post_init__(self):
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise TypeError(f"Position index must be an int, got {type(self.index).__name__}")
        if self.index < 0:
            raise ValueError(f"Position index must be non-negative, got {self.index}")

    def __int__(self) -> int:
        return self.index

    def __index__(self) -> int:
        return self.index

    def is_valid_in(self, source: str) -> bool:
        """Whether this position lies within `source` (the past-the-end position included)."""
        return self.index <= len(source)

    def to_code_unit_offset(self, source: str, encoding: str = "utf-16") -> int:
        """
        Convert this position to an offset counted in code units of `encoding`.

        Raises:
            ValueError: If the position lies beyond the end of `source`.
        """
        if not self.is_valid_in(source):
            raise ValueError(f"Position {self.index} is outside a source of length {len(source)}")
        encoding = _normalize_encoding(encoding)
        return sum(code_unit_width(char, encoding) for char in source[:self.index])

    @classmethod
    def from_code_unit_offset(cls, source: str, offset: int, encoding: str = "utf-16") -> "Position":
        """
        Convert a code-unit offset of `encoding` back to a scalar position.

        Raises:
            ValueError: If the offset is negative, beyond the end of `source`,
                or falls inside the encoding of a single scalar.
        """
        if offset < 0:
            raise ValueError(f"Code unit offset must be non-negative, got {offset}")
        encoding = _normalize_encoding(encoding)

        units = 0
        for index, char in enumerate(source):
            if units == offset:
                return cls(index)
            units += code_unit_width(char, encoding)
            if units > offset:
                raise ValueError(f"{encoding} offset {offset} falls inside the scalar at position {index}")
        if units == offset:
            return cls(len(source))
        raise ValueError(f"{encoding} offset {offset} is beyond the end of the source ({units} code units)")
