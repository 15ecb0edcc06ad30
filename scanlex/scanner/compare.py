"""
Comparison modes for literal matching, and the anchored matcher itself.

Non-literal modes fold both sides one scalar at a time, so a match always
covers whole source characters and its end can be reported as a position.
"""
import unicodedata
from enum import Flag
from typing import Optional, Union


class CompareOptions(Flag):
    """How `Scanner.advance_if_equals` compares a literal with the source."""
    LITERAL = 0
    CASE_INSENSITIVE = 1
    DIACRITIC_INSENSITIVE = 2
    WIDTH_INSENSITIVE = 4

    @classmethod
    def parse(cls, value: Union["CompareOptions", str]) -> "CompareOptions":
        """
        Build options from a comma (or '|') separated list of member names.

        Names are case-insensitive and may use '-' for '_', so
        "case-insensitive, width_insensitive" is accepted.

        Raises:
            ValueError: If a name does not match any option, or `value` is
                neither a string nor CompareOptions.
        """
        if isinstance(value, CompareOptions):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Compare options must be given as a string of names, got {value!r}")

        options = cls.LITERAL
        for raw_name in value.replace("|", ",").split(","):
            name = raw_name.strip().upper().replace("-", "_")
            if not name:
                continue
            try:
                options |= cls[name]
            except KeyError:
                valid = ", ".join(name.lower() for name in cls.__members__)
                raise ValueError(f"Unknown compare option '{raw_name.strip()}'. Valid options: {valid}.") from None
        return options


def fold_char(char: str, options: CompareOptions) -> str:
    """
    Fold a single character according to `options`. May return "" for a dropped mark.

    Any non-literal mode also decomposes the character (NFD), so composed and
    decomposed spellings of the same text fold alike.
    """
    if not options:
        return char
    text = char
    if options & CompareOptions.WIDTH_INSENSITIVE:
        text = unicodedata.normalize("NFKC", text)
    if options & CompareOptions.CASE_INSENSITIVE:
        text = text.casefold()
    text = unicodedata.normalize("NFD", text)
    if options & CompareOptions.DIACRITIC_INSENSITIVE:
        text = "".join(c for c in text if not unicodedata.combining(c))
    return text


def fold(text: str, options: CompareOptions) -> str:
    return "".join(fold_char(char, options) for char in text)


def match_at(source: str, start: int, literal: str, options: CompareOptions = CompareOptions.LITERAL) -> Optional[int]:
    """
    Match `literal` against `source` anchored exactly at `start`.

    Returns:
        The index just past the matched span, or None when the literal does
        not start at `start`. An empty literal never matches.
    """
    if not literal or start > len(source):
        return None

    if not options:
        return start + len(literal) if source.startswith(literal, start) else None

    target = fold(literal, options)
    if not target:
        return None

    end = len(source)
    index = start
    matched = 0
    while matched < len(target):
        if index >= end:
            return None
        folded = fold_char(source[index], options)
        if index == start and not folded:
            # A stray mark at the cursor is not part of any literal.
            return None
        if not target.startswith(folded, matched):
            return None
        matched += len(folded)
        index += 1

    # Marks that fold away belong to the last matched character.
    while index < end and not fold_char(source[index], options):
        index += 1
    # A mark that survives folding means the literal stopped inside a character.
    if index < end and unicodedata.combining(source[index]):
        return None
    return index
