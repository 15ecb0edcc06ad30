"""
Character classification predicates used to drive the Scanner.

Each predicate takes a single character (one Unicode scalar) and has no side
effects. The lookup tables are module-level frozensets, built once at import
time and never mutated, so every Scanner instance shares them.
"""
import unicodedata

DIGITS = frozenset("0123456789")

STRING_DELIMITERS = frozenset("\"'")

# Whitespace and newlines: the separator categories plus the C0/C1 line controls.
WHITESPACE_CONTROLS = frozenset("\t\n\u000b\u000c\r\u0085")
WHITESPACE_CATEGORIES = frozenset({"Zs", "Zl", "Zp"})

# Letters include combining marks, so a decomposed "é" stays one word.
LETTER_CATEGORIES = frozenset({"Lu", "Ll", "Lt", "Lm", "Lo", "Mn", "Mc", "Me"})


def is_digit(char: str) -> bool:
    """True for the ASCII digits '0' to '9' only."""
    return char in DIGITS


def is_string_delimiter(char: str) -> bool:
    return char in STRING_DELIMITERS


def is_whitespace(char: str) -> bool:
    """True for any Unicode whitespace or newline character."""
    return char in WHITESPACE_CONTROLS or unicodedata.category(char) in WHITESPACE_CATEGORIES


def is_letter(char: str) -> bool:
    """True for any Unicode letter, or a combining mark attached to one."""
    return unicodedata.category(char) in LETTER_CATEGORIES


def is_alphanumeric(char: str) -> bool:
    return is_letter(char) or is_digit(char)
