"""Text measurement helpers shared by generation and inspection.

Compartment lengths are counted in UTF-16 code units so that IDs measure
the same in every runtime that exchanges them. For the ASCII strategies
this equals len(); it only differs for astral code points, which the
"all characters" strategy can emit and which count as two units.
"""

MAX_CODE_POINT = 0x10FFFF
SURROGATE_START = 0xD800
SURROGATE_END = 0xDFFF


def utf16_units(code_point: int) -> int:
    """Number of UTF-16 code units needed to encode one code point."""
    return 2 if code_point > 0xFFFF else 1


def utf16_length(value: str) -> int:
    """Length of a string measured in UTF-16 code units."""
    return sum(utf16_units(ord(ch)) for ch in value)


def is_printable_code_point(code_point: int) -> bool:
    """True for code points allowed in "all characters" compartments.

    Excludes surrogate halves and the C0/C1 control ranges.
    """
    if SURROGATE_START <= code_point <= SURROGATE_END:
        return False
    if code_point <= 0x1F or 0x7F <= code_point <= 0x9F:
        return False
    return code_point <= MAX_CODE_POINT


def is_visible_ascii(ch: str) -> bool:
    """True for printable ASCII, U+0020 through U+007E inclusive."""
    return 0x20 <= ord(ch) <= 0x7E
