from __future__ import annotations

KEPT_PUNCTUATION = frozenset(". ")


def clean_text(value: str) -> str:
    """Drop everything except alphanumerics, periods and spaces."""
    return "".join(ch for ch in value if ch.isalnum() or ch in KEPT_PUNCTUATION)


def clean_word(value: str) -> str:
    """Drop everything except alphanumerics and periods from a single word."""
    return "".join(ch for ch in value if ch.isalnum() or ch == ".")


def utf16_length(text: str) -> int:
    """Length of ``text`` in UTF-16 code units, the unit editors count columns in."""
    # Astral code points take a surrogate pair.
    return len(text) + sum(1 for ch in text if ord(ch) > 0xFFFF)


def utf16_column(text: str, index: int) -> int:
    """Convert a code-point index into ``text`` into UTF-16 code units."""
    return utf16_length(text[:index])


def code_point_index(text: str, column: int) -> int:
    """
    Convert a UTF-16 column in ``text`` back into a code-point index.

    A column that falls inside a surrogate pair resolves to the character that
    owns the pair.
    """
    units = 0
    for index, ch in enumerate(text):
        units += 2 if ord(ch) > 0xFFFF else 1
        if units > column:
            return index
    return len(text)
