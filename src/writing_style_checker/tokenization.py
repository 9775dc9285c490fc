from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(slots=True)
class Token:
    """Represents a token and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int


def split_on_spaces(text: str) -> List[Token]:
    """
    Split trimmed ``text`` on single spaces, keeping offsets into the original text.

    Runs of spaces yield empty tokens, the same way ``str.split(" ")`` does.
    Whitespace-only text yields no tokens.
    """
    stripped = text.strip()
    if not stripped:
        return []
    offset = len(text) - len(text.lstrip())
    tokens: List[Token] = []
    for part in stripped.split(" "):
        tokens.append(Token(text=part, start_char=offset, end_char=offset + len(part)))
        offset += len(part) + 1
    return tokens
