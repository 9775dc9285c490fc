from __future__ import annotations

from typing import Iterable, List, Mapping, Sequence

from .config import RuleSettings
from .models import Diagnostic, LineFragment, Severity
from .segmentation import get_range_of_word
from .word_lists import WordLists

ADVERB_MESSAGE = "Adverb. Use a forceful verb instead."
QUALIFIER_MESSAGE = "Qualifier. Be bold, don't hedge."


def get_suggestions(suggestions: Sequence[str]) -> str:
    """Render suggestions as 'a', 'b' or 'c'."""
    quoted = [f"'{suggestion}'" for suggestion in suggestions]
    if len(quoted) <= 1:
        return "".join(quoted)
    return f"{', '.join(quoted[:-1])} or {quoted[-1]}"


def get_complex_words(
    line: LineFragment, complex_words: Mapping[str, Sequence[str]]
) -> List[Diagnostic]:
    """Flag the first occurrence of each complex word or phrase on the line."""
    diagnostics: List[Diagnostic] = []
    for word, suggestions in complex_words.items():
        if word in line.text:
            diagnostics.append(
                Diagnostic(
                    range=get_range_of_word(line, word),
                    message=f"Complex. Omit or replace with {get_suggestions(suggestions)}.",
                    severity=Severity.INFORMATION,
                    code="complex-word",
                )
            )
    return diagnostics


def get_adverbs(line: LineFragment, adverbs: Iterable[str]) -> List[Diagnostic]:
    return _flag_words(line, adverbs, ADVERB_MESSAGE, "adverb")


def get_qualifying_words(
    line: LineFragment, qualifying_words: Iterable[str]
) -> List[Diagnostic]:
    return _flag_words(line, qualifying_words, QUALIFIER_MESSAGE, "qualifier")


def scan_line(
    line: LineFragment, word_lists: WordLists, rules: RuleSettings | None = None
) -> List[Diagnostic]:
    """Run every enabled lexical rule over one line."""
    rules = rules or RuleSettings()
    diagnostics: List[Diagnostic] = []
    if rules.complex_words:
        diagnostics.extend(get_complex_words(line, word_lists.complex_words))
    if rules.adverbs:
        diagnostics.extend(get_adverbs(line, word_lists.adverbs))
    if rules.qualifying_words:
        diagnostics.extend(get_qualifying_words(line, word_lists.qualifying_words))
    return diagnostics


def _flag_words(
    line: LineFragment, words: Iterable[str], message: str, code: str
) -> List[Diagnostic]:
    return [
        Diagnostic(
            range=get_range_of_word(line, word),
            message=message,
            severity=Severity.INFORMATION,
            code=code,
        )
        for word in words
        if word in line.text
    ]
