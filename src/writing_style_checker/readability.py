from __future__ import annotations

import math
from typing import List

from .models import Diagnostic, Range, Sentence, Severity
from .textutils import clean_text

HARD_SENTENCE_MESSAGE = "Hard sentence. Shorten or split it."
VERY_HARD_SENTENCE_MESSAGE = "Very hard sentence. Shorten or split it."


def sentence_text(sentence: Sentence) -> str:
    """Join the fragment texts of a sentence with single spaces."""
    return " ".join(fragment.text for fragment in sentence)


def calculate_sentence_score(sentence: Sentence) -> int:
    """
    Grade-level style difficulty of a sentence, counting letters instead of syllables.

    The cleaned text always gets a trailing period, so an empty sentence still
    has one "word" and one "letter"; the floor at zero takes care of it.
    """
    cleaned = clean_text(sentence_text(sentence)) + "."
    word_count = len(cleaned.split(" "))
    letter_count = len(cleaned.replace(" ", ""))
    if word_count == 0 or letter_count == 0:
        return 0
    raw = 4.71 * (letter_count / word_count) + 0.5 * word_count - 21.43
    # Half-up rounding; round() would round halves to even.
    return max(0, math.floor(raw + 0.5))


def sentence_range(sentence: Sentence) -> Range:
    return Range(sentence[0].range.start, sentence[-1].range.end)


def get_difficulty_warning(
    sentence: Sentence, hard_threshold: int = 10, very_hard_threshold: int = 14
) -> List[Diagnostic]:
    """Return a hard or very hard sentence diagnostic when the score calls for one."""
    if not sentence:
        return []
    score = calculate_sentence_score(sentence)
    if score <= hard_threshold:
        return []
    if score <= very_hard_threshold:
        return [
            Diagnostic(
                range=sentence_range(sentence),
                message=HARD_SENTENCE_MESSAGE,
                severity=Severity.INFORMATION,
                code="hard-sentence",
            )
        ]
    return [
        Diagnostic(
            range=sentence_range(sentence),
            message=VERY_HARD_SENTENCE_MESSAGE,
            severity=Severity.WARNING,
            code="very-hard-sentence",
        )
    ]
