from __future__ import annotations

from typing import Iterable, List

from .models import Diagnostic, Position, Range, Sentence, Severity
from .textutils import clean_word
from .tokenization import split_on_spaces

PASSIVE_VOICE_MESSAGE = "Passive voice. Use active voice."
PARTICIPLE_SUFFIX = "ed"


def get_passive_language(sentence: Sentence, precursors: Iterable[str]) -> List[Diagnostic]:
    """
    Flag a precursor ("is", "was", ...) followed by a word ending in "ed".

    The following word may sit at the start of the next fragment, in which case
    the diagnostic range crosses the line break. Irregular participles are not
    recognised. Precursors match case-sensitively, like every other word list.
    """
    precursor_set = set(precursors)
    fragment_tokens = [split_on_spaces(fragment.text) for fragment in sentence]
    diagnostics: List[Diagnostic] = []

    for index, (fragment, tokens) in enumerate(zip(sentence, fragment_tokens)):
        is_last_fragment = index == len(sentence) - 1
        for position, token in enumerate(tokens):
            is_last_token = position == len(tokens) - 1
            if is_last_token and is_last_fragment:
                break
            if token.text not in precursor_set:
                continue

            if not is_last_token:
                follower = tokens[position + 1]
                follower_fragment = fragment
            else:
                next_tokens = fragment_tokens[index + 1]
                if not next_tokens:
                    continue
                follower = next_tokens[0]
                follower_fragment = sentence[index + 1]

            if not clean_word(follower.text).endswith(PARTICIPLE_SUFFIX):
                continue
            start = Position(fragment.line_number, fragment.column_of(token.start_char))
            end = Position(
                follower_fragment.line_number,
                follower_fragment.column_of(follower.end_char),
            )
            diagnostics.append(
                Diagnostic(
                    range=Range(start, end),
                    message=PASSIVE_VOICE_MESSAGE,
                    severity=Severity.INFORMATION,
                    code="passive-voice",
                )
            )
    return diagnostics
