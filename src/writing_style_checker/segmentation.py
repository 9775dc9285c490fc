"""
Split a line-oriented document into sentences.

A sentence is a list of line fragments. It may start part-way through one line
and finish part-way through a later one. Every fragment keeps its range in the
original document, so diagnostics computed from a sentence point at the right
text.
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import List, Sequence

from .models import Document, LineFragment, Position, Range, Sentence
from .textutils import code_point_index, utf16_length

logger = logging.getLogger(__name__)

SENTENCE_TERMINATOR = "."
CODE_FENCE = "```"
LIST_ITEM_RE = re.compile(r"\s*-\s")


class SegmenterState(Enum):
    PROSE = "prose"
    CODE_BLOCK = "code_block"


def is_code_fence(line: LineFragment) -> bool:
    return line.text.startswith(CODE_FENCE)


def is_list_item(line: LineFragment) -> bool:
    return LIST_ITEM_RE.match(line.text) is not None


def find_sentence_ends(line: LineFragment) -> List[Position]:
    """Return the document position of every sentence terminator in ``line``."""
    ends: List[Position] = []
    index = line.text.find(SENTENCE_TERMINATOR)
    while index != -1:
        ends.append(Position(line.line_number, line.column_of(index)))
        index = line.text.find(SENTENCE_TERMINATOR, index + 1)
    return ends


def split_line_by_positions(
    line: LineFragment, positions: Sequence[Position]
) -> List[LineFragment]:
    """
    Cut ``line`` after each position.

    The character at a cut position stays with the fragment on its left, so a
    sentence fragment always ends with its terminator. Once the remainder has no
    text left it is dropped.
    """
    if not positions:
        return [line]

    fragments: List[LineFragment] = []
    rest = line
    for position in positions:
        if not rest.text:
            break
        if position.line != line.line_number or not rest.start <= position.character < rest.end:
            raise ValueError(
                f"Split position {position} is outside fragment "
                f"{line.line_number}:{rest.start}-{rest.end}."
            )
        cut = position.character + 1
        offset = code_point_index(rest.text, cut - rest.start)
        fragments.append(
            LineFragment(
                line.line_number,
                rest.text[:offset],
                Range.on_line(line.line_number, rest.start, cut),
            )
        )
        rest = LineFragment(
            line.line_number,
            rest.text[offset:],
            Range.on_line(line.line_number, cut, rest.end),
        )
    if rest.text:
        fragments.append(rest)
    return fragments


def get_range_of_word(line: LineFragment, word: str) -> Range:
    """Return the range of the first occurrence of ``word`` in ``line``."""
    index = line.text.find(word)
    if index == -1:
        raise ValueError(f"{word!r} does not occur on line {line.line_number}.")
    start = line.column_of(index)
    return Range.on_line(line.line_number, start, start + utf16_length(word))


def get_sentences(document: Document, *, keep_trailing: bool = False) -> List[Sentence]:
    """
    Split the document into sentences.

    Fenced code blocks are skipped, blank lines end the current sentence and
    each bulleted list line is a sentence of its own. A sentence still open at
    the end of the document is dropped unless ``keep_trailing`` is set.
    """
    sentences: List[Sentence] = []
    current: Sentence = []
    state = SegmenterState.PROSE

    def flush() -> None:
        nonlocal current
        sentences.append(current)
        current = []

    for index in range(document.line_count):
        line = document.line_at(index)

        if is_code_fence(line):
            if state is SegmenterState.PROSE:
                if current:
                    flush()
                state = SegmenterState.CODE_BLOCK
            else:
                state = SegmenterState.PROSE
            continue
        if state is SegmenterState.CODE_BLOCK:
            continue

        if line.is_empty_or_whitespace:
            flush()
            continue

        if is_list_item(line):
            if current:
                flush()
            sentences.append([line])
            continue

        ends = find_sentence_ends(line)
        if not ends:
            current.append(line)
            continue

        pieces = split_line_by_positions(line, ends)
        if len(pieces) == 1:
            current.append(pieces[0])
            flush()
        elif len(ends) == 1:
            current.append(pieces[0])
            flush()
            current.append(pieces[1])
        else:
            current.append(pieces[0])
            flush()
            *complete, last = pieces[1:]
            sentences.extend([piece] for piece in complete)
            if find_sentence_ends(last):
                sentences.append([last])
            else:
                current.append(last)

    if state is SegmenterState.CODE_BLOCK:
        logger.warning("Document %s ends inside an unterminated code block.", document.doc_id)
    if current:
        if keep_trailing:
            sentences.append(current)
        else:
            logger.debug(
                "Dropping unterminated sentence at end of %s (line %d).",
                document.doc_id,
                current[0].line_number,
            )

    result = _drop_empty(sentences)
    logger.debug("Segmented %s into %d sentences.", document.doc_id, len(result))
    return result


def _drop_empty(sentences: List[Sentence]) -> List[Sentence]:
    cleaned: List[Sentence] = []
    for sentence in sentences:
        fragments = [fragment for fragment in sentence if not fragment.is_empty_or_whitespace]
        if fragments:
            cleaned.append(fragments)
    return cleaned
