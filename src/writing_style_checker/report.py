from __future__ import annotations

from typing import List, TypedDict

from .models import Diagnostic, Document, LineFragment, Position, Sentence
from .textutils import code_point_index


class PositionPayload(TypedDict):
    line: int
    character: int


class RangePayload(TypedDict):
    start: PositionPayload
    end: PositionPayload


class DiagnosticPayload(TypedDict):
    range: RangePayload
    message: str
    severity: str
    source: str
    code: str


class FragmentPayload(TypedDict):
    line: int
    text: str
    range: RangePayload


def encode_position(
    position: Position, document: Document, encoding: str = "utf-16"
) -> PositionPayload:
    """Express a position in the column units the consumer expects."""
    character = position.character
    if encoding == "utf-32" and position.line < document.line_count:
        character = code_point_index(document.line_at(position.line).text, character)
    return {"line": position.line, "character": character}


def diagnostic_payload(
    diagnostic: Diagnostic, document: Document, encoding: str = "utf-16"
) -> DiagnosticPayload:
    """Serialize a Diagnostic so it can be emitted in JSON."""
    return {
        "range": {
            "start": encode_position(diagnostic.range.start, document, encoding),
            "end": encode_position(diagnostic.range.end, document, encoding),
        },
        "message": diagnostic.message,
        "severity": diagnostic.severity.value,
        "source": diagnostic.source,
        "code": diagnostic.code,
    }


def fragment_payload(
    fragment: LineFragment, document: Document, encoding: str = "utf-16"
) -> FragmentPayload:
    return {
        "line": fragment.line_number,
        "text": fragment.text,
        "range": {
            "start": encode_position(fragment.range.start, document, encoding),
            "end": encode_position(fragment.range.end, document, encoding),
        },
    }


def sentences_payload(
    sentences: List[Sentence], document: Document, encoding: str = "utf-16"
) -> List[List[FragmentPayload]]:
    return [
        [fragment_payload(fragment, document, encoding) for fragment in sentence]
        for sentence in sentences
    ]


def format_diagnostic(
    doc_id: str, diagnostic: Diagnostic, document: Document, encoding: str = "utf-16"
) -> str:
    """Render ``doc_id:line:col: severity: message [code]`` with 1-based line and column."""
    start = encode_position(diagnostic.range.start, document, encoding)
    return (
        f"{doc_id}:{start['line'] + 1}:{start['character'] + 1}: "
        f"{diagnostic.severity.value}: {diagnostic.message} [{diagnostic.code}]"
    )
