from __future__ import annotations

from writing_style_checker.models import Document, LineFragment

SENTENCE_WITH_NO_ENDS = "this is a line without a sentence end in it"
SENTENCE_WITH_ONE_END = "this is a line. It has a sentence end in it"
SENTENCE_WITH_TWO_ENDS = "this is a line. It has a sentence end in it. It also has another"
COMPLETE_SENTENCE = "This is a complete sentence."

SIMPLE_SENTENCE = "This is a simple sentence"
HARD_SENTENCE = (
    "The extension highlights lengthy, complex sentences and common errors; "
    "if you see a hard sentence, shorten or split it."
)
VERY_HARD_SENTENCE = (
    "If you see a very hard highlight, your sentence is so dense and complicated "
    "that your readers will get lost trying to follow its meandering, splitting "
    "logic — try editing this sentence to remove the highlight."
)


def get_line(text: str, line_number: int = 0) -> LineFragment:
    """Wrap text as a whole-line fragment."""
    return LineFragment.whole_line(line_number, text)


def lines_for_document(texts: list[str]) -> list[LineFragment]:
    """Build whole-line fragments with sequential line numbers."""
    return [get_line(text, index) for index, text in enumerate(texts)]


def build_document(texts: list[str], doc_id: str = "doc.md") -> Document:
    """Create a Document whose lines are exactly ``texts``."""
    return Document(doc_id=doc_id, text="\n".join(texts))
