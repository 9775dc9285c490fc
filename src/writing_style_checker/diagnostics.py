from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Tuple

from .config import StyleCheckerConfig
from .models import Diagnostic, Document
from .passive import get_passive_language
from .readability import get_difficulty_warning
from .segmentation import get_sentences
from .style import scan_line
from .word_lists import WordLists, load_word_lists

logger = logging.getLogger(__name__)


def analyze(
    document: Document,
    config: StyleCheckerConfig | None = None,
    word_lists: WordLists | None = None,
) -> List[Diagnostic]:
    """
    Run every enabled style rule over a document snapshot.

    Lexical diagnostics come first, in line order, followed by the difficulty
    and passive-voice diagnostics of each sentence in turn.
    """
    config = config or StyleCheckerConfig()
    if word_lists is None:
        word_lists = load_word_lists(config.word_lists_path)
    rules = config.rules

    diagnostics: List[Diagnostic] = []
    for index in range(document.line_count):
        diagnostics.extend(scan_line(document.line_at(index), word_lists, rules))

    if rules.sentence_difficulty or rules.passive_voice:
        sentences = get_sentences(document, keep_trailing=config.keep_trailing_sentence)
        for sentence in sentences:
            if rules.sentence_difficulty:
                diagnostics.extend(
                    get_difficulty_warning(
                        sentence,
                        config.hard_sentence_threshold,
                        config.very_hard_sentence_threshold,
                    )
                )
            if rules.passive_voice:
                diagnostics.extend(
                    get_passive_language(sentence, word_lists.passive_precursors)
                )

    logger.debug("Found %d diagnostics in %s.", len(diagnostics), document.doc_id)
    return diagnostics


def analyze_corpus(
    documents: List[Document],
    config: StyleCheckerConfig | None = None,
    word_lists: WordLists | None = None,
) -> Dict[str, List[Diagnostic]]:
    """Analyze all documents and return the diagnostics keyed by document id."""
    config = config or StyleCheckerConfig()
    if word_lists is None:
        word_lists = load_word_lists(config.word_lists_path)
    results: Dict[str, List[Diagnostic]] = {}
    for document in documents:
        results[document.doc_id] = analyze(document, config, word_lists)
        logger.info(
            "Analyzed %s: %d diagnostics", document.doc_id, len(results[document.doc_id])
        )
    return results


class DiagnosticCollection:
    """Holds the current diagnostics per document; each set replaces the previous one."""

    def __init__(self, name: str = "writing-style") -> None:
        self.name = name
        self._entries: Dict[str, Tuple[Diagnostic, ...]] = {}

    def set(self, doc_id: str, diagnostics: List[Diagnostic]) -> None:
        self._entries[doc_id] = tuple(diagnostics)

    def get(self, doc_id: str) -> Tuple[Diagnostic, ...]:
        return self._entries.get(doc_id, ())

    def delete(self, doc_id: str) -> None:
        self._entries.pop(doc_id, None)

    def clear(self) -> None:
        self._entries.clear()

    def refresh(
        self,
        document: Document,
        config: StyleCheckerConfig | None = None,
        word_lists: WordLists | None = None,
    ) -> Tuple[Diagnostic, ...]:
        """Re-analyze ``document`` and replace its diagnostics."""
        self.set(document.doc_id, analyze(document, config, word_lists))
        return self.get(document.doc_id)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Tuple[str, Tuple[Diagnostic, ...]]]:
        return iter(sorted(self._entries.items()))
