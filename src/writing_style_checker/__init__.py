"""
writing_style_checker package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import StyleCheckerConfig, config_from_dict, config_from_yaml, load_config
from .diagnostics import DiagnosticCollection, analyze, analyze_corpus
from .models import Diagnostic, Document, LineFragment, Position, Range, Severity
from .segmentation import get_sentences
from .word_lists import WordLists, load_word_lists

__all__ = [
    "StyleCheckerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "analyze",
    "analyze_corpus",
    "DiagnosticCollection",
    "Diagnostic",
    "Document",
    "LineFragment",
    "Position",
    "Range",
    "Severity",
    "get_sentences",
    "WordLists",
    "load_word_lists",
]

__version__ = "0.1.0"
