from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml

logger = logging.getLogger(__name__)

DEFAULT_WORD_LISTS_RESOURCE = "word_lists.yaml"


class WordListError(ValueError):
    """Raised when a word list file cannot be interpreted."""


@dataclass(frozen=True, slots=True)
class WordLists:
    """The configuration tables consumed by the style rules."""

    complex_words: Dict[str, List[str]] = field(default_factory=dict)
    adverbs: List[str] = field(default_factory=list)
    qualifying_words: List[str] = field(default_factory=list)
    passive_precursors: List[str] = field(default_factory=list)

    def summary(self) -> dict[str, int]:
        return {
            "complex_words": len(self.complex_words),
            "adverbs": len(self.adverbs),
            "qualifying_words": len(self.qualifying_words),
            "passive_precursors": len(self.passive_precursors),
        }


def load_word_lists(path: str | Path | None = None) -> WordLists:
    """
    Load word lists from YAML.

    Parameters
    ----------
    path:
        Custom YAML file. Tables it leaves out keep their packaged defaults.
        Defaults to the lists shipped with the package.
    """
    defaults = default_word_lists()
    if path is None:
        return defaults

    source = Path(path)
    try:
        parsed = yaml.safe_load(source.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise WordListError(f"Unable to parse word lists in {source}: {exc}") from exc
    if not isinstance(parsed, Mapping):
        raise WordListError(f"Word list file {source} must define a mapping.")

    overrides = _parse_tables(parsed, str(source))
    word_lists = replace(defaults, **overrides)
    logger.info("Loaded word lists from %s: %s", source, word_lists.summary())
    return word_lists


@lru_cache(maxsize=1)
def default_word_lists() -> WordLists:
    """Return the word lists packaged with writing_style_checker."""
    contents = (
        resources.files("writing_style_checker")
        .joinpath("data")
        .joinpath(DEFAULT_WORD_LISTS_RESOURCE)
        .read_text(encoding="utf-8")
    )
    parsed = yaml.safe_load(contents) or {}
    return WordLists(**_parse_tables(parsed, DEFAULT_WORD_LISTS_RESOURCE))


def _parse_tables(data: Mapping[str, Any], origin: str) -> dict[str, Any]:
    tables: dict[str, Any] = {}
    if "complex_words" in data:
        tables["complex_words"] = _parse_complex_words(data["complex_words"], origin)
    for name in ("adverbs", "qualifying_words", "passive_precursors"):
        if name in data:
            tables[name] = _parse_word_list(data[name], name, origin)
    return tables


def _parse_complex_words(value: Any, origin: str) -> Dict[str, List[str]]:
    if not isinstance(value, Mapping):
        raise WordListError(f"complex_words in {origin} must map words to suggestions.")
    table: Dict[str, List[str]] = {}
    for word, suggestions in value.items():
        if isinstance(suggestions, str):
            suggestions = [suggestions]
        if not isinstance(suggestions, list) or not suggestions:
            raise WordListError(
                f"complex word {word!r} in {origin} needs at least one suggestion."
            )
        table[str(word)] = [str(item) for item in suggestions]
    return table


def _parse_word_list(value: Any, name: str, origin: str) -> List[str]:
    if not isinstance(value, list):
        raise WordListError(f"{name} in {origin} must be a list of words.")
    words = [str(item) for item in value if str(item)]
    return list(dict.fromkeys(words))
