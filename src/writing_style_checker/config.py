from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

POSITION_ENCODINGS = ("utf-16", "utf-32")


@dataclass(slots=True)
class RuleSettings:
    """Switches for the individual style rules."""

    complex_words: bool = True
    adverbs: bool = True
    qualifying_words: bool = True
    passive_voice: bool = True
    sentence_difficulty: bool = True


@dataclass(slots=True)
class StyleCheckerConfig:
    """Configuration options for the style checker."""

    hard_sentence_threshold: int = 10
    very_hard_sentence_threshold: int = 14
    keep_trailing_sentence: bool = False
    position_encoding: str = "utf-16"
    word_lists_path: str | None = None
    rules: RuleSettings = field(default_factory=RuleSettings)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise ValueError when settings contradict each other."""
        if self.position_encoding not in POSITION_ENCODINGS:
            raise ValueError(
                f"Unknown position_encoding '{self.position_encoding}'; "
                f"expected one of {', '.join(POSITION_ENCODINGS)}."
            )
        if self.hard_sentence_threshold > self.very_hard_sentence_threshold:
            raise ValueError(
                "hard_sentence_threshold must not exceed very_hard_sentence_threshold."
            )

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(StyleCheckerConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "rules" in data:
        rules_value = data["rules"]
        if isinstance(rules_value, RuleSettings):
            kwargs["rules"] = rules_value
        elif isinstance(rules_value, Mapping):
            kwargs["rules"] = _build_rule_settings(rules_value)
        else:
            kwargs.pop("rules")
    return kwargs


def _build_rule_settings(data: Mapping[str, Any]) -> RuleSettings:
    rule_names = {field.name for field in fields(RuleSettings)}
    filtered = {key: bool(data[key]) for key in data if key in rule_names}
    return RuleSettings(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> StyleCheckerConfig:
    """Build a StyleCheckerConfig from a dictionary-like input."""
    if data is None:
        return StyleCheckerConfig()
    return StyleCheckerConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> StyleCheckerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> StyleCheckerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return StyleCheckerConfig()
    return config_from_yaml(path)
