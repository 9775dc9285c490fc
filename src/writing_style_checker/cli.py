from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, List, TypedDict

import typer
import yaml

from .config import StyleCheckerConfig, load_config
from .diagnostics import analyze_corpus
from .models import Diagnostic, Document, Severity
from .report import DiagnosticPayload, diagnostic_payload, format_diagnostic, sentences_payload
from .segmentation import get_sentences
from .word_lists import WordListError, WordLists, load_word_lists

app = typer.Typer(help="Writing Style Checker CLI.", no_args_is_help=True)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".md", ".markdown", ".txt"}

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class OutputFormat(str, Enum):
    JSON = "json"
    TEXT = "text"


class DocumentSummary(TypedDict):
    doc_id: str
    diagnostics: List[DiagnosticPayload]


@app.callback()
def main_callback(
    log_level: LogLevel | None = typer.Option(
        None, "--log-level", case_sensitive=False, help="Emit log records at this level."
    ),
) -> None:
    """Check prose for complex words, adverbs, qualifiers, passive voice and hard sentences."""
    if log_level is not None:
        logging.basicConfig(level=log_level.value.upper(), format=LOG_FORMAT)


@app.command()
def check(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    word_lists_path: Path | None = typer.Option(
        None,
        "--word-lists",
        "-w",
        exists=True,
        dir_okay=False,
        help="YAML file overriding the packaged word lists.",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.JSON, "--format", "-f", case_sensitive=False
    ),
    keep_trailing: bool | None = typer.Option(
        None,
        "--keep-trailing/--drop-trailing",
        help="Check a final sentence that has no terminating period.",
    ),
    hard_threshold: int | None = typer.Option(
        None, "--hard-threshold", help="Scores above this are hard sentences."
    ),
    very_hard_threshold: int | None = typer.Option(
        None, "--very-hard-threshold", help="Scores above this are very hard sentences."
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with status 1 when any warning is reported."
    ),
) -> None:
    """Check the input files and report style diagnostics."""
    cfg = _load_cli_config(config)
    _apply_overrides(cfg, word_lists_path, keep_trailing, hard_threshold, very_hard_threshold)
    word_lists = _load_cli_word_lists(cfg)
    documents = _load_documents(input_path)

    results = analyze_corpus(documents, cfg, word_lists)
    by_id = {document.doc_id: document for document in documents}

    if output_format is OutputFormat.TEXT:
        for doc_id, diagnostics in sorted(results.items()):
            for diagnostic in diagnostics:
                typer.echo(
                    format_diagnostic(doc_id, diagnostic, by_id[doc_id], cfg.position_encoding)
                )
    else:
        summary = _build_summary(results, by_id, cfg.position_encoding)
        typer.echo(json.dumps({"documents": summary}, indent=2))

    if strict and _has_warnings(results):
        raise typer.Exit(code=1)


@app.command()
def sentences(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    keep_trailing: bool | None = typer.Option(
        None,
        "--keep-trailing/--drop-trailing",
        help="Include a final sentence that has no terminating period.",
    ),
) -> None:
    """Print the sentences the checker sees in a file, as JSON."""
    cfg = _load_cli_config(config)
    _apply_overrides(cfg, None, keep_trailing, None, None)
    document = _document_from_file(input_path, input_path.name)
    segmented = get_sentences(document, keep_trailing=cfg.keep_trailing_sentence)
    payload = {
        "doc_id": document.doc_id,
        "sentences": sentences_payload(segmented, document, cfg.position_encoding),
    }
    typer.echo(json.dumps(payload, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = StyleCheckerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_cli_config(config: Path | None) -> StyleCheckerConfig:
    try:
        return load_config(config)
    except (ValueError, TypeError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _apply_overrides(
    config: StyleCheckerConfig,
    word_lists_path: Path | None,
    keep_trailing: bool | None,
    hard_threshold: int | None,
    very_hard_threshold: int | None,
) -> None:
    """Apply CLI overrides to config fields when provided."""
    if word_lists_path:
        config.word_lists_path = str(word_lists_path)
    if keep_trailing is not None:
        config.keep_trailing_sentence = keep_trailing
    if hard_threshold is not None:
        config.hard_sentence_threshold = hard_threshold
    if very_hard_threshold is not None:
        config.very_hard_sentence_threshold = very_hard_threshold
    try:
        config.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_cli_word_lists(config: StyleCheckerConfig) -> WordLists:
    try:
        return load_word_lists(config.word_lists_path)
    except (OSError, WordListError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--word-lists") from exc


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their path relative to it."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [
        _document_from_file(file, file.relative_to(input_path).as_posix()) for file in files
    ]


def _document_from_file(path: Path, doc_id: str) -> Document:
    """Read a text file from disk and wrap it in a Document."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text: {exc}") from exc
    return Document(doc_id=doc_id, text=text)


def _build_summary(
    results: Dict[str, List[Diagnostic]],
    documents: Dict[str, Document],
    encoding: str,
) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each checked document."""
    summary: List[DocumentSummary] = []
    for doc_id, diagnostics in sorted(results.items()):
        summary.append(
            {
                "doc_id": doc_id,
                "diagnostics": [
                    diagnostic_payload(d, documents[doc_id], encoding) for d in diagnostics
                ],
            }
        )
    return summary


def _has_warnings(results: Dict[str, List[Diagnostic]]) -> bool:
    return any(
        diagnostic.severity is Severity.WARNING
        for diagnostics in results.values()
        for diagnostic in diagnostics
    )


if __name__ == "__main__":
    main()
