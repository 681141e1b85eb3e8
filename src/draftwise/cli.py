from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, TypedDict

import typer
import yaml

from .config import DraftwiseConfig, load_config
from .lexicon import Lexicon
from .models import AnalysisResult, Document, ScoreBundle
from .pipeline import analyze_corpus
from .readability import reading_level
from .rewriting import RewriteTool, transform as run_transform
from .scoring import score_band, score_verdict
from .tone import dominant_tone

app = typer.Typer(help="DraftWise writing analysis CLI.", no_args_is_help=True)

logger = logging.getLogger(__name__)

# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md"}


class SummaryPayload(TypedDict):
    band: str
    verdict: str
    reading_level: str
    dominant_tone: str | None


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Emit debug logging on stderr."
    ),
) -> None:
    """Analyze prose and generate alternative phrasings."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s [%(name)s] %(message)s",
    )


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    stats: bool | None = typer.Option(
        None, "--stats/--no-stats", help="Override config include_stats flag."
    ),
) -> None:
    """Analyze one file or a directory of files and emit a JSON report."""
    cfg = _load_config_or_fail(config)
    if stats is not None:
        cfg.include_stats = stats
    lexicon = _load_lexicon_or_fail(cfg)
    documents = _load_documents(input_path)
    logger.info("Loaded %d document(s) from %s", len(documents), input_path)
    results = analyze_corpus(documents, lexicon, include_stats=cfg.include_stats)
    typer.echo(
        json.dumps({"documents": _build_summary(results)}, indent=cfg.json_indent)
    )


@app.command()
def transform(
    tool: str = typer.Argument(
        ...,
        help="One of rewrite, expand, shorten, grammar_fix, simplify, headlines.",
    ),
    input_path: Path | None = typer.Option(
        None, exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    text: str | None = typer.Option(None, "--text", "-t", help="Inline text to transform."),
    tone: str | None = typer.Option(None, "--tone", help="Rewrite tone override."),
    seed: int | None = typer.Option(
        None, "--seed", help="Seed for the rewrite starter choice."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Run a single rewrite tool and emit the alternatives as JSON."""
    cfg = _load_config_or_fail(config)
    if tone is not None:
        cfg.rewrite.tone = tone
    if seed is not None:
        cfg.rewrite.seed = seed
    try:
        resolved = RewriteTool.parse(tool)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="TOOL") from exc

    if text is not None:
        source = text
    elif input_path is not None:
        source = _read_text(input_path)
    else:
        raise typer.BadParameter("Provide --input-path or --text.")

    results = run_transform(
        resolved,
        source,
        tone=cfg.rewrite.tone,
        random_source=cfg.rewrite.random_source(),
        lexicon=_load_lexicon_or_fail(cfg),
    )
    payload = {"tool": resolved.value, "results": [r.to_dict() for r in results]}
    typer.echo(json.dumps(payload, indent=cfg.json_indent, ensure_ascii=False))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = DraftwiseConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_config_or_fail(path: Path | None) -> DraftwiseConfig:
    try:
        return load_config(path)
    except (ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _load_lexicon_or_fail(cfg: DraftwiseConfig) -> Lexicon:
    try:
        return cfg.load_lexicon()
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Could not load lexicon: {exc}") from exc


def _load_documents(input_path: Path) -> List[Document]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return [Document(doc_id=input_path.name, text=_read_text(input_path))]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [
        Document(doc_id=str(file.relative_to(input_path)), text=_read_text(file))
        for file in files
    ]


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not UTF-8 text.") from exc


def _build_summary(results: Dict[str, AnalysisResult]) -> List[Dict[str, Any]]:
    """Create a JSON-serializable entry for each analyzed document."""
    summary: List[Dict[str, Any]] = []
    for doc_id, result in sorted(results.items()):
        entry: Dict[str, Any] = {"doc_id": doc_id, **result.to_dict()}
        if result.scores is not None:
            entry["summary"] = _summary_payload(result.scores, result.tone)
        summary.append(entry)
    return summary


def _summary_payload(
    scores: ScoreBundle, tone: Dict[str, int] | None
) -> SummaryPayload:
    return {
        "band": score_band(scores.overall),
        "verdict": score_verdict(scores.overall),
        "reading_level": reading_level(scores.readability),
        "dominant_tone": dominant_tone(tone),
    }


if __name__ == "__main__":
    main()
