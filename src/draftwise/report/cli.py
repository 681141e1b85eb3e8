from __future__ import annotations

import json
from pathlib import Path

import click
import yaml

from ..lexicon import load_lexicon
from ..pipeline import analyze
from ..readability import compute_text_stats, reading_level
from ..scoring import score_band, score_verdict
from ..tone import dominant_tone


@click.group(name="report")
def report_group() -> None:
    """Readable writing-quality reports."""


@report_group.command("text")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json-output", type=click.Path(), default=None)
@click.option(
    "--lexicon",
    "lexicon_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file overriding built-in lexicon tables.",
)
def report_text(
    input_file: str, json_output: str | None, lexicon_path: str | None
) -> None:
    """Print statistics, scores, and tone for a text file."""
    path = Path(input_file)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise click.ClickException(f"{input_file} is not UTF-8 text.") from exc
    try:
        lexicon = load_lexicon(lexicon_path)
    except (ValueError, yaml.YAMLError) as exc:
        raise click.ClickException(f"Could not load lexicon: {exc}") from exc

    result = analyze(text, lexicon, include_stats=False)
    stats = compute_text_stats(text)

    click.echo(f"File: {input_file}")
    click.echo(f"Words: {stats.word_count}")
    click.echo(f"Sentences: {stats.sentence_count}")
    click.echo(f"Read time: {stats.read_minutes} min")
    click.echo(f"Issues: {len(result.issues)}")

    if result.scores is None:
        click.echo("Not enough text to score (need at least 5 words).")
    else:
        scores = result.scores
        click.echo(
            f"Readability: {scores.readability} ({reading_level(scores.readability)})"
        )
        click.echo(f"Clarity: {scores.clarity}")
        click.echo(f"Engagement: {scores.engagement}")
        click.echo(f"Grammar: {scores.grammar}")
        click.echo(
            f"Overall: {scores.overall}/100 [{score_band(scores.overall)}] "
            f"{score_verdict(scores.overall)}"
        )
        tone = dominant_tone(result.tone)
        click.echo(f"Dominant tone: {tone or 'none detected'}")

    if json_output is not None:
        payload = {"file": str(path), **result.to_dict(), "stats": stats.to_dict()}
        json_path = Path(json_output)
        json_path.parent.mkdir(parents=True, exist_ok=True)
        json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        click.echo(f"Wrote detailed JSON to {json_output}")
