import json
from pathlib import Path

from click.testing import CliRunner

from draftwise.report.cli import report_group
from tests.utils import PASSIVE_SAMPLE


def test_report_text_prints_scores(tmp_path: Path):
    path = tmp_path / "essay.txt"
    path.write_text(PASSIVE_SAMPLE, encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(report_group, ["text", str(path)])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert "Words: 10" in lines
    assert "Sentences: 2" in lines
    assert "Read time: 1 min" in lines
    assert "Issues: 2" in lines
    assert "Readability: 100 (Easy)" in lines
    assert "Overall: 90/100 [excellent] Excellent writing quality." in lines
    assert "Dominant tone: Casual" in lines


def test_report_text_short_input(tmp_path: Path):
    path = tmp_path / "short.txt"
    path.write_text("Hi there.", encoding="utf-8")
    result = CliRunner().invoke(report_group, ["text", str(path)])
    assert result.exit_code == 0
    assert "Not enough text to score (need at least 5 words)." in result.output


def test_report_text_writes_json(tmp_path: Path):
    path = tmp_path / "essay.txt"
    path.write_text(PASSIVE_SAMPLE, encoding="utf-8")
    json_path = tmp_path / "out" / "report.json"
    result = CliRunner().invoke(
        report_group, ["text", str(path), "--json-output", str(json_path)]
    )
    assert result.exit_code == 0
    data = json.loads(json_path.read_text(encoding="utf-8"))
    assert data["file"] == str(path)
    assert data["scores"]["overall"] == 90
    assert data["stats"]["sentence_count"] == 2
    assert len(data["issues"]) == 2


def test_report_text_rejects_bad_lexicon(tmp_path: Path):
    path = tmp_path / "essay.txt"
    path.write_text(PASSIVE_SAMPLE, encoding="utf-8")
    lexicon = tmp_path / "lexicon.yaml"
    lexicon.write_text("buzzwords: [synergy]\n", encoding="utf-8")
    result = CliRunner().invoke(
        report_group, ["text", str(path), "--lexicon", str(lexicon)]
    )
    assert result.exit_code != 0
    assert "Could not load lexicon" in result.output
