from draftwise import analyze, analyze_corpus
from draftwise.models import Document
from tests.utils import PASSIVE_SAMPLE, REPETITIVE_SAMPLE


def test_analyze_returns_issues_scores_tone_and_stats():
    result = analyze(PASSIVE_SAMPLE)
    assert [issue.category for issue in result.issues] == ["Passive Voice", "Weak Word"]
    assert result.scores is not None
    assert result.scores.overall == 90
    assert result.tone is not None
    assert result.tone["Casual"] == 100
    assert result.stats is not None
    assert result.stats.word_count == 10


def test_analyze_short_text_has_no_scores_or_tone():
    result = analyze("Too short here", include_stats=False)
    assert result.scores is None
    assert result.tone is None
    assert result.stats is None
    payload = result.to_dict()
    assert payload["scores"] is None
    assert "stats" not in payload


def test_analyze_is_deterministic():
    assert analyze(REPETITIVE_SAMPLE) == analyze(REPETITIVE_SAMPLE)


def test_analysis_to_dict_is_json_ready():
    payload = analyze(PASSIVE_SAMPLE).to_dict()
    assert payload["issues"][0] == {
        "kind": "clarity",
        "category": "Passive Voice",
        "matched_text": "was thrown",
        "message": (
            'Consider using active voice instead of "was thrown" '
            "for more direct, engaging writing."
        ),
        "position": 9,
    }
    assert payload["scores"]["clarity"] == 95
    assert payload["stats"]["read_minutes"] == 1


def test_analyze_corpus_keys_results_by_doc_id():
    documents = [
        Document(doc_id="a.txt", text=PASSIVE_SAMPLE),
        Document(doc_id="b.txt", text="Tiny."),
    ]
    results = analyze_corpus(documents)
    assert set(results) == {"a.txt", "b.txt"}
    assert results["a.txt"].scores is not None
    assert results["b.txt"].scores is None


def test_analyze_empty_text():
    """Empty input degrades to no issues, no scores, and no tone."""
    result = analyze("")
    assert result.issues == []
    assert result.scores is None
    assert result.tone is None
    assert result.stats is not None
    assert result.stats.read_minutes == 0
