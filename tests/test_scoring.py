from draftwise.scoring import (
    clarity_score,
    composite_scores,
    engagement_score,
    grammar_score,
    overall_score,
    score_band,
    score_verdict,
)
from tests.utils import PASSIVE_SAMPLE


def test_composite_scores_for_sample():
    """Every sub-score and the weighted overall for a short passive sample."""
    scores = composite_scores(PASSIVE_SAMPLE)
    assert scores is not None
    assert scores.readability == 100
    assert scores.clarity == 95
    assert scores.engagement == 58
    assert scores.grammar == 100
    assert scores.overall == 90


def test_composite_scores_need_five_words():
    assert composite_scores("Too short to score") is None
    assert composite_scores("") is None


def test_clarity_penalizes_long_sentences():
    text = " ".join(f"item{i}" for i in range(40)) + "."
    assert clarity_score(text) == 94


def test_clarity_penalty_is_capped():
    text = " ".join(["It was done in order to utilize it."] * 20)
    assert clarity_score(text) == 50


def test_engagement_rewards_variety_and_questions():
    text = "Why does this matter? Short one. This sentence is a good deal longer than the others here."
    assert engagement_score(text) == 85


def test_grammar_counts_double_spaces_and_missing_capitals():
    assert grammar_score("this is fine.  it works well today") == 92
    assert grammar_score("Clean text. Nothing wrong here.") == 100


def test_grammar_penalty_is_capped():
    text = ". a" * 20
    assert grammar_score(text) == 60


def test_overall_score_weights_and_rounding():
    assert overall_score(100, 100, 50, 100) == 90
    assert overall_score(2, 0, 0, 0) == 1
    assert overall_score(10, 0, 0, 0) == 3


def test_score_band_and_verdict():
    assert score_band(80) == "excellent"
    assert score_band(79) == "good"
    assert score_band(40) == "fair"
    assert score_band(39) == "poor"
    assert score_verdict(85) == "Excellent writing quality."
    assert score_verdict(60) == "Good foundation with room for improvement."
    assert score_verdict(10) == "Several areas could be strengthened."
