from draftwise.detectors import (
    detect_issues,
    find_cliches,
    find_complex_words,
    find_filler_phrases,
    find_long_sentences,
    find_passive_voice,
    find_repetition,
    find_weak_words,
)
from draftwise.lexicon import lexicon_from_dict
from draftwise.models import IssueKind
from tests.utils import PASSIVE_SAMPLE, REPETITIVE_SAMPLE


def test_detect_issues_orders_by_position():
    """Passive voice and weak words are merged and sorted by offset."""
    issues = detect_issues(PASSIVE_SAMPLE)
    assert [(i.category, i.matched_text, i.position) for i in issues] == [
        ("Passive Voice", "was thrown", 9),
        ("Weak Word", "very", 35),
    ]
    assert issues[0].kind is IssueKind.CLARITY
    assert issues[1].kind is IssueKind.STYLE


def test_passive_voice_matches_regular_participles():
    issues = find_passive_voice("The report Was Completed yesterday.")
    assert [issue.matched_text for issue in issues] == ["Was Completed"]


def test_weak_words_are_case_insensitive_whole_words():
    issues = find_weak_words("Very good, but justice is not just luck.")
    assert [issue.matched_text for issue in issues] == ["Very", "just"]


def test_filler_and_complex_words_messages():
    filler = find_filler_phrases("In order to ship, we test.")
    assert filler[0].matched_text == "In order to"
    assert filler[0].position == 0

    complex_words = find_complex_words("Please utilize the form.")
    assert len(complex_words) == 1
    assert '"use"' in complex_words[0].message


def test_cliches_flagged_as_style():
    issues = find_cliches("We must think outside the box and leverage synergy.")
    assert {issue.matched_text for issue in issues} == {
        "think outside the box",
        "leverage",
        "synergy",
    }
    assert all(issue.kind is IssueKind.STYLE for issue in issues)


def test_long_sentence_excerpt_and_position():
    long_sentence = " ".join(f"item{i}" for i in range(40)) + "."
    text = "Short start. " + long_sentence
    issues = find_long_sentences(text)
    assert len(issues) == 1
    issue = issues[0]
    assert issue.position == text.find(long_sentence)
    assert issue.matched_text == long_sentence[:60] + "..."
    assert "40 words" in issue.message


def test_thirty_word_sentence_is_not_long():
    sentence = " ".join(["word"] * 30) + "."
    assert find_long_sentences(sentence) == []


def test_repetition_requires_more_than_twenty_words():
    issues = find_repetition(REPETITIVE_SAMPLE)
    assert len(issues) == 1
    assert issues[0].matched_text == "system"
    assert "4 times" in issues[0].message
    assert issues[0].position == 0

    assert find_repetition("system system system system system") == []


def test_detectors_use_supplied_lexicon():
    lexicon = lexicon_from_dict({"weak_words": ["kinda"]})
    issues = find_weak_words("It is kinda very odd.", lexicon)
    assert [issue.matched_text for issue in issues] == ["kinda"]


def test_detect_issues_on_empty_text():
    assert detect_issues("") == []
