from pathlib import Path

import pytest

from draftwise.lexicon import (
    DEFAULT_LEXICON,
    TONE_CATEGORIES,
    lexicon_from_dict,
    load_lexicon,
)


def test_default_lexicon_tables():
    """Built-in tables carry the documented entries."""
    assert "very" in DEFAULT_LEXICON.weak_words
    assert "in order to" in DEFAULT_LEXICON.filler_phrases
    assert ("utilize", "use") in DEFAULT_LEXICON.complex_words
    assert ("teh", "the") in DEFAULT_LEXICON.typos
    assert "the" in DEFAULT_LEXICON.stop_words
    assert tuple(DEFAULT_LEXICON.tone_table()) == TONE_CATEGORIES


def test_load_lexicon_without_path_returns_defaults():
    assert load_lexicon() is DEFAULT_LEXICON


def test_load_lexicon_overrides_tables_from_yaml(tmp_path: Path):
    """YAML overrides replace only the tables they name."""
    path = tmp_path / "lexicon.yaml"
    path.write_text(
        "weak_words: [kinda, sorta]\n"
        "complex_words:\n  utilise: use\n"
        "tone_words:\n  Urgent: [pronto]\n",
        encoding="utf-8",
    )
    lexicon = load_lexicon(path)
    assert lexicon.weak_words == ("kinda", "sorta")
    assert lexicon.complex_words == (("utilise", "use"),)
    table = lexicon.tone_table()
    assert table["Urgent"] == ("pronto",)
    assert table["Formal"] == DEFAULT_LEXICON.tone_table()["Formal"]
    assert lexicon.filler_phrases == DEFAULT_LEXICON.filler_phrases


def test_lexicon_from_dict_rejects_unknown_tables():
    with pytest.raises(ValueError, match="Unknown lexicon tables"):
        lexicon_from_dict({"buzzwords": ["synergy"]})


def test_lexicon_from_dict_rejects_unknown_tone_category():
    with pytest.raises(ValueError, match="Unknown tone categories"):
        lexicon_from_dict({"tone_words": {"Sarcastic": ["sure"]}})


def test_lexicon_from_dict_requires_lists_for_word_tables():
    with pytest.raises(ValueError):
        lexicon_from_dict({"weak_words": "very"})


def test_load_lexicon_rejects_non_mapping(tmp_path: Path):
    path = tmp_path / "lexicon.yaml"
    path.write_text("- very\n- really\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_lexicon(path)
