from draftwise.tokenization import (
    sentences,
    split_sentences_keep_punct,
    syllables,
    words,
)


def test_words_splits_on_whitespace_and_keeps_punctuation():
    assert words("  Hello,   world!\nBye. ") == ["Hello,", "world!", "Bye."]
    assert words("   ") == []


def test_sentences_drop_blank_pieces_and_trim():
    assert sentences("Wait... what?! Yes") == ["Wait", "what", "Yes"]
    assert sentences("") == []


def test_split_sentences_keep_punct_returns_substrings():
    text = "One. Two!  Three"
    pieces = split_sentences_keep_punct(text)
    assert pieces == ["One.", "Two!", "Three"]
    assert all(piece in text for piece in pieces)


def test_syllable_heuristic():
    assert syllables("the") == 1
    assert syllables("happy.") == 2
    assert syllables("very") == 2
    assert syllables("table") == 2
    assert syllables("make") == 1
    assert syllables("yellow") == 2
    assert syllables("123") == 1
