from __future__ import annotations

import math

from .models import TextStats
from .textutils import round_half_up
from .tokenization import sentences, syllables, words

FLESCH_BASE = 206.835
FLESCH_SENTENCE_WEIGHT = 1.015
FLESCH_SYLLABLE_WEIGHT = 84.6

WORDS_PER_MINUTE = 225


def flesch_reading_ease(text: str) -> int:
    """
    Flesch Reading Ease for ``text``, rounded and clamped to [0, 100].

    Returns 0 when the text has no words or no sentences.
    """
    word_list = words(text)
    sentence_list = sentences(text)
    if not word_list or not sentence_list:
        return 0

    total_syllables = sum(syllables(word) for word in word_list)
    avg_words_per_sentence = len(word_list) / len(sentence_list)
    avg_syllables_per_word = total_syllables / len(word_list)

    score = (
        FLESCH_BASE
        - FLESCH_SENTENCE_WEIGHT * avg_words_per_sentence
        - FLESCH_SYLLABLE_WEIGHT * avg_syllables_per_word
    )
    return max(0, min(100, round_half_up(score)))


def reading_level(readability: int) -> str:
    """Map a readability score onto an Easy/Medium/Hard label."""
    if readability >= 70:
        return "Easy"
    if readability >= 50:
        return "Medium"
    return "Hard"


def compute_text_stats(text: str) -> TextStats:
    """Word, character, and sentence counts plus estimated reading time."""
    word_count = len(words(text))
    read_minutes = max(1, math.ceil(word_count / WORDS_PER_MINUTE)) if word_count else 0
    return TextStats(
        word_count=word_count,
        char_count=len(text),
        sentence_count=len(sentences(text)),
        read_minutes=read_minutes,
    )
