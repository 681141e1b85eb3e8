from __future__ import annotations

import re
from typing import Dict

from .lexicon import DEFAULT_LEXICON, TONE_CATEGORIES, Lexicon
from .textutils import round_half_up
from .tokenization import sentences, words

MIN_TONE_WORDS = 5
LEXICON_HIT_POINTS = 2

REPEATED_EXCLAMATION_RE = re.compile(r"!{2,}")


def tone_points(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> Dict[str, int]:
    """Raw accumulator values per tone category."""
    tones = {category: 0 for category in TONE_CATEGORIES}
    table = {category: frozenset(entries) for category, entries in lexicon.tone_words}
    word_list = words(text.lower())

    for word in word_list:
        for category, entries in table.items():
            if word in entries:
                tones[category] += LEXICON_HIT_POINTS

    if REPEATED_EXCLAMATION_RE.search(text):
        tones["Casual"] += 3
        tones["Urgent"] += 2
    if "?" in text:
        tones["Friendly"] += 1
        tones["Analytical"] += 1
    if text.count(".") > 5:
        tones["Formal"] += 2

    avg_len = len(word_list) / max(1, len(sentences(text)))
    if avg_len > 20:
        tones["Formal"] += 3
    if avg_len < 10:
        tones["Casual"] += 2
    return tones


def classify_tone(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> Dict[str, int] | None:
    """
    Percentage distribution over the six tone categories.

    Percentages are rounded independently and may not sum to exactly 100.
    Returns None for texts shorter than MIN_TONE_WORDS words.
    """
    if len(words(text)) < MIN_TONE_WORDS:
        return None
    tones = tone_points(text, lexicon)
    total = sum(tones.values()) or 1
    return {category: round_half_up(value / total * 100) for category, value in tones.items()}


def dominant_tone(distribution: Dict[str, int] | None) -> str | None:
    """Highest-scoring category; ties go to the earlier category."""
    if not distribution:
        return None
    best = max(TONE_CATEGORIES, key=lambda category: distribution.get(category, 0))
    if distribution.get(best, 0) <= 0:
        return None
    return best
