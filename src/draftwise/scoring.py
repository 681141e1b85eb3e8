from __future__ import annotations

import logging
import re

from .detectors import (
    find_cliches,
    find_complex_words,
    find_filler_phrases,
    find_long_sentences,
    find_passive_voice,
    find_repetition,
    find_weak_words,
)
from .lexicon import DEFAULT_LEXICON, Lexicon
from .models import ScoreBundle
from .readability import flesch_reading_ease
from .textutils import round_half_up
from .tokenization import sentences, words

logger = logging.getLogger(__name__)

MIN_SCORED_WORDS = 5

DOUBLE_SPACE_RE = re.compile(r"  +")
MISSING_CAPITAL_RE = re.compile(r"[.!?]\s+[a-z]")

WEIGHT_READABILITY = 0.25
WEIGHT_CLARITY = 0.30
WEIGHT_ENGAGEMENT = 0.20
WEIGHT_GRAMMAR = 0.25


def clarity_score(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    """100 minus a capped penalty for passive voice, filler, jargon, and long sentences."""
    penalty = min(
        50,
        5 * len(find_passive_voice(text, lexicon))
        + 4 * len(find_filler_phrases(text, lexicon))
        + 3 * len(find_complex_words(text, lexicon))
        + 6 * len(find_long_sentences(text, lexicon)),
    )
    return max(10, 100 - penalty)


def engagement_score(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> int:
    """Reward varied sentence length and questions; penalize weak words, cliches, repetition."""
    lengths = [len(words(sentence)) for sentence in sentences(text)]
    varied = len(lengths) > 2 and len({length // 5 for length in lengths}) >= 2

    engagement = 60
    if varied:
        engagement += 15
    if "?" in text:
        engagement += 10
    engagement -= min(
        30,
        2 * len(find_weak_words(text, lexicon))
        + 4 * len(find_cliches(text, lexicon))
        + 3 * len(find_repetition(text, lexicon)),
    )
    return max(10, min(100, engagement))


def grammar_score(text: str) -> int:
    """Penalize runs of double spaces and lowercase sentence starts."""
    double_spaces = len(DOUBLE_SPACE_RE.findall(text))
    missing_capitals = len(MISSING_CAPITAL_RE.findall(text))
    return max(20, 100 - min(40, 3 * double_spaces + 5 * missing_capitals))


def overall_score(readability: int, clarity: int, engagement: int, grammar: int) -> int:
    return round_half_up(
        readability * WEIGHT_READABILITY
        + clarity * WEIGHT_CLARITY
        + engagement * WEIGHT_ENGAGEMENT
        + grammar * WEIGHT_GRAMMAR
    )


def composite_scores(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> ScoreBundle | None:
    """Compute the composite score bundle, or None below MIN_SCORED_WORDS words."""
    if len(words(text)) < MIN_SCORED_WORDS:
        return None

    readability = flesch_reading_ease(text)
    clarity = clarity_score(text, lexicon)
    engagement = engagement_score(text, lexicon)
    grammar = grammar_score(text)
    overall = overall_score(readability, clarity, engagement, grammar)
    logger.debug(
        "Scores overall=%d readability=%d clarity=%d engagement=%d grammar=%d",
        overall,
        readability,
        clarity,
        engagement,
        grammar,
    )
    return ScoreBundle(
        overall=overall,
        readability=readability,
        clarity=clarity,
        engagement=engagement,
        grammar=grammar,
    )


def score_band(overall: int) -> str:
    """Coarse quality band for an overall score."""
    if overall >= 80:
        return "excellent"
    if overall >= 60:
        return "good"
    if overall >= 40:
        return "fair"
    return "poor"


def score_verdict(overall: int) -> str:
    if overall >= 80:
        return "Excellent writing quality."
    if overall >= 60:
        return "Good foundation with room for improvement."
    return "Several areas could be strengthened."
