"""
Lexicon- and pattern-driven issue detection.

Each detector is a pure function of ``(text, lexicon)`` returning a list of
:class:`~draftwise.models.Issue`. :func:`detect_issues` runs all of them and
returns one list ordered by position.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from functools import lru_cache
from typing import Callable, List, Pattern, Tuple

from .lexicon import DEFAULT_LEXICON, Lexicon
from .models import Issue, IssueKind
from .tokenization import split_sentences_keep_punct, words

logger = logging.getLogger(__name__)

LONG_SENTENCE_WORDS = 30
LONG_SENTENCE_EXCERPT_CHARS = 60
REPETITION_MIN_COUNT = 4
REPETITION_MIN_DOC_WORDS = 20
REPETITION_MIN_WORD_LEN = 3

Detector = Callable[[str, Lexicon], List[Issue]]


@lru_cache(maxsize=None)
def phrase_pattern(phrase: str, trailing_space: bool = False) -> Pattern[str]:
    """Case-insensitive whole-word pattern for a literal word or phrase."""
    suffix = r"\b\s*" if trailing_space else r"\b"
    return re.compile(r"\b" + re.escape(phrase) + suffix, re.IGNORECASE)


@lru_cache(maxsize=None)
def passive_pattern(
    auxiliaries: Tuple[str, ...], participles: Tuple[str, ...]
) -> Pattern[str]:
    """Auxiliary verb followed by a regular ``-ed`` or listed irregular participle."""
    aux = "|".join(re.escape(word) for word in auxiliaries)
    part = "|".join([r"\w+ed"] + [re.escape(word) for word in participles])
    return re.compile(rf"\b({aux})\s+({part})\b", re.IGNORECASE)


def find_passive_voice(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> List[Issue]:
    pattern = passive_pattern(lexicon.passive_auxiliaries, lexicon.irregular_participles)
    return [
        Issue(
            kind=IssueKind.CLARITY,
            category="Passive Voice",
            matched_text=m.group(0),
            message=(
                f'Consider using active voice instead of "{m.group(0)}" '
                "for more direct, engaging writing."
            ),
            position=m.start(),
        )
        for m in pattern.finditer(text)
    ]


def find_weak_words(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> List[Issue]:
    issues: List[Issue] = []
    for word in lexicon.weak_words:
        for m in phrase_pattern(word).finditer(text):
            issues.append(
                Issue(
                    kind=IssueKind.STYLE,
                    category="Weak Word",
                    matched_text=m.group(0),
                    message=(
                        f'"{m.group(0)}" weakens your statement. Try removing it '
                        "or using a stronger alternative."
                    ),
                    position=m.start(),
                )
            )
    return issues


def find_filler_phrases(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> List[Issue]:
    issues: List[Issue] = []
    for phrase in lexicon.filler_phrases:
        for m in phrase_pattern(phrase).finditer(text):
            issues.append(
                Issue(
                    kind=IssueKind.CLARITY,
                    category="Filler Phrase",
                    matched_text=m.group(0),
                    message=f'"{m.group(0)}" can likely be simplified or removed for conciseness.',
                    position=m.start(),
                )
            )
    return issues


def find_cliches(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> List[Issue]:
    issues: List[Issue] = []
    for phrase in lexicon.cliche_phrases:
        for m in phrase_pattern(phrase).finditer(text):
            issues.append(
                Issue(
                    kind=IssueKind.STYLE,
                    category="Cliche",
                    matched_text=m.group(0),
                    message=f'"{m.group(0)}" is a cliche. Consider replacing with more original language.',
                    position=m.start(),
                )
            )
    return issues


def find_complex_words(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> List[Issue]:
    issues: List[Issue] = []
    for complex_word, simple in lexicon.complex_words:
        for m in phrase_pattern(complex_word).finditer(text):
            issues.append(
                Issue(
                    kind=IssueKind.CLARITY,
                    category="Complex Word",
                    matched_text=m.group(0),
                    message=(
                        f'"{m.group(0)}" could be simplified to "{simple}" '
                        "for clearer communication."
                    ),
                    position=m.start(),
                )
            )
    return issues


def find_long_sentences(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> List[Issue]:
    issues: List[Issue] = []
    for sentence in split_sentences_keep_punct(text):
        word_count = len(words(sentence))
        if word_count <= LONG_SENTENCE_WORDS:
            continue
        issues.append(
            Issue(
                kind=IssueKind.CLARITY,
                category="Long Sentence",
                matched_text=sentence[:LONG_SENTENCE_EXCERPT_CHARS] + "...",
                message=(
                    f"This sentence has {word_count} words. Consider breaking it "
                    "into shorter sentences for better readability."
                ),
                # First occurrence, so repeated sentences share an offset.
                position=text.find(sentence),
            )
        )
    return issues


def find_repetition(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> List[Issue]:
    tokens = words(text.lower())
    if len(tokens) <= REPETITION_MIN_DOC_WORDS:
        return []
    counts = Counter(
        token
        for token in tokens
        if len(token) > REPETITION_MIN_WORD_LEN and token not in lexicon.stop_words
    )
    return [
        Issue(
            kind=IssueKind.STYLE,
            category="Word Repetition",
            matched_text=word,
            message=f'"{word}" appears {count} times. Consider using synonyms for variety.',
            position=0,
        )
        for word, count in counts.items()
        if count >= REPETITION_MIN_COUNT
    ]


DETECTORS: Tuple[Detector, ...] = (
    find_passive_voice,
    find_weak_words,
    find_filler_phrases,
    find_cliches,
    find_complex_words,
    find_long_sentences,
    find_repetition,
)


def detect_issues(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> List[Issue]:
    """Run every detector and return the merged issues sorted by position."""
    issues: List[Issue] = []
    for detector in DETECTORS:
        found = detector(text, lexicon)
        logger.debug("%s flagged %d issue(s)", detector.__name__, len(found))
        issues.extend(found)
    # sorted() is stable, so ties keep detector emission order.
    return sorted(issues, key=lambda issue: issue.position)
