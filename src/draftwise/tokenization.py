from __future__ import annotations

import re
from typing import List

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")
NON_LETTER_RE = re.compile(r"[^a-z]")
SILENT_SUFFIX_RE = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
LEADING_Y_RE = re.compile(r"^y")
VOWEL_RUN_RE = re.compile(r"[aeiouy]{1,2}")


def words(text: str) -> List[str]:
    """Split text into whitespace-delimited words."""
    trimmed = text.strip()
    if not trimmed:
        return []
    return [word for word in trimmed.split() if word]


def sentences(text: str) -> List[str]:
    """Split text on runs of sentence-ending punctuation, dropping blanks."""
    trimmed = text.strip()
    if not trimmed:
        return []
    return [part.strip() for part in SENTENCE_SPLIT_RE.split(trimmed) if part.strip()]


def split_sentences_keep_punct(text: str) -> List[str]:
    """
    Split text after sentence-ending punctuation followed by whitespace.

    Unlike :func:`sentences`, each piece keeps its terminal punctuation and is
    an exact substring of ``text``.
    """
    return SENTENCE_BOUNDARY_RE.split(text)


def syllables(word: str) -> int:
    """Estimate the syllable count of a single word (never less than 1)."""
    letters = NON_LETTER_RE.sub("", word.lower())
    if len(letters) <= 3:
        return 1
    letters = SILENT_SUFFIX_RE.sub("", letters, count=1)
    letters = LEADING_Y_RE.sub("", letters, count=1)
    runs = VOWEL_RUN_RE.findall(letters)
    return len(runs) if runs else 1
