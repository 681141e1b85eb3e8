from __future__ import annotations

import math
import re

MULTI_SPACE_RE = re.compile(r"\s{2,}")


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def capitalize_first(text: str) -> str:
    """Upper-case the first character and leave the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def match_case(original: str, replacement: str) -> str:
    """Carry a leading capital from ``original`` over to ``replacement``."""
    if original[:1].isupper():
        return capitalize_first(replacement)
    return replacement


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim the ends."""
    return MULTI_SPACE_RE.sub(" ", text).strip()
