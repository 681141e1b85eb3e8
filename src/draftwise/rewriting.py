"""
Template-driven text transformations.

Every generator takes the selected (or full) text and returns at least one
:class:`~draftwise.models.TransformResult`. Only :func:`rewrite` uses
randomness, and it draws from an injectable ``random_source``.
"""

from __future__ import annotations

import logging
import math
import random
import re
from enum import Enum
from typing import Callable, Dict, List, Tuple

from .detectors import phrase_pattern
from .lexicon import DEFAULT_LEXICON, Lexicon
from .models import TransformResult
from .textutils import capitalize_first, collapse_whitespace, match_case, round_half_up
from .tokenization import sentences, words

logger = logging.getLogger(__name__)

RandomSource = Callable[[], float]

DEFAULT_TONE = "professional"

DOUBLE_SPACE_RE = re.compile(r"  +")
LOWERCASE_AFTER_END_RE = re.compile(r"([.!?])\s+([a-z])")
TERMINAL_PUNCT_RE = re.compile(r"[.!?]$")
LEADING_CAPITAL_RE = re.compile(r"^[A-Z]")
LEADING_LOWER_RE = re.compile(r"^[a-z]")

SHORTEN_RATIO = 0.95
MIN_STREAMLINED_CHARS = 10
HEADLINE_MIN_WORD_LEN = 4
HEADLINE_MAX_KEYWORDS = 5
HEADLINE_TOPIC_WORDS = 3


class RewriteTool(str, Enum):
    REWRITE = "rewrite"
    EXPAND = "expand"
    SHORTEN = "shorten"
    GRAMMAR_FIX = "grammar_fix"
    SIMPLIFY = "simplify"
    HEADLINES = "headlines"

    @classmethod
    def parse(cls, name: "str | RewriteTool") -> "RewriteTool":
        """Resolve a tool from its name; accepts ``grammar-fix`` and ``grammarFix``."""
        if isinstance(name, RewriteTool):
            return name
        normalized = re.sub(r"(?<=[a-z])(?=[A-Z])", "_", name.strip())
        normalized = normalized.lower().replace("-", "_")
        if normalized == "grammar":
            normalized = cls.GRAMMAR_FIX.value
        for tool in cls:
            if tool.value == normalized:
                return tool
        raise ValueError(f"Unknown rewrite tool '{name}'.")


TONE_STARTERS: Dict[str, Tuple[str, ...]] = {
    "professional": (
        "Furthermore,",
        "Additionally,",
        "It is worth noting that",
        "In this context,",
    ),
    "casual": ("So basically,", "Here's the thing:", "Look,", "The way I see it,"),
    "academic": (
        "Research indicates that",
        "It can be observed that",
        "Evidence suggests that",
        "From this perspective,",
    ),
    "creative": (
        "Picture this:",
        "Imagine",
        "What if",
        "There's something remarkable about",
    ),
    "persuasive": (
        "Consider this:",
        "The evidence is clear:",
        "Without question,",
        "It's time to recognize that",
    ),
}

EXPANSION_TEMPLATES: Tuple[Tuple[str, str], ...] = (
    (
        "This is particularly significant because it highlights the key aspects "
        "that merit further consideration. Understanding these elements provides "
        "valuable context for making informed decisions.",
        "Added supporting context",
    ),
    (
        "For example, this can be seen in practice when organizations apply these "
        "principles to their everyday operations. The results consistently "
        "demonstrate measurable improvements across multiple dimensions.",
        "Added examples and evidence",
    ),
    (
        "When we examine this more closely, several important factors emerge. "
        "First, the underlying dynamics reveal patterns that inform our "
        "understanding. Second, the broader implications extend well beyond the "
        "immediate context, suggesting opportunities for further exploration.",
        "Added deeper analysis",
    ),
)

HEADLINE_TEMPLATES: Tuple[Tuple[str, str], ...] = (
    ("How to {topic} Effectively", "How-to format"),
    ("The Complete Guide to {topic}", "Guide format"),
    ("Why {topic} Matters More Than Ever", "Thought leadership"),
    ("{count} Things You Need to Know About {topic}", "Listicle format"),
    ("{topic}: A Modern Approach", "Clean & direct"),
    ("Rethinking {topic} for Better Results", "Action-oriented"),
)


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def _strip_filler(text: str, lexicon: Lexicon, *, filler_trailing_space: bool) -> str:
    stripped = text
    for phrase in lexicon.filler_phrases:
        stripped = phrase_pattern(phrase, filler_trailing_space).sub("", stripped)
    for word in lexicon.weak_words:
        stripped = phrase_pattern(word, True).sub("", stripped)
    return collapse_whitespace(stripped)


def _join_sentences(parts: List[str]) -> str:
    joined = ". ".join(parts).strip()
    return joined if joined.endswith(".") else joined + "."


def rewrite(
    text: str,
    *,
    tone: str | None = None,
    random_source: RandomSource | None = None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> List[TransformResult]:
    """Tone-starter rewrite, a streamlined variant, and a reordered variant."""
    tone_name = (tone or DEFAULT_TONE).lower().strip()
    if tone_name not in TONE_STARTERS:
        logger.debug("Unknown tone %r; falling back to %s", tone, DEFAULT_TONE)
        tone_name = DEFAULT_TONE
    starters = TONE_STARTERS[tone_name]
    draw = random_source or random.random
    index = min(len(starters) - 1, int(draw() * len(starters)))
    starter = starters[index]

    results: List[TransformResult] = []
    clean = LEADING_CAPITAL_RE.sub(lambda m: m.group(0).lower(), text.lstrip(), count=1)
    results.append(
        TransformResult(text=f"{starter} {clean}", label=f"{capitalize_first(tone_name)} tone")
    )

    concise = _strip_filler(text, lexicon, filler_trailing_space=False)
    if concise != text and len(concise) > MIN_STREAMLINED_CHARS:
        results.append(
            TransformResult(
                text=capitalize_first(concise), label="Streamlined: filler removed"
            )
        )

    sentence_list = sentences(text)
    if len(sentence_list) > 1:
        results.append(
            TransformResult(
                text=_join_sentences(list(reversed(sentence_list))),
                label="Restructured flow",
            )
        )

    return results


def expand(text: str, **_: object) -> List[TransformResult]:
    """Append each fixed continuation to the unmodified text."""
    return [
        TransformResult(text=f"{text} {continuation}", label=label)
        for continuation, label in EXPANSION_TEMPLATES
    ]


def shorten(
    text: str, *, lexicon: Lexicon = DEFAULT_LEXICON, **_: object
) -> List[TransformResult]:
    """Filler-free, first-and-last-sentence, and first-half variants."""
    results: List[TransformResult] = []
    word_count = len(words(text))
    sentence_list = sentences(text)

    trimmed = capitalize_first(_strip_filler(text, lexicon, filler_trailing_space=True))
    if len(trimmed) < len(text) * SHORTEN_RATIO:
        remaining = max(1, len(trimmed.split()))
        percent = round_half_up((1 - remaining / max(1, word_count)) * 100)
        results.append(TransformResult(text=trimmed, label=f"{percent}% shorter"))

    if len(sentence_list) > 2:
        summary = f"{sentence_list[0]}. {sentence_list[-1]}.".replace("..", ".")
        results.append(TransformResult(text=summary, label="Key points only"))

    if len(sentence_list) > 3:
        half = sentence_list[: math.ceil(len(sentence_list) / 2)]
        results.append(
            TransformResult(text=_join_sentences(half), label="First half retained")
        )

    if not results:
        results.append(TransformResult(text=text, label="Text is already concise"))
    return results


def grammar_fix(
    text: str, *, lexicon: Lexicon = DEFAULT_LEXICON, **_: object
) -> List[TransformResult]:
    """
    Apply mechanical corrections and report each one.

    Returns the corrected text and, when anything changed, a bullet list of
    the corrections as a second result.
    """
    changes: List[str] = []

    def _capitalize(match: re.Match[str]) -> str:
        changes.append(f'Capitalized letter after "{match.group(1)}"')
        return f"{match.group(1)} {match.group(2).upper()}"

    fixed = DOUBLE_SPACE_RE.sub(" ", text)
    fixed = LOWERCASE_AFTER_END_RE.sub(_capitalize, fixed)

    if fixed.strip() and not TERMINAL_PUNCT_RE.search(fixed.strip()):
        fixed = fixed.strip() + "."
        changes.append("Added missing period at end")

    if LEADING_LOWER_RE.match(fixed):
        fixed = capitalize_first(fixed)
        changes.append("Capitalized first letter")

    for wrong, right in lexicon.typos:
        pattern = phrase_pattern(wrong)
        if pattern.search(fixed):
            fixed = pattern.sub(lambda m, right=right: match_case(m.group(0), right), fixed)
            changes.append(f'Fixed "{wrong}" -> "{right}"')

    count = len(changes)
    results = [
        TransformResult(
            text=fixed,
            label=(
                f"{count} {_plural(count, 'fix', 'fixes')} applied"
                if changes
                else "No grammar issues detected"
            ),
        )
    ]
    if changes:
        results.append(
            TransformResult(
                text="\n".join(f"• {change}" for change in changes),
                label="Changes made",
            )
        )
    return results


def simplify(
    text: str, *, lexicon: Lexicon = DEFAULT_LEXICON, **_: object
) -> List[TransformResult]:
    """Swap complex words for their first simple alternative and drop filler."""
    simplified = text
    changes: List[str] = []

    for complex_word, simple in lexicon.complex_words:
        pattern = phrase_pattern(complex_word)
        if pattern.search(simplified):
            simple_word = simple.split("/")[0].strip()
            simplified = pattern.sub(
                lambda m, simple_word=simple_word: match_case(m.group(0), simple_word),
                simplified,
            )
            changes.append(f'"{complex_word}" -> "{simple_word}"')

    for phrase in lexicon.filler_phrases:
        pattern = phrase_pattern(phrase, True)
        if pattern.search(simplified):
            simplified = pattern.sub("", simplified)
            changes.append(f'Removed "{phrase}"')

    simplified = capitalize_first(collapse_whitespace(simplified))
    count = len(changes)
    label = (
        f"{count} {_plural(count, 'simplification', 'simplifications')}"
        if changes
        else "Text is already simple and clear"
    )
    return [TransformResult(text=simplified, label=label)]


def headlines(
    text: str, *, lexicon: Lexicon = DEFAULT_LEXICON, **_: object
) -> List[TransformResult]:
    """Fill the headline templates with a topic built from the first keywords."""
    weak = {word.lower() for word in lexicon.weak_words}
    keywords = [
        word
        for word in words(text)
        if len(word) > HEADLINE_MIN_WORD_LEN and word.lower() not in weak
    ][:HEADLINE_MAX_KEYWORDS]
    topic = capitalize_first(" ".join(keywords[:HEADLINE_TOPIC_WORDS]))
    return [
        TransformResult(text=template.format(topic=topic, count=len(keywords)), label=label)
        for template, label in HEADLINE_TEMPLATES
    ]


Transformer = Callable[..., List[TransformResult]]

TRANSFORMERS: Dict[RewriteTool, Transformer] = {
    RewriteTool.REWRITE: rewrite,
    RewriteTool.EXPAND: expand,
    RewriteTool.SHORTEN: shorten,
    RewriteTool.GRAMMAR_FIX: grammar_fix,
    RewriteTool.SIMPLIFY: simplify,
    RewriteTool.HEADLINES: headlines,
}


def transform(
    tool: "RewriteTool | str",
    text: str,
    *,
    tone: str | None = None,
    random_source: RandomSource | None = None,
    lexicon: Lexicon = DEFAULT_LEXICON,
) -> List[TransformResult]:
    """
    Run one rewrite tool over ``text``.

    Blank text yields an empty list; unknown tool names raise ValueError.
    """
    resolved = RewriteTool.parse(tool)
    if not text.strip():
        return []
    logger.debug("Running %s on %d characters", resolved.value, len(text))
    if resolved is RewriteTool.REWRITE:
        return rewrite(text, tone=tone, random_source=random_source, lexicon=lexicon)
    return TRANSFORMERS[resolved](text, lexicon=lexicon)
