"""
Static rule tables used by the detectors, scorers, and transformers.

A :class:`Lexicon` is an immutable value. The module-level ``DEFAULT_LEXICON``
holds the built-in English tables; alternate tables can be loaded from YAML
with :func:`load_lexicon` and passed to any detector or transformer.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, FrozenSet, Mapping, MutableMapping, Tuple

import yaml

TONE_CATEGORIES: Tuple[str, ...] = (
    "Formal",
    "Casual",
    "Confident",
    "Analytical",
    "Friendly",
    "Urgent",
)

PASSIVE_AUXILIARIES = ("was", "were", "is", "are", "been", "being", "be")

IRREGULAR_PARTICIPLES = (
    "written", "taken", "given", "shown", "known", "made", "done", "seen",
    "found", "told", "thought", "felt", "become", "begun", "broken", "chosen",
    "driven", "eaten", "fallen", "forgotten", "frozen", "gotten", "hidden",
    "ridden", "risen", "spoken", "stolen", "sworn", "thrown", "woken", "worn",
)

WEAK_WORDS = (
    "very", "really", "just", "quite", "rather", "somewhat", "basically",
    "actually", "literally", "definitely", "absolutely", "totally",
    "completely", "honestly", "frankly",
)

FILLER_PHRASES = (
    "in order to", "due to the fact that", "in the event that",
    "at this point in time", "for the purpose of", "in the process of",
    "with regard to", "in terms of", "on the other hand", "as a matter of fact",
    "it is important to note", "it should be noted that", "needless to say",
    "at the end of the day", "when all is said and done", "in my opinion",
    "I think that", "I believe that", "there is", "there are", "it is", "it was",
)

CLICHE_PHRASES = (
    "think outside the box", "at the end of the day", "low-hanging fruit",
    "move the needle", "paradigm shift", "synergy", "leverage", "circle back",
    "deep dive", "game changer", "best practices", "touch base",
    "take it offline", "bandwidth", "pain point", "value proposition",
    "ecosystem", "scalable", "cutting edge", "bleeding edge", "next level",
    "world class", "best in class", "mission critical", "actionable insights",
    "pivot", "disrupt",
)

# Alternatives separated by "/" are shown together; simplify takes the first.
COMPLEX_WORDS = (
    ("utilize", "use"),
    ("implement", "do / set up"),
    ("facilitate", "help"),
    ("commence", "start / begin"),
    ("terminate", "end"),
    ("endeavor", "try"),
    ("procure", "get"),
    ("ascertain", "find out"),
    ("subsequently", "then / later"),
    ("notwithstanding", "despite"),
    ("aforementioned", "mentioned earlier"),
    ("herein", "here"),
    ("thereby", "so"),
    ("henceforth", "from now on"),
    ("pertaining", "about / related to"),
    ("necessitate", "need / require"),
    ("ameliorate", "improve"),
    ("elucidate", "explain"),
    ("obfuscate", "confuse / hide"),
    ("remuneration", "pay / payment"),
)

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "from", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "can", "shall", "it", "its", "this", "that",
    "these", "those", "i", "you", "he", "she", "we", "they", "me", "him",
    "her", "us", "them", "my", "your", "his", "our", "their", "not", "no",
    "if", "as", "so",
})

TONE_WORDS = (
    ("Formal", (
        "therefore", "consequently", "furthermore", "moreover", "nevertheless",
        "regarding", "pursuant", "accordingly", "whereas", "hereby",
        "hereafter", "therein", "shall", "ought",
    )),
    ("Casual", (
        "hey", "cool", "awesome", "gonna", "wanna", "kinda", "yeah", "nope",
        "ok", "okay", "yep", "btw", "lol", "tbh", "imo", "fyi", "super",
        "totally", "stuff", "things", "pretty much",
    )),
    ("Confident", (
        "will", "must", "certainly", "undoubtedly", "clearly", "proven",
        "guaranteed", "ensures", "always", "never", "definitely",
        "absolutely", "without doubt", "exactly",
    )),
    ("Analytical", (
        "analysis", "data", "evidence", "research", "study", "findings",
        "statistics", "correlation", "significant", "indicates", "suggests",
        "demonstrates", "measures", "factors", "results", "methodology",
        "hypothesis", "variable",
    )),
    ("Friendly", (
        "thanks", "please", "welcome", "appreciate", "glad", "happy", "enjoy",
        "wonderful", "great", "love", "excited", "amazing", "fantastic",
        "together", "share", "hope", "wish", "kind",
    )),
    ("Urgent", (
        "immediately", "urgent", "asap", "critical", "deadline", "now",
        "hurry", "quickly", "fast", "rush", "important", "priority",
        "essential", "emergency", "time-sensitive", "act now", "dont delay",
    )),
)

TYPOS = (
    ("teh", "the"), ("adn", "and"), ("taht", "that"), ("wiht", "with"),
    ("thier", "their"), ("recieve", "receive"), ("seperate", "separate"),
    ("definately", "definitely"), ("occured", "occurred"),
    ("accomodate", "accommodate"), ("refered", "referred"),
    ("untill", "until"), ("wich", "which"), ("becuase", "because"),
    ("alot", "a lot"),
)


@dataclass(frozen=True, slots=True)
class Lexicon:
    """Read-only word lists and mappings consumed by the analysis engine."""

    passive_auxiliaries: Tuple[str, ...] = PASSIVE_AUXILIARIES
    irregular_participles: Tuple[str, ...] = IRREGULAR_PARTICIPLES
    weak_words: Tuple[str, ...] = WEAK_WORDS
    filler_phrases: Tuple[str, ...] = FILLER_PHRASES
    cliche_phrases: Tuple[str, ...] = CLICHE_PHRASES
    complex_words: Tuple[Tuple[str, str], ...] = COMPLEX_WORDS
    stop_words: FrozenSet[str] = STOP_WORDS
    tone_words: Tuple[Tuple[str, Tuple[str, ...]], ...] = TONE_WORDS
    typos: Tuple[Tuple[str, str], ...] = TYPOS

    def tone_table(self) -> Dict[str, Tuple[str, ...]]:
        """Return the tone word lists keyed by category name."""
        return dict(self.tone_words)


DEFAULT_LEXICON = Lexicon()

_PAIR_TABLES = {"complex_words", "typos"}


def lexicon_from_dict(
    data: Mapping[str, Any] | None, base: Lexicon = DEFAULT_LEXICON
) -> Lexicon:
    """
    Build a Lexicon by replacing tables of ``base`` with the provided values.

    List tables take sequences of strings, ``complex_words`` and ``typos``
    take mappings, and ``tone_words`` takes a mapping of category name to
    a list of words.
    """
    if not data:
        return base
    allowed = {field.name for field in fields(Lexicon)}
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ValueError(f"Unknown lexicon tables: {', '.join(unknown)}")

    overrides: dict[str, Any] = {}
    for name, value in data.items():
        if name in _PAIR_TABLES:
            overrides[name] = _pairs(name, value)
        elif name == "tone_words":
            overrides[name] = _tone_words(value, base)
        elif name == "stop_words":
            overrides[name] = frozenset(_strings(name, value))
        else:
            overrides[name] = _strings(name, value)
    return replace(base, **overrides)


def load_lexicon(path: str | Path | None = None) -> Lexicon:
    """Load lexicon overrides from YAML, or return the defaults."""
    if path is None:
        return DEFAULT_LEXICON
    parsed = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Lexicon YAML must define a mapping.")
    return lexicon_from_dict(parsed)


def _strings(name: str, value: Any) -> Tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ValueError(f"Lexicon table '{name}' must be a list of strings.")
    return tuple(str(item) for item in value)


def _pairs(name: str, value: Any) -> Tuple[Tuple[str, str], ...]:
    if not isinstance(value, Mapping):
        raise ValueError(f"Lexicon table '{name}' must be a mapping.")
    return tuple((str(key), str(val)) for key, val in value.items())


def _tone_words(
    value: Any, base: Lexicon
) -> Tuple[Tuple[str, Tuple[str, ...]], ...]:
    if not isinstance(value, Mapping):
        raise ValueError("Lexicon table 'tone_words' must map categories to lists.")
    unknown = sorted(set(value) - set(TONE_CATEGORIES))
    if unknown:
        raise ValueError(f"Unknown tone categories: {', '.join(unknown)}")
    current = base.tone_table()
    for category, words in value.items():
        current[category] = _strings(f"tone_words.{category}", words)
    return tuple((category, current[category]) for category in TONE_CATEGORIES)
