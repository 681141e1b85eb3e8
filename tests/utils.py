from __future__ import annotations

from pathlib import Path
from typing import Callable

PASSIVE_SAMPLE = "The ball was thrown by John. He is very happy."

REPETITIVE_SAMPLE = (
    "The system works. The system scales. The system fails sometimes. "
    "The system recovers quickly after every failure in production today and tomorrow."
)

SHORTEN_SAMPLE = (
    "In order to win, we really need to practice. The team trains daily. "
    "Coaches watch closely. Everyone improves over time."
)


def fixed_random(value: float) -> Callable[[], float]:
    """Return a random source that always yields ``value``."""
    return lambda: value


def write_corpus(root: Path, files: dict[str, str]) -> Path:
    """Write ``files`` (relative path -> text) under ``root`` and return it."""
    for name, text in files.items():
        target = root / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    return root
