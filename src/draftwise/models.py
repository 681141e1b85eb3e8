from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List


class IssueKind(str, Enum):
    """Broad family an issue belongs to."""

    CLARITY = "clarity"
    STYLE = "style"


@dataclass(frozen=True, slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class Issue:
    """A single flagged span of text."""

    kind: IssueKind
    category: str
    matched_text: str
    message: str
    position: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "category": self.category,
            "matched_text": self.matched_text,
            "message": self.message,
            "position": self.position,
        }


@dataclass(frozen=True, slots=True)
class ScoreBundle:
    """Composite quality rating; every field is an integer in [0, 100]."""

    overall: int
    readability: int
    clarity: int
    engagement: int
    grammar: int

    def to_dict(self) -> dict[str, int]:
        return dict(asdict(self))


@dataclass(frozen=True, slots=True)
class TextStats:
    """Counts shown alongside an analysis."""

    word_count: int
    char_count: int
    sentence_count: int
    read_minutes: int

    def to_dict(self) -> dict[str, int]:
        return dict(asdict(self))


@dataclass(frozen=True, slots=True)
class TransformResult:
    """One alternative phrasing with a short human-readable label."""

    text: str
    label: str

    def to_dict(self) -> dict[str, str]:
        return {"text": self.text, "label": self.label}


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Everything produced by a single ``analyze`` call."""

    issues: List[Issue]
    scores: ScoreBundle | None
    tone: Dict[str, int] | None
    stats: TextStats | None = field(default=None)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "issues": [issue.to_dict() for issue in self.issues],
            "scores": self.scores.to_dict() if self.scores else None,
            "tone": dict(self.tone) if self.tone is not None else None,
        }
        if self.stats is not None:
            payload["stats"] = self.stats.to_dict()
        return payload
