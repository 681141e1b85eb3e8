"""
draftwise package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import DraftwiseConfig, config_from_dict, config_from_yaml, load_config
from .lexicon import DEFAULT_LEXICON, Lexicon, load_lexicon
from .models import AnalysisResult, Issue, IssueKind, ScoreBundle, TransformResult
from .pipeline import analyze, analyze_corpus, analyze_document
from .rewriting import RewriteTool, transform

__all__ = [
    "DraftwiseConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "DEFAULT_LEXICON",
    "Lexicon",
    "load_lexicon",
    "AnalysisResult",
    "Issue",
    "IssueKind",
    "ScoreBundle",
    "TransformResult",
    "analyze",
    "analyze_corpus",
    "analyze_document",
    "RewriteTool",
    "transform",
]

__version__ = "0.1.0"
