from __future__ import annotations

import logging
from typing import Dict, Iterable

from .detectors import detect_issues
from .lexicon import DEFAULT_LEXICON, Lexicon
from .models import AnalysisResult, Document
from .readability import compute_text_stats
from .scoring import composite_scores
from .tone import classify_tone

logger = logging.getLogger(__name__)


def analyze(
    text: str, lexicon: Lexicon = DEFAULT_LEXICON, *, include_stats: bool = True
) -> AnalysisResult:
    """Detect issues, score, and classify the tone of a single text."""
    issues = detect_issues(text, lexicon)
    scores = composite_scores(text, lexicon)
    tone = classify_tone(text, lexicon)
    stats = compute_text_stats(text) if include_stats else None
    logger.debug(
        "Analyzed %d characters: %d issue(s), scored=%s",
        len(text),
        len(issues),
        scores is not None,
    )
    return AnalysisResult(issues=issues, scores=scores, tone=tone, stats=stats)


def analyze_document(
    doc: Document, lexicon: Lexicon = DEFAULT_LEXICON, *, include_stats: bool = True
) -> AnalysisResult:
    """Analyze one Document."""
    return analyze(doc.text, lexicon, include_stats=include_stats)


def analyze_corpus(
    documents: Iterable[Document],
    lexicon: Lexicon = DEFAULT_LEXICON,
    *,
    include_stats: bool = True,
) -> Dict[str, AnalysisResult]:
    """Analyze every document independently and key the results by doc_id."""
    results: Dict[str, AnalysisResult] = {}
    for document in documents:
        logger.info("Analyzing %s", document.doc_id)
        results[document.doc_id] = analyze_document(
            document, lexicon, include_stats=include_stats
        )
    return results
