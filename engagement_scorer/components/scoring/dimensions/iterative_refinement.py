"""Iterative refinement: how the user improves outputs through follow-ups."""

from __future__ import annotations

import re
from typing import Dict, List, Sequence

from ..heuristics import _adjacent_pairs, _contains_any, _count_words, _max_over
from ..rules import (
    CORRECTION_MARKERS,
    ERROR_ACKNOWLEDGMENT_MARKERS,
    IMPROVEMENT_MARKERS,
    ITERATIVE_REFINEMENT_CAPS,
    PRIOR_OUTPUT_MARKERS,
    QUANTIFIED_TARGET_PATTERN,
    QUOTE_MARKERS,
    REFINEMENT_SCOPE_MARKERS,
    REFINEMENT_TARGET_MARKERS,
    SUSTAINED_ITERATION_MIN_MESSAGES,
)
from ..schemas import Message
from .base import DimensionAnalyzer

_QUANTIFIED_RE = re.compile(QUANTIFIED_TARGET_PATTERN, re.IGNORECASE)


def _precision(text: str) -> int:
    score = 0
    if _contains_any(text, REFINEMENT_TARGET_MARKERS):
        score += 3
    if _contains_any(text, REFINEMENT_SCOPE_MARKERS):
        score += 2
    if _QUANTIFIED_RE.search(text or ""):
        score += 2
    if any(quote in (text or "") for quote in QUOTE_MARKERS):
        score += 1
    return score


def _error_correction(text: str) -> int:
    score = 0
    if _contains_any(text, ERROR_ACKNOWLEDGMENT_MARKERS):
        score += 3
    if _contains_any(text, CORRECTION_MARKERS):
        score += 3
    if _contains_any(text, PRIOR_OUTPUT_MARKERS):
        score += 2
    return score


def _progressive_improvement(user_messages: List[str]) -> int:
    if len(user_messages) < 2:
        return 0

    score = 0
    for previous, current in _adjacent_pairs(user_messages):
        if _contains_any(current, IMPROVEMENT_MARKERS):
            score += 2
        if _count_words(current) > _count_words(previous):
            score += 1
    if len(user_messages) >= SUSTAINED_ITERATION_MIN_MESSAGES:
        score += 2
    return score


class IterativeRefinementAnalyzer(DimensionAnalyzer):
    name = "iterativeRefinement"
    caps = ITERATIVE_REFINEMENT_CAPS
    positive_feedback = (
        "Your iterative refinement is effective! You steer outputs with precise, well-targeted follow-ups."
    )
    advice = {
        "precision": (
            "Make refinement requests precise - name the part to change and how (e.g., 'shorten the intro to 2 sentences')"
        ),
        "errorCorrection": "Point out mistakes explicitly and state what the correct result should be",
        "progressiveImprovement": "Build on previous responses with follow-ups that push the output further each turn",
    }

    def _score_criteria(
        self,
        user_messages: List[str],
        conversation: Sequence[Message],
    ) -> Dict[str, int]:
        return {
            "precision": _max_over(user_messages, _precision),
            "errorCorrection": _max_over(user_messages, _error_correction),
            "progressiveImprovement": _progressive_improvement(user_messages),
        }
