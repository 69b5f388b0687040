"""Critical thinking: how the user evaluates and validates AI output."""

from __future__ import annotations

from typing import Dict, List, Sequence

from ..heuristics import _contains_any, _max_over
from ..rules import (
    ALTERNATIVE_VIEW_MARKERS,
    BIAS_MARKERS,
    CHALLENGE_MARKERS,
    COMPARATIVE_MARKERS,
    CRITICAL_THINKING_CAPS,
    DOUBT_MARKERS,
    IMPROVEMENT_CRITERIA_MARKERS,
    QUALITY_MARKERS,
    SOURCE_REQUEST_MARKERS,
    VERIFICATION_MARKERS,
)
from ..schemas import Message
from .base import DimensionAnalyzer


def _verification(text: str) -> int:
    score = 0
    if _contains_any(text, VERIFICATION_MARKERS):
        score += 3
    if _contains_any(text, DOUBT_MARKERS):
        score += 2
    if _contains_any(text, SOURCE_REQUEST_MARKERS):
        score += 2
    return score


def _bias_detection(text: str) -> int:
    score = 0
    if _contains_any(text, BIAS_MARKERS):
        score += 3
    if _contains_any(text, CHALLENGE_MARKERS):
        score += 2
    if _contains_any(text, ALTERNATIVE_VIEW_MARKERS):
        score += 2
    return score


def _quality_assessment(text: str) -> int:
    score = 0
    if _contains_any(text, QUALITY_MARKERS):
        score += 3
    if _contains_any(text, IMPROVEMENT_CRITERIA_MARKERS):
        score += 3
    if _contains_any(text, COMPARATIVE_MARKERS):
        score += 2
    return score


class CriticalThinkingAnalyzer(DimensionAnalyzer):
    name = "criticalThinking"
    caps = CRITICAL_THINKING_CAPS
    positive_feedback = (
        "Your critical thinking skills are excellent! You effectively evaluate and validate AI responses."
    )
    advice = {
        "verification": "Practice verifying AI outputs - ask for sources and double-check important facts",
        "biasDetection": "Consider potential biases in AI responses and ask for alternative perspectives",
        "qualityAssessment": (
            "Evaluate output quality more critically - specify what makes a response 'good' or needs improvement"
        ),
    }

    def _score_criteria(
        self,
        user_messages: List[str],
        conversation: Sequence[Message],
    ) -> Dict[str, int]:
        return {
            "verification": _max_over(user_messages, _verification),
            "biasDetection": _max_over(user_messages, _bias_detection),
            "qualityAssessment": _max_over(user_messages, _quality_assessment),
        }
