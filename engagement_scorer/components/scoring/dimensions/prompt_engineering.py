"""Prompt engineering: how well the user formulates individual prompts.

Sub-criteria (best single user message wins each one):
- specificity: detail and precision of the request
- structure: bullets, numbering, paragraphs
- context: background, examples, constraints
- roleDefinition: how clearly the assistant's role is set
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from ..heuristics import (
    _contains_any,
    _count_words,
    _extract_roles,
    _has_bullets,
    _has_numbering,
    _has_paragraphs,
    _max_over,
    _newline_count,
)
from ..rules import (
    CONSTRAINT_MARKERS,
    CONTEXT_MARKERS,
    EXAMPLE_MARKERS,
    PROMPT_ENGINEERING_CAPS,
    ROLE_SENIORITY_MARKERS,
    SPECIFIC_MARKERS,
    VAGUE_MARKERS,
)
from ..schemas import Message
from .base import DimensionAnalyzer


def _specificity(text: str) -> int:
    score = 0
    words = _count_words(text)
    if words > 50:
        score += 2
    if words > 100:
        score += 1
    if _contains_any(text, SPECIFIC_MARKERS):
        score += 2
    if not _contains_any(text, VAGUE_MARKERS):
        score += 1
    return score


def _structure(text: str) -> int:
    score = 0
    newlines = _newline_count(text)
    if _has_bullets(text) or _has_numbering(text):
        score += 3
    if _has_paragraphs(text) and newlines > 2:
        score += 2
    if newlines > 4:
        score += 1
    return score


def _context(text: str) -> int:
    score = 0
    if _contains_any(text, CONTEXT_MARKERS):
        score += 3
    if _contains_any(text, EXAMPLE_MARKERS):
        score += 2
    if _contains_any(text, CONSTRAINT_MARKERS):
        score += 1
    return score


def _role_definition(text: str) -> int:
    score = 0
    for role in _extract_roles(text):
        if len(role) <= 5:
            continue
        score += 3
        if len(role) > 15:
            score += 2
        if any(marker in role for marker in ROLE_SENIORITY_MARKERS):
            score += 2
    return score


class PromptEngineeringAnalyzer(DimensionAnalyzer):
    name = "promptEngineering"
    caps = PROMPT_ENGINEERING_CAPS
    empty_feedback = "No user prompts found in conversation"
    positive_feedback = "Your prompt engineering skills are strong! Keep up the good work."
    advice = {
        "specificity": "Try to be more specific in your prompts - include details about what you need",
        "structure": "Consider using bullet points, numbering, or sections to organize your prompts",
        "context": "Provide more context and examples to help the AI understand your needs better",
        "roleDefinition": (
            "Define clear roles for the AI (e.g., 'Act as a marketing expert') to improve response quality"
        ),
    }

    def _score_criteria(
        self,
        user_messages: List[str],
        conversation: Sequence[Message],
    ) -> Dict[str, int]:
        return {
            "specificity": _max_over(user_messages, _specificity),
            "structure": _max_over(user_messages, _structure),
            "context": _max_over(user_messages, _context),
            "roleDefinition": _max_over(user_messages, _role_definition),
        }
