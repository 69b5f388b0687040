"""Problem solving: strategic approach to complex tasks.

Decomposition is scored per user message; sequencing looks at adjacent user
messages; goal orientation compares the first and last user messages and
checks how focused the whole conversation stays.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Set

from ..heuristics import (
    _adjacent_pairs,
    _contains_all,
    _contains_any,
    _count_occurrences,
    _lower,
    _max_over,
)
from ..rules import (
    ACTION_VERBS,
    ADVANCED_MARKERS,
    BASIC_MARKERS,
    COMPLETION_MARKERS,
    CONTINUITY_MARKERS,
    FOCUS_RATIO_THRESHOLD,
    FOCUSED_TOPIC_LIMIT,
    MULTI_REQUEST_CONJUNCTION,
    MULTI_REQUEST_MIN_CONJUNCTIONS,
    OBJECTIVE_MARKERS,
    OFF_TOPIC_MARKERS,
    PROBLEM_SOLVING_CAPS,
    STEP_MARKERS,
    SUBTASK_MARKERS,
    TASK_LIST_MARKERS,
    TOPIC_KEYWORDS,
)
from ..schemas import Message
from .base import DimensionAnalyzer


def _decomposition(text: str) -> int:
    score = 0
    if _contains_any(text, STEP_MARKERS):
        score += 3
    if _count_occurrences(text, MULTI_REQUEST_CONJUNCTION) >= MULTI_REQUEST_MIN_CONJUNCTIONS:
        score += 2
    if _contains_all(text, TASK_LIST_MARKERS):
        score += 2
    if _contains_any(text, SUBTASK_MARKERS):
        score += 1
    return score


def _extract_topics(conversation: Sequence[Message]) -> Set[str]:
    """Topic keywords mentioned anywhere in the conversation, any role."""
    topics = set()
    for msg in conversation:
        text = _lower(msg.content)
        topics.update(keyword for keyword in TOPIC_KEYWORDS if keyword in text)
    return topics


def _sequencing(user_messages: List[str], conversation: Sequence[Message]) -> int:
    # A single turn has no order to judge, so the topic bonus never applies.
    if len(user_messages) < 2:
        return 0

    score = 0
    for previous, current in _adjacent_pairs(user_messages):
        if _contains_any(current, CONTINUITY_MARKERS):
            score += 2
        if _contains_any(previous, BASIC_MARKERS) and _contains_any(current, ADVANCED_MARKERS):
            score += 2
    if len(_extract_topics(conversation)) <= FOCUSED_TOPIC_LIMIT:
        score += 2
    return score


def _focus_ratio(conversation: Sequence[Message]) -> float:
    if not conversation:
        return 0.0
    relevant = sum(1 for msg in conversation if not _contains_any(msg.content, OFF_TOPIC_MARKERS))
    return relevant / len(conversation)


def _goal_orientation(user_messages: List[str], conversation: Sequence[Message]) -> int:
    if not user_messages:
        return 0

    first, last = user_messages[0], user_messages[-1]
    score = 0
    if _contains_any(first, OBJECTIVE_MARKERS):
        score += 3
    if _contains_any(first, ACTION_VERBS):
        score += 1
    if _contains_any(last, COMPLETION_MARKERS):
        score += 3
    if _focus_ratio(conversation) > FOCUS_RATIO_THRESHOLD:
        score += 2
    return score


class ProblemSolvingAnalyzer(DimensionAnalyzer):
    name = "problemSolving"
    caps = PROBLEM_SOLVING_CAPS
    positive_feedback = (
        "Your problem-solving approach is strategic and effective! "
        "You break down tasks well and maintain clear goals."
    )
    advice = {
        "decomposition": "Break complex problems into smaller steps - use 'step by step' or numbered tasks",
        "sequencing": "Build questions logically - reference previous answers and maintain topic flow",
        "goalOrientation": "Start with clear objectives and maintain focus throughout the conversation",
    }

    def _score_criteria(
        self,
        user_messages: List[str],
        conversation: Sequence[Message],
    ) -> Dict[str, int]:
        return {
            "decomposition": _max_over(user_messages, _decomposition),
            "sequencing": _sequencing(user_messages, conversation),
            "goalOrientation": _goal_orientation(user_messages, conversation),
        }
