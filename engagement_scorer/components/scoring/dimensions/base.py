"""Shared shape of the four dimension analyzers."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence

from ..rules import FEEDBACK_THRESHOLD
from ..schemas import DimensionResult, Message


class DimensionAnalyzer:
    """Score one proficiency dimension of a conversation.

    Subclasses declare their sub-criterion caps, feedback copy, and implement
    ``_score_criteria``, which returns raw (uncapped) points per
    sub-criterion. Each sub-criterion is clamped to its own cap here; the
    dimension total is the plain sum of the clamped values.
    """

    name: str = ""
    caps: Mapping[str, int] = MappingProxyType({})
    advice: Mapping[str, str] = MappingProxyType({})
    empty_feedback = "No user messages found in conversation"
    positive_feedback = ""

    def analyze(self, conversation: Sequence[Message]) -> DimensionResult:
        user_messages = [msg.content for msg in conversation if msg.role == "user"]
        if not user_messages:
            return DimensionResult(
                score=0,
                breakdown={key: 0 for key in self.caps},
                feedback=[self.empty_feedback],
            )

        raw = self._score_criteria(user_messages, conversation)
        breakdown = {key: min(cap, int(raw.get(key, 0))) for key, cap in self.caps.items()}
        return DimensionResult(
            score=sum(breakdown.values()),
            breakdown=breakdown,
            feedback=self._feedback(breakdown),
        )

    def _score_criteria(
        self,
        user_messages: List[str],
        conversation: Sequence[Message],
    ) -> Dict[str, int]:
        raise NotImplementedError

    def _feedback(self, breakdown: Dict[str, int]) -> List[str]:
        feedback = [
            self.advice[key]
            for key in self.caps
            if breakdown.get(key, 0) < FEEDBACK_THRESHOLD
        ]
        return feedback or [self.positive_feedback]
