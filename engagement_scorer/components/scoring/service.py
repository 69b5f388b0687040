"""Conversation scoring orchestration facade.

Runs the four dimension analyzers over one validated conversation and folds
their results into an ``AnalysisReport``. The heuristics themselves live in
the ``dimensions`` package; this module only combines them.
"""

from __future__ import annotations

import concurrent.futures
import logging
import math
from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence

from .dimensions import DimensionAnalyzer, default_analyzers
from .heuristics import _count_words
from .metadata import dimension_descriptions
from .rules import (
    DEFAULT_PROFICIENCY_LEVEL,
    PROFICIENCY_LEVELS,
    READING_WORDS_PER_MINUTE,
    WRITING_WORDS_PER_MINUTE,
)
from .schemas import AnalysisReport, ConversationStats, DimensionResult, Message
from .validation import validate_conversation

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def get_proficiency_level(score: int) -> str:
    for floor, label in PROFICIENCY_LEVELS:
        if score >= floor:
            return label
    return DEFAULT_PROFICIENCY_LEVEL


def estimate_conversation_duration(conversation: Sequence[Message]) -> str:
    """Reading plus writing time for every word exchanged, in whole minutes."""
    total_words = sum(_count_words(msg.content) for msg in conversation)
    minutes = math.ceil(
        total_words / READING_WORDS_PER_MINUTE + total_words / WRITING_WORDS_PER_MINUTE
    )
    return "1 minute" if minutes <= 1 else f"{minutes} minutes"


def conversation_stats(conversation: Sequence[Message]) -> ConversationStats:
    user_words = [_count_words(msg.content) for msg in conversation if msg.role == "user"]
    assistant_words = [_count_words(msg.content) for msg in conversation if msg.role == "assistant"]
    return ConversationStats(
        total_messages=len(conversation),
        user_messages=len(user_words),
        assistant_messages=len(assistant_words),
        average_user_words=_round_half_up(sum(user_words) / len(user_words)) if user_words else 0,
        average_assistant_words=(
            _round_half_up(sum(assistant_words) / len(assistant_words)) if assistant_words else 0
        ),
        conversation_duration=estimate_conversation_duration(conversation),
    )


def _dedupe(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


class ScoringEngine:
    """Score a conversation across all proficiency dimensions.

    Analyzers are independent and stateless, so ``parallel=True`` simply fans
    them out over a thread pool; results are identical either way.
    """

    def __init__(
        self,
        analyzers: Sequence[DimensionAnalyzer] | None = None,
        parallel: bool = False,
    ):
        self.analyzers = tuple(analyzers) if analyzers is not None else default_analyzers()
        self.parallel = parallel

    @property
    def dimensions(self) -> Dict[str, DimensionAnalyzer]:
        return {analyzer.name: analyzer for analyzer in self.analyzers}

    def analyze(self, conversation: Any) -> AnalysisReport:
        """Validate ``conversation`` and return the full report.

        Raises ``ConversationValidationError`` for structural problems; a
        failure inside one analyzer only zeroes that dimension.
        """
        messages = validate_conversation(conversation)
        results = self._run_analyzers(messages)

        dimension_scores = {name: result.score for name, result in results.items()}
        detailed_breakdown = {name: dict(result.breakdown) for name, result in results.items()}
        feedback = _dedupe([line for result in results.values() for line in result.feedback])
        overall_score = sum(dimension_scores.values())

        return AnalysisReport(
            overall_score=overall_score,
            proficiency_level=get_proficiency_level(overall_score),
            dimension_scores=dimension_scores,
            detailed_breakdown=detailed_breakdown,
            feedback=feedback,
            analysis_timestamp=_utc_timestamp(),
            conversation_stats=conversation_stats(messages),
        )

    def _run_analyzers(self, messages: List[Message]) -> Dict[str, DimensionResult]:
        if not self.parallel:
            return {analyzer.name: self._run_one(analyzer, messages) for analyzer in self.analyzers}

        with concurrent.futures.ThreadPoolExecutor(max_workers=len(self.analyzers) or 1) as pool:
            futures = {
                analyzer.name: pool.submit(self._run_one, analyzer, messages)
                for analyzer in self.analyzers
            }
            return {name: future.result() for name, future in futures.items()}

    @staticmethod
    def _run_one(analyzer: DimensionAnalyzer, messages: List[Message]) -> DimensionResult:
        try:
            return analyzer.analyze(messages)
        except Exception:
            logger.exception("Error in %s scoring", analyzer.name)
            return DimensionResult(
                score=0,
                breakdown={},
                feedback=[f"Scoring issue in {analyzer.name}"],
            )

    get_proficiency_level = staticmethod(get_proficiency_level)

    @staticmethod
    def get_dimension_descriptions() -> Dict[str, Any]:
        return dimension_descriptions()


def analyze_conversation(conversation: Any, parallel: bool = False) -> AnalysisReport:
    """Module-level shortcut over a default ``ScoringEngine``."""
    return ScoringEngine(parallel=parallel).analyze(conversation)
