"""
Shared dependencies for route handlers.
"""

from functools import lru_cache

from .components.scoring.service import ScoringEngine
from .platform.config import settings


@lru_cache(maxsize=1)
def get_scoring_engine() -> ScoringEngine:
    """Process-wide engine; analyzers hold only read-only marker tables."""
    return ScoringEngine(parallel=settings.SCORING_PARALLEL_DIMENSIONS)


__all__ = ["get_scoring_engine"]
