"""Dimension analyzers, in report order."""

from .base import DimensionAnalyzer
from .critical_thinking import CriticalThinkingAnalyzer
from .iterative_refinement import IterativeRefinementAnalyzer
from .problem_solving import ProblemSolvingAnalyzer
from .prompt_engineering import PromptEngineeringAnalyzer


def default_analyzers():
    return (
        PromptEngineeringAnalyzer(),
        IterativeRefinementAnalyzer(),
        ProblemSolvingAnalyzer(),
        CriticalThinkingAnalyzer(),
    )


__all__ = [
    "DimensionAnalyzer",
    "PromptEngineeringAnalyzer",
    "IterativeRefinementAnalyzer",
    "ProblemSolvingAnalyzer",
    "CriticalThinkingAnalyzer",
    "default_analyzers",
]
