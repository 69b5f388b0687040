"""Single source of truth for scoring dimensions and their criteria text."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Mapping

from .rules import (
    CRITICAL_THINKING_CAPS,
    ITERATIVE_REFINEMENT_CAPS,
    PROBLEM_SOLVING_CAPS,
    PROMPT_ENGINEERING_CAPS,
)

_CRITERIA_LABELS: Dict[str, str] = {
    "specificity": "Detail and precision in requests",
    "structure": "Organization and formatting",
    "context": "Background information provided",
    "roleDefinition": "Clarity of AI role specification",
    "precision": "Specificity of refinement requests",
    "errorCorrection": "Identification and correction of mistakes",
    "progressiveImprovement": "Quality improvement across iterations",
    "decomposition": "Breaking down problems into steps",
    "sequencing": "Logical order of questions",
    "goalOrientation": "Maintaining focus on objectives",
    "verification": "Fact-checking and accuracy assessment",
    "biasDetection": "Identification of biases and assumptions",
    "qualityAssessment": "Evaluation of output quality",
}


def _criteria(caps: Dict[str, int]) -> Dict[str, str]:
    return {key: f"{_CRITERIA_LABELS[key]} (0-{cap})" for key, cap in caps.items()}


SCORING_DIMENSIONS: Mapping[str, Dict[str, Any]] = MappingProxyType({
    "promptEngineering": {
        "description": "Measures how effectively users formulate prompts",
        "criteria": _criteria(PROMPT_ENGINEERING_CAPS),
    },
    "iterativeRefinement": {
        "description": "Measures how users improve outputs through follow-ups",
        "criteria": _criteria(ITERATIVE_REFINEMENT_CAPS),
    },
    "problemSolving": {
        "description": "Evaluates strategic approach to complex tasks",
        "criteria": _criteria(PROBLEM_SOLVING_CAPS),
    },
    "criticalThinking": {
        "description": "Measures evaluation and validation of AI outputs",
        "criteria": _criteria(CRITICAL_THINKING_CAPS),
    },
})


def dimension_descriptions() -> Dict[str, Any]:
    """Fresh copy of the catalog, safe to hand to callers."""
    return {
        name: {"description": entry["description"], "criteria": dict(entry["criteria"])}
        for name, entry in SCORING_DIMENSIONS.items()
    }
