"""Pydantic models describing the scoring result payload."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Message(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: str
    content: str


class DimensionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = 0
    breakdown: Dict[str, int] = Field(default_factory=dict)
    feedback: List[str] = Field(default_factory=list)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ConversationStats(_CamelModel):
    total_messages: int
    user_messages: int
    assistant_messages: int
    average_user_words: int
    average_assistant_words: int
    conversation_duration: str


class AnalysisReport(_CamelModel):
    overall_score: int
    proficiency_level: str
    dimension_scores: Dict[str, int]
    detailed_breakdown: Dict[str, Dict[str, int]]
    feedback: List[str]
    analysis_timestamp: str
    conversation_stats: ConversationStats

    def to_payload(self) -> dict:
        """JSON-ready dict with the camelCase keys API clients expect."""
        return self.model_dump(by_alias=True)
