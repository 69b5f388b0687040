"""Conversation analysis endpoints."""
import logging
import time
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..components.scoring.service import ScoringEngine
from ..components.scoring.validation import request_conversation_error
from ..deps import get_scoring_engine
from ..platform.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Analysis"])


class AnalyzeRequest(BaseModel):
    # Left untyped so shape problems surface as our own 400s, not pydantic 422s.
    conversation: Any = None
    userId: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


def _bad_request(error: str, details: str) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"success": False, "error": error, "details": details},
    )


@router.post("/analyze")
def analyze_conversation(
    payload: AnalyzeRequest,
    engine: ScoringEngine = Depends(get_scoring_engine),
):
    """Score a conversation and return the full analysis report."""
    started = time.perf_counter()
    conversation = payload.conversation

    if not isinstance(conversation, list):
        return _bad_request(
            "Conversation data is required and must be an array",
            'Provide conversation as array of {role: "user"|"assistant"|"system", content: "string"}',
        )

    problem = request_conversation_error(conversation, max_chars=settings.MAX_MESSAGE_CHARS)
    if problem:
        return _bad_request("Invalid conversation structure", problem)

    report = engine.analyze(conversation)
    user_id = payload.userId or "anonymous"
    elapsed_ms = int((time.perf_counter() - started) * 1000)

    logger.info(
        "Analysis completed user=%s score=%d level=%s messages=%d",
        user_id,
        report.overall_score,
        report.proficiency_level,
        len(conversation),
    )

    return {
        "success": True,
        "userId": user_id,
        "analysis": report.to_payload(),
        "metadata": payload.metadata or {},
        "analysisTime": f"{elapsed_ms}ms",
    }


@router.get("/dimensions")
def get_dimensions(engine: ScoringEngine = Depends(get_scoring_engine)):
    return {"success": True, "dimensions": engine.get_dimension_descriptions()}
