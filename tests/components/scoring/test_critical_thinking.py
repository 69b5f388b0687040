"""Tests for the critical thinking dimension."""

from engagement_scorer.components.scoring.dimensions import CriticalThinkingAnalyzer
from engagement_scorer.components.scoring.dimensions.critical_thinking import (
    _bias_detection,
    _quality_assessment,
    _verification,
)
from engagement_scorer.components.scoring.validation import validate_conversation
from tests.conftest import NOVICE_CONVERSATION, assistant, user


def _analyze(conversation):
    return CriticalThinkingAnalyzer().analyze(validate_conversation(conversation))


def test_verification_with_doubt_and_source_request():
    assert _verification("Are you sure? Please verify this and cite a source.") == 7


def test_bias_detection_with_challenge_and_alternative_view():
    text = "What assumption is this based on? Why? Give me an alternative view."
    assert _bias_detection(text) == 7


def test_quality_assessment_with_criteria_and_comparison():
    assert _quality_assessment("This is good but could be better; add more details.") == 8


def test_plain_request_earns_nothing():
    text = "write a poem"
    assert (_verification(text), _bias_detection(text), _quality_assessment(text)) == (0, 0, 0)


def test_novice_conversation_only_assesses_quality():
    result = _analyze(NOVICE_CONVERSATION)
    assert result.breakdown == {"verification": 0, "biasDetection": 0, "qualityAssessment": 3}
    assert result.feedback == [
        "Practice verifying AI outputs - ask for sources and double-check important facts",
        "Consider potential biases in AI responses and ask for alternative perspectives",
    ]


def test_best_message_wins_and_positive_feedback():
    conversation = [
        user("Are you sure? Please verify this and cite a source."),
        assistant("Here are my sources..."),
        user("What assumption is this based on? Why? Give me an alternative view."),
        assistant("Fair point..."),
        user("This is good but could be better; add more details."),
    ]
    result = _analyze(conversation)
    assert result.breakdown == {"verification": 7, "biasDetection": 7, "qualityAssessment": 8}
    assert result.score == 22
    assert result.feedback == [
        "Your critical thinking skills are excellent! You effectively evaluate and validate AI responses."
    ]


def test_no_user_messages():
    result = _analyze([assistant("Hello")])
    assert result.score == 0
    assert result.feedback == ["No user messages found in conversation"]
