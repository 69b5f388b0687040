"""Tests for the iterative refinement dimension."""

from engagement_scorer.components.scoring.dimensions import IterativeRefinementAnalyzer
from engagement_scorer.components.scoring.dimensions.iterative_refinement import (
    _error_correction,
    _precision,
    _progressive_improvement,
)
from engagement_scorer.components.scoring.validation import validate_conversation
from tests.conftest import assistant, user

HEADPHONES_CONVERSATION = [
    user("Write a product description for wireless headphones."),
    assistant("Meet the AeroSound X: 20 hours of battery life and studio-grade audio..."),
    user(
        "That's wrong, in your previous answer the battery life should be 30 hours, not 20. "
        "Fix the second paragraph."
    ),
    assistant("Apologies. Meet the AeroSound X: 30 hours of battery life..."),
    user('Now make it more concise: rewrite the intro in exactly 2 sentences and keep the "studio-grade" phrase.'),
]


def _analyze(conversation):
    return IterativeRefinementAnalyzer().analyze(validate_conversation(conversation))


class TestPrecision:
    def test_targeted_quantified_quoted_request(self):
        text = 'Rewrite the intro in exactly 2 sentences and keep the "studio-grade" phrase.'
        assert _precision(text) == 8

    def test_scope_only(self):
        assert _precision("Fix the second paragraph.") == 2

    def test_vague_follow_up(self):
        assert _precision("make it better") == 0


class TestErrorCorrection:
    def test_acknowledges_corrects_and_references_prior_output(self):
        text = "That's wrong, in your previous answer the battery life should be 30 hours."
        assert _error_correction(text) == 8

    def test_correction_without_acknowledgment(self):
        assert _error_correction("Use metric units rather than imperial.") == 3


class TestProgressiveImprovement:
    def test_single_message_has_nothing_to_build_on(self):
        assert _progressive_improvement(["Write a haiku about autumn and rain"]) == 0

    def test_raw_points_can_exceed_cap(self):
        messages = ["a", "improve a b", "improve a b c", "improve a b c d"]
        # three pairs of (marker + longer) plus the sustained-iteration bonus
        assert _progressive_improvement(messages) == 11

    def test_analyzer_caps_progressive_improvement(self):
        conversation = [user("a"), user("improve a b"), user("improve a b c"), user("improve a b c d")]
        result = _analyze(conversation)
        assert result.breakdown["progressiveImprovement"] == 9

    def test_two_messages_get_no_sustained_bonus(self):
        assert _progressive_improvement(["write a poem", "now add a title to the poem"]) == 3


class TestIterativeRefinementAnalyzer:
    def test_headphones_conversation(self):
        result = _analyze(HEADPHONES_CONVERSATION)
        assert result.breakdown == {"precision": 8, "errorCorrection": 8, "progressiveImprovement": 5}
        assert result.score == 21
        assert result.feedback == [
            "Your iterative refinement is effective! You steer outputs with precise, well-targeted follow-ups."
        ]

    def test_no_user_messages(self):
        result = _analyze([assistant("Hi there")])
        assert result.score == 0
        assert result.breakdown == {"precision": 0, "errorCorrection": 0, "progressiveImprovement": 0}
        assert result.feedback == ["No user messages found in conversation"]

    def test_single_prompt_gets_advice_for_every_criterion(self):
        result = _analyze([user("Write a haiku about autumn")])
        assert result.score == 0
        assert len(result.feedback) == 3
