"""Tests for request-level conversation checks."""

import pytest

from engagement_scorer.components.scoring.validation import request_conversation_error
from tests.conftest import user


@pytest.mark.parametrize(
    "conversation, expected",
    [
        ([], "Conversation array cannot be empty"),
        (["hi"], "Message at index 0 must be an object with 'role' and 'content'"),
        ([{"content": "hi"}], "Message at index 0 missing 'role' property"),
        (
            [user("hi"), {"role": "bot", "content": "hi"}],
            "Message at index 1 has invalid role: bot. Must be 'user', 'assistant', 'system'",
        ),
        ([{"role": "user"}], "Message at index 0 missing 'content' property"),
        ([{"role": "user", "content": 5}], "Message at index 0 content must be a string"),
        (
            [user("x" * 10_001)],
            "Message at index 0 content too long (10001 characters). Maximum is 10,000.",
        ),
    ],
)
def test_request_conversation_errors(conversation, expected):
    assert request_conversation_error(conversation) == expected


def test_content_at_limit_is_accepted():
    assert request_conversation_error([user("x" * 10_000)]) is None


def test_custom_limit():
    assert "Maximum is 5." in request_conversation_error([user("toolong")], max_chars=5)
