"""Structural checks on conversations before they reach the analyzers.

Two tiers share this module:

- ``validate_conversation`` is the engine's own guard. It raises
  ``ConversationValidationError`` and returns immutable ``Message`` objects.
- ``request_conversation_error`` is the stricter HTTP-boundary check (role
  whitelist, non-empty list, content length). It returns a human-readable
  reason or ``None`` so the route can answer with a 400.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from .rules import MAX_MESSAGE_CHARS, VALID_ROLES
from .schemas import Message


class ConversationValidationError(ValueError):
    """Raised when a conversation is not a list of {role, content} messages."""

    def __init__(self, message: str, index: int | None = None, field: str | None = None):
        super().__init__(message)
        self.index = index
        self.field = field


def validate_conversation(conversation: Any) -> List[Message]:
    if conversation is None or not isinstance(conversation, (list, tuple)):
        raise ConversationValidationError("Conversation must be an array of messages")

    messages: List[Message] = []
    for index, raw in enumerate(conversation):
        if isinstance(raw, Message):
            messages.append(raw)
            continue
        if not isinstance(raw, Mapping):
            raise ConversationValidationError(
                f"Message at index {index} must have role and content properties",
                index=index,
                field="message",
            )
        role = raw.get("role")
        content = raw.get("content")
        if not role or content is None:
            raise ConversationValidationError(
                f"Message at index {index} must have role and content properties",
                index=index,
                field="role" if not role else "content",
            )
        if not isinstance(role, str):
            raise ConversationValidationError(
                f"Message role at index {index} must be a string",
                index=index,
                field="role",
            )
        if not isinstance(content, str):
            raise ConversationValidationError(
                f"Message content at index {index} must be a string",
                index=index,
                field="content",
            )
        messages.append(Message(role=role, content=content))
    return messages


def request_conversation_error(
    conversation: List[Any],
    max_chars: int = MAX_MESSAGE_CHARS,
) -> Optional[str]:
    """First structural problem in a request's conversation, or None."""
    if len(conversation) == 0:
        return "Conversation array cannot be empty"

    for index, message in enumerate(conversation):
        if not isinstance(message, Mapping):
            return f"Message at index {index} must be an object with 'role' and 'content'"
        role = message.get("role")
        if not role:
            return f"Message at index {index} missing 'role' property"
        if role not in VALID_ROLES:
            allowed = ", ".join(f"'{r}'" for r in VALID_ROLES)
            return f"Message at index {index} has invalid role: {role}. Must be {allowed}"
        content = message.get("content")
        if content is None:
            return f"Message at index {index} missing 'content' property"
        if not isinstance(content, str):
            return f"Message at index {index} content must be a string"
        if len(content) > max_chars:
            return (
                f"Message at index {index} content too long ({len(content)} characters). "
                f"Maximum is {max_chars:,}."
            )
    return None
