"""Text primitives shared by the dimension analyzers.

GUARDRAIL: No ML, no NLP libraries. Everything here is substring, regex and
counting over a single message's text.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence

from .rules import BULLET_CHARS, ROLE_PATTERNS

_ROLE_REGEXES = tuple(re.compile(pattern, re.IGNORECASE) for pattern in ROLE_PATTERNS)
_NUMBERING_RE = re.compile(r"\d+\.")


def _lower(text: str) -> str:
    return (text or "").lower()


def _count_words(text: str) -> int:
    return len((text or "").split())


def _contains_any(text: str, markers: Iterable[str]) -> bool:
    """True when any marker is a substring of ``text`` (case-insensitive)."""
    lowered = _lower(text)
    return any(marker in lowered for marker in markers)


def _contains_all(text: str, markers: Iterable[str]) -> bool:
    lowered = _lower(text)
    return all(marker in lowered for marker in markers)


def _count_occurrences(text: str, fragment: str) -> int:
    """Substring occurrences of ``fragment`` in ``text`` (case-insensitive)."""
    return _lower(text).count(fragment)


def _extract_roles(text: str) -> List[str]:
    """Role clauses captured by each role pattern, in pattern order.

    "Act as a senior data engineer, ..." yields the clause for both the
    ``act as`` and the bare ``as`` pattern; callers score each capture.
    """
    roles = []
    for regex in _ROLE_REGEXES:
        match = regex.search(text or "")
        if match and match.group(2):
            roles.append(match.group(2))
    return roles


def _has_bullets(text: str) -> bool:
    return any(char in (text or "") for char in BULLET_CHARS)


def _has_numbering(text: str) -> bool:
    return bool(_NUMBERING_RE.search(text or ""))


def _has_paragraphs(text: str) -> bool:
    return "\n\n" in (text or "")


def _newline_count(text: str) -> int:
    return (text or "").count("\n")


def _max_over(messages: Sequence[str], scorer) -> int:
    """Best per-message score; one strong message earns the credit."""
    return max((scorer(text) for text in messages), default=0)


def _adjacent_pairs(messages: Sequence[str]):
    return zip(messages, messages[1:])
