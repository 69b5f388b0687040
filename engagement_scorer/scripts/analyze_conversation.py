"""
Score a conversation stored in a JSON file and print the report.

Usage:
  python -m engagement_scorer.scripts.analyze_conversation chat.json
  python -m engagement_scorer.scripts.analyze_conversation chat.json --summary

The file holds either a list of {role, content} messages or an object with a
"conversation" key (the same body POST /analyze accepts).
"""
from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from engagement_scorer.components.scoring.service import ScoringEngine
from engagement_scorer.components.scoring.validation import ConversationValidationError


def _load_conversation(path: str):
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if isinstance(data, dict) and "conversation" in data:
        return data["conversation"]
    return data


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Score AI-collaboration proficiency of a conversation")
    parser.add_argument("path", help="JSON file with the conversation")
    parser.add_argument("--summary", action="store_true", help="Print score, level and feedback only")
    parser.add_argument("--parallel", action="store_true", help="Run dimension analyzers on a thread pool")
    args = parser.parse_args(argv)

    try:
        conversation = _load_conversation(args.path)
    except (OSError, json.JSONDecodeError) as exc:
        print(f"Could not read {args.path}: {exc}", file=sys.stderr)
        return 1

    try:
        report = ScoringEngine(parallel=args.parallel).analyze(conversation)
    except ConversationValidationError as exc:
        print(f"Invalid conversation: {exc}", file=sys.stderr)
        return 2

    if args.summary:
        print(f"{report.overall_score}/100 ({report.proficiency_level})")
        for line in report.feedback:
            print(f"- {line}")
    else:
        print(json.dumps(report.to_payload(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
