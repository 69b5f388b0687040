"""Tests for the analyze_conversation command-line script."""

import json

from engagement_scorer.scripts.analyze_conversation import main
from tests.conftest import NOVICE_CONVERSATION


def test_prints_full_report(tmp_path, capsys):
    path = tmp_path / "chat.json"
    path.write_text(json.dumps(NOVICE_CONVERSATION), encoding="utf-8")

    assert main([str(path)]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["overallScore"] == 8
    assert report["proficiencyLevel"] == "Novice"


def test_accepts_request_body_and_summary(tmp_path, capsys):
    path = tmp_path / "body.json"
    path.write_text(json.dumps({"conversation": NOVICE_CONVERSATION, "userId": "u1"}), encoding="utf-8")

    assert main([str(path), "--summary", "--parallel"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "8/100 (Novice)"
    assert all(line.startswith("- ") for line in out[1:])


def test_invalid_conversation_exit_code(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"role": "user"}]), encoding="utf-8")

    assert main([str(path)]) == 2
    assert "Message at index 0" in capsys.readouterr().err


def test_unreadable_file_exit_code(tmp_path, capsys):
    assert main([str(tmp_path / "missing.json")]) == 1
    assert "Could not read" in capsys.readouterr().err
