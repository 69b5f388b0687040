"""Tests for the shared text heuristics."""

from engagement_scorer.components.scoring.heuristics import (
    _adjacent_pairs,
    _contains_all,
    _contains_any,
    _count_occurrences,
    _count_words,
    _extract_roles,
    _has_bullets,
    _has_numbering,
    _has_paragraphs,
    _max_over,
    _newline_count,
)


class TestWordCounting:
    def test_whitespace_delimited(self):
        assert _count_words("help me with marketing") == 4

    def test_collapses_runs_of_whitespace(self):
        assert _count_words("  one\n\ntwo\tthree  ") == 3

    def test_empty_text(self):
        assert _count_words("") == 0

    def test_occurrences_include_substrings(self):
        assert _count_occurrences("Understand the brand and the band", "and") == 4
        assert _count_occurrences("AND then and again", "and") == 2


class TestMarkerMatching:
    def test_case_insensitive(self):
        assert _contains_any("Please be SPECIFIC", ("specific",))

    def test_no_match(self):
        assert not _contains_any("make it better", ("specific", "exactly"))

    def test_contains_all(self):
        assert _contains_all("1. plan 2. build", ("1.", "2."))
        assert not _contains_all("1. plan only", ("1.", "2."))


class TestRoleExtraction:
    def test_act_as_also_matches_bare_as(self):
        roles = _extract_roles("Act as a senior data engineer, then review my plan.")
        assert roles == ["senior data engineer", "senior data engineer"]

    def test_you_are_pattern_stops_at_period(self):
        assert _extract_roles("You are an experienced editor. Fix this.") == ["experienced editor"]

    def test_stops_at_newline(self):
        assert _extract_roles("as a tax advisor\nhelp me") == ["tax advisor"]

    def test_runs_to_end_of_text(self):
        assert _extract_roles("answer as an economist") == ["economist"]

    def test_no_role(self):
        assert _extract_roles("make it better") == []


class TestStructureDetection:
    def test_bullets(self):
        assert _has_bullets("- one")
        assert _has_bullets("• one")
        assert not _has_bullets("one")

    def test_numbering(self):
        assert _has_numbering("Steps: 1. go")
        assert not _has_numbering("no numbers here")

    def test_paragraphs_and_newlines(self):
        text = "intro\n\nbody\nmore"
        assert _has_paragraphs(text)
        assert _newline_count(text) == 3


class TestFolds:
    def test_max_over_keeps_best_message(self):
        assert _max_over(["a", "abcd", "ab"], len) == 4

    def test_max_over_empty(self):
        assert _max_over([], len) == 0

    def test_adjacent_pairs(self):
        assert list(_adjacent_pairs(["a", "b", "c"])) == [("a", "b"), ("b", "c")]
