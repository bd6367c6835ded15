"""Tests for regex-driven tag selection."""

import pytest

from anki_mcp.services.bulk.selector import compile_patterns, match_tags, select_matching_tags
from anki_mcp.utils.errors import PatternError, ValidationError


def test_match_tags_keeps_original_order():
    patterns = compile_patterns(["^temp_.*", "^old_.*"])

    assert match_tags(["temp_a", "keep", "old_b"], patterns) == ["temp_a", "old_b"]


def test_patterns_match_anywhere_unless_anchored():
    assert match_tags(["x_temp"], compile_patterns(["temp"])) == ["x_temp"]
    assert match_tags(["x_temp"], compile_patterns(["^temp"])) == []


def test_select_matching_tags(notes_info_records):
    selection = select_matching_tags(notes_info_records, compile_patterns(["^temp_.*", "^old_.*"]))

    assert selection == {1: ["temp_a", "old_b"]}


def test_select_skips_records_without_id_or_tags():
    records = [None, {}, {"noteId": 4, "tags": []}, {"tags": ["temp_x"]}]

    assert select_matching_tags(records, compile_patterns(["temp"])) == {}


def test_invalid_pattern_raises_pattern_error():
    with pytest.raises(PatternError, match=r'Invalid regex pattern "\["') as exc_info:
        compile_patterns(["^ok$", "["])

    assert exc_info.value.pattern == "["
    assert isinstance(exc_info.value, ValidationError)
