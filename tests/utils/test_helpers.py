"""Tests for helper functions and error handling."""

import pytest

from anki_mcp.utils.errors import (
    AnkiConnectionError,
    AnkiConnectError,
    ValidationError,
    handle_error,
)
from anki_mcp.utils.helpers import format_id_list, parse_id_list, parse_name_list, to_json


def test_parse_id_list():
    assert parse_id_list("1502298033753, 1502298036657") == [1502298033753, 1502298036657]
    assert parse_id_list("1%2C2") == [1, 2]


@pytest.mark.parametrize("raw", ["1,abc", "", "1,,2"])
def test_parse_id_list_rejects_malformed_lists(raw):
    with pytest.raises(ValidationError, match="Invalid card IDs provided"):
        parse_id_list(raw, "card IDs")


def test_parse_name_list():
    assert parse_name_list("Default,Spanish%3A%3AVerbs, ") == ["Default", "Spanish::Verbs"]


def test_formatting():
    assert format_id_list([1, 2]) == "[1, 2]"
    assert to_json({"tag": "日本語"}) == '{\n  "tag": "日本語"\n}'


def test_handle_error_for_known_errors():
    error = AnkiConnectError("addNote", "cannot create note because it is a duplicate")

    message = handle_error(error, "execute add note")

    assert message == (
        "Failed to execute add note: cannot create note because it is a duplicate"
    )


def test_handle_error_includes_suggestion():
    error = AnkiConnectionError("Could not connect to Anki", "Start Anki")

    assert handle_error(error, "execute sync") == (
        "Failed to execute sync: Could not connect to Anki. Start Anki"
    )


def test_handle_error_for_unexpected_errors():
    assert handle_error(RuntimeError("Connection reset"), "x").startswith(
        "Failed to x: Could not connect to Anki."
    )
    assert handle_error(KeyError(), "x") == "Failed to x: KeyError"
