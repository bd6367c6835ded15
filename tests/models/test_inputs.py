"""Tests for tool input models."""

from anki_mcp.models.bulk import (
    BulkMoveCardsInput,
    BulkUpdateNoteFieldsInput,
    SmartTagCleanupInput,
)
from anki_mcp.models.note_types import UpdateModelStylingInput
from anki_mcp.models.notes import AddNoteInput, UpdateNoteInput


def test_note_content_is_kept_verbatim():
    params = BulkUpdateNoteFieldsInput.model_validate(
        {"updates": [{"noteId": 1, "fields": {"Back": "  indented code\n"}}]}
    )

    assert params.updates[0].fields == {"Back": "  indented code\n"}


def test_thin_note_inputs_keep_field_content():
    added = AddNoteInput.model_validate(
        {
            "deckName": " Spanish ",
            "modelName": "Basic",
            "fields": {"Front": "hola\n", "Back": " hello"},
            "tags": [" greetings "],
        }
    )
    updated = UpdateNoteInput.model_validate({"noteId": 1, "fields": {"Front": "\tx"}})

    assert added.fields == {"Front": "hola\n", "Back": " hello"}
    assert added.deck_name == "Spanish"
    assert added.tags == ["greetings"]
    assert updated.fields == {"Front": "\tx"}


def test_cleanup_patterns_are_not_trimmed():
    params = SmartTagCleanupInput.model_validate({"noteIds": [1], "patterns": [" +$", "^temp_"]})

    assert params.patterns == [" +$", "^temp_"]


def test_names_are_trimmed():
    params = BulkMoveCardsInput.model_validate({"cardIds": [1], "targetDeck": "  Japanese\n"})

    assert params.target_deck == "Japanese"


def test_styling_is_kept_verbatim():
    css = ".card {\n  font-size: 20px;\n}\n"

    params = UpdateModelStylingInput.model_validate({"modelName": " Basic", "css": css})

    assert params.css == css
    assert params.model_name == "Basic"
