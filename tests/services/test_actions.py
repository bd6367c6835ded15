"""Tests for the typed multi-action dispatcher."""

from pydantic import TypeAdapter, ValidationError
import pytest

from anki_mcp.models import actions as a
from anki_mcp.services.actions import ACTION_HANDLERS, execute_actions
from anki_mcp.utils.errors import AnkiConnectError

ACTION_LIST = TypeAdapter(list[a.AnkiAction])


def test_every_variant_has_a_handler():
    variants = set(a.ActionVariant.__subclasses__())

    assert variants == set(ACTION_HANDLERS)


def test_unknown_action_is_rejected():
    with pytest.raises(ValidationError):
        ACTION_LIST.validate_python([{"action": "dropEverything", "params": {}}])


def test_wrong_params_are_rejected():
    with pytest.raises(ValidationError):
        ACTION_LIST.validate_python([{"action": "findNotes", "params": {"deck": "x"}}])


def test_wire_names_are_accepted():
    (action,) = ACTION_LIST.validate_python(
        [
            {
                "action": "replaceTags",
                "params": {"notes": [1], "tag_to_replace": "a", "replace_with_tag": "b"},
            }
        ]
    )

    assert isinstance(action, a.ReplaceTagsAction)
    assert action.params.tag_to_replace == "a"


@pytest.mark.asyncio
async def test_actions_run_in_order_and_failures_are_captured(mock_anki_client):
    mock_anki_client.deck.create_deck.return_value = 1234
    mock_anki_client.note.find_notes.side_effect = AnkiConnectError("findNotes", "bad query")
    mock_anki_client.note.get_tags.return_value = ["a", "b"]
    actions = ACTION_LIST.validate_python(
        [
            {"action": "createDeck", "params": {"deck": "My Deck"}},
            {"action": "findNotes", "params": {"query": "deck:("}},
            {"action": "getTags"},
        ]
    )

    outcomes = await execute_actions(mock_anki_client, actions)

    assert [o.action for o in outcomes] == ["createDeck", "findNotes", "getTags"]
    assert outcomes[0].result == 1234
    assert outcomes[0].error is None
    assert outcomes[1].result is None
    assert outcomes[1].error == "bad query"
    assert outcomes[2].result == ["a", "b"]
    mock_anki_client.deck.create_deck.assert_awaited_once_with(deck="My Deck")


@pytest.mark.asyncio
async def test_model_field_names_uses_model_name(mock_anki_client):
    mock_anki_client.model.model_field_names.return_value = ["Front", "Back"]
    actions = ACTION_LIST.validate_python(
        [{"action": "modelFieldNames", "params": {"modelName": "Basic"}}]
    )

    (outcome,) = await execute_actions(mock_anki_client, actions)

    mock_anki_client.model.model_field_names.assert_awaited_once_with(model_name="Basic")
    assert outcome.result == ["Front", "Back"]
