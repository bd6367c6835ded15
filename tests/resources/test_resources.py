"""
Tests for the anki:/// resources, read through an in-memory FastMCP client.
"""

import json
from unittest.mock import patch

from fastmcp import Client
import pytest

from anki_mcp.server import create_server


@pytest.fixture
def mcp():
    return create_server()


@pytest.mark.asyncio
async def test_note_tags_are_sorted(mcp, mock_anki_client):
    mock_anki_client.note.get_tags.return_value = ["verbs", "european-languages", "adjectives"]

    with patch("anki_mcp.resources.notes.get_anki_client", return_value=mock_anki_client):
        async with Client(mcp) as client:
            contents = await client.read_resource("anki:///notes/tags")

    data = json.loads(contents[0].text)
    assert data["tags"] == ["adjectives", "european-languages", "verbs"]
    assert data["count"] == 3


@pytest.mark.asyncio
async def test_notes_info_parses_id_list(mcp, mock_anki_client, notes_info_records):
    mock_anki_client.note.notes_info.return_value = notes_info_records

    with patch("anki_mcp.resources.notes.get_anki_client", return_value=mock_anki_client):
        async with Client(mcp) as client:
            contents = await client.read_resource("anki:///notes/1,2/info")

    mock_anki_client.note.notes_info.assert_awaited_once_with(notes=[1, 2])
    assert json.loads(contents[0].text)["count"] == 2


@pytest.mark.asyncio
async def test_cards_due_maps_each_card(mcp, mock_anki_client):
    mock_anki_client.card.are_due.return_value = [False, True]

    with patch("anki_mcp.resources.cards.get_anki_client", return_value=mock_anki_client):
        async with Client(mcp) as client:
            contents = await client.read_resource("anki:///cards/10,11/due")

    data = json.loads(contents[0].text)
    assert data == {"due": {"10": False, "11": True}, "dueCount": 1}


@pytest.mark.asyncio
async def test_malformed_id_list_is_an_error(mcp, mock_anki_client):
    with patch("anki_mcp.resources.cards.get_anki_client", return_value=mock_anki_client):
        async with Client(mcp) as client:
            with pytest.raises(Exception, match="Invalid card IDs provided"):
                await client.read_resource("anki:///cards/10,abc/due")

    mock_anki_client.card.are_due.assert_not_called()
