"""Tests for the AnkiConnect HTTP client."""

import json

import httpx
import pytest

from anki_mcp.clients import (
    AnkiConnectClient,
    close_anki_client,
    get_anki_client,
    reset_anki_client,
)
from anki_mcp.settings import settings
from anki_mcp.utils.errors import AnkiConnectError, AnkiConnectionError, ConfigurationError

URL = "http://anki.test:8765"


def _client(handler, **kwargs):
    return AnkiConnectClient(url=URL, transport=httpx.MockTransport(handler), **kwargs)


@pytest.mark.asyncio
async def test_invoke_sends_action_envelope():
    requests = []

    def handler(request):
        requests.append(json.loads(request.content))
        return httpx.Response(200, json={"result": None, "error": None})

    async with _client(handler, api_key=None) as client:
        await client.note.add_tags(notes=[1, 2], tags="a b")

    assert requests == [
        {"action": "addTags", "version": 6, "params": {"notes": [1, 2], "tags": "a b"}}
    ]


@pytest.mark.asyncio
async def test_invoke_omits_empty_params_and_sends_key():
    requests = []

    def handler(request):
        requests.append(json.loads(request.content))
        return httpx.Response(200, json={"result": 6, "error": None})

    async with _client(handler, api_key="secret") as client:
        version = await client.miscellaneous.version()

    assert version == 6
    assert requests == [{"action": "version", "version": 6, "key": "secret"}]


@pytest.mark.asyncio
async def test_remote_error_raises_anki_connect_error():
    def handler(request):
        return httpx.Response(200, json={"result": None, "error": "collection is not available"})

    async with _client(handler) as client:
        with pytest.raises(AnkiConnectError, match="collection is not available") as exc_info:
            await client.deck.deck_names()

    assert exc_info.value.action == "deckNames"


@pytest.mark.asyncio
async def test_unexpected_response_shape():
    def handler(request):
        return httpx.Response(200, json=[1, 2, 3])

    async with _client(handler) as client:
        with pytest.raises(AnkiConnectError, match="unexpected format"):
            await client.note.get_tags()


@pytest.mark.asyncio
async def test_http_status_error():
    def handler(request):
        return httpx.Response(403)

    async with _client(handler) as client:
        with pytest.raises(AnkiConnectionError, match="HTTP 403"):
            await client.note.get_tags()


@pytest.mark.asyncio
async def test_connection_refused():
    def handler(request):
        raise httpx.ConnectError("Connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(AnkiConnectionError, match="Could not connect to Anki") as exc_info:
            await client.note.get_tags()

    assert "AnkiConnect add-on" in str(exc_info.value)


@pytest.mark.asyncio
async def test_timeout():
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    async with _client(handler, timeout=2) as client:
        with pytest.raises(AnkiConnectionError, match="timed out after 2s"):
            await client.note.find_notes(query="deck:Default")


@pytest.mark.asyncio
async def test_domain_methods_use_wire_names():
    requests = []

    def handler(request):
        requests.append(json.loads(request.content))
        return httpx.Response(200, json={"result": None, "error": None})

    async with _client(handler) as client:
        await client.note.replace_tags(notes=[1], tag_to_replace="a", replace_with_tag="b")
        await client.model.model_field_add(model_name="Basic", field_name="Extra")
        await client.graphical.gui_import_file()

    assert requests[0]["params"] == {"notes": [1], "tag_to_replace": "a", "replace_with_tag": "b"}
    assert requests[1]["params"] == {"modelName": "Basic", "fieldName": "Extra"}
    assert "params" not in requests[2]


def test_shared_client_is_reused_until_reset():
    first = get_anki_client()

    assert get_anki_client() is first
    reset_anki_client()
    assert get_anki_client() is not first


def test_rejects_non_http_url():
    with pytest.raises(ConfigurationError, match="Invalid AnkiConnect URL"):
        AnkiConnectClient(url="localhost:8765")


@pytest.mark.asyncio
async def test_close_shared_client_without_one_builds_nothing(monkeypatch):
    monkeypatch.setattr(settings, "connect_url", "not-a-url")

    await close_anki_client()


@pytest.mark.asyncio
async def test_close_shared_client_drops_it():
    first = get_anki_client()

    await close_anki_client()

    assert first._http.is_closed
    assert get_anki_client() is not first
