"""Tests for the command-line interface."""

import sys
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from anki_mcp import cli
from anki_mcp.utils.errors import AnkiConnectionError


def _client_context(client):
    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=client)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


@pytest.mark.asyncio
async def test_check_connection_reports_version(capsys, mock_anki_client):
    with patch.object(cli, "AnkiConnectClient", return_value=_client_context(mock_anki_client)):
        code = await cli.check_connection("http://127.0.0.1:8765")

    assert code == 0
    assert "AnkiConnect reachable at http://127.0.0.1:8765 (API version 6)" in (
        capsys.readouterr().out
    )


@pytest.mark.asyncio
async def test_check_connection_warns_on_old_api(capsys, mock_anki_client):
    mock_anki_client.miscellaneous.version.return_value = 5

    with patch.object(cli, "AnkiConnectClient", return_value=_client_context(mock_anki_client)):
        code = await cli.check_connection("http://127.0.0.1:8765")

    assert code == 0
    assert "update the AnkiConnect add-on" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_check_connection_failure(capsys, mock_anki_client):
    mock_anki_client.miscellaneous.version.side_effect = AnkiConnectionError(
        "Could not connect to Anki"
    )

    with patch.object(cli, "AnkiConnectClient", return_value=_client_context(mock_anki_client)):
        code = await cli.check_connection("http://127.0.0.1:8765")

    assert code == 1
    assert "not reachable" in capsys.readouterr().err


def test_version_command(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["anki-mcp", "version"])

    with pytest.raises(SystemExit) as exc_info:
        cli.main()

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("Anki MCP v")


@pytest.mark.asyncio
async def test_check_connection_rejects_bad_url(capsys):
    code = await cli.check_connection("localhost:8765")

    assert code == 1
    assert "Invalid AnkiConnect URL" in capsys.readouterr().err
