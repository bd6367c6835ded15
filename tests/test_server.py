"""Tests for server startup and shutdown."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from anki_mcp import server
from anki_mcp.settings import settings


@pytest.mark.asyncio
async def test_serve_keeps_transport_error_when_no_client_was_used(monkeypatch):
    monkeypatch.setattr(settings, "connect_url", "not-a-url")
    mcp = MagicMock()
    mcp.run_async = AsyncMock(side_effect=RuntimeError("stdio closed"))

    with patch.object(server, "create_server", return_value=mcp), patch.object(
        server, "initialize_logging"
    ):
        with pytest.raises(RuntimeError, match="stdio closed"):
            await server.serve()


@pytest.mark.asyncio
async def test_serve_closes_shared_client():
    mcp = MagicMock()
    mcp.run_async = AsyncMock(return_value=None)

    with patch.object(server, "create_server", return_value=mcp), patch.object(
        server, "initialize_logging"
    ), patch.object(server, "close_anki_client", AsyncMock()) as close:
        await server.serve()

    mcp.run_async.assert_awaited_once_with(transport="stdio")
    close.assert_awaited_once()
