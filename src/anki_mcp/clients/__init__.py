"""
Clients for Anki MCP.

- AnkiConnectClient: async access to Anki through the AnkiConnect add-on
"""

from .anki_connect import (
    AnkiConnectClient,
    close_anki_client,
    get_anki_client,
    reset_anki_client,
)

__all__ = [
    "AnkiConnectClient",
    "close_anki_client",
    "get_anki_client",
    "reset_anki_client",
]
