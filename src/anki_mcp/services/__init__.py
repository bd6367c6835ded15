"""
Services for Anki MCP.

Provides the bulk operation engine and the multi-action dispatcher.
"""

from anki_mcp.clients.anki_connect import get_anki_client

from .actions import execute_actions
from .bulk import BulkOperationService


def get_bulk_service() -> BulkOperationService:
    """
    Get a bulk operation service bound to the shared AnkiConnect client.

    Returns:
        Configured BulkOperationService
    """
    return BulkOperationService(get_anki_client())


__all__ = [
    "BulkOperationService",
    "execute_actions",
    "get_bulk_service",
]
