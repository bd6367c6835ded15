"""
MCP Resources for Anki.

Read-only JSON views of decks, notes, cards, note types and statistics.
"""

from fastmcp import FastMCP

from anki_mcp.settings import settings

from .cards import register_card_resources
from .decks import register_deck_resources
from .note_types import register_note_type_resources
from .notes import register_note_resources
from .statistics import register_statistic_resources


def register_all_resources(mcp: FastMCP) -> None:
    """
    Register all Anki MCP resources.

    Args:
        mcp: FastMCP server instance
    """
    register_deck_resources(mcp)
    register_note_resources(mcp)
    register_card_resources(mcp)
    register_statistic_resources(mcp)
    if settings.enable_model_tools:
        register_note_type_resources(mcp)


__all__ = [
    "register_all_resources",
    "register_deck_resources",
    "register_note_resources",
    "register_card_resources",
    "register_note_type_resources",
    "register_statistic_resources",
]
