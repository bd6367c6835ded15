"""
MCP Tools for Anki.

This module registers all Anki MCP tools with the FastMCP server.
"""

import logging

from fastmcp import FastMCP

from anki_mcp.settings import settings

from .bulk import register_bulk_tools
from .cards import register_card_tools
from .decks import register_deck_tools
from .gui import register_gui_tools
from .media import register_media_tools
from .misc import register_misc_tools
from .note_types import register_note_type_tools
from .notes import register_note_tools
from .statistics import register_statistic_tools

logger = logging.getLogger(__name__)


def register_all_tools(mcp: FastMCP) -> None:
    """
    Register all Anki MCP tools.

    GUI, media and note type tools can be switched off through settings.

    Args:
        mcp: FastMCP server instance
    """
    register_bulk_tools(mcp)
    register_note_tools(mcp)
    register_deck_tools(mcp)
    register_card_tools(mcp)
    register_statistic_tools(mcp)
    register_misc_tools(mcp)

    if settings.enable_model_tools:
        register_note_type_tools(mcp)
    if settings.enable_media_tools:
        register_media_tools(mcp)
    if settings.enable_gui_tools:
        register_gui_tools(mcp)

    logger.debug(
        f"Registered tools (models={settings.enable_model_tools}, "
        f"media={settings.enable_media_tools}, gui={settings.enable_gui_tools})"
    )


__all__ = [
    "register_all_tools",
    "register_bulk_tools",
    "register_note_tools",
    "register_deck_tools",
    "register_card_tools",
    "register_note_type_tools",
    "register_media_tools",
    "register_statistic_tools",
    "register_gui_tools",
    "register_misc_tools",
]
