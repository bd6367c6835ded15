"""MCP server entry point for anki-mcp."""

import logging

from fastmcp import FastMCP

from anki_mcp.clients import close_anki_client
from anki_mcp.resources import register_all_resources
from anki_mcp.settings import settings
from anki_mcp.tools import register_all_tools
from anki_mcp.utils.logging_config import initialize_logging

logger = logging.getLogger(__name__)

INSTRUCTIONS = """
Tools and resources for an Anki collection, reached through the AnkiConnect
add-on of a running Anki desktop application.

For changes over many notes or cards prefer the bulk tools (bulk_add_tags,
bulk_remove_tags, bulk_replace_tags, bulk_update_note_fields,
bulk_move_cards_to_deck, bulk_suspend_cards, smart_tag_cleanup): they work
in batches and report which items failed instead of stopping at the first
error. Run smart_tag_cleanup as a dry run first. Tag operations started with
enableRollback print a snapshot that bulk_restore_tags can put back.

Resources under anki:///decks, anki:///notes, anki:///cards, anki:///models
and anki:///statistics return JSON; ID lists are comma-separated.
"""


def create_server() -> FastMCP:
    """Build the FastMCP server with all tools and resources registered."""
    mcp = FastMCP(name=settings.server_name, instructions=INSTRUCTIONS)
    register_all_tools(mcp)
    register_all_resources(mcp)
    return mcp


async def serve() -> None:
    """Run the MCP server using stdio transport."""
    initialize_logging()
    mcp = create_server()
    logger.info(
        f"Starting {settings.server_name} v{settings.server_version} "
        f"(AnkiConnect at {settings.connect_url})"
    )
    try:
        await mcp.run_async(transport="stdio")
    finally:
        await close_anki_client()
