"""
Note resources for Anki MCP.
"""

from urllib.parse import unquote

from fastmcp import FastMCP

from anki_mcp.clients import get_anki_client
from anki_mcp.clients.anki_connect import AnkiConnectClient
from anki_mcp.utils.errors import ValidationError
from anki_mcp.utils.helpers import parse_id_list, to_json

from .common import DETAIL_LIMIT, JSON_MIME_TYPE, resource_error


async def _search_with_details(client: AnkiConnectClient, query: str) -> dict:
    """Find notes and fetch details for the first ``DETAIL_LIMIT`` of them."""
    note_ids = await client.note.find_notes(query=query)
    shown = note_ids[:DETAIL_LIMIT]
    notes = await client.note.notes_info(notes=shown) if shown else []
    return {
        "totalFound": len(note_ids),
        "displayedCount": len(shown),
        "noteIds": note_ids,
        "notes": notes,
    }


def register_note_resources(mcp: FastMCP) -> None:
    """Register note resources."""

    @mcp.resource("anki:///notes/tags", name="note_tags", mime_type=JSON_MIME_TYPE)
    async def note_tags() -> str:
        """All tags in the collection, sorted."""
        try:
            tags = await get_anki_client().note.get_tags()
        except Exception as e:
            raise resource_error(e, "get tags") from e
        return to_json(
            {
                "tags": sorted(tags),
                "count": len(tags),
                "description": "All available tags in the Anki collection",
            }
        )

    @mcp.resource("anki:///notes/{note_ids}/info", name="notes_info", mime_type=JSON_MIME_TYPE)
    async def notes_info(note_ids: str) -> str:
        """Fields, tags, model and cards of comma-separated notes."""
        try:
            ids = parse_id_list(note_ids, "note IDs")
            notes = await get_anki_client().note.notes_info(notes=ids)
        except Exception as e:
            raise resource_error(e, "get notes info") from e
        return to_json(
            {
                "notes": notes,
                "count": len(notes),
                "description": "Detailed information about the requested notes",
            }
        )

    @mcp.resource("anki:///notes/search/{query}", name="notes_search", mime_type=JSON_MIME_TYPE)
    async def notes_search(query: str) -> str:
        """Notes matching an Anki search query, with details for the first 50."""
        query = unquote(query)
        try:
            found = await _search_with_details(get_anki_client(), query)
        except Exception as e:
            raise resource_error(e, "search notes") from e
        return to_json(
            {
                "query": query,
                **found,
                "description": (
                    f'Search results for query: "{query}". '
                    f"Showing detailed info for first {DETAIL_LIMIT} notes."
                ),
            }
        )

    @mcp.resource("anki:///notes/tag/{tag}", name="notes_by_tag", mime_type=JSON_MIME_TYPE)
    async def notes_by_tag(tag: str) -> str:
        """Notes carrying a tag, with details for the first 50."""
        tag = unquote(tag)
        try:
            found = await _search_with_details(get_anki_client(), f"tag:{tag}")
        except Exception as e:
            raise resource_error(e, "get notes by tag") from e
        return to_json(
            {
                "tag": tag,
                **found,
                "description": (
                    f'Notes tagged with "{tag}". '
                    f"Showing detailed info for first {DETAIL_LIMIT} notes."
                ),
            }
        )

    @mcp.resource("anki:///notes/recent/{days}", name="notes_recent", mime_type=JSON_MIME_TYPE)
    async def notes_recent(days: str) -> str:
        """Notes edited in the last N days, with details for the first 50."""
        try:
            try:
                n_days = int(days)
            except ValueError:
                n_days = 0
            if n_days <= 0:
                raise ValidationError("Days must be a positive number")
            found = await _search_with_details(get_anki_client(), f"edited:{n_days}")
        except Exception as e:
            raise resource_error(e, "get recent notes") from e
        return to_json(
            {
                "days": n_days,
                **found,
                "description": (
                    f"Notes modified in the last {n_days} days. "
                    f"Showing detailed info for first {DETAIL_LIMIT} notes."
                ),
            }
        )

    @mcp.resource(
        "anki:///notes/{note_ids}/mod-times", name="notes_mod_times", mime_type=JSON_MIME_TYPE
    )
    async def notes_mod_times(note_ids: str) -> str:
        """Modification timestamps of comma-separated notes."""
        try:
            ids = parse_id_list(note_ids, "note IDs")
            mod_times = await get_anki_client().note.notes_mod_time(notes=ids)
        except Exception as e:
            raise resource_error(e, "get note modification times") from e
        return to_json(
            {
                "modificationTimes": mod_times,
                "count": len(mod_times),
                "description": "Modification timestamps for the requested notes",
            }
        )
