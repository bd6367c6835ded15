"""
Card resources for Anki MCP.
"""

from urllib.parse import unquote

from fastmcp import FastMCP

from anki_mcp.clients import get_anki_client
from anki_mcp.utils.helpers import parse_id_list, to_json

from .common import JSON_MIME_TYPE, resource_error


def _by_card(card_ids: list[int], values: list) -> dict[str, object]:
    return {str(card_id): value for card_id, value in zip(card_ids, values)}


def register_card_resources(mcp: FastMCP) -> None:
    """Register card resources."""

    @mcp.resource("anki:///cards/search/{query}", name="cards_search", mime_type=JSON_MIME_TYPE)
    async def cards_search(query: str) -> str:
        """IDs of cards matching an Anki search query."""
        query = unquote(query)
        try:
            card_ids = await get_anki_client().card.find_cards(query=query)
        except Exception as e:
            raise resource_error(e, "find cards") from e
        return to_json({"query": query, "cardIds": card_ids, "count": len(card_ids)})

    @mcp.resource("anki:///cards/{card_ids}/info", name="cards_info", mime_type=JSON_MIME_TYPE)
    async def cards_info(card_ids: str) -> str:
        """Full details of comma-separated cards."""
        try:
            ids = parse_id_list(card_ids, "card IDs")
            cards = await get_anki_client().card.cards_info(cards=ids)
        except Exception as e:
            raise resource_error(e, "get cards info") from e
        return to_json({"cards": cards, "count": len(cards)})

    @mcp.resource("anki:///cards/{card_ids}/due", name="cards_due", mime_type=JSON_MIME_TYPE)
    async def cards_due(card_ids: str) -> str:
        """Whether each card is due."""
        try:
            ids = parse_id_list(card_ids, "card IDs")
            due = await get_anki_client().card.are_due(cards=ids)
        except Exception as e:
            raise resource_error(e, "check if cards are due") from e
        return to_json({"due": _by_card(ids, due), "dueCount": sum(1 for d in due if d)})

    @mcp.resource(
        "anki:///cards/{card_ids}/suspended", name="cards_suspended", mime_type=JSON_MIME_TYPE
    )
    async def cards_suspended(card_ids: str) -> str:
        """Whether each card is suspended (null for unknown cards)."""
        try:
            ids = parse_id_list(card_ids, "card IDs")
            suspended = await get_anki_client().card.are_suspended(cards=ids)
        except Exception as e:
            raise resource_error(e, "check if cards are suspended") from e
        return to_json(
            {
                "suspended": _by_card(ids, suspended),
                "suspendedCount": sum(1 for s in suspended if s),
            }
        )

    @mcp.resource(
        "anki:///cards/{card_ids}/mod-time", name="cards_mod_time", mime_type=JSON_MIME_TYPE
    )
    async def cards_mod_time(card_ids: str) -> str:
        try:
            ids = parse_id_list(card_ids, "card IDs")
            mod_times = await get_anki_client().card.cards_mod_time(cards=ids)
        except Exception as e:
            raise resource_error(e, "get cards modification time") from e
        return to_json({"modificationTimes": mod_times, "count": len(mod_times)})

    @mcp.resource("anki:///cards/{card_ids}/notes", name="cards_notes", mime_type=JSON_MIME_TYPE)
    async def cards_notes(card_ids: str) -> str:
        """IDs of the notes the cards belong to."""
        try:
            ids = parse_id_list(card_ids, "card IDs")
            note_ids = await get_anki_client().card.cards_to_notes(cards=ids)
        except Exception as e:
            raise resource_error(e, "get note IDs from cards") from e
        return to_json({"cardIds": ids, "noteIds": note_ids, "count": len(note_ids)})

    @mcp.resource(
        "anki:///cards/{card_ids}/ease-factors",
        name="cards_ease_factors",
        mime_type=JSON_MIME_TYPE,
    )
    async def cards_ease_factors(card_ids: str) -> str:
        try:
            ids = parse_id_list(card_ids, "card IDs")
            factors = await get_anki_client().card.get_ease_factors(cards=ids)
        except Exception as e:
            raise resource_error(e, "get ease factors") from e
        return to_json({"easeFactors": _by_card(ids, factors)})

    @mcp.resource(
        "anki:///cards/{card_ids}/intervals", name="cards_intervals", mime_type=JSON_MIME_TYPE
    )
    async def cards_intervals(card_ids: str) -> str:
        """Most recent interval of each card (negative: seconds, positive: days)."""
        try:
            ids = parse_id_list(card_ids, "card IDs")
            intervals = await get_anki_client().card.get_intervals(cards=ids)
        except Exception as e:
            raise resource_error(e, "get intervals") from e
        return to_json({"intervals": _by_card(ids, intervals)})
