"""
Deck resources for Anki MCP.
"""

from urllib.parse import unquote

from fastmcp import FastMCP

from anki_mcp.clients import get_anki_client
from anki_mcp.utils.helpers import parse_id_list, parse_name_list, to_json

from .common import JSON_MIME_TYPE, resource_error


def register_deck_resources(mcp: FastMCP) -> None:
    """Register deck resources."""

    @mcp.resource("anki:///decks/names", name="deck_names", mime_type=JSON_MIME_TYPE)
    async def deck_names() -> str:
        """All deck names in the collection."""
        try:
            names = await get_anki_client().deck.deck_names()
        except Exception as e:
            raise resource_error(e, "get deck names") from e
        return to_json(names)

    @mcp.resource(
        "anki:///decks/names-and-ids", name="deck_names_and_ids", mime_type=JSON_MIME_TYPE
    )
    async def deck_names_and_ids() -> str:
        """Deck names mapped to deck IDs."""
        try:
            decks = await get_anki_client().deck.deck_names_and_ids()
        except Exception as e:
            raise resource_error(e, "get deck names and IDs") from e
        return to_json(decks)

    @mcp.resource(
        "anki:///decks/{deck_name}/config", name="deck_config", mime_type=JSON_MIME_TYPE
    )
    async def deck_config(deck_name: str) -> str:
        """
        Configuration group of a deck.

        Edit the returned object and pass it to ``save_deck_config`` to
        change new-card limits, learning steps and similar options.
        """
        name = unquote(deck_name)
        try:
            config = await get_anki_client().deck.get_deck_config(deck=name)
        except Exception as e:
            raise resource_error(e, f'get deck config for "{name}"') from e
        return to_json(config)

    @mcp.resource(
        "anki:///decks/{deck_names}/stats", name="deck_stats", mime_type=JSON_MIME_TYPE
    )
    async def deck_stats(deck_names: str) -> str:
        """New, learning and review counts of comma-separated decks."""
        names = parse_name_list(deck_names)
        try:
            stats = await get_anki_client().deck.get_deck_stats(decks=names)
        except Exception as e:
            raise resource_error(e, f"get deck stats for \"{', '.join(names)}\"") from e
        return to_json(stats)

    @mcp.resource(
        "anki:///decks/by-cards/{card_ids}", name="decks_by_cards", mime_type=JSON_MIME_TYPE
    )
    async def decks_by_cards(card_ids: str) -> str:
        """Deck names mapped to the given card IDs they contain."""
        try:
            ids = parse_id_list(card_ids, "card IDs")
            decks = await get_anki_client().deck.get_decks(cards=ids)
        except Exception as e:
            raise resource_error(e, "get decks for cards") from e
        return to_json(decks)
