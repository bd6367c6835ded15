"""
Review statistics resources for Anki MCP.
"""

from urllib.parse import unquote

from fastmcp import FastMCP

from anki_mcp.clients import get_anki_client
from anki_mcp.utils.errors import ValidationError
from anki_mcp.utils.helpers import parse_id_list, to_json

from .common import JSON_MIME_TYPE, resource_error


def register_statistic_resources(mcp: FastMCP) -> None:
    """Register review statistics resources."""

    @mcp.resource(
        "anki:///statistics/cards-reviewed-by-day",
        name="cards_reviewed_by_day",
        mime_type=JSON_MIME_TYPE,
    )
    async def cards_reviewed_by_day() -> str:
        """Review counts per day as [date, count] pairs."""
        try:
            days = await get_anki_client().statistic.get_num_cards_reviewed_by_day()
        except Exception as e:
            raise resource_error(e, "get cards reviewed by day") from e
        return to_json(days)

    @mcp.resource(
        "anki:///statistics/cards-reviewed-today",
        name="cards_reviewed_today",
        mime_type=JSON_MIME_TYPE,
    )
    async def cards_reviewed_today() -> str:
        try:
            count = await get_anki_client().statistic.get_num_cards_reviewed_today()
        except Exception as e:
            raise resource_error(e, "get cards reviewed today") from e
        return to_json({"cardsReviewedToday": count})

    @mcp.resource(
        "anki:///statistics/decks/{deck_name}/reviews/{start_id}",
        name="deck_reviews",
        mime_type=JSON_MIME_TYPE,
    )
    async def deck_reviews(deck_name: str, start_id: str) -> str:
        """Reviews of a deck with an ID greater than ``start_id``."""
        name = unquote(deck_name)
        try:
            try:
                start = int(start_id)
            except ValueError:
                raise ValidationError(f"Invalid start ID: {start_id}") from None
            reviews = await get_anki_client().statistic.card_reviews(deck=name, start_id=start)
        except Exception as e:
            raise resource_error(e, f'get reviews for deck "{name}"') from e
        return to_json(reviews)

    @mcp.resource(
        "anki:///statistics/decks/{deck_name}/latest-review-id",
        name="deck_latest_review_id",
        mime_type=JSON_MIME_TYPE,
    )
    async def deck_latest_review_id(deck_name: str) -> str:
        name = unquote(deck_name)
        try:
            review_id = await get_anki_client().statistic.get_latest_review_id(deck=name)
        except Exception as e:
            raise resource_error(e, f'get latest review ID for deck "{name}"') from e
        return to_json({"deck": name, "latestReviewID": review_id, "hasReviews": review_id > 0})

    @mcp.resource(
        "anki:///statistics/cards/{card_ids}/reviews",
        name="reviews_of_cards",
        mime_type=JSON_MIME_TYPE,
    )
    async def reviews_of_cards(card_ids: str) -> str:
        """Review history of comma-separated cards, keyed by card ID."""
        try:
            ids = parse_id_list(card_ids, "card IDs")
            reviews = await get_anki_client().statistic.get_reviews_of_cards(cards=ids)
        except Exception as e:
            raise resource_error(e, "get reviews of cards") from e
        return to_json(reviews)

    @mcp.resource(
        "anki:///statistics/collection/{whole_collection}",
        name="collection_stats",
        mime_type=JSON_MIME_TYPE,
    )
    async def collection_stats(whole_collection: str) -> str:
        """Anki's statistics report as HTML, for the whole collection ("true") or current deck."""
        whole = whole_collection.strip().lower() == "true"
        try:
            html = await get_anki_client().statistic.get_collection_stats_html(
                whole_collection=whole
            )
        except Exception as e:
            raise resource_error(e, "get collection statistics") from e
        return to_json({"wholeCollection": whole, "html": html})
