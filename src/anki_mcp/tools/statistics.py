"""
Review statistics tools for Anki MCP.
"""

from fastmcp import Context, FastMCP

from anki_mcp.clients import get_anki_client
from anki_mcp.models.statistics import (
    CardReviewsInput,
    CollectionStatsInput,
    DeckNameInput,
    InsertReviewsInput,
    ReviewsOfCardsInput,
)
from anki_mcp.utils.helpers import to_json

from .common import annotations, run_anki_call


def register_statistic_tools(mcp: FastMCP) -> None:
    """Register review statistics tools."""

    @mcp.tool(
        name="get_num_cards_reviewed_today",
        annotations=annotations("Cards Reviewed Today", read_only=True),
    )
    async def get_num_cards_reviewed_today(ctx: Context) -> str:
        count = await run_anki_call(
            ctx,
            "get cards reviewed today",
            get_anki_client().statistic.get_num_cards_reviewed_today(),
        )
        return f"Cards reviewed today: {count}"

    @mcp.tool(
        name="get_num_cards_reviewed_by_day",
        annotations=annotations("Cards Reviewed By Day", read_only=True),
    )
    async def get_num_cards_reviewed_by_day(ctx: Context) -> str:
        """Number of reviews per day, most recent first."""
        days = await run_anki_call(
            ctx,
            "get cards reviewed by day",
            get_anki_client().statistic.get_num_cards_reviewed_by_day(),
        )
        if not days:
            return "No reviews recorded"
        return "\n".join(f"{day}: {count}" for day, count in days)

    @mcp.tool(
        name="get_collection_stats_html",
        annotations=annotations("Collection Statistics", read_only=True),
    )
    async def get_collection_stats_html(params: CollectionStatsInput, ctx: Context) -> str:
        """Return Anki's statistics report as HTML."""
        return await run_anki_call(
            ctx,
            "get collection statistics",
            get_anki_client().statistic.get_collection_stats_html(
                whole_collection=params.whole_collection
            ),
        )

    @mcp.tool(name="card_reviews", annotations=annotations("Deck Reviews", read_only=True))
    async def card_reviews(params: CardReviewsInput, ctx: Context) -> str:
        """
        List reviews of a deck after a given review ID.

        Each row is [reviewTime, cardID, usn, buttonPressed, newInterval,
        previousInterval, newFactor, reviewDuration, reviewType].
        """
        reviews = await run_anki_call(
            ctx,
            "get deck reviews",
            get_anki_client().statistic.card_reviews(
                deck=params.deck_name, start_id=params.start_id
            ),
        )
        return f'{len(reviews)} reviews in "{params.deck_name}":\n{to_json(reviews)}'

    @mcp.tool(
        name="get_reviews_of_cards", annotations=annotations("Card Reviews", read_only=True)
    )
    async def get_reviews_of_cards(params: ReviewsOfCardsInput, ctx: Context) -> str:
        reviews = await run_anki_call(
            ctx,
            "get card reviews",
            get_anki_client().statistic.get_reviews_of_cards(cards=params.card_ids),
        )
        return to_json(reviews)

    @mcp.tool(
        name="get_latest_review_id",
        annotations=annotations("Latest Review ID", read_only=True),
    )
    async def get_latest_review_id(params: DeckNameInput, ctx: Context) -> str:
        review_id = await run_anki_call(
            ctx,
            "get latest review ID",
            get_anki_client().statistic.get_latest_review_id(deck=params.deck_name),
        )
        return f'Latest review ID in "{params.deck_name}": {review_id}'

    @mcp.tool(name="insert_reviews", annotations=annotations("Insert Reviews"))
    async def insert_reviews(params: InsertReviewsInput, ctx: Context) -> str:
        """Insert review rows into the revlog, e.g. when migrating history."""
        await run_anki_call(
            ctx,
            "insert reviews",
            get_anki_client().statistic.insert_reviews(reviews=params.reviews),
        )
        return f"Successfully inserted {len(params.reviews)} reviews"
