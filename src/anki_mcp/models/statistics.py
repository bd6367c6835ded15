"""
Pydantic models for statistics tools.
"""

from pydantic import Field

from .common import BaseInput, Name


class CollectionStatsInput(BaseInput):
    whole_collection: bool = Field(
        default=True, description="Report on the whole collection instead of the current deck"
    )


class CardReviewsInput(BaseInput):
    """Input for card_reviews."""

    deck_name: Name = Field(..., min_length=1, description="Deck to read reviews from")
    start_id: int = Field(
        default=0, ge=0, description="Only return reviews with an ID greater than this"
    )


class DeckNameInput(BaseInput):
    deck_name: Name = Field(..., min_length=1, description="Name of the deck")


class ReviewsOfCardsInput(BaseInput):
    card_ids: list[int] = Field(..., min_length=1, description="Array of card IDs")


class InsertReviewsInput(BaseInput):
    """Input for insert_reviews."""

    reviews: list[list[int | float]] = Field(
        ...,
        min_length=1,
        description=(
            "Review rows: [reviewTime, cardID, usn, buttonPressed, newInterval, "
            "previousInterval, newFactor, reviewDuration, reviewType]"
        ),
    )
