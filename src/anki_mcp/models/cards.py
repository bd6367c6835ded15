"""
Pydantic models for card tools.
"""

from typing import Literal

from pydantic import Field, model_validator

from .common import BaseInput, Name

CardKey = Literal[
    "data", "did", "due", "factor", "flags", "id", "ivl", "lapses", "left",
    "mod", "odid", "odue", "ord", "queue", "reps", "type", "usn",
]


class CardIdsInput(BaseInput):
    """Input for tools taking a list of card IDs."""

    card_ids: list[int] = Field(..., min_length=1, description="Array of card IDs")


class CardIdInput(BaseInput):
    """Input for tools taking a single card ID."""

    card_id: int = Field(..., description="Card ID")


class CardAnswer(BaseInput):
    card_id: int = Field(..., description="ID of the card to answer")
    ease: int = Field(..., ge=1, le=4, description="1 (Again), 2 (Hard), 3 (Good), 4 (Easy)")


class AnswerCardsInput(BaseInput):
    """Input for answer_cards."""

    answers: list[CardAnswer] = Field(..., min_length=1, description="Array of card answers")


class SetDueDateInput(BaseInput):
    """Input for set_cards_due_date."""

    card_ids: list[int] = Field(..., min_length=1, description="Array of card IDs")
    days: Name = Field(
        ...,
        min_length=1,
        description='Days from today, a range like "3-7", or "0!" to also reset the interval',
    )


class SetEaseFactorsInput(BaseInput):
    """Input for set_cards_ease_factors."""

    card_ids: list[int] = Field(..., min_length=1, description="Array of card IDs")
    ease_factors: list[int] = Field(
        ..., min_length=1, description="Ease factors (e.g. 2500 for 250%), one per card"
    )

    @model_validator(mode="after")
    def _lengths_match(self) -> "SetEaseFactorsInput":
        if len(self.card_ids) != len(self.ease_factors):
            raise ValueError("cardIds and easeFactors must have the same length")
        return self


class GetIntervalsInput(BaseInput):
    """Input for get_cards_intervals."""

    card_ids: list[int] = Field(..., min_length=1, description="Array of card IDs")
    complete: bool = Field(
        default=False, description="Return every interval of each card instead of the latest"
    )


class SetCardValuesInput(BaseInput):
    """Input for set_card_specific_values."""

    card_id: int = Field(..., description="Card ID to modify")
    keys: list[CardKey] = Field(..., min_length=1, description="Card properties to set")
    new_values: list[str] = Field(..., min_length=1, description="New values, one per key")

    @model_validator(mode="after")
    def _lengths_match(self) -> "SetCardValuesInput":
        if len(self.keys) != len(self.new_values):
            raise ValueError("keys and newValues must have the same length")
        return self
