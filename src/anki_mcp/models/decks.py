"""
Pydantic models for deck tools.
"""

from typing import Any

from pydantic import Field

from .common import BaseInput, Name


class CreateDeckInput(BaseInput):
    """Input for create_deck."""

    deck_name: Name = Field(..., min_length=1, description="Name of the deck to create")


class DeleteDecksInput(BaseInput):
    """Input for delete_decks."""

    deck_names: list[Name] = Field(..., min_length=1, description="Array of deck names to delete")
    delete_cards: bool = Field(
        default=True, description="Whether to delete the cards in the decks as well"
    )


class ChangeDeckInput(BaseInput):
    """Input for change_deck."""

    card_ids: list[int] = Field(..., min_length=1, description="Array of card IDs to move")
    target_deck: Name = Field(
        ..., min_length=1, description="Name of the target deck to move cards to"
    )


class CloneDeckConfigInput(BaseInput):
    """Input for clone_deck_config."""

    source_config_id: int = Field(..., description="ID of the deck configuration to clone from")
    new_config_name: Name = Field(
        ..., min_length=1, description="Name for the new cloned configuration"
    )


class DeckConfigIdInput(BaseInput):
    """Input for remove_deck_config."""

    config_id: int = Field(..., description="ID of the deck configuration")


class SaveDeckConfigInput(BaseInput):
    """Input for save_deck_config."""

    config: dict[str, Any] = Field(
        ...,
        description=(
            "Full deck configuration object as returned by the deck config resource "
            "(must include its id)"
        ),
    )


class SetDeckConfigInput(BaseInput):
    """Input for set_deck_config."""

    config_id: int = Field(..., description="ID of the configuration to apply")
    deck_names: list[Name] = Field(
        ..., min_length=1, description="Array of deck names to apply the configuration to"
    )
