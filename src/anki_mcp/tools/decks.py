"""
Deck tools for Anki MCP.
"""

from fastmcp import Context, FastMCP

from anki_mcp.clients import get_anki_client
from anki_mcp.models.decks import (
    ChangeDeckInput,
    CloneDeckConfigInput,
    CreateDeckInput,
    DeckConfigIdInput,
    DeleteDecksInput,
    SaveDeckConfigInput,
    SetDeckConfigInput,
)
from anki_mcp.utils.helpers import format_id_list

from .common import annotations, run_anki_call


def register_deck_tools(mcp: FastMCP) -> None:
    """Register deck and deck configuration tools."""

    @mcp.tool(name="create_deck", annotations=annotations("Create Deck", idempotent=True))
    async def create_deck(params: CreateDeckInput, ctx: Context) -> str:
        """Create a deck. Existing decks are left untouched and their ID is returned."""
        deck_id = await run_anki_call(
            ctx, "create deck", get_anki_client().deck.create_deck(deck=params.deck_name)
        )
        return f'Successfully created deck "{params.deck_name}" with ID: {deck_id}'

    @mcp.tool(name="delete_decks", annotations=annotations("Delete Decks", destructive=True))
    async def delete_decks(params: DeleteDecksInput, ctx: Context) -> str:
        """Delete decks, including their cards unless ``deleteCards`` is false."""
        await run_anki_call(
            ctx,
            "delete decks",
            get_anki_client().deck.delete_decks(
                decks=params.deck_names, cards_too=params.delete_cards
            ),
        )
        suffix = " and their cards" if params.delete_cards else ""
        return (
            f"Successfully deleted {len(params.deck_names)} decks{suffix}: "
            f"[{', '.join(params.deck_names)}]"
        )

    @mcp.tool(name="change_deck", annotations=annotations("Change Deck", idempotent=True))
    async def change_deck(params: ChangeDeckInput, ctx: Context) -> str:
        """Move cards to a deck in a single request (creating the deck if needed)."""
        await run_anki_call(
            ctx,
            "change deck",
            get_anki_client().deck.change_deck(cards=params.card_ids, deck=params.target_deck),
        )
        return (
            f'Successfully moved {len(params.card_ids)} cards to deck "{params.target_deck}": '
            f"{format_id_list(params.card_ids)}"
        )

    @mcp.tool(name="clone_deck_config", annotations=annotations("Clone Deck Config"))
    async def clone_deck_config(params: CloneDeckConfigInput, ctx: Context) -> str:
        """Create a new deck configuration group as a copy of an existing one."""
        config_id = await run_anki_call(
            ctx,
            "clone deck config",
            get_anki_client().deck.clone_deck_config_id(
                name=params.new_config_name, clone_from=params.source_config_id
            ),
        )
        if config_id is False:
            return f"Deck configuration {params.source_config_id} does not exist"
        return (
            f'Successfully cloned deck configuration {params.source_config_id} '
            f'as "{params.new_config_name}" with ID: {config_id}'
        )

    @mcp.tool(
        name="remove_deck_config",
        annotations=annotations("Remove Deck Config", destructive=True, idempotent=True),
    )
    async def remove_deck_config(params: DeckConfigIdInput, ctx: Context) -> str:
        """Remove a deck configuration group. Decks using it fall back to the default."""
        removed = await run_anki_call(
            ctx,
            "remove deck config",
            get_anki_client().deck.remove_deck_config_id(config_id=params.config_id),
        )
        if not removed:
            return f"Deck configuration {params.config_id} was not removed (it may not exist)"
        return f"Successfully removed deck configuration {params.config_id}"

    @mcp.tool(
        name="save_deck_config", annotations=annotations("Save Deck Config", idempotent=True)
    )
    async def save_deck_config(params: SaveDeckConfigInput, ctx: Context) -> str:
        """
        Save a modified deck configuration group.

        Read the current configuration from the ``anki:///decks/{deck_name}/config``
        resource, change it, and pass the whole object back.
        """
        saved = await run_anki_call(
            ctx,
            "save deck config",
            get_anki_client().deck.save_deck_config(config=params.config),
        )
        config_id = params.config.get("id", "unknown")
        if not saved:
            return f"Deck configuration {config_id} was not saved (it may not exist)"
        return f"Successfully saved deck configuration {config_id}"

    @mcp.tool(
        name="set_deck_config", annotations=annotations("Set Deck Config", idempotent=True)
    )
    async def set_deck_config(params: SetDeckConfigInput, ctx: Context) -> str:
        """Apply a deck configuration group to decks."""
        applied = await run_anki_call(
            ctx,
            "set deck config",
            get_anki_client().deck.set_deck_config_id(
                decks=params.deck_names, config_id=params.config_id
            ),
        )
        if not applied:
            return f"Deck configuration {params.config_id} could not be applied"
        return (
            f"Successfully applied deck configuration {params.config_id} to "
            f"[{', '.join(params.deck_names)}]"
        )
