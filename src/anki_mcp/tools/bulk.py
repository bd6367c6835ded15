"""
Bulk operation tools for Anki MCP.

Each tool applies one change to many notes or cards through the batch
executor and reports per-item successes and failures as text.
"""

from fastmcp import Context, FastMCP
from mcp.types import ToolAnnotations

from anki_mcp.models.bulk import (
    BulkAddTagsInput,
    BulkMoveCardsInput,
    BulkRemoveTagsInput,
    BulkReplaceTagsInput,
    BulkRestoreTagsInput,
    BulkSuspendCardsInput,
    BulkUpdateNoteFieldsInput,
    RollbackSnapshot,
    SmartTagCleanupInput,
)
from anki_mcp.services import get_bulk_service

from .common import tool_error


def register_bulk_tools(mcp: FastMCP) -> None:
    """Register bulk operation tools."""

    @mcp.tool(
        name="bulk_add_tags",
        annotations=ToolAnnotations(
            title="Bulk Add Tags",
            readOnlyHint=False,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def bulk_add_tags(params: BulkAddTagsInput, ctx: Context) -> str:
        """
        Add tags to many notes with batch processing and error aggregation.

        Notes are processed in batches of ``batchSize``; a failing note does
        not stop the others. With ``enableRollback`` the current tags are
        captured first and printed as a snapshot that ``bulk_restore_tags``
        accepts.

        Example:
            Use when: "Tag these 300 notes with 'exam-2024'"
        """
        try:
            await ctx.info(f"Adding tags to {len(params.note_ids)} notes")
            return await get_bulk_service().add_tags(
                params.note_ids,
                params.tags,
                batch_size=params.batch_size,
                enable_rollback=params.enable_rollback,
            )
        except Exception as e:
            raise await tool_error(ctx, e, "bulk add tags operation") from e

    @mcp.tool(
        name="bulk_remove_tags",
        annotations=ToolAnnotations(
            title="Bulk Remove Tags",
            readOnlyHint=False,
            destructiveHint=True,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def bulk_remove_tags(params: BulkRemoveTagsInput, ctx: Context) -> str:
        """Remove tags from many notes with batch processing and error aggregation."""
        try:
            await ctx.info(f"Removing tags from {len(params.note_ids)} notes")
            return await get_bulk_service().remove_tags(
                params.note_ids,
                params.tags,
                batch_size=params.batch_size,
                enable_rollback=params.enable_rollback,
            )
        except Exception as e:
            raise await tool_error(ctx, e, "bulk remove tags operation") from e

    @mcp.tool(
        name="bulk_replace_tags",
        annotations=ToolAnnotations(
            title="Bulk Replace Tags",
            readOnlyHint=False,
            destructiveHint=True,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def bulk_replace_tags(params: BulkReplaceTagsInput, ctx: Context) -> str:
        """Replace one tag with another across many notes."""
        try:
            await ctx.info(
                f'Replacing "{params.tag_to_replace}" in {len(params.note_ids)} notes'
            )
            return await get_bulk_service().replace_tags(
                params.note_ids,
                params.tag_to_replace,
                params.replace_with_tag,
                batch_size=params.batch_size,
                enable_rollback=params.enable_rollback,
            )
        except Exception as e:
            raise await tool_error(ctx, e, "bulk replace tags operation") from e

    @mcp.tool(
        name="bulk_update_note_fields",
        annotations=ToolAnnotations(
            title="Bulk Update Note Fields",
            readOnlyHint=False,
            destructiveHint=True,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def bulk_update_note_fields(
        params: BulkUpdateNoteFieldsInput, ctx: Context
    ) -> str:
        """
        Update fields of many notes, each note with its own field values.

        Uses a smaller default batch size than the tag tools since every
        update rewrites the whole note.
        """
        try:
            await ctx.info(f"Updating fields of {len(params.updates)} notes")
            return await get_bulk_service().update_note_fields(
                params.updates, batch_size=params.batch_size
            )
        except Exception as e:
            raise await tool_error(ctx, e, "bulk update note fields operation") from e

    @mcp.tool(
        name="bulk_move_cards_to_deck",
        annotations=ToolAnnotations(
            title="Bulk Move Cards To Deck",
            readOnlyHint=False,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def bulk_move_cards_to_deck(params: BulkMoveCardsInput, ctx: Context) -> str:
        """Move many cards to a deck with batch processing and error aggregation."""
        try:
            await ctx.info(
                f'Moving {len(params.card_ids)} cards to "{params.target_deck}"'
            )
            return await get_bulk_service().move_cards_to_deck(
                params.card_ids, params.target_deck, batch_size=params.batch_size
            )
        except Exception as e:
            raise await tool_error(ctx, e, "bulk move cards operation") from e

    @mcp.tool(
        name="bulk_suspend_cards",
        annotations=ToolAnnotations(
            title="Bulk Suspend Cards",
            readOnlyHint=False,
            destructiveHint=False,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def bulk_suspend_cards(params: BulkSuspendCardsInput, ctx: Context) -> str:
        """Suspend (``suspend=true``) or unsuspend many cards."""
        verb = "suspend" if params.suspend else "unsuspend"
        try:
            return await get_bulk_service().suspend_cards(
                params.card_ids, params.suspend, batch_size=params.batch_size
            )
        except Exception as e:
            raise await tool_error(ctx, e, f"bulk {verb} cards operation") from e

    @mcp.tool(
        name="smart_tag_cleanup",
        annotations=ToolAnnotations(
            title="Smart Tag Cleanup",
            readOnlyHint=False,
            destructiveHint=True,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def smart_tag_cleanup(params: SmartTagCleanupInput, ctx: Context) -> str:
        """
        Remove tags matching regular expressions from many notes.

        Runs as a dry run by default: the matching tags are listed per note
        and nothing is changed. Set ``dryRun`` to false to remove them.

        Example:
            Use when: "Remove every tag starting with temp_ from these notes"
        """
        try:
            return await get_bulk_service().smart_tag_cleanup(
                params.note_ids,
                params.patterns,
                dry_run=params.dry_run,
                batch_size=params.batch_size,
            )
        except Exception as e:
            raise await tool_error(ctx, e, "smart tag cleanup") from e

    @mcp.tool(
        name="bulk_restore_tags",
        annotations=ToolAnnotations(
            title="Bulk Restore Tags",
            readOnlyHint=False,
            destructiveHint=True,
            idempotentHint=True,
            openWorldHint=False,
        ),
    )
    async def bulk_restore_tags(params: BulkRestoreTagsInput, ctx: Context) -> str:
        """
        Restore note tags from a rollback snapshot.

        Pass the ``Rollback snapshot`` object printed by ``bulk_add_tags``,
        ``bulk_remove_tags`` or ``bulk_replace_tags`` when they ran with
        ``enableRollback``. Each note's tags are set to the recorded list.
        """
        try:
            await ctx.info(f"Restoring tags of {len(params.snapshot)} notes")
            return await get_bulk_service().restore_tags(
                RollbackSnapshot(params.snapshot), batch_size=params.batch_size
            )
        except Exception as e:
            raise await tool_error(ctx, e, "bulk restore tags operation") from e
