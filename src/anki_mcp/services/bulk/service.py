"""
Bulk operation service.

Composes snapshot collection, pattern selection and the batch executor
into the named bulk operations exposed as MCP tools. Each method returns
the text report shown to the caller. Setup failures (invalid input,
snapshot failure, the initial notesInfo query of a cleanup) are raised;
per-item failures are reported.
"""

from collections.abc import Sequence
import logging

from anki_mcp.clients.anki_connect import AnkiConnectClient, get_anki_client
from anki_mcp.models.bulk import BatchOperationResult, NoteFieldUpdate, RollbackSnapshot
from anki_mcp.settings import settings
from anki_mcp.utils.logging_config import PerformanceMonitor, log_operation

from .executor import execute_batch_operation
from .report import format_bulk_operation_result, render_bulk_report
from .selector import compile_patterns, select_matching_tags
from .snapshot import collect_note_tags, restore_note_tags

logger = logging.getLogger(__name__)


class BulkOperationService:
    """Bulk tag, field, deck and suspension changes over many notes or cards."""

    def __init__(self, client: AnkiConnectClient | None = None):
        """
        Initialize the service.

        Args:
            client: Shared AnkiConnect client (defaults to the process-wide one)
        """
        self.client = client or get_anki_client()

    # -------------------- Helpers --------------------

    async def _snapshot_if_requested(
        self, note_ids: Sequence[int], enable_rollback: bool
    ) -> RollbackSnapshot | None:
        if not enable_rollback:
            return None
        return await collect_note_tags(self.client, note_ids)

    @staticmethod
    def _log_failures(operation: str, result: BatchOperationResult) -> None:
        for error in result.errors:
            log_operation(logger, operation, error.item_id, "error", error=error.error)

    # -------------------- Tag operations --------------------

    async def add_tags(
        self,
        note_ids: Sequence[int],
        tags: Sequence[str],
        batch_size: int = settings.tag_batch_size,
        enable_rollback: bool = False,
    ) -> str:
        """Add the same tags to every note, one addTags call per note."""
        tags_string = " ".join(tags)
        with PerformanceMonitor(logger, "bulk_add_tags", notes=len(note_ids)):
            snapshot = await self._snapshot_if_requested(note_ids, enable_rollback)

            async def _add(note_id: int) -> None:
                await self.client.note.add_tags(notes=[note_id], tags=tags_string)

            result = await execute_batch_operation(
                note_ids, _add, batch_size=batch_size, label="add_tags"
            )
        self._log_failures("add_tags", result)

        return render_bulk_report(
            "Bulk add tags operation completed.",
            result,
            details=[f"Tags added: [{', '.join(tags)}]"],
            snapshot=snapshot,
        )

    async def remove_tags(
        self,
        note_ids: Sequence[int],
        tags: Sequence[str],
        batch_size: int = settings.tag_batch_size,
        enable_rollback: bool = False,
    ) -> str:
        """Remove the same tags from every note, one removeTags call per note."""
        tags_string = " ".join(tags)
        with PerformanceMonitor(logger, "bulk_remove_tags", notes=len(note_ids)):
            snapshot = await self._snapshot_if_requested(note_ids, enable_rollback)

            async def _remove(note_id: int) -> None:
                await self.client.note.remove_tags(notes=[note_id], tags=tags_string)

            result = await execute_batch_operation(
                note_ids, _remove, batch_size=batch_size, label="remove_tags"
            )
        self._log_failures("remove_tags", result)

        return render_bulk_report(
            "Bulk remove tags operation completed.",
            result,
            details=[f"Tags removed: [{', '.join(tags)}]"],
            snapshot=snapshot,
        )

    async def replace_tags(
        self,
        note_ids: Sequence[int],
        tag_to_replace: str,
        replace_with_tag: str,
        batch_size: int = settings.tag_batch_size,
        enable_rollback: bool = False,
    ) -> str:
        """Replace one tag with another on every note."""
        with PerformanceMonitor(logger, "bulk_replace_tags", notes=len(note_ids)):
            snapshot = await self._snapshot_if_requested(note_ids, enable_rollback)

            async def _replace(note_id: int) -> None:
                await self.client.note.replace_tags(
                    notes=[note_id],
                    tag_to_replace=tag_to_replace,
                    replace_with_tag=replace_with_tag,
                )

            result = await execute_batch_operation(
                note_ids, _replace, batch_size=batch_size, label="replace_tags"
            )
        self._log_failures("replace_tags", result)

        return render_bulk_report(
            "Bulk replace tags operation completed.",
            result,
            details=[f'Replaced: "{tag_to_replace}" → "{replace_with_tag}"'],
            snapshot=snapshot,
        )

    async def restore_tags(
        self,
        snapshot: RollbackSnapshot,
        batch_size: int = settings.tag_batch_size,
    ) -> str:
        """Set each note's tags back to the ones recorded in ``snapshot``."""
        with PerformanceMonitor(logger, "bulk_restore_tags", notes=len(snapshot)):
            result = await restore_note_tags(self.client, snapshot, batch_size=batch_size)
        self._log_failures("restore_tags", result)
        return format_bulk_operation_result(result, "Bulk restore tags")

    # -------------------- Field, deck and card operations --------------------

    async def update_note_fields(
        self,
        updates: Sequence[NoteFieldUpdate],
        batch_size: int = settings.field_batch_size,
    ) -> str:
        """Apply per-note field values, one updateNote call per note."""
        with PerformanceMonitor(logger, "bulk_update_note_fields", notes=len(updates)):

            async def _update(update: NoteFieldUpdate) -> None:
                await self.client.note.update_note(
                    note={"id": update.note_id, "fields": update.fields}
                )

            result = await execute_batch_operation(
                updates,
                _update,
                batch_size=batch_size,
                item_id=lambda update, _: update.note_id,
                label="update_note_fields",
            )
        self._log_failures("update_note_fields", result)

        return render_bulk_report("Bulk update note fields operation completed.", result)

    async def move_cards_to_deck(
        self,
        card_ids: Sequence[int],
        target_deck: str,
        batch_size: int = settings.card_batch_size,
    ) -> str:
        """Move cards to ``target_deck``, one changeDeck call per card."""
        with PerformanceMonitor(logger, "bulk_move_cards_to_deck", cards=len(card_ids)):

            async def _move(card_id: int) -> None:
                await self.client.deck.change_deck(cards=[card_id], deck=target_deck)

            result = await execute_batch_operation(
                card_ids, _move, batch_size=batch_size, label="change_deck"
            )
        self._log_failures("change_deck", result)

        return render_bulk_report(
            "Bulk move cards to deck operation completed.",
            result,
            entity="Card",
            details=[f'Target deck: "{target_deck}"'],
        )

    async def suspend_cards(
        self,
        card_ids: Sequence[int],
        suspend: bool,
        batch_size: int = settings.card_batch_size,
    ) -> str:
        """Suspend or unsuspend cards, one call per card."""
        verb = "suspend" if suspend else "unsuspend"
        with PerformanceMonitor(logger, f"bulk_{verb}_cards", cards=len(card_ids)):

            async def _apply(card_id: int) -> None:
                if suspend:
                    await self.client.card.suspend(cards=[card_id])
                else:
                    await self.client.card.unsuspend(cards=[card_id])

            result = await execute_batch_operation(
                card_ids, _apply, batch_size=batch_size, label=verb
            )
        self._log_failures(verb, result)

        return render_bulk_report(
            f"Bulk {verb} cards operation completed.", result, entity="Card"
        )

    # -------------------- Smart cleanup --------------------

    async def smart_tag_cleanup(
        self,
        note_ids: Sequence[int],
        patterns: Sequence[str],
        dry_run: bool = True,
        batch_size: int = settings.tag_batch_size,
    ) -> str:
        """
        Remove the tags matching any of ``patterns`` from the given notes.

        Patterns are compiled before anything is fetched, so an invalid
        pattern fails the call without touching Anki. In dry-run mode only
        the notesInfo query is made and the planned removals are reported.

        Raises:
            PatternError: If a pattern is not a valid regular expression
        """
        compiled = compile_patterns(patterns)
        patterns_line = f"Patterns: [{', '.join(patterns)}]"

        notes_info = (
            await self.client.note.notes_info(notes=list(note_ids)) if note_ids else []
        )
        selection = select_matching_tags(notes_info, compiled)
        total_tags = sum(len(tags) for tags in selection.values())
        logger.info(
            f"smart_tag_cleanup: {total_tags} matching tags on {len(selection)} notes "
            f"(dry_run={dry_run})"
        )

        if dry_run:
            preview = "\n".join(
                f"Note {note_id}: {', '.join(tags)}" for note_id, tags in selection.items()
            )
            return (
                "Smart tag cleanup analysis (DRY RUN):\n"
                f"{patterns_line}\n"
                f"Notes analyzed: {len(note_ids)}\n"
                f"Notes with matching tags: {len(selection)}\n"
                f"Total tags to remove: {total_tags}\n"
                "\n"
                "Tags that would be removed:\n"
                f"{preview or 'No tags match the specified patterns'}"
            )

        async def _remove(entry: tuple[int, list[str]]) -> None:
            note_id, tags = entry
            await self.client.note.remove_tags(notes=[note_id], tags=" ".join(tags))

        with PerformanceMonitor(logger, "smart_tag_cleanup", notes=len(selection)):
            result = await execute_batch_operation(
                list(selection.items()),
                _remove,
                batch_size=batch_size,
                item_id=lambda entry, _: entry[0],
                label="smart_tag_cleanup",
            )
        self._log_failures("smart_tag_cleanup", result)

        failed_ids = {e.item_id for e in result.errors}
        removed = sum(
            len(tags) for note_id, tags in selection.items() if note_id not in failed_ids
        )
        return render_bulk_report(
            "Smart tag cleanup completed.",
            result,
            details=[patterns_line],
            extra=[f"Total tags removed: {removed}"],
        )
