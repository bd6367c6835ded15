"""
Pre-change tag snapshots and their restoration.
"""

from collections.abc import Sequence
import logging

from anki_mcp.clients.anki_connect import AnkiConnectClient
from anki_mcp.models.bulk import BatchOperationResult, RollbackSnapshot
from anki_mcp.utils.errors import SnapshotError

from .executor import execute_batch_operation

logger = logging.getLogger(__name__)


async def collect_note_tags(
    client: AnkiConnectClient, note_ids: Sequence[int]
) -> RollbackSnapshot:
    """
    Capture the current tags of ``note_ids`` with a single notesInfo call.

    Args:
        client: AnkiConnect client
        note_ids: Notes about to be changed

    Returns:
        Snapshot of note ID -> tags. Notes AnkiConnect does not return
        (e.g. deleted meanwhile) are left out.

    Raises:
        SnapshotError: If the notesInfo call fails; no rollback point exists
    """
    if not note_ids:
        return RollbackSnapshot()

    try:
        notes_info = await client.note.notes_info(notes=list(note_ids))
    except Exception as e:
        raise SnapshotError(
            f"Failed to get current tags for rollback support: {e}"
        ) from e

    tags_by_note: dict[int, list[str]] = {}
    for note_info in notes_info or []:
        if note_info and note_info.get("noteId"):
            tags_by_note[note_info["noteId"]] = list(note_info.get("tags") or [])

    logger.info(f"Captured tags of {len(tags_by_note)}/{len(note_ids)} notes for rollback")
    return RollbackSnapshot(tags_by_note)


async def restore_note_tags(
    client: AnkiConnectClient,
    snapshot: RollbackSnapshot,
    batch_size: int | None = 50,
) -> BatchOperationResult:
    """
    Write a snapshot back: each note's tags are set to the captured list.

    One updateNoteTags call per note, run through the batch executor so
    one failing note does not stop the others.
    """
    entries = list(snapshot.items())

    async def _restore(entry: tuple[int, list[str]]) -> None:
        note_id, tags = entry
        await client.note.update_note_tags(note=note_id, tags=tags)

    return await execute_batch_operation(
        entries,
        _restore,
        batch_size=batch_size,
        item_id=lambda entry, _: entry[0],
        label="restore_tags",
    )
