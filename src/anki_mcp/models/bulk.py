"""
Pydantic models for bulk operations.
"""

import json

from pydantic import BaseModel, Field, RootModel

from anki_mcp.settings import settings

from .common import BaseInput, Name

# -------------------- Results --------------------


class BatchError(BaseModel):
    """One failed item of a batch execution."""

    index: int = Field(..., description="Position of the item in the submitted sequence")
    item_id: int | str = Field(..., description="Note/card ID, or the index if none exists")
    error: str = Field(..., description="Error message raised by the item's operation")


class BatchOperationResult(BaseModel):
    """Aggregate outcome of one batch execution."""

    total_operations: int = Field(..., ge=0)
    successful: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)
    errors: list[BatchError] = Field(default_factory=list)

    @property
    def completed(self) -> bool:
        return self.successful + self.failed == self.total_operations


class RollbackSnapshot(RootModel[dict[int, list[str]]]):
    """
    Tags observed per note right before a destructive batch.

    Notes the remote service did not return are absent: a missing key
    means "unknown prior state", not "no tags".
    """

    root: dict[int, list[str]] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, note_id: object) -> bool:
        return note_id in self.root

    def __getitem__(self, note_id: int) -> list[str]:
        return self.root[note_id]

    def items(self):
        return self.root.items()

    def to_json(self) -> str:
        """Compact JSON accepted back by ``bulk_restore_tags``."""
        return json.dumps(
            {str(note_id): tags for note_id, tags in self.root.items()},
            ensure_ascii=False,
            separators=(",", ":"),
        )


# -------------------- Tool inputs --------------------


class NoteFieldUpdate(BaseInput):
    """New field values for one note."""

    note_id: int = Field(..., description="ID of the note to update")
    fields: dict[str, str] = Field(
        ..., description="Object with field names as keys and new field content as values"
    )


class _TagBulkInput(BaseInput):
    note_ids: list[int] = Field(..., description="Array of note IDs to operate on")
    batch_size: int = Field(
        default=settings.tag_batch_size,
        ge=1,
        description="Number of operations to process in each batch",
    )
    enable_rollback: bool = Field(
        default=False,
        description="Whether to enable rollback support (requires fetching current state first)",
    )


class BulkAddTagsInput(_TagBulkInput):
    """Input for bulk_add_tags."""

    tags: list[Name] = Field(..., min_length=1, description="Array of tags to add to all notes")


class BulkRemoveTagsInput(_TagBulkInput):
    """Input for bulk_remove_tags."""

    tags: list[Name] = Field(
        ..., min_length=1, description="Array of tags to remove from all notes"
    )


class BulkReplaceTagsInput(_TagBulkInput):
    """Input for bulk_replace_tags."""

    tag_to_replace: Name = Field(..., min_length=1, description="Tag to replace")
    replace_with_tag: Name = Field(..., min_length=1, description="Tag to replace with")


class BulkUpdateNoteFieldsInput(BaseInput):
    """Input for bulk_update_note_fields."""

    updates: list[NoteFieldUpdate] = Field(..., description="Array of note updates to apply")
    batch_size: int = Field(
        default=settings.field_batch_size,
        ge=1,
        description="Number of operations to process in each batch (lower for field updates)",
    )


class BulkMoveCardsInput(BaseInput):
    """Input for bulk_move_cards_to_deck."""

    card_ids: list[int] = Field(..., description="Array of card IDs to move")
    target_deck: Name = Field(
        ..., min_length=1, description="Name of the target deck to move cards to"
    )
    batch_size: int = Field(
        default=settings.card_batch_size,
        ge=1,
        description="Number of operations to process in each batch",
    )


class BulkSuspendCardsInput(BaseInput):
    """Input for bulk_suspend_cards."""

    card_ids: list[int] = Field(..., description="Array of card IDs to suspend or unsuspend")
    suspend: bool = Field(
        ..., description="Whether to suspend (true) or unsuspend (false) the cards"
    )
    batch_size: int = Field(
        default=settings.card_batch_size,
        ge=1,
        description="Number of operations to process in each batch",
    )


class SmartTagCleanupInput(BaseInput):
    """Input for smart_tag_cleanup."""

    note_ids: list[int] = Field(..., description="Array of note IDs to clean up tags for")
    patterns: list[str] = Field(
        ...,
        min_length=1,
        description='Array of regex patterns to match tags for removal (e.g., ["^temp_.*", "^old_.*"])',
    )
    dry_run: bool = Field(
        default=True,
        description="Whether to perform a dry run (show what would be removed without actually removing)",
    )
    batch_size: int = Field(
        default=settings.tag_batch_size,
        ge=1,
        description="Number of operations to process in each batch",
    )


class BulkRestoreTagsInput(BaseInput):
    """Input for bulk_restore_tags."""

    snapshot: dict[int, list[str]] = Field(
        ...,
        description=(
            "Rollback snapshot printed by a bulk tag operation: "
            "note IDs mapped to the tags they should have"
        ),
    )
    batch_size: int = Field(
        default=settings.tag_batch_size,
        ge=1,
        description="Number of operations to process in each batch",
    )
