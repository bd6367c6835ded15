"""Pydantic models for Anki MCP tool inputs and outputs."""

from .actions import ActionOutcome, AnkiAction, MultiInput
from .bulk import (
    BatchError,
    BatchOperationResult,
    BulkAddTagsInput,
    BulkMoveCardsInput,
    BulkRemoveTagsInput,
    BulkReplaceTagsInput,
    BulkRestoreTagsInput,
    BulkSuspendCardsInput,
    BulkUpdateNoteFieldsInput,
    NoteFieldUpdate,
    RollbackSnapshot,
    SmartTagCleanupInput,
)
from .common import BaseInput

__all__ = [
    # Common
    "BaseInput",
    # Bulk
    "BatchError",
    "BatchOperationResult",
    "RollbackSnapshot",
    "NoteFieldUpdate",
    "BulkAddTagsInput",
    "BulkRemoveTagsInput",
    "BulkReplaceTagsInput",
    "BulkUpdateNoteFieldsInput",
    "BulkMoveCardsInput",
    "BulkSuspendCardsInput",
    "SmartTagCleanupInput",
    "BulkRestoreTagsInput",
    # Multi
    "AnkiAction",
    "MultiInput",
    "ActionOutcome",
]
