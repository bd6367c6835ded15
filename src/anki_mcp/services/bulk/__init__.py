"""
Bulk operation engine: chunked execution, tag snapshots, pattern selection.
"""

from .executor import chunked, default_item_id, execute_batch_operation
from .report import format_bulk_operation_result, render_bulk_report
from .selector import compile_patterns, match_tags, select_matching_tags
from .service import BulkOperationService
from .snapshot import collect_note_tags, restore_note_tags

__all__ = [
    "BulkOperationService",
    "execute_batch_operation",
    "chunked",
    "default_item_id",
    "collect_note_tags",
    "restore_note_tags",
    "compile_patterns",
    "match_tags",
    "select_matching_tags",
    "render_bulk_report",
    "format_bulk_operation_result",
]
