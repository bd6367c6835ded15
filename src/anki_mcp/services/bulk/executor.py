"""
Chunked batch execution with per-item error isolation.

AnkiConnect has no transactional batch primitive, so a bulk change is
applied as many independent single-item calls. Items are split into
chunks; chunks run one after another and the items of a chunk run
concurrently. Every item ends up counted exactly once, as a success or
as an entry in ``errors``.
"""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
import logging
from typing import Any, TypeVar

from anki_mcp.models.bulk import BatchError, BatchOperationResult
from anki_mcp.utils.errors import ValidationError

T = TypeVar("T")

logger = logging.getLogger(__name__)

ItemOperation = Callable[[T], Awaitable[Any]]
ItemIdGetter = Callable[[T, int], int | str]


def default_item_id(item: Any, index: int) -> int | str:
    """
    Identify an item for error reporting.

    Plain IDs identify themselves; payloads are identified by their
    ``note_id``/``card_id`` (attribute or key); anything else by position.
    """
    if isinstance(item, (int, str)) and not isinstance(item, bool):
        return item
    for name in ("note_id", "card_id", "noteId", "cardId"):
        if isinstance(item, dict) and item.get(name) is not None:
            return item[name]
        value = getattr(item, name, None)
        if value is not None:
            return value
    return index


def chunked(items: Sequence[T], size: int) -> list[Sequence[T]]:
    """
    Split a sequence into consecutive chunks of at most ``size`` items.

    Examples:
        >>> chunked([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
    """
    return [items[i : i + size] for i in range(0, len(items), size)]


async def execute_batch_operation(
    items: Sequence[T],
    operation: ItemOperation,
    batch_size: int | None = 50,
    item_id: ItemIdGetter | None = None,
    label: str = "batch",
) -> BatchOperationResult:
    """
    Apply ``operation`` to every item, chunk by chunk.

    Args:
        items: Items to process, in submission order (may be empty)
        operation: Async callable applied to one item; any exception it
            raises is recorded against that item only
        batch_size: Maximum chunk size; ``None`` runs every item in one chunk
        item_id: Maps (item, index) to the identifier shown in errors
        label: Operation name used in log messages

    Returns:
        BatchOperationResult with ``successful + failed == len(items)``.
        Within a chunk, ``errors`` is in settlement order.

    Raises:
        ValidationError: If ``batch_size`` is not a positive integer
    """
    if batch_size is not None and (isinstance(batch_size, bool) or batch_size < 1):
        raise ValidationError(f"Batch size must be a positive integer, got {batch_size!r}")

    get_id = item_id or default_item_id
    result = BatchOperationResult(total_operations=len(items))
    if not items:
        return result

    size = batch_size or len(items)
    chunks = chunked(items, size)
    logger.debug(f"{label}: {len(items)} items in {len(chunks)} chunk(s) of <= {size}")

    async def _run_one(item: T, index: int) -> None:
        try:
            await operation(item)
        except Exception as e:
            result.failed += 1
            result.errors.append(
                BatchError(
                    index=index,
                    item_id=get_id(item, index),
                    error=str(e) or type(e).__name__,
                )
            )
        else:
            result.successful += 1

    for chunk_number, chunk in enumerate(chunks):
        offset = chunk_number * size
        await asyncio.gather(
            *(_run_one(item, offset + position) for position, item in enumerate(chunk))
        )

    if result.failed:
        logger.warning(
            f"{label}: {result.failed}/{result.total_operations} operations failed"
        )
    return result
