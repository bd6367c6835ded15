"""Tests for the chunked batch executor."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from anki_mcp.models.bulk import NoteFieldUpdate
from anki_mcp.services.bulk.executor import (
    chunked,
    default_item_id,
    execute_batch_operation,
)
from anki_mcp.utils.errors import ValidationError


@pytest.mark.asyncio
async def test_all_items_succeed():
    operation = AsyncMock(return_value=None)

    result = await execute_batch_operation([1, 2, 3, 4, 5], operation, batch_size=2)

    assert result.total_operations == 5
    assert result.successful == 5
    assert result.failed == 0
    assert result.errors == []
    assert result.completed
    assert operation.await_count == 5


@pytest.mark.asyncio
async def test_all_items_fail():
    operation = AsyncMock(side_effect=RuntimeError("collection is locked"))

    result = await execute_batch_operation([7, 8, 9], operation)

    assert result.successful == 0
    assert result.failed == 3
    assert sorted(e.item_id for e in result.errors) == [7, 8, 9]
    assert {e.error for e in result.errors} == {"collection is locked"}


@pytest.mark.asyncio
async def test_failure_is_isolated_to_its_item():
    async def operation(note_id):
        if note_id == 20:
            raise ValueError("locked")

    result = await execute_batch_operation([10, 20, 30], operation, batch_size=2)

    assert result.successful == 2
    assert result.failed == 1
    assert len(result.errors) == 1
    assert result.errors[0].index == 1
    assert result.errors[0].item_id == 20
    assert result.errors[0].error == "locked"


@pytest.mark.asyncio
async def test_error_index_is_global_across_chunks():
    async def operation(item):
        if item == "e":
            raise RuntimeError("bad")

    result = await execute_batch_operation(list("abcde"), operation, batch_size=2)

    assert result.errors[0].index == 4
    assert result.errors[0].item_id == "e"


@pytest.mark.asyncio
async def test_empty_input_makes_no_calls():
    operation = AsyncMock()

    result = await execute_batch_operation([], operation)

    assert result.total_operations == 0
    assert result.successful == 0
    assert result.failed == 0
    operation.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("batch_size", [0, -1, True])
async def test_invalid_batch_size_is_rejected(batch_size):
    operation = AsyncMock()

    with pytest.raises(ValidationError, match="Batch size must be a positive integer"):
        await execute_batch_operation([1, 2], operation, batch_size=batch_size)
    operation.assert_not_called()


async def _max_concurrency(n_items, batch_size):
    active = 0
    peak = 0

    async def operation(_):
        nonlocal active, peak
        active += 1
        peak = max(peak, active)
        await asyncio.sleep(0)
        active -= 1

    result = await execute_batch_operation(
        list(range(n_items)), operation, batch_size=batch_size
    )
    assert result.successful == n_items
    return peak


@pytest.mark.asyncio
async def test_chunk_size_bounds_concurrency():
    assert await _max_concurrency(130, 50) == 50


@pytest.mark.asyncio
async def test_single_chunk_runs_everything_together():
    assert await _max_concurrency(130, 130) == 130
    assert await _max_concurrency(130, None) == 130


@pytest.mark.asyncio
async def test_batch_size_does_not_change_totals():
    async def operation(item):
        if item % 7 == 0:
            raise RuntimeError(f"note {item} is locked")

    chunked_result = await execute_batch_operation(list(range(130)), operation, batch_size=50)
    single_result = await execute_batch_operation(list(range(130)), operation, batch_size=130)

    for result in (chunked_result, single_result):
        assert result.total_operations == 130
        assert result.successful == 111
        assert result.failed == 19
        assert len(result.errors) == 19
    assert sorted(e.item_id for e in chunked_result.errors) == sorted(
        e.item_id for e in single_result.errors
    )


@pytest.mark.asyncio
async def test_chunks_run_in_submission_order():
    finished = []

    async def operation(item):
        # Later items of a chunk finish first
        await asyncio.sleep(0.001 * (3 - item % 3))
        finished.append(item)

    await execute_batch_operation(list(range(9)), operation, batch_size=3)

    chunks_seen = [item // 3 for item in finished]
    assert chunks_seen == sorted(chunks_seen)


@pytest.mark.asyncio
async def test_empty_error_message_falls_back_to_type_name():
    async def operation(_):
        raise KeyError()

    result = await execute_batch_operation([1], operation)

    assert result.errors[0].error == "KeyError"


@pytest.mark.asyncio
async def test_custom_item_id():
    async def operation(_):
        raise RuntimeError("nope")

    result = await execute_batch_operation(
        [{"x": 1}], operation, item_id=lambda item, index: f"row-{index}"
    )

    assert result.errors[0].item_id == "row-0"


def test_default_item_id():
    assert default_item_id(42, 0) == 42
    assert default_item_id({"noteId": 5}, 0) == 5
    assert default_item_id(NoteFieldUpdate(note_id=9, fields={}), 0) == 9
    assert default_item_id(True, 3) == 3
    assert default_item_id({"other": 1}, 2) == 2


def test_chunked():
    assert chunked([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert chunked([], 3) == []
