"""Tests for tag snapshots and restoration."""

import pytest

from anki_mcp.models.bulk import RollbackSnapshot
from anki_mcp.services.bulk.snapshot import collect_note_tags, restore_note_tags
from anki_mcp.utils.errors import AnkiConnectError, SnapshotError


@pytest.mark.asyncio
async def test_empty_input_makes_no_call(mock_anki_client):
    snapshot = await collect_note_tags(mock_anki_client, [])

    assert len(snapshot) == 0
    mock_anki_client.note.notes_info.assert_not_called()


@pytest.mark.asyncio
async def test_collects_tags_with_single_query(mock_anki_client, notes_info_records):
    mock_anki_client.note.notes_info.return_value = notes_info_records

    snapshot = await collect_note_tags(mock_anki_client, [1, 2])

    mock_anki_client.note.notes_info.assert_awaited_once_with(notes=[1, 2])
    assert snapshot[1] == ["temp_a", "keep", "old_b"]
    assert snapshot[2] == ["keep"]


@pytest.mark.asyncio
async def test_missing_records_are_absent(mock_anki_client):
    mock_anki_client.note.notes_info.return_value = [
        {"noteId": 1, "tags": ["a"]},
        {},
        None,
        {"noteId": 3},
    ]

    snapshot = await collect_note_tags(mock_anki_client, [1, 2, 3])

    assert 2 not in snapshot
    assert snapshot[1] == ["a"]
    assert snapshot[3] == []


@pytest.mark.asyncio
async def test_query_failure_raises_snapshot_error(mock_anki_client):
    mock_anki_client.note.notes_info.side_effect = AnkiConnectError("notesInfo", "boom")

    with pytest.raises(SnapshotError, match="Failed to get current tags for rollback support"):
        await collect_note_tags(mock_anki_client, [1])


@pytest.mark.asyncio
async def test_restore_sets_tags_once_per_note(mock_anki_client):
    snapshot = RollbackSnapshot({1: ["a", "b"], 2: []})

    result = await restore_note_tags(mock_anki_client, snapshot, batch_size=1)

    assert result.successful == 2
    assert mock_anki_client.note.update_note_tags.await_count == 2
    mock_anki_client.note.update_note_tags.assert_any_await(note=1, tags=["a", "b"])
    mock_anki_client.note.update_note_tags.assert_any_await(note=2, tags=[])


@pytest.mark.asyncio
async def test_restore_reports_failing_note_by_id(mock_anki_client):
    async def update(note, tags):
        if note == 2:
            raise AnkiConnectError("updateNoteTags", "note was not found: 2")

    mock_anki_client.note.update_note_tags.side_effect = update

    result = await restore_note_tags(mock_anki_client, RollbackSnapshot({1: [], 2: ["x"]}))

    assert result.failed == 1
    assert result.errors[0].item_id == 2


def test_snapshot_json_uses_string_keys():
    snapshot = RollbackSnapshot({1: ["a"], 2: []})

    assert snapshot.to_json() == '{"1":["a"],"2":[]}'
