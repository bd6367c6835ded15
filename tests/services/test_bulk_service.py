"""Tests for the bulk operation service."""

import pytest

from anki_mcp.models.bulk import NoteFieldUpdate, RollbackSnapshot
from anki_mcp.services.bulk import BulkOperationService
from anki_mcp.utils.errors import AnkiConnectError, PatternError, SnapshotError


def _fail_for(failing_id, message="locked"):
    async def call(notes=None, cards=None, **kwargs):
        ids = notes or cards
        if failing_id in ids:
            raise AnkiConnectError("action", message)

    return call


@pytest.fixture
def service(mock_anki_client):
    return BulkOperationService(client=mock_anki_client)


# -------------------- Tag operations --------------------


@pytest.mark.asyncio
async def test_add_tags_reports_failing_note(service, mock_anki_client):
    mock_anki_client.note.add_tags.side_effect = _fail_for(2)

    report = await service.add_tags([1, 2, 3], ["a"], batch_size=2)

    assert mock_anki_client.note.add_tags.await_count == 3
    mock_anki_client.note.add_tags.assert_any_await(notes=[1], tags="a")
    assert "Total notes: 3" in report
    assert "Successful: 2" in report
    assert "Failed: 1" in report
    assert "Note 2: locked" in report


@pytest.mark.asyncio
async def test_add_tags_joins_tags_with_spaces(service, mock_anki_client):
    report = await service.add_tags([1], ["a", "b"])

    mock_anki_client.note.add_tags.assert_awaited_once_with(notes=[1], tags="a b")
    assert "Tags added: [a, b]" in report


@pytest.mark.asyncio
async def test_rollback_snapshot_is_reported(service, mock_anki_client, notes_info_records):
    mock_anki_client.note.notes_info.return_value = notes_info_records

    report = await service.remove_tags([1, 2], ["keep"], enable_rollback=True)

    mock_anki_client.note.notes_info.assert_awaited_once_with(notes=[1, 2])
    assert "Rollback data stored for 2 notes." in report
    assert '"2":["keep"]' in report


@pytest.mark.asyncio
async def test_snapshot_failure_prevents_any_change(service, mock_anki_client):
    mock_anki_client.note.notes_info.side_effect = AnkiConnectError("notesInfo", "boom")

    with pytest.raises(SnapshotError):
        await service.add_tags([1, 2], ["a"], enable_rollback=True)

    mock_anki_client.note.add_tags.assert_not_called()


@pytest.mark.asyncio
async def test_no_snapshot_without_rollback(service, mock_anki_client):
    report = await service.replace_tags([1], "old", "new")

    mock_anki_client.note.notes_info.assert_not_called()
    mock_anki_client.note.replace_tags.assert_awaited_once_with(
        notes=[1], tag_to_replace="old", replace_with_tag="new"
    )
    assert 'Replaced: "old" → "new"' in report
    assert "Rollback" not in report


@pytest.mark.asyncio
async def test_restore_tags(service, mock_anki_client):
    report = await service.restore_tags(RollbackSnapshot({1: ["a"], 2: ["b", "c"]}))

    assert mock_anki_client.note.update_note_tags.await_count == 2
    assert report.startswith("Bulk restore tags completed:")
    assert "- Successful: 2" in report


# -------------------- Fields, decks and cards --------------------


@pytest.mark.asyncio
async def test_update_note_fields_sends_one_update_per_note(service, mock_anki_client):
    async def update(note):
        if note["id"] == 2:
            raise AnkiConnectError("updateNote", "field Back does not exist")

    mock_anki_client.note.update_note.side_effect = update
    updates = [
        NoteFieldUpdate(note_id=1, fields={"Front": "hola"}),
        NoteFieldUpdate(note_id=2, fields={"Back": "hello"}),
    ]

    report = await service.update_note_fields(updates)

    mock_anki_client.note.update_note.assert_any_await(
        note={"id": 1, "fields": {"Front": "hola"}}
    )
    assert "Note 2: field Back does not exist" in report


@pytest.mark.asyncio
async def test_move_cards_reports_cards(service, mock_anki_client):
    mock_anki_client.deck.change_deck.side_effect = _fail_for(12, "card not found")

    report = await service.move_cards_to_deck([11, 12], "Spanish::Verbs")

    mock_anki_client.deck.change_deck.assert_any_await(cards=[11], deck="Spanish::Verbs")
    assert 'Target deck: "Spanish::Verbs"' in report
    assert "Total cards: 2" in report
    assert "Card 12: card not found" in report


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("suspend", "method", "headline"),
    [
        (True, "suspend", "Bulk suspend cards operation completed."),
        (False, "unsuspend", "Bulk unsuspend cards operation completed."),
    ],
)
async def test_suspend_cards(service, mock_anki_client, suspend, method, headline):
    report = await service.suspend_cards([11, 12, 13], suspend, batch_size=2)

    assert getattr(mock_anki_client.card, method).await_count == 3
    assert report.startswith(headline)
    assert "Successful: 3" in report


# -------------------- Smart cleanup --------------------


@pytest.mark.asyncio
async def test_cleanup_dry_run_makes_no_changes(service, mock_anki_client, notes_info_records):
    mock_anki_client.note.notes_info.return_value = notes_info_records

    report = await service.smart_tag_cleanup([1, 2], ["^temp_.*", "^old_.*"])

    mock_anki_client.note.remove_tags.assert_not_called()
    assert report.startswith("Smart tag cleanup analysis (DRY RUN):")
    assert "Notes analyzed: 2" in report
    assert "Notes with matching tags: 1" in report
    assert "Total tags to remove: 2" in report
    assert "Note 1: temp_a, old_b" in report


@pytest.mark.asyncio
async def test_cleanup_dry_run_without_matches(service, mock_anki_client, notes_info_records):
    mock_anki_client.note.notes_info.return_value = notes_info_records

    report = await service.smart_tag_cleanup([1, 2], ["^nothing$"])

    assert "No tags match the specified patterns" in report


@pytest.mark.asyncio
async def test_cleanup_removes_matched_tags_per_note(service, mock_anki_client):
    mock_anki_client.note.notes_info.return_value = [
        {"noteId": 1, "tags": ["temp_a", "keep", "old_b"]},
        {"noteId": 2, "tags": ["keep"]},
        {"noteId": 3, "tags": ["temp_c"]},
    ]
    mock_anki_client.note.remove_tags.side_effect = _fail_for(3)

    report = await service.smart_tag_cleanup(
        [1, 2, 3], ["^temp_.*", "^old_.*"], dry_run=False
    )

    assert mock_anki_client.note.remove_tags.await_count == 2
    mock_anki_client.note.remove_tags.assert_any_await(notes=[1], tags="temp_a old_b")
    assert report.startswith("Smart tag cleanup completed.")
    assert "Total notes: 2" in report
    assert "Total tags removed: 2" in report
    assert "Note 3: locked" in report


@pytest.mark.asyncio
@pytest.mark.parametrize("dry_run", [True, False])
async def test_cleanup_invalid_pattern_touches_nothing(service, mock_anki_client, dry_run):
    with pytest.raises(PatternError):
        await service.smart_tag_cleanup([1], ["^ok", "["], dry_run=dry_run)

    mock_anki_client.note.notes_info.assert_not_called()
    mock_anki_client.note.remove_tags.assert_not_called()


@pytest.mark.asyncio
async def test_cleanup_info_failure_is_raised(service, mock_anki_client):
    mock_anki_client.note.notes_info.side_effect = AnkiConnectError("notesInfo", "boom")

    with pytest.raises(AnkiConnectError):
        await service.smart_tag_cleanup([1], ["x"], dry_run=False)

    mock_anki_client.note.remove_tags.assert_not_called()
