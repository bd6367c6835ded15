from unittest.mock import AsyncMock, MagicMock

import pytest

from anki_mcp.clients import reset_anki_client

DOMAINS = (
    "deck",
    "card",
    "note",
    "model",
    "media",
    "statistic",
    "graphical",
    "miscellaneous",
)


@pytest.fixture
def mock_anki_client():
    """Fixture for AnkiConnectClient mock; every domain method is an AsyncMock."""
    mock = MagicMock()
    for domain in DOMAINS:
        setattr(mock, domain, AsyncMock())
    mock.note.notes_info.return_value = []
    mock.note.add_tags.return_value = None
    mock.note.remove_tags.return_value = None
    mock.note.update_note_tags.return_value = None
    mock.miscellaneous.version.return_value = 6
    mock.close = AsyncMock()
    return mock


@pytest.fixture(autouse=True)
def reset_shared_client():
    """Never leak the process-wide client between tests."""
    reset_anki_client()
    yield
    reset_anki_client()


@pytest.fixture
def notes_info_records():
    """notesInfo records as AnkiConnect returns them."""
    return [
        {
            "noteId": 1,
            "modelName": "Basic",
            "tags": ["temp_a", "keep", "old_b"],
            "fields": {"Front": {"value": "hola", "order": 0}},
            "cards": [11],
        },
        {
            "noteId": 2,
            "modelName": "Basic",
            "tags": ["keep"],
            "fields": {"Front": {"value": "adios", "order": 0}},
            "cards": [21],
        },
    ]
