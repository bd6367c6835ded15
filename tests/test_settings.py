"""Tests for settings loaded from the environment."""

import os
from unittest.mock import patch

from anki_mcp.settings import AnkiSettings


def test_defaults():
    with patch.dict(os.environ, {}, clear=True):
        settings = AnkiSettings(_env_file=None)

    assert settings.connect_url == "http://127.0.0.1:8765"
    assert settings.api_version == 6
    assert settings.api_key is None
    assert settings.tag_batch_size == 50
    assert settings.field_batch_size == 25
    assert settings.card_batch_size == 100
    assert settings.enable_gui_tools is True


def test_environment_overrides():
    env = {
        "ANKI_CONNECT_URL": "http://192.168.1.5:8765",
        "ANKI_API_KEY": "secret",
        "ANKI_TAG_BATCH_SIZE": "10",
        "ANKI_ENABLE_GUI_TOOLS": "false",
    }
    with patch.dict(os.environ, env, clear=True):
        settings = AnkiSettings(_env_file=None)

    assert settings.connect_url == "http://192.168.1.5:8765"
    assert settings.api_key == "secret"
    assert settings.tag_batch_size == 10
    assert settings.enable_gui_tools is False
