"""
Pydantic models for GUI tools.
"""

from typing import Literal

from pydantic import Field

from .common import BaseInput, Name
from .notes import NoteSpec


class GuiBrowseInput(BaseInput):
    """Input for gui_browse."""

    query: Name = Field(..., min_length=1, description="Search query for the card browser")
    reorder_column: Name | None = Field(
        default=None, description='Column to sort by (e.g., "noteCrt")'
    )
    reorder_order: Literal["ascending", "descending"] = Field(
        default="ascending", description="Sort order when reorderColumn is given"
    )


class GuiCardInput(BaseInput):
    card_id: int = Field(..., description="Card ID")


class GuiNoteInput(BaseInput):
    note_id: int = Field(..., description="Note ID")


class GuiAddCardsInput(BaseInput):
    note: NoteSpec = Field(..., description="Note to prefill the Add Cards dialog with")


class GuiAnswerCardInput(BaseInput):
    ease: int = Field(..., ge=1, le=4, description="1 (Again), 2 (Hard), 3 (Good), 4 (Easy)")


class GuiDeckInput(BaseInput):
    deck_name: Name = Field(..., min_length=1, description="Name of the deck")


class GuiImportFileInput(BaseInput):
    path: Name | None = Field(
        default=None, description="File to import (a file picker is shown if omitted)"
    )
