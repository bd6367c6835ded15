"""
Pydantic models for note tools.
"""

from pydantic import Field

from .common import BaseInput, Name


class NoteSpec(BaseInput):
    """A note to create."""

    deck_name: Name = Field(..., min_length=1, description="Name of the deck to add the note to")
    model_name: Name = Field(
        ..., min_length=1, description='Name of the note model/type (e.g., "Basic", "Cloze")'
    )
    fields: dict[str, str] = Field(
        ..., description="Object with field names as keys and field content as values"
    )
    tags: list[Name] = Field(default_factory=list, description="Array of tags to add to the note")

    def to_anki(self) -> dict:
        return {
            "deckName": self.deck_name,
            "modelName": self.model_name,
            "fields": self.fields,
            "tags": self.tags,
        }


class AddNoteInput(NoteSpec):
    """Input for add_note."""


class AddNotesInput(BaseInput):
    """Input for add_notes and can_add_notes."""

    notes: list[NoteSpec] = Field(..., min_length=1, description="Array of notes to add")


class UpdateNoteInput(BaseInput):
    """Input for update_note."""

    note_id: int = Field(..., description="ID of the note to update")
    fields: dict[str, str] | None = Field(
        default=None, description="Object with field names as keys and new field content as values"
    )
    tags: list[Name] | None = Field(
        default=None, description="Array of tags to set on the note (replaces existing tags)"
    )


class NoteIdsInput(BaseInput):
    """Input for tools taking a list of note IDs."""

    note_ids: list[int] = Field(..., min_length=1, description="Array of note IDs")


class NoteTagsInput(BaseInput):
    """Input for add_tags_to_notes and remove_tags_from_notes."""

    note_ids: list[int] = Field(..., min_length=1, description="Array of note IDs")
    tags: Name = Field(..., min_length=1, description="Space-separated string of tags")


class ReplaceTagsInput(BaseInput):
    """Input for replace_tags_in_notes."""

    note_ids: list[int] = Field(
        ..., min_length=1, description="Array of note IDs to replace tags in"
    )
    tag_to_replace: Name = Field(..., min_length=1, description="Tag to replace")
    replace_with_tag: Name = Field(..., min_length=1, description="Tag to replace with")


class QueryInput(BaseInput):
    """Input for search tools."""

    query: Name = Field(
        ..., min_length=1, description='Anki search query (e.g., "deck:Default tag:verbs")'
    )
