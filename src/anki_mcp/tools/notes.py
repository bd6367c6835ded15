"""
Note tools for Anki MCP.
"""

from fastmcp import Context, FastMCP

from anki_mcp.clients import get_anki_client
from anki_mcp.models.notes import (
    AddNoteInput,
    AddNotesInput,
    NoteIdsInput,
    NoteTagsInput,
    QueryInput,
    ReplaceTagsInput,
    UpdateNoteInput,
)
from anki_mcp.utils.helpers import format_id_list, to_json

from .common import annotations, run_anki_call

# notesInfo calls for search results are capped to keep responses readable
SEARCH_DETAIL_LIMIT = 50


def register_note_tools(mcp: FastMCP) -> None:
    """Register note tools."""

    @mcp.tool(name="add_note", annotations=annotations("Add Note"))
    async def add_note(params: AddNoteInput, ctx: Context) -> str:
        """
        Add a new note to Anki.

        Example:
            Use when: "Add a Basic card to 'Spanish' with front 'hola' and back 'hello'"
        """
        note_id = await run_anki_call(
            ctx, "add note", get_anki_client().note.add_note(note=params.to_anki())
        )
        tags = ", ".join(params.tags) or "none"
        return (
            f"Successfully added note with ID: {note_id}. "
            f'Deck: "{params.deck_name}", Model: "{params.model_name}", Tags: [{tags}]'
        )

    @mcp.tool(name="add_notes", annotations=annotations("Add Notes"))
    async def add_notes(params: AddNotesInput, ctx: Context) -> str:
        """Add several notes in one request. Notes that cannot be added get a null ID."""
        results = await run_anki_call(
            ctx,
            "add notes",
            get_anki_client().note.add_notes(notes=[n.to_anki() for n in params.notes]),
        )
        added = sum(1 for note_id in results if note_id is not None)
        return (
            f"Batch note addition completed. Successfully added: {added} notes, "
            f"Failed: {len(results) - added} notes.\n{to_json(results)}"
        )

    @mcp.tool(name="update_note", annotations=annotations("Update Note", idempotent=True))
    async def update_note(params: UpdateNoteInput, ctx: Context) -> str:
        """Update the fields and/or tags of an existing note."""
        note: dict = {"id": params.note_id}
        if params.fields is not None:
            note["fields"] = params.fields
        if params.tags is not None:
            note["tags"] = params.tags
        await run_anki_call(ctx, "update note", get_anki_client().note.update_note(note=note))

        changes = []
        if params.fields is not None:
            changes.append(f"Updated fields: [{', '.join(params.fields)}]")
        if params.tags is not None:
            changes.append(f"Updated tags: [{', '.join(params.tags)}]")
        return " ".join([f"Successfully updated note {params.note_id}.", *changes])

    @mcp.tool(name="delete_notes", annotations=annotations("Delete Notes", destructive=True))
    async def delete_notes(params: NoteIdsInput, ctx: Context) -> str:
        """Delete notes and all of their cards."""
        await run_anki_call(
            ctx, "delete notes", get_anki_client().note.delete_notes(notes=params.note_ids)
        )
        return (
            f"Successfully deleted {len(params.note_ids)} notes: "
            f"{format_id_list(params.note_ids)}"
        )

    @mcp.tool(
        name="add_tags_to_notes", annotations=annotations("Add Tags To Notes", idempotent=True)
    )
    async def add_tags_to_notes(params: NoteTagsInput, ctx: Context) -> str:
        """Add space-separated tags to notes in a single request."""
        await run_anki_call(
            ctx,
            "add tags",
            get_anki_client().note.add_tags(notes=params.note_ids, tags=params.tags),
        )
        return (
            f'Successfully added tags "{params.tags}" to {len(params.note_ids)} notes: '
            f"{format_id_list(params.note_ids)}"
        )

    @mcp.tool(
        name="remove_tags_from_notes",
        annotations=annotations("Remove Tags From Notes", destructive=True, idempotent=True),
    )
    async def remove_tags_from_notes(params: NoteTagsInput, ctx: Context) -> str:
        """Remove space-separated tags from notes in a single request."""
        await run_anki_call(
            ctx,
            "remove tags",
            get_anki_client().note.remove_tags(notes=params.note_ids, tags=params.tags),
        )
        return (
            f'Successfully removed tags "{params.tags}" from {len(params.note_ids)} notes: '
            f"{format_id_list(params.note_ids)}"
        )

    @mcp.tool(
        name="replace_tags_in_notes",
        annotations=annotations("Replace Tags In Notes", destructive=True, idempotent=True),
    )
    async def replace_tags_in_notes(params: ReplaceTagsInput, ctx: Context) -> str:
        """Replace one tag with another on the given notes in a single request."""
        await run_anki_call(
            ctx,
            "replace tags",
            get_anki_client().note.replace_tags(
                notes=params.note_ids,
                tag_to_replace=params.tag_to_replace,
                replace_with_tag=params.replace_with_tag,
            ),
        )
        return (
            f'Successfully replaced tag "{params.tag_to_replace}" with '
            f'"{params.replace_with_tag}" in {len(params.note_ids)} notes: '
            f"{format_id_list(params.note_ids)}"
        )

    @mcp.tool(name="find_notes", annotations=annotations("Find Notes", read_only=True))
    async def find_notes(params: QueryInput, ctx: Context) -> str:
        """
        Search notes with Anki's query syntax and show details of the first matches.

        Example:
            Use when: "Find notes in deck Japanese tagged verbs"
        """
        client = get_anki_client()
        note_ids = await run_anki_call(
            ctx, "find notes", client.note.find_notes(query=params.query)
        )
        if not note_ids:
            return f'No notes found for query "{params.query}"'

        shown = note_ids[:SEARCH_DETAIL_LIMIT]
        notes = await run_anki_call(ctx, "find notes", client.note.notes_info(notes=shown))
        return (
            f'Found {len(note_ids)} notes for query "{params.query}" '
            f"(showing {len(shown)}):\n{to_json(notes)}"
        )

    @mcp.tool(name="can_add_notes", annotations=annotations("Can Add Notes", read_only=True))
    async def can_add_notes(params: AddNotesInput, ctx: Context) -> str:
        """Check which notes could be added without actually adding them."""
        results = await run_anki_call(
            ctx,
            "check notes",
            get_anki_client().note.can_add_notes(notes=[n.to_anki() for n in params.notes]),
        )
        valid = sum(1 for ok in results if ok)
        return (
            f"Note validation completed. Valid: {valid}, Invalid: {len(results) - valid}.\n"
            f"{to_json(results)}"
        )

    @mcp.tool(
        name="clear_unused_tags",
        annotations=annotations("Clear Unused Tags", destructive=True, idempotent=True),
    )
    async def clear_unused_tags(ctx: Context) -> str:
        """Remove tags that are no longer used by any note."""
        client = get_anki_client()
        before = set(await run_anki_call(ctx, "clear unused tags", client.note.get_tags()))
        await run_anki_call(ctx, "clear unused tags", client.note.clear_unused_tags())
        after = set(await run_anki_call(ctx, "clear unused tags", client.note.get_tags()))
        removed = sorted(before - after)
        return f"Successfully cleared {len(removed)} unused tags: [{', '.join(removed)}]"

    @mcp.tool(
        name="remove_empty_notes",
        annotations=annotations("Remove Empty Notes", destructive=True, idempotent=True),
    )
    async def remove_empty_notes(ctx: Context) -> str:
        """Delete every note whose fields are all empty."""
        await run_anki_call(
            ctx, "remove empty notes", get_anki_client().note.remove_empty_notes()
        )
        return "Successfully removed all empty notes from the collection"
