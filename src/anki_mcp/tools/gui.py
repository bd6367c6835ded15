"""
Tools driving the Anki desktop interface.

These act on the running Anki window and need a user at the screen to be
useful; they can be disabled with ``ANKI_ENABLE_GUI_TOOLS=false``.
"""

from fastmcp import Context, FastMCP

from anki_mcp.clients import get_anki_client
from anki_mcp.models.gui import (
    GuiAddCardsInput,
    GuiAnswerCardInput,
    GuiBrowseInput,
    GuiCardInput,
    GuiDeckInput,
    GuiImportFileInput,
    GuiNoteInput,
)
from anki_mcp.utils.helpers import format_id_list, to_json

from .common import annotations, run_anki_call


def register_gui_tools(mcp: FastMCP) -> None:
    """Register GUI tools."""

    # -------------------- Browser and editor --------------------

    @mcp.tool(name="gui_browse", annotations=annotations("Open Card Browser", idempotent=True))
    async def gui_browse(params: GuiBrowseInput, ctx: Context) -> str:
        """Open the card browser with a search query and return the matching card IDs."""
        reorder = None
        if params.reorder_column:
            reorder = {"order": params.reorder_order, "columnId": params.reorder_column}
        card_ids = await run_anki_call(
            ctx,
            "open browser",
            get_anki_client().graphical.gui_browse(query=params.query, reorder_cards=reorder),
        )
        return f"Browser shows {len(card_ids)} cards: {format_id_list(card_ids)}"

    @mcp.tool(
        name="gui_select_card", annotations=annotations("Select Card In Browser", idempotent=True)
    )
    async def gui_select_card(params: GuiCardInput, ctx: Context) -> str:
        selected = await run_anki_call(
            ctx, "select card", get_anki_client().graphical.gui_select_card(card=params.card_id)
        )
        if not selected:
            return "The card browser is not open"
        return f"Selected card {params.card_id} in the browser"

    @mcp.tool(
        name="gui_select_note", annotations=annotations("Select Note In Browser", idempotent=True)
    )
    async def gui_select_note(params: GuiNoteInput, ctx: Context) -> str:
        selected = await run_anki_call(
            ctx, "select note", get_anki_client().graphical.gui_select_note(note=params.note_id)
        )
        if not selected:
            return "The card browser is not open"
        return f"Selected note {params.note_id} in the browser"

    @mcp.tool(
        name="gui_selected_notes", annotations=annotations("Selected Notes", read_only=True)
    )
    async def gui_selected_notes(ctx: Context) -> str:
        note_ids = await run_anki_call(
            ctx, "get selected notes", get_anki_client().graphical.gui_selected_notes()
        )
        return f"{len(note_ids)} notes selected: {format_id_list(note_ids)}"

    @mcp.tool(name="gui_add_cards", annotations=annotations("Open Add Cards Dialog"))
    async def gui_add_cards(params: GuiAddCardsInput, ctx: Context) -> str:
        """Open the Add Cards dialog prefilled with a note for the user to review."""
        note_id = await run_anki_call(
            ctx,
            "open add cards dialog",
            get_anki_client().graphical.gui_add_cards(note=params.note.to_anki()),
        )
        return f"Opened the Add Cards dialog (note ID once added: {note_id})"

    @mcp.tool(name="gui_edit_note", annotations=annotations("Open Note Editor", idempotent=True))
    async def gui_edit_note(params: GuiNoteInput, ctx: Context) -> str:
        await run_anki_call(
            ctx, "open note editor", get_anki_client().graphical.gui_edit_note(note=params.note_id)
        )
        return f"Opened the editor for note {params.note_id}"

    # -------------------- Review --------------------

    @mcp.tool(name="gui_current_card", annotations=annotations("Current Card", read_only=True))
    async def gui_current_card(ctx: Context) -> str:
        card = await run_anki_call(
            ctx, "get current card", get_anki_client().graphical.gui_current_card()
        )
        if card is None:
            return "Not currently reviewing"
        return to_json(card)

    @mcp.tool(
        name="gui_start_card_timer", annotations=annotations("Start Card Timer", idempotent=True)
    )
    async def gui_start_card_timer(ctx: Context) -> str:
        started = await run_anki_call(
            ctx, "start card timer", get_anki_client().graphical.gui_start_card_timer()
        )
        return "Card timer started" if started else "Not currently reviewing"

    @mcp.tool(name="gui_show_question", annotations=annotations("Show Question", idempotent=True))
    async def gui_show_question(ctx: Context) -> str:
        shown = await run_anki_call(
            ctx, "show question", get_anki_client().graphical.gui_show_question()
        )
        return "Showing the question" if shown else "Not currently reviewing"

    @mcp.tool(name="gui_show_answer", annotations=annotations("Show Answer", idempotent=True))
    async def gui_show_answer(ctx: Context) -> str:
        shown = await run_anki_call(
            ctx, "show answer", get_anki_client().graphical.gui_show_answer()
        )
        return "Showing the answer" if shown else "Not currently reviewing"

    @mcp.tool(name="gui_answer_card", annotations=annotations("Answer Current Card"))
    async def gui_answer_card(params: GuiAnswerCardInput, ctx: Context) -> str:
        """Answer the card under review. The answer side must be shown first."""
        answered = await run_anki_call(
            ctx, "answer card", get_anki_client().graphical.gui_answer_card(ease=params.ease)
        )
        if not answered:
            return "Card not answered (not reviewing, or the answer is not shown)"
        return f"Answered the current card with ease {params.ease}"

    @mcp.tool(name="gui_undo", annotations=annotations("Undo"))
    async def gui_undo(ctx: Context) -> str:
        undone = await run_anki_call(ctx, "undo", get_anki_client().graphical.gui_undo())
        return "Undid the last action" if undone else "Nothing to undo"

    # -------------------- Navigation --------------------

    @mcp.tool(name="gui_deck_overview", annotations=annotations("Deck Overview", idempotent=True))
    async def gui_deck_overview(params: GuiDeckInput, ctx: Context) -> str:
        opened = await run_anki_call(
            ctx,
            "open deck overview",
            get_anki_client().graphical.gui_deck_overview(name=params.deck_name),
        )
        if not opened:
            return f'Deck "{params.deck_name}" not found'
        return f'Opened the overview of "{params.deck_name}"'

    @mcp.tool(name="gui_deck_browser", annotations=annotations("Deck Browser", idempotent=True))
    async def gui_deck_browser(ctx: Context) -> str:
        await run_anki_call(
            ctx, "open deck browser", get_anki_client().graphical.gui_deck_browser()
        )
        return "Opened the deck browser"

    @mcp.tool(name="gui_deck_review", annotations=annotations("Review Deck", idempotent=True))
    async def gui_deck_review(params: GuiDeckInput, ctx: Context) -> str:
        started = await run_anki_call(
            ctx,
            "start deck review",
            get_anki_client().graphical.gui_deck_review(name=params.deck_name),
        )
        if not started:
            return f'Deck "{params.deck_name}" not found'
        return f'Started reviewing "{params.deck_name}"'

    @mcp.tool(name="gui_import_file", annotations=annotations("Import File"))
    async def gui_import_file(params: GuiImportFileInput, ctx: Context) -> str:
        """Open Anki's import dialog, optionally for a given file."""
        await run_anki_call(
            ctx, "import file", get_anki_client().graphical.gui_import_file(path=params.path)
        )
        return "Opened the import dialog"

    @mcp.tool(name="gui_exit_anki", annotations=annotations("Exit Anki", destructive=True))
    async def gui_exit_anki(ctx: Context) -> str:
        """Close Anki. AnkiConnect is unavailable until it is started again."""
        await run_anki_call(ctx, "exit Anki", get_anki_client().graphical.gui_exit_anki())
        return "Anki is closing"

    @mcp.tool(
        name="gui_check_database", annotations=annotations("Check Database", idempotent=True)
    )
    async def gui_check_database(ctx: Context) -> str:
        """Run Anki's Check Database."""
        await run_anki_call(
            ctx, "check database", get_anki_client().graphical.gui_check_database()
        )
        return "Database check completed"
