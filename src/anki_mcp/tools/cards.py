"""
Card tools for Anki MCP.
"""

from fastmcp import Context, FastMCP

from anki_mcp.clients import get_anki_client
from anki_mcp.models.cards import (
    AnswerCardsInput,
    CardIdInput,
    CardIdsInput,
    GetIntervalsInput,
    SetCardValuesInput,
    SetDueDateInput,
    SetEaseFactorsInput,
)
from anki_mcp.models.notes import QueryInput
from anki_mcp.utils.helpers import format_id_list, to_json

from .common import annotations, run_anki_call


def _per_card(card_ids: list[int], values: list) -> str:
    return "\n".join(f"Card {card_id}: {value}" for card_id, value in zip(card_ids, values))


def register_card_tools(mcp: FastMCP) -> None:
    """Register card tools."""

    # -------------------- Queries --------------------

    @mcp.tool(name="find_cards", annotations=annotations("Find Cards", read_only=True))
    async def find_cards(params: QueryInput, ctx: Context) -> str:
        """Search cards with Anki's query syntax and return their IDs."""
        card_ids = await run_anki_call(
            ctx, "find cards", get_anki_client().card.find_cards(query=params.query)
        )
        return f'Found {len(card_ids)} cards for query "{params.query}": {format_id_list(card_ids)}'

    @mcp.tool(name="get_cards_info", annotations=annotations("Get Cards Info", read_only=True))
    async def get_cards_info(params: CardIdsInput, ctx: Context) -> str:
        """Get full card details: deck, note, fields, scheduling and review counters."""
        info = await run_anki_call(
            ctx, "get cards info", get_anki_client().card.cards_info(cards=params.card_ids)
        )
        return to_json(info)

    @mcp.tool(name="check_cards_due", annotations=annotations("Check Cards Due", read_only=True))
    async def check_cards_due(params: CardIdsInput, ctx: Context) -> str:
        """Check whether each card is due for review."""
        due = await run_anki_call(
            ctx, "check cards due", get_anki_client().card.are_due(cards=params.card_ids)
        )
        return _per_card(params.card_ids, ["due" if d else "not due" for d in due])

    @mcp.tool(
        name="check_cards_suspended",
        annotations=annotations("Check Cards Suspended", read_only=True),
    )
    async def check_cards_suspended(params: CardIdsInput, ctx: Context) -> str:
        """Check whether each card is suspended. Unknown cards are reported as such."""
        states = await run_anki_call(
            ctx,
            "check cards suspended",
            get_anki_client().card.are_suspended(cards=params.card_ids),
        )
        labels = [
            "not found" if s is None else ("suspended" if s else "not suspended") for s in states
        ]
        return _per_card(params.card_ids, labels)

    @mcp.tool(
        name="check_card_suspended",
        annotations=annotations("Check Card Suspended", read_only=True),
    )
    async def check_card_suspended(params: CardIdInput, ctx: Context) -> str:
        suspended = await run_anki_call(
            ctx,
            "check card suspended",
            get_anki_client().card.suspended(card=params.card_id),
        )
        return f"Card {params.card_id} is {'suspended' if suspended else 'not suspended'}"

    @mcp.tool(
        name="get_cards_ease_factors",
        annotations=annotations("Get Cards Ease Factors", read_only=True),
    )
    async def get_cards_ease_factors(params: CardIdsInput, ctx: Context) -> str:
        factors = await run_anki_call(
            ctx,
            "get ease factors",
            get_anki_client().card.get_ease_factors(cards=params.card_ids),
        )
        return _per_card(params.card_ids, factors)

    @mcp.tool(
        name="get_cards_intervals", annotations=annotations("Get Cards Intervals", read_only=True)
    )
    async def get_cards_intervals(params: GetIntervalsInput, ctx: Context) -> str:
        """
        Get card intervals.

        Negative values are seconds, positive values are days. With
        ``complete`` every past interval of each card is listed.
        """
        intervals = await run_anki_call(
            ctx,
            "get intervals",
            get_anki_client().card.get_intervals(
                cards=params.card_ids, complete=params.complete
            ),
        )
        return _per_card(params.card_ids, intervals)

    @mcp.tool(
        name="get_cards_mod_time", annotations=annotations("Get Cards Mod Time", read_only=True)
    )
    async def get_cards_mod_time(params: CardIdsInput, ctx: Context) -> str:
        mod_times = await run_anki_call(
            ctx,
            "get cards modification time",
            get_anki_client().card.cards_mod_time(cards=params.card_ids),
        )
        return to_json(mod_times)

    @mcp.tool(name="cards_to_notes", annotations=annotations("Cards To Notes", read_only=True))
    async def cards_to_notes(params: CardIdsInput, ctx: Context) -> str:
        """Get the IDs of the notes the cards belong to (deduplicated)."""
        note_ids = await run_anki_call(
            ctx,
            "convert cards to notes",
            get_anki_client().card.cards_to_notes(cards=params.card_ids),
        )
        return (
            f"{len(params.card_ids)} cards belong to {len(note_ids)} notes: "
            f"{format_id_list(note_ids)}"
        )

    # -------------------- Scheduling --------------------

    @mcp.tool(name="answer_cards", annotations=annotations("Answer Cards"))
    async def answer_cards(params: AnswerCardsInput, ctx: Context) -> str:
        """Answer cards as if reviewed, with ease 1 (Again) to 4 (Easy)."""
        answers = [{"cardId": a.card_id, "ease": a.ease} for a in params.answers]
        results = await run_anki_call(
            ctx, "answer cards", get_anki_client().card.answer_cards(answers=answers)
        )
        card_ids = [a.card_id for a in params.answers]
        answered = sum(1 for ok in results if ok)
        return f"Answered {answered} of {len(card_ids)} cards:\n" + _per_card(
            card_ids, ["answered" if ok else "not found" for ok in results]
        )

    @mcp.tool(name="suspend_cards", annotations=annotations("Suspend Cards", idempotent=True))
    async def suspend_cards(params: CardIdsInput, ctx: Context) -> str:
        changed = await run_anki_call(
            ctx, "suspend cards", get_anki_client().card.suspend(cards=params.card_ids)
        )
        if not changed:
            return f"No cards were suspended (already suspended): {format_id_list(params.card_ids)}"
        return (
            f"Successfully suspended {len(params.card_ids)} cards: "
            f"{format_id_list(params.card_ids)}"
        )

    @mcp.tool(name="unsuspend_cards", annotations=annotations("Unsuspend Cards", idempotent=True))
    async def unsuspend_cards(params: CardIdsInput, ctx: Context) -> str:
        changed = await run_anki_call(
            ctx, "unsuspend cards", get_anki_client().card.unsuspend(cards=params.card_ids)
        )
        if not changed:
            return f"No cards were unsuspended (not suspended): {format_id_list(params.card_ids)}"
        return (
            f"Successfully unsuspended {len(params.card_ids)} cards: "
            f"{format_id_list(params.card_ids)}"
        )

    @mcp.tool(
        name="forget_cards",
        annotations=annotations("Forget Cards", destructive=True, idempotent=True),
    )
    async def forget_cards(params: CardIdsInput, ctx: Context) -> str:
        """Reset cards to new, discarding their review progress."""
        await run_anki_call(
            ctx, "forget cards", get_anki_client().card.forget_cards(cards=params.card_ids)
        )
        return (
            f"Successfully reset {len(params.card_ids)} cards to new: "
            f"{format_id_list(params.card_ids)}"
        )

    @mcp.tool(name="relearn_cards", annotations=annotations("Relearn Cards", idempotent=True))
    async def relearn_cards(params: CardIdsInput, ctx: Context) -> str:
        """Put cards back into relearning."""
        await run_anki_call(
            ctx, "relearn cards", get_anki_client().card.relearn_cards(cards=params.card_ids)
        )
        return (
            f"Successfully moved {len(params.card_ids)} cards to relearning: "
            f"{format_id_list(params.card_ids)}"
        )

    @mcp.tool(name="set_cards_due_date", annotations=annotations("Set Cards Due Date"))
    async def set_cards_due_date(params: SetDueDateInput, ctx: Context) -> str:
        """
        Set the due date of cards.

        ``days`` is a number of days from today ("0" is today), a random
        range ("3-7"), and with a trailing "!" also resets the interval.
        """
        await run_anki_call(
            ctx,
            "set due date",
            get_anki_client().card.set_due_date(cards=params.card_ids, days=params.days),
        )
        return (
            f'Successfully set due date "{params.days}" for {len(params.card_ids)} cards: '
            f"{format_id_list(params.card_ids)}"
        )

    @mcp.tool(
        name="set_cards_ease_factors",
        annotations=annotations("Set Cards Ease Factors", idempotent=True),
    )
    async def set_cards_ease_factors(params: SetEaseFactorsInput, ctx: Context) -> str:
        results = await run_anki_call(
            ctx,
            "set ease factors",
            get_anki_client().card.set_ease_factors(
                cards=params.card_ids, ease_factors=params.ease_factors
            ),
        )
        labels = [
            f"set to {factor}" if ok else "not found"
            for factor, ok in zip(params.ease_factors, results)
        ]
        return _per_card(params.card_ids, labels)

    @mcp.tool(
        name="set_card_specific_values",
        annotations=annotations("Set Card Specific Values", destructive=True, idempotent=True),
    )
    async def set_card_specific_values(params: SetCardValuesInput, ctx: Context) -> str:
        """
        Set raw card properties (due, ivl, factor, ...) on one card.

        Low-level: values are written to the card record as given.
        """
        results = await run_anki_call(
            ctx,
            "set card values",
            get_anki_client().card.set_specific_value_of_card(
                card=params.card_id, keys=params.keys, new_values=params.new_values
            ),
        )
        lines = [
            f"{key} = {value}: {'ok' if ok else 'failed'}"
            for key, value, ok in zip(params.keys, params.new_values, results)
        ]
        return f"Card {params.card_id}:\n" + "\n".join(lines)
