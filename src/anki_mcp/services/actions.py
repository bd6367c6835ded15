"""
Dispatch of typed multi-actions to client calls.

``ACTION_HANDLERS`` maps every action variant accepted by ``MultiInput``
to the client method that performs it.
"""

from collections.abc import Awaitable, Callable, Sequence
import logging
from typing import Any

from anki_mcp.clients.anki_connect import AnkiConnectClient
from anki_mcp.models import actions as a

logger = logging.getLogger(__name__)

Handler = Callable[[AnkiConnectClient, Any], Awaitable[Any]]

ACTION_HANDLERS: dict[type[a.ActionVariant], Handler] = {
    a.VersionAction: lambda c, p: c.miscellaneous.version(),
    a.SyncAction: lambda c, p: c.miscellaneous.sync(),
    a.DeckNamesAction: lambda c, p: c.deck.deck_names(),
    a.DeckNamesAndIdsAction: lambda c, p: c.deck.deck_names_and_ids(),
    a.CreateDeckAction: lambda c, p: c.deck.create_deck(deck=p.deck),
    a.DeleteDecksAction: lambda c, p: c.deck.delete_decks(decks=p.decks, cards_too=p.cards_too),
    a.ChangeDeckAction: lambda c, p: c.deck.change_deck(cards=p.cards, deck=p.deck),
    a.GetDecksAction: lambda c, p: c.deck.get_decks(cards=p.cards),
    a.FindCardsAction: lambda c, p: c.card.find_cards(query=p.query),
    a.CardsInfoAction: lambda c, p: c.card.cards_info(cards=p.cards),
    a.CardsToNotesAction: lambda c, p: c.card.cards_to_notes(cards=p.cards),
    a.SuspendAction: lambda c, p: c.card.suspend(cards=p.cards),
    a.UnsuspendAction: lambda c, p: c.card.unsuspend(cards=p.cards),
    a.AreSuspendedAction: lambda c, p: c.card.are_suspended(cards=p.cards),
    a.AreDueAction: lambda c, p: c.card.are_due(cards=p.cards),
    a.ForgetCardsAction: lambda c, p: c.card.forget_cards(cards=p.cards),
    a.RelearnCardsAction: lambda c, p: c.card.relearn_cards(cards=p.cards),
    a.FindNotesAction: lambda c, p: c.note.find_notes(query=p.query),
    a.NotesInfoAction: lambda c, p: c.note.notes_info(notes=p.notes),
    a.AddNoteAction: lambda c, p: c.note.add_note(note=p.note),
    a.UpdateNoteFieldsAction: lambda c, p: c.note.update_note_fields(note=p.note),
    a.DeleteNotesAction: lambda c, p: c.note.delete_notes(notes=p.notes),
    a.AddTagsAction: lambda c, p: c.note.add_tags(notes=p.notes, tags=p.tags),
    a.RemoveTagsAction: lambda c, p: c.note.remove_tags(notes=p.notes, tags=p.tags),
    a.ReplaceTagsAction: lambda c, p: c.note.replace_tags(
        notes=p.notes,
        tag_to_replace=p.tag_to_replace,
        replace_with_tag=p.replace_with_tag,
    ),
    a.UpdateNoteTagsAction: lambda c, p: c.note.update_note_tags(note=p.note, tags=p.tags),
    a.GetNoteTagsAction: lambda c, p: c.note.get_note_tags(note=p.note),
    a.GetTagsAction: lambda c, p: c.note.get_tags(),
    a.ModelNamesAction: lambda c, p: c.model.model_names(),
    a.ModelFieldNamesAction: lambda c, p: c.model.model_field_names(model_name=p.model_name),
    a.CardsReviewedTodayAction: lambda c, p: c.statistic.get_num_cards_reviewed_today(),
}


async def execute_actions(
    client: AnkiConnectClient, actions: Sequence[a.ActionVariant]
) -> list[a.ActionOutcome]:
    """
    Run actions in order, recording each result or error.

    A failing action does not stop the following ones, mirroring
    AnkiConnect's own ``multi`` semantics.
    """
    outcomes = []
    for action in actions:
        handler = ACTION_HANDLERS[type(action)]
        try:
            result = await handler(client, action.params)
        except Exception as e:
            logger.warning(f"multi: action '{action.action}' failed: {e}")
            outcomes.append(a.ActionOutcome(action=action.action, error=str(e)))
        else:
            outcomes.append(a.ActionOutcome(action=action.action, result=result))
    return outcomes
