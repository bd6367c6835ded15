"""
Typed AnkiConnect actions accepted by the ``multi`` tool.

Each action is a variant tagged by its ``action`` name with its own
parameter model, so malformed or unknown actions are rejected before
anything is sent to Anki.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .common import BaseInput

# -------------------- Parameter models --------------------


class ActionParams(BaseModel):
    """Base for action parameters; names match AnkiConnect's wire format."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, protected_namespaces=())


class NoParams(ActionParams):
    pass


class QueryParams(ActionParams):
    query: str


class CardsParams(ActionParams):
    cards: list[int]


class NotesParams(ActionParams):
    notes: list[int]


class DeckParams(ActionParams):
    deck: str


class DeleteDecksParams(ActionParams):
    decks: list[str]
    cards_too: bool = Field(default=True, alias="cardsToo")


class ChangeDeckParams(ActionParams):
    cards: list[int]
    deck: str


class NoteParams(ActionParams):
    note: int


class NotePayloadParams(ActionParams):
    note: dict[str, Any]


class TagsParams(ActionParams):
    notes: list[int]
    tags: str


class ReplaceTagsParams(ActionParams):
    notes: list[int]
    tag_to_replace: str
    replace_with_tag: str


class NoteTagsParams(ActionParams):
    note: int
    tags: list[str]


class ModelNameParams(ActionParams):
    model_name: str = Field(alias="modelName")


# -------------------- Action variants --------------------


class ActionVariant(BaseModel):
    model_config = ConfigDict(extra="forbid")


class VersionAction(ActionVariant):
    action: Literal["version"]
    params: NoParams = Field(default_factory=NoParams)


class SyncAction(ActionVariant):
    action: Literal["sync"]
    params: NoParams = Field(default_factory=NoParams)


class DeckNamesAction(ActionVariant):
    action: Literal["deckNames"]
    params: NoParams = Field(default_factory=NoParams)


class DeckNamesAndIdsAction(ActionVariant):
    action: Literal["deckNamesAndIds"]
    params: NoParams = Field(default_factory=NoParams)


class CreateDeckAction(ActionVariant):
    action: Literal["createDeck"]
    params: DeckParams


class DeleteDecksAction(ActionVariant):
    action: Literal["deleteDecks"]
    params: DeleteDecksParams


class ChangeDeckAction(ActionVariant):
    action: Literal["changeDeck"]
    params: ChangeDeckParams


class GetDecksAction(ActionVariant):
    action: Literal["getDecks"]
    params: CardsParams


class FindCardsAction(ActionVariant):
    action: Literal["findCards"]
    params: QueryParams


class CardsInfoAction(ActionVariant):
    action: Literal["cardsInfo"]
    params: CardsParams


class CardsToNotesAction(ActionVariant):
    action: Literal["cardsToNotes"]
    params: CardsParams


class SuspendAction(ActionVariant):
    action: Literal["suspend"]
    params: CardsParams


class UnsuspendAction(ActionVariant):
    action: Literal["unsuspend"]
    params: CardsParams


class AreSuspendedAction(ActionVariant):
    action: Literal["areSuspended"]
    params: CardsParams


class AreDueAction(ActionVariant):
    action: Literal["areDue"]
    params: CardsParams


class ForgetCardsAction(ActionVariant):
    action: Literal["forgetCards"]
    params: CardsParams


class RelearnCardsAction(ActionVariant):
    action: Literal["relearnCards"]
    params: CardsParams


class FindNotesAction(ActionVariant):
    action: Literal["findNotes"]
    params: QueryParams


class NotesInfoAction(ActionVariant):
    action: Literal["notesInfo"]
    params: NotesParams


class AddNoteAction(ActionVariant):
    action: Literal["addNote"]
    params: NotePayloadParams


class UpdateNoteFieldsAction(ActionVariant):
    action: Literal["updateNoteFields"]
    params: NotePayloadParams


class DeleteNotesAction(ActionVariant):
    action: Literal["deleteNotes"]
    params: NotesParams


class AddTagsAction(ActionVariant):
    action: Literal["addTags"]
    params: TagsParams


class RemoveTagsAction(ActionVariant):
    action: Literal["removeTags"]
    params: TagsParams


class ReplaceTagsAction(ActionVariant):
    action: Literal["replaceTags"]
    params: ReplaceTagsParams


class UpdateNoteTagsAction(ActionVariant):
    action: Literal["updateNoteTags"]
    params: NoteTagsParams


class GetNoteTagsAction(ActionVariant):
    action: Literal["getNoteTags"]
    params: NoteParams


class GetTagsAction(ActionVariant):
    action: Literal["getTags"]
    params: NoParams = Field(default_factory=NoParams)


class ModelNamesAction(ActionVariant):
    action: Literal["modelNames"]
    params: NoParams = Field(default_factory=NoParams)


class ModelFieldNamesAction(ActionVariant):
    action: Literal["modelFieldNames"]
    params: ModelNameParams


class CardsReviewedTodayAction(ActionVariant):
    action: Literal["getNumCardsReviewedToday"]
    params: NoParams = Field(default_factory=NoParams)


AnkiAction = Annotated[
    Union[
        VersionAction,
        SyncAction,
        DeckNamesAction,
        DeckNamesAndIdsAction,
        CreateDeckAction,
        DeleteDecksAction,
        ChangeDeckAction,
        GetDecksAction,
        FindCardsAction,
        CardsInfoAction,
        CardsToNotesAction,
        SuspendAction,
        UnsuspendAction,
        AreSuspendedAction,
        AreDueAction,
        ForgetCardsAction,
        RelearnCardsAction,
        FindNotesAction,
        NotesInfoAction,
        AddNoteAction,
        UpdateNoteFieldsAction,
        DeleteNotesAction,
        AddTagsAction,
        RemoveTagsAction,
        ReplaceTagsAction,
        UpdateNoteTagsAction,
        GetNoteTagsAction,
        GetTagsAction,
        ModelNamesAction,
        ModelFieldNamesAction,
        CardsReviewedTodayAction,
    ],
    Field(discriminator="action"),
]


class MultiInput(BaseInput):
    """Input for the multi tool."""

    actions: list[AnkiAction] = Field(
        ...,
        min_length=1,
        description=(
            'Array of AnkiConnect actions to execute in sequence. Example: '
            '[{"action": "createDeck", "params": {"deck": "My Deck"}}, '
            '{"action": "findNotes", "params": {"query": "deck:\\"My Deck\\""}}]'
        ),
    )


class ActionOutcome(BaseModel):
    """Result of one action of a ``multi`` call."""

    action: str
    result: Any = None
    error: str | None = None
