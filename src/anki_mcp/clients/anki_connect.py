"""
AnkiConnect HTTP client.

Provides async access to Anki through the AnkiConnect add-on's local
HTTP API. Each method performs exactly one request and returns the
``result`` field of the response.

API Docs: https://git.foosoft.net/alex/anki-connect
"""

import logging
from typing import Any

import httpx

from anki_mcp.settings import settings
from anki_mcp.utils.errors import (
    AnkiConnectError,
    AnkiConnectionError,
    ConfigurationError,
)

logger = logging.getLogger(__name__)

_client: "AnkiConnectClient | None" = None


class _DomainAPI:
    """Base class for a group of AnkiConnect actions."""

    def __init__(self, client: "AnkiConnectClient"):
        self._client = client

    async def _invoke(self, action: str, **params: Any) -> Any:
        return await self._client.invoke(action, **params)


class DeckAPI(_DomainAPI):
    """Deck actions."""

    async def deck_names(self) -> list[str]:
        return await self._invoke("deckNames")

    async def deck_names_and_ids(self) -> dict[str, int]:
        return await self._invoke("deckNamesAndIds")

    async def get_decks(self, cards: list[int]) -> dict[str, list[int]]:
        return await self._invoke("getDecks", cards=cards)

    async def create_deck(self, deck: str) -> int:
        return await self._invoke("createDeck", deck=deck)

    async def change_deck(self, cards: list[int], deck: str) -> None:
        return await self._invoke("changeDeck", cards=cards, deck=deck)

    async def delete_decks(self, decks: list[str], cards_too: bool = True) -> None:
        return await self._invoke("deleteDecks", decks=decks, cardsToo=cards_too)

    async def get_deck_config(self, deck: str) -> dict[str, Any]:
        return await self._invoke("getDeckConfig", deck=deck)

    async def save_deck_config(self, config: dict[str, Any]) -> bool:
        return await self._invoke("saveDeckConfig", config=config)

    async def set_deck_config_id(self, decks: list[str], config_id: int) -> bool:
        return await self._invoke("setDeckConfigId", decks=decks, configId=config_id)

    async def clone_deck_config_id(self, name: str, clone_from: int) -> int | bool:
        return await self._invoke("cloneDeckConfigId", name=name, cloneFrom=clone_from)

    async def remove_deck_config_id(self, config_id: int) -> bool:
        return await self._invoke("removeDeckConfigId", configId=config_id)

    async def get_deck_stats(self, decks: list[str]) -> dict[str, Any]:
        return await self._invoke("getDeckStats", decks=decks)


class CardAPI(_DomainAPI):
    """Card actions."""

    async def find_cards(self, query: str) -> list[int]:
        return await self._invoke("findCards", query=query)

    async def cards_info(self, cards: list[int]) -> list[dict[str, Any]]:
        return await self._invoke("cardsInfo", cards=cards)

    async def cards_to_notes(self, cards: list[int]) -> list[int]:
        return await self._invoke("cardsToNotes", cards=cards)

    async def cards_mod_time(self, cards: list[int]) -> list[dict[str, int]]:
        return await self._invoke("cardsModTime", cards=cards)

    async def get_ease_factors(self, cards: list[int]) -> list[int]:
        return await self._invoke("getEaseFactors", cards=cards)

    async def set_ease_factors(self, cards: list[int], ease_factors: list[int]) -> list[bool]:
        return await self._invoke("setEaseFactors", cards=cards, easeFactors=ease_factors)

    async def set_specific_value_of_card(
        self, card: int, keys: list[str], new_values: list[str]
    ) -> list[bool]:
        return await self._invoke(
            "setSpecificValueOfCard", card=card, keys=keys, newValues=new_values
        )

    async def suspend(self, cards: list[int]) -> bool:
        return await self._invoke("suspend", cards=cards)

    async def unsuspend(self, cards: list[int]) -> bool:
        return await self._invoke("unsuspend", cards=cards)

    async def suspended(self, card: int) -> bool:
        return await self._invoke("suspended", card=card)

    async def are_suspended(self, cards: list[int]) -> list[bool | None]:
        return await self._invoke("areSuspended", cards=cards)

    async def are_due(self, cards: list[int]) -> list[bool]:
        return await self._invoke("areDue", cards=cards)

    async def get_intervals(self, cards: list[int], complete: bool = False) -> list[Any]:
        return await self._invoke("getIntervals", cards=cards, complete=complete)

    async def forget_cards(self, cards: list[int]) -> None:
        return await self._invoke("forgetCards", cards=cards)

    async def relearn_cards(self, cards: list[int]) -> None:
        return await self._invoke("relearnCards", cards=cards)

    async def set_due_date(self, cards: list[int], days: str) -> bool:
        return await self._invoke("setDueDate", cards=cards, days=days)

    async def answer_cards(self, answers: list[dict[str, int]]) -> list[bool]:
        return await self._invoke("answerCards", answers=answers)


class NoteAPI(_DomainAPI):
    """Note and tag actions."""

    async def add_note(self, note: dict[str, Any]) -> int | None:
        return await self._invoke("addNote", note=note)

    async def add_notes(self, notes: list[dict[str, Any]]) -> list[int | None]:
        return await self._invoke("addNotes", notes=notes)

    async def can_add_notes(self, notes: list[dict[str, Any]]) -> list[bool]:
        return await self._invoke("canAddNotes", notes=notes)

    async def update_note(self, note: dict[str, Any]) -> None:
        return await self._invoke("updateNote", note=note)

    async def update_note_fields(self, note: dict[str, Any]) -> None:
        return await self._invoke("updateNoteFields", note=note)

    async def update_note_tags(self, note: int, tags: list[str]) -> None:
        return await self._invoke("updateNoteTags", note=note, tags=tags)

    async def get_note_tags(self, note: int) -> list[str]:
        return await self._invoke("getNoteTags", note=note)

    async def add_tags(self, notes: list[int], tags: str) -> None:
        return await self._invoke("addTags", notes=notes, tags=tags)

    async def remove_tags(self, notes: list[int], tags: str) -> None:
        return await self._invoke("removeTags", notes=notes, tags=tags)

    async def replace_tags(
        self, notes: list[int], tag_to_replace: str, replace_with_tag: str
    ) -> None:
        return await self._invoke(
            "replaceTags",
            notes=notes,
            tag_to_replace=tag_to_replace,
            replace_with_tag=replace_with_tag,
        )

    async def get_tags(self) -> list[str]:
        return await self._invoke("getTags")

    async def clear_unused_tags(self) -> None:
        return await self._invoke("clearUnusedTags")

    async def find_notes(self, query: str) -> list[int]:
        return await self._invoke("findNotes", query=query)

    async def notes_info(self, notes: list[int]) -> list[dict[str, Any]]:
        return await self._invoke("notesInfo", notes=notes)

    async def notes_mod_time(self, notes: list[int]) -> list[dict[str, int]]:
        return await self._invoke("notesModTime", notes=notes)

    async def delete_notes(self, notes: list[int]) -> None:
        return await self._invoke("deleteNotes", notes=notes)

    async def remove_empty_notes(self) -> None:
        return await self._invoke("removeEmptyNotes")


class ModelAPI(_DomainAPI):
    """Note type (model) actions."""

    async def model_names(self) -> list[str]:
        return await self._invoke("modelNames")

    async def model_names_and_ids(self) -> dict[str, int]:
        return await self._invoke("modelNamesAndIds")

    async def find_models_by_id(self, model_ids: list[int]) -> list[dict[str, Any]]:
        return await self._invoke("findModelsById", modelIds=model_ids)

    async def find_models_by_name(self, model_names: list[str]) -> list[dict[str, Any]]:
        return await self._invoke("findModelsByName", modelNames=model_names)

    async def model_field_names(self, model_name: str) -> list[str]:
        return await self._invoke("modelFieldNames", modelName=model_name)

    async def model_field_fonts(self, model_name: str) -> dict[str, Any]:
        return await self._invoke("modelFieldFonts", modelName=model_name)

    async def model_fields_on_templates(self, model_name: str) -> dict[str, Any]:
        return await self._invoke("modelFieldsOnTemplates", modelName=model_name)

    async def model_styling(self, model_name: str) -> dict[str, str]:
        return await self._invoke("modelStyling", modelName=model_name)

    async def model_templates(self, model_name: str) -> dict[str, Any]:
        return await self._invoke("modelTemplates", modelName=model_name)

    async def create_model(self, **params: Any) -> dict[str, Any]:
        return await self._invoke("createModel", **params)

    async def update_model_templates(self, model: dict[str, Any]) -> None:
        return await self._invoke("updateModelTemplates", model=model)

    async def update_model_styling(self, model: dict[str, Any]) -> None:
        return await self._invoke("updateModelStyling", model=model)

    async def find_and_replace_in_models(self, model: dict[str, Any]) -> int:
        return await self._invoke("findAndReplaceInModels", model=model)

    async def model_template_rename(
        self, model_name: str, old_template_name: str, new_template_name: str
    ) -> None:
        return await self._invoke(
            "modelTemplateRename",
            modelName=model_name,
            oldTemplateName=old_template_name,
            newTemplateName=new_template_name,
        )

    async def model_template_reposition(
        self, model_name: str, template_name: str, index: int
    ) -> None:
        return await self._invoke(
            "modelTemplateReposition",
            modelName=model_name,
            templateName=template_name,
            index=index,
        )

    async def model_template_add(self, model_name: str, template: dict[str, str]) -> None:
        return await self._invoke("modelTemplateAdd", modelName=model_name, template=template)

    async def model_template_remove(self, model_name: str, template_name: str) -> None:
        return await self._invoke(
            "modelTemplateRemove", modelName=model_name, templateName=template_name
        )

    async def model_field_rename(
        self, model_name: str, old_field_name: str, new_field_name: str
    ) -> None:
        return await self._invoke(
            "modelFieldRename",
            modelName=model_name,
            oldFieldName=old_field_name,
            newFieldName=new_field_name,
        )

    async def model_field_reposition(self, model_name: str, field_name: str, index: int) -> None:
        return await self._invoke(
            "modelFieldReposition", modelName=model_name, fieldName=field_name, index=index
        )

    async def model_field_add(
        self, model_name: str, field_name: str, index: int | None = None
    ) -> None:
        params: dict[str, Any] = {"modelName": model_name, "fieldName": field_name}
        if index is not None:
            params["index"] = index
        return await self._invoke("modelFieldAdd", **params)

    async def model_field_remove(self, model_name: str, field_name: str) -> None:
        return await self._invoke("modelFieldRemove", modelName=model_name, fieldName=field_name)

    async def model_field_set_font(self, model_name: str, field_name: str, font: str) -> None:
        return await self._invoke(
            "modelFieldSetFont", modelName=model_name, fieldName=field_name, font=font
        )

    async def model_field_set_font_size(
        self, model_name: str, field_name: str, font_size: int
    ) -> None:
        return await self._invoke(
            "modelFieldSetFontSize",
            modelName=model_name,
            fieldName=field_name,
            fontSize=font_size,
        )

    async def model_field_set_description(
        self, model_name: str, field_name: str, description: str
    ) -> bool:
        return await self._invoke(
            "modelFieldSetDescription",
            modelName=model_name,
            fieldName=field_name,
            description=description,
        )


class MediaAPI(_DomainAPI):
    """Media file actions."""

    async def store_media_file(self, filename: str, **source: Any) -> str:
        return await self._invoke("storeMediaFile", filename=filename, **source)

    async def retrieve_media_file(self, filename: str) -> str | bool:
        return await self._invoke("retrieveMediaFile", filename=filename)

    async def get_media_files_names(self, pattern: str) -> list[str]:
        return await self._invoke("getMediaFilesNames", pattern=pattern)

    async def get_media_dir_path(self) -> str:
        return await self._invoke("getMediaDirPath")

    async def delete_media_file(self, filename: str) -> None:
        return await self._invoke("deleteMediaFile", filename=filename)


class StatisticAPI(_DomainAPI):
    """Review statistic actions."""

    async def get_num_cards_reviewed_today(self) -> int:
        return await self._invoke("getNumCardsReviewedToday")

    async def get_num_cards_reviewed_by_day(self) -> list[list[Any]]:
        return await self._invoke("getNumCardsReviewedByDay")

    async def get_collection_stats_html(self, whole_collection: bool = True) -> str:
        return await self._invoke("getCollectionStatsHTML", wholeCollection=whole_collection)

    async def card_reviews(self, deck: str, start_id: int) -> list[list[Any]]:
        return await self._invoke("cardReviews", deck=deck, startID=start_id)

    async def get_reviews_of_cards(self, cards: list[int]) -> dict[str, list[dict[str, Any]]]:
        return await self._invoke("getReviewsOfCards", cards=cards)

    async def get_latest_review_id(self, deck: str) -> int:
        return await self._invoke("getLatestReviewID", deck=deck)

    async def insert_reviews(self, reviews: list[list[Any]]) -> None:
        return await self._invoke("insertReviews", reviews=reviews)


class GraphicalAPI(_DomainAPI):
    """Actions that drive Anki's user interface."""

    async def gui_browse(
        self, query: str, reorder_cards: dict[str, str] | None = None
    ) -> list[int]:
        params: dict[str, Any] = {"query": query}
        if reorder_cards is not None:
            params["reorderCards"] = reorder_cards
        return await self._invoke("guiBrowse", **params)

    async def gui_select_card(self, card: int) -> bool:
        return await self._invoke("guiSelectCard", card=card)

    async def gui_select_note(self, note: int) -> bool:
        return await self._invoke("guiSelectNote", note=note)

    async def gui_selected_notes(self) -> list[int]:
        return await self._invoke("guiSelectedNotes")

    async def gui_add_cards(self, note: dict[str, Any]) -> int:
        return await self._invoke("guiAddCards", note=note)

    async def gui_edit_note(self, note: int) -> None:
        return await self._invoke("guiEditNote", note=note)

    async def gui_current_card(self) -> dict[str, Any] | None:
        return await self._invoke("guiCurrentCard")

    async def gui_start_card_timer(self) -> bool:
        return await self._invoke("guiStartCardTimer")

    async def gui_show_question(self) -> bool:
        return await self._invoke("guiShowQuestion")

    async def gui_show_answer(self) -> bool:
        return await self._invoke("guiShowAnswer")

    async def gui_answer_card(self, ease: int) -> bool:
        return await self._invoke("guiAnswerCard", ease=ease)

    async def gui_undo(self) -> bool:
        return await self._invoke("guiUndo")

    async def gui_deck_overview(self, name: str) -> bool:
        return await self._invoke("guiDeckOverview", name=name)

    async def gui_deck_browser(self) -> None:
        return await self._invoke("guiDeckBrowser")

    async def gui_deck_review(self, name: str) -> bool:
        return await self._invoke("guiDeckReview", name=name)

    async def gui_import_file(self, path: str | None = None) -> None:
        if path is None:
            return await self._invoke("guiImportFile")
        return await self._invoke("guiImportFile", path=path)

    async def gui_exit_anki(self) -> None:
        return await self._invoke("guiExitAnki")

    async def gui_check_database(self) -> bool:
        return await self._invoke("guiCheckDatabase")


class MiscellaneousAPI(_DomainAPI):
    """Connection, profile, package and sync actions."""

    async def version(self) -> int:
        return await self._invoke("version")

    async def request_permission(self) -> dict[str, Any]:
        return await self._invoke("requestPermission")

    async def api_reflect(
        self, scopes: list[str], actions: list[str] | None = None
    ) -> dict[str, Any]:
        return await self._invoke("apiReflect", scopes=scopes, actions=actions)

    async def sync(self) -> None:
        return await self._invoke("sync")

    async def get_profiles(self) -> list[str]:
        return await self._invoke("getProfiles")

    async def get_active_profile(self) -> str:
        return await self._invoke("getActiveProfile")

    async def load_profile(self, name: str) -> bool:
        return await self._invoke("loadProfile", name=name)

    async def export_package(
        self, deck: str, path: str, include_sched: bool | None = None
    ) -> bool:
        params: dict[str, Any] = {"deck": deck, "path": path}
        if include_sched is not None:
            params["includeSched"] = include_sched
        return await self._invoke("exportPackage", **params)

    async def import_package(self, path: str) -> bool:
        return await self._invoke("importPackage", path=path)

    async def reload_collection(self) -> None:
        return await self._invoke("reloadCollection")


class AnkiConnectClient:
    """
    Client for the AnkiConnect HTTP API.

    Requires Anki to be running with the AnkiConnect add-on installed.
    Actions are grouped by domain: ``deck``, ``card``, ``note``, ``model``,
    ``media``, ``statistic``, ``graphical`` and ``miscellaneous``.

    Calls are at-most-once and not transactional; nothing is retried here.
    """

    def __init__(
        self,
        url: str | None = None,
        api_version: int | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize AnkiConnect client.

        Args:
            url: AnkiConnect endpoint (defaults to ANKI_CONNECT_URL)
            api_version: AnkiConnect API version sent with every request
            api_key: Optional AnkiConnect API key
            timeout: Request timeout in seconds
            transport: Custom httpx transport (used in tests)
        """
        self.url = url or settings.connect_url
        if not self.url.startswith(("http://", "https://")):
            raise ConfigurationError(
                f"Invalid AnkiConnect URL: {self.url!r}",
                "Set ANKI_CONNECT_URL to an http:// or https:// address",
            )
        self.api_version = api_version or settings.api_version
        self.api_key = api_key if api_key is not None else settings.api_key
        self.timeout = timeout or settings.timeout
        self._http = httpx.AsyncClient(
            timeout=self.timeout,
            transport=transport,
            headers={"User-Agent": "python/anki-mcp"},
        )

        self.deck = DeckAPI(self)
        self.card = CardAPI(self)
        self.note = NoteAPI(self)
        self.model = ModelAPI(self)
        self.media = MediaAPI(self)
        self.statistic = StatisticAPI(self)
        self.graphical = GraphicalAPI(self)
        self.miscellaneous = MiscellaneousAPI(self)

    async def invoke(self, action: str, **params: Any) -> Any:
        """
        Perform a single AnkiConnect action.

        Args:
            action: AnkiConnect action name (e.g. "addTags")
            **params: Action parameters, sent verbatim

        Returns:
            The ``result`` field of the response.

        Raises:
            AnkiConnectionError: If Anki is unreachable or the HTTP exchange fails
            AnkiConnectError: If AnkiConnect reports an error for the action
        """
        payload: dict[str, Any] = {"action": action, "version": self.api_version}
        if params:
            payload["params"] = params
        if self.api_key:
            payload["key"] = self.api_key

        logger.debug(f"Invoking AnkiConnect action '{action}'")
        try:
            response = await self._http.post(self.url, json=payload)
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            raise AnkiConnectionError(
                f"AnkiConnect timed out after {self.timeout:g}s during '{action}'"
            ) from e
        except httpx.ConnectError as e:
            raise AnkiConnectionError(
                f"Could not connect to Anki at {self.url}",
                "Please ensure Anki is running and the AnkiConnect add-on is installed",
            ) from e
        except httpx.HTTPStatusError as e:
            raise AnkiConnectionError(
                f"AnkiConnect returned HTTP {e.response.status_code} for '{action}'"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise AnkiConnectionError(f"AnkiConnect request '{action}' failed: {e}") from e

        if not isinstance(data, dict) or "result" not in data or "error" not in data:
            raise AnkiConnectError(action, "response has an unexpected format")

        if data["error"] is not None:
            logger.debug(f"AnkiConnect returned error for '{action}': {data['error']}")
            raise AnkiConnectError(action, str(data["error"]))

        return data["result"]

    async def close(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "AnkiConnectClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def get_anki_client() -> AnkiConnectClient:
    """
    Get the shared AnkiConnect client.

    Returns:
        The process-wide AnkiConnectClient, created on first use
    """
    global _client
    if _client is None:
        _client = AnkiConnectClient()
    return _client


def reset_anki_client() -> None:
    """Drop the shared client (for testing)."""
    global _client
    _client = None


async def close_anki_client() -> None:
    """Close the shared client if one was created, then drop it."""
    global _client
    if _client is not None:
        client, _client = _client, None
        await client.close()
