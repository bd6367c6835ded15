"""
Note type (model) resources for Anki MCP.
"""

from urllib.parse import unquote

from fastmcp import FastMCP

from anki_mcp.clients import get_anki_client
from anki_mcp.utils.helpers import parse_id_list, parse_name_list, to_json

from .common import JSON_MIME_TYPE, resource_error


def register_note_type_resources(mcp: FastMCP) -> None:
    """Register note type resources."""

    @mcp.resource("anki:///models/names", name="model_names", mime_type=JSON_MIME_TYPE)
    async def model_names() -> str:
        """All note type names."""
        try:
            names = await get_anki_client().model.model_names()
        except Exception as e:
            raise resource_error(e, "get model names") from e
        return to_json(names)

    @mcp.resource(
        "anki:///models/names-and-ids", name="model_names_and_ids", mime_type=JSON_MIME_TYPE
    )
    async def model_names_and_ids() -> str:
        try:
            models = await get_anki_client().model.model_names_and_ids()
        except Exception as e:
            raise resource_error(e, "get model names and IDs") from e
        return to_json(models)

    @mcp.resource(
        "anki:///models/by-id/{model_ids}", name="models_by_id", mime_type=JSON_MIME_TYPE
    )
    async def models_by_id(model_ids: str) -> str:
        """Full definitions of comma-separated note type IDs."""
        try:
            ids = parse_id_list(model_ids, "model IDs")
            models = await get_anki_client().model.find_models_by_id(model_ids=ids)
        except Exception as e:
            raise resource_error(e, "get models by ID") from e
        return to_json(models)

    @mcp.resource(
        "anki:///models/by-name/{model_names}", name="models_by_name", mime_type=JSON_MIME_TYPE
    )
    async def models_by_name(model_names: str) -> str:
        """Full definitions of comma-separated note type names."""
        names = parse_name_list(model_names)
        try:
            models = await get_anki_client().model.find_models_by_name(model_names=names)
        except Exception as e:
            raise resource_error(e, "get models by name") from e
        return to_json(models)

    @mcp.resource(
        "anki:///models/{model_name}/fields/names",
        name="model_field_names",
        mime_type=JSON_MIME_TYPE,
    )
    async def model_field_names(model_name: str) -> str:
        name = unquote(model_name)
        try:
            fields = await get_anki_client().model.model_field_names(model_name=name)
        except Exception as e:
            raise resource_error(e, f'get field names of "{name}"') from e
        return to_json(fields)

    @mcp.resource(
        "anki:///models/{model_name}/fields/fonts",
        name="model_field_fonts",
        mime_type=JSON_MIME_TYPE,
    )
    async def model_field_fonts(model_name: str) -> str:
        name = unquote(model_name)
        try:
            fonts = await get_anki_client().model.model_field_fonts(model_name=name)
        except Exception as e:
            raise resource_error(e, f'get field fonts of "{name}"') from e
        return to_json(fonts)

    @mcp.resource(
        "anki:///models/{model_name}/fields/templates",
        name="model_fields_on_templates",
        mime_type=JSON_MIME_TYPE,
    )
    async def model_fields_on_templates(model_name: str) -> str:
        """Fields used on the front and back of each card template."""
        name = unquote(model_name)
        try:
            usage = await get_anki_client().model.model_fields_on_templates(model_name=name)
        except Exception as e:
            raise resource_error(e, f'get fields on templates of "{name}"') from e
        return to_json(usage)

    @mcp.resource(
        "anki:///models/{model_name}/styling", name="model_styling", mime_type=JSON_MIME_TYPE
    )
    async def model_styling(model_name: str) -> str:
        name = unquote(model_name)
        try:
            styling = await get_anki_client().model.model_styling(model_name=name)
        except Exception as e:
            raise resource_error(e, f'get styling of "{name}"') from e
        return to_json(styling)

    @mcp.resource(
        "anki:///models/{model_name}/templates", name="model_templates", mime_type=JSON_MIME_TYPE
    )
    async def model_templates(model_name: str) -> str:
        """Front and back HTML of each card template."""
        name = unquote(model_name)
        try:
            templates = await get_anki_client().model.model_templates(model_name=name)
        except Exception as e:
            raise resource_error(e, f'get templates of "{name}"') from e
        return to_json(templates)
