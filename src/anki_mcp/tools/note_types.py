"""
Note type (model) tools for Anki MCP.

Anki calls note types "models"; the tool names follow AnkiConnect.
"""

from fastmcp import Context, FastMCP

from anki_mcp.clients import get_anki_client
from anki_mcp.models.note_types import (
    CreateModelInput,
    FindAndReplaceInModelsInput,
    ModelFieldAddInput,
    ModelFieldInput,
    ModelFieldRenameInput,
    ModelFieldRepositionInput,
    ModelFieldSetDescriptionInput,
    ModelFieldSetFontInput,
    ModelFieldSetFontSizeInput,
    ModelTemplateAddInput,
    ModelTemplateInput,
    ModelTemplateRenameInput,
    ModelTemplateRepositionInput,
    UpdateModelStylingInput,
    UpdateModelTemplatesInput,
)

from .common import annotations, run_anki_call


def register_note_type_tools(mcp: FastMCP) -> None:
    """Register note type tools."""

    @mcp.tool(name="create_model", annotations=annotations("Create Note Type"))
    async def create_model(params: CreateModelInput, ctx: Context) -> str:
        """
        Create a note type with fields, card templates and optional CSS.

        Example:
            Use when: "Create a 'Vocab' note type with Word, Meaning and Example fields"
        """
        request = {
            "modelName": params.model_name,
            "inOrderFields": params.in_order_fields,
            "cardTemplates": [t.to_anki() for t in params.card_templates],
            "isCloze": params.is_cloze,
        }
        if params.css is not None:
            request["css"] = params.css
        model = await run_anki_call(
            ctx, "create note type", get_anki_client().model.create_model(**request)
        )
        return (
            f'Successfully created note type "{params.model_name}" with ID: {model.get("id")}. '
            f"Fields: [{', '.join(params.in_order_fields)}], "
            f"Templates: [{', '.join(t.name for t in params.card_templates)}]"
        )

    @mcp.tool(
        name="find_and_replace_in_models",
        annotations=annotations("Find And Replace In Note Types", destructive=True),
    )
    async def find_and_replace_in_models(
        params: FindAndReplaceInModelsInput, ctx: Context
    ) -> str:
        """Find and replace text in the templates and/or styling of a note type."""
        count = await run_anki_call(
            ctx,
            "find and replace in note types",
            get_anki_client().model.find_and_replace_in_models(
                model={
                    "modelName": params.model_name,
                    "findText": params.find_text,
                    "replaceText": params.replace_text,
                    "front": params.front,
                    "back": params.back,
                    "css": params.css,
                }
            ),
        )
        return (
            f'Replaced "{params.find_text}" with "{params.replace_text}" '
            f'{count} times in note type "{params.model_name}"'
        )

    # -------------------- Fields --------------------

    @mcp.tool(name="model_field_add", annotations=annotations("Add Note Type Field"))
    async def model_field_add(params: ModelFieldAddInput, ctx: Context) -> str:
        await run_anki_call(
            ctx,
            "add field",
            get_anki_client().model.model_field_add(
                model_name=params.model_name, field_name=params.field_name, index=params.index
            ),
        )
        return f'Successfully added field "{params.field_name}" to "{params.model_name}"'

    @mcp.tool(
        name="model_field_remove",
        annotations=annotations("Remove Note Type Field", destructive=True),
    )
    async def model_field_remove(params: ModelFieldInput, ctx: Context) -> str:
        """Remove a field from a note type. Its content is lost on every note."""
        await run_anki_call(
            ctx,
            "remove field",
            get_anki_client().model.model_field_remove(
                model_name=params.model_name, field_name=params.field_name
            ),
        )
        return f'Successfully removed field "{params.field_name}" from "{params.model_name}"'

    @mcp.tool(name="model_field_rename", annotations=annotations("Rename Note Type Field"))
    async def model_field_rename(params: ModelFieldRenameInput, ctx: Context) -> str:
        await run_anki_call(
            ctx,
            "rename field",
            get_anki_client().model.model_field_rename(
                model_name=params.model_name,
                old_field_name=params.old_field_name,
                new_field_name=params.new_field_name,
            ),
        )
        return (
            f'Successfully renamed field "{params.old_field_name}" to '
            f'"{params.new_field_name}" in "{params.model_name}"'
        )

    @mcp.tool(
        name="model_field_reposition",
        annotations=annotations("Reposition Note Type Field", idempotent=True),
    )
    async def model_field_reposition(params: ModelFieldRepositionInput, ctx: Context) -> str:
        await run_anki_call(
            ctx,
            "reposition field",
            get_anki_client().model.model_field_reposition(
                model_name=params.model_name, field_name=params.field_name, index=params.index
            ),
        )
        return f'Moved field "{params.field_name}" to position {params.index}'

    @mcp.tool(
        name="model_field_set_font",
        annotations=annotations("Set Note Type Field Font", idempotent=True),
    )
    async def model_field_set_font(params: ModelFieldSetFontInput, ctx: Context) -> str:
        await run_anki_call(
            ctx,
            "set field font",
            get_anki_client().model.model_field_set_font(
                model_name=params.model_name, field_name=params.field_name, font=params.font
            ),
        )
        return f'Set font of field "{params.field_name}" to "{params.font}"'

    @mcp.tool(
        name="model_field_set_font_size",
        annotations=annotations("Set Note Type Field Font Size", idempotent=True),
    )
    async def model_field_set_font_size(
        params: ModelFieldSetFontSizeInput, ctx: Context
    ) -> str:
        await run_anki_call(
            ctx,
            "set field font size",
            get_anki_client().model.model_field_set_font_size(
                model_name=params.model_name,
                field_name=params.field_name,
                font_size=params.font_size,
            ),
        )
        return f'Set font size of field "{params.field_name}" to {params.font_size}'

    @mcp.tool(
        name="model_field_set_description",
        annotations=annotations("Set Note Type Field Description", idempotent=True),
    )
    async def model_field_set_description(
        params: ModelFieldSetDescriptionInput, ctx: Context
    ) -> str:
        """Set the placeholder text shown for an empty field in the editor."""
        updated = await run_anki_call(
            ctx,
            "set field description",
            get_anki_client().model.model_field_set_description(
                model_name=params.model_name,
                field_name=params.field_name,
                description=params.description,
            ),
        )
        if not updated:
            return "Field descriptions are not supported by this Anki version"
        return f'Set description of field "{params.field_name}"'

    # -------------------- Templates and styling --------------------

    @mcp.tool(name="model_template_add", annotations=annotations("Add Card Template"))
    async def model_template_add(params: ModelTemplateAddInput, ctx: Context) -> str:
        await run_anki_call(
            ctx,
            "add template",
            get_anki_client().model.model_template_add(
                model_name=params.model_name, template=params.template.to_anki()
            ),
        )
        return f'Successfully added template "{params.template.name}" to "{params.model_name}"'

    @mcp.tool(
        name="model_template_remove",
        annotations=annotations("Remove Card Template", destructive=True),
    )
    async def model_template_remove(params: ModelTemplateInput, ctx: Context) -> str:
        """Remove a card template. Cards generated from it are deleted."""
        await run_anki_call(
            ctx,
            "remove template",
            get_anki_client().model.model_template_remove(
                model_name=params.model_name, template_name=params.template_name
            ),
        )
        return (
            f'Successfully removed template "{params.template_name}" from "{params.model_name}"'
        )

    @mcp.tool(name="model_template_rename", annotations=annotations("Rename Card Template"))
    async def model_template_rename(params: ModelTemplateRenameInput, ctx: Context) -> str:
        await run_anki_call(
            ctx,
            "rename template",
            get_anki_client().model.model_template_rename(
                model_name=params.model_name,
                old_template_name=params.old_template_name,
                new_template_name=params.new_template_name,
            ),
        )
        return (
            f'Successfully renamed template "{params.old_template_name}" to '
            f'"{params.new_template_name}"'
        )

    @mcp.tool(
        name="model_template_reposition",
        annotations=annotations("Reposition Card Template", idempotent=True),
    )
    async def model_template_reposition(
        params: ModelTemplateRepositionInput, ctx: Context
    ) -> str:
        await run_anki_call(
            ctx,
            "reposition template",
            get_anki_client().model.model_template_reposition(
                model_name=params.model_name,
                template_name=params.template_name,
                index=params.index,
            ),
        )
        return f'Moved template "{params.template_name}" to position {params.index}'

    @mcp.tool(
        name="update_model_styling",
        annotations=annotations("Update Note Type Styling", idempotent=True),
    )
    async def update_model_styling(params: UpdateModelStylingInput, ctx: Context) -> str:
        await run_anki_call(
            ctx,
            "update styling",
            get_anki_client().model.update_model_styling(
                model={"name": params.model_name, "css": params.css}
            ),
        )
        return f'Successfully updated styling of "{params.model_name}"'

    @mcp.tool(
        name="update_model_templates",
        annotations=annotations("Update Card Templates", idempotent=True),
    )
    async def update_model_templates(params: UpdateModelTemplatesInput, ctx: Context) -> str:
        """Replace the front and/or back HTML of existing card templates."""
        templates = {name: sides.to_anki() for name, sides in params.templates.items()}
        await run_anki_call(
            ctx,
            "update templates",
            get_anki_client().model.update_model_templates(
                model={"name": params.model_name, "templates": templates}
            ),
        )
        return (
            f'Successfully updated templates [{", ".join(templates)}] of "{params.model_name}"'
        )
