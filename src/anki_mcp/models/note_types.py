"""
Pydantic models for note type (model) tools.
"""

from pydantic import Field

from .common import BaseInput, Name


class CardTemplate(BaseInput):
    """A card template of a note type."""

    name: Name = Field(..., min_length=1, description="Template name")
    front: str = Field(..., description="Front template HTML")
    back: str = Field(..., description="Back template HTML")

    def to_anki(self) -> dict[str, str]:
        return {"Name": self.name, "Front": self.front, "Back": self.back}


class CreateModelInput(BaseInput):
    """Input for create_model."""

    model_name: Name = Field(..., min_length=1, description="Name of the new note type")
    in_order_fields: list[Name] = Field(..., min_length=1, description="Field names in order")
    card_templates: list[CardTemplate] = Field(
        ..., min_length=1, description="Card templates of the note type"
    )
    css: str | None = Field(default=None, description="Styling CSS shared by all templates")
    is_cloze: bool = Field(default=False, description="Whether the note type is a cloze type")


class FindAndReplaceInModelsInput(BaseInput):
    """Input for find_and_replace_in_models."""

    model_name: Name = Field(..., min_length=1, description="Name of the note type")
    find_text: str = Field(..., min_length=1, description="Text to find")
    replace_text: str = Field(..., description="Replacement text")
    front: bool = Field(default=True, description="Search the front templates")
    back: bool = Field(default=True, description="Search the back templates")
    css: bool = Field(default=True, description="Search the styling")


class ModelFieldInput(BaseInput):
    """Input for tools acting on one field of a note type."""

    model_name: Name = Field(..., min_length=1, description="Name of the note type")
    field_name: Name = Field(..., min_length=1, description="Name of the field")


class ModelFieldAddInput(ModelFieldInput):
    index: int | None = Field(
        default=None, ge=0, description="Position of the new field (appended if omitted)"
    )


class ModelFieldRenameInput(BaseInput):
    model_name: Name = Field(..., min_length=1, description="Name of the note type")
    old_field_name: Name = Field(..., min_length=1, description="Current field name")
    new_field_name: Name = Field(..., min_length=1, description="New field name")


class ModelFieldRepositionInput(ModelFieldInput):
    index: int = Field(..., ge=0, description="New zero-based position of the field")


class ModelFieldSetFontInput(ModelFieldInput):
    font: Name = Field(..., min_length=1, description='Font family (e.g., "Arial")')


class ModelFieldSetFontSizeInput(ModelFieldInput):
    font_size: int = Field(..., ge=1, description="Font size in points")


class ModelFieldSetDescriptionInput(ModelFieldInput):
    description: str = Field(..., description="Placeholder text shown in the editor")


class ModelTemplateAddInput(BaseInput):
    model_name: Name = Field(..., min_length=1, description="Name of the note type")
    template: CardTemplate = Field(..., description="Template to add")


class ModelTemplateInput(BaseInput):
    """Input for tools acting on one template of a note type."""

    model_name: Name = Field(..., min_length=1, description="Name of the note type")
    template_name: Name = Field(..., min_length=1, description="Name of the template")


class ModelTemplateRenameInput(BaseInput):
    model_name: Name = Field(..., min_length=1, description="Name of the note type")
    old_template_name: Name = Field(..., min_length=1, description="Current template name")
    new_template_name: Name = Field(..., min_length=1, description="New template name")


class ModelTemplateRepositionInput(ModelTemplateInput):
    index: int = Field(..., ge=0, description="New zero-based position of the template")


class UpdateModelStylingInput(BaseInput):
    model_name: Name = Field(..., min_length=1, description="Name of the note type")
    css: str = Field(..., description="New styling CSS")


class TemplateSides(BaseInput):
    front: str | None = Field(default=None, description="New front template HTML")
    back: str | None = Field(default=None, description="New back template HTML")

    def to_anki(self) -> dict[str, str]:
        sides = {}
        if self.front is not None:
            sides["Front"] = self.front
        if self.back is not None:
            sides["Back"] = self.back
        return sides


class UpdateModelTemplatesInput(BaseInput):
    model_name: Name = Field(..., min_length=1, description="Name of the note type")
    templates: dict[str, TemplateSides] = Field(
        ..., min_length=1, description="Template name to new front/back HTML"
    )
