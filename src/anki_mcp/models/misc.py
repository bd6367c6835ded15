"""
Pydantic models for miscellaneous tools.
"""

from pydantic import Field

from .common import BaseInput, Name


class LoadProfileInput(BaseInput):
    name: Name = Field(..., min_length=1, description="Profile name")


class ExportPackageInput(BaseInput):
    """Input for export_package."""

    deck: Name = Field(..., min_length=1, description="Deck to export")
    path: Name = Field(..., min_length=1, description="Destination .apkg path")
    include_sched: bool = Field(default=False, description="Include scheduling information")


class ImportPackageInput(BaseInput):
    path: Name = Field(..., min_length=1, description="Path of the .apkg file to import")


class ApiReflectInput(BaseInput):
    """Input for api_reflect."""

    scopes: list[str] = Field(default_factory=lambda: ["actions"], description="Reflection scopes")
    actions: list[str] | None = Field(
        default=None, description="Action names to check (all actions if omitted)"
    )
