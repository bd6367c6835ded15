"""
Pydantic models for media tools.
"""

from pydantic import Field, model_validator

from .common import BaseInput, Name


class StoreMediaFileInput(BaseInput):
    """Input for store_media_file. Exactly one of data, path or url is required."""

    filename: Name = Field(..., min_length=1, description="Name to store the file under")
    data: str | None = Field(default=None, description="Base64-encoded file contents")
    path: str | None = Field(default=None, description="Absolute path of a local file")
    url: str | None = Field(default=None, description="URL to download the file from")
    delete_existing: bool = Field(
        default=True, description="Overwrite an existing file with the same name"
    )

    @model_validator(mode="after")
    def _one_source(self) -> "StoreMediaFileInput":
        sources = [s for s in (self.data, self.path, self.url) if s]
        if len(sources) != 1:
            raise ValueError("Provide exactly one of data, path or url")
        return self

    def source(self) -> dict:
        params: dict = {"deleteExisting": self.delete_existing}
        for key in ("data", "path", "url"):
            value = getattr(self, key)
            if value:
                params[key] = value
        return params


class MediaFilenameInput(BaseInput):
    filename: Name = Field(..., min_length=1, description="Name of the media file")


class MediaPatternInput(BaseInput):
    pattern: str = Field(default="*", description='Glob pattern for file names (e.g., "*.jpg")')
