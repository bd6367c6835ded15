"""
Media tools for Anki MCP.
"""

from fastmcp import Context, FastMCP

from anki_mcp.clients import get_anki_client
from anki_mcp.models.media import MediaFilenameInput, MediaPatternInput, StoreMediaFileInput

from .common import annotations, run_anki_call


def register_media_tools(mcp: FastMCP) -> None:
    """Register media file tools."""

    @mcp.tool(name="store_media_file", annotations=annotations("Store Media File"))
    async def store_media_file(params: StoreMediaFileInput, ctx: Context) -> str:
        """
        Store a file in the collection's media folder.

        The contents come from exactly one of ``data`` (base64), ``path``
        (a local file) or ``url``. Anki may rename the file; the stored name
        is returned.
        """
        stored = await run_anki_call(
            ctx,
            "store media file",
            get_anki_client().media.store_media_file(params.filename, **params.source()),
        )
        return f'Successfully stored media file as "{stored}"'

    @mcp.tool(
        name="retrieve_media_file", annotations=annotations("Retrieve Media File", read_only=True)
    )
    async def retrieve_media_file(params: MediaFilenameInput, ctx: Context) -> str:
        """Return the base64-encoded contents of a media file."""
        data = await run_anki_call(
            ctx,
            "retrieve media file",
            get_anki_client().media.retrieve_media_file(filename=params.filename),
        )
        if data is False:
            return f'Media file "{params.filename}" not found'
        return data

    @mcp.tool(
        name="get_media_files_names",
        annotations=annotations("List Media Files", read_only=True),
    )
    async def get_media_files_names(params: MediaPatternInput, ctx: Context) -> str:
        names = await run_anki_call(
            ctx,
            "list media files",
            get_anki_client().media.get_media_files_names(pattern=params.pattern),
        )
        if not names:
            return f'No media files match "{params.pattern}"'
        return f'{len(names)} media files match "{params.pattern}":\n' + "\n".join(names)

    @mcp.tool(
        name="get_media_dir_path", annotations=annotations("Get Media Folder", read_only=True)
    )
    async def get_media_dir_path(ctx: Context) -> str:
        return await run_anki_call(
            ctx, "get media folder", get_anki_client().media.get_media_dir_path()
        )

    @mcp.tool(
        name="delete_media_file",
        annotations=annotations("Delete Media File", destructive=True, idempotent=True),
    )
    async def delete_media_file(params: MediaFilenameInput, ctx: Context) -> str:
        await run_anki_call(
            ctx,
            "delete media file",
            get_anki_client().media.delete_media_file(filename=params.filename),
        )
        return f'Successfully deleted media file "{params.filename}"'
