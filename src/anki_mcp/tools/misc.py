"""
Miscellaneous tools for Anki MCP: connection, profiles, packages and multi.
"""

from fastmcp import Context, FastMCP

from anki_mcp.clients import get_anki_client
from anki_mcp.models.actions import MultiInput
from anki_mcp.models.misc import (
    ApiReflectInput,
    ExportPackageInput,
    ImportPackageInput,
    LoadProfileInput,
)
from anki_mcp.services import execute_actions
from anki_mcp.utils.helpers import to_json

from .common import annotations, run_anki_call


def register_misc_tools(mcp: FastMCP) -> None:
    """Register miscellaneous tools."""

    @mcp.tool(name="get_version", annotations=annotations("AnkiConnect Version", read_only=True))
    async def get_version(ctx: Context) -> str:
        """Get the AnkiConnect API version. Also a quick check that Anki is reachable."""
        version = await run_anki_call(
            ctx, "get version", get_anki_client().miscellaneous.version()
        )
        return f"AnkiConnect version: {version}"

    @mcp.tool(
        name="request_permission",
        annotations=annotations("Request Permission", idempotent=True),
    )
    async def request_permission(ctx: Context) -> str:
        """Ask AnkiConnect for permission to use the API (needed when an API key is set)."""
        result = await run_anki_call(
            ctx, "request permission", get_anki_client().miscellaneous.request_permission()
        )
        return to_json(result)

    @mcp.tool(name="sync", annotations=annotations("Sync Collection", idempotent=True))
    async def sync(ctx: Context) -> str:
        """Synchronize the local collection with AnkiWeb."""
        await run_anki_call(ctx, "sync", get_anki_client().miscellaneous.sync())
        return "Successfully synchronized the collection with AnkiWeb"

    @mcp.tool(name="get_profiles", annotations=annotations("List Profiles", read_only=True))
    async def get_profiles(ctx: Context) -> str:
        profiles = await run_anki_call(
            ctx, "get profiles", get_anki_client().miscellaneous.get_profiles()
        )
        return f"Profiles: [{', '.join(profiles)}]"

    @mcp.tool(
        name="get_active_profile", annotations=annotations("Active Profile", read_only=True)
    )
    async def get_active_profile(ctx: Context) -> str:
        profile = await run_anki_call(
            ctx, "get active profile", get_anki_client().miscellaneous.get_active_profile()
        )
        return f"Active profile: {profile}"

    @mcp.tool(name="load_profile", annotations=annotations("Load Profile", idempotent=True))
    async def load_profile(params: LoadProfileInput, ctx: Context) -> str:
        loaded = await run_anki_call(
            ctx, "load profile", get_anki_client().miscellaneous.load_profile(name=params.name)
        )
        if not loaded:
            return f'Profile "{params.name}" could not be loaded'
        return f'Successfully loaded profile "{params.name}"'

    @mcp.tool(name="export_package", annotations=annotations("Export Deck Package"))
    async def export_package(params: ExportPackageInput, ctx: Context) -> str:
        """Export a deck to an .apkg file, with or without scheduling information."""
        exported = await run_anki_call(
            ctx,
            "export package",
            get_anki_client().miscellaneous.export_package(
                deck=params.deck, path=params.path, include_sched=params.include_sched
            ),
        )
        if not exported:
            return f'Deck "{params.deck}" could not be exported'
        return f'Successfully exported "{params.deck}" to {params.path}'

    @mcp.tool(name="import_package", annotations=annotations("Import Deck Package"))
    async def import_package(params: ImportPackageInput, ctx: Context) -> str:
        imported = await run_anki_call(
            ctx,
            "import package",
            get_anki_client().miscellaneous.import_package(path=params.path),
        )
        if not imported:
            return f"{params.path} could not be imported"
        return f"Successfully imported {params.path}"

    @mcp.tool(
        name="reload_collection", annotations=annotations("Reload Collection", idempotent=True)
    )
    async def reload_collection(ctx: Context) -> str:
        await run_anki_call(
            ctx, "reload collection", get_anki_client().miscellaneous.reload_collection()
        )
        return "Successfully reloaded the collection"

    @mcp.tool(name="api_reflect", annotations=annotations("API Reflection", read_only=True))
    async def api_reflect(params: ApiReflectInput, ctx: Context) -> str:
        """List the actions the running AnkiConnect supports."""
        result = await run_anki_call(
            ctx,
            "reflect API",
            get_anki_client().miscellaneous.api_reflect(
                scopes=params.scopes, actions=params.actions
            ),
        )
        return to_json(result)

    @mcp.tool(name="multi", annotations=annotations("Run Multiple Actions"))
    async def multi(params: MultiInput, ctx: Context) -> str:
        """
        Run several actions in one call.

        Actions run in order; a failing action is reported in its slot and
        does not stop the rest. Each entry is ``{"action": ..., "params": ...}``
        using AnkiConnect action names (e.g. ``findNotes``, ``addTags``).
        """
        await ctx.info(f"Running {len(params.actions)} actions")
        outcomes = await execute_actions(get_anki_client(), params.actions)
        failed = sum(1 for o in outcomes if o.error is not None)
        return (
            f"Executed {len(outcomes)} actions ({failed} failed):\n"
            f"{to_json([o.model_dump() for o in outcomes])}"
        )
