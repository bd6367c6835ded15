"""
Shared plumbing for the thin AnkiConnect tools.
"""

from collections.abc import Awaitable
from typing import TypeVar

from fastmcp import Context
from fastmcp.exceptions import ToolError
from mcp.types import ToolAnnotations

from anki_mcp.utils.errors import handle_error

T = TypeVar("T")


def annotations(
    title: str,
    *,
    read_only: bool = False,
    destructive: bool = False,
    idempotent: bool = False,
) -> ToolAnnotations:
    """Tool annotations for an action against the local Anki collection."""
    return ToolAnnotations(
        title=title,
        readOnlyHint=read_only,
        destructiveHint=destructive,
        idempotentHint=read_only or idempotent,
        openWorldHint=False,
    )


async def tool_error(ctx: Context, error: Exception, operation: str) -> ToolError:
    """Log and report a failed operation, returning the ``ToolError`` to raise."""
    message = handle_error(error, f"execute {operation}")
    await ctx.error(message)
    return ToolError(message)


async def run_anki_call(ctx: Context, operation: str, call: Awaitable[T]) -> T:
    """
    Await an AnkiConnect call, turning any failure into a ``ToolError``.

    Args:
        ctx: MCP request context, used to report the failure to the client
        operation: Human-readable operation name ("add note")
        call: The pending client call

    Raises:
        ToolError: With the message ``Failed to execute <operation>: <reason>``
    """
    try:
        return await call
    except Exception as e:
        raise await tool_error(ctx, e, operation) from e
