"""
Common helper functions for Anki MCP.
"""

import json
from typing import Any
from urllib.parse import unquote

from anki_mcp.utils.errors import ValidationError


def parse_id_list(raw: str, kind: str = "IDs") -> list[int]:
    """
    Parse a comma-separated list of integer IDs from a resource path segment.

    Args:
        raw: Path segment such as "1502298033753,1502298036657"
        kind: Label used in the error message (e.g. "card IDs")

    Returns:
        List of integer IDs.

    Raises:
        ValidationError: If any entry is not an integer or the list is empty.

    Examples:
        >>> parse_id_list("1, 2,3")
        [1, 2, 3]
    """
    parts = [part.strip() for part in unquote(raw).split(",")]
    try:
        ids = [int(part) for part in parts]
    except ValueError:
        raise ValidationError(f"Invalid {kind} provided") from None
    return ids


def parse_name_list(raw: str) -> list[str]:
    """Split a comma-separated, URL-encoded path segment into names."""
    return [name.strip() for name in unquote(raw).split(",") if name.strip()]


def to_json(data: Any) -> str:
    """Pretty-print a remote result the way resources and tools show it."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_id_list(ids: list[int]) -> str:
    """
    Format IDs as a bracketed, comma-separated list.

    Examples:
        >>> format_id_list([1, 2])
        '[1, 2]'
    """
    return f"[{', '.join(str(i) for i in ids)}]"
