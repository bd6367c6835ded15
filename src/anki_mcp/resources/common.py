"""
Shared helpers for Anki MCP resources.
"""

from fastmcp.exceptions import ResourceError

from anki_mcp.utils.errors import handle_error

JSON_MIME_TYPE = "application/json"

# Search-style resources fetch details for at most this many notes
DETAIL_LIMIT = 50


def resource_error(error: Exception, operation: str) -> ResourceError:
    """Convert a failure while reading a resource into a ``ResourceError``."""
    return ResourceError(handle_error(error, operation))
