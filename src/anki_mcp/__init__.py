"""
Anki MCP - Model Context Protocol server for Anki via AnkiConnect.
"""

from anki_mcp.settings import settings

__version__ = settings.server_version

__all__ = ["__version__"]
