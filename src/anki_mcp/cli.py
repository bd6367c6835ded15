"""
Command-line interface for Anki MCP server.
"""

import argparse
import asyncio
import sys

from anki_mcp.clients import AnkiConnectClient
from anki_mcp.server import serve
from anki_mcp.settings import settings
from anki_mcp.utils.errors import AnkiMCPError
from anki_mcp.utils.logging_config import initialize_logging


async def check_connection(url: str) -> int:
    """
    Ping AnkiConnect and print its API version.

    Returns:
        Process exit code (0 when AnkiConnect answered)
    """
    try:
        async with AnkiConnectClient(url=url) as client:
            version = await client.miscellaneous.version()
    except AnkiMCPError as e:
        print(f"AnkiConnect is not reachable at {url}: {e}", file=sys.stderr)
        return 1

    print(f"AnkiConnect reachable at {url} (API version {version})")
    if version < settings.api_version:
        print(
            f"Warning: this server speaks API version {settings.api_version}; "
            "update the AnkiConnect add-on",
            file=sys.stderr,
        )
    return 0


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Anki Model Context Protocol server")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Server command
    subparsers.add_parser("serve", help="Run the MCP server over stdio")

    # Check command
    check_parser = subparsers.add_parser(
        "check", help="Check that AnkiConnect is reachable"
    )
    check_parser.add_argument(
        "--url",
        default=settings.connect_url,
        help=f"AnkiConnect URL (default: {settings.connect_url})",
    )

    # Version command
    subparsers.add_parser("version", help="Print version information")

    args = parser.parse_args()

    if not args.command:
        args.command = "serve"

    if args.command == "version":
        print(f"Anki MCP v{settings.server_version}")
        sys.exit(0)

    elif args.command == "check":
        initialize_logging()
        sys.exit(asyncio.run(check_connection(args.url)))

    elif args.command == "serve":
        asyncio.run(serve())


if __name__ == "__main__":
    main()
