#!/usr/bin/env python3
"""
Entry point for the CHUK Harmony MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging
import os

from chuk_mcp_harmony.constants import CONFIG_ENV_VAR, PRESET_ENV_VAR, BoundPreset

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Harmony MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--preset",
        choices=[preset.value for preset in BoundPreset],
        default=None,
        help="Pitch range preset (default: full MIDI range)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help=f"YAML engine config (overrides ${CONFIG_ENV_VAR})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)
    if args.config:
        os.environ[CONFIG_ENV_VAR] = args.config
    if args.preset:
        os.environ[PRESET_ENV_VAR] = args.preset

    # Import after argument parsing so the config is in place
    from chuk_mcp_harmony.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Harmony MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Harmony MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
