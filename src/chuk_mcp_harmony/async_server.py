#!/usr/bin/env python3
"""
Async Harmony MCP Server using chuk-mcp-server

This server answers music-theory questions through relational queries:
any argument of a query may be left open and the engine enumerates
every consistent binding.

The server provides tools for:
- Relating pitch classes, octaves and MIDI pitches
- Finding pitch pairs an interval apart
- Finding triad voicings (root position and inversions)
- Exporting voicings to MIDI files
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_harmony.config import load_config
from chuk_mcp_harmony.queries import HarmonyQueries
from chuk_mcp_harmony.tools import register_query_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-harmony")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
OUTPUT_DIR = BASE_PATH / "output"

config = load_config()
queries = HarmonyQueries(config)

# Register all tools
query_tools = register_query_tools(mcp, queries, OUTPUT_DIR)

# Export tool functions for direct access
harmony_note = query_tools["harmony_note"]
harmony_interval = query_tools["harmony_interval"]
harmony_chord = query_tools["harmony_chord"]
harmony_export_chords = query_tools["harmony_export_chords"]
harmony_list_intervals = query_tools["harmony_list_intervals"]
harmony_list_pitch_classes = query_tools["harmony_list_pitch_classes"]

logger.info("CHUK Harmony MCP Server initialized")
logger.info(f"  Pitch bound: {config.bound}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
