"""
MCP tool implementations.

- queries - note, interval and chord queries, MIDI export of voicings
"""

from chuk_mcp_harmony.tools.queries import register_query_tools

__all__ = [
    "register_query_tools",
]
