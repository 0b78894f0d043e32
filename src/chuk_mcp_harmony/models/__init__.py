"""
Pydantic models for the harmony system.

This module provides:
- EngineConfig: Pitch bound configuration (YAML-loadable)
- NoteSolution / IntervalSolution / ChordSolution: Query results
"""

from chuk_mcp_harmony.models.config import EngineConfig
from chuk_mcp_harmony.models.query import ChordSolution, IntervalSolution, NoteSolution

__all__ = [
    "EngineConfig",
    "NoteSolution",
    "IntervalSolution",
    "ChordSolution",
]
