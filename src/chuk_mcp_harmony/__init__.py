"""
CHUK Harmony - relational music-theory queries.

Ask "which pitches form a major third with C4?" or "which major
voicings contain E4 and C5?" with any argument left open; the solver
enumerates every consistent binding.
"""

from chuk_mcp_harmony.core import ChordQuality, Interval, PitchClass, PitchSpace
from chuk_mcp_harmony.logic import ALL, lvar, lvars, run
from chuk_mcp_harmony.queries import HarmonyQueries
from chuk_mcp_harmony.relations import (
    aboveo,
    chordo,
    intervalo,
    major_triado,
    minor_triado,
    noteo,
)

__version__ = "0.1.0"

__all__ = [
    "ALL",
    "ChordQuality",
    "HarmonyQueries",
    "Interval",
    "PitchClass",
    "PitchSpace",
    "aboveo",
    "chordo",
    "intervalo",
    "lvar",
    "lvars",
    "major_triado",
    "minor_triado",
    "noteo",
    "run",
]
