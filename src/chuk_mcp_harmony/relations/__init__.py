"""
Music relations - multi-directional queries over pitches.

Each relation is a goal; any argument may be a logic variable.
- noteo: pitch class, octave, absolute pitch
- intervalo / aboveo: two pitches a distance apart
- major_triado / minor_triado / chordo: triads and their voicings
"""

from chuk_mcp_harmony.relations.chord import chordo, major_triado, minor_triado
from chuk_mcp_harmony.relations.interval import aboveo, distance_term, intervalo
from chuk_mcp_harmony.relations.note import noteo, pitch_class_term

__all__ = [
    "noteo",
    "pitch_class_term",
    "intervalo",
    "aboveo",
    "distance_term",
    "major_triado",
    "minor_triado",
    "chordo",
]
