"""
Core music primitives.

The static tables every query composes on:
- PitchClass: The 12 chromatic pitch classes (0-11) and their enharmonic aliases
- PitchSpace: Bounded absolute pitch range, pitch <-> (pitch class, octave)
- Interval / IntervalTable: Named semitone distances
- ChordQuality / Voicing: Triad interval stacks and their inversions
- Note: Pitch + octave + duration + velocity record
"""

from chuk_mcp_harmony.core.chord import ChordQuality, Voicing
from chuk_mcp_harmony.core.interval import (
    INTERVALS,
    Interval,
    IntervalTable,
    distance_of,
    resolve_distance,
)
from chuk_mcp_harmony.core.note import Note
from chuk_mcp_harmony.core.pitch import (
    DEFAULT_SPACE,
    MIDI_SPACE,
    PIANO_SPACE,
    PitchClass,
    PitchSpace,
    absolute_to_pitch,
    parse_note,
    pitch_to_absolute,
    position_of,
)

__all__ = [
    # Pitch
    "PitchClass",
    "PitchSpace",
    "DEFAULT_SPACE",
    "MIDI_SPACE",
    "PIANO_SPACE",
    "position_of",
    "parse_note",
    "pitch_to_absolute",
    "absolute_to_pitch",
    # Interval
    "Interval",
    "IntervalTable",
    "INTERVALS",
    "distance_of",
    "resolve_distance",
    # Chord
    "ChordQuality",
    "Voicing",
    # Note
    "Note",
]
