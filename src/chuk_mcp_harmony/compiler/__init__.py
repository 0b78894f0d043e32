"""
Compiler - renders query solutions to MIDI.
"""

from chuk_mcp_harmony.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    events_to_midi,
    solutions_to_events,
    solutions_to_midi,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "events_to_midi",
    "solutions_to_events",
    "solutions_to_midi",
]
