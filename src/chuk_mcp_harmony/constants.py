"""
Constants and enums for the harmony system.

No magic strings - use enums for constrained values.
"""

from enum import Enum

from chuk_mcp_harmony.core.pitch import MIDI_HIGHEST, MIDI_LOWEST, PIANO_HIGHEST, PIANO_LOWEST


class BoundPreset(str, Enum):
    """Named absolute pitch ranges."""

    MIDI = "midi"  # 0-127, C-1 to G9
    PIANO = "piano"  # 21-108, A0 to C8


PRESET_BOUNDS: dict[BoundPreset, tuple[int, int]] = {
    BoundPreset.MIDI: (MIDI_LOWEST, MIDI_HIGHEST),
    BoundPreset.PIANO: (PIANO_LOWEST, PIANO_HIGHEST),
}

# Environment variable pointing at a YAML engine config
CONFIG_ENV_VAR = "CHUK_HARMONY_CONFIG"

# Environment variable naming a bound preset; wins over the config file
PRESET_ENV_VAR = "CHUK_HARMONY_PRESET"

# Solutions returned by a tool when no limit is given
DEFAULT_TOOL_LIMIT = 24

# Longest list a tool will return
MAX_TOOL_LIMIT = 512


class ErrorMessages:
    """Standardized error messages."""

    INVALID_BOUND = "Invalid bound: {bound}. Expected [min, max] within 0-127 with min <= max."
    UNKNOWN_PRESET = "Unknown preset: '{preset}'. Expected one of: {choices}."
    INVALID_LIMIT = "Invalid limit: {limit}. Must be between 1 and {maximum}."
    INVALID_PITCH = "Invalid pitch: '{pitch}'. Expected a MIDI number or a note name like 'C4'."
