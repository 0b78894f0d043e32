"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_harmony.core.pitch import MIDI_SPACE, PIANO_SPACE, PitchSpace


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_midi_path(temp_dir: Path) -> Path:
    """Path for a temporary MIDI file."""
    return temp_dir / "test.mid"


@pytest.fixture
def midi_space() -> PitchSpace:
    """Full MIDI range, 0-127."""
    return MIDI_SPACE


@pytest.fixture
def piano_space() -> PitchSpace:
    """Piano range, A0 (21) to C8 (108)."""
    return PIANO_SPACE
