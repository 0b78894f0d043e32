"""
Note - a pitch with octave, duration and velocity.

This is the record collaborators (MIDI capture, playback) exchange with
the core. Key numbers go through PitchSpace, so a note always maps to an
absolute pitch inside the active range.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from .pitch import DEFAULT_SPACE, PitchClass, PitchSpace


@dataclass(frozen=True)
class Note:
    """A single note: canonical pitch class, octave, duration and velocity."""

    pitch: PitchClass
    octave: int
    duration: Fraction = Fraction(1, 4)  # fraction of a whole note
    velocity: int = 64  # 0-127

    def __post_init__(self) -> None:
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if self.duration <= 0:
            raise ValueError(f"Duration must be > 0, got {self.duration}")

    def key_number(self, space: PitchSpace = DEFAULT_SPACE) -> int:
        """MIDI key number of this note."""
        return space.pitch_to_absolute(self.pitch, self.octave)

    @classmethod
    def from_key_number(
        cls,
        key_number: int,
        duration: Fraction = Fraction(1, 4),
        velocity: int = 64,
        space: PitchSpace = DEFAULT_SPACE,
    ) -> Note:
        """Build a note from a MIDI key number."""
        pitch, octave = space.absolute_to_pitch(key_number)
        return cls(pitch, octave, duration, velocity)

    def __str__(self) -> str:
        return f"{self.pitch.spell()}{self.octave}"
