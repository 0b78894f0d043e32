"""
Query result models.

Solutions read back from the solver, shaped for JSON responses.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_harmony.core.pitch import PitchClass, PitchSpace


class NoteSolution(BaseModel):
    """One binding of noteo."""

    pitch_class: str = Field(..., description="Canonical pitch class (sharp spelling)")
    octave: int = Field(..., description="Octave, C4 = middle C")
    absolute_pitch: int = Field(..., description="MIDI note number")

    model_config = {"frozen": True}

    @property
    def name(self) -> str:
        return f"{self.pitch_class}{self.octave}"

    @classmethod
    def from_pitch(cls, pitch: int, space: PitchSpace) -> NoteSolution:
        """Describe an absolute pitch."""
        pitch_class, octave = space.absolute_to_pitch(pitch)
        return cls(pitch_class=pitch_class.spell(), octave=octave, absolute_pitch=pitch)

    @classmethod
    def from_binding(cls, pitch_class: PitchClass, octave: int, pitch: int) -> NoteSolution:
        return cls(pitch_class=pitch_class.spell(), octave=octave, absolute_pitch=pitch)


class IntervalSolution(BaseModel):
    """One binding of intervalo."""

    distance: int = Field(..., ge=0, description="Semitones between the pitches")
    interval: str | None = Field(None, description="Display name of the distance")
    pitch_a: NoteSolution
    pitch_b: NoteSolution

    model_config = {"frozen": True}


class ChordSolution(BaseModel):
    """One binding of chordo."""

    quality: str
    root: NoteSolution
    voices: list[NoteSolution] = Field(..., description="Low, middle, high")
    inversion: int = Field(..., ge=0, le=2, description="0 = root position")

    model_config = {"frozen": True}

    @property
    def pitches(self) -> list[int]:
        return [voice.absolute_pitch for voice in self.voices]
