"""
Chord primitives - ChordQuality and Voicing.

Chords are stacks of intervals. A triad quality defines its intervals
from the root; rotating those intervals gives the three closed-position
voicings (root position, first inversion, second inversion).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from chuk_mcp_harmony.errors import UnknownChordQuality

from .interval import Interval


@dataclass(frozen=True)
class Voicing:
    """
    A closed-position triad shape, measured upwards from the bass.

    Examples (major):
        root position:   offsets (4, 7), root in voice 0
        first inversion: offsets (3, 8), root in voice 2
        second inversion: offsets (5, 9), root in voice 1
    """

    inversion: int  # 0 = root position, 1 = first, 2 = second
    offsets: tuple[int, int]  # semitones from the bass to the middle and top voices
    root_voice: int  # which voice (0 = bass, 1 = middle, 2 = top) carries the root


@dataclass(frozen=True)
class ChordQuality:
    """
    A triad quality defined by its intervals from the root.

    Intervals are measured from the root, not stacked.
    For example, a major triad is root + M3 + P5 (0, 4, 7 semitones).

    Immutable and hashable.
    """

    intervals: tuple[Interval, Interval, Interval]
    name: str = ""

    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]
    DIMINISHED: ClassVar[ChordQuality]
    AUGMENTED: ClassVar[ChordQuality]
    SUS2: ClassVar[ChordQuality]
    SUS4: ClassVar[ChordQuality]

    def __post_init__(self) -> None:
        semitones = [interval.semitones for interval in self.intervals]
        if semitones[0] != 0 or semitones != sorted(semitones) or semitones[-1] >= 12:
            raise ValueError(f"Triad intervals must ascend from unison within an octave: {semitones}")

    @property
    def third(self) -> Interval:
        """Interval from the root to the middle chord tone."""
        return self.intervals[1]

    @property
    def fifth(self) -> Interval:
        """Interval from the root to the top chord tone."""
        return self.intervals[2]

    def voicings(self) -> list[Voicing]:
        """
        The three closed-position voicings of this quality.

        Each inversion moves the lowest chord tone up an octave.
        """
        semitones = [interval.semitones for interval in self.intervals]
        voicings = []
        for inversion in range(3):
            rotated = semitones[inversion:] + [s + 12 for s in semitones[:inversion]]
            bass = rotated[0]
            voicings.append(
                Voicing(
                    inversion=inversion,
                    offsets=(rotated[1] - bass, rotated[2] - bass),
                    root_voice=(3 - inversion) % 3,
                )
            )
        return voicings

    def get_midi_notes(self, root_midi: int) -> list[int]:
        """
        Get MIDI note numbers for this chord in root position.

        Args:
            root_midi: MIDI note number for the root

        Returns:
            List of MIDI note numbers, sorted ascending
        """
        return [root_midi + interval.semitones for interval in self.intervals]

    @classmethod
    def parse(cls, name: str | ChordQuality) -> ChordQuality:
        """Parse a quality name like 'major', 'minor', 'dim', 'sus4'."""
        if isinstance(name, ChordQuality):
            return name
        if not isinstance(name, str):
            raise UnknownChordQuality(name)

        key = name.strip().lower()
        quality = _QUALITY_NAMES.get(key)
        if quality is None:
            raise UnknownChordQuality(name)
        return quality

    def __str__(self) -> str:
        return self.name or f"ChordQuality({self.intervals})"

    def __repr__(self) -> str:
        if self.name:
            return f"ChordQuality.{self.name.upper()}"
        return f"ChordQuality({self.intervals!r})"


ChordQuality.MAJOR = ChordQuality(
    (Interval.UNISON, Interval.MAJOR_THIRD, Interval.PERFECT_FIFTH), "major"
)
ChordQuality.MINOR = ChordQuality(
    (Interval.UNISON, Interval.MINOR_THIRD, Interval.PERFECT_FIFTH), "minor"
)
ChordQuality.DIMINISHED = ChordQuality(
    (Interval.UNISON, Interval.MINOR_THIRD, Interval.TRITONE), "diminished"
)
ChordQuality.AUGMENTED = ChordQuality(
    (Interval.UNISON, Interval.MAJOR_THIRD, Interval.MINOR_SIXTH), "augmented"
)
ChordQuality.SUS2 = ChordQuality((Interval.UNISON, Interval(2), Interval.PERFECT_FIFTH), "sus2")
ChordQuality.SUS4 = ChordQuality(
    (Interval.UNISON, Interval.PERFECT_FOURTH, Interval.PERFECT_FIFTH), "sus4"
)

_QUALITY_NAMES: dict[str, ChordQuality] = {
    "major": ChordQuality.MAJOR,
    "maj": ChordQuality.MAJOR,
    "minor": ChordQuality.MINOR,
    "min": ChordQuality.MINOR,
    "m": ChordQuality.MINOR,
    "diminished": ChordQuality.DIMINISHED,
    "dim": ChordQuality.DIMINISHED,
    "augmented": ChordQuality.AUGMENTED,
    "aug": ChordQuality.AUGMENTED,
    "sus2": ChordQuality.SUS2,
    "sus4": ChordQuality.SUS4,
}
