"""
Pitch primitives - PitchClass, enharmonic aliases and PitchSpace.

PitchClass represents the 12 chromatic pitches (octave-independent).
PitchSpace converts between absolute pitches (MIDI numbering, C4 = 60)
and (pitch class, octave) pairs inside a bounded range.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from chuk_mcp_harmony.errors import OutOfDomain, UnknownPitchClass

# Display name mappings (module level to avoid IntEnum member issues)
_SHARP_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]
_FLAT_NAMES: list[str] = [
    "C",
    "Db",
    "D",
    "Eb",
    "E",
    "F",
    "Gb",
    "G",
    "Ab",
    "A",
    "Bb",
    "B",
]

# Enharmonic spellings per position. Letter-suffix spellings (s = sharp,
# f = flat) sit beside the conventional #/b ones.
_ALIASES: list[tuple[str, ...]] = [
    ("B#", "Dbb", "Bs", "Dff"),
    ("Db", "B##", "Df", "Bss"),
    ("C##", "Ebb", "Css", "Eff"),
    ("Eb", "Fbb", "Ef", "Fff"),
    ("Fb", "D##", "Ff", "Dss"),
    ("E#", "Gbb", "Es", "Gff"),
    ("Gb", "E##", "Gf", "Ess"),
    ("F##", "Abb", "Fss", "Aff"),
    ("Ab", "Af"),
    ("G##", "Bbb", "Gss", "Bff"),
    ("Bb", "Cbb", "Bf", "Cff"),
    ("Cb", "A##", "Cf", "Ass"),
]

_NOTE_PATTERN = re.compile(r"^\s*([A-Ga-g][#bsf]*)\s*(-?\d+)\s*$")

MIDI_LOWEST = 0
MIDI_HIGHEST = 127
PIANO_LOWEST = 21  # A0
PIANO_HIGHEST = 108  # C8


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Enharmonic spellings resolve to the same member (Db -> Cs).

    Spelling is a display concern, handled at serialization.
    Internally, we use sharp names (Cs, Ds, etc.).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def spell(self, prefer_flats: bool = False) -> str:
        """Get human-readable name."""
        names = _FLAT_NAMES if prefer_flats else _SHARP_NAMES
        return names[self.value]

    @property
    def aliases(self) -> tuple[str, ...]:
        """Enharmonic alias spellings that resolve to this pitch class."""
        return _ALIASES[self.value]

    @classmethod
    def parse(cls, name: str | PitchClass) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db', 'Cs', 'Bs'."""
        return cls(position_of(name))


def position_of(name: str | PitchClass) -> int:
    """
    Position (0-11) of a canonical pitch class or one of its aliases.

    Canonical names are checked first (sharp spelling or enum name),
    then each class's alias list in chromatic order.

    Raises:
        UnknownPitchClass: if no class owns the name
    """
    if isinstance(name, PitchClass):
        return name.value
    if not isinstance(name, str):
        raise UnknownPitchClass(name)

    name = name.strip()
    if name in _SHARP_NAMES:
        return _SHARP_NAMES.index(name)
    if name in PitchClass.__members__:
        return PitchClass[name].value

    for position, aliases in enumerate(_ALIASES):
        if name in aliases:
            return position

    raise UnknownPitchClass(name)


def parse_note(text: str) -> tuple[PitchClass, int]:
    """
    Parse a note name with octave, like 'C4', 'Eb3' or 'C#-1'.

    Returns:
        (pitch class, octave)
    """
    match = _NOTE_PATTERN.match(text)
    if match is None:
        raise UnknownPitchClass(text)
    pitch_name, octave = match.groups()
    pitch_name = pitch_name[0].upper() + pitch_name[1:]
    return PitchClass.parse(pitch_name), int(octave)


def octave_of(pitch: int) -> int:
    """Octave of an absolute pitch (MIDI convention, 60 is in octave 4)."""
    return pitch // 12 - 1


@dataclass(frozen=True)
class PitchSpace:
    """
    A bounded range of absolute pitches.

    Every pitch derived through this space lies within [lowest, highest].
    The default space is the full MIDI range; PIANO_SPACE is A0-C8.

    Immutable and hashable.
    """

    lowest: int = MIDI_LOWEST
    highest: int = MIDI_HIGHEST

    def __post_init__(self) -> None:
        if self.lowest > self.highest:
            raise ValueError(
                f"Lowest pitch must not exceed highest, got {self.lowest} > {self.highest}"
            )

    @property
    def bound(self) -> tuple[int, int]:
        """Inclusive (min, max) bound."""
        return (self.lowest, self.highest)

    @property
    def span(self) -> int:
        """Largest distance between two pitches in the space."""
        return self.highest - self.lowest

    @property
    def octaves(self) -> range:
        """Octaves touched by the space, ascending."""
        return range(octave_of(self.lowest), octave_of(self.highest) + 1)

    def pitches(self) -> range:
        """Every absolute pitch in the space, ascending."""
        return range(self.lowest, self.highest + 1)

    def __contains__(self, pitch: object) -> bool:
        return isinstance(pitch, int) and self.lowest <= pitch <= self.highest

    def pitch_to_absolute(self, pitch_class: str | PitchClass, octave: int) -> int:
        """
        Convert a pitch class and octave to an absolute pitch.

        Aliases collapse to their canonical position, so
        pitch_to_absolute("Db", 4) == pitch_to_absolute("C#", 4) == 61.

        Raises:
            UnknownPitchClass: if the name is not in the table
            OutOfDomain: if the result lies outside the space
        """
        pitch = position_of(pitch_class) + 12 * (octave + 1)
        if pitch not in self:
            raise OutOfDomain(f"Pitch {pitch} outside {self.lowest}-{self.highest}")
        return pitch

    def absolute_to_pitch(self, pitch: int) -> tuple[PitchClass, int]:
        """
        Convert an absolute pitch to its canonical pitch class and octave.

        Raises:
            OutOfDomain: if the pitch lies outside the space
        """
        if pitch not in self:
            raise OutOfDomain(f"Pitch {pitch} outside {self.lowest}-{self.highest}")
        return PitchClass(pitch % 12), octave_of(pitch)


MIDI_SPACE = PitchSpace(MIDI_LOWEST, MIDI_HIGHEST)
PIANO_SPACE = PitchSpace(PIANO_LOWEST, PIANO_HIGHEST)
DEFAULT_SPACE = MIDI_SPACE


def pitch_to_absolute(pitch_class: str | PitchClass, octave: int) -> int:
    """Convert (pitch class, octave) to an absolute pitch in the default space."""
    return DEFAULT_SPACE.pitch_to_absolute(pitch_class, octave)


def absolute_to_pitch(pitch: int) -> tuple[PitchClass, int]:
    """Convert an absolute pitch to (pitch class, octave) in the default space."""
    return DEFAULT_SPACE.absolute_to_pitch(pitch)
