"""
Interval primitives - Interval and IntervalTable.

An interval is a non-negative distance in semitones. Names are labels:
several names share a distance (major-third and diminished-fourth are
both 4), and only the distance takes part in relations.
"""

from __future__ import annotations

from functools import total_ordering
from types import MappingProxyType
from typing import ClassVar

from chuk_mcp_harmony.errors import UnknownInterval

# Quality precedence when choosing the display name for a distance
_QUALITY_ORDER: tuple[str, ...] = ("perfect", "major", "minor", "augmented", "diminished")

_NAMED_DISTANCES: dict[str, int] = {
    "perfect-unison": 0,
    "diminished-second": 0,
    "augmented-unison": 1,
    "minor-second": 1,
    "major-second": 2,
    "diminished-third": 2,
    "augmented-second": 3,
    "minor-third": 3,
    "major-third": 4,
    "diminished-fourth": 4,
    "augmented-third": 5,
    "perfect-fourth": 5,
    "augmented-fourth": 6,
    "diminished-fifth": 6,
    "perfect-fifth": 7,
    "diminished-sixth": 7,
    "augmented-fifth": 8,
    "minor-sixth": 8,
    "major-sixth": 9,
    "diminished-seventh": 9,
    "augmented-sixth": 10,
    "minor-seventh": 10,
    "major-seventh": 11,
    "diminished-octave": 11,
    "augmented-seventh": 12,
    "perfect-octave": 12,
}

# Informal and short names, matched case-sensitively (m3 != M3)
_SHORT_NAMES: dict[str, int] = {
    "unison": 0,
    "tritone": 6,
    "octave": 12,
    "P1": 0,
    "m2": 1,
    "M2": 2,
    "m3": 3,
    "M3": 4,
    "P4": 5,
    "TT": 6,
    "A4": 6,
    "d5": 6,
    "P5": 7,
    "m6": 8,
    "M6": 9,
    "m7": 10,
    "M7": 11,
    "P8": 12,
}

_SHORT_DISPLAY: dict[int, str] = {
    0: "P1",
    1: "m2",
    2: "M2",
    3: "m3",
    4: "M3",
    5: "P4",
    6: "TT",
    7: "P5",
    8: "m6",
    9: "M6",
    10: "m7",
    11: "M7",
    12: "P8",
}


class IntervalTable:
    """
    Named intervals and their semitone distances.

    Lookup accepts the long kebab-case names ("major-third"), spaced or
    underscored variants ("Major Third", "MAJOR_THIRD") and the short
    names ("M3"). Read-only after construction.
    """

    def __init__(
        self,
        named: dict[str, int] | None = None,
        short: dict[str, int] | None = None,
    ) -> None:
        self._named = MappingProxyType(dict(named if named is not None else _NAMED_DISTANCES))
        self._short = MappingProxyType(dict(short if short is not None else _SHORT_NAMES))
        for name, distance in [*self._named.items(), *self._short.items()]:
            if distance < 0:
                raise ValueError(f"Interval distance must be >= 0, got {name}={distance}")

    @property
    def names(self) -> list[str]:
        """Long names, ordered by distance then table order."""
        return sorted(self._named, key=lambda name: self._named[name])

    def distance_of(self, name: str) -> int:
        """
        Semitone distance for an interval name.

        Raises:
            UnknownInterval: if the name is not in the table
        """
        if not isinstance(name, str):
            raise UnknownInterval(name)

        stripped = name.strip()
        if stripped in self._short:
            return self._short[stripped]

        normalized = stripped.lower().replace("_", "-").replace(" ", "-")
        if normalized in self._named:
            return self._named[normalized]
        if normalized in self._short:
            return self._short[normalized]

        raise UnknownInterval(name)

    def names_for(self, distance: int) -> list[str]:
        """All long names for a distance, in table order."""
        return [name for name, value in self._named.items() if value == distance]

    def name_of(self, distance: int) -> str | None:
        """
        Display name for a distance.

        Chosen by quality precedence (perfect, major, minor, augmented,
        diminished) so the result never depends on table order.
        """
        candidates = self.names_for(distance)
        if not candidates:
            return None
        return min(candidates, key=lambda name: _QUALITY_ORDER.index(name.split("-")[0]))

    def __contains__(self, name: object) -> bool:
        try:
            self.distance_of(name)  # type: ignore[arg-type]
        except UnknownInterval:
            return False
        return True


INTERVALS = IntervalTable()


def distance_of(name: str) -> int:
    """Semitone distance for an interval name in the default table."""
    return INTERVALS.distance_of(name)


def resolve_distance(interval: str | int | Interval) -> int:
    """
    Resolve an interval given as a name, semitone count or Interval.

    Raises:
        UnknownInterval: for an unknown name
        ValueError: for a negative semitone count
    """
    if isinstance(interval, Interval):
        return interval.semitones
    if isinstance(interval, str):
        return INTERVALS.distance_of(interval)
    if isinstance(interval, bool) or not isinstance(interval, int):
        raise UnknownInterval(interval)
    if interval < 0:
        raise ValueError(f"Interval distance must be >= 0, got {interval}")
    return interval


@total_ordering
class Interval:
    """
    Distance between pitches in semitones.

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    UNISON: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        """Create an interval with the given number of semitones."""
        if semitones < 0:
            raise ValueError(f"Interval distance must be >= 0, got {semitones}")
        object.__setattr__(self, "_semitones", semitones)

    @classmethod
    def named(cls, name: str) -> Interval:
        """Look up an interval by name."""
        return cls(INTERVALS.distance_of(name))

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    @property
    def name(self) -> str | None:
        """Display name, or None for distances beyond the table."""
        return INTERVALS.name_of(self._semitones)

    def invert(self) -> Interval:
        """
        Invert the interval within an octave.

        M3 (4) -> m6 (8)
        P5 (7) -> P4 (5)
        """
        return Interval((12 - self._semitones % 12) % 12)

    def __add__(self, other: Interval) -> Interval:
        if not isinstance(other, Interval):
            return NotImplemented
        return Interval(self._semitones + other._semitones)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        """Short interval name (P1, m3, M3, ...)."""
        mod = self._semitones % 12
        octaves = self._semitones // 12
        if self._semitones == 12:
            return "P8"
        base = _SHORT_DISPLAY[mod]
        return base if octaves == 0 else f"{base}+{octaves}oct"


Interval.UNISON = Interval(0)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.PERFECT_FIFTH = Interval(7)
Interval.MINOR_SIXTH = Interval(8)
Interval.MAJOR_SIXTH = Interval(9)
Interval.OCTAVE = Interval(12)
