"""
Harmony queries - relations in, pydantic solutions out.

HarmonyQueries binds the caller's concrete arguments, leaves the rest
as logic variables, runs the relation within the configured pitch space
and describes each solution with the result models.
"""

from __future__ import annotations

import logging
from typing import Any

from chuk_mcp_harmony.constants import ErrorMessages
from chuk_mcp_harmony.core.chord import ChordQuality
from chuk_mcp_harmony.core.interval import INTERVALS
from chuk_mcp_harmony.core.pitch import PitchSpace, parse_note, position_of
from chuk_mcp_harmony.logic import lvar, run
from chuk_mcp_harmony.models.config import EngineConfig
from chuk_mcp_harmony.models.query import ChordSolution, IntervalSolution, NoteSolution
from chuk_mcp_harmony.relations import chordo, distance_term, intervalo, noteo, pitch_class_term

logger = logging.getLogger(__name__)


def resolve_pitch(value: int | str | None) -> int | None:
    """
    Resolve a pitch argument to an absolute pitch.

    Accepts a MIDI number (int or digit string) or a note name like 'C4'.
    No bound check happens here; a pitch outside the space simply has
    no solutions.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(ErrorMessages.INVALID_PITCH.format(pitch=value))
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.lstrip("-").isdigit():
        return int(text)
    pitch_class, octave = parse_note(text)
    return position_of(pitch_class) + 12 * (octave + 1)


class HarmonyQueries:
    """
    Runs note, interval and chord queries in one pitch space.

    Stateless between calls; safe to share.
    """

    def __init__(self, config: EngineConfig | None = None):
        """
        Initialize the query runner.

        Args:
            config: Engine configuration (defaults to the full MIDI range)
        """
        self.config = config or EngineConfig()
        self.space: PitchSpace = self.config.pitch_space()

    def notes(
        self,
        pitch_class: str | None = None,
        octave: int | None = None,
        absolute_pitch: int | str | None = None,
        limit: int | None = None,
    ) -> list[NoteSolution]:
        """Solve noteo with the given fields bound."""
        pc = pitch_class_term(pitch_class)
        oc = lvar() if octave is None else octave
        ap = lvar() if absolute_pitch is None else resolve_pitch(absolute_pitch)

        rows = run(noteo(pc, oc, ap), [pc, oc, ap], limit=limit, space=self.space)
        logger.debug(f"noteo({pitch_class}, {octave}, {absolute_pitch}) -> {len(rows)}")
        return [NoteSolution.from_binding(*row) for row in rows]

    def intervals(
        self,
        interval: str | int,
        pitch_a: int | str | None = None,
        pitch_b: int | str | None = None,
        limit: int | None = None,
    ) -> list[IntervalSolution]:
        """Solve intervalo for an interval name or semitone count."""
        if isinstance(interval, str) and interval.strip().isdigit():
            interval = int(interval)
        distance = distance_term(interval)
        a = lvar() if pitch_a is None else resolve_pitch(pitch_a)
        b = lvar() if pitch_b is None else resolve_pitch(pitch_b)

        rows = run(intervalo(distance, a, b), [a, b], limit=limit, space=self.space)
        return [
            IntervalSolution(
                distance=distance,
                interval=INTERVALS.name_of(distance),
                pitch_a=NoteSolution.from_pitch(first, self.space),
                pitch_b=NoteSolution.from_pitch(second, self.space),
            )
            for first, second in rows
        ]

    def chords(
        self,
        quality: str,
        root: int | str | None = None,
        low: int | str | None = None,
        middle: int | str | None = None,
        high: int | str | None = None,
        limit: int | None = None,
    ) -> list[ChordSolution]:
        """Solve chordo; every voicing (root position and inversions) is tried."""
        chord_quality = ChordQuality.parse(quality)
        terms: list[Any] = [
            lvar() if value is None else resolve_pitch(value) for value in (root, low, middle, high)
        ]

        rows = run(chordo(chord_quality, *terms), terms, limit=limit, space=self.space)
        return [self._describe_chord(chord_quality, row) for row in rows]

    def _describe_chord(self, quality: ChordQuality, row: tuple[Any, ...]) -> ChordSolution:
        root, *voices = row
        # root position, then first inversion (root on top), then second
        inversion = {voices[0]: 0, voices[2]: 1, voices[1]: 2}[root]
        return ChordSolution(
            quality=quality.name,
            root=NoteSolution.from_pitch(root, self.space),
            voices=[NoteSolution.from_pitch(voice, self.space) for voice in voices],
            inversion=inversion,
        )
