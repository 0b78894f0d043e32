"""
Tests for the music relations.

Tests cover:
- noteo in every direction
- intervalo and aboveo
- major_triado / minor_triado
- chordo voicings and root inference
"""

import pytest

from chuk_mcp_harmony.core.chord import ChordQuality
from chuk_mcp_harmony.core.pitch import PitchClass, PitchSpace
from chuk_mcp_harmony.errors import UnknownChordQuality, UnknownInterval, UnknownPitchClass
from chuk_mcp_harmony.logic import lvar, lvars, run
from chuk_mcp_harmony.relations import (
    aboveo,
    chordo,
    intervalo,
    major_triado,
    minor_triado,
    noteo,
)


class TestNoteo:
    """Tests for the note relation."""

    def test_forward(self) -> None:
        """Class and octave give the absolute pitch."""
        p = lvar()
        assert run(noteo("C", 4, p), [p]) == [(60,)]
        assert run(noteo("A", 4, p), [p]) == [(69,)]

    def test_backward(self) -> None:
        """Absolute pitch gives class and octave."""
        pc, o = lvars(2)
        assert run(noteo(pc, o, 60), [pc, o]) == [(PitchClass.C, 4)]
        assert run(noteo(pc, o, 61), [pc, o]) == [(PitchClass.Cs, 4)]

    def test_only_octave(self) -> None:
        """One solution per pitch class, ascending."""
        pc, p = lvars(2)
        solutions = run(noteo(pc, 4, p), [pc, p])
        assert len(solutions) == 12
        assert [pitch for _, pitch in solutions] == list(range(60, 72))
        assert solutions[0] == (PitchClass.C, 60)

    def test_only_pitch_class(self, midi_space: PitchSpace, piano_space: PitchSpace) -> None:
        """One solution per octave inside the space."""
        o, p = lvars(2)
        midi = run(noteo("C", o, p), [o, p], space=midi_space)
        assert len(midi) == 11
        assert midi[0] == (-1, 0)
        assert midi[-1] == (9, 120)

        piano = run(noteo("C", o, p), [o, p], space=piano_space)
        assert len(piano) == 8
        assert piano[0] == (1, 24)
        assert piano[-1] == (8, 108)

    def test_unconstrained(self, midi_space: PitchSpace, piano_space: PitchSpace) -> None:
        """Every pitch in the space, ascending."""
        pc, o, p = lvars(3)
        midi = run(noteo(pc, o, p), [pc, o, p], space=midi_space)
        assert len(midi) == 128
        assert [row[2] for row in midi] == list(range(128))

        piano = run(noteo(pc, o, p), [pc, o, p], space=piano_space)
        assert len(piano) == 88
        assert piano[0] == (PitchClass.A, 0, 21)

    def test_aliases(self) -> None:
        """Enharmonic names give the canonical pitch."""
        p = lvar()
        assert run(noteo("Db", 4, p), [p]) == [(61,)]
        assert run(noteo("C#", 4, p), [p]) == [(61,)]
        assert run(noteo("Bs", 4, p), [p]) == [(60,)]

    def test_inconsistent(self) -> None:
        """Contradicting fields have no solutions."""
        assert run(noteo("C", 4, 61), []) == []

    def test_out_of_space(self, piano_space: PitchSpace) -> None:
        """Pitches outside the bound have no solutions."""
        pc, o, p = lvars(3)
        assert run(noteo(pc, o, 20), [pc, o], space=piano_space) == []
        assert run(noteo("C", 0, p), [p], space=piano_space) == []
        assert run(noteo(pc, o, 128), [pc, o]) == []

    def test_unknown_pitch_class(self) -> None:
        """Unknown names fail the query."""
        with pytest.raises(UnknownPitchClass):
            noteo("H", 4, lvar())


class TestIntervalo:
    """Tests for the interval relation."""

    def test_both_directions(self) -> None:
        """A major third from C4 is Ab3 or E4."""
        b = lvar()
        assert run(intervalo(4, 60, b), [b]) == [(56,), (64,)]

    def test_named_interval(self) -> None:
        """Interval names resolve to distances."""
        b = lvar()
        assert run(intervalo("major-third", 60, b), [b]) == [(56,), (64,)]
        assert run(intervalo("P5", 60, b), [b]) == [(53,), (67,)]

    def test_unison_once(self) -> None:
        """Zero distance is reported once."""
        b = lvar()
        assert run(intervalo(0, 60, b), [b]) == [(60,)]

    def test_one_direction_out_of_space(self) -> None:
        """The direction leaving the space is pruned."""
        b = lvar()
        assert run(intervalo(4, 2, b), [b]) == [(6,)]

    def test_distance_from_pitches(self) -> None:
        """Two pitches determine the distance."""
        d = lvar()
        assert run(intervalo(d, 60, 64), [d]) == [(4,)]
        assert run(intervalo(d, 64, 60), [d]) == [(4,)]

    def test_symmetric(self) -> None:
        """Swapping the pitches keeps the relation."""
        assert run(intervalo(7, 60, 67), []) == [()]
        assert run(intervalo(7, 67, 60), []) == [()]
        assert run(intervalo(7, 60, 68), []) == []

    def test_free_pitches(self) -> None:
        """Both pitches free, first direction first."""
        a, b = lvars(2)
        assert run(intervalo(4, a, b), [a, b], limit=3) == [(4, 0), (5, 1), (6, 2)]

    def test_piano_bound(self, piano_space: PitchSpace) -> None:
        """Derived pitches stay in the piano range."""
        b = lvar()
        assert run(intervalo(12, 21, b), [b], space=piano_space) == [(33,)]

    def test_unknown_interval(self) -> None:
        """Unknown names fail the query."""
        with pytest.raises(UnknownInterval):
            intervalo("major-ninth", 60, lvar())


class TestAboveo:
    """Tests for the directed interval relation."""

    def test_high_above_low(self) -> None:
        """Only the upward direction holds."""
        h, low = lvars(2)
        assert run(aboveo(7, 60, h), [h]) == [(67,)]
        assert run(aboveo(7, low, 60), [low]) == [(53,)]
        assert run(aboveo(7, 67, 60), []) == []

    def test_distance(self) -> None:
        """Distance derived from two pitches."""
        d = lvar()
        assert run(aboveo(d, 60, 72), [d]) == [(12,)]
        assert run(aboveo(d, 72, 60), [d]) == []


class TestTriads:
    """Tests for major_triado and minor_triado."""

    def test_major_triad_from_root(self) -> None:
        """Thirds and fifths either side of the root."""
        t, f = lvars(2)
        assert run(major_triado(60, t, f), [t, f]) == [
            (56, 53),
            (56, 67),
            (64, 53),
            (64, 67),
        ]

    def test_minor_triad_from_root(self) -> None:
        """A minor third above A3 is C4."""
        t, f = lvars(2)
        solutions = run(minor_triado(57, t, f), [t, f])
        assert (60, 64) in solutions
        assert len(solutions) == 4

    def test_check_triad(self) -> None:
        """Ground triads either hold or not."""
        assert run(major_triado(60, 64, 67), []) == [()]
        assert run(major_triado(60, 63, 67), []) == []
        assert run(minor_triado(60, 63, 67), []) == [()]


class TestChordo:
    """Tests for closed-position chord voicings."""

    def test_free_voices(self) -> None:
        """Root position voicings come first, lowest bass first."""
        a, b, c = lvars(3)
        assert run(chordo("major", a, b, c), [a, b, c], limit=5) == [
            (0, 4, 7),
            (1, 5, 8),
            (2, 6, 9),
            (3, 7, 10),
            (4, 8, 11),
        ]

    def test_all_voicings_counted(self) -> None:
        """Root position, first and second inversion across the space."""
        a, b, c = lvars(3)
        solutions = run(chordo("major", a, b, c), [a, b, c])
        assert len(solutions) == 121 + 120 + 119
        assert len(set(solutions)) == len(solutions)

    def test_piano_space(self, piano_space: PitchSpace) -> None:
        """Voicings start at the bottom of the piano."""
        a, b, c = lvars(3)
        assert run(chordo("major", a, b, c), [a, b, c], limit=1, space=piano_space) == [
            (21, 25, 28)
        ]

    def test_domain_containment(self, piano_space: PitchSpace) -> None:
        """Every solution stays inside the bound."""
        r, a, b, c = lvars(4)
        solutions = run(chordo("minor", r, a, b, c), [r, a, b, c], space=piano_space)
        assert solutions
        assert all(21 <= pitch <= 108 for row in solutions for pitch in row)

    def test_voicings_of_root(self) -> None:
        """Every inversion of C major containing C4 as root."""
        a, b, c = lvars(3)
        assert run(chordo("major", 60, a, b, c), [a, b, c]) == [
            (60, 64, 67),
            (52, 55, 60),
            (55, 60, 64),
        ]

    def test_minor_voicings_of_root(self) -> None:
        """Minor inversions use minor shapes."""
        a, b, c = lvars(3)
        assert run(chordo(ChordQuality.MINOR, 57, a, b, c), [a, b, c]) == [
            (57, 60, 64),
            (48, 52, 57),
            (52, 57, 60),
        ]

    def test_infer_root(self) -> None:
        """The root is read back from the voicing."""
        r = lvar()
        assert run(chordo("major", r, 64, 67, 72), [r]) == [(72,)]
        assert run(chordo("major", r, 67, 72, 76), [r]) == [(72,)]
        assert run(chordo("minor", r, 57, 60, 64), [r]) == [(57,)]

    def test_partial_voicing(self) -> None:
        """Outer voices determine the middle one."""
        r, m = lvars(2)
        assert run(chordo("major", r, 64, m, 72), [r, m]) == [(72, 67)]

    def test_shape_invariant(self) -> None:
        """Every solution's pitch classes form the quality."""
        a, b, c = lvars(3)
        for low, middle, high in run(chordo("major", a, b, c), [a, b, c], limit=100):
            assert low < middle < high
            classes = {low % 12, middle % 12, high % 12}
            assert any({(p - root) % 12 for p in classes} == {0, 4, 7} for root in classes)

    def test_not_a_chord(self) -> None:
        """Voicings outside the quality fail."""
        r = lvar()
        assert run(chordo("major", r, 60, 63, 67), [r]) == []

    def test_unknown_quality(self) -> None:
        """Unknown qualities fail the query."""
        with pytest.raises(UnknownChordQuality):
            chordo("ninth", *lvars(3))

    def test_wrong_arity(self) -> None:
        """chordo needs three voices, optionally preceded by the root."""
        with pytest.raises(TypeError):
            chordo("major", lvar(), lvar())
