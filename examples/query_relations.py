#!/usr/bin/env python3
"""
Example: Ask relational music-theory questions.

Every relation runs in any direction: leave an argument open (a logic
variable) and the solver enumerates the values that make it true.

Usage:
    python examples/query_relations.py
"""

from chuk_mcp_harmony import (
    PitchSpace,
    chordo,
    intervalo,
    lvar,
    lvars,
    major_triado,
    noteo,
    run,
)
from chuk_mcp_harmony.core.pitch import PIANO_SPACE


def main() -> None:
    """Run a handful of queries and print the answers."""
    # Forward and backward through the same relation
    print("=== noteo ===")
    pitch = lvar("pitch")
    print(f"C4 is MIDI {run(noteo('C', 4, pitch), [pitch])[0][0]}")

    pitch_class, octave = lvars(2)
    found_class, found_octave = run(noteo(pitch_class, octave, 61), [pitch_class, octave])[0]
    print(f"MIDI 61 is {found_class.spell()}{found_octave} (or {found_class.spell(prefer_flats=True)})")

    every_c = run(noteo("C", octave, pitch), [octave, pitch], space=PIANO_SPACE)
    print(f"C on a piano: {[p for _, p in every_c]}")

    # Intervals are symmetric
    print("\n=== intervalo ===")
    other = lvar("other")
    print(f"Major third from C4: {run(intervalo('major-third', 60, other), [other])}")

    distance = lvar("distance")
    print(f"Distance C4-G4: {run(intervalo(distance, 60, 67), [distance])}")

    # Triads
    print("\n=== major_triado ===")
    third, fifth = lvars(2)
    for t, f in run(major_triado(60, third, fifth), [third, fifth]):
        print(f"  root 60, third {t}, fifth {f}")

    # Voicings with the root read back
    print("\n=== chordo ===")
    root, low, middle, high = lvars(4)
    solutions = run(chordo("major", root, low, middle, high), [root, low, middle, high], limit=6)
    for r, *voices in solutions:
        print(f"  root {r}: {voices}")

    inferred = run(chordo("major", root, 64, 67, 72), [root])
    print(f"Root of (64, 67, 72): {inferred}")

    # A narrower space prunes results
    narrow = PitchSpace(60, 72)
    within = run(chordo("minor", low, middle, high), [low, middle, high], space=narrow)
    print(f"Minor voicings within C4-C5: {len(within)}")


if __name__ == "__main__":
    main()
