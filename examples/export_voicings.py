#!/usr/bin/env python3
"""
Example: Export chord voicings to MIDI.

Solves chord queries with HarmonyQueries and renders each solution as a
one-beat block chord. Open the files in any DAW to hear them.

Usage:
    python examples/export_voicings.py
    # Creates: examples/output/c_major_voicings.mid
    #          examples/output/minor_voicings_from_a3.mid
"""

from pathlib import Path

from chuk_mcp_harmony import HarmonyQueries
from chuk_mcp_harmony.compiler.midi import solutions_to_midi
from chuk_mcp_harmony.models.config import EngineConfig


def main() -> None:
    """Generate example MIDI files."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    queries = HarmonyQueries(EngineConfig.for_preset("piano"))

    # Example 1: every voicing of C major with C4 as the root
    print("Generating c_major_voicings.mid...")
    chords = queries.chords("major", root="C4")
    for chord in chords:
        print(f"  inversion {chord.inversion}: {[v.name for v in chord.voices]}")
    solutions_to_midi([c.pitches for c in chords], tempo_bpm=72).save(
        str(output_dir / "c_major_voicings.mid")
    )

    # Example 2: minor voicings with A3 in the bass, two beats each
    print("\nGenerating minor_voicings_from_a3.mid...")
    chords = queries.chords("minor", low="A3")
    for chord in chords:
        print(f"  root {chord.root.name}: {[v.name for v in chord.voices]}")
    solutions_to_midi([c.pitches for c in chords], beats_per_chord=2.0).save(
        str(output_dir / "minor_voicings_from_a3.mid")
    )

    print("\nDone! Open the MIDI files in your DAW to hear them.")


if __name__ == "__main__":
    main()
