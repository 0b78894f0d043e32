"""
Chord relations - triads and their closed-position voicings.
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_harmony.core.chord import ChordQuality
from chuk_mcp_harmony.logic import Goal, conjoin, disjoin, eq, lvar

from .interval import aboveo, intervalo


def major_triado(root: Any, third: Any, fifth: Any) -> Goal:
    """A major third and a perfect fifth from the root (either direction)."""
    return conjoin(intervalo(4, root, third), intervalo(7, root, fifth))


def minor_triado(root: Any, third: Any, fifth: Any) -> Goal:
    """A minor third and a perfect fifth from the root (either direction)."""
    return conjoin(intervalo(3, root, third), intervalo(7, root, fifth))


def chordo(quality: str | ChordQuality, *pitches: Any) -> Goal:
    """
    Three ascending voices forming a closed-position triad.

    Call as chordo(quality, low, middle, high) or
    chordo(quality, root, low, middle, high) to also read back the root.

    Alternatives, in order:
        root position:    root in the low voice
        first inversion:  root in the high voice
        second inversion: root in the middle voice

    For a major chord these are (4, 7), (3, 8) and (5, 9) semitones
    above the low voice.

    Raises:
        UnknownChordQuality: if the quality is not a known triad
    """
    quality = ChordQuality.parse(quality)
    if len(pitches) == 3:
        root, voices = lvar(), pitches
    elif len(pitches) == 4:
        root, voices = pitches[0], pitches[1:]
    else:
        raise TypeError(f"chordo takes 3 voices, optionally preceded by the root; got {len(pitches)}")

    root = lvar() if root is None else root
    low, middle, high = (lvar() if voice is None else voice for voice in voices)
    voice_terms = (low, middle, high)

    return disjoin(
        *(
            conjoin(
                aboveo(voicing.offsets[0], low, middle),
                aboveo(voicing.offsets[1], low, high),
                eq(root, voice_terms[voicing.root_voice]),
            )
            for voicing in quality.voicings()
        )
    )
