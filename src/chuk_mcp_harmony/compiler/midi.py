"""
MIDI export - audition query solutions.

Each solution (a set of absolute pitches) becomes a block chord, one
after another. Uses mido. All operations are deterministic: same
solutions -> same MIDI file.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

if TYPE_CHECKING:
    from collections.abc import Sequence


# Standard ticks per beat (quarter note) - industry standard
TICKS_PER_BEAT = 480


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int  # Absolute start time in ticks
    duration_ticks: int  # Duration in ticks
    velocity: int  # 0-127
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0:
            raise ValueError(f"Start ticks must be >= 0, got {self.start_ticks}")
        if self.duration_ticks < 0:
            raise ValueError(f"Duration ticks must be >= 0, got {self.duration_ticks}")


def events_to_midi(
    events: Sequence[MidiEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a single-track MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    # Set tempo (microseconds per beat)
    track.append(MetaMessage("set_tempo", tempo=int(60_000_000 / tempo_bpm), time=0))

    messages: list[tuple[int, Message]] = []
    for event in events:
        messages.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        messages.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0, time=0),
            )
        )

    # note_off before note_on at the same tick
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off", x[1].note))

    # Convert to delta times
    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))

    return mid


def solutions_to_events(
    solutions: Sequence[Sequence[int]],
    beats_per_chord: float = 1.0,
    velocity: int = 80,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Lay out solutions as consecutive block chords.

    Args:
        solutions: One sequence of absolute pitches per solution
        beats_per_chord: Length of each chord in beats
        velocity: Note velocity (0-127)
        ticks_per_beat: Resolution

    Returns:
        MidiEvents, solution order preserved
    """
    duration = int(beats_per_chord * ticks_per_beat)
    return [
        MidiEvent(
            pitch=pitch,
            start_ticks=index * duration,
            duration_ticks=duration,
            velocity=velocity,
        )
        for index, pitches in enumerate(solutions)
        for pitch in sorted(set(pitches))
    ]


def solutions_to_midi(
    solutions: Sequence[Sequence[int]],
    tempo_bpm: int = 90,
    beats_per_chord: float = 1.0,
    velocity: int = 80,
) -> MidiFile:
    """
    Render solutions as a MidiFile, one block chord per solution.

    Example:
        chords = HarmonyQueries().chords("major", low="C4")
        mid = solutions_to_midi([c.pitches for c in chords])
        mid.save("c_major_voicings.mid")
    """
    events = solutions_to_events(solutions, beats_per_chord=beats_per_chord, velocity=velocity)
    return events_to_midi(events, tempo_bpm=tempo_bpm)
