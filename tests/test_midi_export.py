"""
MIDI export tests.

Query solutions rendered as block chords must produce valid, reloadable,
deterministic MIDI files.
"""

from pathlib import Path

import pytest
from mido import MidiFile

from chuk_mcp_harmony.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    events_to_midi,
    solutions_to_events,
    solutions_to_midi,
)


class TestMidiEvent:
    """Test MidiEvent dataclass."""

    def test_create_valid_event(self) -> None:
        """Can create a valid MIDI event."""
        event = MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100, channel=0)
        assert event.pitch == 60
        assert event.duration_ticks == 480
        assert event.channel == 0

    def test_event_validation_pitch_range(self) -> None:
        """Pitch must be 0-127."""
        with pytest.raises(ValueError, match="Pitch must be 0-127"):
            MidiEvent(pitch=128, start_ticks=0, duration_ticks=480, velocity=100)

        with pytest.raises(ValueError, match="Pitch must be 0-127"):
            MidiEvent(pitch=-1, start_ticks=0, duration_ticks=480, velocity=100)

    def test_event_validation_velocity_range(self) -> None:
        """Velocity must be 0-127."""
        with pytest.raises(ValueError, match="Velocity must be 0-127"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=128)

    def test_event_validation_channel_range(self) -> None:
        """Channel must be 0-15."""
        with pytest.raises(ValueError, match="Channel must be 0-15"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100, channel=16)


class TestEventsToMidi:
    """Test the events_to_midi function."""

    def test_empty_events(self) -> None:
        """Can create MIDI file with no events."""
        mid = events_to_midi([])
        assert len(mid.tracks) == 1
        assert mid.ticks_per_beat == TICKS_PER_BEAT

    def test_single_note(self) -> None:
        """Note on then note off."""
        mid = events_to_midi([MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100)])

        note_messages = [msg for msg in mid.tracks[0] if msg.type in ("note_on", "note_off")]
        assert [msg.type for msg in note_messages] == ["note_on", "note_off"]
        assert all(msg.note == 60 for msg in note_messages)

    def test_multiple_notes_ordering(self) -> None:
        """Notes are properly ordered by time."""
        events = [
            MidiEvent(pitch=60, start_ticks=480, duration_ticks=480, velocity=100),
            MidiEvent(pitch=64, start_ticks=0, duration_ticks=480, velocity=100),
        ]
        mid = events_to_midi(events)

        note_ons = [msg for msg in mid.tracks[0] if msg.type == "note_on"]
        assert [msg.note for msg in note_ons] == [64, 60]

    def test_tempo_setting(self) -> None:
        """Tempo is correctly set in the MIDI file."""
        mid = events_to_midi([], tempo_bpm=140)

        tempo_msgs = [msg for msg in mid.tracks[0] if msg.type == "set_tempo"]
        assert len(tempo_msgs) == 1
        assert tempo_msgs[0].tempo == int(60_000_000 / 140)


class TestSolutionsToMidi:
    """Test rendering query solutions as block chords."""

    def test_events_per_solution(self) -> None:
        """One event per distinct pitch, chords back to back."""
        events = solutions_to_events([(60, 64, 67), (52, 55, 60)])
        assert len(events) == 6
        assert [e.start_ticks for e in events] == [0, 0, 0, 480, 480, 480]
        assert [e.pitch for e in events[:3]] == [60, 64, 67]

    def test_duplicate_pitches_collapse(self) -> None:
        """A repeated pitch sounds once per chord."""
        events = solutions_to_events([(60, 60)])
        assert [e.pitch for e in events] == [60]

    def test_beats_per_chord(self) -> None:
        """Chord length follows beats_per_chord."""
        events = solutions_to_events([(60,), (62,)], beats_per_chord=2.0)
        assert events[1].start_ticks == 2 * TICKS_PER_BEAT
        assert events[0].duration_ticks == 2 * TICKS_PER_BEAT

    def test_block_chords(self) -> None:
        """Each chord's notes start together."""
        mid = solutions_to_midi([(60, 64, 67)], tempo_bpm=90)

        note_ons = [msg for msg in mid.tracks[0] if msg.type == "note_on"]
        assert [msg.note for msg in note_ons] == [60, 64, 67]
        assert [msg.time for msg in note_ons] == [0, 0, 0]

        tempo = next(msg for msg in mid.tracks[0] if msg.type == "set_tempo")
        assert tempo.tempo == int(60_000_000 / 90)

    def test_can_save_and_reload(self, temp_midi_path: Path) -> None:
        """MIDI file can be saved and reloaded."""
        mid = solutions_to_midi([(60, 64, 67), (55, 60, 64)])
        mid.save(str(temp_midi_path))

        assert temp_midi_path.exists()
        loaded = MidiFile(str(temp_midi_path))
        assert len(loaded.tracks) == 1
        assert loaded.ticks_per_beat == TICKS_PER_BEAT

    def test_out_of_range_pitch(self) -> None:
        """Pitches outside MIDI are rejected."""
        with pytest.raises(ValueError, match="Pitch must be 0-127"):
            solutions_to_events([(128,)])


class TestDeterminism:
    """Verify deterministic output."""

    def test_same_solutions_same_output(self, temp_dir: Path) -> None:
        """Same solutions should produce identical MIDI files."""
        solutions = [(60, 64, 67), (52, 55, 60), (55, 60, 64)]

        path1 = temp_dir / "test1.mid"
        path2 = temp_dir / "test2.mid"
        solutions_to_midi(solutions).save(str(path1))
        solutions_to_midi(solutions).save(str(path2))

        assert path1.read_bytes() == path2.read_bytes()


class TestMidiEdgeCases:
    """Additional tests for MIDI edge cases."""

    def test_overlapping_notes(self) -> None:
        """Handle overlapping notes correctly."""
        events = [
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=960, velocity=100),
            MidiEvent(pitch=60, start_ticks=480, duration_ticks=960, velocity=80),
        ]
        mid = events_to_midi(events)

        note_messages = [msg for msg in mid.tracks[0] if msg.type in ("note_on", "note_off")]
        assert len(note_messages) == 4

    def test_note_off_before_next_chord(self) -> None:
        """A repeated pitch is released before it sounds again."""
        mid = solutions_to_midi([(60,), (60,)])

        note_messages = [msg.type for msg in mid.tracks[0] if msg.type in ("note_on", "note_off")]
        assert note_messages == ["note_on", "note_off", "note_on", "note_off"]

    def test_all_128_pitches(self) -> None:
        """All 128 pitches can be used."""
        mid = solutions_to_midi([(i,) for i in range(128)])

        note_ons = [msg for msg in mid.tracks[0] if msg.type == "note_on"]
        assert {msg.note for msg in note_ons} == set(range(128))
