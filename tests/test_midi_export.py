"""
MIDI export tests.

Scales go in, playable MIDI files come out.
"""

from pathlib import Path

import pytest
from mido import MidiFile

from chuk_mcp_pitch.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    events_to_midi,
    pitches_to_events,
    scale_to_midi,
)
from chuk_mcp_pitch.core import Pitch, build_chromatic_scale, build_major_scale


class TestMidiEvent:
    """Test MidiEvent dataclass."""

    def test_create_valid_event(self) -> None:
        """Can create a valid MIDI event."""
        event = MidiEvent(pitch=60, start_ticks=0, duration_ticks=480, velocity=100)
        assert event.pitch == 60
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

    def test_event_validation_ticks(self) -> None:
        """Ticks must not be negative."""
        with pytest.raises(ValueError, match="Start ticks"):
            MidiEvent(pitch=60, start_ticks=-1, duration_ticks=480, velocity=100)
        with pytest.raises(ValueError, match="Duration ticks"):
            MidiEvent(pitch=60, start_ticks=0, duration_ticks=-1, velocity=100)


class TestEventsToMidi:
    """Test the events_to_midi function."""

    def test_empty_events(self) -> None:
        """Can create MIDI file with no events."""
        mid = events_to_midi([])
        assert len(mid.tracks) == 1
        assert mid.ticks_per_beat == TICKS_PER_BEAT

    def test_tempo_setting(self) -> None:
        """Tempo is correctly set in the MIDI file."""
        mid = events_to_midi([], tempo_bpm=140)
        tempo_msgs = [msg for msg in mid.tracks[0] if msg.type == "set_tempo"]
        assert len(tempo_msgs) == 1
        assert tempo_msgs[0].tempo == int(60_000_000 / 140)

    def test_track_name(self) -> None:
        """Track name is written when given."""
        mid = events_to_midi([], track_name="scale")
        names = [msg.name for msg in mid.tracks[0] if msg.type == "track_name"]
        assert names == ["scale"]

    def test_notes_ordered(self) -> None:
        """Notes are ordered by time."""
        events = [
            MidiEvent(pitch=60, start_ticks=480, duration_ticks=480, velocity=100),
            MidiEvent(pitch=64, start_ticks=0, duration_ticks=480, velocity=100),
        ]
        note_ons = [msg for msg in events_to_midi(events).tracks[0] if msg.type == "note_on"]
        assert [msg.note for msg in note_ons] == [64, 60]


class TestPitchesToEvents:
    """Test pitches_to_events."""

    def test_end_to_end(self) -> None:
        """Each pitch starts when the previous one ends."""
        events = pitches_to_events([Pitch(60), Pitch(62), Pitch(64)])
        assert [e.start_ticks for e in events] == [0, 480, 960]
        assert all(e.duration_ticks == 480 for e in events)
        assert [e.pitch for e in events] == [60, 62, 64]

    def test_note_length(self) -> None:
        """beats_per_note sets the duration."""
        events = pitches_to_events([Pitch(60), Pitch(62)], beats_per_note=0.5)
        assert [e.start_ticks for e in events] == [0, 240]

    def test_out_of_range(self) -> None:
        """Pitches outside MIDI range raise."""
        with pytest.raises(ValueError):
            pitches_to_events([Pitch(200)])

    def test_beats_to_ticks(self) -> None:
        """Beats convert to ticks."""
        assert beats_to_ticks(1) == 480
        assert beats_to_ticks(0.5) == 240


class TestScaleToMidi:
    """Test scale_to_midi."""

    def test_major_scale(self) -> None:
        """A major scale becomes eight ascending notes."""
        scale = build_major_scale(Pitch.from_notation("C3"))
        mid = scale_to_midi(scale)
        note_ons = [msg for msg in mid.tracks[0] if msg.type == "note_on"]
        assert [msg.note for msg in note_ons] == [60, 62, 64, 65, 67, 69, 71, 72]

    def test_track_named_by_spelling(self) -> None:
        """The track name keeps the scale's spelling."""
        scale = build_major_scale(Pitch.from_notation("F3#"))
        mid = scale_to_midi(scale)
        names = [msg.name for msg in mid.tracks[0] if msg.type == "track_name"]
        assert names == ["F3# G3# A4# B4 C4# D4# E4# F4#"]

    def test_chromatic_notes(self) -> None:
        """Plain note sequences are accepted too."""
        mid = scale_to_midi(build_chromatic_scale(Pitch.from_notation("C3")))
        note_ons = [msg for msg in mid.tracks[0] if msg.type == "note_on"]
        assert len(note_ons) == 13

    def test_save_and_reload(self, temp_midi_path: Path) -> None:
        """Exported files load back with mido."""
        scale = build_major_scale(Pitch.from_notation("E3b"))
        scale_to_midi(scale, tempo_bpm=90).save(str(temp_midi_path))

        loaded = MidiFile(str(temp_midi_path))
        note_ons = [msg for msg in loaded.tracks[0] if msg.type == "note_on"]
        assert [msg.note for msg in note_ons] == [p.midi_number for p in scale.pitches]
