"""
MIDI export - writes pitch sequences and scales as MIDI files.

Symbolic only: this produces note events for a DAW or player to render.
All operations are deterministic: same input → same output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mido import Message, MetaMessage, MidiFile, MidiTrack

from chuk_mcp_pitch.constants import DEFAULT_NOTE_BEATS, DEFAULT_TEMPO_BPM, DEFAULT_VELOCITY
from chuk_mcp_pitch.core.scale import MajorScale, ScaleNote

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chuk_mcp_pitch.core.pitch import Pitch


# Standard ticks per beat (quarter note)
TICKS_PER_BEAT = 480


@dataclass(frozen=True)
class MidiEvent:
    """
    A single MIDI note event.

    All times are in ticks (absolute from start of track).
    """

    pitch: int  # MIDI note number (0-127)
    start_ticks: int
    duration_ticks: int
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
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
    ticks_per_beat: int = TICKS_PER_BEAT,
    track_name: str | None = None,
) -> MidiFile:
    """
    Convert a sequence of MidiEvents to a single-track MidiFile.

    Args:
        events: Sequence of MidiEvent objects
        tempo_bpm: Tempo in beats per minute
        ticks_per_beat: Resolution (default 480)
        track_name: Optional name written as a track_name meta message

    Returns:
        A mido MidiFile ready to be saved
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    if track_name:
        track.append(MetaMessage("track_name", name=track_name, time=0))

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
    messages.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current_time = 0
    for abs_time, msg in messages:
        msg.time = abs_time - current_time
        track.append(msg)
        current_time = abs_time

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def pitches_to_events(
    pitches: Sequence[Pitch],
    beats_per_note: float = DEFAULT_NOTE_BEATS,
    velocity: int = DEFAULT_VELOCITY,
    channel: int = 0,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[MidiEvent]:
    """
    Lay pitches end to end, one note per pitch.

    Raises:
        ValueError: a pitch is outside MIDI range 0-127
    """
    duration = beats_to_ticks(beats_per_note, ticks_per_beat)
    return [
        MidiEvent(
            pitch=pitch.midi_number,
            start_ticks=index * duration,
            duration_ticks=duration,
            velocity=velocity,
            channel=channel,
        )
        for index, pitch in enumerate(pitches)
    ]


def scale_to_midi(
    scale: MajorScale | Sequence[ScaleNote],
    tempo_bpm: int = DEFAULT_TEMPO_BPM,
    beats_per_note: float = DEFAULT_NOTE_BEATS,
    velocity: int = DEFAULT_VELOCITY,
) -> MidiFile:
    """
    Render a spelled scale as an ascending run of notes.

    The track is named after the scale's note names so the spelling
    survives the round trip through a DAW.

    Example:
        scale = build_major_scale(Pitch.from_notation("C3"))
        scale_to_midi(scale, tempo_bpm=90).save("c_major.mid")
    """
    notes = list(scale)
    events = pitches_to_events(
        [note.pitch for note in notes],
        beats_per_note=beats_per_note,
        velocity=velocity,
    )
    return events_to_midi(
        events,
        tempo_bpm=tempo_bpm,
        track_name=" ".join(note.name for note in notes),
    )


def beats_to_ticks(beats: float, ticks_per_beat: int = TICKS_PER_BEAT) -> int:
    """Convert a beat count to ticks."""
    return int(beats * ticks_per_beat)
