"""
MIDI export for pitches and scales.
"""

from chuk_mcp_pitch.compiler.midi import (
    TICKS_PER_BEAT,
    MidiEvent,
    beats_to_ticks,
    events_to_midi,
    pitches_to_events,
    scale_to_midi,
)

__all__ = [
    "TICKS_PER_BEAT",
    "MidiEvent",
    "beats_to_ticks",
    "events_to_midi",
    "pitches_to_events",
    "scale_to_midi",
]
