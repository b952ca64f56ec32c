"""
Core pitch primitives.

These are the invariants everything else composes on:
- Accidental, Spelling: written note names
- NOTE_OFFSETS, OFFSET_SPELLINGS: the static note tables
- parse_notation: scientific notation -> offset, octave, accidental
- Pitch: immutable MIDI-number pitch with spelling and arithmetic
- enharmonic: alternate spelling at an offset
- ScalePattern, MajorScale: step patterns and letter-continuous spelling
"""

from chuk_mcp_pitch.core.acoustics import AcousticSource
from chuk_mcp_pitch.core.errors import (
    InvalidNotationType,
    PitchError,
    ScaleConstructionInconsistency,
    UnrecognizedNotation,
)
from chuk_mcp_pitch.core.notation import ParsedNotation, parse_notation
from chuk_mcp_pitch.core.pitch import A440, MIDDLE_C, Pitch
from chuk_mcp_pitch.core.scale import (
    MajorScale,
    ScaleNote,
    ScalePattern,
    build_chromatic_scale,
    build_major_scale,
    build_scale,
    major_scales_by_root,
)
from chuk_mcp_pitch.core.spelling import enharmonic, spellings_at
from chuk_mcp_pitch.core.tables import (
    A0_MIDI_NUMBER,
    LETTERS,
    NOTE_OFFSETS,
    OFFSET_SPELLINGS,
    Accidental,
    Spelling,
    canonical_spelling,
    next_letter,
)

__all__ = [
    # Tables
    "A0_MIDI_NUMBER",
    "LETTERS",
    "NOTE_OFFSETS",
    "OFFSET_SPELLINGS",
    "Accidental",
    "Spelling",
    "canonical_spelling",
    "next_letter",
    # Notation
    "ParsedNotation",
    "parse_notation",
    # Pitch
    "Pitch",
    "MIDDLE_C",
    "A440",
    # Spelling
    "enharmonic",
    "spellings_at",
    # Scale
    "ScalePattern",
    "ScaleNote",
    "MajorScale",
    "build_scale",
    "build_major_scale",
    "build_chromatic_scale",
    "major_scales_by_root",
    # Errors
    "PitchError",
    "UnrecognizedNotation",
    "InvalidNotationType",
    "ScaleConstructionInconsistency",
    # Interfaces
    "AcousticSource",
]
