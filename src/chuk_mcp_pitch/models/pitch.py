"""
Response models for pitch and scale tools.

Tools return JSON; these models define its shape.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from pydantic import BaseModel, Field

from chuk_mcp_pitch.core import Accidental, MajorScale, Pitch, ScaleNote

ScaleKind = Literal["major", "chromatic"]


class PitchInfo(BaseModel):
    """Everything a caller needs to know about one pitch."""

    midi_number: int = Field(..., description="MIDI note number (A0 = 21)")
    name: str = Field(..., description="Scientific notation, e.g. 'A4#'")
    enharmonic: str = Field(..., description="Alternate spelling, or the same name if none")
    octave: int = Field(..., description="Octave counted from A0")
    offset: int = Field(..., ge=0, le=11, description="Semitones above A within the octave")
    bias: Accidental = Field(Accidental.NATURAL, description="Spelling preference")

    model_config = {"frozen": True}

    @classmethod
    def from_pitch(cls, pitch: Pitch) -> PitchInfo:
        return cls(
            midi_number=pitch.midi_number,
            name=pitch.display_name(),
            enharmonic=pitch.enharmonic_name(),
            octave=pitch.octave,
            offset=pitch.offset,
            bias=pitch.bias,
        )


class ScaleNoteInfo(BaseModel):
    """One degree of a spelled scale."""

    degree: int = Field(..., ge=1, description="1-based position in the scale")
    midi_number: int
    name: str
    letter: str = Field(..., min_length=1, max_length=1)

    model_config = {"frozen": True}

    @classmethod
    def from_note(cls, degree: int, note: ScaleNote) -> ScaleNoteInfo:
        return cls(
            degree=degree,
            midi_number=note.pitch.midi_number,
            name=note.name,
            letter=note.letter,
        )


class ScaleInfo(BaseModel):
    """A spelled scale."""

    kind: ScaleKind
    root: str = Field(..., description="Root as written in the scale")
    notes: list[ScaleNoteInfo] = Field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [note.name for note in self.notes]

    @classmethod
    def from_notes(cls, kind: ScaleKind, notes: Sequence[ScaleNote]) -> ScaleInfo:
        return cls(
            kind=kind,
            root=notes[0].name,
            notes=[ScaleNoteInfo.from_note(i, note) for i, note in enumerate(notes, start=1)],
        )

    @classmethod
    def from_major_scale(cls, scale: MajorScale) -> ScaleInfo:
        return cls.from_notes("major", scale.notes)
