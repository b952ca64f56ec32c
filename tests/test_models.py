"""
Tests for tool response models.
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_pitch.core import Pitch, build_chromatic_scale, build_major_scale
from chuk_mcp_pitch.models import PitchInfo, ScaleInfo, ScaleNoteInfo


class TestPitchInfo:
    """Tests for PitchInfo."""

    def test_from_pitch(self) -> None:
        """All fields come from the pitch."""
        info = PitchInfo.from_pitch(Pitch.from_notation("A4#"))
        assert info.midi_number == 70
        assert info.name == "A4#"
        assert info.enharmonic == "B4b"
        assert info.octave == 4
        assert info.offset == 1

    def test_json_dump(self) -> None:
        """Bias serializes by value."""
        data = PitchInfo.from_pitch(Pitch.from_notation("B4b")).model_dump(mode="json")
        assert data["bias"] == "flat"
        assert data["name"] == "B4b"

    def test_offset_validated(self) -> None:
        """Offsets outside 0-11 are rejected."""
        with pytest.raises(ValidationError):
            PitchInfo(midi_number=60, name="C3", enharmonic="B3#", octave=3, offset=12)

    def test_frozen(self) -> None:
        """Infos are immutable."""
        info = PitchInfo.from_pitch(Pitch(60))
        with pytest.raises(ValidationError):
            info.name = "D3"  # type: ignore[misc]


class TestScaleInfo:
    """Tests for ScaleInfo."""

    def test_from_major_scale(self) -> None:
        """Degrees are numbered from 1."""
        info = ScaleInfo.from_major_scale(build_major_scale(Pitch.from_notation("C3")))
        assert info.kind == "major"
        assert info.root == "C3"
        assert [n.degree for n in info.notes] == list(range(1, 9))
        assert info.names == ["C3", "D3", "E3", "F3", "G3", "A4", "B4", "C4"]
        assert info.notes[3].letter == "F"

    def test_respelled_root(self) -> None:
        """The root is reported as written in the scale."""
        info = ScaleInfo.from_major_scale(build_major_scale(Pitch.from_notation("A4#")))
        assert info.root == "B4b"

    def test_from_chromatic(self) -> None:
        """Chromatic scales serialize all 13 notes."""
        info = ScaleInfo.from_notes("chromatic", build_chromatic_scale(Pitch(60)))
        assert info.kind == "chromatic"
        assert len(info.notes) == 13

    def test_invalid_kind(self) -> None:
        """Only known scale kinds are accepted."""
        with pytest.raises(ValidationError):
            ScaleInfo(kind="minor", root="C3")  # type: ignore[arg-type]

    def test_note_letter_length(self) -> None:
        """Letters are a single character."""
        with pytest.raises(ValidationError):
            ScaleNoteInfo(degree=1, midi_number=60, name="C3", letter="CD")
