"""
Pitch - an immutable, integer-backed pitch value.

A pitch is a MIDI number (A0 = 21) plus an accidental bias. The bias is a
display preference only: two pitches with the same MIDI number are equal
no matter how they are spelled.
"""

from __future__ import annotations

from functools import total_ordering
from numbers import Integral
from typing import Any

from .errors import InvalidNotationType
from .notation import parse_notation
from .spelling import enharmonic
from .tables import (
    A0_MIDI_NUMBER,
    OFFSET_SPELLINGS,
    SEMITONES_PER_OCTAVE,
    Accidental,
    Spelling,
    canonical_spelling,
)


def _midi_integer(value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidNotationType(value)
    if isinstance(value, Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidNotationType(value)


def _semitone_count(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"Semitones must be an integer, got {type(value).__name__}")
    return int(value)


@total_ordering
class Pitch:
    """
    A concrete pitch.

    Two explicit construction paths:
        Pitch.from_midi(60)        # integer MIDI number
        Pitch.from_notation("C3")  # scientific notation

    Arithmetic returns new pitches and drops the bias:
        Pitch.from_notation("A4#").sharp()  # Pitch(71, 'B4')

    Immutable and hashable.
    """

    __slots__ = ("_midi_number", "_bias")
    _midi_number: int
    _bias: Accidental

    def __init__(self, midi_number: int, bias: Accidental = Accidental.NATURAL) -> None:
        """
        Create a pitch directly from a MIDI number.

        Integral floats (60.0) are accepted. Booleans, fractional floats and
        anything else raise InvalidNotationType.
        """
        object.__setattr__(self, "_midi_number", _midi_integer(midi_number))
        object.__setattr__(self, "_bias", Accidental(bias))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Pitch], tuple[int, Accidental]]:
        return (type(self), (self._midi_number, self._bias))

    @classmethod
    def from_midi(cls, value: int | float, bias: Accidental = Accidental.NATURAL) -> Pitch:
        """Build a pitch from a MIDI number."""
        return cls(value, bias)

    @classmethod
    def from_notation(cls, text: str) -> Pitch:
        """
        Build a pitch from scientific notation ('C3', 'A4#', 'B4b').

        The written accidental becomes the pitch's bias.
        """
        parsed = parse_notation(text)
        return cls(parsed.midi_number, parsed.accidental)

    @property
    def midi_number(self) -> int:
        return self._midi_number

    @property
    def bias(self) -> Accidental:
        """Spelling preference used by display_name()."""
        return self._bias

    @property
    def offset(self) -> int:
        """Semitones above the A at the bottom of this pitch's octave (0-11)."""
        return (self._midi_number - A0_MIDI_NUMBER) % SEMITONES_PER_OCTAVE

    @property
    def octave(self) -> int:
        """Octave number, counted from A0."""
        return (self._midi_number - A0_MIDI_NUMBER) // SEMITONES_PER_OCTAVE

    # Arithmetic

    def add(self, semitones: int) -> Pitch:
        """Transpose up. The result has no bias."""
        return Pitch(self._midi_number + _semitone_count(semitones))

    def subtract(self, semitones: int) -> Pitch:
        """Transpose down. The result has no bias."""
        return Pitch(self._midi_number - _semitone_count(semitones))

    def sharp(self) -> Pitch:
        return self.add(1)

    def flat(self) -> Pitch:
        return self.subtract(1)

    def interval_to(self, other: Pitch) -> int:
        """Signed semitone distance from this pitch to another."""
        return other._midi_number - self._midi_number

    def respell(self, bias: Accidental) -> Pitch:
        """Same pitch with a different spelling preference."""
        return Pitch(self._midi_number, bias)

    def __add__(self, semitones: int) -> Pitch:
        if not isinstance(semitones, int) or isinstance(semitones, bool):
            return NotImplemented
        return self.add(semitones)

    def __sub__(self, semitones: int) -> Pitch:
        if not isinstance(semitones, int) or isinstance(semitones, bool):
            return NotImplemented
        return self.subtract(semitones)

    # Naming

    def spelling(self) -> Spelling:
        """
        Spelling chosen by the bias.

        Falls back to the canonical spelling (natural, else sharp) when the
        offset has no spelling with the preferred accidental.
        """
        spelling = OFFSET_SPELLINGS[self.offset].get(self._bias)
        if spelling is None:
            return canonical_spelling(self.offset)
        return spelling

    def display_name(self) -> str:
        """Scientific notation for this pitch, e.g. 'A4#'."""
        return self.spelling().with_octave(self.octave)

    def enharmonic_spelling(self) -> Spelling:
        """The other spelling at this offset, or the same one if there is none."""
        return enharmonic(self.offset, self.spelling())

    def enharmonic_name(self) -> str:
        """
        The enharmonic alternative in scientific notation.

        A4# -> B4b. Pitches with a single spelling (A, D, G) return their
        own display name.
        """
        return self.enharmonic_spelling().with_octave(self.octave)

    # Comparison

    def equals(self, other: Pitch) -> bool:
        """Same sounding pitch. Bias is ignored."""
        return self._midi_number == other._midi_number

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: Pitch) -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self._midi_number < other._midi_number

    def __hash__(self) -> int:
        return hash(self._midi_number)

    def __repr__(self) -> str:
        return f"Pitch({self._midi_number}, {self.display_name()!r})"

    def __str__(self) -> str:
        return self.display_name()


MIDDLE_C = Pitch(60)
A440 = Pitch(69)
