"""
Note tables - the static lookup data behind parsing and spelling.

Offsets are counted from A (A=0 ... G#/Ab=11), following the piano
convention where the lowest key is A0 = MIDI 21.

Both tables are built once at import time and exposed through read-only
mapping proxies. Nothing writes to them afterwards, so concurrent readers
need no locking.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

A0_MIDI_NUMBER = 21
SEMITONES_PER_OCTAVE = 12

# The letter cycle used for scale spelling (G wraps back to A)
LETTERS: tuple[str, ...] = ("A", "B", "C", "D", "E", "F", "G")

# Symbol mapping (module level to avoid Enum member issues)
_ACCIDENTAL_SYMBOLS: dict[str, str] = {
    "natural": "",
    "sharp": "#",
    "flat": "b",
}


class Accidental(str, Enum):
    """
    Accidental attached to a spelling.

    NATURAL doubles as "no preference" when used as a pitch's accidental bias.
    """

    NATURAL = "natural"
    SHARP = "sharp"
    FLAT = "flat"

    @property
    def symbol(self) -> str:
        """Notation suffix: '', '#' or 'b'."""
        return _ACCIDENTAL_SYMBOLS[self.value]

    @classmethod
    def from_symbol(cls, symbol: str | None) -> Accidental:
        """Parse a notation suffix. Empty or None means natural."""
        if not symbol:
            return cls.NATURAL
        for value, candidate in _ACCIDENTAL_SYMBOLS.items():
            if candidate == symbol:
                return cls(value)
        raise ValueError(f"Unknown accidental symbol: {symbol!r}")


@dataclass(frozen=True)
class Spelling:
    """
    A written note name: a letter plus an accidental.

    Octave-independent - the octave is attached at render time.
    """

    letter: str
    accidental: Accidental = Accidental.NATURAL

    def __post_init__(self) -> None:
        if self.letter not in LETTERS:
            raise ValueError(f"Letter must be one of A-G, got {self.letter!r}")

    @property
    def name(self) -> str:
        """Octave-free name like 'C#' or 'Bb'."""
        return f"{self.letter}{self.accidental.symbol}"

    def with_octave(self, octave: int) -> str:
        """Render in scientific notation: letter, octave, accidental ('A4#')."""
        return f"{self.letter}{octave}{self.accidental.symbol}"

    def __str__(self) -> str:
        return self.name


_N = Accidental.NATURAL
_S = Accidental.SHARP
_F = Accidental.FLAT

# Candidate spellings per offset, canonical spelling first
_SPELLINGS_BY_OFFSET: tuple[tuple[Spelling, ...], ...] = (
    (Spelling("A", _N),),
    (Spelling("A", _S), Spelling("B", _F)),
    (Spelling("B", _N), Spelling("C", _F)),
    (Spelling("C", _N), Spelling("B", _S)),
    (Spelling("C", _S), Spelling("D", _F)),
    (Spelling("D", _N),),
    (Spelling("D", _S), Spelling("E", _F)),
    (Spelling("E", _N), Spelling("F", _F)),
    (Spelling("F", _N), Spelling("E", _S)),
    (Spelling("F", _S), Spelling("G", _F)),
    (Spelling("G", _N),),
    (Spelling("G", _S), Spelling("A", _F)),
)

# offset -> {accidental -> spelling}, used for rendering
OFFSET_SPELLINGS: Mapping[int, Mapping[Accidental, Spelling]] = MappingProxyType(
    {
        offset: MappingProxyType({spelling.accidental: spelling for spelling in spellings})
        for offset, spellings in enumerate(_SPELLINGS_BY_OFFSET)
    }
)

# name token -> offset, used for parsing. Enharmonic pairs share an offset.
NOTE_OFFSETS: Mapping[str, int] = MappingProxyType(
    {
        spelling.name: offset
        for offset, spellings in enumerate(_SPELLINGS_BY_OFFSET)
        for spelling in spellings
    }
)

_CANONICAL_ORDER = (Accidental.NATURAL, Accidental.SHARP, Accidental.FLAT)


def canonical_spelling(offset: int) -> Spelling:
    """The default spelling for an offset: natural, else sharp, else flat."""
    candidates = OFFSET_SPELLINGS[offset % SEMITONES_PER_OCTAVE]
    return next(candidates[a] for a in _CANONICAL_ORDER if a in candidates)


def next_letter(letter: str) -> str:
    """Cyclic successor in the letter sequence (G -> A)."""
    return LETTERS[(LETTERS.index(letter) + 1) % len(LETTERS)]
