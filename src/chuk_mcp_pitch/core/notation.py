"""
Scientific notation parser.

Notation is a letter, a single octave digit, then an optional accidental:
'A0', 'C3', 'A4#', 'B4b'. Octaves start at A, so 'C3' sits above 'A3'.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import InvalidNotationType, UnrecognizedNotation
from .tables import A0_MIDI_NUMBER, NOTE_OFFSETS, SEMITONES_PER_OCTAVE, Accidental

NOTATION_PATTERN = re.compile(
    r"(?P<letter>[A-G])(?P<octave>\d)(?P<accidental>[#b])?",
    re.ASCII,
)


@dataclass(frozen=True)
class ParsedNotation:
    """The pieces of a parsed notation string."""

    offset: int  # 0-11 from A
    octave: int
    accidental: Accidental

    @property
    def midi_number(self) -> int:
        return A0_MIDI_NUMBER + self.octave * SEMITONES_PER_OCTAVE + self.offset


def parse_notation(text: str) -> ParsedNotation:
    """
    Parse scientific notation into offset, octave and accidental.

    Args:
        text: Notation like 'C3' or 'A4#'

    Returns:
        ParsedNotation

    Raises:
        InvalidNotationType: text is not a string
        UnrecognizedNotation: text does not match the notation pattern,
            or its name token has no offset
    """
    if not isinstance(text, str):
        raise InvalidNotationType(text)

    match = NOTATION_PATTERN.fullmatch(text)
    if match is None:
        raise UnrecognizedNotation(text)

    symbol = match.group("accidental") or ""
    offset = NOTE_OFFSETS.get(match.group("letter") + symbol)
    if offset is None:
        raise UnrecognizedNotation(text)

    return ParsedNotation(
        offset=offset,
        octave=int(match.group("octave")),
        accidental=Accidental.from_symbol(symbol),
    )
