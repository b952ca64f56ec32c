"""
Scale primitives - ScalePattern, ScaleNote, MajorScale.

Scales are step patterns applied cumulatively from a root pitch.
A major scale is additionally spelled so each degree takes the next
letter in the cycle A-G: no letter repeats and none is skipped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import ClassVar

from .errors import ScaleConstructionInconsistency
from .pitch import Pitch
from .tables import (
    SEMITONES_PER_OCTAVE,
    Accidental,
    Spelling,
    canonical_spelling,
    next_letter,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScalePattern:
    """
    A scale defined by its step pattern.

    Steps are semitones from one degree to the next (not cumulative).
    A major scale is: W W H W W W H (2 2 1 2 2 2 1 semitones)
    """

    steps: tuple[int, ...]
    name: str = ""

    MAJOR: ClassVar[ScalePattern]
    CHROMATIC: ClassVar[ScalePattern]

    def __post_init__(self) -> None:
        if any(step <= 0 for step in self.steps):
            raise ValueError(f"Scale steps must be positive, got {self.steps}")
        total = sum(self.steps)
        if total != SEMITONES_PER_OCTAVE:
            raise ValueError(f"Scale steps must sum to 12 semitones, got {total}")

    def __len__(self) -> int:
        return len(self.steps)

    def __str__(self) -> str:
        return self.name or f"ScalePattern({self.steps})"


ScalePattern.MAJOR = ScalePattern((2, 2, 1, 2, 2, 2, 1), "major")
ScalePattern.CHROMATIC = ScalePattern((1,) * 12, "chromatic")


def build_scale(root: Pitch, pattern: ScalePattern) -> list[Pitch]:
    """
    Apply a step pattern to a root.

    Returns len(pattern) + 1 pitches: the root, each degree, and the octave.
    Derived pitches carry no bias.
    """
    pitches = [root]
    current = root
    for step in pattern.steps:
        current = current.add(step)
        pitches.append(current)
    return pitches


@dataclass(frozen=True)
class ScaleNote:
    """A scale degree: the pitch and the name it is written with."""

    pitch: Pitch
    name: str

    @property
    def letter(self) -> str:
        return self.name[0]

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class MajorScale:
    """
    A spelled major scale: root, seven degrees above it, and the octave.

    Examples:
        build_major_scale(Pitch.from_notation("C3")).letters
            -> ['C', 'D', 'E', 'F', 'G', 'A', 'B', 'C']
    """

    root: Pitch
    notes: tuple[ScaleNote, ...]

    LENGTH: ClassVar[int] = len(ScalePattern.MAJOR) + 1

    def __post_init__(self) -> None:
        if len(self.notes) != self.LENGTH:
            raise ValueError(f"A major scale has {self.LENGTH} notes, got {len(self.notes)}")

    @property
    def pitches(self) -> list[Pitch]:
        return [note.pitch for note in self.notes]

    @property
    def names(self) -> list[str]:
        return [note.name for note in self.notes]

    @property
    def letters(self) -> list[str]:
        return [note.letter for note in self.notes]

    def __iter__(self) -> Iterator[ScaleNote]:
        return iter(self.notes)

    def __len__(self) -> int:
        return len(self.notes)

    def __str__(self) -> str:
        return " ".join(self.names)


def _spell(pitch: Pitch, spelling: Spelling) -> ScaleNote:
    spelled = pitch.respell(spelling.accidental)
    return ScaleNote(spelled, spelling.with_octave(pitch.octave))


def _spell_degrees(root: Pitch, degrees: Sequence[Pitch]) -> tuple[ScaleNote, ...]:
    """
    Spell each degree on the letter after the previous one.

    The default spelling is used when it lands on the expected letter,
    otherwise the enharmonic spelling is.
    """
    root_spelling = root.spelling()
    notes = [_spell(root, root_spelling)]
    letter = root_spelling.letter

    for pitch in degrees:
        expected = next_letter(letter)
        spelling = pitch.spelling()
        if spelling.letter != expected:
            spelling = pitch.enharmonic_spelling()
        if spelling.letter != expected:
            raise ScaleConstructionInconsistency(root.display_name(), expected, pitch)
        notes.append(_spell(pitch, spelling))
        letter = expected

    return tuple(notes)


def build_major_scale(root: Pitch) -> MajorScale:
    """
    Build and spell the major scale on a root.

    The root keeps its own spelling when the scale can be written from it.
    Roots like A#, D# and G# would need double sharps, which the note table
    does not have, so those are respelled once to their enharmonic (Bb, Eb,
    Ab) before giving up.

    Args:
        root: The tonic

    Returns:
        MajorScale of 8 spelled notes

    Raises:
        ScaleConstructionInconsistency: neither spelling of the root gives
            a scale on consecutive letters
    """
    degrees = build_scale(root, ScalePattern.MAJOR)[1:]
    try:
        return MajorScale(root, _spell_degrees(root, degrees))
    except ScaleConstructionInconsistency:
        alternate = root.respell(root.enharmonic_spelling().accidental)
        if alternate.spelling() == root.spelling():
            raise
        logger.debug(
            "Respelling root %s as %s to keep scale letters consecutive",
            root.display_name(),
            alternate.display_name(),
        )
        return MajorScale(alternate, _spell_degrees(alternate, degrees))


def build_chromatic_scale(root: Pitch) -> tuple[ScaleNote, ...]:
    """
    The 13 pitches from a root up to its octave in semitones.

    Black keys take the root's bias, so a flat root gives a flat chromatic
    scale. White keys keep their natural names, except the closing octave,
    which is spelled like the root (C3b ... C4b).
    """
    *inner, octave = build_scale(root, ScalePattern.CHROMATIC)[1:]
    notes = [ScaleNote(root, root.display_name())]
    for pitch in inner:
        if canonical_spelling(pitch.offset).accidental is not Accidental.NATURAL:
            pitch = pitch.respell(root.bias)
        notes.append(ScaleNote(pitch, pitch.display_name()))
    octave = octave.respell(root.spelling().accidental)
    notes.append(ScaleNote(octave, octave.display_name()))
    return tuple(notes)


def major_scales_by_root(start: Pitch) -> list[MajorScale]:
    """The major scale on each of the 12 chromatic steps from `start`."""
    roots = build_scale(start, ScalePattern.CHROMATIC)[:-1]
    return [build_major_scale(root) for root in roots]
