"""
Pitch errors.

All are ValueErrors so callers that only care about bad input can catch
that, and they fail the single operation that raised them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chuk_mcp_pitch.core.pitch import Pitch


class PitchError(ValueError):
    """Base class for pitch and scale errors."""


class UnrecognizedNotation(PitchError):
    """A string that is not valid scientific pitch notation."""

    def __init__(self, notation: str) -> None:
        super().__init__(f"Unrecognized pitch notation: {notation!r}")
        self.notation = notation


class InvalidNotationType(PitchError, TypeError):
    """A value that is neither an integer MIDI number nor a notation string."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Cannot build a pitch from {type(value).__name__}: {value!r}")
        self.value = value


class ScaleConstructionInconsistency(PitchError):
    """
    A scale degree has no spelling on the expected letter.

    Signals a defect in the tables or step pattern, not bad user input.
    """

    def __init__(self, root: str, expected: str, pitch: Pitch) -> None:
        super().__init__(
            f"Cannot spell {pitch.display_name()} on letter {expected} "
            f"while building the scale on {root}"
        )
        self.root = root
        self.expected = expected
        self.pitch = pitch
