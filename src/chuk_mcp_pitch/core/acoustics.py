"""
Acoustic source interface.

Anything that vibrates produces a fundamental and an overtone series.
Instrument models (strings, pipes) are expected to implement this and
consume Pitch as an opaque identifier; none ship with this package.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .pitch import Pitch


@runtime_checkable
class AcousticSource(Protocol):
    """Something that sounds a fundamental plus overtones."""

    def overtones(self) -> Sequence[Pitch]:
        """The overtone series, fundamental first."""
        ...

    def fundamental(self) -> Pitch:
        """The lowest pitch of the overtone series."""
        ...
