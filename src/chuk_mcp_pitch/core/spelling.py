"""
Enharmonic resolution.

Pure lookups over the offset table: no state, no side effects.
"""

from __future__ import annotations

from .tables import OFFSET_SPELLINGS, SEMITONES_PER_OCTAVE, Spelling, canonical_spelling


def spellings_at(offset: int) -> tuple[Spelling, ...]:
    """All candidate spellings for an offset, canonical spelling first."""
    canonical = canonical_spelling(offset)
    others = [
        spelling
        for spelling in OFFSET_SPELLINGS[offset % SEMITONES_PER_OCTAVE].values()
        if spelling != canonical
    ]
    return (canonical, *others)


def enharmonic(offset: int, chosen: Spelling) -> Spelling:
    """
    Get the alternate spelling at an offset.

    If the offset has exactly two spellings, returns the one that is not
    `chosen`. Offsets with a single spelling have no alternative, so
    `chosen` comes back unchanged.
    """
    candidates = spellings_at(offset)
    if len(candidates) != 2:
        return chosen
    first, second = candidates
    return second if chosen == first else first
