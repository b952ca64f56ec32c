"""
Pydantic models for tool responses.

This module provides:
- PitchInfo: A single pitch with its spellings
- ScaleNoteInfo: One degree of a scale
- ScaleInfo: A spelled scale
"""

from chuk_mcp_pitch.models.pitch import PitchInfo, ScaleInfo, ScaleKind, ScaleNoteInfo

__all__ = [
    "PitchInfo",
    "ScaleInfo",
    "ScaleKind",
    "ScaleNoteInfo",
]
