"""
Pitch tools - MCP tools for parsing, naming and transposing pitches.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.constants import ErrorMessages
from chuk_mcp_pitch.core import Pitch
from chuk_mcp_pitch.models import PitchInfo

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def resolve_pitch(notation: str | None = None, midi_number: int | None = None) -> Pitch:
    """
    Build a pitch from whichever of notation or MIDI number was given.

    Tool clients often pad their arguments, so surrounding whitespace is
    trimmed from notation before it reaches the strict parser.

    Raises:
        ValueError: both or neither were given
        PitchError: the given value is not a valid pitch
    """
    if (notation is None) == (midi_number is None):
        raise ValueError(ErrorMessages.PITCH_SOURCE_REQUIRED)
    if notation is not None:
        if isinstance(notation, str):
            notation = notation.strip()
        return Pitch.from_notation(notation)
    return Pitch.from_midi(midi_number)


def register_pitch_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register pitch tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_describe_pitch(
        notation: str | None = None,
        midi_number: int | None = None,
    ) -> str:
        """
        Describe a pitch.

        Give either scientific notation or a MIDI number (A0 = 21).
        Octaves are counted from A, so 'C3' is MIDI 60.

        Args:
            notation: Scientific notation like 'C3', 'A4#', 'B4b'
            midi_number: MIDI note number

        Returns:
            JSON string with the pitch's name, enharmonic, octave and offset

        Example:
            music_describe_pitch(notation="A4#")
        """
        try:
            pitch = resolve_pitch(notation, midi_number)
            return json.dumps(
                {
                    "status": "success",
                    "pitch": PitchInfo.from_pitch(pitch).model_dump(mode="json"),
                }
            )
        except Exception as e:
            logger.exception("Failed to describe pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_describe_pitch"] = music_describe_pitch

    @mcp.tool  # type: ignore[arg-type]
    async def music_transpose_pitch(notation: str, semitones: int) -> str:
        """
        Transpose a pitch by a number of semitones.

        Positive values go up, negative values go down. The result is
        spelled with its default name.

        Args:
            notation: Starting pitch in scientific notation
            semitones: Semitones to move

        Returns:
            JSON string with the original and transposed pitch

        Example:
            music_transpose_pitch(notation="C3", semitones=7)
        """
        try:
            pitch = resolve_pitch(notation)
            transposed = pitch.add(semitones)
            return json.dumps(
                {
                    "status": "success",
                    "from": PitchInfo.from_pitch(pitch).model_dump(mode="json"),
                    "to": PitchInfo.from_pitch(transposed).model_dump(mode="json"),
                    "semitones": semitones,
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_transpose_pitch"] = music_transpose_pitch

    @mcp.tool  # type: ignore[arg-type]
    async def music_compare_pitches(first: str, second: str) -> str:
        """
        Compare two pitches.

        Pitches are equal when they sound the same, however they are
        spelled. 'A4#' and 'B4b' are equal and enharmonic.

        Args:
            first: First pitch in scientific notation
            second: Second pitch in scientific notation

        Returns:
            JSON string with equality, enharmonic flag and semitone distance

        Example:
            music_compare_pitches(first="A4#", second="B4b")
        """
        try:
            a = resolve_pitch(first)
            b = resolve_pitch(second)
            equal = a.equals(b)
            return json.dumps(
                {
                    "status": "success",
                    "equal": equal,
                    "enharmonic": equal and a.display_name() != b.display_name(),
                    "semitones": a.interval_to(b),
                    "first": PitchInfo.from_pitch(a).model_dump(mode="json"),
                    "second": PitchInfo.from_pitch(b).model_dump(mode="json"),
                }
            )
        except Exception as e:
            logger.exception("Failed to compare pitches")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_compare_pitches"] = music_compare_pitches

    return tools
