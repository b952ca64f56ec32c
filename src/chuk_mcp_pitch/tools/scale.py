"""
Scale tools - MCP tools for building and exporting scales.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_pitch.compiler import scale_to_midi
from chuk_mcp_pitch.constants import (
    DEFAULT_TEMPO_BPM,
    MAX_TEMPO_BPM,
    MIN_TEMPO_BPM,
    ErrorMessages,
    SuccessMessages,
)
from chuk_mcp_pitch.core import Pitch, build_chromatic_scale, build_major_scale
from chuk_mcp_pitch.models import ScaleInfo
from chuk_mcp_pitch.tools.pitch import resolve_pitch

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_scale_tools(mcp: ChukMCPServer, output_dir: Path) -> dict[str, Any]:
    """
    Register scale tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for exported MIDI files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_build_major_scale(root: str) -> str:
        """
        Build a spelled major scale.

        Each degree uses the next letter name, so no letter repeats or is
        skipped (F# major ends on E#, not F). Roots that would need double
        sharps are respelled: 'A4#' gives the B-flat major scale.

        Args:
            root: Root pitch in scientific notation

        Returns:
            JSON string with the 8 spelled notes

        Example:
            music_build_major_scale(root="C3")
        """
        try:
            scale = build_major_scale(resolve_pitch(root))
            return json.dumps(
                {
                    "status": "success",
                    "scale": ScaleInfo.from_major_scale(scale).model_dump(mode="json"),
                }
            )
        except Exception as e:
            logger.exception("Failed to build major scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_build_major_scale"] = music_build_major_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_build_chromatic_scale(root: str) -> str:
        """
        Build a chromatic scale from a root up to its octave.

        Black keys follow the root's accidental: 'B3b' gives flats,
        'A3#' or a natural root gives sharps.

        Args:
            root: Root pitch in scientific notation

        Returns:
            JSON string with the 13 notes

        Example:
            music_build_chromatic_scale(root="C3")
        """
        try:
            notes = build_chromatic_scale(resolve_pitch(root))
            return json.dumps(
                {
                    "status": "success",
                    "scale": ScaleInfo.from_notes("chromatic", notes).model_dump(mode="json"),
                }
            )
        except Exception as e:
            logger.exception("Failed to build chromatic scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_build_chromatic_scale"] = music_build_chromatic_scale

    @mcp.tool  # type: ignore[arg-type]
    async def music_export_scale_midi(
        root: str,
        tempo: int = DEFAULT_TEMPO_BPM,
        output_name: str | None = None,
    ) -> str:
        """
        Export a major scale as a MIDI file.

        Writes one quarter note per degree, ascending.

        Args:
            root: Root pitch in scientific notation
            tempo: Tempo in BPM (40-240)
            output_name: Optional output filename (without .mid extension)

        Returns:
            JSON string with the file path and the spelled notes

        Example:
            music_export_scale_midi(root="E3b", tempo=90)
        """
        try:
            if not MIN_TEMPO_BPM <= tempo <= MAX_TEMPO_BPM:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_TEMPO.format(tempo=tempo)}
                )
            if output_name is not None and not _is_plain_filename(output_name):
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_OUTPUT_NAME.format(name=output_name),
                    }
                )

            scale = build_major_scale(resolve_pitch(root))
            for pitch in scale.pitches:
                if not 0 <= pitch.midi_number <= 127:
                    return json.dumps(
                        {
                            "status": "error",
                            "message": ErrorMessages.OUT_OF_MIDI_RANGE.format(
                                name=pitch.display_name(), midi_number=pitch.midi_number
                            ),
                        }
                    )

            midi = scale_to_midi(scale, tempo_bpm=tempo)

            filename = f"{output_name or _default_filename(scale.root)}.mid"
            output_path = output_dir / filename
            output_dir.mkdir(parents=True, exist_ok=True)
            midi.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "scale": ScaleInfo.from_major_scale(scale).model_dump(mode="json"),
                    "message": SuccessMessages.SCALE_EXPORTED.format(
                        name=f"{scale.notes[0].name} major", path=output_path
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to export scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_export_scale_midi"] = music_export_scale_midi

    return tools


def _is_plain_filename(name: str) -> bool:
    # Exports must stay inside the output directory
    if name in ("", ".", "..") or "/" in name or "\\" in name:
        return False
    return Path(name).name == name


def _default_filename(root: Pitch) -> str:
    # '#' is awkward in filenames
    return f"{root.display_name().replace('#', 's')}_major"
