#!/usr/bin/env python3
"""
Async Pitch MCP Server using chuk-mcp-server

This server provides MCP tools for working with symbolic pitch:
- Parsing and naming pitches in scientific notation
- Enharmonic spelling and transposition
- Building correctly spelled major and chromatic scales
- Exporting scales to MIDI files
"""

import logging
from pathlib import Path
from typing import Any

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_pitch.tools import register_pitch_tools, register_scale_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVER_NAME = "chuk-mcp-pitch"

# Paths - use standard project structure
BASE_PATH = Path.cwd()
OUTPUT_DIR = BASE_PATH / "output"


def register_tools(server: ChukMCPServer, output_dir: Path) -> dict[str, Any]:
    """Register every pitch and scale tool, writing exports to output_dir."""
    return {**register_pitch_tools(server), **register_scale_tools(server, output_dir)}


def create_server(output_dir: Path) -> ChukMCPServer:
    """A fresh server whose MIDI exports go to output_dir instead of OUTPUT_DIR."""
    server = ChukMCPServer(SERVER_NAME)
    register_tools(server, output_dir)
    logger.info(f"  Output dir: {output_dir}")
    return server


# Create the MCP server instance
mcp = ChukMCPServer(SERVER_NAME)
tools = register_tools(mcp, OUTPUT_DIR)

# Export tool functions for direct access
music_describe_pitch = tools["music_describe_pitch"]
music_transpose_pitch = tools["music_transpose_pitch"]
music_compare_pitches = tools["music_compare_pitches"]

music_build_major_scale = tools["music_build_major_scale"]
music_build_chromatic_scale = tools["music_build_chromatic_scale"]
music_export_scale_midi = tools["music_export_scale_midi"]

logger.info("CHUK Pitch MCP Server initialized")
logger.info(f"  Output dir: {OUTPUT_DIR}")
