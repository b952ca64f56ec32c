"""
MCP tool implementations.

Tools are organized by domain:
- pitch - Describing, transposing and comparing pitches
- scale - Building and exporting scales
"""

from chuk_mcp_pitch.tools.pitch import register_pitch_tools, resolve_pitch
from chuk_mcp_pitch.tools.scale import register_scale_tools

__all__ = [
    "register_pitch_tools",
    "register_scale_tools",
    "resolve_pitch",
]
