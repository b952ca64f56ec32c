#!/usr/bin/env python3
"""
Example: Export spelled major scales as MIDI files.

Usage:
    python examples/export_scale_midi.py
    # Creates: examples/output/C3_major.mid, examples/output/F3s_major.mid, ...
"""

from pathlib import Path

from chuk_mcp_pitch.compiler import scale_to_midi
from chuk_mcp_pitch.core import Pitch, build_major_scale


def main() -> None:
    """Export a few major scales."""
    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)

    for root in ["C3", "F3#", "G3b", "A4#"]:
        scale = build_major_scale(Pitch.from_notation(root))
        filename = f"{scale.names[0].replace('#', 's')}_major.mid"
        scale_to_midi(scale, tempo_bpm=96).save(str(output_dir / filename))
        print(f"{root:>4}: {scale}")
        print(f"      -> {output_dir / filename}")


if __name__ == "__main__":
    main()
