#!/usr/bin/env python3
"""
Example: Print the major scale on every chromatic root.

Walks the twelve semitones up from C3 and spells the major scale on each,
showing where roots are respelled to avoid double sharps.

Usage:
    python examples/print_major_scales.py
"""

from chuk_mcp_pitch.core import MIDDLE_C, build_chromatic_scale, major_scales_by_root


def main() -> None:
    """Print chromatic roots and their major scales."""
    print("Chromatic scale from C3:")
    print("  " + " ".join(note.name for note in build_chromatic_scale(MIDDLE_C)))

    print("\nMajor scales:")
    for scale in major_scales_by_root(MIDDLE_C):
        print(f"  {scale.names[0]:<4} {scale}")


if __name__ == "__main__":
    main()
