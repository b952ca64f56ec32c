"""
Constants for the pitch server.

No magic strings - tool defaults and messages live here.
"""

# MIDI export defaults
DEFAULT_TEMPO_BPM = 120
DEFAULT_NOTE_BEATS = 1.0
DEFAULT_VELOCITY = 100

MIN_TEMPO_BPM = 40
MAX_TEMPO_BPM = 240


class ErrorMessages:
    """Standardized error messages."""

    PITCH_SOURCE_REQUIRED = "Give exactly one of 'notation' or 'midi_number'."
    INVALID_TEMPO = "Invalid tempo: {tempo}. Must be between 40 and 240 BPM."
    OUT_OF_MIDI_RANGE = "Pitch {name} (MIDI {midi_number}) is outside the MIDI range 0-127."
    INVALID_OUTPUT_NAME = (
        "Invalid output name: {name!r}. Use a plain file name without path separators."
    )


class SuccessMessages:
    """Standardized success messages."""

    SCALE_EXPORTED = "Exported {name} to {path}."
