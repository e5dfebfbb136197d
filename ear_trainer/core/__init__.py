"""Core types and constants for Ear Trainer."""

from .pitch import Pitch, parse_pitches, pitch_names
from .constants import (
    PITCH_NAMES,
    CORRECT_POINTS,
    WRONG_PENALTY,
    DEFAULT_KEY,
    DEFAULT_TEMPO,
    DEFAULT_QUESTIONS_PER_LEVEL,
    VOICING_SIZE,
)
from .errors import (
    EarTrainerError,
    UnknownChordError,
    UnknownKeyError,
    InvalidPitchError,
    LevelConfigError,
    SessionFinishedError,
)

__all__ = [
    "Pitch",
    "parse_pitches",
    "pitch_names",
    "PITCH_NAMES",
    "CORRECT_POINTS",
    "WRONG_PENALTY",
    "DEFAULT_KEY",
    "DEFAULT_TEMPO",
    "DEFAULT_QUESTIONS_PER_LEVEL",
    "VOICING_SIZE",
    "EarTrainerError",
    "UnknownChordError",
    "UnknownKeyError",
    "InvalidPitchError",
    "LevelConfigError",
    "SessionFinishedError",
]
