"""Ear Trainer - Chord Progression Ear Training.

Architecture Layers:
    1. core/     - Pitch value type, constants, errors
    2. theory/   - Chord table, voicing selection, transposition
    3. levels/   - Level catalog (curriculum of chord vocabularies)
    4. session/  - Question generation and scoring
    5. output/   - Export (MIDI, MusicXML, WAV)
"""

__version__ = "0.1.0"

# Core types
from .core import (
    Pitch,
    CORRECT_POINTS,
    WRONG_PENALTY,
    UnknownChordError,
    UnknownKeyError,
)

# Theory layer
from .theory import (
    CHORD_TABLE,
    KEYS,
    Inversion,
    lookup_chord,
    select_voicing,
    transpose,
)

# Levels layer
from .levels import DEFAULT_CATALOG, Level, LevelCatalog, get_level, get_max_score

# Session layer
from .session import ChordProgression, QuestionGenerator, QuizConfig, QuizSession

__all__ = [
    # Core
    "Pitch",
    "CORRECT_POINTS",
    "WRONG_PENALTY",
    "UnknownChordError",
    "UnknownKeyError",
    # Theory
    "CHORD_TABLE",
    "KEYS",
    "Inversion",
    "lookup_chord",
    "select_voicing",
    "transpose",
    # Levels
    "DEFAULT_CATALOG",
    "Level",
    "LevelCatalog",
    "get_level",
    "get_max_score",
    # Session
    "ChordProgression",
    "QuestionGenerator",
    "QuizConfig",
    "QuizSession",
]
