"""Theory layer - chord table, voicing selection and transposition.

Pipeline: roman symbol → voicing in C → voicing in the question key
"""

from .chords import (
    CHORD_TABLE,
    Chord,
    Inversion,
    chord_symbols,
    get_voicing,
    lookup_chord,
    select_voicing,
)
from .transpose import (
    KEYS,
    inverse_key,
    semitone_offset,
    transpose,
    transpose_pitch,
)

__all__ = [
    # Chord table
    "CHORD_TABLE",
    "Chord",
    "Inversion",
    "chord_symbols",
    "get_voicing",
    "lookup_chord",
    "select_voicing",
    # Transposition
    "KEYS",
    "inverse_key",
    "semitone_offset",
    "transpose",
    "transpose_pitch",
]
