"""Chord table - the diatonic triads of C major and their inversions.

Each chord is keyed by its roman-numeral scale degree and carries:
- a display name (e.g. "D minor")
- its base notes in the key of C
- three voicings: root position, first inversion, second inversion

Voicings are always expressed in C; use ``theory.transpose`` to move them
into another key.
"""

import random
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from ..core import UnknownChordError, VOICING_SIZE


class Inversion(Enum):
    """Chord inversions available for every triad."""
    ROOT = "root"
    FIRST = "first"
    SECOND = "second"


@dataclass(frozen=True)
class Chord:
    """A chord in the table."""

    roman: str  # Scale-degree symbol (e.g., "IV", "vi")
    name: str  # Display name (e.g., "F Major")
    notes: Tuple[str, ...]  # Base notes in C
    voicings: Mapping[Inversion, Tuple[str, ...]]

    @property
    def quality(self) -> str:
        """Triad quality derived from the display name."""
        return self.name.split()[-1].lower()

    def voicing(self, inversion: Inversion) -> List[str]:
        """Get the voicing for an inversion, falling back to root position."""
        notes = self.voicings.get(inversion) or self.voicings[Inversion.ROOT]
        return list(notes)


def _chord(roman: str, name: str, root, first, second) -> Chord:
    voicings = {
        Inversion.ROOT: tuple(root),
        Inversion.FIRST: tuple(first),
        Inversion.SECOND: tuple(second),
    }
    for inversion, notes in voicings.items():
        if len(notes) != VOICING_SIZE:
            raise ValueError(
                f"{roman} {inversion.value} voicing must have {VOICING_SIZE} notes"
            )
    return Chord(
        roman=roman,
        name=name,
        notes=tuple(root),
        voicings=MappingProxyType(voicings),
    )


CHORD_TABLE: Mapping[str, Chord] = MappingProxyType({
    "I": _chord(
        "I", "C Major",
        ["C4", "E4", "G4"], ["E4", "G4", "C5"], ["G3", "C4", "E4"],
    ),
    "ii": _chord(
        "ii", "D minor",
        ["D4", "F4", "A4"], ["F4", "A4", "D5"], ["A3", "D4", "F4"],
    ),
    "iii": _chord(
        "iii", "E minor",
        ["E4", "G4", "B4"], ["G4", "B4", "E5"], ["B3", "E4", "G4"],
    ),
    "IV": _chord(
        "IV", "F Major",
        ["F4", "A4", "C5"], ["A4", "C5", "F5"], ["C4", "F4", "A4"],
    ),
    "V": _chord(
        "V", "G Major",
        ["G4", "B4", "D5"], ["B4", "D5", "G5"], ["D4", "G4", "B4"],
    ),
    "vi": _chord(
        "vi", "A minor",
        ["A4", "C5", "E5"], ["C5", "E5", "A5"], ["E4", "A4", "C5"],
    ),
    "vii": _chord(
        "vii", "B diminished",
        ["B4", "D5", "F5"], ["D5", "F5", "B5"], ["F4", "B4", "D5"],
    ),
})


def chord_symbols() -> Tuple[str, ...]:
    """Return the roman symbols of the table in scale-degree order."""
    return tuple(CHORD_TABLE)


def lookup_chord(roman: str) -> Chord:
    """
    Look up a chord by its roman symbol.

    Raises:
        UnknownChordError: If the symbol is not in the table
    """
    try:
        return CHORD_TABLE[roman]
    except KeyError:
        raise UnknownChordError(roman) from None


def get_voicing(roman: str, inversion: Inversion = Inversion.ROOT) -> List[str]:
    """Get a specific inversion of a chord, in C."""
    return lookup_chord(roman).voicing(inversion)


def select_voicing(roman: str, rng: Optional[random.Random] = None) -> List[str]:
    """
    Pick one of the chord's inversions uniformly at random.

    Args:
        roman: Roman symbol of the chord (e.g., "V")
        rng: Random source with a ``choice`` method. Defaults to the
            module-level ``random`` functions; pass ``random.Random(seed)``
            for reproducible selection.

    Returns:
        Three pitch names in the key of C

    Raises:
        UnknownChordError: If the symbol is not in the table
    """
    chord = lookup_chord(roman)
    source = rng if rng is not None else random
    inversion = source.choice(list(Inversion))
    return chord.voicing(inversion)
