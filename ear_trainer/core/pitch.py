"""Pitch value type - a pitch class plus an octave number."""

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Union

from .constants import NOTES_PER_OCTAVE, PITCH_NAMES
from .errors import InvalidPitchError

_PITCH_RE = re.compile(r"^([A-Ga-g])([#b]?)(-?\d+)$")
ACCIDENTALS = {"": 0, "#": 1, "b": -1}


@total_ordering
@dataclass(frozen=True)
class Pitch:
    """Represents a pitch such as 'C4' or 'F#5'."""

    pitch_class: int  # 0-11, where 0=C
    octave: int  # Scientific octave, C4 = middle C

    def __post_init__(self):
        if not 0 <= self.pitch_class < NOTES_PER_OCTAVE:
            raise InvalidPitchError(
                f"Pitch class out of range (0-11): {self.pitch_class}"
            )

    @classmethod
    def parse(cls, name: Union[str, "Pitch"]) -> "Pitch":
        """Parse a pitch name ('C4', 'F#5', 'Eb3') into a Pitch."""
        if isinstance(name, Pitch):
            return name

        match = _PITCH_RE.match(str(name).strip())
        if match is None:
            raise InvalidPitchError(f"Invalid pitch name: {name!r}")

        letter, accidental, octave = match.groups()
        # Flats are accepted on input; B# and Cb cross the octave boundary
        raw = PITCH_NAMES.index(letter.upper()) + ACCIDENTALS[accidental]
        return cls(raw % NOTES_PER_OCTAVE, int(octave) + raw // NOTES_PER_OCTAVE)

    @classmethod
    def from_midi(cls, midi: int) -> "Pitch":
        """Build a Pitch from a MIDI note number (60 = C4)."""
        return cls(midi % NOTES_PER_OCTAVE, midi // NOTES_PER_OCTAVE - 1)

    @property
    def name(self) -> str:
        """Get pitch name with canonical sharp spelling (e.g., 'C4', 'A#3')."""
        return f"{PITCH_NAMES[self.pitch_class]}{self.octave}"

    @property
    def midi(self) -> int:
        """MIDI note number (C4 = 60)."""
        return (self.octave + 1) * NOTES_PER_OCTAVE + self.pitch_class

    @property
    def frequency(self) -> float:
        """Equal-tempered frequency in Hz (A4 = 440)."""
        return 440.0 * (2 ** ((self.midi - 69) / 12.0))

    def __lt__(self, other: "Pitch") -> bool:
        if not isinstance(other, Pitch):
            return NotImplemented
        return self.midi < other.midi

    def __str__(self) -> str:
        return self.name


def parse_pitches(names) -> list:
    """Parse a sequence of pitch names into Pitch objects."""
    return [Pitch.parse(n) for n in names]


def pitch_names(pitches) -> list:
    """Render a sequence of Pitch objects as canonical pitch names."""
    return [Pitch.parse(p).name for p in pitches]
