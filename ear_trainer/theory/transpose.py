"""Transposition of voicings from C into any of the twelve keys."""

from typing import List, Sequence, Union

from ..core import DEFAULT_KEY, PITCH_NAMES, Pitch, UnknownKeyError
from ..core.constants import NOTES_PER_OCTAVE

# Recognized key names, in semitone order from C
KEYS = tuple(PITCH_NAMES)

PitchLike = Union[str, Pitch]


def semitone_offset(key: str) -> int:
    """
    Get the distance in semitones from C up to a key.

    Raises:
        UnknownKeyError: If the key is not one of the twelve recognized names
    """
    try:
        return KEYS.index(key)
    except ValueError:
        raise UnknownKeyError(key) from None


def inverse_key(key: str) -> str:
    """Key whose offset undoes ``key`` modulo the octave (D -> A#)."""
    return KEYS[(NOTES_PER_OCTAVE - semitone_offset(key)) % NOTES_PER_OCTAVE]


def transpose_pitch(pitch: PitchLike, key: str) -> Pitch:
    """Transpose a single pitch from C into ``key``."""
    pitch = Pitch.parse(pitch)
    raw = pitch.pitch_class + semitone_offset(key)
    octave = pitch.octave + 1 if raw >= NOTES_PER_OCTAVE else pitch.octave
    return Pitch(raw % NOTES_PER_OCTAVE, octave)


def transpose(voicing: Sequence[PitchLike], target_key: str = DEFAULT_KEY) -> List:
    """
    Transpose a voicing written in C into ``target_key``.

    Each note is moved independently, so the output keeps the input order
    and is never re-sorted or re-inverted. Output uses sharp spellings only.

    Args:
        voicing: Pitch names ("C4") or Pitch objects, in the key of C
        target_key: One of ``KEYS``

    Returns:
        List of the same kind as the input items (names in, names out)

    Raises:
        UnknownKeyError: If ``target_key`` is not recognized
    """
    offset = semitone_offset(target_key)
    if offset == 0:
        return list(voicing)

    result = []
    for note in voicing:
        moved = transpose_pitch(note, target_key)
        result.append(moved if isinstance(note, Pitch) else moved.name)
    return result
