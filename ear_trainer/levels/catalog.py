"""Level catalog - the ordered curriculum of chord vocabularies.

A level declares which chord symbols may appear, how many chords make up one
question, and how many questions make up the level. The built-in catalog
can be replaced by a JSON file with the same record schema:

    [
        {
            "number": 1,
            "availableChords": ["I", "IV", "V"],
            "description": "Primary Chords (I, IV, V)",
            "questionsPerLevel": 10,
            "chordsPerQuestion": 2
        },
        ...
    ]

snake_case keys (``available_chords`` ...) are accepted as well, and a top
level ``{"levels": [...]}`` object is unwrapped.
"""

import json
import warnings
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ..core import (
    CORRECT_POINTS,
    DEFAULT_QUESTIONS_PER_LEVEL,
    LevelConfigError,
)
from ..theory import CHORD_TABLE


@dataclass(frozen=True)
class Level:
    """One difficulty tier of the curriculum."""

    number: int
    available_chords: Tuple[str, ...]
    description: str
    questions_per_level: int = DEFAULT_QUESTIONS_PER_LEVEL
    chords_per_question: int = 2

    @property
    def max_score(self) -> int:
        """Best achievable score: every question answered correctly."""
        return self.questions_per_level * CORRECT_POINTS

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the camelCase record schema for JSON output."""
        return {
            "number": self.number,
            "availableChords": list(self.available_chords),
            "description": self.description,
            "questionsPerLevel": self.questions_per_level,
            "chordsPerQuestion": self.chords_per_question,
        }


# Record keys accepted by from_records, mapped to Level field names
_FIELD_ALIASES = {
    "number": "number",
    "availableChords": "available_chords",
    "available_chords": "available_chords",
    "description": "description",
    "questionsPerLevel": "questions_per_level",
    "questions_per_level": "questions_per_level",
    "chordsPerQuestion": "chords_per_question",
    "chords_per_question": "chords_per_question",
}


def _int_field(fields: Dict[str, Any], name: str, default: Any = None) -> int:
    value = fields.get(name, default)
    # bool is an int subclass but never a valid count
    if isinstance(value, bool):
        raise LevelConfigError(f"Level field {name!r} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise LevelConfigError(
            f"Level field {name!r} must be an integer, got {value!r}"
        ) from None


def level_from_record(record: Mapping[str, Any]) -> Level:
    """Build a Level from a plain dict using either key style.

    Raises:
        LevelConfigError: If the record is not a mapping or a field has the wrong type
    """
    if not isinstance(record, Mapping):
        raise LevelConfigError(f"Level record must be an object, got {record!r}")

    fields = {}
    for key, value in record.items():
        name = _FIELD_ALIASES.get(key)
        if name is None:
            warnings.warn(f"Ignoring unknown level field: {key!r}")
            continue
        fields[name] = value

    missing = {"number", "available_chords"} - set(fields)
    if missing:
        raise LevelConfigError(f"Level record missing fields: {sorted(missing)}")

    number = _int_field(fields, "number")
    chords = fields["available_chords"]
    if not isinstance(chords, (list, tuple)) or not all(isinstance(c, str) for c in chords):
        raise LevelConfigError(
            f"Level {number}: availableChords must be a list of symbols, got {chords!r}"
        )

    # Keep first occurrence order
    unique = tuple(dict.fromkeys(chords))
    if len(unique) != len(chords):
        warnings.warn(
            f"Level {number}: duplicate chord symbols dropped"
        )

    return Level(
        number=number,
        available_chords=unique,
        description=str(fields.get("description", "")),
        questions_per_level=_int_field(
            fields, "questions_per_level", DEFAULT_QUESTIONS_PER_LEVEL
        ),
        chords_per_question=_int_field(fields, "chords_per_question", 2),
    )


class LevelCatalog:
    """Validated, read-only collection of levels sorted by number.

    Lookups are lenient: an unknown level number gives ``None`` (or a max
    score of 0) so callers can probe for "is there a level after this one".
    """

    def __init__(self, levels: Iterable[Level], chord_table: Mapping = CHORD_TABLE):
        """
        Initialize LevelCatalog.

        Args:
            levels: Level entries, in any order
            chord_table: Table every available chord must be found in

        Raises:
            LevelConfigError: If any level breaks a catalog invariant
        """
        ordered = sorted(levels, key=lambda level: level.number)
        seen = set()
        for level in ordered:
            self._validate(level, chord_table)
            if level.number in seen:
                raise LevelConfigError(f"Duplicate level number: {level.number}")
            seen.add(level.number)

        self._levels: Tuple[Level, ...] = tuple(ordered)
        self._by_number: Dict[int, Level] = {level.number: level for level in ordered}

    @staticmethod
    def _validate(level: Level, chord_table: Mapping) -> None:
        if not level.available_chords:
            raise LevelConfigError(f"Level {level.number} has no available chords")

        dangling = [c for c in level.available_chords if c not in chord_table]
        if dangling:
            raise LevelConfigError(
                f"Level {level.number} references unknown chords: {dangling}"
            )
        if level.questions_per_level < 1:
            raise LevelConfigError(
                f"Level {level.number}: questionsPerLevel must be >= 1"
            )
        if level.chords_per_question < 1:
            raise LevelConfigError(
                f"Level {level.number}: chordsPerQuestion must be >= 1"
            )

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "LevelCatalog":
        """Build a catalog from plain dict records."""
        return cls(level_from_record(r) for r in records)

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "LevelCatalog":
        """
        Load a catalog from a JSON file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            LevelConfigError: If the content doesn't follow the record schema
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Level catalog not found: {path}")

        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise LevelConfigError(f"{path}: invalid JSON: {e}") from e

        if isinstance(data, dict):
            data = data.get("levels")
        if not isinstance(data, list):
            raise LevelConfigError(
                f"{path}: expected a list of levels or an object with 'levels'"
            )
        return cls.from_records(data)

    def get_level(self, number: int) -> Optional[Level]:
        """Get a level by number, or None if there is no such level."""
        return self._by_number.get(number)

    def get_max_score(self, number: int) -> int:
        """Maximum score for a level, 0 for an unknown level."""
        level = self.get_level(number)
        return level.max_score if level else 0

    def next_level(self, number: int) -> Optional[Level]:
        """The first level numbered above ``number``, if any."""
        for level in self._levels:
            if level.number > number:
                return level
        return None

    @property
    def numbers(self) -> List[int]:
        return [level.number for level in self._levels]

    def to_records(self) -> List[Dict[str, Any]]:
        return [level.to_dict() for level in self._levels]

    def __iter__(self) -> Iterator[Level]:
        return iter(self._levels)

    def __len__(self) -> int:
        return len(self._levels)

    def __contains__(self, number: object) -> bool:
        return number in self._by_number


PRIMARY = ("I", "IV", "V")
ALL_MAJOR_MINOR = ("I", "ii", "iii", "IV", "V", "vi")
ALL_DIATONIC = ALL_MAJOR_MINOR + ("vii",)

DEFAULT_CATALOG = LevelCatalog([
    Level(1, PRIMARY, "Primary Chords (I, IV, V)", chords_per_question=2),
    Level(2, ("I", "IV", "V", "vi"), "Primary Chords + vi", chords_per_question=2),
    Level(3, ("I", "ii", "IV", "V", "vi"), "Primary Chords + ii, vi", chords_per_question=2),
    Level(4, ALL_MAJOR_MINOR, "All Major/Minor Chords", chords_per_question=2),
    Level(5, ALL_DIATONIC, "All Major/Minor Chords + vii dim", chords_per_question=3),
    Level(6, ALL_DIATONIC, "All Major/Minor Chords + vii dim", chords_per_question=4),
    Level(7, ALL_DIATONIC, "All Major/Minor Chords + vii dim", chords_per_question=5),
    Level(8, ALL_DIATONIC, "All Major/Minor Chords + vii dim", chords_per_question=6),
    Level(9, ALL_DIATONIC, "All Major/Minor Chords + vii dim", chords_per_question=7),
])


def get_level(number: int) -> Optional[Level]:
    """Look up a level in the built-in catalog."""
    return DEFAULT_CATALOG.get_level(number)


def get_max_score(number: int) -> int:
    """Maximum score for a level of the built-in catalog (0 if unknown)."""
    return DEFAULT_CATALOG.get_max_score(number)
