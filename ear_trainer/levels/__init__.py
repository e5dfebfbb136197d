"""Levels layer - the curriculum of chord vocabularies."""

from .catalog import (
    DEFAULT_CATALOG,
    Level,
    LevelCatalog,
    get_level,
    get_max_score,
    level_from_record,
)

__all__ = [
    "DEFAULT_CATALOG",
    "Level",
    "LevelCatalog",
    "get_level",
    "get_max_score",
    "level_from_record",
]
