"""Exceptions raised by Ear Trainer.

Chord and key lookups fail loudly: an unknown symbol means the caller passed
a value that was never drawn from the level catalog or the key list.
"""


class EarTrainerError(Exception):
    """Base class for all Ear Trainer errors."""


class UnknownChordError(EarTrainerError, KeyError):
    """Roman symbol is not in the chord table."""

    def __init__(self, roman: str):
        self.roman = roman
        super().__init__(f"Unknown chord symbol: {roman!r}")

    def __str__(self) -> str:
        return self.args[0]


class UnknownKeyError(EarTrainerError, KeyError):
    """Key name is not one of the twelve recognized pitch classes."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown key: {key!r}")

    def __str__(self) -> str:
        return self.args[0]


class InvalidPitchError(EarTrainerError, ValueError):
    """String cannot be parsed as a pitch name such as 'C4' or 'F#5'."""


class LevelConfigError(EarTrainerError, ValueError):
    """Level catalog entry breaks a catalog invariant."""


class SessionFinishedError(EarTrainerError, RuntimeError):
    """All questions of the level have already been asked."""
