"""Quiz session - question generation and the running score.

The theory and levels layers are stateless; this module owns the per-session
state (current question, score) and applies the scoring constants.
"""

import random
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from ..core import (
    CORRECT_POINTS,
    DEFAULT_KEY,
    WRONG_PENALTY,
    SessionFinishedError,
)
from ..levels import DEFAULT_CATALOG, Level, LevelCatalog
from ..theory import CHORD_TABLE, KEYS, select_voicing, semitone_offset, transpose

_GUESS_SEPARATORS = re.compile(r"[\s,\-]+")


def score_for(correct: int, wrong: int) -> int:
    """Score for a number of correct and wrong answers."""
    return correct * CORRECT_POINTS + wrong * WRONG_PENALTY


def parse_guess(guess: Union[str, Sequence[str]]) -> List[str]:
    """Split a guess such as "I IV V", "I, IV, V" or "I-IV-V" into symbols."""
    if isinstance(guess, str):
        return [token for token in _GUESS_SEPARATORS.split(guess.strip()) if token]
    return [str(token).strip() for token in guess]


@dataclass
class ChordProgression:
    """A question: chord symbols in a key, with the voicings to play."""

    chords: List[str]  # Roman symbols, in playing order
    key: str  # Key the voicings were transposed into
    voicings: List[List[str]] = field(default_factory=list)  # One note list per chord

    @property
    def names(self) -> List[str]:
        """Chord display names, relative to C (e.g. "G Major" for V)."""
        return [CHORD_TABLE[roman].name for roman in self.chords]

    def matches(self, guess: Union[str, Sequence[str]]) -> bool:
        """True if the guess names every chord in order."""
        return parse_guess(guess) == self.chords

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "key": self.key,
            "chords": list(self.chords),
            "voicings": [list(v) for v in self.voicings],
        }


@dataclass
class QuizConfig:
    """Configuration for a quiz session.

    Attributes:
        level: Level number to play (default: 1)
        key: Key every question is transposed into (default: "C")
        random_key: Pick a random key for each question instead (default: False)
        seed: Seed for the random source, None for unseeded (default: None)
        allow_repeats: Allow the same chord twice in a row (default: True)
    """

    level: int = 1
    key: str = DEFAULT_KEY
    random_key: bool = False
    seed: Optional[int] = None
    allow_repeats: bool = True


class QuestionGenerator:
    """Draws chord progressions for a level."""

    def __init__(
        self,
        catalog: LevelCatalog = DEFAULT_CATALOG,
        rng: Optional[random.Random] = None,
        allow_repeats: bool = True,
    ):
        """
        Initialize QuestionGenerator.

        Args:
            catalog: Level catalog to draw vocabularies from
            rng: Random source for chords, inversions and keys
            allow_repeats: Allow the same chord twice in a row
        """
        self.catalog = catalog
        self.rng = rng if rng is not None else random.Random()
        self.allow_repeats = allow_repeats

    def generate(self, level_number: int, key: Optional[str] = None) -> ChordProgression:
        """
        Generate one question for a level.

        Args:
            level_number: Level to draw chords from
            key: Target key; None picks a random key

        Raises:
            ValueError: If the level doesn't exist
            UnknownKeyError: If the key is not recognized
        """
        level = self.catalog.get_level(level_number)
        if level is None:
            raise ValueError(f"Unknown level: {level_number}")

        if key is None:
            key = self.rng.choice(KEYS)
        else:
            semitone_offset(key)

        chords = self._draw_chords(level)
        voicings = [transpose(select_voicing(roman, self.rng), key) for roman in chords]
        return ChordProgression(chords=chords, key=key, voicings=voicings)

    def _draw_chords(self, level: Level) -> List[str]:
        pool = list(level.available_chords)
        # A single-chord vocabulary can only repeat
        avoid_repeats = not self.allow_repeats and len(pool) > 1

        chords: List[str] = []
        for _ in range(level.chords_per_question):
            candidates = pool
            if avoid_repeats and chords:
                candidates = [c for c in pool if c != chords[-1]]
            chords.append(self.rng.choice(candidates))
        return chords


class QuizSession:
    """Runs the questions of one level and keeps the score."""

    def __init__(
        self,
        config: Optional[QuizConfig] = None,
        catalog: LevelCatalog = DEFAULT_CATALOG,
    ):
        """
        Initialize QuizSession.

        Args:
            config: Session configuration (default: level 1 in C)
            catalog: Level catalog

        Raises:
            ValueError: If the configured level doesn't exist
            UnknownKeyError: If the configured key is not recognized
        """
        self.config = config or QuizConfig()
        self.catalog = catalog

        level = catalog.get_level(self.config.level)
        if level is None:
            raise ValueError(f"Unknown level: {self.config.level}")
        self.level = level
        if not self.config.random_key:
            semitone_offset(self.config.key)

        self.generator = QuestionGenerator(
            catalog,
            rng=random.Random(self.config.seed),
            allow_repeats=self.config.allow_repeats,
        )

        self.correct = 0
        self.wrong = 0
        self.question_index = 0
        self.current: Optional[ChordProgression] = None
        self.history: List[Dict[str, Any]] = []

    @property
    def score(self) -> int:
        return score_for(self.correct, self.wrong)

    @property
    def max_score(self) -> int:
        return self.catalog.get_max_score(self.level.number)

    @property
    def finished(self) -> bool:
        """True once every question has been asked and answered."""
        return (
            self.question_index >= self.level.questions_per_level
            and self.current is None
        )

    def next_question(self) -> ChordProgression:
        """
        Move to the next question.

        An unanswered current question is returned again rather than skipped.

        Raises:
            SessionFinishedError: If all questions have been asked
        """
        if self.current is not None:
            return self.current
        if self.question_index >= self.level.questions_per_level:
            raise SessionFinishedError(
                f"Level {self.level.number} has only "
                f"{self.level.questions_per_level} questions"
            )

        key = None if self.config.random_key else self.config.key
        self.current = self.generator.generate(self.level.number, key)
        self.question_index += 1
        return self.current

    def answer(self, guess: Union[str, Sequence[str]]) -> bool:
        """
        Grade a guess for the current question and update the score.

        Returns:
            True if every chord was named correctly and in order

        Raises:
            RuntimeError: If there is no question waiting for an answer
        """
        if self.current is None:
            raise RuntimeError("No question to answer; call next_question() first")

        correct = self.current.matches(guess)
        if correct:
            self.correct += 1
        else:
            self.wrong += 1

        self.history.append({
            "question": self.question_index,
            "key": self.current.key,
            "chords": list(self.current.chords),
            "guess": parse_guess(guess),
            "correct": correct,
        })
        self.current = None
        return correct

    def summary(self) -> Dict[str, Any]:
        """Session results for display or JSON output."""
        return {
            "level": self.level.number,
            "questions": self.question_index,
            "correct": self.correct,
            "wrong": self.wrong,
            "score": self.score,
            "max_score": self.max_score,
        }
