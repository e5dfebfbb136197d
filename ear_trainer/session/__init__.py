"""Session layer - questions and scoring for one player."""

from .quiz import (
    ChordProgression,
    QuestionGenerator,
    QuizConfig,
    QuizSession,
    parse_guess,
    score_for,
)

__all__ = [
    "ChordProgression",
    "QuestionGenerator",
    "QuizConfig",
    "QuizSession",
    "parse_guess",
    "score_for",
]
