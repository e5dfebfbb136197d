"""Global constants for Ear Trainer."""

# Pitch names (canonical sharp spellings)
PITCH_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

NOTES_PER_OCTAVE = 12

# Musical defaults
DEFAULT_KEY = "C"
DEFAULT_TEMPO = 90.0
VOICING_SIZE = 3

# Scoring
CORRECT_POINTS = 1
WRONG_PENALTY = -2
DEFAULT_QUESTIONS_PER_LEVEL = 10
