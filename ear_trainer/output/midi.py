"""MIDI export of chord progressions."""

import pretty_midi
from pathlib import Path

from ..core import DEFAULT_TEMPO, Pitch
from ..session import ChordProgression


class MIDIExporter:
    """Export chord progressions to MIDI format as block chords."""

    def __init__(
        self,
        tempo: float = DEFAULT_TEMPO,
        beats_per_chord: float = 2.0,
        velocity: int = 90,
        instrument_name: str = "Acoustic Grand Piano",
        instrument_program: int = 0,
    ):
        """
        Initialize MIDIExporter.

        Args:
            tempo: Tempo in BPM
            beats_per_chord: How long each chord sounds, in beats
            velocity: MIDI velocity for every note (0-127)
            instrument_name: MIDI instrument name
            instrument_program: MIDI program number (0-127)
        """
        self.tempo = tempo
        self.beats_per_chord = beats_per_chord
        self.velocity = velocity
        self.instrument_name = instrument_name
        self.instrument_program = instrument_program

    @property
    def chord_duration(self) -> float:
        """Duration of one chord in seconds."""
        return self.beats_per_chord * 60.0 / self.tempo

    def to_pretty_midi(self, progression: ChordProgression) -> pretty_midi.PrettyMIDI:
        """Convert a progression to a PrettyMIDI object without saving."""
        midi = pretty_midi.PrettyMIDI(initial_tempo=self.tempo)

        instrument = pretty_midi.Instrument(
            program=self.instrument_program,
            name=self.instrument_name,
        )

        duration = self.chord_duration
        for index, voicing in enumerate(progression.voicings):
            start = index * duration
            for name in voicing:
                instrument.notes.append(pretty_midi.Note(
                    velocity=self.velocity,
                    pitch=Pitch.parse(name).midi,
                    start=start,
                    end=start + duration,
                ))

        midi.instruments.append(instrument)
        return midi

    def export(self, progression: ChordProgression, output_path: str) -> None:
        """
        Export a progression to a MIDI file.

        Args:
            progression: Chord progression with voicings
            output_path: Path to output MIDI file
        """
        midi = self.to_pretty_midi(progression)

        # Ensure output directory exists
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        midi.write(str(output_path))
