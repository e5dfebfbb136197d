"""MusicXML export of chord progressions via music21."""

from pathlib import Path

from ..core import DEFAULT_TEMPO
from ..session import ChordProgression


class MusicXMLExporter:
    """Export chord progressions to MusicXML, one chord per half note.

    The roman symbol of each chord is attached as a lyric so the answer can
    be shown under the notation.
    """

    def __init__(
        self,
        tempo: float = DEFAULT_TEMPO,
        time_signature: str = "4/4",
        quarter_length: float = 2.0,
    ):
        """
        Initialize MusicXMLExporter.

        Args:
            tempo: Tempo in BPM
            time_signature: Time signature (e.g., "4/4", "3/4")
            quarter_length: Length of each chord in quarter notes
        """
        self.tempo = tempo
        self.time_signature = time_signature
        self.quarter_length = quarter_length

    def to_score(self, progression: ChordProgression, title: str = "Chord Progression"):
        """Build a music21 Score for a progression."""
        try:
            from music21 import stream, chord as m21_chord, tempo as m21_tempo
            from music21 import key as m21_key, meter, metadata
        except ImportError:
            raise ImportError("music21 is required for MusicXML export")

        score = stream.Score()
        score.metadata = metadata.Metadata()
        score.metadata.title = title

        part = stream.Part()
        part.append(m21_tempo.MetronomeMark(number=self.tempo))
        part.append(meter.TimeSignature(self.time_signature))
        part.append(m21_key.Key(progression.key))

        for roman, voicing in zip(progression.chords, progression.voicings):
            c = m21_chord.Chord(list(voicing))
            c.duration.quarterLength = self.quarter_length
            c.addLyric(roman)
            part.append(c)

        score.append(part)
        return score

    def export(self, progression: ChordProgression, output_path: str) -> None:
        """
        Export a progression to a MusicXML file.

        Args:
            progression: Chord progression with voicings
            output_path: Path to output MusicXML file
        """
        score = self.to_score(progression)

        # Ensure output directory exists
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        score.write("musicxml", fp=str(output_path))
