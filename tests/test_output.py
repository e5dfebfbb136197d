"""Tests for MIDI, MusicXML and WAV export."""

import numpy as np
import pytest
from pathlib import Path

# Add project root to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from ear_trainer.session import ChordProgression
from ear_trainer.output import MIDIExporter, MusicXMLExporter, SoundOptions, WaveRenderer


@pytest.fixture
def progression():
    return ChordProgression(
        chords=["I", "V"],
        key="D",
        voicings=[["D4", "F#4", "A4"], ["C#5", "E5", "A5"]],
    )


class TestMIDIExporter:
    """Tests for MIDIExporter."""

    def test_block_chords(self, progression):
        exporter = MIDIExporter(tempo=120.0, beats_per_chord=2.0)
        midi = exporter.to_pretty_midi(progression)

        notes = midi.instruments[0].notes
        assert len(notes) == 6
        assert [n.pitch for n in notes[:3]] == [62, 66, 69]
        assert all(n.start == 0.0 and n.end == 1.0 for n in notes[:3])
        assert all(n.start == 1.0 for n in notes[3:])

    def test_chord_duration(self):
        assert MIDIExporter(tempo=60.0, beats_per_chord=4.0).chord_duration == 4.0

    def test_export_writes_file(self, progression, tmp_path):
        import pretty_midi

        path = tmp_path / "out" / "question.mid"
        MIDIExporter().export(progression, str(path))

        assert path.exists()
        loaded = pretty_midi.PrettyMIDI(str(path))
        assert sorted(n.pitch for n in loaded.instruments[0].notes) == [62, 66, 69, 73, 76, 81]


class TestMusicXMLExporter:
    """Tests for MusicXMLExporter."""

    def test_score_contents(self, progression):
        pytest.importorskip("music21")

        score = MusicXMLExporter().to_score(progression)
        chords = list(score.recurse().getElementsByClass("Chord"))

        assert len(chords) == 2
        assert [p.midi for p in chords[0].pitches] == [62, 66, 69]
        assert chords[1].lyric == "V"

    def test_export_writes_file(self, progression, tmp_path):
        pytest.importorskip("music21")

        path = tmp_path / "question.musicxml"
        MusicXMLExporter().export(progression, str(path))
        assert path.exists()
        assert "score-partwise" in path.read_text(encoding="utf-8")


class TestWaveRenderer:
    """Tests for offline audio rendering."""

    def test_sound_options_validation(self):
        with pytest.raises(ValueError):
            SoundOptions(waveform="noise")
        with pytest.raises(ValueError):
            SoundOptions(volume=1.5)

    @pytest.mark.parametrize("waveform", ["sine", "square", "sawtooth", "triangle"])
    def test_render_respects_volume(self, progression, waveform):
        options = SoundOptions(waveform=waveform, volume=0.5, sample_rate=8000)
        audio = WaveRenderer(options).render(progression)

        assert audio.dtype == np.float32
        assert len(audio) >= 8000 * 2  # two chords of one second at the default tempo
        assert np.abs(audio).max() <= 0.5 + 1e-6

    def test_render_empty_progression(self):
        audio = WaveRenderer().render(ChordProgression(chords=[], key="C"))
        assert len(audio) == 0

    def test_export_writes_wav(self, progression, tmp_path):
        import soundfile as sf

        path = tmp_path / "question.wav"
        WaveRenderer(SoundOptions(sample_rate=8000)).export(progression, str(path))

        data, sr = sf.read(str(path))
        assert sr == 8000
        assert len(data) > 0
