"""Offline rendering of chord progressions to WAV.

Playback itself belongs to an external player; this renders the same note
lists through pretty_midi's additive synthesis so a question can be handed
over as an audio file.
"""

from dataclasses import dataclass
from typing import Optional
from pathlib import Path

import numpy as np
import soundfile as sf
from scipy import signal

from ..session import ChordProgression
from .midi import MIDIExporter


def _triangle(phase: np.ndarray) -> np.ndarray:
    return signal.sawtooth(phase, width=0.5)


WAVEFORMS = {
    "sine": np.sin,
    "square": signal.square,
    "sawtooth": signal.sawtooth,
    "triangle": _triangle,
}


@dataclass
class SoundOptions:
    """Timbre settings for rendered audio.

    Attributes:
        waveform: One of "sine", "square", "sawtooth", "triangle" (default: "sine")
        volume: Peak amplitude, 0.0 - 1.0 (default: 0.5)
        sample_rate: Output sample rate in Hz (default: 22050)
    """

    waveform: str = "sine"
    volume: float = 0.5
    sample_rate: int = 22050

    def __post_init__(self):
        if self.waveform not in WAVEFORMS:
            raise ValueError(
                f"Unsupported waveform: {self.waveform}. "
                f"Supported: {sorted(WAVEFORMS)}"
            )
        if not 0.0 <= self.volume <= 1.0:
            raise ValueError(f"Volume must be between 0 and 1, got {self.volume}")


class WaveRenderer:
    """Render chord progressions to audio buffers and WAV files."""

    def __init__(
        self,
        options: Optional[SoundOptions] = None,
        midi_exporter: Optional[MIDIExporter] = None,
    ):
        self.options = options or SoundOptions()
        self.midi_exporter = midi_exporter or MIDIExporter()

    def render(self, progression: ChordProgression) -> np.ndarray:
        """Synthesize a progression to a mono float32 buffer."""
        if not progression.voicings:
            return np.zeros(0, dtype=np.float32)

        midi = self.midi_exporter.to_pretty_midi(progression)
        audio = midi.synthesize(
            fs=self.options.sample_rate,
            wave=WAVEFORMS[self.options.waveform],
        )
        peak = np.abs(audio).max()
        if peak > 0:
            audio = audio / peak
        return (audio * self.options.volume).astype(np.float32)

    def export(self, progression: ChordProgression, output_path: str) -> None:
        """Render a progression and write it to a WAV file."""
        audio = self.render(progression)

        # Ensure output directory exists
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        sf.write(str(output_path), audio, self.options.sample_rate)
