"""Output layer - Hand questions to external players.

This layer exports chord progressions to:
- MIDI files
- MusicXML (for notation software)
- WAV audio (offline synthesis)
"""

from .midi import MIDIExporter
from .musicxml import MusicXMLExporter
from .audio import SoundOptions, WaveRenderer, WAVEFORMS

__all__ = [
    "MIDIExporter",
    "MusicXMLExporter",
    "SoundOptions",
    "WaveRenderer",
    "WAVEFORMS",
]
