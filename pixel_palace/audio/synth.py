"""
Retro tone synthesizer implementing AudioPort.

Cues are generated with numpy (no sound files) and played through
pygame.mixer. The mixer is brought up lazily by ensure_ready(); if it
cannot start (no audio device, headless CI) the port disables itself and
every call becomes a no-op.
"""

import logging
from typing import Dict, List, Optional, Tuple

import numpy as np
import pygame

from ..core.ports import AudioPort, SoundCue

logger = logging.getLogger(__name__)


# (frequency Hz, duration s, waveform, gain, start offset s)
Note = Tuple[float, float, str, float, float]

CUE_NOTES: Dict[SoundCue, List[Note]] = {
    SoundCue.PLAYER_SHOT: [(1200.0, 0.06, "sawtooth", 0.06, 0.0)],
    SoundCue.ENEMY_SHOT: [(600.0, 0.12, "square", 0.06, 0.0)],
    SoundCue.VICTORY: [
        (800.0, 0.12, "sine", 0.06, 0.0),
        (1000.0, 0.12, "sine", 0.06, 0.14),
        (1200.0, 0.2, "sine", 0.08, 0.3),
    ],
    SoundCue.DEFEAT: [(150.0, 0.5, "sawtooth", 0.12, 0.0)],
}

RELEASE_TAIL = 0.02  # silence after each note so it does not click
DECAY_FLOOR = 0.0001


def oscillator(waveform: str, frequency: float, t: np.ndarray) -> np.ndarray:
    """Unit-amplitude waveform sampled at times t."""
    phase = frequency * t
    if waveform == "sine":
        return np.sin(2 * np.pi * phase)
    if waveform == "square":
        return np.sign(np.sin(2 * np.pi * phase))
    if waveform == "sawtooth":
        return 2 * (phase % 1) - 1
    if waveform == "triangle":
        return 2 * np.abs(2 * (phase % 1) - 1) - 1
    raise ValueError(f"Unknown waveform: {waveform}")


def tone(
    frequency: float,
    duration: float,
    waveform: str = "sine",
    gain: float = 0.06,
    sample_rate: int = 22050,
) -> np.ndarray:
    """
    Generate one note with an exponential decay.

    Args:
        frequency: Pitch in Hz
        duration: Time for the gain to fall from gain to DECAY_FLOOR
        waveform: sine, square, sawtooth or triangle
        gain: Starting amplitude
        sample_rate: Samples per second

    Returns:
        Mono float samples, duration plus a short silent tail
    """
    n = int(sample_rate * duration)
    t = np.arange(n) / sample_rate
    envelope = gain * (DECAY_FLOOR / gain) ** (t / duration)
    wave = oscillator(waveform, frequency, t) * envelope
    tail = np.zeros(int(sample_rate * RELEASE_TAIL))
    return np.concatenate([wave, tail])


def cue_wave(cue: SoundCue, sample_rate: int = 22050) -> np.ndarray:
    """Mix the notes of a cue into a single mono buffer."""
    notes = CUE_NOTES[cue]
    parts = []
    for frequency, duration, waveform, gain, offset in notes:
        parts.append((int(sample_rate * offset), tone(frequency, duration, waveform, gain, sample_rate)))

    length = max(start + len(wave) for start, wave in parts)
    mixed = np.zeros(length)
    for start, wave in parts:
        mixed[start:start + len(wave)] += wave
    return mixed


def to_pcm16_stereo(wave: np.ndarray, volume: float = 1.0) -> np.ndarray:
    """Convert float samples to the int16 stereo layout pygame.mixer expects."""
    pcm = np.clip(wave * volume * 32767, -32767, 32767).astype(np.int16)
    return np.ascontiguousarray(np.column_stack((pcm, pcm)))


class SynthAudio(AudioPort):
    """AudioPort backed by pygame.mixer and numpy-generated tones."""

    def __init__(self, sample_rate: int = 22050, volume: float = 1.0, enabled: bool = True):
        """
        Args:
            sample_rate: Mixer frequency
            volume: Master volume multiplier
            enabled: False to never touch the mixer
        """
        self.sample_rate = sample_rate
        self.volume = volume
        self.enabled = enabled
        self.muted = False
        self._ready = False
        self._sounds: Dict[SoundCue, "pygame.mixer.Sound"] = {}

    @property
    def ready(self) -> bool:
        return self._ready

    def ensure_ready(self) -> None:
        """Start the mixer and build the cue sounds once."""
        if self._ready or not self.enabled:
            return

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=self.sample_rate, size=-16, channels=2, buffer=512)
            self._sounds = {
                cue: pygame.sndarray.make_sound(
                    to_pcm16_stereo(cue_wave(cue, self.sample_rate), self.volume)
                )
                for cue in CUE_NOTES
            }
        except (pygame.error, ValueError) as e:
            logger.warning("Audio unavailable, continuing without sound: %s", e)
            self.enabled = False
            self._sounds = {}
            return

        self._ready = True
        logger.debug("Audio ready at %d Hz", self.sample_rate)

    def play_cue(self, cue: SoundCue) -> None:
        if self.muted or not self._ready:
            return
        sound: Optional["pygame.mixer.Sound"] = self._sounds.get(cue)
        if sound is not None:
            sound.play()

    def set_muted(self, muted: bool) -> None:
        self.muted = muted
        if not self._ready:
            return
        if muted:
            pygame.mixer.pause()
        else:
            pygame.mixer.unpause()
