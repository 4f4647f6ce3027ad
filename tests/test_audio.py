"""
Tests for the numpy tone synthesizer and the pygame.mixer audio port.
"""

from unittest.mock import MagicMock

import numpy as np
import pytest

from pixel_palace.core.ports import SoundCue


class TestWaveforms:
    """Tests for tone generation."""

    @pytest.mark.parametrize("waveform", ["sine", "square", "sawtooth", "triangle"])
    def test_oscillator_is_unit_amplitude(self, waveform):
        from pixel_palace.audio.synth import oscillator

        t = np.arange(1000) / 1000.0
        wave = oscillator(waveform, 5.0, t)

        assert wave.max() <= 1.0
        assert wave.min() >= -1.0

    def test_unknown_waveform(self):
        from pixel_palace.audio.synth import oscillator

        with pytest.raises(ValueError):
            oscillator("noise", 440.0, np.arange(10) / 1000.0)

    def test_tone_length_includes_tail(self):
        from pixel_palace.audio.synth import tone

        wave = tone(440.0, 0.1, sample_rate=1000)

        assert len(wave) == 100 + 20
        assert np.all(wave[100:] == 0)

    def test_tone_decays(self):
        """Test the envelope starts at gain and falls toward silence."""
        from pixel_palace.audio.synth import tone

        wave = tone(100.0, 0.5, waveform="square", gain=0.12, sample_rate=8000)
        head = np.abs(wave[:400]).max()
        end = np.abs(wave[3600:4000]).max()

        assert head == pytest.approx(0.12, rel=0.05)
        assert end < 0.001

    def test_victory_arpeggio_is_longest_note_plus_offset(self):
        from pixel_palace.audio.synth import cue_wave

        wave = cue_wave(SoundCue.VICTORY, sample_rate=1000)

        assert len(wave) > 300 + 200

    def test_every_cue_has_notes(self):
        from pixel_palace.audio.synth import cue_wave

        for cue in SoundCue:
            assert len(cue_wave(cue, sample_rate=8000)) > 0

    def test_pcm_layout(self):
        from pixel_palace.audio.synth import to_pcm16_stereo

        pcm = to_pcm16_stereo(np.array([0.0, 1.0, -2.0]))

        assert pcm.dtype == np.int16
        assert pcm.shape == (3, 2)
        assert pcm[1, 0] == 32767
        assert pcm[2, 1] == -32767


class TestSynthAudio:
    """Tests for the mixer-backed audio port."""

    def test_ensure_ready_builds_all_cues(self, mock_pygame_module):
        from pixel_palace.audio import SynthAudio

        audio = SynthAudio(sample_rate=8000)
        audio.ensure_ready()

        assert audio.ready is True
        assert set(audio._sounds) == set(SoundCue)

    def test_ensure_ready_is_idempotent(self, mock_pygame_module, monkeypatch):
        from pixel_palace.audio import SynthAudio

        make_sound = MagicMock(side_effect=lambda array: MagicMock())
        monkeypatch.setattr(mock_pygame_module.sndarray, "make_sound", make_sound)

        audio = SynthAudio(sample_rate=8000)
        audio.ensure_ready()
        audio.ensure_ready()

        assert make_sound.call_count == len(SoundCue)

    def test_play_cue(self, mock_pygame_module):
        from pixel_palace.audio import SynthAudio

        audio = SynthAudio(sample_rate=8000)
        audio.ensure_ready()
        audio.play_cue(SoundCue.PLAYER_SHOT)

        audio._sounds[SoundCue.PLAYER_SHOT].play.assert_called_once()

    def test_muted_does_not_play(self, mock_pygame_module):
        from pixel_palace.audio import SynthAudio

        audio = SynthAudio(sample_rate=8000)
        audio.ensure_ready()
        audio.set_muted(True)
        audio.play_cue(SoundCue.DEFEAT)

        audio._sounds[SoundCue.DEFEAT].play.assert_not_called()

    def test_play_before_ready_is_noop(self, mock_pygame_module):
        from pixel_palace.audio import SynthAudio

        audio = SynthAudio(sample_rate=8000)
        audio.play_cue(SoundCue.VICTORY)

        assert audio.ready is False

    def test_mixer_failure_disables_audio(self, mock_pygame_module, monkeypatch):
        """Test a missing audio device degrades to silence."""
        from pixel_palace.audio import SynthAudio

        monkeypatch.setattr(
            mock_pygame_module.mixer,
            "init",
            MagicMock(side_effect=mock_pygame_module.error("No available audio device")),
        )

        audio = SynthAudio(sample_rate=8000)
        audio.ensure_ready()
        audio.play_cue(SoundCue.PLAYER_SHOT)

        assert audio.ready is False
        assert audio.enabled is False

    def test_disabled_never_touches_mixer(self, mock_pygame_module, monkeypatch):
        from pixel_palace.audio import SynthAudio

        init = MagicMock()
        monkeypatch.setattr(mock_pygame_module.mixer, "init", init)

        audio = SynthAudio(enabled=False)
        audio.ensure_ready()

        init.assert_not_called()
        assert audio.ready is False
