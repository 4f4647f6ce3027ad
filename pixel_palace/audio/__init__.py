"""
Audio adapters for Pixel Palace.
"""

from .synth import SynthAudio, tone, cue_wave

__all__ = [
    'SynthAudio',
    'tone',
    'cue_wave',
]
