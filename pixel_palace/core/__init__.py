"""
Core abstractions for Pixel Palace.

Provides the interfaces games and renderers implement, and the side-effect
ports (audio, score persistence) a session talks to.
"""

from .game_interface import GameInterface, GameMetadata
from .renderer_interface import RendererInterface
from .ports import (
    SoundCue,
    AudioPort,
    NullAudio,
    ScoreStore,
    MemoryScoreStore,
)

__all__ = [
    'GameInterface',
    'GameMetadata',
    'RendererInterface',
    'SoundCue',
    'AudioPort',
    'NullAudio',
    'ScoreStore',
    'MemoryScoreStore',
]
