"""
Space Invaders game module for Pixel Palace.

Exports the headless core (entities, simulation, session controller).
The pygame-facing pieces (renderer, controls) are imported from their
own modules so the core runs without a display.
"""

from .config import SpaceInvadersConfig
from .entities import EntityStore, Player, Bullet, Enemy, Formation
from .game import SpaceInvadersGame, InputIntent, StepOutcome, rects_intersect
from .session import (
    SessionController,
    SessionState,
    GameEnd,
    GamePause,
    GameMute,
)

__all__ = [
    "SpaceInvadersConfig",
    "EntityStore",
    "Player",
    "Bullet",
    "Enemy",
    "Formation",
    "SpaceInvadersGame",
    "InputIntent",
    "StepOutcome",
    "rects_intersect",
    "SessionController",
    "SessionState",
    "GameEnd",
    "GamePause",
    "GameMute",
]
