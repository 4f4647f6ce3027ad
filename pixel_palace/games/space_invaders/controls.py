"""
Input handling for human play.

Turns pygame keyboard and touch events into the InputIntent the game
consumes, plus a few session hotkeys. The game never sees devices.

Controls:
    Left/Right arrows or A/D: Move
    Space: Fire (one shot per press)
    Touch: tap to fire, drag to move
    P: Pause, M: Mute, R: Restart, ESC: Quit
"""

from enum import Enum
from typing import Any, Optional

import pygame

from .config import SpaceInvadersConfig
from .game import InputIntent


class ControlCommand(Enum):
    """Session-level actions requested by the player."""
    PAUSE = "pause"
    MUTE = "mute"
    RESTART = "restart"
    QUIT = "quit"


class IntentCollector:
    """
    Keeps the live InputIntent up to date from pygame events.

    The same intent object is handed to every tick; the game clears the
    one-shot fields (fire, drag_dx) once it has used them.
    """

    def __init__(self, config: Optional[SpaceInvadersConfig] = None):
        self.config = config or SpaceInvadersConfig()
        self.intent = InputIntent()
        self.touching = False
        self.last_tap_ms: Optional[float] = None

    def handle_event(self, event: Any, now_ms: float) -> Optional[ControlCommand]:
        """
        Apply one pygame event.

        Args:
            event: A pygame event
            now_ms: Current time in milliseconds, for tap debouncing

        Returns:
            A ControlCommand if the event was a session hotkey
        """
        if event.type == pygame.KEYDOWN:
            return self._key_down(event.key)
        if event.type == pygame.KEYUP:
            self._key_up(event.key)
        elif event.type == pygame.FINGERDOWN:
            self._finger_down(now_ms)
        elif event.type == pygame.FINGERMOTION:
            self._finger_motion(event.dx)
        elif event.type == pygame.FINGERUP:
            self._finger_up()
        return None

    def release_all(self) -> None:
        """Drop all held input, e.g. when the window loses focus."""
        self.intent = InputIntent()
        self.touching = False

    def _key_down(self, key: int) -> Optional[ControlCommand]:
        if key in (pygame.K_LEFT, pygame.K_a):
            self.intent.move_left = True
        elif key in (pygame.K_RIGHT, pygame.K_d):
            self.intent.move_right = True
        elif key == pygame.K_SPACE:
            self.intent.fire = True
        elif key == pygame.K_p:
            return ControlCommand.PAUSE
        elif key == pygame.K_m:
            return ControlCommand.MUTE
        elif key == pygame.K_r:
            return ControlCommand.RESTART
        elif key == pygame.K_ESCAPE:
            return ControlCommand.QUIT
        return None

    def _key_up(self, key: int) -> None:
        if key in (pygame.K_LEFT, pygame.K_a):
            self.intent.move_left = False
        elif key in (pygame.K_RIGHT, pygame.K_d):
            self.intent.move_right = False
        # Releasing Space leaves fire set; step() consumes it

    def _finger_down(self, now_ms: float) -> None:
        self.touching = True
        if self.last_tap_ms is None or now_ms - self.last_tap_ms > self.config.tap_debounce_ms:
            self.intent.fire = True
            self.last_tap_ms = now_ms

    def _finger_motion(self, dx: float) -> None:
        if not self.touching:
            return
        # pygame reports finger deltas normalized to the window width
        self.intent.drag_dx += dx * self.config.width * self.config.touch_drag_factor

    def _finger_up(self) -> None:
        self.touching = False
        self.intent.move_left = False
        self.intent.move_right = False
