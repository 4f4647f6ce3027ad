"""
Space Invaders session controller.

Wraps a SpaceInvadersGame with the session lifecycle
(READY -> RUNNING <-> PAUSED -> WON/LOST), decides what a terminal outcome
means for the player, and talks to the side-effect ports: audio cues,
high-score persistence and UI notifications. Port failures are logged and
dropped so they can never break the tick loop.
"""

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Type

from ...core.ports import AudioPort, NullAudio, ScoreStore, MemoryScoreStore, SoundCue
from .game import SpaceInvadersGame, InputIntent, StepOutcome

logger = logging.getLogger(__name__)


INTRO_MESSAGE = "Destroy all the invaders!"
RESTART_HINT = "Press R or tap New Game to play again"
NEW_HIGH_SCORE_SUFFIX = " NEW HIGH SCORE!"

END_MESSAGES = {
    StepOutcome.PLAYER_HIT: "Game Over! You were hit.",
    StepOutcome.BREACH: "Game Over! Enemies reached you.",
    StepOutcome.VICTORY: "You Win! All enemies destroyed.",
}


class SessionState(Enum):
    READY = "ready"
    RUNNING = "running"
    PAUSED = "paused"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self in (SessionState.WON, SessionState.LOST)


@dataclass(frozen=True)
class GameEnd:
    """Emitted once when a session reaches a terminal outcome."""
    score: int
    is_win: bool
    message: str
    new_high_score: bool = False
    restart_hint: str = RESTART_HINT


@dataclass(frozen=True)
class GamePause:
    paused: bool


@dataclass(frozen=True)
class GameMute:
    muted: bool


_Handler = Callable[[Any], None]


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class SessionController:
    """
    Owns one game session and its side-effect ports.

    The driving loop calls tick() once per frame and renders
    game.get_state() afterwards. destroy() and pause are flags checked
    before each tick; a tick already running is never interrupted.
    """

    def __init__(
        self,
        game: Optional[SpaceInvadersGame] = None,
        audio: Optional[AudioPort] = None,
        scores: Optional[ScoreStore] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Args:
            game: The simulation to drive (a default game if omitted)
            audio: Sound sink; NullAudio when no backend is available
            scores: High-score persistence; in-memory if omitted
            clock: Millisecond wall clock, time.monotonic based by default
        """
        self.game = game or SpaceInvadersGame()
        self.audio = audio or NullAudio()
        self.scores = scores or MemoryScoreStore()
        self.clock = clock or _monotonic_ms

        self._state = SessionState.READY
        self._muted = False
        self._destroyed = False
        self._message = INTRO_MESSAGE
        self._subscribers: Dict[Type, List[_Handler]] = {}

    # Lifecycle

    def start(self) -> None:
        """Begin the session. Only valid from READY."""
        if self._state is not SessionState.READY:
            logger.debug("start() ignored in state %s", self._state.value)
            return
        self._call_audio("ensure_ready")
        self._state = SessionState.RUNNING
        logger.info("Session started")

    def tick(self, intent: InputIntent, now_ms: Optional[float] = None) -> StepOutcome:
        """
        Run one scheduled tick.

        Args:
            intent: Input intent for this tick
            now_ms: Wall-clock milliseconds; read from the clock if omitted

        Returns:
            The step outcome, or the standing outcome if nothing ran
        """
        if self._destroyed or self._state is not SessionState.RUNNING:
            return self.game.outcome

        if now_ms is None:
            now_ms = self.clock()

        outcome = self.game.step(intent, now_ms)

        for cue in self.game.drain_cues():
            self._play(cue)

        if outcome.is_terminal:
            self._end_session(outcome)

        return outcome

    def toggle_pause(self) -> None:
        """Flip between RUNNING and PAUSED. No-op in any other state."""
        if self._state is SessionState.RUNNING:
            self._state = SessionState.PAUSED
        elif self._state is SessionState.PAUSED:
            self._state = SessionState.RUNNING
        else:
            return

        self.game.paused = self._state is SessionState.PAUSED
        logger.info("Session %s", "paused" if self.game.paused else "resumed")
        self._emit(GamePause(paused=self.game.paused))

    def toggle_mute(self) -> None:
        """Flip audio mute. Has no effect on the simulation."""
        self._muted = not self._muted
        self._call_audio("set_muted", self._muted)
        if not self._muted:
            self._call_audio("ensure_ready")
        self._emit(GameMute(muted=self._muted))

    def reset(self) -> None:
        """Start over from a clean session in RUNNING."""
        was_paused = self._state is SessionState.PAUSED
        self.game.reset()
        self._state = SessionState.RUNNING
        self._message = INTRO_MESSAGE
        self._destroyed = False
        logger.info("Session reset")
        if was_paused:
            self._emit(GamePause(paused=False))

    def destroy(self) -> None:
        """Stop scheduling ticks. Safe to call more than once."""
        if self._destroyed:
            return
        self._destroyed = True
        logger.info("Session destroyed")

    # Events

    def subscribe(self, event_type: Type, handler: _Handler) -> None:
        self._subscribers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: Type, handler: _Handler) -> None:
        handlers = self._subscribers.get(event_type)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def _emit(self, event: Any) -> None:
        for handler in list(self._subscribers.get(type(event), [])):
            try:
                handler(event)
            except Exception:
                logger.exception("Handler for %s failed", type(event).__name__)

    # Read-only views

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def score(self) -> int:
        return self.game.score

    @property
    def muted(self) -> bool:
        return self._muted

    @property
    def paused(self) -> bool:
        return self._state is SessionState.PAUSED

    @property
    def is_game_over(self) -> bool:
        return self._state.is_terminal

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def message(self) -> str:
        return self._message

    @property
    def high_score(self) -> int:
        try:
            return int(self.scores.get_high_score())
        except Exception:
            logger.warning("Could not read high score", exc_info=True)
            return 0

    # Terminal handling

    def _end_session(self, outcome: StepOutcome) -> None:
        is_win = outcome is StepOutcome.VICTORY
        self._state = SessionState.WON if is_win else SessionState.LOST
        self._play(SoundCue.VICTORY if is_win else SoundCue.DEFEAT)

        new_high = self._record_score(self.game.score)
        message = END_MESSAGES[outcome]
        if new_high:
            message += NEW_HIGH_SCORE_SUFFIX
        self._message = message

        logger.info("Session ended: %s (score %d)", outcome.value, self.game.score)
        self._emit(GameEnd(
            score=self.game.score,
            is_win=is_win,
            message=message,
            new_high_score=new_high,
        ))

    def _record_score(self, score: int) -> bool:
        try:
            return bool(self.scores.update_high_score(score))
        except Exception:
            logger.warning("High score could not be saved", exc_info=True)
            return False

    def _play(self, cue: SoundCue) -> None:
        if self._muted:
            return
        self._call_audio("play_cue", cue)

    def _call_audio(self, method: str, *args: Any) -> None:
        try:
            getattr(self.audio, method)(*args)
        except Exception:
            logger.debug("Audio %s failed", method, exc_info=True)
