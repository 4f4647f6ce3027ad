"""
Side-effect ports the session controller calls into.

The simulation never touches these directly. Concrete adapters live in
pixel_palace.audio and pixel_palace.storage; the null/in-memory versions
here are used headless and in tests.
"""

from abc import ABC, abstractmethod
from enum import Enum


class SoundCue(Enum):
    """Named audio cues emitted by a session."""
    PLAYER_SHOT = "player_shot"
    ENEMY_SHOT = "enemy_shot"
    VICTORY = "victory"
    DEFEAT = "defeat"


class AudioPort(ABC):
    """Fire-and-forget sound effect sink."""

    @abstractmethod
    def ensure_ready(self) -> None:
        """
        Bring the audio backend up if it is not already.

        Must be idempotent; called on session start and when unmuting.
        """
        pass

    @abstractmethod
    def play_cue(self, cue: SoundCue) -> None:
        """
        Play a named cue. Does nothing while muted.

        Args:
            cue: The cue to play
        """
        pass

    @abstractmethod
    def set_muted(self, muted: bool) -> None:
        """
        Silence or restore output.

        Args:
            muted: True to silence
        """
        pass


class NullAudio(AudioPort):
    """Audio port for when no backend is available."""

    def __init__(self):
        self.muted = False

    def ensure_ready(self) -> None:
        pass

    def play_cue(self, cue: SoundCue) -> None:
        pass

    def set_muted(self, muted: bool) -> None:
        self.muted = muted


class ScoreStore(ABC):
    """Keyed high-score persistence."""

    @abstractmethod
    def get_high_score(self) -> int:
        """
        Returns:
            The best recorded score, 0 if none
        """
        pass

    @abstractmethod
    def update_high_score(self, score: int) -> bool:
        """
        Record score if it beats the current best.

        Args:
            score: Final score of a session

        Returns:
            True iff a new record was stored
        """
        pass


class MemoryScoreStore(ScoreStore):
    """Score store that lives only as long as the process."""

    def __init__(self, high_score: int = 0):
        self._high_score = high_score

    def get_high_score(self) -> int:
        return self._high_score

    def update_high_score(self, score: int) -> bool:
        if score > self._high_score:
            self._high_score = score
            return True
        return False
