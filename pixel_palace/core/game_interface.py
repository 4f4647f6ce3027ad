"""
Abstract game interface for Pixel Palace.

Games implement GameInterface and describe themselves with GameMetadata.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Space Invaders")
    id: str                             # Unique identifier (e.g., "space_invaders")
    description: str                    # Brief description for UI
    version: str = "1.0.0"              # Game version
    min_players: int = 1                # Minimum players
    max_players: int = 1                # Maximum players
    supports_touch: bool = True         # Playable with touch input?


class GameInterface(ABC):
    """
    Abstract base class for all games in Pixel Palace.

    Games handle the core logic, rules, and state management.
    They never draw, play sound or touch storage themselves.
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """
        Reset the game to initial state.

        Returns:
            Initial game state dictionary
        """
        pass

    @abstractmethod
    def step(self, intent: Any, now_ms: float) -> Any:
        """
        Advance the game by one tick.

        Args:
            intent: Player input for this tick (game-specific type)
            now_ms: Wall-clock time in milliseconds

        Returns:
            Game-specific outcome of the tick
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state for rendering.

        Returns:
            Dictionary containing all state needed for rendering
        """
        pass

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0
