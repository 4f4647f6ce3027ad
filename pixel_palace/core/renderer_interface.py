"""
Abstract renderer interface for Pixel Palace.

All game renderers must implement this interface for visualization.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Tuple

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]  # Allow import without pygame for headless


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers draw a read-only game state snapshot to a pygame surface.
    """

    @abstractmethod
    def render(self, game_state: Dict[str, Any], surface: "pygame.Surface") -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary containing game state from get_state()
            surface: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """
        Get the preferred render size.

        Returns:
            Tuple of (width, height) in pixels
        """
        pass

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """
        Set the area where this renderer should draw.

        Args:
            x: Left edge x coordinate
            y: Top edge y coordinate
            width: Width of render area
            height: Height of render area
        """
        pass
