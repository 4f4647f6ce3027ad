"""
Space Invaders Game Renderer - Pygame-based visualization implementing RendererInterface.
Flat arcade style: colored rectangles on a dark playfield.
"""

import pygame
from typing import Dict, Any, Tuple, List, Optional

from ...core.renderer_interface import RendererInterface


BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
BACKGROUND = (10, 10, 24)

PLAYER_COLOR = (97, 218, 251)
ENEMY_COLOR = (255, 107, 107)
PLAYER_BULLET_COLOR = (255, 252, 107)
ENEMY_BULLET_COLOR = (255, 140, 66)
HUD_COLOR = (220, 220, 220)
OVERLAY_COLOR = (0, 0, 0, 178)


class SpaceInvadersRenderer(RendererInterface):
    """
    Renders a Space Invaders state snapshot using Pygame.

    Only reads the dictionary produced by SpaceInvadersGame.get_state();
    HUD extras (high score, mute, end message) come in through render().
    """

    def __init__(self, width: int = 800, height: int = 600):
        """
        Initialize the renderer.

        Args:
            width: Playfield width in pixels
            height: Playfield height in pixels
        """
        self._base_width = width
        self._base_height = height
        self._scale = 1.0
        self._offset_x = 0
        self._offset_y = 0
        self._render_width = width
        self._render_height = height
        self._font: Optional[pygame.font.Font] = None
        self._large_font: Optional[pygame.font.Font] = None

    def get_preferred_size(self) -> Tuple[int, int]:
        """Get the preferred render size."""
        return (self._base_width, self._base_height)

    def set_render_area(self, x: int, y: int, width: int, height: int) -> None:
        """Set the area where this renderer should draw."""
        self._offset_x = x
        self._offset_y = y
        scale_x = width / self._base_width
        scale_y = height / self._base_height
        self._scale = min(scale_x, scale_y)
        self._render_width = int(self._base_width * self._scale)
        self._render_height = int(self._base_height * self._scale)
        # Fonts depend on scale
        self._font = None
        self._large_font = None

    def _scale_x(self, x: float) -> int:
        return int(self._offset_x + x * self._scale)

    def _scale_y(self, y: float) -> int:
        return int(self._offset_y + y * self._scale)

    def _scale_size(self, size: float) -> int:
        return max(1, int(size * self._scale))

    def _rect(self, x: float, y: float, width: float, height: float) -> pygame.Rect:
        return pygame.Rect(
            self._scale_x(x),
            self._scale_y(y),
            self._scale_size(width),
            self._scale_size(height),
        )

    def render(
        self,
        game_state: Dict[str, Any],
        surface: pygame.Surface,
        high_score: int = 0,
        muted: bool = False,
        message: str = "",
    ) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary from SpaceInvadersGame.get_state()
            surface: Pygame surface to draw on
            high_score: Best recorded score for the HUD
            muted: Whether to show the muted indicator
            message: Session message shown once the game is over
        """
        pygame.draw.rect(
            surface,
            BACKGROUND,
            pygame.Rect(self._offset_x, self._offset_y, self._render_width, self._render_height),
        )

        player = game_state.get("player", {})
        if player.get("alive", False):
            self._draw_player(surface, player)

        for bullet in game_state.get("player_bullets", []):
            self._draw_bullet(surface, bullet, PLAYER_BULLET_COLOR)

        self._draw_enemies(surface, game_state.get("enemies", []))

        for bullet in game_state.get("enemy_bullets", []):
            self._draw_bullet(surface, bullet, ENEMY_BULLET_COLOR)

        self._draw_hud(surface, game_state.get("score", 0), high_score, muted)

        if game_state.get("paused", False):
            self._draw_overlay(surface, "PAUSED")
        elif game_state.get("game_over", False):
            self._draw_overlay(surface, message or "GAME OVER")

    def _draw_player(self, surface: pygame.Surface, player: Dict[str, Any]) -> None:
        """Draw the ship body and its cockpit."""
        x = player.get("x", 0)
        y = player.get("y", 0)
        width = player.get("width", 48)
        height = player.get("height", 12)

        pygame.draw.rect(surface, PLAYER_COLOR, self._rect(x, y, width, height))
        pygame.draw.rect(surface, WHITE, self._rect(x + width / 2 - 6, y - 6, 12, 6))

    def _draw_enemies(self, surface: pygame.Surface, enemies: List[Dict[str, Any]]) -> None:
        for enemy in enemies:
            if not enemy.get("alive", False):
                continue
            x = enemy.get("x", 0)
            y = enemy.get("y", 0)
            width = enemy.get("width", 36)

            pygame.draw.rect(surface, ENEMY_COLOR, self._rect(x, y, width, enemy.get("height", 18)))
            # Eyes
            pygame.draw.rect(surface, BLACK, self._rect(x + 6, y + 4, 6, 6))
            pygame.draw.rect(surface, BLACK, self._rect(x + width - 12, y + 4, 6, 6))

    def _draw_bullet(
        self, surface: pygame.Surface, bullet: Dict[str, Any], color: Tuple[int, int, int]
    ) -> None:
        pygame.draw.rect(
            surface,
            color,
            self._rect(bullet.get("x", 0), bullet.get("y", 0),
                       bullet.get("width", 4), bullet.get("height", 8)),
        )

    def _ensure_fonts(self) -> bool:
        if self._font is None:
            try:
                self._font = pygame.font.Font(None, self._scale_size(28))
                self._large_font = pygame.font.Font(None, self._scale_size(40))
            except Exception:
                return False
        return True

    def _draw_hud(
        self, surface: pygame.Surface, score: int, high_score: int, muted: bool
    ) -> None:
        """Draw score, high score and the mute indicator."""
        if not self._ensure_fonts():
            return

        score_text = self._font.render(f"Score: {score}", True, HUD_COLOR)
        surface.blit(score_text, (self._scale_x(10), self._scale_y(10)))

        high_text = self._font.render(f"High Score: {high_score}", True, HUD_COLOR)
        high_rect = high_text.get_rect()
        high_rect.centerx = self._scale_x(self._base_width / 2)
        high_rect.top = self._scale_y(10)
        surface.blit(high_text, high_rect)

        if muted:
            mute_text = self._font.render("MUTED", True, HUD_COLOR)
            surface.blit(mute_text, (self._scale_x(self._base_width - 90), self._scale_y(10)))

    def _draw_overlay(self, surface: pygame.Surface, text: str) -> None:
        """Dim the playfield and center a line of text on it."""
        overlay = pygame.Surface((self._render_width, self._render_height), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        surface.blit(overlay, (self._offset_x, self._offset_y))

        if not self._ensure_fonts():
            return

        rendered = self._large_font.render(text, True, PLAYER_COLOR)
        text_rect = rendered.get_rect()
        text_rect.center = (
            self._scale_x(self._base_width / 2),
            self._scale_y(self._base_height / 2),
        )
        surface.blit(rendered, text_rect)
