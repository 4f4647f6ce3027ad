"""
Space Invaders game configuration.
"""

from dataclasses import dataclass, fields
from typing import Dict, Any


@dataclass
class SpaceInvadersConfig:
    """Configuration for Space Invaders game."""

    # Playfield
    width: int = 800
    height: int = 600

    # Player ship
    player_width: int = 48
    player_height: int = 12
    player_speed: float = 5.0  # px per tick
    player_bottom_offset: int = 40  # player.y = height - offset

    # Enemy grid
    enemy_rows: int = 4
    enemy_cols: int = 8
    enemy_width: int = 36
    enemy_height: int = 18
    enemy_h_gap: int = 18
    enemy_v_gap: int = 20

    # Formation
    formation_start_x: float = 60.0
    formation_start_y: float = 60.0
    formation_speed: float = 1.2
    formation_descent: float = 18.0
    formation_edge_margin: float = 10.0
    speed_up_factor: float = 1.02  # applied per kill

    # Player bullets
    player_bullet_width: int = 4
    player_bullet_height: int = 8
    player_bullet_speed: float = 7.0
    player_fire_interval_ms: float = 200.0

    # Enemy bullets
    enemy_bullet_width: int = 6
    enemy_bullet_height: int = 10
    enemy_bullet_speed: float = 3.0
    enemy_fire_interval_ms: float = 1000.0

    # Scoring
    points_per_kill: int = 10

    # Touch input
    touch_drag_factor: float = 0.8
    tap_debounce_ms: float = 250.0

    @property
    def enemy_count(self) -> int:
        return self.enemy_rows * self.enemy_cols

    @property
    def player_start_x(self) -> float:
        return self.width / 2 - self.player_width / 2

    @property
    def player_y(self) -> float:
        return self.height - self.player_bottom_offset

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SpaceInvadersConfig":
        """
        Create config from dictionary.

        Unknown keys are ignored so older config files keep loading.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})
