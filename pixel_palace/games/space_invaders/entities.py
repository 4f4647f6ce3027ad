"""
Space Invaders entity store.

Plain mutable records for the player, both bullet pools and the enemy
formation. Gameplay rules live in game.py; this module only builds and
resets the world and answers simple lookups.
"""

from dataclasses import dataclass
from typing import List, Tuple, Optional, Dict, Any

from .config import SpaceInvadersConfig


Box = Tuple[float, float, float, float]  # x, y, width, height


@dataclass
class Player:
    """The player's ship. y is fixed once spawned."""
    x: float
    y: float
    width: int = 48
    height: int = 12
    speed: float = 5.0
    alive: bool = True

    def box(self) -> Box:
        return (self.x, self.y, self.width, self.height)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "alive": self.alive,
        }


@dataclass
class Bullet:
    """A projectile. Negative vy travels up, positive travels down."""
    x: float
    y: float
    width: int
    height: int
    vy: float
    created_ms: Optional[float] = None  # player bullets only, for the fire gate

    def box(self) -> Box:
        return (self.x, self.y, self.width, self.height)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


@dataclass
class Enemy:
    """One grid cell of the formation; x/y are offsets from the anchor."""
    row: int
    col: int
    x: float
    y: float
    alive: bool = True


@dataclass
class Formation:
    """Shared anchor and motion of the whole enemy grid."""
    x: float
    y: float
    vx: float
    direction: int = 1  # 1 = moving right, -1 = left

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "vx": self.vx,
            "direction": self.direction,
        }


class EntityStore:
    """
    Owns every entity of one session.

    The enemy list is built once per reset in row-major order and never
    changes size afterwards; kills only flip Enemy.alive. Bullets are
    destroyed by removing them from their list.
    """

    def __init__(self, config: Optional[SpaceInvadersConfig] = None):
        self.config = config or SpaceInvadersConfig()
        self.player: Player = Player(0, 0)
        self.enemies: List[Enemy] = []
        self.player_bullets: List[Bullet] = []
        self.enemy_bullets: List[Bullet] = []
        self.formation: Formation = Formation(0, 0, 0)
        self.reset_all()

    def reset_all(self) -> None:
        """Rebuild the full grid, clear bullets, respawn player and formation."""
        cfg = self.config

        self.player = Player(
            x=cfg.player_start_x,
            y=cfg.player_y,
            width=cfg.player_width,
            height=cfg.player_height,
            speed=cfg.player_speed,
        )

        self.player_bullets.clear()
        self.enemy_bullets.clear()

        self.enemies = [
            Enemy(
                row=row,
                col=col,
                x=col * (cfg.enemy_width + cfg.enemy_h_gap),
                y=row * (cfg.enemy_height + cfg.enemy_v_gap),
            )
            for row in range(cfg.enemy_rows)
            for col in range(cfg.enemy_cols)
        ]

        self.formation = Formation(
            x=cfg.formation_start_x,
            y=cfg.formation_start_y,
            vx=cfg.formation_speed,
            direction=1,
        )

    def alive_enemies(self) -> List[Enemy]:
        """Living enemies in collection order."""
        return [e for e in self.enemies if e.alive]

    def enemy_box(self, enemy: Enemy) -> Box:
        """Absolute playfield box of an enemy."""
        return (
            self.formation.x + enemy.x,
            self.formation.y + enemy.y,
            self.config.enemy_width,
            self.config.enemy_height,
        )

    def to_dict(self) -> Dict[str, Any]:
        enemies = []
        for enemy in self.enemies:
            x, y, w, h = self.enemy_box(enemy)
            enemies.append({
                "row": enemy.row,
                "col": enemy.col,
                "x": x,
                "y": y,
                "width": w,
                "height": h,
                "alive": enemy.alive,
            })

        return {
            "player": self.player.to_dict(),
            "enemies": enemies,
            "player_bullets": [b.to_dict() for b in self.player_bullets],
            "enemy_bullets": [b.to_dict() for b in self.enemy_bullets],
            "formation": self.formation.to_dict(),
        }
