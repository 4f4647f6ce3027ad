"""
Space Invaders Game Core - Pure game logic implementing GameInterface.

One call to step() advances the world by one discrete tick. The game owns
its EntityStore and session fields (score, pause, terminal flag, fire
timestamps); it never draws, plays sound or persists anything. Sound cues
are queued for the session controller to drain.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Dict, Any
import random

from ...core.game_interface import GameInterface, GameMetadata
from ...core.ports import SoundCue
from .config import SpaceInvadersConfig
from .entities import EntityStore, Bullet, Box


class StepOutcome(Enum):
    """Result of a single tick."""
    CONTINUE = "continue"
    PLAYER_HIT = "player_hit"
    BREACH = "breach"
    VICTORY = "victory"

    @property
    def is_terminal(self) -> bool:
        return self is not StepOutcome.CONTINUE


@dataclass
class InputIntent:
    """
    Player intent for the next tick.

    fire is one-shot: step() clears it after use. drag_dx is a touch drag
    displacement in playfield pixels, also consumed by step().
    """
    move_left: bool = False
    move_right: bool = False
    fire: bool = False
    drag_dx: float = 0.0


def rects_intersect(a: Box, b: Box) -> bool:
    """Strict AABB overlap; touching edges do not count."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


class SpaceInvadersGame(GameInterface):
    """
    Core Space Invaders game logic implementing GameInterface.

    The player ship at the bottom shoots at a grid of enemies that sweeps
    left and right, drops a row at each wall and fires back. The game ends
    when the player is hit, the grid reaches the player, or every enemy is
    destroyed.
    """

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        """Return metadata about Space Invaders game."""
        return GameMetadata(
            name="Space Invaders",
            id="space_invaders",
            description="Destroy all the invaders before they reach you",
            version="1.0.0",
            min_players=1,
            max_players=1,
            supports_touch=True,
        )

    def __init__(
        self,
        config: Optional[SpaceInvadersConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the game.

        Args:
            config: Gameplay constants (defaults to SpaceInvadersConfig())
            rng: Random source for enemy fire; pass a seeded one for replays
        """
        self.config = config or SpaceInvadersConfig()
        self.rng = rng or random.Random()
        self.width = self.config.width
        self.height = self.config.height

        self.store = EntityStore(self.config)
        self.score: int = 0
        self.game_over: bool = False
        self.paused: bool = False
        self.outcome: StepOutcome = StepOutcome.CONTINUE
        self.last_player_shot_ms: Optional[float] = None
        self.last_enemy_shot_ms: float = 0.0
        self.frame_count: int = 0
        self.pending_cues: List[SoundCue] = []

        self.reset()

    # Shortcuts into the store

    @property
    def player(self):
        return self.store.player

    @property
    def enemies(self):
        return self.store.enemies

    @property
    def player_bullets(self):
        return self.store.player_bullets

    @property
    def enemy_bullets(self):
        return self.store.enemy_bullets

    @property
    def formation(self):
        return self.store.formation

    def reset(self) -> Dict[str, Any]:
        """
        Reset every entity and session field.

        Returns:
            Dictionary containing the initial game state
        """
        self.store.reset_all()
        self.score = 0
        self.game_over = False
        self.paused = False
        self.outcome = StepOutcome.CONTINUE
        self.last_player_shot_ms = None
        self.last_enemy_shot_ms = 0.0
        self.frame_count = 0
        self.pending_cues = []
        return self.get_state()

    def step(self, intent: InputIntent, now_ms: float) -> StepOutcome:
        """
        Advance the world by one tick.

        Does nothing while paused or after a terminal outcome.

        Args:
            intent: Current input intent (fire and drag_dx are consumed)
            now_ms: Wall-clock time in milliseconds

        Returns:
            The outcome of this tick
        """
        if self.game_over or self.paused:
            return self.outcome

        self.frame_count += 1

        self._move_player(intent)

        if intent.fire:
            self.player_shoot(now_ms)
            intent.fire = False

        self._advance_bullets()
        self._advance_formation()

        if now_ms - self.last_enemy_shot_ms > self.config.enemy_fire_interval_ms:
            self._enemy_shoot()
            self.last_enemy_shot_ms = now_ms

        self._resolve_player_bullet_hits()

        # Terminal checks: all run, first one found wins
        outcome = StepOutcome.CONTINUE
        if self._resolve_enemy_bullet_hits():
            outcome = StepOutcome.PLAYER_HIT
        if self._formation_breached() and outcome is StepOutcome.CONTINUE:
            outcome = StepOutcome.BREACH
        if not self.store.alive_enemies() and outcome is StepOutcome.CONTINUE:
            outcome = StepOutcome.VICTORY

        if outcome.is_terminal:
            self.game_over = True
            self.outcome = outcome

        return outcome

    def player_shoot(self, now_ms: float) -> bool:
        """
        Fire a bullet from the ship if the rate gate allows it.

        The gate is measured from the last accepted shot, whether or not
        that bullet is still in flight.

        Args:
            now_ms: Wall-clock time in milliseconds

        Returns:
            True if a bullet was spawned
        """
        if not self.player.alive or self.game_over or self.paused:
            return False

        if self.last_player_shot_ms is not None and \
                now_ms - self.last_player_shot_ms < self.config.player_fire_interval_ms:
            return False

        cfg = self.config
        self.player_bullets.append(Bullet(
            x=self.player.x + self.player.width / 2 - cfg.player_bullet_width / 2,
            y=self.player.y - cfg.player_bullet_height,
            width=cfg.player_bullet_width,
            height=cfg.player_bullet_height,
            vy=-cfg.player_bullet_speed,
            created_ms=now_ms,
        ))
        self.last_player_shot_ms = now_ms
        self.pending_cues.append(SoundCue.PLAYER_SHOT)
        return True

    def drain_cues(self) -> List[SoundCue]:
        """Hand queued sound cues to the caller and forget them."""
        cues = self.pending_cues
        self.pending_cues = []
        return cues

    def _move_player(self, intent: InputIntent) -> None:
        player = self.player
        if intent.move_left:
            player.x -= player.speed
        if intent.move_right:
            player.x += player.speed
        if intent.drag_dx:
            player.x += intent.drag_dx
            intent.drag_dx = 0.0
        player.x = max(0.0, min(self.width - player.width, player.x))

    def _advance_bullets(self) -> None:
        for bullet in self.player_bullets[:]:
            bullet.y += bullet.vy
            if bullet.y + bullet.height < 0:
                self.player_bullets.remove(bullet)

        for bullet in self.enemy_bullets[:]:
            bullet.y += bullet.vy
            if bullet.y > self.height:
                self.enemy_bullets.remove(bullet)

    def _advance_formation(self) -> None:
        """Slide the grid and bounce it off the walls with one descent step."""
        formation = self.formation
        formation.x += formation.vx * formation.direction

        alive = self.store.alive_enemies()
        if not alive:
            return

        margin = self.config.formation_edge_margin
        left_edge = formation.x + min(e.x for e in alive)
        right_edge = formation.x + max(e.x for e in alive) + self.config.enemy_width

        if right_edge >= self.width - margin and formation.direction == 1:
            formation.direction = -1
            formation.y += self.config.formation_descent
        elif left_edge <= margin and formation.direction == -1:
            formation.direction = 1
            formation.y += self.config.formation_descent

    def _enemy_shoot(self) -> None:
        alive = self.store.alive_enemies()
        if not alive:
            return

        shooter = alive[self.rng.randrange(len(alive))]
        x, y, w, h = self.store.enemy_box(shooter)
        cfg = self.config
        self.enemy_bullets.append(Bullet(
            x=x + w / 2 - cfg.enemy_bullet_width / 2,
            y=y + h,
            width=cfg.enemy_bullet_width,
            height=cfg.enemy_bullet_height,
            vy=cfg.enemy_bullet_speed,
        ))
        self.pending_cues.append(SoundCue.ENEMY_SHOT)

    def _resolve_player_bullet_hits(self) -> None:
        """Each player bullet kills at most the first enemy it overlaps."""
        for bullet in self.player_bullets[:]:
            box = bullet.box()
            for enemy in self.enemies:
                if enemy.alive and rects_intersect(box, self.store.enemy_box(enemy)):
                    enemy.alive = False
                    self.player_bullets.remove(bullet)
                    self.score += self.config.points_per_kill
                    self.formation.vx *= self.config.speed_up_factor
                    break

    def _resolve_enemy_bullet_hits(self) -> bool:
        """Remove enemy bullets touching the ship. Returns True if it was hit."""
        hit = False
        player_box = self.player.box()
        for bullet in self.enemy_bullets[:]:
            if rects_intersect(bullet.box(), player_box):
                self.enemy_bullets.remove(bullet)
                self.player.alive = False
                hit = True
        return hit

    def _formation_breached(self) -> bool:
        alive = self.store.alive_enemies()
        if not alive:
            return False
        lowest = max(self.store.enemy_box(e)[1] for e in alive) + self.config.enemy_height
        return lowest >= self.player.y

    def get_state(self) -> Dict[str, Any]:
        """
        Get a read-only snapshot for the renderer.

        Returns:
            Dictionary of entities plus session flags
        """
        state = self.store.to_dict()
        state.update({
            "width": self.width,
            "height": self.height,
            "score": self.score,
            "paused": self.paused,
            "game_over": self.game_over,
            "outcome": self.outcome.value,
            "enemies_alive": len(self.store.alive_enemies()),
            "frame": self.frame_count,
        })
        return state

    def get_score(self) -> int:
        return self.score
