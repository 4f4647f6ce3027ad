#!/usr/bin/env python3
"""
Human Play Mode - Play Space Invaders yourself.

Controls:
    Arrow Keys or A/D: Move
    Space: Fire
    Touch: Tap to fire, drag to move
    P: Pause
    M: Mute
    R: Restart
    ESC: Quit

Usage:
    python scripts/play_human.py
    python scripts/play_human.py --config config/default.yaml --mute --seed 42
"""
import sys
import os
import argparse
import logging
import random
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'

import pygame
from rich.console import Console
from rich.panel import Panel

from pixel_palace.audio import SynthAudio
from pixel_palace.storage import JsonScoreStore
from pixel_palace.games.space_invaders import SpaceInvadersGame, SessionController, GameEnd
from pixel_palace.games.space_invaders.controls import IntentCollector, ControlCommand
from pixel_palace.games.space_invaders.renderer import SpaceInvadersRenderer
from pixel_palace.utils.config_loader import load_config
from pixel_palace.utils.logging_setup import setup_logging

logger = logging.getLogger("play_human")


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Pixel Palace - Space Invaders")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config")
    parser.add_argument("--mute", action="store_true", help="Start with sound muted")
    parser.add_argument("--seed", type=int, default=None, help="Seed for enemy fire")
    parser.add_argument("--scale", type=float, default=None, help="Window scale factor")
    return parser.parse_args()


def main():
    """Main entry point for human play mode."""
    args = parse_args()
    config = load_config(args.config)
    setup_logging(config.logging)

    pygame.init()

    game_cfg = config.game
    scale = args.scale or config.visualization.scale
    window_size = (int(game_cfg.width * scale), int(game_cfg.height * scale))
    screen = pygame.display.set_mode(window_size)
    pygame.display.set_caption(config.visualization.title)

    renderer = SpaceInvadersRenderer(game_cfg.width, game_cfg.height)
    renderer.set_render_area(0, 0, *window_size)

    scores = JsonScoreStore(config.storage.path)
    audio = SynthAudio(
        sample_rate=config.audio.sample_rate,
        volume=config.audio.volume,
        enabled=config.audio.enabled,
    )
    rng = random.Random(args.seed) if args.seed is not None else None
    controller = SessionController(
        game=SpaceInvadersGame(game_cfg, rng=rng),
        audio=audio,
        scores=scores,
        clock=pygame.time.get_ticks,
    )
    hud = {"high_score": controller.high_score}

    def on_game_end(event: GameEnd):
        logger.info("%s Final score: %d", event.message, event.score)
        hud["high_score"] = controller.high_score

    controller.subscribe(GameEnd, on_game_end)

    collector = IntentCollector(game_cfg)

    Console().print(Panel.fit(
        "Arrow Keys / A,D: Move    Space / Tap: Fire    Drag: Move\n"
        "P: Pause    M: Mute    R: Restart    ESC: Quit",
        title="Space Invaders - Human Mode",
    ))

    controller.start()
    if args.mute or scores.get_preference("muted", False):
        controller.toggle_mute()

    clock = pygame.time.Clock()
    running = True

    while running:
        now = pygame.time.get_ticks()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue

            command = collector.handle_event(event, now)
            if command is ControlCommand.QUIT:
                running = False
            elif command is ControlCommand.PAUSE:
                controller.toggle_pause()
                collector.release_all()
            elif command is ControlCommand.MUTE:
                controller.toggle_mute()
                scores.set_preference("muted", controller.muted)
            elif command is ControlCommand.RESTART:
                controller.reset()
                collector.release_all()

        controller.tick(collector.intent, now)

        screen.fill((0, 0, 0))
        renderer.render(
            controller.game.get_state(),
            screen,
            high_score=hud["high_score"],
            muted=controller.muted,
            message=controller.message if controller.is_game_over else "",
        )
        pygame.display.flip()
        clock.tick(config.visualization.render_fps)

    controller.destroy()
    pygame.quit()


if __name__ == "__main__":
    main()
