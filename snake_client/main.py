"""Entry point for the pygame based game window."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Optional, Sequence

import pygame

from snake_engine import constants
from snake_engine.storage import DEFAULT_STORAGE_PATH, KeyValueStore, Settings

from .controller import HAND_CURSOR, GameController
from .render import Renderer
from .timer import TickTimer

FPS = 60


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake on a fixed grid")
    parser.add_argument("--storage", default=DEFAULT_STORAGE_PATH, help="File holding the high score and settings")
    parser.add_argument("--speed", choices=sorted(constants.SPEED_OPTIONS), help="Tick speed, remembered for next time")
    parser.add_argument(
        "--grid-size",
        choices=sorted(constants.GRID_SIZE_OPTIONS),
        help="Board size, remembered for next time",
    )
    parser.add_argument("--seed", type=int, help="Seed for food placement")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace, store: KeyValueStore) -> Settings:
    settings = Settings.load(store)
    if args.speed:
        settings.save_speed(store, args.speed)
    if args.grid_size:
        settings.save_grid_size(store, args.grid_size)
    return settings


def init_game(args: argparse.Namespace) -> tuple[GameController, Renderer]:
    """Open the window and build the controller. Any failure propagates."""

    store = KeyValueStore(args.storage)
    settings = load_settings(args, store)
    pygame.init()
    controller = GameController(settings, store, TickTimer(), random.Random(args.seed))
    screen = pygame.display.set_mode(controller.layout.window_size)
    pygame.display.set_caption("Snake")
    renderer = Renderer(screen, controller.layout)
    logging.info(
        "Loaded settings: speed=%s grid=%s high score=%s",
        settings.speed,
        settings.grid_size,
        settings.high_score,
    )
    return controller, renderer


def apply_cursor(name: str) -> None:
    cursor = pygame.SYSTEM_CURSOR_HAND if name == HAND_CURSOR else pygame.SYSTEM_CURSOR_ARROW
    pygame.mouse.set_cursor(cursor)


def run_client(args: argparse.Namespace) -> int:
    try:
        controller, renderer = init_game(args)
    except Exception:
        logging.exception("Failed to initialise the game")
        pygame.quit()
        return 1

    clock = pygame.time.Clock()
    cursor = controller.cursor
    running = True
    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    controller.process_event(event)

            if controller.cursor != cursor:
                cursor = controller.cursor
                apply_cursor(cursor)

            renderer.draw(controller.state, controller.settings)
            renderer.present()
            clock.tick(FPS)
    finally:
        controller.timer.stop()
        pygame.quit()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="[%(levelname)s] %(message)s")
    sys.exit(run_client(args))


if __name__ == "__main__":
    main()
