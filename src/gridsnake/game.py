from __future__ import annotations

import argparse
import logging

import pygame

from . import config
from .clock import TickAccumulator
from .logic import handle_input, new_game, update
from .render import draw_state

log = logging.getLogger(__name__)


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gridsnake", description="Classic snake on a fixed grid.")
    parser.add_argument("--rows", type=_positive_int, default=config.ROWS, help="Grid rows.")
    parser.add_argument("--cols", type=_positive_int, default=config.COLS, help="Grid columns.")
    parser.add_argument("--square", type=_positive_int, default=config.SQUARE, help="Cell size in pixels.")
    parser.add_argument("--ups", type=_positive_int, default=config.UPS, help="Snake moves per second.")
    parser.add_argument("--fps", type=_positive_int, default=config.FPS, help="Render frame cap.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging verbosity (stderr).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    game = new_game(args.rows, args.cols, seed=args.seed)
    ticker = TickAccumulator(args.ups)

    pygame.init()
    screen = pygame.display.set_mode((args.cols * args.square, args.rows * args.square))
    pygame.display.set_caption(config.TITLE)
    clock = pygame.time.Clock()

    running = True
    while running:
        events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
        if not running:
            log.info("window closed, score %d", game.score)
            break

        handle_input(game, events)

        for _ in range(ticker.advance(clock.get_time())):
            if not update(game):
                running = False
                break

        draw_state(screen, game, args.square)
        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()
    print(f"Congratulations, your score was: {game.score}")
    return 0
