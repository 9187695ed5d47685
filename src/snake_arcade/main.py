# main.py
import argparse
import logging
from typing import Optional

import pygame  # type: ignore

from .config import CELL_SIZE, DEFAULT_SCORES_FILE, THEMES, Config
from .controls import QUIT_KEYS, RESTART_KEYS, START_KEYS, direction_for_key
from .game import SnakeGame, Status
from .render import draw_game, hit_direction, make_layout
from .storage import JsonFileStore, MemoryStore
from .timer import TICK_EVENT, TickTimer

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snake-arcade", description="Classic arcade Snake.")
    parser.add_argument("--theme", choices=sorted(THEMES), default="candy")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for food placement (default: unseeded)")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--scores-file", type=str, default=DEFAULT_SCORES_FILE,
                       help="where the high score is kept")
    group.add_argument("--no-save", action="store_true",
                       help="keep the high score in memory only")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="pixels per grid cell")
    parser.add_argument("--log-level", type=str, default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def handle_event(event, game: SnakeGame, layout, timer: Optional[TickTimer] = None) -> bool:
    """
    Route one pygame event to the game. Return False to quit.

    With a `timer`, ticks left in the queue from before a restart or re-arm
    are dropped.
    """
    if event.type == pygame.QUIT:
        return False
    if event.type == TICK_EVENT:
        if timer is None or timer.is_current(event):
            game.tick()
    elif event.type == pygame.KEYDOWN:
        if event.key in QUIT_KEYS:
            return False
        direction = direction_for_key(event.key)
        if direction is not None:
            game.request_direction(direction)
        elif event.key in RESTART_KEYS:
            game.restart()
        elif event.key in START_KEYS and game.status is Status.IDLE:
            game.start()
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        if layout.restart.collidepoint(event.pos):
            game.restart()
        elif layout.start.collidepoint(event.pos) and game.status is Status.IDLE:
            game.start()
        else:
            direction = hit_direction(layout, event.pos)
            if direction is not None:
                game.request_direction(direction)
    return True


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    cfg = Config(seed=args.seed)
    store = MemoryStore() if args.no_save else JsonFileStore(args.scores_file)
    game = SnakeGame(cfg, store=store)
    theme = THEMES[args.theme]
    layout = make_layout(cfg.grid_size, args.cell_size)

    pygame.init()
    try:
        font = pygame.font.SysFont(None, 24)
        screen = pygame.display.set_mode(layout.size)
        pygame.display.set_caption("Snake")
        clock = pygame.time.Clock()
        logger.info("Snake ready (theme=%s, best=%d)", theme.name, game.state.high_score)

        with TickTimer() as timer:
            running = True
            while running:
                # 1) input + ticks
                for event in pygame.event.get():
                    running = handle_event(event, game, layout, timer)
                    if not running:
                        break
                    timer.sync(game.state)

                # 2) render
                draw_game(screen, font, layout, theme, game.snapshot())
                pygame.display.flip()
                clock.tick(60)  # movement is paced by the tick timer
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
