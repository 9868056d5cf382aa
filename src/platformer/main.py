import argparse
import logging

import pygame

from .controls import ACTION_PAUSE, ACTION_RESET, ACTION_START, dispatch_key
from .game import Game
from .hud import Hud
from .logger import get_logger, setup_logger
from .session import GameState
from .settings import ARENA_BORDER, BG_COLOR, FPS, HEIGHT, HUD_HEIGHT, TITLE, WIDTH
from .sprites import EntityView

logger = get_logger(__name__)


def perform(game, action):
    """Run a button or shortcut action against the state machine."""
    if action == ACTION_START:
        if game.state is not GameState.PLAYING:
            game.start()
    elif action == ACTION_PAUSE:
        game.toggle_pause()
    elif action == ACTION_RESET:
        game.reset()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="platformer", description=TITLE)
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for power-up placement (default: random)")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging verbosity (default: INFO)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logger(getattr(logging, args.log_level))
    logger.info("Initializing game (seed=%s)", args.seed)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT + HUD_HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        font = pygame.font.SysFont(None, 28)
        big = pygame.font.SysFont(None, 48)

        game = Game(seed=args.seed)
        view = EntityView()
        hud = Hud(font, big)

        running = True
        while running:
            dt = clock.tick(FPS) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    perform(game, dispatch_key(game, event))
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    perform(game, hud.clicked_action(game.state, event))

            game.tick()

            screen.fill(BG_COLOR)
            view.update(game.session, dt)
            view.draw(screen)
            pygame.draw.rect(screen, ARENA_BORDER, (0, 0, WIDTH, HEIGHT), 2)
            hud.draw(screen, game)
            pygame.display.flip()
    finally:
        pygame.quit()
    logger.info("Bye")


if __name__ == "__main__":
    main()
