import logging
import sys

import pygame

from tetris_config import CONFIG, GameConfig
from tetris_game import Game
from tetris_input import commands_from_events
from tetris_layout import compute_dims
from tetris_render import RenderAssets


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = GameConfig.from_dict()

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    game = Game(config)
    bounds = game.board.bounds
    dims = compute_dims(bounds.width, bounds.height, int(CONFIG["CELL_SIZE"]))
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris — SRS")
    render = RenderAssets(dims, game.board)
    clock = pygame.time.Clock()

    game.start()
    while True:
        dt = clock.tick(CONFIG["FPS"]) / 1000.0

        events = pygame.event.get()
        for e in events:
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()

        game.tick(dt, commands_from_events(events))

        render.draw(screen, game.board, game.ghost(), game.piece.kind)
        pygame.display.flip()


if __name__ == '__main__':
    main()
