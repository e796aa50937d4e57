import logging

import pygame

from linetris_config import CONFIG
from linetris_game import Game, Quit, run_game
from linetris_input import KeyDecoder
from linetris_layout import compute_dims
from linetris_render import RenderAssets
from linetris_rng import KindRandom

log = logging.getLogger("linetris")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode(dims.size, flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode(dims.size, flags)


def wait_for_key(clock):
    while True:
        for e in pygame.event.get():
            if e.type in (pygame.QUIT, pygame.KEYDOWN):
                return
        clock.tick(CONFIG["FPS"])


def play():
    """Open the window and play one game; return its outcome."""
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("linetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()
    keys = KeyDecoder()

    rng = KindRandom(CONFIG["SEED"])
    log.info("seed %d", rng.seed)
    game = Game(rng, now=pygame.time.get_ticks())

    def poll():
        clock.tick(CONFIG["FPS"])
        return keys.poll()

    outcome = run_game(game, poll, pygame.time.get_ticks, lambda snap: render.draw(screen, snap))
    if not isinstance(outcome, Quit):
        wait_for_key(clock)
    pygame.quit()
    return outcome


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    outcome = play()
    log.info("finished: %s", outcome)


if __name__ == '__main__':
    main()
