# game_loop.py

import argparse
import random
import sys
from typing import Optional

import pygame

from config import WIDTH, HEIGHT, SEED, START_SKIN, settings_data
from controls import Controls
from game import Game, OVER
from logging_utils import log_event
from skins import SKIN_ORDER
from spawner import Spawner
from ui import Hud

SKIN_KEYS = {pygame.K_1: 0, pygame.K_2: 1, pygame.K_3: 2, pygame.K_4: 3}


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Skyhop vertical jumper")
    parser.add_argument("--seed", type=int, default=SEED,
                        help="Spawner seed for a reproducible run")
    parser.add_argument("--skin", default=START_SKIN,
                        help="Player skin: " + ", ".join(SKIN_ORDER))
    return parser.parse_args(argv)


def process_events(game, controls, events=None):
    """Handle one batch of events (the pygame queue by default).

    Returns False when the window should close.
    """
    if events is None:
        events = pygame.event.get()
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_SPACE:
                game.start()
            elif event.key in SKIN_KEYS:
                game.set_skin(SKIN_ORDER[SKIN_KEYS[event.key]])
        # a click or tap anywhere starts a run and still arms its direction
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            game.start()
        elif event.type == pygame.FINGERDOWN:
            game.start()
        controls.handle_event(event)
    return True


def render_idle(game, hud, screen):
    game.draw(screen)
    if game.state == OVER:
        hud.draw(screen)
        hud.draw_game_over(screen, game.high_score)
    else:
        hud.draw_start_prompt(screen)


def run_game(argv: Optional[list] = None):
    args = parse_args(argv)
    pygame.init()
    pygame.display.set_caption("Skyhop")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()

    controls = Controls(WIDTH)
    hud = Hud(WIDTH, HEIGHT)
    rng = random.Random(args.seed)
    game = Game(status=hud, spawner=Spawner(rng), controls=controls,
                skin_id=args.skin)
    log_event("run_game", "launch", seed=args.seed, skin=game.current_skin)

    running = True
    while running:
        # Re-read FPS each frame
        clock.tick(settings_data["FPS"])
        running = process_events(game, controls)

        if game.frame(screen):
            hud.draw(screen)
        else:
            render_idle(game, hud, screen)
        pygame.display.flip()

    log_event("run_game", "quit", high_score=game.high_score)
    pygame.quit()


def main():
    run_game(sys.argv[1:])


if __name__ == "__main__":
    main()
