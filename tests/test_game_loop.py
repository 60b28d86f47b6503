import random
import unittest
from unittest.mock import Mock

import pygame

from config import WIDTH, HEIGHT, START_SKIN
from controls import Controls
from game import Game, IDLE, RUNNING, OVER
from game_loop import parse_args, process_events, render_idle
from spawner import Spawner
from ui import Hud


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


def make_game(status=None):
    controls = Controls(WIDTH)
    spawner = Spawner(random.Random(3), shield_chance=0.0,
                      extra_life_chance=0.0, enemy_chance=0.0)
    game = Game(clock=lambda: 0, status=status or Mock(), spawner=spawner,
                controls=controls)
    return game, controls


class ParseArgsTests(unittest.TestCase):
    def test_defaults(self):
        args = parse_args([])
        self.assertEqual(args.skin, START_SKIN)

    def test_seed_and_skin(self):
        args = parse_args(["--seed", "7", "--skin", "blue"])
        self.assertEqual(args.seed, 7)
        self.assertEqual(args.skin, "blue")


class ProcessEventsTests(unittest.TestCase):
    def setUp(self):
        self.game, self.controls = make_game()

    def test_space_starts_and_repeat_is_ignored(self):
        self.assertTrue(process_events(self.game, self.controls, [key(pygame.K_SPACE)]))
        self.assertEqual(self.game.state, RUNNING)
        session = self.game.session
        process_events(self.game, self.controls, [key(pygame.K_SPACE)])
        self.assertIs(self.game.session, session)

    def test_digit_keys_select_skin(self):
        process_events(self.game, self.controls, [key(pygame.K_SPACE), key(pygame.K_3)])
        self.assertEqual(self.game.current_skin, "yellow")
        self.assertEqual(self.game.session.player.skin_id, "yellow")
        process_events(self.game, self.controls, [key(pygame.K_2)])
        self.assertEqual(self.game.current_skin, "black")

    def test_escape_and_quit_close_window(self):
        self.assertFalse(process_events(self.game, self.controls, [key(pygame.K_ESCAPE)]))
        self.assertFalse(process_events(self.game, self.controls,
                                        [pygame.event.Event(pygame.QUIT)]))
        self.assertEqual(self.game.state, IDLE)

    def test_click_anywhere_restarts_after_game_over(self):
        self.game.start()
        self.game.end_game()
        process_events(self.game, self.controls, [click((10, 10))])
        self.assertEqual(self.game.state, RUNNING)

    def test_starting_tap_arms_direction(self):
        tap = pygame.event.Event(pygame.FINGERDOWN, x=0.9, y=0.5)
        process_events(self.game, self.controls, [tap])
        self.assertEqual(self.game.state, RUNNING)
        self.assertTrue(self.controls.moving_right())

    def test_starting_click_arms_direction(self):
        process_events(self.game, self.controls, [click((20, 300))])
        self.assertEqual(self.game.state, RUNNING)
        self.assertTrue(self.controls.moving_left())

    def test_arrow_keys_reach_controls(self):
        process_events(self.game, self.controls, [key(pygame.K_LEFT)])
        self.assertTrue(self.controls.moving_left())


class RenderIdleTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        pygame.init()

    @classmethod
    def tearDownClass(cls):
        pygame.quit()

    def test_start_prompt_and_game_over_overlay(self):
        hud = Hud(WIDTH, HEIGHT)
        game, _ = make_game(status=hud)
        surf = pygame.Surface((WIDTH, HEIGHT))
        render_idle(game, hud, surf)

        game.start()
        game.session.score = 30
        game.end_game()
        self.assertEqual(game.state, OVER)
        self.assertEqual(hud.final_score, 30)
        render_idle(game, hud, surf)


if __name__ == "__main__":
    unittest.main()
