import unittest

import pygame

from ui import Hud


class HudTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        pygame.init()

    @classmethod
    def tearDownClass(cls):
        pygame.quit()

    def test_status_sink_tracks_score_and_lives(self):
        hud = Hud()
        hud.set_score(30)
        hud.set_lives(2)
        self.assertEqual(hud.score, 30)
        self.assertEqual(hud.lives, 2)
        self.assertIsNone(hud.final_score)

    def test_game_over_records_final_score(self):
        hud = Hud()
        hud.on_game_over(50)
        hud.on_game_over(20)
        self.assertEqual(hud.final_score, 20)
        self.assertFalse(hasattr(hud, "high_score"))

    def test_new_session_clears_final_score(self):
        hud = Hud()
        hud.on_game_over(40)
        hud.set_lives(3)
        self.assertIsNone(hud.final_score)

    def test_restart_button_centered_below_scores(self):
        hud = Hud(400, 600)
        self.assertEqual(hud.restart_button.rect.center, (200, 380))

    def test_fonts_loaded_once(self):
        hud = Hud(400, 600)
        font = hud.font
        surf = pygame.Surface((400, 600))
        hud.draw(surf)
        hud.draw(surf)
        self.assertIs(hud.font, font)

    def test_draw_smoke(self):
        hud = Hud(400, 600)
        surf = pygame.Surface((400, 600))
        hud.draw(surf)
        hud.draw_start_prompt(surf)
        hud.on_game_over(10)
        hud.draw_game_over(surf, high_score=25)


if __name__ == "__main__":
    unittest.main()
