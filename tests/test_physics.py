import unittest

from config import WIDTH, HEIGHT, GRAVITY, MAX_HEIGHT, SCROLL_BAND
from entities import Player, Platform, Collectible, Enemy, Projectile
from physics import (
    horizontal_velocity,
    wrap_horizontal,
    scroll_with_player,
    should_scroll,
)


class HorizontalTests(unittest.TestCase):
    def test_left_wins_when_both_held(self):
        self.assertEqual(horizontal_velocity(True, True, 5), -5)
        self.assertEqual(horizontal_velocity(False, True, 5), 5)
        self.assertEqual(horizontal_velocity(False, False, 5), 0)

    def test_wrap_right_edge(self):
        self.assertEqual(wrap_horizontal(WIDTH, 40, WIDTH), -40)
        self.assertEqual(wrap_horizontal(WIDTH + 3, 40, WIDTH), -40)

    def test_wrap_left_edge(self):
        self.assertEqual(wrap_horizontal(-41, 40, WIDTH), WIDTH)
        # parked exactly on the left edge stays put
        self.assertEqual(wrap_horizontal(-40, 40, WIDTH), -40)

    def test_player_wraps_without_input(self):
        player = Player()
        player.x = WIDTH
        player.update(False, False, [], WIDTH)
        self.assertEqual(player.x, -player.width)

    def test_player_wraps_moving_left(self):
        player = Player()
        player.x = -player.width + 2
        player.update(True, False, [], WIDTH)
        self.assertEqual(player.x, WIDTH)


class VerticalTests(unittest.TestCase):
    def test_gravity_then_integrate(self):
        player = Player()
        start_y = player.y
        player.update(False, False, [])
        self.assertAlmostEqual(player.vy, GRAVITY)
        self.assertAlmostEqual(player.y, start_y + GRAVITY)

    def test_ceiling_clamps_position_only(self):
        player = Player()
        player.y = MAX_HEIGHT
        player.vy = -12
        player.update(False, False, [])
        self.assertEqual(player.y, MAX_HEIGHT)
        self.assertAlmostEqual(player.vy, -12 + GRAVITY)


class ScrollTests(unittest.TestCase):
    def setUp(self):
        self.player = Player()
        self.player.y = HEIGHT * SCROLL_BAND - 60
        self.player.vy = -10

    def test_scroll_moves_entity_down_by_upward_speed(self):
        platform = Platform(100, 200)
        self.assertTrue(scroll_with_player(platform, self.player, HEIGHT))
        self.assertEqual(platform.y, 210)

    def test_no_scroll_when_falling_or_below_band(self):
        platform = Platform(100, 200)
        self.player.vy = 3
        self.assertFalse(should_scroll(self.player, HEIGHT))
        self.player.vy = -10
        self.player.y = HEIGHT * SCROLL_BAND + 1
        self.assertFalse(scroll_with_player(platform, self.player, HEIGHT))
        self.assertEqual(platform.y, 200)

    def test_every_kind_shifts_identically(self):
        items = [
            Platform(100, 200),
            Collectible(100, 200),
            Enemy(100, 200),
        ]
        for item in items:
            item.update(self.player)
        shot = Projectile(100, 200, 100, 300, speed=0)
        shot.update(self.player)
        for item in items + [shot]:
            with self.subTest(kind=type(item).__name__):
                self.assertEqual(item.y, 210)


if __name__ == "__main__":
    unittest.main()
