# entities_projectile.py

import numpy as np
import pygame

from config import (
    WIDTH, HEIGHT, PROJECTILE_WIDTH, PROJECTILE_HEIGHT,
    PROJECTILE_SPEED, COLOR_PROJECTILE
)
from entities_utils import check_collision
from physics import integrate, scroll_with_player


class Projectile:
    """Straight-flying shot; the heading is fixed when it is fired."""

    def __init__(self, x, y, target_x, target_y, speed=PROJECTILE_SPEED):
        self.x = x
        self.y = y
        self.width = PROJECTILE_WIDTH
        self.height = PROJECTILE_HEIGHT

        direction = np.array([target_x - x, target_y - y], dtype=float)
        dist = np.linalg.norm(direction)
        if dist > 0:
            self.vx, self.vy = (direction / dist * speed).tolist()
        else:
            # target on the muzzle: fall straight down
            self.vx, self.vy = 0.0, float(speed)

    def update(self, player, height=HEIGHT):
        integrate(self)
        scroll_with_player(self, player, height)

    def check_collision(self, player):
        return check_collision(self, player)

    def is_off_screen(self, width=WIDTH, height=HEIGHT):
        return (
            self.x + self.width < 0 or
            self.x > width or
            self.y + self.height < 0 or
            self.y > height
        )

    def draw(self, surf):
        centre = (int(self.x + self.width / 2), int(self.y + self.height / 2))
        r = self.width // 2
        pygame.draw.circle(surf, (142, 0, 0), centre, r)
        pygame.draw.circle(surf, COLOR_PROJECTILE, centre, max(1, r - 1))
        pygame.draw.circle(surf, (255, 107, 107), centre, max(1, r // 2))
