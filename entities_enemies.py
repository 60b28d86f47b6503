# entities_enemies.py

import pygame

from config import (
    WIDTH, HEIGHT, ENEMY_WIDTH, ENEMY_HEIGHT, ENEMY_MOVE_SPEED,
    ENEMY_SHOOT_INTERVAL_MS, ENEMY_CULL_MARGIN,
    PROJECTILE_WIDTH, PROJECTILE_HEIGHT,
    COLOR_ENEMY, COLOR_ENEMY_BORDER
)
from entities_projectile import Projectile
from entities_utils import check_collision
from physics import scroll_with_player


class Enemy:
    """Patrols left/right and fires at the player on a fixed interval."""

    def __init__(self, x, y, now=0):
        self.width = ENEMY_WIDTH
        self.height = ENEMY_HEIGHT
        self.x = x
        self.y = y
        self.vx = ENEMY_MOVE_SPEED
        self.last_shot = now
        self.shoot_interval = ENEMY_SHOOT_INTERVAL_MS

    def update(self, player, width=WIDTH, height=HEIGHT):
        self.x += self.vx
        if self.x <= 0 or self.x + self.width >= width:
            self.vx = -self.vx
        scroll_with_player(self, player, height)

    def should_shoot(self, now):
        """True at most once per interval; restarts the cooldown when it fires."""
        if now - self.last_shot >= self.shoot_interval:
            self.last_shot = now
            return True
        return False

    def shoot(self, player):
        x = self.x + self.width / 2 - PROJECTILE_WIDTH / 2
        y = self.y + self.height / 2 - PROJECTILE_HEIGHT / 2
        target_x = player.x + player.width / 2
        target_y = player.y + player.height / 2
        return Projectile(x, y, target_x, target_y)

    def check_collision(self, player):
        return check_collision(self, player)

    def is_off_screen(self, height=HEIGHT):
        # Enemies above the top stay alive; they scroll into view.
        return self.y > height + ENEMY_CULL_MARGIN

    def draw(self, surf):
        x, y = int(self.x), int(self.y)
        pygame.draw.rect(surf, COLOR_ENEMY, (x, y, self.width, self.height))
        pygame.draw.rect(surf, COLOR_ENEMY_BORDER, (x, y, self.width, self.height), 2)

        # eyes and pupils
        pygame.draw.rect(surf, (255, 255, 255), (x + 7, y + 8, 8, 8))
        pygame.draw.rect(surf, (255, 255, 255), (x + 20, y + 8, 8, 8))
        pygame.draw.rect(surf, (0, 0, 0), (x + 9, y + 10, 4, 4))
        pygame.draw.rect(surf, (0, 0, 0), (x + 22, y + 10, 4, 4))

        # eyebrows
        pygame.draw.line(surf, (0, 0, 0), (x + 7, y + 7), (x + 15, y + 10), 2)
        pygame.draw.line(surf, (0, 0, 0), (x + 28, y + 7), (x + 20, y + 10), 2)

        # zigzag mouth
        mouth = [(x + 10, y + 25), (x + 13, y + 22), (x + 16, y + 25),
                 (x + 19, y + 22), (x + 22, y + 25), (x + 25, y + 22)]
        pygame.draw.lines(surf, (0, 0, 0), False, mouth, 2)
