# entities_platform.py

import pygame

from config import (
    HEIGHT, PLATFORM_WIDTH, PLATFORM_HEIGHT,
    COLOR_PLATFORM, COLOR_PLATFORM_BORDER
)
from physics import scroll_with_player


class Platform:
    def __init__(self, x, y, width=PLATFORM_WIDTH):
        self.x = x
        self.y = y
        self.width = width
        self.height = PLATFORM_HEIGHT

    def update(self, player, height=HEIGHT):
        scroll_with_player(self, player, height)

    def is_off_screen(self, height=HEIGHT):
        return self.y > height

    def draw(self, surf):
        rect = (int(self.x), int(self.y), self.width, self.height)
        pygame.draw.rect(surf, COLOR_PLATFORM, rect)
        pygame.draw.rect(surf, COLOR_PLATFORM_BORDER, rect, 2)
