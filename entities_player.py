# entities_player.py
#
# Player character: gravity, horizontal wrap, platform bounce and the
# shield (invincibility) window.
# ------------------------------------------------------

import math

import pygame

from config import (
    WIDTH, HEIGHT, PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER_START_OFFSET,
    GRAVITY, JUMP_POWER, MOVE_SPEED, COLOR_SHIELD
)
from entities_utils import lands_on
from physics import (
    apply_gravity, step_vertical, clamp_ceiling,
    horizontal_velocity, wrap_horizontal
)
from skins import DEFAULT_SKIN, resolve_skin, get_skin


def draw_glow(surface, rect, color, alpha=60):
    """Soft glow using an SRCALPHA temp surface."""
    w, h = rect[2] * 2, rect[3] * 2
    temp = pygame.Surface((w, h), pygame.SRCALPHA)
    pygame.draw.ellipse(temp, (*color, alpha), (0, 0, w, h))
    surface.blit(temp, (rect[0] - rect[2] / 2, rect[1] - rect[3] / 2))


# ──────────────────────────────────────────────────────────
# Player entity
# ──────────────────────────────────────────────────────────
class Player:
    def __init__(self, skin_id=DEFAULT_SKIN, width=WIDTH, height=HEIGHT):
        self.width  = PLAYER_WIDTH
        self.height = PLAYER_HEIGHT
        self.x = width / 2 - self.width / 2
        self.y = height - PLAYER_START_OFFSET
        self.vx = 0
        self.vy = 0

        self.gravity    = GRAVITY
        self.jump_power = JUMP_POWER
        self.move_speed = MOVE_SPEED

        self.skin_id = resolve_skin(skin_id)
        self.skin = get_skin(self.skin_id)

        # Shield window (ms timestamps from the injected clock)
        self.invincible = False
        self.invincible_until = 0

    # ──────────────────────────────────────────────────────
    # Movement / physics
    # ──────────────────────────────────────────────────────
    def update(self, moving_left, moving_right, platforms, world_width=WIDTH):
        """Advance one tick. Returns the platform bounced on, if any."""
        apply_gravity(self)
        step_vertical(self)
        clamp_ceiling(self)

        self.vx = horizontal_velocity(moving_left, moving_right, self.move_speed)
        self.x += self.vx
        self.x = wrap_horizontal(self.x, self.width, world_width)

        return self.check_platform_collision(platforms)

    def check_platform_collision(self, platforms):
        """Bounce off the highest platform whose top the player is falling through."""
        if self.vy <= 0:
            return None
        hits = [p for p in platforms if lands_on(self, p)]
        if not hits:
            return None
        target = min(hits, key=lambda p: p.y)
        self.vy = self.jump_power
        return target

    def is_alive(self, height=HEIGHT):
        return self.y <= height

    # ──────────────────────────────────────────────────────
    # Shield
    # ──────────────────────────────────────────────────────
    def activate_shield(self, duration, now):
        """Arm invincibility from now, replacing any running window."""
        self.invincible = True
        self.invincible_until = now + duration

    def is_invincible(self, now):
        if self.invincible and now >= self.invincible_until:
            self.invincible = False
        return self.invincible

    def set_skin(self, skin_id):
        self.skin_id = resolve_skin(skin_id)
        self.skin = get_skin(self.skin_id)

    # ──────────────────────────────────────────────────────
    # Draw
    # ──────────────────────────────────────────────────────
    def draw(self, surf):
        x, y, w, h = int(self.x), int(self.y), self.width, self.height

        if self.invincible:
            draw_glow(surf, (x, y, w, h), COLOR_SHIELD, alpha=70)
            pulse = 0.5 + math.sin(pygame.time.get_ticks() / 200) * 0.3
            rim = tuple(int(c * pulse) for c in COLOR_SHIELD)
            pygame.draw.rect(surf, rim, (x - 3, y - 3, w + 6, h + 6), 3)

        pygame.draw.rect(surf, self.skin["body_color"], (x, y, w, h))

        # eyes
        pygame.draw.rect(surf, self.skin["eye_color"], (x + 8, y + 10, 10, 10))
        pygame.draw.rect(surf, self.skin["eye_color"], (x + 22, y + 10, 10, 10))
        pygame.draw.rect(surf, self.skin["pupil_color"], (x + 12, y + 14, 4, 4))
        pygame.draw.rect(surf, self.skin["pupil_color"], (x + 26, y + 14, 4, 4))

        # smile
        pygame.draw.arc(surf, self.skin["mouth_color"],
                        (x + w // 2 - 8, y + 17, 16, 16),
                        math.pi, 2 * math.pi, 4)
