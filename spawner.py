"""Procedural platform generation and the pickups/enemies attached to them."""

import random

from config import (
    WIDTH, HEIGHT, PLATFORM_WIDTH, PLATFORM_SPACING_MIN,
    PLATFORM_SPACING_VARIANCE, PLATFORM_INITIAL_COUNT,
    FIRST_PLATFORM_OFFSET, FALLBACK_PLATFORM_OFFSET,
    COLLECTIBLE_SIZE, COLLECTIBLE_LIFT, ENEMY_WIDTH, ENEMY_LIFT,
    settings_data
)
from entities import Platform, Collectible, Enemy, SHIELD, EXTRA_LIFE
from logging_utils import log_event


class Spawner:
    """Extends the world upward one platform at a time.

    Spawn chances left as ``None`` are read from ``settings_data`` on every
    call so the host can retune them between frames.
    """

    def __init__(self, rng=None, width=WIDTH, height=HEIGHT,
                 shield_chance=None, extra_life_chance=None, enemy_chance=None):
        self.rng = rng if rng is not None else random.Random()
        self.width = width
        self.height = height
        self._shield_chance = shield_chance
        self._extra_life_chance = extra_life_chance
        self._enemy_chance = enemy_chance

    @property
    def shield_chance(self):
        if self._shield_chance is None:
            return settings_data["SHIELD_SPAWN_CHANCE"]
        return self._shield_chance

    @property
    def extra_life_chance(self):
        if self._extra_life_chance is None:
            return settings_data["EXTRA_LIFE_SPAWN_CHANCE"]
        return self._extra_life_chance

    @property
    def enemy_chance(self):
        if self._enemy_chance is None:
            return settings_data["ENEMY_SPAWN_CHANCE"]
        return self._enemy_chance

    def seed_world(self, session, now=0):
        """Place the fixed first platform, then the initial random ones."""
        first = Platform(self.width / 2 - PLATFORM_WIDTH / 2,
                         self.height - FIRST_PLATFORM_OFFSET)
        session.platforms.append(first)
        for _ in range(PLATFORM_INITIAL_COUNT):
            self.create_platform(session, now)
        log_event("Spawner", "seed_world", platforms=len(session.platforms))

    def next_platform_y(self, platforms):
        if not platforms:
            return self.height - FALLBACK_PLATFORM_OFFSET
        last = platforms[-1]
        return (last.y - PLATFORM_SPACING_MIN
                - self.rng.random() * PLATFORM_SPACING_VARIANCE)

    def create_platform(self, session, now=0):
        """Append one platform above the last and roll its attachments."""
        x = self.rng.random() * (self.width - PLATFORM_WIDTH)
        y = self.next_platform_y(session.platforms)
        platform = Platform(x, y)
        session.platforms.append(platform)

        cx = x + PLATFORM_WIDTH / 2 - COLLECTIBLE_SIZE / 2
        cy = y - COLLECTIBLE_LIFT
        # shield and extra life are alternatives; enemy is rolled independently
        if self.rng.random() < self.shield_chance:
            session.collectibles.append(Collectible(cx, cy, SHIELD))
            log_event("Spawner", "collectible", kind=SHIELD, y=cy)
        elif self.rng.random() < self.extra_life_chance:
            session.collectibles.append(Collectible(cx, cy, EXTRA_LIFE))
            log_event("Spawner", "collectible", kind=EXTRA_LIFE, y=cy)

        if self.rng.random() < self.enemy_chance:
            ex = self.rng.random() * (self.width - ENEMY_WIDTH)
            session.enemies.append(Enemy(ex, y - ENEMY_LIFT, now=now))
            log_event("Spawner", "enemy", x=ex, y=y - ENEMY_LIFT)

        return platform
