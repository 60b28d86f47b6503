# game.py
# ──────────────────────────────────────────────────────────────
# Session state and the per-tick simulation.
# States: "idle" → "running" → "over" → (restart) "running"
# ──────────────────────────────────────────────────────────────

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import pygame

from config import (
    WIDTH, HEIGHT, INITIAL_LIVES, POINTS_PER_PLATFORM,
    SHIELD_DURATION_MS, COLOR_BG
)
from controls import NullControls
from entities import (
    Player, Platform, Collectible, Enemy, Projectile,
    SHIELD, EXTRA_LIFE
)
from logging_utils import log_event
from skins import DEFAULT_SKIN, resolve_skin
from spawner import Spawner
from ui import Hud

IDLE, RUNNING, OVER = "idle", "running", "over"


@dataclass
class Session:
    """Everything that is reset when a new run starts."""

    player: Player
    platforms: List[Platform] = field(default_factory=list)
    collectibles: List[Collectible] = field(default_factory=list)
    enemies: List[Enemy] = field(default_factory=list)
    projectiles: List[Projectile] = field(default_factory=list)
    score: int = 0
    lives: int = INITIAL_LIVES


# ──────────────────────────────────────────────────────────────
# Main Game class
# ──────────────────────────────────────────────────────────────
class Game:
    def __init__(self, clock: Optional[Callable[[], int]] = None, status=None,
                 spawner: Optional[Spawner] = None, controls=None,
                 width: int = WIDTH, height: int = HEIGHT,
                 skin_id: str = DEFAULT_SKIN):
        self.width = width
        self.height = height
        self.clock = clock if clock is not None else pygame.time.get_ticks
        self.status = status if status is not None else Hud(width, height)
        self.spawner = spawner if spawner is not None else Spawner(width=width, height=height)
        self.controls = controls if controls is not None else NullControls()

        self.state = IDLE
        self.session: Optional[Session] = None
        self.high_score = 0
        self.current_skin = resolve_skin(skin_id)

    @property
    def is_running(self):
        return self.state == RUNNING

    # ──────────────────────────────────────────────────────
    # Lifecycle
    def init(self):
        """Build a fresh session and seed the world."""
        player = Player(self.current_skin, self.width, self.height)
        self.session = Session(player=player)
        self.spawner.seed_world(self.session, self.clock())
        self.state = RUNNING
        self.status.set_score(self.session.score)
        self.status.set_lives(self.session.lives)

    def start(self):
        """Start (or restart) a session. Ignored while one is running."""
        if self.is_running:
            return False
        log_event("Game", "start", previous=self.state)
        self.init()
        return True

    def end_game(self):
        if not self.is_running:
            return
        self.state = OVER
        score = self.session.score
        if score > self.high_score:
            self.high_score = score
        log_event("Game", "end_game", score=score, high_score=self.high_score)
        self.status.on_game_over(score)

    def set_skin(self, skin_id):
        self.current_skin = resolve_skin(skin_id)
        if self.session is not None and self.is_running:
            self.session.player.set_skin(self.current_skin)

    # ──────────────────────────────────────────────────────
    # Gameplay helpers
    def lose_life(self):
        s = self.session
        s.lives -= 1
        self.status.set_lives(s.lives)
        log_event("Game", "lose_life", lives=s.lives)
        if s.lives <= 0:
            self.end_game()

    def _apply_pickup(self, collectible, now):
        s = self.session
        if collectible.kind == SHIELD:
            s.player.activate_shield(SHIELD_DURATION_MS, now)
        elif collectible.kind == EXTRA_LIFE:
            s.lives += 1
            self.status.set_lives(s.lives)
        log_event("Game", "pickup", kind=collectible.kind, lives=s.lives)

    def _replace_platform(self, platform, now):
        s = self.session
        s.platforms.remove(platform)
        s.score += POINTS_PER_PLATFORM
        self.status.set_score(s.score)
        log_event("Game", "replace_platform", score=s.score)
        self.spawner.create_platform(s, now)

    # ──────────────────────────────────────────────────────
    # Update loop
    def update(self):
        """Advance the simulation by one tick."""
        if not self.is_running:
            return
        now = self.clock()
        s = self.session
        player = s.player

        player.update(self.controls.moving_left(), self.controls.moving_right(),
                      s.platforms, self.width)
        if not player.is_alive(self.height):
            self.end_game()
            return
        # expire the shield window so the glow stops on time
        player.is_invincible(now)

        # Collectibles
        for c in s.collectibles[:]:
            c.update(player, self.height)
            if c.check_collision(player):
                c.collect()
                self._apply_pickup(c, now)
                s.collectibles.remove(c)
            elif c.is_off_screen(self.height):
                s.collectibles.remove(c)

        # Enemies
        for e in s.enemies[:]:
            e.update(player, self.width, self.height)
            if e.should_shoot(now):
                s.projectiles.append(e.shoot(player))
            if e.check_collision(player) and not player.is_invincible(now):
                s.enemies.remove(e)
                self.lose_life()
                if not self.is_running:
                    return
            elif e.is_off_screen(self.height):
                s.enemies.remove(e)

        # Projectiles
        for pr in s.projectiles[:]:
            pr.update(player, self.height)
            if pr.check_collision(player) and not player.is_invincible(now):
                s.projectiles.remove(pr)
                self.lose_life()
                if not self.is_running:
                    return
            elif pr.is_off_screen(self.width, self.height):
                s.projectiles.remove(pr)

        # Platforms – replacements are appended after the snapshot
        for plat in s.platforms[:]:
            plat.update(player, self.height)
            if plat.is_off_screen(self.height):
                self._replace_platform(plat, now)

    def frame(self, surf=None):
        """One scheduled tick: simulate, then render.

        Returns False once the session is no longer running so the host
        stops rescheduling.
        """
        if not self.is_running:
            return False
        self.update()
        if surf is not None:
            self.draw(surf)
        return self.is_running

    # ──────────────────────────────────────────────────────
    # Draw
    def draw_touch_indicators(self, surf):
        touch = self.controls.touch_state()
        cx = self.width // 2
        if touch["active"] and touch["direction"] in ("left", "right"):
            shade = pygame.Surface((cx, self.height), pygame.SRCALPHA)
            shade.fill((255, 255, 255, 25))
            surf.blit(shade, (0 if touch["direction"] == "left" else cx, 0))
        for y in range(0, self.height, 10):
            pygame.draw.line(surf, (60, 60, 80), (cx, y), (cx, y + 5))

    def draw(self, surf):
        surf.fill(COLOR_BG)
        self.draw_touch_indicators(surf)
        if self.session is None:
            return
        s = self.session
        for plat in s.platforms:
            plat.draw(surf)
        for c in s.collectibles:
            c.draw(surf)
        for e in s.enemies:
            e.draw(surf)
        for pr in s.projectiles:
            pr.draw(surf)
        s.player.draw(surf)
