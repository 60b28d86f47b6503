# controls.py
# Keyboard and touch/mouse input folded into two movement signals.

import pygame

from config import WIDTH

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)


class Controls:
    """Tracks held keys and the active touch side.

    A touch (or held mouse button) on the left half of the play field
    counts as "moving left", the right half as "moving right".
    """

    def __init__(self, width=WIDTH):
        self.width = width
        self.keys = set()
        self.touch_active = False
        self.touch_direction = None  # "left" or "right"

    def handle_event(self, event, pos=None):
        """Feed one pygame event. ``pos`` overrides the event position
        for letterboxed windows."""
        if event.type == pygame.KEYDOWN:
            self.keys.add(event.key)
        elif event.type == pygame.KEYUP:
            self.keys.discard(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.touch_active = True
            self._update_direction((pos or event.pos)[0])
        elif event.type == pygame.MOUSEMOTION and self.touch_active:
            self._update_direction((pos or event.pos)[0])
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.release()
        elif event.type == pygame.FINGERDOWN:
            self.touch_active = True
            self._update_direction(event.x * self.width)
        elif event.type == pygame.FINGERMOTION:
            self._update_direction(event.x * self.width)
        elif event.type == pygame.FINGERUP:
            self.release()

    def release(self):
        self.touch_active = False
        self.touch_direction = None

    def _update_direction(self, x):
        self.touch_direction = "left" if x < self.width / 2 else "right"

    def moving_left(self):
        return (any(k in self.keys for k in LEFT_KEYS) or
                (self.touch_active and self.touch_direction == "left"))

    def moving_right(self):
        return (any(k in self.keys for k in RIGHT_KEYS) or
                (self.touch_active and self.touch_direction == "right"))

    def touch_state(self):
        return {"active": self.touch_active, "direction": self.touch_direction}


class NullControls:
    """No input held; used by headless sessions."""

    def moving_left(self):
        return False

    def moving_right(self):
        return False

    def touch_state(self):
        return {"active": False, "direction": None}
