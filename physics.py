"""Per-tick physics and the shared world-scroll rule.

Integration is one symplectic Euler step per tick with no delta-time
scaling: gravity is added to the vertical velocity first and the position
then advances by the new velocity. Frame-rate variance therefore changes
perceived speed; the host caps the loop at ``FPS``.
"""

from config import MAX_HEIGHT, SCROLL_BAND


def apply_gravity(body):
    body.vy += body.gravity


def step_vertical(body):
    body.y += body.vy


def integrate(body):
    body.x += body.vx
    body.y += body.vy


def clamp_ceiling(body, ceiling=MAX_HEIGHT):
    """Pin y to the ceiling without touching velocity."""
    if body.y < ceiling:
        body.y = ceiling


def horizontal_velocity(moving_left, moving_right, speed):
    """Left wins when both signals are held."""
    if moving_left:
        return -speed
    if moving_right:
        return speed
    return 0


def wrap_horizontal(x, entity_width, world_width):
    """Teleport across the side edges.

    Reaching the right edge reappears at -entity_width, passing
    -entity_width reappears at the right edge. The left test is strict so
    a body parked on either edge does not flip back and forth.
    """
    if x >= world_width:
        return -entity_width
    if x < -entity_width:
        return world_width
    return x


def should_scroll(player, height):
    return player.y < height * SCROLL_BAND and player.vy < 0


def scroll_with_player(entity, player, height):
    """Shift a non-player entity down by the player's upward speed.

    Every entity kind calls this from its own update with the player's
    current state, so the shift is identical across kinds.
    """
    if should_scroll(player, height):
        entity.y -= player.vy
        return True
    return False
