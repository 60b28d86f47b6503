# entities_utils.py

import math


def star_polygon(center, outer_radius, inner_radius, spikes, rotation=0):
    cx, cy = center
    pts = []
    for i in range(2 * spikes):
        angle = math.pi * i / spikes + rotation
        r = outer_radius if (i % 2 == 0) else inner_radius
        pts.append((cx + r * math.cos(angle),
                    cy + r * math.sin(angle)))
    return pts


def heart_polygon(center, size, steps=24):
    """Heart outline used for the extra-life pickup."""
    cx, cy = center
    scale = size / 34.0
    pts = []
    for i in range(steps):
        t = 2 * math.pi * i / steps
        x = 16 * math.sin(t) ** 3
        y = 13 * math.cos(t) - 5 * math.cos(2*t) - 2 * math.cos(3*t) - math.cos(4*t)
        pts.append((cx + x * scale, cy - y * scale))
    return pts


def check_collision(a, b):
    """Return True if the axis-aligned boxes of a and b overlap.

    Both objects expose x, y (top-left), width and height. Touching edges
    do not count as overlap.
    """
    return (
        a.x + a.width > b.x and
        a.x < b.x + b.width and
        a.y + a.height > b.y and
        a.y < b.y + b.height
    )


def lands_on(player, platform):
    """True if the player's bottom edge is inside the platform's top region.

    The bottom edge must lie strictly between the platform's top and bottom
    edges with the horizontal spans overlapping. Falling is checked by the
    caller.
    """
    bottom = player.y + player.height
    return (
        player.x + player.width > platform.x and
        player.x < platform.x + platform.width and
        platform.y < bottom < platform.y + platform.height
    )
