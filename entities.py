# entities.py

# re‑export every entity kind

from entities_utils import (
    star_polygon,
    heart_polygon,
    check_collision,
    lands_on
)

from entities_player import Player

from entities_platform import Platform

from entities_pickups import (
    Collectible,
    SHIELD,
    EXTRA_LIFE
)

from entities_enemies import Enemy

from entities_projectile import Projectile
