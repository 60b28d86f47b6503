# entities_pickups.py
import math, pygame
from config          import HEIGHT, COLLECTIBLE_SIZE, COLOR_SHIELD, COLOR_EXTRA_LIFE
from entities_utils  import check_collision, star_polygon, heart_polygon
from physics         import scroll_with_player

SHIELD, EXTRA_LIFE = "shield", "extra_life"
KINDS = (SHIELD, EXTRA_LIFE)

# ------------------------------------------------------------
# Glow effect behind a pickup
# ------------------------------------------------------------
def _glow(surface, centre, radius, color):
    """Draw a faint ring behind the pickup."""
    glow_r = int(radius)
    temp = pygame.Surface((glow_r*2, glow_r*2), pygame.SRCALPHA)
    pygame.draw.circle(temp, (*color, 60), (glow_r, glow_r), glow_r)
    surface.blit(temp, (centre[0]-glow_r, centre[1]-glow_r))

# ------------------------------------------------------------
# Collectible sitting above a platform
# ------------------------------------------------------------
class Collectible:
    def __init__(self, x, y, kind=SHIELD):
        if kind not in KINDS:
            raise ValueError(f"unknown collectible kind: {kind!r}")
        self.x, self.y = x, y
        self.width = self.height = COLLECTIBLE_SIZE
        self.kind = kind
        self.collected = False
        self.animation_offset, self.animation_speed = 0.0, 0.1

    def update(self, player, height=HEIGHT):
        scroll_with_player(self, player, height)

    def check_collision(self, player):
        if self.collected:
            return False
        return check_collision(player, self)

    def collect(self):
        self.collected = True

    def is_off_screen(self, height=HEIGHT):
        return self.y > height

    def draw(self, surf):
        if self.collected:
            return
        self.animation_offset += self.animation_speed
        float_y = self.y + math.sin(self.animation_offset) * 3
        centre = (self.x + self.width/2, float_y + self.height/2)
        r = self.width / 2
        if self.kind == SHIELD:
            _glow(surf, centre, self.width, COLOR_SHIELD)
            pts = star_polygon(centre, r, r/2, 5, rotation=-math.pi/2)
            pygame.draw.polygon(surf, COLOR_SHIELD, pts)
            pygame.draw.circle(surf, (255,255,255), (int(centre[0]), int(centre[1])), int(r/4))
        else:
            _glow(surf, centre, self.width, COLOR_EXTRA_LIFE)
            pygame.draw.polygon(surf, COLOR_EXTRA_LIFE, heart_polygon(centre, self.width))
