# skins.py
# Cosmetic player skins. Visual only, no gameplay effect.

from logging_utils import log_event

SKINS = {
    "red": {
        "name": "Red",
        "body_color": (255, 107, 107),
        "eye_color": (255, 255, 255),
        "pupil_color": (0, 0, 0),
        "mouth_color": (0, 0, 0),
    },
    "black": {
        "name": "Black",
        "body_color": (44, 62, 80),
        "eye_color": (255, 255, 255),
        "pupil_color": (52, 152, 219),
        "mouth_color": (255, 255, 255),
    },
    "yellow": {
        "name": "Yellow",
        "body_color": (241, 196, 15),
        "eye_color": (255, 255, 255),
        "pupil_color": (0, 0, 0),
        "mouth_color": (230, 126, 34),
    },
    "blue": {
        "name": "Blue",
        "body_color": (52, 152, 219),
        "eye_color": (255, 255, 255),
        "pupil_color": (44, 62, 80),
        "mouth_color": (255, 255, 255),
    },
}

DEFAULT_SKIN = "red"

# Keyboard shortcut order (1-4)
SKIN_ORDER = ["red", "black", "yellow", "blue"]


def resolve_skin(skin_id):
    """Return a known skin id, falling back to DEFAULT_SKIN."""
    if skin_id in SKINS:
        return skin_id
    log_event("skins", "fallback", requested=skin_id, used=DEFAULT_SKIN)
    return DEFAULT_SKIN


def get_skin(skin_id):
    return SKINS[resolve_skin(skin_id)]
