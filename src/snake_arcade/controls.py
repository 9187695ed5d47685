# controls.py
from typing import Optional

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT, Direction

KEY_TO_DIRECTION = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}

RESTART_KEYS = (pygame.K_r,)
START_KEYS = (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE)
QUIT_KEYS = (pygame.K_ESCAPE,)


def direction_for_key(key: int) -> Optional[Direction]:
    """Arrow keys only; anything else maps to None and is ignored."""
    return KEY_TO_DIRECTION.get(key)
