# src/snake_arcade/__init__.py
"""Classic arcade Snake: a pure game core with a pygame front end."""

from .game import SnakeGame, GameState, Snapshot, Status, step, advance, place_food, request_direction

__all__ = [
    "SnakeGame",
    "GameState",
    "Snapshot",
    "Status",
    "step",
    "advance",
    "place_food",
    "request_direction",
]
