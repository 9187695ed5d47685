# game.py
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple
import logging
import random

import numpy as np  # type: ignore

from .config import CFG, DIRECTIONS, Cell, Config, Direction

logger = logging.getLogger(__name__)


class SnakeError(Exception):
    """Base class for game errors."""


class BoardFull(SnakeError):
    """Raised when no free cell is left for food."""


class Status(Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"
    WON = "won"


# Cell kinds, in rendering priority order
EMPTY, BODY, HEAD, FOOD = 0, 1, 2, 3


# ---------- Cell sources ----------
class RandomCellSource:
    """Uniform random cells from a (optionally seeded) random.Random."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def next_cell(self, grid_size: int) -> Cell:
        return (self.rng.randrange(grid_size), self.rng.randrange(grid_size))


class SequenceCellSource:
    """Replays a fixed list of cells, cycling when exhausted."""

    def __init__(self, cells: Iterable[Cell]):
        self.cells = list(cells)
        if not self.cells:
            raise ValueError("SequenceCellSource needs at least one cell")
        self._i = 0

    def next_cell(self, grid_size: int) -> Cell:
        cell = self.cells[self._i % len(self.cells)]
        self._i += 1
        return cell


# ---------- Helpers ----------
def is_perpendicular(a: Direction, b: Direction) -> bool:
    """Only 90° turns: same-axis requests (repeat or reversal) are rejected."""
    return a[0] * b[0] + a[1] * b[1] == 0


def in_bounds(cell: Cell, grid_size: int) -> bool:
    x, y = cell
    return 0 <= x < grid_size and 0 <= y < grid_size


def advance(
    snake: Sequence[Cell], direction: Direction, food: Optional[Cell], grid_size: int = CFG.grid_size
) -> Optional[Tuple[Tuple[Cell, ...], bool]]:
    """
    Move the snake one cell along `direction`.

    Returns (new_snake, ate), or None when the new head hits a wall or any
    current snake cell. The tail only stays in place when food is eaten.
    """
    hx, hy = snake[0]
    head = (hx + direction[0], hy + direction[1])

    if not in_bounds(head, grid_size) or head in snake:
        return None

    if head == food:
        return (head,) + tuple(snake), True
    return (head,) + tuple(snake[:-1]), False


def place_food(snake: Sequence[Cell], source, grid_size: int = CFG.grid_size) -> Cell:
    """Rejection-sample a free cell from `source`. Raises BoardFull if there is none."""
    occupied = set(snake)
    if len(occupied) >= grid_size * grid_size:
        raise BoardFull(f"snake covers all {grid_size * grid_size} cells")
    while True:
        cell = source.next_cell(grid_size)
        if in_bounds(cell, grid_size) and cell not in occupied:
            return cell


# ---------- State ----------
@dataclass(frozen=True)
class GameState:
    snake: Tuple[Cell, ...]        # head at index 0
    food: Optional[Cell]           # None once the board is full
    direction: Direction           # committed at the last tick
    pending: Direction             # applied at the next tick
    score: int
    high_score: int
    speed_ms: int                  # current tick interval
    status: Status

    @property
    def head(self) -> Cell:
        return self.snake[0]


def new_game_state(high_score: int = 0, cfg: Config = CFG) -> GameState:
    return GameState(
        snake=tuple(cfg.initial_snake),
        food=cfg.initial_food,
        direction=cfg.initial_direction,
        pending=cfg.initial_direction,
        score=0,
        high_score=high_score,
        speed_ms=cfg.initial_speed_ms,
        status=Status.IDLE,
    )


# ---------- Transitions ----------
def step(state: GameState, source, cfg: Config = CFG) -> GameState:
    """
    Advance the game by one tick and return the whole next state.

    Not running -> unchanged. Collision -> OVER with the snake left as is.
    Eating updates score, high score, speed and food together; if no cell
    is left for the next food the game is WON.
    """
    if state.status is not Status.RUNNING:
        return state

    direction = state.pending
    moved = advance(state.snake, direction, state.food, cfg.grid_size)
    if moved is None:
        return replace(state, direction=direction, status=Status.OVER)

    snake, ate = moved
    if not ate:
        return replace(state, snake=snake, direction=direction)

    score = state.score + cfg.food_reward
    nxt = replace(
        state,
        snake=snake,
        direction=direction,
        score=score,
        high_score=max(state.high_score, score),
        speed_ms=max(cfg.min_speed_ms, state.speed_ms - cfg.speed_step_ms),
    )
    try:
        food = place_food(snake, source, cfg.grid_size)
    except BoardFull:
        return replace(nxt, food=None, status=Status.WON)
    return replace(nxt, food=food)


def request_direction(state: GameState, direction: Direction) -> GameState:
    """
    Apply a directional input.

    IDLE starts the game heading `direction`. RUNNING queues the turn if it
    is perpendicular to the committed direction (last request wins).
    OVER/WON and unknown directions are ignored.
    """
    if direction not in DIRECTIONS:
        return state
    if state.status is Status.IDLE:
        return replace(state, direction=direction, pending=direction, status=Status.RUNNING)
    if state.status is Status.RUNNING and is_perpendicular(direction, state.direction):
        return replace(state, pending=direction)
    return state


# ---------- Rendering boundary ----------
@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Cell, ...]
    food: Optional[Cell]
    score: int
    high_score: int
    status: Status


def classify_cell(cell: Cell, snake: Sequence[Cell], food: Optional[Cell]) -> int:
    """food > head > body > empty."""
    if food is not None and cell == food:
        return FOOD
    if snake and cell == snake[0]:
        return HEAD
    if cell in snake:
        return BODY
    return EMPTY


def board(snap: Snapshot, grid_size: int = CFG.grid_size) -> np.ndarray:
    """Cell kinds as a (rows=y, cols=x) uint8 grid."""
    return np.array(
        [[classify_cell((x, y), snap.snake, snap.food) for x in range(grid_size)]
         for y in range(grid_size)],
        dtype=np.uint8,
    )


# ---------- Owner ----------
class SnakeGame:
    """
    Owns one GameState and routes every mutation through the transitions
    above, swapping in the next state in one assignment.
    """

    def __init__(self, cfg: Config = CFG, source=None, store=None):
        self.cfg = cfg
        self.source = source if source is not None else RandomCellSource(cfg.seed)
        self.store = store
        high = store.load_high_score() if store is not None else 0
        self.state = new_game_state(high, cfg)

    @property
    def status(self) -> Status:
        return self.state.status

    def _apply(self, nxt: GameState) -> GameState:
        prev, self.state = self.state, nxt
        if nxt.status is not prev.status:
            if nxt.status is Status.RUNNING:
                logger.info("Game started heading %s", nxt.direction)
            elif nxt.status is Status.OVER:
                logger.info("Game over: score=%d length=%d", nxt.score, len(nxt.snake))
            elif nxt.status is Status.WON:
                logger.info("Board filled: score=%d", nxt.score)
        if nxt.high_score > prev.high_score:
            logger.info("New high score %d", nxt.high_score)
            if self.store is not None:
                self.store.save_high_score(nxt.high_score)
        return nxt

    def tick(self) -> GameState:
        return self._apply(step(self.state, self.source, self.cfg))

    def request_direction(self, direction: Direction) -> bool:
        """Returns True if the request changed the state."""
        prev = self.state
        return self._apply(request_direction(prev, direction)) is not prev

    def restart(self) -> GameState:
        return self._apply(new_game_state(self.state.high_score, self.cfg))

    def start(self) -> GameState:
        self.restart()
        return self._apply(replace(self.state, status=Status.RUNNING))

    def snapshot(self) -> Snapshot:
        s = self.state
        return Snapshot(snake=s.snake, food=s.food, score=s.score,
                        high_score=s.high_score, status=s.status)

    def board(self) -> np.ndarray:
        return board(self.snapshot(), self.cfg.grid_size)

