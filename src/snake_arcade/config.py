# config.py
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

Cell = Tuple[int, int]
Direction = Tuple[int, int]
Color = Tuple[int, int, int]

# ----- Grid -----
GRID_SIZE = 12
CELL_SIZE = 32

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Starting layout -----
INITIAL_SNAKE: Tuple[Cell, ...] = ((6, 6),)
INITIAL_FOOD: Cell = (3, 3)
INITIAL_DIRECTION: Direction = UP

# ----- Scoring & pacing (what you'd tweak for difficulty) -----
FOOD_REWARD = 10
INITIAL_SPEED_MS = 250
SPEED_STEP_MS = 5
MIN_SPEED_MS = 120

# ----- Persistence -----
HIGH_SCORE_KEY = "snakeHighScore"
DEFAULT_SCORES_FILE = "~/.snake_arcade/scores.json"


@dataclass
class Config:
    grid_size: int = GRID_SIZE
    initial_snake: Tuple[Cell, ...] = INITIAL_SNAKE
    initial_food: Cell = INITIAL_FOOD
    initial_direction: Direction = INITIAL_DIRECTION
    food_reward: int = FOOD_REWARD
    initial_speed_ms: int = INITIAL_SPEED_MS
    speed_step_ms: int = SPEED_STEP_MS
    min_speed_ms: int = MIN_SPEED_MS
    seed: Optional[int] = None

    def __post_init__(self):
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be >= 2, got {self.grid_size}")
        if self.min_speed_ms <= 0 or self.speed_step_ms < 0:
            raise ValueError("speeds must be positive")
        if self.min_speed_ms > self.initial_speed_ms:
            raise ValueError("min_speed_ms must not exceed initial_speed_ms")
        if self.initial_direction not in DIRECTIONS:
            raise ValueError(f"Invalid direction {self.initial_direction}")
        if not self.initial_snake:
            raise ValueError("initial_snake must have at least one cell")
        if len(set(self.initial_snake)) != len(self.initial_snake):
            raise ValueError("initial_snake must not repeat cells")
        cells = list(self.initial_snake) + [self.initial_food]
        for x, y in cells:
            if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
                raise ValueError(f"Cell {(x, y)} is outside the grid")
        if self.initial_food in self.initial_snake:
            raise ValueError("initial_food must not lie on the snake")


CFG = Config()


# ----- Themes -----
@dataclass(frozen=True)
class Theme:
    name: str
    background: Color
    panel: Color
    board: Color
    empty: Color
    body: Color
    head: Color
    food: Color
    text: Color
    muted: Color
    button: Color
    button_text: Color
    status: Dict[str, Color] = field(default_factory=dict)


# Bright purple and pink look (default).
CANDY = Theme(
    name="candy",
    background=(147, 51, 234),
    panel=(250, 245, 255),
    board=(31, 41, 55),
    empty=(75, 85, 99),
    body=(110, 231, 183),
    head=(34, 197, 94),
    food=(239, 68, 68),
    text=(88, 28, 135),
    muted=(75, 85, 99),
    button=(124, 58, 237),
    button_text=(255, 255, 255),
    status={
        "idle": (99, 102, 241),
        "running": (16, 185, 129),
        "over": (236, 72, 153),
        "won": (234, 179, 8),
    },
)

# Dark, low-contrast variant.
MIDNIGHT = Theme(
    name="midnight",
    background=(20, 20, 24),
    panel=(32, 32, 40),
    board=(12, 12, 16),
    empty=(36, 36, 44),
    body=(60, 160, 60),
    head=(80, 200, 80),
    food=(200, 70, 70),
    text=(220, 220, 230),
    muted=(150, 150, 165),
    button=(60, 60, 76),
    button_text=(220, 220, 230),
    status={
        "idle": (70, 70, 120),
        "running": (40, 110, 60),
        "over": (140, 40, 50),
        "won": (150, 120, 30),
    },
)

THEMES = {t.name: t for t in (CANDY, MIDNIGHT)}
