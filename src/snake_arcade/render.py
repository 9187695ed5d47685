# render.py
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import pygame  # type: ignore

from .config import CELL_SIZE, UP, DOWN, LEFT, RIGHT, Direction, Theme
from .game import BODY, EMPTY, FOOD, HEAD, Snapshot, Status, board

PAD = 16
GAP = 2
HEADER_H = 64
STATUS_H = 36
BUTTON_H = 40
PAD_KEY = 44

STATUS_MESSAGES = {
    Status.IDLE: "Press any arrow key or click Start!",
    Status.RUNNING: "Gobble up those juicy apples!",
    Status.OVER: "Game Over! Click Restart to play again",
    Status.WON: "You filled the board! Click Restart",
}


# ---------- Layout ----------
@dataclass
class Layout:
    """Screen geometry; pure pygame.Rect math, no display needed."""
    size: Tuple[int, int]
    header: pygame.Rect
    status: pygame.Rect
    board: pygame.Rect
    restart: pygame.Rect
    start: pygame.Rect
    dpad: Dict[Direction, pygame.Rect]
    cell_size: int


def make_layout(grid_size: int, cell_size: int = CELL_SIZE) -> Layout:
    board_px = grid_size * cell_size
    width = board_px + 2 * PAD
    y = PAD
    header = pygame.Rect(PAD, y, board_px, HEADER_H)
    y = header.bottom + PAD // 2
    status = pygame.Rect(PAD, y, board_px, STATUS_H)
    y = status.bottom + PAD // 2
    board_rect = pygame.Rect(PAD, y, board_px, board_px)
    y = board_rect.bottom + PAD
    half = (board_px - PAD) // 2
    restart = pygame.Rect(PAD, y, half, BUTTON_H)
    start = pygame.Rect(restart.right + PAD, y, half, BUTTON_H)
    y = restart.bottom + PAD

    # direction pad: three columns, up on top, left/down/right below
    cx = width // 2
    step = PAD_KEY + GAP * 2
    dpad = {
        UP: pygame.Rect(cx - PAD_KEY // 2, y, PAD_KEY, PAD_KEY),
        LEFT: pygame.Rect(cx - PAD_KEY // 2 - step, y + step, PAD_KEY, PAD_KEY),
        DOWN: pygame.Rect(cx - PAD_KEY // 2, y + step, PAD_KEY, PAD_KEY),
        RIGHT: pygame.Rect(cx - PAD_KEY // 2 + step, y + step, PAD_KEY, PAD_KEY),
    }
    height = dpad[DOWN].bottom + PAD
    return Layout((width, height), header, status, board_rect, restart, start, dpad, cell_size)


def hit_direction(layout: Layout, pos: Tuple[int, int]) -> Optional[Direction]:
    for direction, rect in layout.dpad.items():
        if rect.collidepoint(pos):
            return direction
    return None


# ---------- Draw ----------
def _cell_colors(theme: Theme):
    return {EMPTY: theme.empty, BODY: theme.body, HEAD: theme.head, FOOD: theme.food}


def draw_cell(screen: pygame.Surface, layout: Layout, gx: int, gy: int, color) -> None:
    cs = layout.cell_size
    rect = pygame.Rect(layout.board.x + gx * cs + GAP // 2,
                       layout.board.y + gy * cs + GAP // 2,
                       cs - GAP, cs - GAP)
    pygame.draw.rect(screen, color, rect, border_radius=3)


def _button(screen, font, rect, label, theme: Theme) -> None:
    pygame.draw.rect(screen, theme.button, rect, border_radius=8)
    txt = font.render(label, True, theme.button_text)
    screen.blit(txt, txt.get_rect(center=rect.center))


def draw_game(screen: pygame.Surface, font: pygame.font.Font, layout: Layout,
              theme: Theme, snap: Snapshot) -> None:
    screen.fill(theme.background)

    # score / best
    pygame.draw.rect(screen, theme.panel, layout.header, border_radius=10)
    half = layout.header.width // 2
    for i, (label, value) in enumerate((("SCORE", snap.score), ("BEST", snap.high_score))):
        x = layout.header.x + i * half + PAD
        screen.blit(font.render(label, True, theme.muted), (x, layout.header.y + 8))
        screen.blit(font.render(str(value), True, theme.text), (x, layout.header.y + 32))

    # status banner
    pygame.draw.rect(screen, theme.status[snap.status.value], layout.status, border_radius=8)
    msg = font.render(STATUS_MESSAGES[snap.status], True, theme.button_text)
    screen.blit(msg, msg.get_rect(center=layout.status.center))

    # board
    pygame.draw.rect(screen, theme.board, layout.board.inflate(GAP * 4, GAP * 4), border_radius=6)
    colors = _cell_colors(theme)
    grid = board(snap, layout.board.width // layout.cell_size)
    for gy, row in enumerate(grid):
        for gx, kind in enumerate(row):
            draw_cell(screen, layout, gx, gy, colors[int(kind)])

    # buttons
    _button(screen, font, layout.restart, "Restart", theme)
    if snap.status is Status.IDLE:
        _button(screen, font, layout.start, "Start", theme)

    arrows = {UP: "^", DOWN: "v", LEFT: "<", RIGHT: ">"}
    for direction, rect in layout.dpad.items():
        _button(screen, font, rect, arrows[direction], theme)
