"""
Tests for the pygame front end: key mapping, layout, event routing, drawing.
"""

import pygame
import pytest

from snake_arcade.config import CANDY, MIDNIGHT, UP, DOWN, LEFT, RIGHT
from snake_arcade.controls import direction_for_key
from snake_arcade.game import SequenceCellSource, SnakeGame, Status
from snake_arcade.main import handle_event, parse_args
from snake_arcade.render import draw_game, hit_direction, make_layout
from snake_arcade.timer import TICK_EVENT, TickTimer


@pytest.fixture
def game():
    return SnakeGame(source=SequenceCellSource([(0, 0)]))


@pytest.fixture
def layout():
    return make_layout(12, 32)


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


class TestControls:
    """Tests for key mapping."""

    def test_arrow_keys(self):
        assert direction_for_key(pygame.K_UP) == UP
        assert direction_for_key(pygame.K_DOWN) == DOWN
        assert direction_for_key(pygame.K_LEFT) == LEFT
        assert direction_for_key(pygame.K_RIGHT) == RIGHT

    def test_other_keys_ignored(self):
        assert direction_for_key(pygame.K_a) is None


class TestLayout:
    """Tests for screen geometry."""

    def test_board_size(self, layout):
        assert layout.board.size == (384, 384)
        assert layout.size[0] == 384 + 32

    def test_everything_fits(self, layout):
        screen = pygame.Rect((0, 0), layout.size)
        for rect in [layout.header, layout.status, layout.board,
                     layout.restart, layout.start, *layout.dpad.values()]:
            assert screen.contains(rect)

    def test_dpad_does_not_overlap(self, layout):
        rects = list(layout.dpad.values())
        for i, a in enumerate(rects):
            for b in rects[i + 1:]:
                assert not a.colliderect(b)

    def test_hit_direction(self, layout):
        for direction, rect in layout.dpad.items():
            assert hit_direction(layout, rect.center) == direction
        assert hit_direction(layout, layout.board.center) is None


class TestHandleEvent:
    """Tests for routing pygame events to the game."""

    def test_quit(self, game, layout):
        assert handle_event(pygame.event.Event(pygame.QUIT), game, layout) is False
        assert handle_event(key(pygame.K_ESCAPE), game, layout) is False

    def test_arrow_starts_game(self, game, layout):
        assert handle_event(key(pygame.K_LEFT), game, layout)
        assert game.status is Status.RUNNING
        assert game.state.direction == LEFT

    def test_tick_event_moves(self, game, layout):
        game.start()
        handle_event(pygame.event.Event(TICK_EVENT), game, layout)
        assert game.state.snake == ((6, 5),)

    def test_unrelated_key_ignored(self, game, layout):
        before = game.state
        handle_event(key(pygame.K_a), game, layout)
        assert game.state is before

    def test_start_and_restart_buttons(self, game, layout):
        handle_event(click(layout.start.center), game, layout)
        assert game.status is Status.RUNNING
        handle_event(click(layout.restart.center), game, layout)
        assert game.status is Status.IDLE

    def test_start_key(self, game, layout):
        handle_event(key(pygame.K_RETURN), game, layout)
        assert game.status is Status.RUNNING

    def test_restart_key(self, game, layout):
        game.start()
        game.tick()
        handle_event(key(pygame.K_r), game, layout)
        assert game.status is Status.IDLE
        assert game.state.snake == ((6, 6),)

    def test_queued_tick_from_previous_game_is_dropped(self, game, layout):
        calls = []
        timer = TickTimer(set_timer=lambda event, millis: calls.append(event))
        game.start()
        timer.sync(game.state)
        stale = pygame.event.Event(TICK_EVENT, generation=timer.generation)

        for event in (key(pygame.K_r), key(pygame.K_LEFT), stale):
            handle_event(event, game, layout, timer)
            timer.sync(game.state)

        assert game.status is Status.RUNNING
        assert game.state.snake == ((6, 6),)

        fresh = pygame.event.Event(TICK_EVENT, generation=timer.generation)
        handle_event(fresh, game, layout, timer)
        assert game.state.snake == ((5, 6),)

    def test_dpad_tap(self, game, layout):
        game.start()
        handle_event(click(layout.dpad[RIGHT].center), game, layout)
        assert game.state.pending == RIGHT


class TestDraw:
    """Smoke test: both themes draw every status without error."""

    @pytest.mark.parametrize("theme", [CANDY, MIDNIGHT])
    def test_draw_all_statuses(self, game, layout, theme):
        pygame.font.init()
        try:
            font = pygame.font.Font(None, 24)
            screen = pygame.Surface(layout.size)
            draw_game(screen, font, layout, theme, game.snapshot())
            game.start()
            draw_game(screen, font, layout, theme, game.snapshot())
            while game.status is Status.RUNNING:
                game.tick()
            draw_game(screen, font, layout, theme, game.snapshot())

            hx, hy = game.state.snake[0]
            cs = layout.cell_size
            center = (layout.board.x + hx * cs + cs // 2, layout.board.y + hy * cs + cs // 2)
            assert tuple(screen.get_at(center))[:3] == theme.head
        finally:
            pygame.font.quit()


class TestArgs:
    """Tests for the command line."""

    def test_defaults(self):
        args = parse_args([])
        assert args.theme == "candy"
        assert args.seed is None
        assert not args.no_save

    def test_options(self):
        args = parse_args(["--theme", "midnight", "--seed", "4", "--no-save"])
        assert args.theme == "midnight"
        assert args.seed == 4
        assert args.no_save

    def test_scores_file_and_no_save_exclusive(self):
        with pytest.raises(SystemExit):
            parse_args(["--no-save", "--scores-file", "x.json"])
