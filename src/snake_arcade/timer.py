# timer.py
from typing import Callable, Optional
import logging

import pygame  # type: ignore

from .game import GameState, Status

logger = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class TickTimer:
    """
    Periodic pygame timer that posts TICK_EVENT every `interval_ms`.

    Use as a context manager so the timer is always released on exit.
    Every arm bumps `generation` and stamps it on the posted events, so ticks
    still queued from an earlier arm can be told apart with `is_current()`.
    `sync()` keeps it in step with the game: armed at the state's speed while
    running, re-armed when that speed changes, disarmed otherwise.
    """

    def __init__(self, event_type: int = TICK_EVENT,
                 set_timer: Optional[Callable] = None):
        self.event_type = event_type
        self._set_timer = set_timer or pygame.time.set_timer
        self.interval_ms: Optional[int] = None
        self.generation = 0

    @property
    def active(self) -> bool:
        return self.interval_ms is not None

    def arm(self, interval_ms: int) -> None:
        if interval_ms == self.interval_ms:
            return
        self.generation += 1
        # set_timer replaces any timer already bound to this event type
        event = pygame.event.Event(self.event_type, generation=self.generation)
        self._set_timer(event, interval_ms)
        logger.debug("Tick timer armed at %d ms (generation %d)", interval_ms, self.generation)
        self.interval_ms = interval_ms

    def disarm(self) -> None:
        if self.interval_ms is None:
            return
        self._set_timer(self.event_type, 0)
        logger.debug("Tick timer stopped")
        self.interval_ms = None

    def is_current(self, event) -> bool:
        """True for a tick posted by the current arm of this timer."""
        return self.active and getattr(event, "generation", None) == self.generation

    def sync(self, state: GameState) -> None:
        if state.status is Status.RUNNING:
            self.arm(state.speed_ms)
        else:
            self.disarm()

    def __enter__(self) -> "TickTimer":
        return self

    def __exit__(self, *exc) -> None:
        self.disarm()
