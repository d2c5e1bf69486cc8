"""
Driver loop around the pure transition function.

The driver owns the only mutable piece of the system: a reference to
the current snapshot plus a FIFO of pending events. Events are applied
strictly one at a time; renderers see each resulting snapshot, and the
leaderboard is told about every finished game exactly once.
"""

import logging
import random
import time
from collections import deque
from typing import Any, Callable, Deque, Dict, Iterable, Optional

import schedule

from ..data_access.high_scores import Leaderboard
from ..domain.events import Event, MoveSnake, ResetGame
from ..domain.game_state import GameConfig, GameModel
from ..engine import update
from ..errors import GridFullError
from ..initializer import init
from ..players.base import Player
from ..players.keyboard import map_key

logger = logging.getLogger(__name__)

SCHEDULER_LOOP_SLEEP_SECONDS = 0.01

Renderer = Callable[[GameModel], None]


class GameDriver:
    """
    Manages:
      - The current snapshot
      - The pending event queue
      - Renderers notified after every applied event
      - Reporting finished games to the leaderboard
    """

    def __init__(
        self,
        config: GameConfig,
        rng: Optional[random.Random] = None,
        leaderboard: Optional[Leaderboard] = None,
        renderers: Iterable[Renderer] = (),
    ):
        self.rng = rng or random.Random()
        self.leaderboard = leaderboard
        self.renderers = list(renderers)
        self.queue: Deque[Event] = deque()
        self.state: GameModel = init(config, self.rng)
        self.ticks = 0
        self.won = False
        self.rank: Optional[int] = None
        self._recorded = False

    def submit(self, event: Event) -> None:
        self.queue.append(event)

    def handle_key(self, key: str) -> bool:
        """Queue the event bound to key. Returns False for unbound keys."""
        event = map_key(key)
        if event is None:
            return False
        self.submit(event)
        return True

    def tick(self) -> None:
        self.ticks += 1
        self.submit(MoveSnake())

    def pump(self) -> GameModel:
        """Apply every queued event in arrival order and return the latest snapshot."""
        while self.queue:
            self._apply(self.queue.popleft())
        return self.state

    def _apply(self, event: Event) -> None:
        if isinstance(event, ResetGame):
            self.won = False
            self.rank = None
            self._recorded = False

        try:
            self.state = update(self.state, event, self.rng)
        except GridFullError as exc:
            logger.info("The snake filled the board with score %d", exc.state.score)
            self.state = exc.state
            self.won = True

        for render in self.renderers:
            render(self.state)

        if self.state.is_over and not self._recorded:
            self._record_game_over()

    def _record_game_over(self) -> None:
        self._recorded = True
        score, length = self.state.score, self.state.snake.length
        logger.info("Game over: score=%d length=%d won=%s", score, length, self.won)
        if self.leaderboard is None:
            return
        try:
            self.rank = self.leaderboard.record(score, length)
        except Exception:
            logger.exception("Could not record high score %d", score)
            raise

    def _step(self, player: Optional[Player]) -> None:
        if player is not None:
            event = player.get_event(self.state)
            if event is not None:
                self.submit(event)
        self.tick()

    def run(self, player: Optional[Player] = None, max_ticks: int = 1000) -> Dict[str, Any]:
        """
        Play headlessly: one player decision and one tick per iteration,
        until the game ends or max_ticks ticks have been issued.
        """
        for _ in range(max_ticks):
            if self.state.is_over:
                break
            self._step(player)
            self.pump()
        return self.summary()

    def run_realtime(
        self,
        player: Optional[Player] = None,
        max_seconds: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> Dict[str, Any]:
        """
        Play against the wall clock, ticking `speed` times per second.

        The tick job is rescheduled whenever a ChangeSpeed event changes
        the speed. Stops when the game ends or after max_seconds.
        """
        scheduler = schedule.Scheduler()
        speed = self.state.speed
        job = scheduler.every(1.0 / speed).seconds.do(self._step, player)
        deadline = time.monotonic() + max_seconds if max_seconds is not None else None

        try:
            while not self.state.is_over:
                if deadline is not None and time.monotonic() >= deadline:
                    logger.info("Stopping after %.1f seconds", max_seconds)
                    break
                scheduler.run_pending()
                self.pump()
                if self.state.speed != speed:
                    speed = self.state.speed
                    scheduler.cancel_job(job)
                    job = scheduler.every(1.0 / speed).seconds.do(self._step, player)
                    logger.debug("Tick interval changed to %.3fs", 1.0 / speed)
                sleep(SCHEDULER_LOOP_SLEEP_SECONDS)
        finally:
            scheduler.clear()

        return self.summary()

    def summary(self) -> Dict[str, Any]:
        return {
            "status": self.state.status.value,
            "score": self.state.score,
            "length": self.state.snake.length,
            "ticks": self.ticks,
            "won": self.won,
            "rank": self.rank,
        }
