"""
Tests for GameDriver - event queue, renderers and leaderboard reporting.
"""

from unittest.mock import Mock

from snakecore import GameConfig, GameStatus
from snakecore.data_access import InMemoryHighScoreStore, Leaderboard
from snakecore.domain import ChangeDirection, ChangeSpeed, Direction, MoveSnake, ResetGame, TogglePause
from snakecore.services import ConsoleRenderer, GameDriver, render_board, render_status

from helpers import LastChoiceRng, make_state


def make_driver(config, **kwargs):
    """Driver whose food always lands on the last empty cell, off the starting path."""
    return GameDriver(config, rng=LastChoiceRng(), **kwargs)


class TestQueue:
    """Events are applied one at a time in arrival order."""

    def test_submit_does_not_apply(self, config):
        driver = make_driver(config)
        before = driver.state
        driver.submit(MoveSnake())
        assert driver.state is before
        assert len(driver.queue) == 1

    def test_pump_applies_in_order(self, config):
        """UP then LEFT: the second turn is checked against UP, so it is accepted."""
        driver = make_driver(config)
        driver.submit(ChangeDirection(Direction.UP))
        driver.submit(ChangeDirection(Direction.LEFT))
        driver.submit(ChangeDirection(Direction.RIGHT))
        state = driver.pump()
        assert state.snake.direction is Direction.LEFT
        assert not driver.queue

    def test_tick_queues_a_move(self, config):
        driver = make_driver(config)
        driver.tick()
        assert driver.ticks == 1
        assert list(driver.queue) == [MoveSnake()]
        head = driver.state.snake.head
        driver.pump()
        assert driver.state.snake.head == (head.x - 1, head.y)

    def test_handle_key(self, config):
        driver = make_driver(config)
        assert driver.handle_key("W") is True
        assert driver.handle_key("x") is False
        assert list(driver.queue) == [ChangeDirection(Direction.UP)]


class TestRenderers:
    """Renderers observe every snapshot."""

    def test_renderer_called_after_each_event(self, config):
        renderer = Mock()
        driver = make_driver(config, renderers=[renderer])
        driver.submit(TogglePause())
        driver.submit(TogglePause())
        driver.submit(MoveSnake())
        driver.pump()
        assert renderer.call_count == 3
        assert renderer.call_args_list[0].args[0].status is GameStatus.PAUSED
        assert renderer.call_args_list[-1].args[0] is driver.state

    def test_console_renderer_skips_repeated_snapshot(self, config):
        stream = Mock()
        renderer = ConsoleRenderer(stream=stream)
        driver = make_driver(config, renderers=[renderer])
        driver.submit(ChangeDirection(Direction.RIGHT))  # reversal, state unchanged
        driver.submit(ChangeDirection(Direction.RIGHT))
        driver.pump()
        assert stream.write.called
        writes = stream.write.call_count
        driver.submit(ChangeDirection(Direction.RIGHT))
        driver.pump()
        assert stream.write.call_count == writes

    def test_render_board_includes_status(self, config):
        driver = make_driver(config)
        text = render_board(driver.state)
        assert text.endswith(render_status(driver.state))
        assert "Score: 0 | Length: 3 | Speed: 5 | RUNNING" in text


class TestLeaderboardReporting:
    """A finished game is recorded exactly once."""

    def test_run_until_wall(self, config):
        """Heading left from (2, 5), the third move leaves the grid."""
        leaderboard = Leaderboard(InMemoryHighScoreStore())
        driver = make_driver(config, leaderboard=leaderboard)
        result = driver.run(max_ticks=50)
        assert result == {
            "status": "GAME_OVER",
            "score": 0,
            "length": 3,
            "ticks": 3,
            "won": False,
            "rank": 1,
        }
        assert len(leaderboard.top()) == 1

    def test_events_after_game_over_do_not_record_again(self, config):
        leaderboard = Leaderboard(InMemoryHighScoreStore())
        driver = make_driver(config, leaderboard=leaderboard)
        driver.run(max_ticks=50)
        for _ in range(5):
            driver.tick()
        driver.submit(TogglePause())
        driver.pump()
        assert len(leaderboard.top()) == 1

    def test_reset_allows_a_new_record(self, config):
        leaderboard = Leaderboard(InMemoryHighScoreStore())
        driver = make_driver(config, leaderboard=leaderboard)
        driver.run(max_ticks=50)
        driver.submit(ResetGame())
        driver.pump()
        assert driver.state.status is GameStatus.RUNNING
        assert driver.rank is None
        driver.run(max_ticks=50)
        assert len(leaderboard.top()) == 2
        assert driver.rank == 2

    def test_run_stops_at_max_ticks(self):
        config = GameConfig(grid_width=10, grid_height=10, wall_mode=False, wrap_mode=True)
        driver = make_driver(config)
        result = driver.run(max_ticks=7)
        assert result["ticks"] == 7
        assert result["status"] == "RUNNING"

    def test_full_grid_counts_as_win(self):
        leaderboard = Leaderboard(InMemoryHighScoreStore())
        driver = make_driver(GameConfig(grid_width=10, grid_height=10), leaderboard=leaderboard)
        driver.state = make_state(
            head=(1, 0), body=[(2, 0)], food=(0, 0), width=3, height=1, growing=True
        )
        driver.submit(MoveSnake())
        driver.pump()
        assert driver.won is True
        assert driver.state.status is GameStatus.GAME_OVER
        assert driver.state.food is None
        assert driver.state.score == 1
        assert leaderboard.top()[0].length == 3


class TestRealtime:
    """The scheduler-driven loop."""

    def test_runs_until_game_over(self):
        config = GameConfig(grid_width=10, grid_height=10, initial_speed=10)
        driver = make_driver(config)
        result = driver.run_realtime(max_seconds=5)
        assert result["status"] == "GAME_OVER"
        assert result["ticks"] == 3

    def test_stops_after_max_seconds(self, config):
        driver = make_driver(config)
        driver.submit(TogglePause())
        result = driver.run_realtime(max_seconds=0.2)
        assert result["status"] == "PAUSED"

    def test_speed_change_is_picked_up(self):
        config = GameConfig(grid_width=10, grid_height=10, initial_speed=1)
        driver = make_driver(config)
        for _ in range(9):
            driver.submit(ChangeSpeed(1))
        result = driver.run_realtime(max_seconds=5)
        assert driver.state.speed == 10
        assert result["status"] == "GAME_OVER"
