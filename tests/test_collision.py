"""
Tests for the collision resolver.
"""

from snakecore.collision import blocking_segments, resolve
from snakecore.domain import CollisionType, Direction, Position

from helpers import make_state


class TestResolve:
    """Tests for resolve() on a pre-move state."""

    def test_wall(self):
        state = make_state(head=(0, 5), body=[(1, 5), (2, 5)])
        assert resolve(Position(-1, 5), state) is CollisionType.WALL

    def test_wall_without_wall_mode_or_wrapping(self):
        """Leaving the grid is lethal whenever positions are not wrapped."""
        state = make_state(head=(0, 5), body=[(1, 5)], wall_mode=False)
        assert resolve(Position(-1, 5), state) is CollisionType.WALL

    def test_self(self):
        state = make_state(
            head=(5, 5), body=[(5, 6), (6, 6), (6, 5), (7, 5)], direction=Direction.RIGHT
        )
        assert resolve(Position(6, 5), state) is CollisionType.SELF

    def test_vacating_tail_is_excused(self):
        """Moving into the tail is fine when the tail moves away this tick."""
        state = make_state(head=(5, 5), body=[(5, 6), (6, 6), (6, 5)], direction=Direction.RIGHT)
        assert resolve(Position(6, 5), state) is CollisionType.NONE

    def test_tail_is_not_excused_while_growing(self):
        state = make_state(
            head=(5, 5), body=[(5, 6), (6, 6), (6, 5)], direction=Direction.RIGHT, growing=True
        )
        assert resolve(Position(6, 5), state) is CollisionType.SELF

    def test_obstacle(self):
        state = make_state(head=(5, 5), body=[(6, 5)], obstacles=[(4, 5)])
        assert resolve(Position(4, 5), state) is CollisionType.OBSTACLE

    def test_food(self):
        state = make_state(head=(5, 5), body=[(6, 5)], food=(4, 5))
        assert resolve(Position(4, 5), state) is CollisionType.FOOD

    def test_none(self):
        state = make_state(head=(5, 5), body=[(6, 5)])
        assert resolve(Position(4, 5), state) is CollisionType.NONE

    def test_wall_takes_precedence(self):
        """Wall is checked before anything else."""
        state = make_state(head=(0, 0), body=[(1, 0)], food=(5, 5))
        assert resolve(Position(0, -1), state) is CollisionType.WALL

    def test_no_food_on_board(self):
        state = make_state(head=(5, 5), body=[(6, 5)], food=None)
        assert resolve(Position(4, 5), state) is CollisionType.NONE


class TestBlockingSegments:
    """Tests for blocking_segments()."""

    def test_excludes_tail(self):
        state = make_state(head=(5, 5), body=[(6, 5), (7, 5)])
        assert blocking_segments(state.snake) == (Position(5, 5), Position(6, 5))

    def test_keeps_tail_when_growing(self):
        state = make_state(head=(5, 5), body=[(6, 5), (7, 5)], growing=True)
        assert blocking_segments(state.snake) == (Position(5, 5), Position(6, 5), Position(7, 5))

    def test_head_only(self):
        state = make_state(head=(5, 5))
        assert blocking_segments(state.snake) == (Position(5, 5),)
