"""Tests for simulation.py - one game tick with scoring."""

from torus_snake.config import START_DIFFICULTY
from torus_snake.grid import wrap
from torus_snake.simulation import GameState, new_game, step
from torus_snake.snake import TickResult, new_snake


def make_state(fruit, current=None):
    state = GameState(snake=new_snake(), fruit=fruit, point_value=100, current_point_value=100)
    if current is not None:
        state.current_point_value = current
    return state


class TestNewGame:
    def test_initial_values(self, rng):
        state = new_game(rng)
        assert state.score == 0
        assert state.difficulty == START_DIFFICULTY
        assert state.point_value == 100
        assert state.current_point_value == 100
        assert state.accumulator == 0.0
        assert state.floating_texts == []
        assert not state.snake.occupies(state.fruit)


class TestStep:
    def test_plain_tick_decays_points(self, rng):
        state = make_state(fruit=(30, 30))
        assert step(state, rng) is TickResult.NONE
        assert state.current_point_value == 99
        assert state.score == 0
        assert len(state.snake.body) == 1

    def test_points_floor_at_one(self, rng):
        state = make_state(fruit=(30, 30), current=1)
        step(state, rng)
        assert state.current_point_value == 1

    def test_eating_fruit(self, rng):
        state = make_state(fruit=(2, 1), current=60)
        assert step(state, rng) is TickResult.FRUIT
        assert state.score == 60
        assert state.difficulty == START_DIFFICULTY + 1.0
        assert state.point_value == 100
        assert state.current_point_value == state.point_value
        assert len(state.snake.body) == 2
        assert state.fruit != (2, 1)
        assert not state.snake.occupies(state.fruit)

    def test_eating_spawns_floating_text(self, rng):
        state = make_state(fruit=(2, 1), current=42)
        step(state, rng)
        assert len(state.floating_texts) == 1
        assert state.floating_texts[0].value == 42
        assert state.floating_texts[0].life == 1.0

    def test_difficulty_tier_raises_point_value(self, rng):
        state = make_state(fruit=(2, 1))
        state.difficulty = 6.5
        step(state, rng)
        assert state.difficulty == 7.5
        assert state.point_value == 200
        assert state.current_point_value == 200

    def test_score_never_decreases(self, rng):
        state = new_game(rng)
        last = 0
        for _ in range(500):
            # steer straight at the fruit's row, then along it
            if state.snake.head[1] != state.fruit[1]:
                state.snake.input_queue.append((0, 1))
            else:
                state.snake.input_queue.append((1, 0))
            if step(state, rng) is TickResult.COLLISION:
                break
            assert state.score >= last
            last = state.score
        assert state.score > 0

    def test_collision_reported(self, rng, coiled_snake):
        state = GameState(snake=coiled_snake, fruit=(30, 30), point_value=100, current_point_value=100)
        assert step(state, rng) is TickResult.NONE
        assert step(state, rng) is TickResult.COLLISION

    def test_points_non_increasing_within_epoch(self, rng):
        state = make_state(fruit=(30, 30))
        values = [state.current_point_value]
        for _ in range(150):
            assert step(state, rng) is TickResult.NONE
            values.append(state.current_point_value)
        assert all(b <= a for a, b in zip(values, values[1:]))
        assert min(values) == 1
        assert values[-1] == 1

    def test_new_epoch_starts_at_point_value(self, rng):
        state = make_state(fruit=(30, 30))
        for _ in range(20):
            step(state, rng)
        assert state.current_point_value == 80
        state.fruit = wrap(state.snake.head, state.snake.dir)
        assert step(state, rng) is TickResult.FRUIT
        assert state.current_point_value == state.point_value
        state.fruit = (30, 30)
        step(state, rng)
        assert state.current_point_value == state.point_value - 1


class TestBoardFull:
    def test_eating_last_cell_ends_the_game(self, rng, nearly_full_snake):
        state = GameState(snake=nearly_full_snake, fruit=(2, 2), point_value=100,
                          current_point_value=70, size=3)
        assert step(state, rng) is TickResult.BOARD_FULL
        assert len(state.snake) == 9
        assert state.fruit is None
        assert state.score == 70
        assert state.floating_texts[0].value == 70
