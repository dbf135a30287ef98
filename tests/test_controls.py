import random

import pytest

from warpgrid.config import GameConfig
from warpgrid.controls import InputMapper, inverse_key
from warpgrid.entities import is_opposite, new_game_state


@pytest.fixture
def state():
    state = new_game_state(GameConfig())
    state.started = True
    return state


@pytest.fixture
def mapper():
    return InputMapper(20)


@pytest.mark.parametrize("key, expected", [
    ("w", (0, -20)), ("up", (0, -20)), ("ArrowUp", (0, -20)),
    ("s", (0, 20)), ("down", (0, 20)), ("arrowdown", (0, 20)),
])
def test_perpendicular_turns_are_accepted(mapper, state, key, expected):
    assert mapper.handle_key(key, state)
    assert state.direction == expected


def test_reversal_and_same_axis_are_ignored(mapper, state):
    assert not mapper.handle_key("a", state)
    assert not mapper.handle_key("left", state)
    assert not mapper.handle_key("d", state)
    assert state.direction == (20, 0)


def test_unknown_keys_are_ignored(mapper, state):
    assert not mapper.handle_key("q", state)
    assert state.direction == (20, 0)


def test_inversion_swaps_to_the_opposite_key(mapper, state):
    state.controls_inverted = True
    assert mapper.handle_key("w", state)
    assert state.direction == (0, 20)
    assert mapper.handle_key("right", state)
    assert state.direction == (-20, 0)


def test_input_ignored_when_not_running(mapper, state):
    state.paused = True
    assert not mapper.handle_key("w", state)
    state.paused = False
    state.started = False
    assert not mapper.handle_key("w", state)
    assert state.direction == (20, 0)


def test_inverse_key_pairs_and_passthrough():
    assert inverse_key("a") == "d"
    assert inverse_key("arrowleft") == "arrowright"
    assert inverse_key("space") == "space"


def test_accepted_changes_never_reverse(mapper, state):
    rng = random.Random(7)
    keys = ["w", "a", "s", "d", "up", "down", "left", "right", "arrowup", "arrowleft"]
    for _ in range(1000):
        state.controls_inverted = rng.random() < 0.5
        before = state.direction
        if mapper.handle_key(rng.choice(keys), state):
            assert not is_opposite(state.direction, before)
            assert state.direction != before
        dx, dy = state.direction
        assert (dx == 0) != (dy == 0)
        assert abs(dx + dy) == 20
