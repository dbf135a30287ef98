"""
controls.py

Fixed control scheme: WASD plus arrow keys, with one global inversion
modifier. Keys are plain lower-case names (``"w"``, ``"up"``,
``"arrowup"``...) so any host can feed them in.
"""

from typing import Dict, Optional

from .entities import GameState, Vector, is_opposite

UP, DOWN, LEFT, RIGHT = "up", "down", "left", "right"

KEY_DIRECTIONS: Dict[str, str] = {
    "w": UP, "up": UP, "arrowup": UP,
    "s": DOWN, "down": DOWN, "arrowdown": DOWN,
    "a": LEFT, "left": LEFT, "arrowleft": LEFT,
    "d": RIGHT, "right": RIGHT, "arrowright": RIGHT,
}

INVERSE_KEYS: Dict[str, str] = {
    "w": "s", "s": "w", "a": "d", "d": "a",
    "up": "down", "down": "up", "left": "right", "right": "left",
    "arrowup": "arrowdown", "arrowdown": "arrowup",
    "arrowleft": "arrowright", "arrowright": "arrowleft",
}


def inverse_key(key: str) -> str:
    """Opposite key in the same family; unknown keys pass through"""
    return INVERSE_KEYS.get(key, key)


def candidate_direction(heading: str, current: Vector, cell_size: int) -> Vector:
    """
    Vector requested by ``heading``. A turn is only possible onto the
    axis that currently has zero velocity; otherwise the current vector
    is returned unchanged.
    """
    dx, dy = current
    if heading == UP and dy == 0:
        return (0, -cell_size)
    if heading == DOWN and dy == 0:
        return (0, cell_size)
    if heading == LEFT and dx == 0:
        return (-cell_size, 0)
    if heading == RIGHT and dx == 0:
        return (cell_size, 0)
    return current


class InputMapper:
    """Translates key presses into the direction the next tick will use"""
    def __init__(self, cell_size: int):
        self.cell_size = cell_size

    def map_key(self, key: str, state: GameState) -> Optional[Vector]:
        """Direction vector for ``key``, or None if the key is not a move"""
        key = key.lower()
        if state.controls_inverted:
            key = inverse_key(key)
        heading = KEY_DIRECTIONS.get(key)
        if heading is None:
            return None
        return candidate_direction(heading, state.direction, self.cell_size)

    def handle_key(self, key: str, state: GameState) -> bool:
        """Apply a key press; returns True if the heading changed"""
        if not state.started or state.paused:
            return False
        new = self.map_key(key, state)
        if new is None or new == state.direction:
            return False
        if is_opposite(new, state.direction):
            return False
        state.direction = new
        return True
