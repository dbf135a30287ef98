"""
entities.py

The game's entity model: snake body, food item and the aggregate
GameState that the simulation owns.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .config import GameConfig, ItemType
from .grid import Cell

Vector = Tuple[int, int]


def is_opposite(a: Vector, b: Vector) -> bool:
    """True when ``a`` is the exact negation of ``b``"""
    return a[0] == -b[0] and a[1] == -b[1]


class Snake:
    """
    Ordered body of cells, head first.
    Only the simulation step moves it.
    """
    def __init__(self, body: List[Cell]):
        if not body:
            raise ValueError("A snake needs at least one segment")
        self.body: List[Cell] = list(body)

    def head_position(self) -> Cell:
        """Returns the current head position of the snake"""
        return self.body[0]

    def occupies(self, cell: Cell) -> bool:
        return cell in self.body

    def advance(self, new_head: Cell, grow: bool) -> None:
        """Prepend ``new_head``; drop the tail unless growing"""
        self.body.insert(0, new_head)
        if not grow:
            self.body.pop()

    def __len__(self) -> int:
        return len(self.body)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Snake) and self.body == other.body

    def __repr__(self) -> str:
        return f"Snake({self.body!r})"


@dataclass(frozen=True)
class FoodItem:
    """The single consumable on the board"""
    cell: Cell
    type: ItemType = ItemType.NORMAL


@dataclass
class GameState:
    """Everything that changes during one run; replaced on restart"""
    snake: Snake
    food: Optional[FoodItem]
    direction: Vector
    target_interval_ms: float
    score: int = 0
    food_eaten_count: int = 0
    controls_inverted: bool = False
    started: bool = False
    paused: bool = False
    game_over_reason: Optional[str] = None

    # Interpolation bookkeeping
    last_head: Cell = field(default=Cell(0, 0))
    next_head: Cell = field(default=Cell(0, 0))
    last_tick_ms: float = 0.0
    progress: float = 0.0

    @property
    def game_over(self) -> bool:
        return self.game_over_reason is not None

    def interpolated_head(self) -> Tuple[float, float]:
        """Visual head position between the previous and next cell"""
        t = self.progress
        return (self.last_head.x + (self.next_head.x - self.last_head.x) * t,
                self.last_head.y + (self.next_head.y - self.last_head.y) * t)


def new_game_state(config: GameConfig) -> GameState:
    """Build the opening state: one segment heading right, no food yet"""
    size = config.GRID_SIZE
    start = Cell(config.START_CELL[0] * size, config.START_CELL[1] * size)
    direction = (size, 0)
    return GameState(
        snake=Snake([start]),
        food=None,
        direction=direction,
        target_interval_ms=config.GAME_SPEED_MS,
        last_head=start,
        next_head=start.offset(*direction),
    )
