"""Events emitted by the simulation step for the presentation side to consume."""

from dataclasses import dataclass

from .entities import FoodItem

OUT_OF_BOUNDS = "Out of Bounds"
SELF_COLLISION = "Self-Collision"
BOARD_FULL = "Grid Saturated"


@dataclass(frozen=True)
class GameEvent:
    pass


@dataclass(frozen=True)
class ItemConsumed(GameEvent):
    item: FoodItem
    score_delta: int


@dataclass(frozen=True)
class ItemSpawned(GameEvent):
    item: FoodItem


@dataclass(frozen=True)
class GameOver(GameEvent):
    reason: str
    score: int
