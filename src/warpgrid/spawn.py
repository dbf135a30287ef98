"""
spawn.py

Decides what the next food item is and where it goes.
"""

import logging
import random
from typing import Iterable, Optional

from .config import GameConfig, ItemType, POWERUP_ITEMS
from .entities import FoodItem
from .grid import Cell, Grid

logger = logging.getLogger(__name__)


class BoardFullError(RuntimeError):
    """Raised when every cell is covered by the snake"""


class SpawnPolicy:
    """
    Item type selection and collision-free placement.
    All randomness comes from ``rng`` so runs can be replayed.
    """
    def __init__(self, config: GameConfig, grid: Grid,
                 rng: Optional[random.Random] = None):
        self.config = config
        self.grid = grid
        self.rng = rng if rng is not None else random.Random()

    def choose_item_type(self, food_eaten_count: int) -> ItemType:
        """
        One uniform draw, checked in order; the first match wins.
        The logo check comes before the every-Nth special, so a lucky
        draw can still pre-empt a due special.
        """
        cfg = self.config
        r = self.rng.random()
        if r < cfg.LOGO_FOOD_SPAWN_CHANCE:
            return ItemType.BONUS_LOGO
        if food_eaten_count > 0 and food_eaten_count % cfg.SPECIAL_ITEM_SPAWN_FREQ == 0:
            return ItemType.SPECIAL
        if r < cfg.POWERUP_SPAWN_CHANCE + cfg.LOGO_FOOD_SPAWN_CHANCE:
            return self.rng.choice(POWERUP_ITEMS)
        return ItemType.NORMAL

    def place_item(self, snake_body: Iterable[Cell]) -> Cell:
        """
        Rejection-sample a free cell. After PLACEMENT_ATTEMPTS misses,
        fall back to the first free cell in row-major order.
        """
        occupied = set(snake_body)
        for _ in range(self.config.PLACEMENT_ATTEMPTS):
            cell = self.grid.random_cell(self.rng)
            if cell not in occupied:
                return cell

        logger.warning("Random placement exhausted, scanning for a free cell")
        for cell in self.grid.cells():
            if cell not in occupied:
                return cell
        raise BoardFullError(f"No free cell left on a {self.grid.cols}x{self.grid.rows} grid")

    def spawn(self, food_eaten_count: int, snake_body: Iterable[Cell]) -> FoodItem:
        item_type = self.choose_item_type(food_eaten_count)
        item = FoodItem(self.place_item(snake_body), item_type)
        logger.info(f"Spawned {item.type.name} at ({item.cell.x}, {item.cell.y})")
        return item
