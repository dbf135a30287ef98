"""
config.py

Tunable constants, item types and colour palette for RE:WARP GRID.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

##########################
# ENUMS AND CONFIG
##########################

class ItemType(Enum):
    """The kinds of item that can occupy the single food slot"""
    NORMAL = "normal"
    SPECIAL = "special"
    SPEED_BOOST = "speed_boost"
    INVERSE_CONTROLS = "inverse_controls"
    BONUS_LOGO = "logo_food"

    @property
    def label(self) -> str:
        """Upper-case name as shown in the system log"""
        return self.value.upper().replace("_", " ")


# Direct score awarded when an item is consumed
SCORE_DELTAS = {
    ItemType.NORMAL: 10,
    ItemType.SPECIAL: 50,
    ItemType.SPEED_BOOST: 0,
    ItemType.INVERSE_CONTROLS: 0,
    ItemType.BONUS_LOGO: 100,
}

# Item types that advance the food-eaten counter
COUNTED_ITEMS = (ItemType.NORMAL, ItemType.BONUS_LOGO)

POWERUP_ITEMS = (ItemType.SPEED_BOOST, ItemType.INVERSE_CONTROLS)


@dataclass
class GameConfig:
    """
    Centralized configuration for game settings.
    Times are in milliseconds, distances in pixels.
    """
    # Grid settings
    GRID_SIZE: int = 20
    CANVAS_WIDTH: int = 400
    CANVAS_HEIGHT: int = 400
    WARP_WALLS: bool = True

    # Game mechanics
    FPS: int = 60
    GAME_SPEED_MS: float = 100
    START_CELL: Tuple[int, int] = (10, 10)

    # Spawn policy
    SPECIAL_ITEM_SPAWN_FREQ: int = 5
    POWERUP_SPAWN_CHANCE: float = 0.2
    LOGO_FOOD_SPAWN_CHANCE: float = 0.1
    PLACEMENT_ATTEMPTS: int = 1000

    # Power-up system
    POWERUP_DURATION: float = 3000
    SPECIAL_SLOWDOWN_MS: float = 100
    SPECIAL_DURATION_FACTOR: float = 3
    SPEED_BOOST_FACTOR: float = 0.5
    LOGO_SPEED_FACTOR: float = 0.7
    LOGO_DURATION_FACTOR: float = 0.5

    # Presentation
    LOGO_HEAD_SCALE: float = 1.5
    LOGO_FOOD_PADDING: int = 2
    LOG_CAPACITY: int = 10
    HUD_HEIGHT: int = 48
    PANEL_WIDTH: int = 300

    # Colors (as RGB tuples)
    CANVAS_BG: Tuple[int, ...] = (13, 0, 20)
    NORMAL_FOOD: Tuple[int, ...] = (255, 0, 110)
    SPECIAL_FOOD: Tuple[int, ...] = (255, 195, 0)
    SPEED_BOOST: Tuple[int, ...] = (0, 188, 212)
    INVERSE_CONTROLS: Tuple[int, ...] = (255, 87, 34)
    SNAKE_HEAD: Tuple[int, ...] = (255, 0, 110)
    SNAKE_BODY_START: Tuple[int, ...] = (157, 2, 215)
    SNAKE_BODY_END: Tuple[int, ...] = (106, 5, 114)
    WHITE: Tuple[int, ...] = (255, 255, 255)
    BLACK: Tuple[int, ...] = (0, 0, 0)
    NEON: Tuple[int, ...] = (0, 255, 200)

    @property
    def cols(self) -> int:
        return self.CANVAS_WIDTH // self.GRID_SIZE

    @property
    def rows(self) -> int:
        return self.CANVAS_HEIGHT // self.GRID_SIZE
