"""
simulation.py

The fixed-tick game rules. ``Simulation.step`` advances the snake by one
cell, resolves collisions and consumption, and reports what happened as
a list of events; it never draws or plays sounds.
"""

import logging
from typing import List, Optional

from .config import COUNTED_ITEMS, SCORE_DELTAS, GameConfig, ItemType
from .entities import FoodItem, GameState, new_game_state
from .events import (BOARD_FULL, OUT_OF_BOUNDS, SELF_COLLISION, GameEvent,
                     GameOver, ItemConsumed, ItemSpawned)
from .grid import Grid
from .powerups import PowerUpManager
from .spawn import BoardFullError, SpawnPolicy
from .timers import Scheduler

logger = logging.getLogger(__name__)


class Simulation:
    """
    Owns one run's GameState together with the spawn policy and the
    power-up manager acting on it.
    """
    def __init__(self, config: GameConfig, spawner: SpawnPolicy,
                 scheduler: Scheduler, state: Optional[GameState] = None,
                 on_powerup_expire=None):
        self.config = config
        self.grid = spawner.grid
        self.spawner = spawner
        self.scheduler = scheduler
        self.on_powerup_expire = on_powerup_expire
        if state is None:
            state = new_game_state(config)
            state.food = spawner.spawn(state.food_eaten_count, state.snake.body)
        self.state = state
        self.powerups = PowerUpManager(state, scheduler, on_powerup_expire)

    def reset(self) -> List[GameEvent]:
        """Replace the state wholesale and cancel every pending power-up"""
        self.powerups.cancel_all()
        state = new_game_state(self.config)
        state.food = self.spawner.spawn(state.food_eaten_count, state.snake.body)
        self.state = state
        self.powerups = PowerUpManager(state, self.scheduler, self.on_powerup_expire)
        logger.info("Game has been reset.")
        return [ItemSpawned(state.food)]

    def step(self) -> List[GameEvent]:
        """Advance exactly one tick"""
        state = self.state
        if not state.started or state.paused or state.game_over:
            return []

        snake = state.snake
        head = snake.head_position()
        state.last_head = head

        candidate = self.grid.wrap_or_clamp(head.offset(*state.direction))
        if candidate is None:
            return self._end(OUT_OF_BOUNDS)
        state.next_head = candidate

        if snake.occupies(candidate):
            return self._end(SELF_COLLISION)

        events: List[GameEvent] = []
        food = state.food
        ate = food is not None and candidate == food.cell
        snake.advance(candidate, grow=ate)
        if ate:
            events.append(self._consume(food))
            try:
                state.food = self.spawner.spawn(state.food_eaten_count, snake.body)
            except BoardFullError:
                state.food = None
                state.progress = 0.0
                return events + self._end(BOARD_FULL)
            events.append(ItemSpawned(state.food))

        state.progress = 0.0
        return events

    def _consume(self, item: FoodItem) -> ItemConsumed:
        """Apply score and side effects of picking up ``item``"""
        state = self.state
        cfg = self.config
        delta = SCORE_DELTAS[item.type]
        state.score += delta
        if item.type in COUNTED_ITEMS:
            state.food_eaten_count += 1

        interval = state.target_interval_ms
        if item.type == ItemType.SPECIAL:
            self.powerups.apply_temporary_speed_change(
                interval + cfg.SPECIAL_SLOWDOWN_MS,
                cfg.SPECIAL_DURATION_FACTOR * interval)
        elif item.type == ItemType.SPEED_BOOST:
            self.powerups.apply_temporary_speed_change(
                interval * cfg.SPEED_BOOST_FACTOR, cfg.POWERUP_DURATION)
        elif item.type == ItemType.INVERSE_CONTROLS:
            self.powerups.activate_inverse_controls(cfg.POWERUP_DURATION)
        elif item.type == ItemType.BONUS_LOGO:
            self.powerups.apply_temporary_speed_change(
                interval * cfg.LOGO_SPEED_FACTOR,
                cfg.POWERUP_DURATION * cfg.LOGO_DURATION_FACTOR)

        logger.info(f"Consumed {item.type.name}! New score: {state.score}")
        return ItemConsumed(item, delta)

    def _end(self, reason: str) -> List[GameEvent]:
        state = self.state
        state.game_over_reason = reason
        state.started = False
        state.paused = False
        logger.info(f"Game Over! Reason: {reason}, Score: {state.score}")
        return [GameOver(reason, state.score)]


def advance_simulation(sim: Simulation, elapsed_ms: float) -> List[GameEvent]:
    """Run one step if a full tick interval has elapsed; never batches"""
    if elapsed_ms >= sim.state.target_interval_ms:
        return sim.step()
    return []


def format_score(score: int) -> str:
    """Zero-padded score as shown on the score display"""
    return str(score).zfill(4)
