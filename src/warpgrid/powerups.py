"""
powerups.py

Timed, self-reverting modifiers: temporary tick-interval changes and
control inversion. Each kind owns one timer slot; arming a slot cancels
whatever it held before (last write wins, durations never stack).
"""

import logging
from typing import Callable, Optional

from .entities import GameState
from .timers import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

SPEED = "speed"
INVERSION = "inversion"


class TimerSlot:
    """
    Holds at most one armed timer of a given kind.
    Every arm bumps ``generation``; a callback that fires with an older
    generation was superseded and does nothing.
    """
    def __init__(self, kind: str):
        self.kind = kind
        self.generation = 0
        self.handle: Optional[TimerHandle] = None

    def arm(self, scheduler: Scheduler, delay_ms: float,
            action: Callable[[], None]) -> int:
        self.cancel()
        self.generation += 1
        generation = self.generation

        def fire() -> None:
            if generation != self.generation:
                return
            self.handle = None
            action()

        self.handle = scheduler.call_later(delay_ms, fire)
        return generation

    def cancel(self) -> None:
        if self.handle is not None:
            self.handle.cancel()
            self.handle = None

    @property
    def armed(self) -> bool:
        return self.handle is not None and self.handle.pending


class PowerUpManager:
    """Applies power-up effects to a GameState and schedules their expiry"""
    def __init__(self, state: GameState, scheduler: Scheduler,
                 on_expire: Optional[Callable[[str], None]] = None):
        self.state = state
        self.scheduler = scheduler
        self.on_expire = on_expire
        self.speed_slot = TimerSlot(SPEED)
        self.inversion_slot = TimerSlot(INVERSION)

    def apply_temporary_speed_change(self, new_interval_ms: float,
                                     duration_ms: float) -> None:
        """
        Switch the tick interval now and restore the interval that was
        current immediately before this call once ``duration_ms`` elapses.
        """
        state = self.state
        original = state.target_interval_ms
        state.target_interval_ms = new_interval_ms
        logger.info(f"Tick interval {original:g}ms -> {new_interval_ms:g}ms "
                    f"for {duration_ms:g}ms")

        def revert() -> None:
            state.target_interval_ms = original
            logger.info(f"Speed adjustment reset to {original:g}ms")
            self._notify(SPEED)

        self.speed_slot.arm(self.scheduler, duration_ms, revert)

    def activate_inverse_controls(self, duration_ms: float) -> None:
        """Invert controls; re-activation restarts the countdown from now"""
        state = self.state
        state.controls_inverted = True
        logger.info(f"Controls inverted for {duration_ms:g}ms")

        def clear() -> None:
            state.controls_inverted = False
            logger.info("Control inversion ended")
            self._notify(INVERSION)

        self.inversion_slot.arm(self.scheduler, duration_ms, clear)

    def cancel_inversion(self) -> None:
        """Drop an active inversion without notifying"""
        if self.state.controls_inverted:
            self.state.controls_inverted = False
            self.inversion_slot.cancel()

    def cancel_all(self) -> None:
        self.speed_slot.cancel()
        self.inversion_slot.cancel()

    def _notify(self, kind: str) -> None:
        if self.on_expire is not None:
            self.on_expire(kind)
