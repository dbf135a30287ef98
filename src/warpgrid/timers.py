"""
timers.py

Cooperative, single-threaded deferred execution.

``Scheduler`` runs zero-argument actions once after a delay, measured on
an injected millisecond clock. ``FrameScheduler`` runs callbacks once
before the next display refresh. The host drives both from its main
loop, so every callback runs to completion before the next one starts.
"""

import heapq
import itertools
from typing import Callable, Dict, List, Optional, Tuple

Clock = Callable[[], float]
Action = Callable[[], None]


class TimerHandle:
    """Cancelable reference to a pending single-shot action"""
    def __init__(self, deadline: float, action: Action):
        self.deadline = deadline
        self.action = action
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        """Guarantee the action never runs"""
        self.cancelled = True

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)


class Scheduler:
    """Wall-clock single-shot timers"""
    def __init__(self, clock: Clock):
        self.clock = clock
        self._queue: List[Tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: float, action: Action) -> TimerHandle:
        """Schedule ``action`` to run once after ``delay_ms``"""
        handle = TimerHandle(self.clock() + max(0.0, delay_ms), action)
        heapq.heappush(self._queue, (handle.deadline, next(self._seq), handle))
        return handle

    def run_due(self, now: Optional[float] = None) -> int:
        """Fire every pending action whose deadline has passed, oldest first"""
        if now is None:
            now = self.clock()
        fired = 0
        while self._queue and self._queue[0][0] <= now:
            _, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            handle.fired = True
            handle.action()
            fired += 1
        return fired

    def pending_count(self) -> int:
        return sum(1 for _, _, handle in self._queue if handle.pending)

    def clear(self) -> None:
        for _, _, handle in self._queue:
            handle.cancel()
        self._queue.clear()


class FrameScheduler:
    """Run-once-before-next-frame callbacks, cancelable by handle"""
    def __init__(self):
        self._callbacks: Dict[int, Callable[[float], None]] = {}
        self._dispatching: Dict[int, Callable[[float], None]] = {}
        self._ids = itertools.count(1)

    def request(self, callback: Callable[[float], None]) -> int:
        handle = next(self._ids)
        self._callbacks[handle] = callback
        return handle

    def cancel(self, handle: Optional[int]) -> None:
        if handle is not None:
            self._callbacks.pop(handle, None)
            self._dispatching.pop(handle, None)

    def dispatch(self, timestamp: float) -> int:
        """
        Invoke the callbacks requested before this call.
        Requests made while dispatching wait for the next frame.
        """
        self._dispatching = self._callbacks
        self._callbacks = {}
        ran = 0
        while self._dispatching:
            handle = next(iter(self._dispatching))
            callback = self._dispatching.pop(handle)
            callback(timestamp)
            ran += 1
        return ran

    def __len__(self) -> int:
        return len(self._callbacks)
