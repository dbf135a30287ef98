"""
loop.py

Frame-driven pacing of the simulation. The loop is called once per
display refresh, runs at most one simulation step per call, and works
out how far the head has travelled between its previous and next cell.
"""

from typing import Callable, List, Optional

from .events import GameEvent
from .simulation import Simulation, advance_simulation
from .timers import FrameScheduler

EventHandler = Callable[[List[GameEvent]], None]


class FrameLoop:
    """
    Self-rescheduling frame callback.
    ``renderer`` only needs ``draw_scene(state)``; ``on_events`` receives
    whatever the simulation emitted during a frame.
    """
    def __init__(self, sim: Simulation, frames: FrameScheduler, renderer,
                 on_events: Optional[EventHandler] = None):
        self.sim = sim
        self.frames = frames
        self.renderer = renderer
        self.on_events = on_events
        self.handle: Optional[int] = None
        self.running = False

    def start(self) -> None:
        self.stop()
        self.running = True
        self.handle = self.frames.request(self.on_frame)

    def stop(self) -> None:
        """Cancel the scheduled frame; the loop stays idle until started"""
        self.frames.cancel(self.handle)
        self.handle = None
        self.running = False

    def on_frame(self, timestamp: float) -> None:
        self.handle = None
        state = self.sim.state

        if not state.started:
            state.progress = 0.0
            self.renderer.draw_scene(state)
        elif not state.paused:
            elapsed = timestamp - state.last_tick_ms
            due = elapsed >= state.target_interval_ms
            events = advance_simulation(self.sim, elapsed)
            if due:
                state.last_tick_ms = timestamp
            interval = state.target_interval_ms
            state.progress = min(1.0, (timestamp - state.last_tick_ms) / interval)
            self.renderer.draw_scene(state)
            if events and self.on_events is not None:
                self.on_events(events)

        # on_events may have stopped the loop (pause or game over)
        if self.running and self.handle is None:
            self.handle = self.frames.request(self.on_frame)
