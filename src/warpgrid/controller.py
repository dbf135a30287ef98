"""
controller.py

GameController ties the simulation, the frame loop and the outside
collaborators together. It exposes the operations a host binds to its
buttons and keyboard: start, pause/resume, key presses.
"""

import random
from typing import Callable, List, Optional

from .config import GameConfig, ItemType
from .controls import InputMapper
from .events import GameEvent, GameOver, ItemConsumed, ItemSpawned
from .grid import Grid
from .loop import FrameLoop
from .powerups import SPEED
from .simulation import Simulation, format_score
from .sinks import AudioSink, NullAudio, NullPresenter, Presenter, SystemLog
from .spawn import SpawnPolicy
from .timers import FrameScheduler, Scheduler

PICKUP_EFFECTS = {
    ItemType.NORMAL: "eat",
    ItemType.SPECIAL: "special",
    ItemType.SPEED_BOOST: "powerup_activate",
    ItemType.INVERSE_CONTROLS: "powerup_activate",
    ItemType.BONUS_LOGO: "special",
}

PICKUP_MESSAGES = {
    ItemType.SPECIAL: "DATA SPIKE DETECTED. SLOWDOWN INITIATED.",
    ItemType.SPEED_BOOST: "SPEED BOOST ACTIVE: CORE CLOCK x2.",
    ItemType.INVERSE_CONTROLS: "WARNING: CONTROL INPUT INVERTED!",
    ItemType.BONUS_LOGO: "RE-CORE DATA ACQUIRED. BONUS SCORE +100.",
}

WELCOME_TITLE = "WELCOME TO RE:WARP GRID"
WELCOME_BODY = ("Navigate the grid using WASD or Arrow Keys. "
                "Consume data to grow the RE-CORE.\n"
                "Warning: Boundary walls are warped (teleportation active).")
CLAMP_BODY = ("Navigate the grid using WASD or Arrow Keys. "
              "Consume data to grow the RE-CORE.\n"
              "Warning: Boundary walls are solid. Leaving the grid is fatal.")

PAUSE_KEYS = (" ", "space")


class GameController:
    """
    Drives one game session. Collaborators are injected; anything left
    out falls back to a silent stand-in so the controller can run
    headless.
    """
    def __init__(self, config: Optional[GameConfig] = None,
                 clock: Optional[Callable[[], float]] = None,
                 scheduler: Optional[Scheduler] = None,
                 frames: Optional[FrameScheduler] = None,
                 renderer=None,
                 presenter: Optional[Presenter] = None,
                 audio: Optional[AudioSink] = None,
                 system_log: Optional[SystemLog] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.clock = clock or (lambda: 0.0)
        self.scheduler = scheduler or Scheduler(self.clock)
        self.frames = frames or FrameScheduler()
        self.presenter = presenter or NullPresenter()
        self.audio = audio or NullAudio()
        self.system_log = system_log or SystemLog(self.config.LOG_CAPACITY)

        cfg = self.config
        grid = Grid(cfg.CANVAS_WIDTH, cfg.CANVAS_HEIGHT, cfg.GRID_SIZE, cfg.WARP_WALLS)
        self.spawner = SpawnPolicy(cfg, grid, rng)
        self.sim = Simulation(cfg, self.spawner, self.scheduler,
                              on_powerup_expire=self._on_powerup_expire)
        self.input = InputMapper(cfg.GRID_SIZE)
        self.loop = FrameLoop(self.sim, self.frames, renderer or _NullRenderer(),
                              on_events=self.handle_events)

    @property
    def state(self):
        return self.sim.state

    ##########################
    # LIFECYCLE
    ##########################

    def show_welcome(self) -> None:
        """Draw the idle board and offer to start"""
        self.loop.start()
        body = WELCOME_BODY if self.config.WARP_WALLS else CLAMP_BODY
        self.presenter.show_modal(WELCOME_TITLE, body, "START SIMULATION", self.start_game)

    def reset(self) -> None:
        """Throw the current run away and build a fresh, idle one"""
        self.loop.stop()
        self.handle_events(self.sim.reset())
        self.presenter.show_score(format_score(0))

    def start_game(self) -> None:
        self.reset()
        state = self.sim.state
        state.started = True
        state.last_tick_ms = self.clock()
        self.audio.start_ambient()
        self.system_log.log("SIMULATION ACTIVE. INITIALIZING RE-CORE MOVEMENT.")
        self.loop.start()

    def toggle_pause(self) -> None:
        if not self.sim.state.started:
            return
        if self.sim.state.paused:
            self.resume()
        else:
            self.pause()

    def pause(self) -> None:
        state = self.sim.state
        if not state.started or state.paused:
            return
        state.paused = True
        self.loop.stop()
        self.audio.stop_ambient()
        self.audio.play_effect("pause")
        self.system_log.log("SIMULATION PAUSED.")
        self.presenter.show_modal("SYSTEM PAUSED",
                                  "SYSTEM ON HOLD. PRESS RESUME OR SPACE TO CONTINUE.",
                                  "RESUME", self.toggle_pause)

    def resume(self) -> None:
        state = self.sim.state
        if not state.started or not state.paused:
            return
        state.paused = False
        state.last_tick_ms = self.clock()
        self.loop.start()
        self.presenter.hide_modal()
        self.audio.start_ambient()
        self.system_log.log("SIMULATION RESUMED.")

    def end_game(self, reason: str) -> None:
        state = self.sim.state
        self.loop.stop()
        self.audio.stop_ambient()
        state.started = False
        state.paused = False
        self.audio.play_effect("gameover")
        self.system_log.log(f"CRITICAL ERROR: {reason} - FINAL SCORE: {state.score}")
        # The speed timer is left armed; it only touches this discarded state
        self.sim.powerups.cancel_inversion()
        self.presenter.show_modal("SYSTEM FAILURE",
                                  f"RE-CORE DESTROYED. FINAL SCORE: {state.score}",
                                  "RESTART SIMULATION", self.start_game)

    ##########################
    # INPUT
    ##########################

    def handle_key(self, key: str) -> None:
        key = key.lower()
        if key in PAUSE_KEYS:
            if self.sim.state.started:
                self.toggle_pause()
            elif not self.presenter.modal_open:
                self.start_game()
            return
        self.input.handle_key(key, self.sim.state)

    ##########################
    # EVENTS
    ##########################

    def handle_events(self, events: List[GameEvent]) -> None:
        for event in events:
            if isinstance(event, ItemConsumed):
                item_type = event.item.type
                self.audio.play_effect(PICKUP_EFFECTS[item_type])
                message = PICKUP_MESSAGES.get(item_type)
                if message:
                    self.system_log.log(message)
                self.presenter.show_score(format_score(self.sim.state.score))
            elif isinstance(event, ItemSpawned):
                self.system_log.log(f"NEW ITEM SPAWNED: {event.item.type.label}")
            elif isinstance(event, GameOver):
                self.end_game(event.reason)

    def _on_powerup_expire(self, kind: str) -> None:
        self.audio.play_effect("powerup_end")
        if kind == SPEED:
            self.system_log.log("SPEED ADJUSTMENT RESET.")
        else:
            self.system_log.log("CONTROL INVERSION ENDED.")


class _NullRenderer:
    def draw_scene(self, state) -> None:
        pass
