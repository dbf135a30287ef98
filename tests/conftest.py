import random

import pytest

from warpgrid.config import GameConfig, ItemType
from warpgrid.controller import GameController
from warpgrid.entities import FoodItem, GameState, Snake
from warpgrid.grid import Cell, Grid
from warpgrid.simulation import Simulation
from warpgrid.sinks import NullPresenter, SystemLog
from warpgrid.spawn import SpawnPolicy
from warpgrid.timers import FrameScheduler, Scheduler


class FakeClock:
    """Millisecond clock the test moves by hand"""
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms
        return self.now


class ForcedRandom(random.Random):
    """Seeded RNG whose next ``random()`` draws can be scripted"""
    def __init__(self, draws=(), seed=0):
        super().__init__(seed)
        self.draws = list(draws)

    def random(self):
        if self.draws:
            return self.draws.pop(0)
        return super().random()

    def getrandbits(self, k):
        # keeps choice/randrange off the scripted draws
        return super().getrandbits(k)


class RecordingAudio:
    def __init__(self):
        self.calls = []

    def play_effect(self, name):
        self.calls.append(name)

    def start_ambient(self):
        self.calls.append("start_ambient")

    def stop_ambient(self):
        self.calls.append("stop_ambient")


class RecordingRenderer:
    def __init__(self):
        self.frames = []

    def draw_scene(self, state):
        self.frames.append((list(state.snake.body), state.progress, state.interpolated_head()))


FAR_FOOD = FoodItem(Cell(0, 380), ItemType.NORMAL)


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return Scheduler(clock)


@pytest.fixture
def make_sim(config, scheduler):
    """Build a started Simulation around a hand-made snake"""
    def factory(body, direction=(20, 0), food=FAR_FOOD, rng=None, cfg=None,
                interval=None, **fields):
        cfg = cfg or config
        grid = Grid(cfg.CANVAS_WIDTH, cfg.CANVAS_HEIGHT, cfg.GRID_SIZE, cfg.WARP_WALLS)
        spawner = SpawnPolicy(cfg, grid, rng or ForcedRandom(seed=1))
        cells = [Cell(*c) for c in body]
        fields.setdefault("started", True)
        state = GameState(
            snake=Snake(cells),
            food=food,
            direction=direction,
            target_interval_ms=interval or cfg.GAME_SPEED_MS,
            last_head=cells[0],
            next_head=cells[0],
            **fields,
        )
        return Simulation(cfg, spawner, scheduler, state=state)
    return factory


@pytest.fixture
def make_controller(clock):
    def factory(cfg=None, draws=(), seed=3):
        return GameController(
            config=cfg or GameConfig(),
            clock=clock,
            scheduler=Scheduler(clock),
            frames=FrameScheduler(),
            renderer=RecordingRenderer(),
            presenter=NullPresenter(),
            audio=RecordingAudio(),
            system_log=SystemLog(10),
            rng=ForcedRandom(draws, seed=seed),
        )
    return factory
