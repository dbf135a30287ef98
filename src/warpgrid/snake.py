"""
snake.py

pygame host for RE:WARP GRID.
Features include:
- Fixed-tick simulation decoupled from the display refresh
- Interpolated head movement between grid cells
- Warp-around walls, timed speed and control-inversion power-ups
- Procedural sound, logo images with drawn fallbacks
- Scrolling system log and modal dialogs
"""

import argparse
import logging
import random
import sys
import textwrap
from typing import Callable, List, Optional, Tuple

import pygame

from .audio import SAMPLE_RATE, MixerAudio
from .config import GameConfig
from .controller import GameController
from .render import Renderer
from .resources import ResourceManager, get_log_path
from .sinks import SystemLog
from .timers import FrameScheduler, Scheduler

##########################
# MAIN GAME
##########################

class Game:
    """
    Owns the window and the main loop. Implements the presenter side of
    the controller's collaborators: modal dialogs and the score readout.
    """
    def __init__(self, config: Optional[GameConfig] = None, seed: Optional[int] = None):
        # Mono 16-bit so synthesized buffers map straight onto the mixer
        pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
        pygame.init()

        self.config = config or GameConfig()
        cfg = self.config
        self.resources = ResourceManager()
        self.system_log = SystemLog(cfg.LOG_CAPACITY)

        width = cfg.CANVAS_WIDTH + cfg.PANEL_WIDTH
        height = cfg.CANVAS_HEIGHT + cfg.HUD_HEIGHT
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("RE:WARP GRID")
        self.canvas = pygame.Surface((cfg.CANVAS_WIDTH, cfg.CANVAS_HEIGHT))
        self.clock = pygame.time.Clock()

        # Presenter state
        self.modal_open = False
        self.modal: Optional[Tuple[str, str, str, Callable[[], None]]] = None
        self.modal_button = pygame.Rect(0, 0, 0, 0)
        self.score_text = "0000"

        self.scheduler = Scheduler(self.now)
        self.frames = FrameScheduler()
        self.controller = GameController(
            config=cfg,
            clock=self.now,
            scheduler=self.scheduler,
            frames=self.frames,
            renderer=Renderer(cfg, self.resources, self.canvas),
            presenter=self,
            audio=MixerAudio(),
            system_log=self.system_log,
            rng=random.Random(seed),
        )

    @staticmethod
    def now() -> float:
        return float(pygame.time.get_ticks())

    ##########################
    # PRESENTER
    ##########################

    def show_modal(self, title: str, body: str, button_label: str,
                   on_confirm: Callable[[], None]) -> None:
        self.modal = (title, body, button_label, on_confirm)
        self.modal_open = True

    def hide_modal(self) -> None:
        self.modal_open = False

    def confirm_modal(self) -> None:
        if not self.modal_open or self.modal is None:
            return
        on_confirm = self.modal[3]
        self.hide_modal()
        on_confirm()

    def show_score(self, text: str) -> None:
        self.score_text = text

    ##########################
    # MAIN LOOP
    ##########################

    def run(self) -> None:
        """Pump events, fire timers, dispatch frame callbacks, draw"""
        self.controller.show_welcome()
        while True:
            self.clock.tick(self.config.FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.cleanup()
                    return
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        self.cleanup()
                        return
                    if event.key == pygame.K_RETURN and self.modal_open:
                        self.confirm_modal()
                    else:
                        self.controller.handle_key(pygame.key.name(event.key))
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if self.modal_open and self.modal_button.collidepoint(event.pos):
                        self.confirm_modal()

            now = self.now()
            self.scheduler.run_due(now)
            self.frames.dispatch(now)

            self.draw_frame()
            pygame.display.flip()

    ##########################
    # DRAWING
    ##########################

    def draw_frame(self) -> None:
        cfg = self.config
        self.screen.fill(cfg.BLACK)
        self.screen.blit(self.canvas, (0, cfg.HUD_HEIGHT))
        self.draw_hud()
        self.draw_log_panel()
        if self.modal_open:
            self.draw_modal()

    def draw_text(self, text: str, x: int, y: int, size: int = 18,
                  color: Tuple[int, ...] = None, center: bool = False) -> pygame.Rect:
        """Draw text with a drop shadow"""
        if color is None:
            color = self.config.WHITE
        font = self.resources.get_font(size)
        shadow = font.render(text, True, self.config.BLACK)
        rendered = font.render(text, True, color)
        rect = rendered.get_rect()
        if center:
            rect.center = (x, y)
        else:
            rect.topleft = (x, y)
        self.screen.blit(shadow, rect.move(2, 2))
        self.screen.blit(rendered, rect)
        return rect

    def draw_hud(self) -> None:
        cfg = self.config
        self.draw_text("RE:WARP GRID", 10, 12, size=22, color=cfg.NEON)
        self.draw_text(f"SCORE {self.score_text}", cfg.CANVAS_WIDTH - 150, 12,
                       size=22, color=cfg.SPECIAL_FOOD)
        state = self.controller.state
        status = "PAUSED" if state.paused else ("INVERTED" if state.controls_inverted else "")
        if status:
            self.draw_text(status, cfg.CANVAS_WIDTH // 2, cfg.HUD_HEIGHT // 2,
                           size=16, color=cfg.INVERSE_CONTROLS, center=True)

    def draw_log_panel(self) -> None:
        cfg = self.config
        x0 = cfg.CANVAS_WIDTH
        panel = pygame.Rect(x0, 0, cfg.PANEL_WIDTH, cfg.CANVAS_HEIGHT + cfg.HUD_HEIGHT)
        pygame.draw.rect(self.screen, (20, 0, 32), panel)
        pygame.draw.line(self.screen, cfg.NEON, panel.topleft, panel.bottomleft, 2)
        self.draw_text("SYSTEM LOG", x0 + 12, 12, size=18, color=cfg.NEON)

        y = cfg.HUD_HEIGHT
        for line in self.system_log.lines():
            for chunk in wrap_lines(line, 30):
                self.draw_text(chunk, x0 + 12, y, size=13)
                y += 16
            y += 4

    def draw_modal(self) -> None:
        cfg = self.config
        title, body, button_label, _ = self.modal
        w, h = cfg.CANVAS_WIDTH, cfg.CANVAS_HEIGHT
        top = cfg.HUD_HEIGHT

        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        self.screen.blit(overlay, (0, top))

        y = top + h // 4
        self.draw_text(title, w // 2, y, size=22, color=cfg.NEON, center=True)
        y += 40
        for paragraph in body.split("\n"):
            for line in wrap_lines(paragraph, 38):
                self.draw_text(line, w // 2, y, size=14, center=True)
                y += 20
            y += 6

        label = self.resources.get_font(18).render(button_label, True, cfg.WHITE)
        self.modal_button = label.get_rect(center=(w // 2, y + 40)).inflate(24, 14)
        pygame.draw.rect(self.screen, cfg.NORMAL_FOOD, self.modal_button, 2, border_radius=6)
        self.screen.blit(label, label.get_rect(center=self.modal_button.center))

    def cleanup(self) -> None:
        """Clean up resources before exit"""
        self.scheduler.clear()
        self.resources.cleanup()
        pygame.quit()
        logging.info("----- Game cleanup completed -----")


def wrap_lines(text: str, width: int) -> List[str]:
    return textwrap.wrap(text, width) or [""]


##########################
# MAIN ENTRY POINT
##########################

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="RE:WARP GRID snake game")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed the item spawner for a reproducible run")
    parser.add_argument("--no-warp", action="store_true",
                        help="solid walls: leaving the grid ends the run")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """
    Main entry point for the game.
    Initializes and runs the game instance.
    """
    args = parse_args(argv)
    logging.basicConfig(
        filename=get_log_path("snake_game.log"),
        level=getattr(logging, args.log_level),
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    logging.info("----- Starting RE:WARP GRID -----")

    try:
        game = Game(GameConfig(WARP_WALLS=not args.no_warp), seed=args.seed)
        game.run()
    except Exception as e:
        logging.error(f"Unexpected error: {e}", exc_info=True)
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
