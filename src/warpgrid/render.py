"""
render.py

Draws the board onto a fixed-size pygame Surface: background, the food
item and the snake with its head at the interpolated position. Logos
are used when they loaded, otherwise the procedural shapes stand in.
"""

import math
from typing import Tuple

import pygame

from .config import GameConfig, ItemType
from .entities import GameState
from .resources import FOOD_LOGO, HEAD_LOGO, ResourceManager

##########################
# RENDERING
##########################

def lerp_color(a: Tuple[int, ...], b: Tuple[int, ...], t: float) -> Tuple[int, ...]:
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


class Renderer:
    """
    Handles all board drawing.
    The surface is owned by the host; when the loop is paused nothing
    is drawn and the last frame stays on it.
    """
    def __init__(self, config: GameConfig, resources: ResourceManager,
                 surface: pygame.Surface):
        self.config = config
        self.resources = resources
        self.surface = surface

    def draw_scene(self, state: GameState) -> None:
        self.surface.fill(self.config.CANVAS_BG)
        if state.food is not None:
            self.draw_food(state.food.cell.x, state.food.cell.y, state.food.type)
        self.draw_snake(state)

    def draw_food(self, x: int, y: int, item_type: ItemType) -> None:
        """Draw an item with a twinkling core"""
        cfg = self.config
        size = cfg.GRID_SIZE
        pad = cfg.LOGO_FOOD_PADDING
        center = (x + size // 2, y + size // 2)
        radius = (size - pad * 2) // 2

        logo = self.resources.get_image(FOOD_LOGO) if item_type == ItemType.BONUS_LOGO else None
        if logo is not None:
            draw_size = size - pad * 2
            self.surface.blit(pygame.transform.smoothscale(logo, (draw_size, draw_size)),
                              (x + pad, y + pad))
        else:
            color = {
                ItemType.SPECIAL: cfg.SPECIAL_FOOD,
                ItemType.SPEED_BOOST: cfg.SPEED_BOOST,
                ItemType.INVERSE_CONTROLS: cfg.INVERSE_CONTROLS,
            }.get(item_type, cfg.NORMAL_FOOD)
            pygame.draw.circle(self.surface, color, center, radius)
            if item_type == ItemType.SPEED_BOOST:
                self.draw_bolt(center, radius)
            elif item_type == ItemType.INVERSE_CONTROLS:
                self.draw_cycle(center, radius)

        # Twinkle between roughly 30% and 70% white
        alpha = 0.5 + math.sin(pygame.time.get_ticks() / 100) * 0.2
        core_radius = max(1, (size - pad * 2) // 4)
        core = pygame.Surface((core_radius * 2, core_radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(core, (*cfg.WHITE[:3], int(255 * alpha)),
                           (core_radius, core_radius), core_radius)
        self.surface.blit(core, (center[0] - core_radius, center[1] - core_radius))

    def draw_bolt(self, center: Tuple[int, int], radius: int) -> None:
        """Lightning glyph for the speed boost"""
        cx, cy = center
        r = radius
        points = [
            (cx + r * 0.2, cy - r * 0.8),
            (cx - r * 0.4, cy + r * 0.1),
            (cx, cy + r * 0.1),
            (cx - r * 0.2, cy + r * 0.8),
            (cx + r * 0.4, cy - r * 0.1),
            (cx, cy - r * 0.1),
        ]
        pygame.draw.polygon(self.surface, self.config.WHITE, points)

    def draw_cycle(self, center: Tuple[int, int], radius: int) -> None:
        """Circular-arrows glyph for inverted controls"""
        cx, cy = center
        r = max(2, int(radius * 0.6))
        rect = pygame.Rect(cx - r, cy - r, r * 2, r * 2)
        pygame.draw.arc(self.surface, self.config.WHITE, rect, 0.3, math.pi - 0.3, 2)
        pygame.draw.arc(self.surface, self.config.WHITE, rect, math.pi + 0.3, 2 * math.pi - 0.3, 2)

    def draw_snake(self, state: GameState) -> None:
        cfg = self.config
        size = cfg.GRID_SIZE
        body_radius = int(size / 2.2)
        body = state.snake.body[1:]
        for i, (sx, sy) in enumerate(body):
            t = i / max(len(body) - 1, 1)
            color = lerp_color(cfg.SNAKE_BODY_START, cfg.SNAKE_BODY_END, t)
            pygame.draw.circle(self.surface, color, (sx + size // 2, sy + size // 2), body_radius)

        head_x, head_y = state.interpolated_head()
        draw_size = int(size * cfg.LOGO_HEAD_SCALE)
        offset = (draw_size - size) / -2
        head_rect = pygame.Rect(int(head_x + offset), int(head_y + offset), draw_size, draw_size)

        logo = self.resources.get_image(HEAD_LOGO)
        if logo is not None:
            self.surface.blit(pygame.transform.smoothscale(logo, head_rect.size), head_rect.topleft)
        else:
            pygame.draw.rect(self.surface, cfg.SNAKE_HEAD,
                             pygame.Rect(int(head_x), int(head_y), size, size),
                             border_radius=size // 4)

        if state.controls_inverted:
            pygame.draw.rect(self.surface, cfg.INVERSE_CONTROLS, head_rect, 3)
