"""
resources.py

Locates and caches on-disk assets: logo images (decoded with Pillow),
fonts, and the per-user log directory.
"""

import logging
import os
import sys
from typing import Dict, Optional

import appdirs
import pygame
from PIL import Image, UnidentifiedImageError

APP_NAME = "WarpGrid"
APP_AUTHOR = "WarpGrid"

HEAD_LOGO = "snake_head_logo.png"
FOOD_LOGO = "food_logo.png"


class ResourceManager:
    def __init__(self, base_path: Optional[str] = None):
        """Set up caches; nothing is loaded until first requested"""
        self._images: Dict[str, Optional[pygame.Surface]] = {}
        self._font_cache: Dict[int, pygame.font.Font] = {}
        self.logger = logging.getLogger(__name__)
        self.base_path = base_path or self.get_base_path()

    def get_base_path(self) -> str:
        """Determine the base path for resources"""
        if hasattr(sys, '_MEIPASS'):
            # PyInstaller creates a temp folder and stores path in _MEIPASS
            return sys._MEIPASS
        # Development path: project_root/, this file lives in src/warpgrid/
        return os.path.abspath(os.path.join(os.path.dirname(__file__), '../../'))

    def resource_path(self, relative_path: str) -> str:
        """Get absolute path to resource for both dev and PyInstaller modes"""
        return os.path.join(self.base_path, "resources", relative_path)

    def get_image(self, name: str) -> Optional[pygame.Surface]:
        """
        Logo image as a pygame surface, or None when it is missing or
        unreadable so the caller can fall back to a drawn shape.
        """
        if name in self._images:
            return self._images[name]

        surface = None
        path = self.resource_path(os.path.join("images", name))
        if not os.path.exists(path):
            self.logger.warning(f"Image not found at {path}, using fallback graphics")
        else:
            try:
                with Image.open(path) as img:
                    rgba = img.convert("RGBA")
                    surface = pygame.image.fromstring(rgba.tobytes(), rgba.size, "RGBA")
                self.logger.info(f"Loaded image {name} ({surface.get_width()}x{surface.get_height()})")
            except (OSError, UnidentifiedImageError, ValueError) as e:
                self.logger.warning(f"Could not load image {name}: {e}")
                surface = None
        self._images[name] = surface
        return surface

    def get_font(self, size: int) -> pygame.font.Font:
        """Get or create a font of the specified size"""
        if size not in self._font_cache:
            try:
                self._font_cache[size] = pygame.font.SysFont("monospace", size, bold=True)
            except Exception as e:
                self.logger.error(f"Failed to load font size {size}: {e}")
                # Fallback to default font
                self._font_cache[size] = pygame.font.Font(None, size)
        return self._font_cache[size]

    def cleanup(self) -> None:
        """Release all loaded resources"""
        self._images.clear()
        self._font_cache.clear()
        self.logger.info("Resources cleaned up")


def get_log_path(relative_path: str) -> str:
    """Get path for log files using appdirs for user-specific directories"""
    log_dir = appdirs.user_log_dir(APP_NAME, APP_AUTHOR)
    os.makedirs(log_dir, exist_ok=True)
    return os.path.join(log_dir, relative_path)
