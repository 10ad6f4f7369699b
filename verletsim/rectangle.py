"""Static rectangular obstacles, optionally textured."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pygame

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntRect:
    """An axis-aligned rectangle with integer coordinates."""

    left: int
    top: int
    width: int
    height: int

    def right(self) -> int:
        """X coordinate of the right edge."""
        return self.left + self.width

    def bottom(self) -> int:
        """Y coordinate of the bottom edge."""
        return self.top + self.height


class Rectangle:
    """An obstacle rectangle that points collide with."""

    def __init__(self, rect: IntRect, texture_path: str | Path | None = None) -> None:
        self.rect = rect
        self.texture: pygame.Surface | None = None
        if texture_path is not None:
            self.set_texture(texture_path)

    @property
    def has_texture(self) -> bool:
        """Whether a texture was loaded successfully."""
        return self.texture is not None

    def set_rect(self, rect: IntRect) -> None:
        """Replace the rectangle's geometry."""
        self.rect = rect

    def set_texture(self, path: str | Path) -> bool:
        """Load a texture image from ``path``; return whether it loaded."""
        try:
            self.texture = pygame.image.load(str(path))
        except (pygame.error, OSError):
            logger.warning("Texture couldn't load properly")
            self.texture = None
            return False
        logger.info("texture set successfully")
        return True

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the rectangle, stretched texture or plain white, on ``surface``."""
        r = self.rect
        area = pygame.Rect(r.left, r.top, r.width, r.height)
        if self.texture is not None:
            scaled = pygame.transform.scale(self.texture, (max(r.width, 0), max(r.height, 0)))
            surface.blit(scaled, area.topleft)
        else:
            pygame.draw.rect(surface, (255, 255, 255, 255), area)