from __future__ import annotations

import enum
import logging
from typing import Optional, Protocol, Tuple

import pygame


Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)

logger = logging.getLogger(__name__)


class Invalidatable(Protocol):
    def queue_draw_area(self, x: int, y: int, width: int, height: int) -> None: ...


class SurfaceState(enum.Enum):
    UNINITIALIZED = "uninitialized"
    READY = "ready"


class BackingSurface:
    def __init__(
        self,
        widget: Invalidatable,
        *,
        brush_size: int = 6,
        paint_color: Color = BLACK,
        background_color: Color = WHITE,
    ) -> None:
        self.widget = widget
        self.brush_size = max(1, brush_size)
        self.paint_color = paint_color
        self.background_color = background_color
        self._image: Optional[pygame.Surface] = None

    @property
    def state(self) -> SurfaceState:
        if self._image is None:
            return SurfaceState.UNINITIALIZED
        return SurfaceState.READY

    @property
    def is_ready(self) -> bool:
        return self._image is not None

    @property
    def image(self) -> Optional[pygame.Surface]:
        return self._image

    @property
    def size(self) -> Tuple[int, int]:
        if self._image is None:
            return (0, 0)
        return self._image.get_size()

    def allocate(self, width: int, height: int) -> None:
        size = (max(0, int(width)), max(0, int(height)))
        # 24-bit, no alpha: color content only.
        self._image = pygame.Surface(size, 0, 24)
        logger.debug("allocated backing surface %dx%d", *size)

    def clear(self) -> None:
        if self._image is None:
            return
        self._image.fill(self.background_color)

    def paint_dot(self, x: float, y: float) -> None:
        if self._image is None:
            return
        half = self.brush_size // 2
        rect = pygame.Rect(int(x) - half, int(y) - half, self.brush_size, self.brush_size)
        painted = rect.clip(self._image.get_rect())
        if painted.width > 0 and painted.height > 0:
            self._image.fill(self.paint_color, painted)
        self.widget.queue_draw_area(rect.x, rect.y, rect.width, rect.height)

    def release(self) -> None:
        if self._image is not None:
            logger.debug("released backing surface %dx%d", *self._image.get_size())
        self._image = None

