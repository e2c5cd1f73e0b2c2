from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

import pygame


Point = Tuple[int, int]


@dataclass
class DrawContext:
    target: pygame.Surface
    origin: Point
    clip: pygame.Rect

    def paint(self, source: pygame.Surface, offset: Point = (0, 0)) -> None:
        previous = self.target.get_clip()
        self.target.set_clip(self.clip)
        try:
            self.target.blit(source, (self.origin[0] + offset[0], self.origin[1] + offset[1]))
        finally:
            self.target.set_clip(previous)


@dataclass
class DrawingArea:
    allocation: pygame.Rect = field(default_factory=lambda: pygame.Rect(0, 0, 0, 0))
    size_request: Tuple[int, int] = (100, 100)
    _damage: List[pygame.Rect] = field(default_factory=list)

    @property
    def allocated_width(self) -> int:
        return self.allocation.width

    @property
    def allocated_height(self) -> int:
        return self.allocation.height

    @property
    def origin(self) -> Point:
        return self.allocation.topleft

    def set_allocation(self, rect: pygame.Rect) -> bool:
        """Move/resize the widget. Returns True when the size changed."""
        resized = rect.size != self.allocation.size
        self.allocation = pygame.Rect(rect)
        return resized

    def contains(self, pos: Point) -> bool:
        return self.allocation.collidepoint(pos)

    def queue_draw_area(self, x: int, y: int, width: int, height: int) -> None:
        bounds = pygame.Rect(0, 0, self.allocation.width, self.allocation.height)
        damaged = pygame.Rect(x, y, width, height).clip(bounds)
        if damaged.width <= 0 or damaged.height <= 0:
            return
        self._damage.append(damaged)

    def queue_draw(self) -> None:
        self.queue_draw_area(0, 0, self.allocation.width, self.allocation.height)

    def take_damage(self) -> List[pygame.Rect]:
        damage, self._damage = self._damage, []
        return damage

    def context_for(self, target: pygame.Surface, region: pygame.Rect) -> DrawContext:
        return DrawContext(target=target, origin=self.origin, clip=region.move(self.origin))
