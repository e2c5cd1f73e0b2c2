from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import pygame

from scribble.config import coerce_color, coerce_int, load_config
from scribble.events import (
    BUTTON1_MASK,
    BUTTON_PRIMARY,
    ConfigureEvent,
    button_event_from_pygame,
    motion_event_from_pygame,
)
from scribble.handlers import EventHandler, ScribbleController
from scribble.surface import BLACK, WHITE, BackingSurface
from scribble.ui.canvas import DrawingArea
from scribble.ui.common import (
    create_window,
    draw_window_chrome,
    drawing_area_rect,
    minimum_window_size,
)


WINDOWSIZECHANGED = getattr(pygame, "WINDOWSIZECHANGED", None)
RESIZE_EVENTS = {event for event in (pygame.VIDEORESIZE, WINDOWSIZECHANGED) if event is not None}

logger = logging.getLogger(__name__)


def build_surface(config: Dict[str, Any], widget: DrawingArea) -> BackingSurface:
    brush = config.get("brush", {})
    return BackingSurface(
        widget,
        brush_size=coerce_int(brush.get("size"), 6, minimum=1),
        paint_color=coerce_color(brush.get("color"), BLACK),
        background_color=coerce_color(config.get("background"), WHITE),
    )


class ScribbleApp:
    def __init__(self, config: Optional[Dict[str, Any]] = None) -> None:
        self.config = config if config is not None else load_config()
        window = self.config.get("window", {})
        self.title = str(window.get("title", "Drawing Area"))
        self.border_width = coerce_int(window.get("border_width"), 8)
        self.fps = coerce_int(window.get("fps"), 60, minimum=1)

        self.drawing_area = DrawingArea(
            size_request=(
                coerce_int(window.get("min_width"), 100, minimum=1),
                coerce_int(window.get("min_height"), 100, minimum=1),
            )
        )
        self.min_size = minimum_window_size(self.drawing_area.size_request, self.border_width)
        initial_size = (
            max(self.min_size[0], coerce_int(window.get("width"), 400)),
            max(self.min_size[1], coerce_int(window.get("height"), 300)),
        )

        self.screen, self.screen_rect = create_window(initial_size, self.title)
        self.clock = pygame.time.Clock()
        self.handler: Optional[EventHandler] = None
        self.running = False
        self._configured = False
        # True while a primary drag that started inside the drawing area is held.
        self._drag_in_area = False
        self._chrome_dirty = True
        logger.info("created %dx%d window %r", initial_size[0], initial_size[1], self.title)

    def connect(self, handler: EventHandler) -> None:
        self.handler = handler

    def _resize_window(self, size) -> None:
        width = max(self.min_size[0], int(size[0]))
        height = max(self.min_size[1], int(size[1]))
        current = pygame.display.get_surface()
        if current is None or current.get_size() != (width, height):
            current = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.screen = current
        self.screen_rect = current.get_rect()

    def relayout(self) -> None:
        rect = drawing_area_rect(self.screen_rect, self.border_width)
        resized = self.drawing_area.set_allocation(rect)
        self._chrome_dirty = True
        if (resized or not self._configured) and self.handler is not None:
            self._configured = True
            self.handler.on_configure(
                self.drawing_area,
                ConfigureEvent(self.drawing_area.allocated_width, self.drawing_area.allocated_height),
            )
        self.drawing_area.queue_draw()

    def dispatch(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            if self.handler is not None:
                self.handler.on_destroy()
            self.running = False
            return
        if event.type in RESIZE_EVENTS:
            size = getattr(event, "size", None) or (event.x, event.y)
            self._resize_window(size)
            self.relayout()
            return
        if self.handler is None:
            return
        if event.type == pygame.MOUSEBUTTONDOWN:
            inside = self.drawing_area.contains(event.pos)
            if event.button == BUTTON_PRIMARY:
                self._drag_in_area = inside
            if not inside:
                return
            self.handler.on_button_press(
                self.drawing_area,
                button_event_from_pygame(event, self.drawing_area.origin),
            )
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == BUTTON_PRIMARY:
                self._drag_in_area = False
        elif event.type == pygame.MOUSEMOTION:
            motion = motion_event_from_pygame(event, self.drawing_area.origin)
            if motion.state & BUTTON1_MASK and not self._drag_in_area:
                return
            self.handler.on_motion_notify(self.drawing_area, motion)

    def paint(self) -> None:
        regions = self.drawing_area.take_damage()
        if self._chrome_dirty:
            draw_window_chrome(self.screen, self.screen_rect, self.border_width)
        for region in regions:
            context = self.drawing_area.context_for(self.screen, region)
            if self.handler is not None:
                self.handler.on_draw(self.drawing_area, context)
        if self._chrome_dirty:
            pygame.display.flip()
            self._chrome_dirty = False
        elif regions:
            pygame.display.update([region.move(self.drawing_area.origin) for region in regions])

    def run(self) -> None:
        self.relayout()
        self.running = True
        while self.running:
            for event in pygame.event.get():
                self.dispatch(event)
                if not self.running:
                    break
            if not self.running:
                break
            self.paint()
            self.clock.tick(self.fps)

        pygame.quit()


def _configure_logging(config: Dict[str, Any]) -> None:
    level = str(config.get("log_level", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    config = load_config()
    _configure_logging(config)
    try:
        app = ScribbleApp(config)
        app.connect(ScribbleController(build_surface(config, app.drawing_area)))
        app.run()
    except Exception:
        logger.exception("scribble aborted")
        pygame.quit()
        raise


if __name__ == "__main__":
    main()
