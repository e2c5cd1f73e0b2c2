from __future__ import annotations

import logging
from typing import Protocol

from scribble.events import (
    BUTTON1_MASK,
    BUTTON_PRIMARY,
    BUTTON_SECONDARY,
    ButtonEvent,
    ConfigureEvent,
    MotionEvent,
)
from scribble.surface import BackingSurface
from scribble.ui.canvas import DrawContext, DrawingArea


logger = logging.getLogger(__name__)


class EventHandler(Protocol):
    # Returning True stops further handling of the event.
    def on_configure(self, widget: DrawingArea, event: ConfigureEvent) -> bool: ...

    def on_draw(self, widget: DrawingArea, context: DrawContext) -> bool: ...

    def on_button_press(self, widget: DrawingArea, event: ButtonEvent) -> bool: ...

    def on_motion_notify(self, widget: DrawingArea, event: MotionEvent) -> bool: ...

    def on_destroy(self) -> None: ...


class ScribbleController:
    def __init__(self, surface: BackingSurface) -> None:
        self.surface = surface

    def on_configure(self, widget: DrawingArea, event: ConfigureEvent) -> bool:
        # Create a new surface of the appropriate size to store our scribbles.
        self.surface.allocate(event.width, event.height)
        self.surface.clear()
        return True

    def on_draw(self, widget: DrawingArea, context: DrawContext) -> bool:
        # The context is already clipped to the exposed region.
        if not self.surface.is_ready:
            return False
        context.paint(self.surface.image, (0, 0))
        return False

    def on_button_press(self, widget: DrawingArea, event: ButtonEvent) -> bool:
        if not self.surface.is_ready:
            logger.debug("button %d pressed before first configure; ignored", event.button)
            return True
        if event.button == BUTTON_PRIMARY:
            self.surface.paint_dot(*event.position)
        elif event.button == BUTTON_SECONDARY:
            self.surface.clear()
            widget.queue_draw()
        return True

    def on_motion_notify(self, widget: DrawingArea, event: MotionEvent) -> bool:
        if not self.surface.is_ready:
            return True
        if event.state & BUTTON1_MASK:
            self.surface.paint_dot(*event.position)
        return True

    def on_destroy(self) -> None:
        self.surface.release()
