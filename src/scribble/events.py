from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import pygame


Point = Tuple[int, int]

BUTTON_PRIMARY = 1
BUTTON_MIDDLE = 2
BUTTON_SECONDARY = 3

BUTTON1_MASK = 1 << 8
BUTTON2_MASK = 1 << 9
BUTTON3_MASK = 1 << 10

_BUTTON_MASKS = (BUTTON1_MASK, BUTTON2_MASK, BUTTON3_MASK)


@dataclass(frozen=True)
class ConfigureEvent:
    width: int
    height: int


@dataclass(frozen=True)
class ButtonEvent:
    button: int
    x: float
    y: float

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class MotionEvent:
    state: int
    x: float
    y: float

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


def state_from_buttons(buttons: Sequence[int]) -> int:
    """Fold pygame's pressed-buttons tuple into a modifier-state bitmask."""
    state = 0
    for pressed, mask in zip(buttons, _BUTTON_MASKS):
        if pressed:
            state |= mask
    return state


def button_event_from_pygame(event: pygame.event.Event, origin: Point) -> ButtonEvent:
    x, y = event.pos
    return ButtonEvent(button=event.button, x=x - origin[0], y=y - origin[1])


def motion_event_from_pygame(event: pygame.event.Event, origin: Point) -> MotionEvent:
    x, y = event.pos
    buttons = getattr(event, "buttons", (0, 0, 0))
    return MotionEvent(state=state_from_buttons(buttons), x=x - origin[0], y=y - origin[1])
