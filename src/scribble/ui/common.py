from __future__ import annotations

from typing import Tuple

import pygame


Color = Tuple[int, int, int]

WINDOW_BG: Color = (237, 236, 235)
SHADOW_DARK: Color = (145, 145, 145)
SHADOW_LIGHT: Color = (255, 255, 255)
SHADOW_WIDTH = 2


def create_window(size: Tuple[int, int], title: str) -> Tuple[pygame.Surface, pygame.Rect]:
    pygame.init()
    pygame.display.set_caption(title)
    screen = pygame.display.set_mode(size, pygame.RESIZABLE)
    pygame.mouse.set_visible(True)
    return screen, screen.get_rect()


def minimum_window_size(size_request: Tuple[int, int], border_width: int) -> Tuple[int, int]:
    chrome = 2 * (border_width + SHADOW_WIDTH)
    return size_request[0] + chrome, size_request[1] + chrome


def frame_rect(window_rect: pygame.Rect, border_width: int) -> pygame.Rect:
    return window_rect.inflate(-2 * border_width, -2 * border_width)


def drawing_area_rect(window_rect: pygame.Rect, border_width: int) -> pygame.Rect:
    inner = frame_rect(window_rect, border_width).inflate(-2 * SHADOW_WIDTH, -2 * SHADOW_WIDTH)
    if inner.width < 0 or inner.height < 0:
        inner.size = (max(0, inner.width), max(0, inner.height))
    return inner


def draw_inset_frame(surface: pygame.Surface, rect: pygame.Rect) -> None:
    """Sunken bevel: dark on the top/left edges, light on the bottom/right."""
    for offset in range(SHADOW_WIDTH):
        left = rect.left + offset
        top = rect.top + offset
        right = rect.right - 1 - offset
        bottom = rect.bottom - 1 - offset
        pygame.draw.line(surface, SHADOW_DARK, (left, top), (right, top))
        pygame.draw.line(surface, SHADOW_DARK, (left, top), (left, bottom))
        pygame.draw.line(surface, SHADOW_LIGHT, (left, bottom), (right, bottom))
        pygame.draw.line(surface, SHADOW_LIGHT, (right, top), (right, bottom))


def draw_window_chrome(surface: pygame.Surface, window_rect: pygame.Rect, border_width: int) -> None:
    surface.fill(WINDOW_BG)
    draw_inset_frame(surface, frame_rect(window_rect, border_width))
