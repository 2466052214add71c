"""Scrubbable timeline slider under the grids."""
from __future__ import annotations

import pygame

from gridtrace import Playback

from ui.constants import (
    GRID_H,
    GRID_W,
    TEXT_COLOR,
    TEXT_DIM,
    TIMELINE_BG,
    TIMELINE_H,
    TIMELINE_KNOB,
    TIMELINE_RAIL,
)

RAIL_X = 180
RAIL_W = GRID_W - RAIL_X - 20


class TimelineSlider:
    """Maps mouse drags on the rail to step indices."""

    def __init__(self) -> None:
        self.dragging = False

    def rail_rect(self) -> pygame.Rect:
        return pygame.Rect(RAIL_X, GRID_H + TIMELINE_H // 2 - 3, RAIL_W, 6)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rail_rect().inflate(0, TIMELINE_H - 6).collidepoint(pos)

    def index_at(self, x: int, length: int) -> int:
        fraction = (x - RAIL_X) / RAIL_W
        fraction = max(0.0, min(1.0, fraction))
        return round(fraction * length)

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, playback: Playback) -> None:
        pygame.draw.rect(surface, TIMELINE_BG, (0, GRID_H, GRID_W, TIMELINE_H))

        state = "PLAY" if playback.playing else "PAUSE"
        label = font.render(state, True, TEXT_COLOR if playback.playing else TEXT_DIM)
        surface.blit(label, (10, GRID_H + TIMELINE_H // 2 - label.get_height() // 2))

        rail = self.rail_rect()
        pygame.draw.rect(surface, TIMELINE_RAIL, rail)
        if playback.length == 0:
            return

        fraction = playback.position / playback.length
        filled = rail.copy()
        filled.width = int(rail.width * fraction)
        pygame.draw.rect(surface, TIMELINE_KNOB, filled)
        pygame.draw.circle(surface, TIMELINE_KNOB, (rail.x + filled.width, rail.centery), 8)

        counter = font.render(f"{playback.position}/{playback.length}", True, TEXT_DIM)
        surface.blit(counter, (10 + label.get_width() + 12, rail.centery - counter.get_height() // 2))
