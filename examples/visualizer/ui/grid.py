"""Grid lane rendering and screen <-> cell mapping."""
from __future__ import annotations

import pygame

from gridtrace import Grid, Kind, Session

from ui.constants import (
    GRID_LINE,
    KIND_COLORS,
    LABEL_COLOR,
    LABEL_H,
    LANE_GAP,
    TEXT_DIM,
    TILE_SIZE,
    WEIGHT_TEXT,
    WEIGHT_TINT,
)


def lane_origin(session: Session, index: int) -> tuple[int, int]:
    """Top-left pixel of a lane's first cell."""
    lane_w = session.layout.cols * TILE_SIZE
    return index * (lane_w + LANE_GAP), LABEL_H


def cell_at(session: Session, pos: tuple[int, int]) -> tuple[int, int, int] | None:
    """Map a mouse position to (lane, row, col), or None outside every lane."""
    px, py = pos
    for index in range(len(session.lanes)):
        ox, oy = lane_origin(session, index)
        col = (px - ox) // TILE_SIZE
        row = (py - oy) // TILE_SIZE
        if px >= ox and py >= oy and 0 <= row < session.layout.rows and 0 <= col < session.layout.cols:
            return index, row, col
    return None


def draw_lane(
    surface: pygame.Surface,
    font: pygame.font.Font,
    grid: Grid,
    origin: tuple[int, int],
    title: str,
) -> None:
    """Draw one grid with its algorithm label above it."""
    ox, oy = origin
    label = font.render(title, True, LABEL_COLOR)
    surface.blit(label, (ox + 4, oy - LABEL_H + 4))

    for cell in grid:
        rect = pygame.Rect(ox + cell.col * TILE_SIZE, oy + cell.row * TILE_SIZE, TILE_SIZE, TILE_SIZE)
        color = KIND_COLORS[cell.kind]
        if cell.kind is Kind.EMPTY and cell.weight > 1:
            color = WEIGHT_TINT
        pygame.draw.rect(surface, color, rect)
        pygame.draw.rect(surface, GRID_LINE, rect, 1)

        # Weight stays readable under visited/path marks
        if cell.weight > 1 and cell.kind is not Kind.WALL:
            text_color = WEIGHT_TEXT if cell.kind is not Kind.EMPTY else TEXT_DIM
            text = font.render(str(cell.weight), True, text_color)
            surface.blit(text, text.get_rect(center=rect.center))


def draw_lanes(surface: pygame.Surface, font: pygame.font.Font, session: Session) -> None:
    for index, lane in enumerate(session.lanes):
        draw_lane(
            surface,
            font,
            session.display(index),
            lane_origin(session, index),
            lane.algorithm.label,
        )


def draw_drag_cursor(
    surface: pygame.Surface, session: Session, target: tuple[int, int, int] | None
) -> None:
    """Outline the hovered cell in every lane."""
    if target is None:
        return
    _, row, col = target
    for index in range(len(session.lanes)):
        ox, oy = lane_origin(session, index)
        rect = pygame.Rect(ox + col * TILE_SIZE, oy + row * TILE_SIZE, TILE_SIZE, TILE_SIZE)
        pygame.draw.rect(surface, (255, 255, 0), rect, 2)
