"""Info panel (sidebar) and bottom key-bindings bar."""
from __future__ import annotations

import pygame

from gridtrace import Session

from ui.constants import (
    GRID_H,
    GRID_W,
    LABEL_COLOR,
    SCREEN_H,
    SCREEN_W,
    SIDEBAR_BG,
    SIDEBAR_W,
    STATUS_BG,
    STATUS_COLORS,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def draw_sidebar(
    surface: pygame.Surface,
    font: pygame.font.Font,
    session: Session,
    brush: str,
    weight: int,
    maze: str | None,
) -> None:
    """Draw right-side info panel: settings, run status and statistics."""
    x = GRID_W
    h = SCREEN_H - STATUS_H

    pygame.draw.rect(surface, SIDEBAR_BG, (x, 0, SIDEBAR_W, h))
    pygame.draw.line(surface, (50, 50, 70), (x, 0), (x, h))

    pad = 10
    line_h = 20
    cx = x + pad
    cy = 8

    def line(text: str, color: tuple[int, int, int] = TEXT_COLOR, gap: int = 0) -> None:
        nonlocal cy
        surface.blit(font.render(text, True, color), (cx, cy))
        cy += line_h + gap

    line("PATHFINDER", LABEL_COLOR, 4)
    line(f"Mode: {session.mode.capitalize()}")
    line(f"Speed: {session.playback.delay_ms:g} ms/step")
    brush_label = f"weight {weight}" if brush == "weight" else brush
    line(f"Brush: {brush_label}")
    line(f"Maze: {maze or '-'}", gap=8)

    if session.status:
        line(session.status.upper(), STATUS_COLORS.get(session.status, TEXT_COLOR), 8)

    rows = session.comparison()
    if rows is not None:
        _draw_comparison(surface, font, rows, cx, cy)
        return

    for lane in session.lanes:
        line(lane.algorithm.label, LABEL_COLOR)
        if lane.stats is None:
            line("  not run", TEXT_DIM, 8)
            continue
        line(f"  Nodes visited: {lane.stats.nodes_visited}")
        line(f"  Path length:   {lane.stats.path_length}")
        line(f"  Time:          {lane.stats.execution_time:.2f} ms", gap=8)


def _draw_comparison(
    surface: pygame.Surface,
    font: pygame.font.Font,
    rows: list[dict],
    x: int,
    y: int,
) -> None:
    """Paired bars per metric, scaled to the larger of the two values."""
    names = [key for key in rows[0] if key != "metric"]
    colors = [(110, 170, 235), (250, 210, 70)]
    bar_max = SIDEBAR_W - 90

    for i, name in enumerate(names):
        pygame.draw.rect(surface, colors[i], (x, y + 5, 10, 10))
        surface.blit(font.render(name, True, TEXT_COLOR), (x + 16, y))
        y += 20
    y += 8

    for row in rows:
        surface.blit(font.render(row["metric"], True, LABEL_COLOR), (x, y))
        y += 20
        top = max(row[name] for name in names) or 1
        for i, name in enumerate(names):
            value = row[name]
            width = max(1, int(bar_max * value / top))
            pygame.draw.rect(surface, colors[i], (x, y + 3, width, 12))
            surface.blit(font.render(str(value), True, TEXT_DIM), (x + width + 6, y))
            y += 18
        y += 8


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, message: str) -> None:
    """Draw bottom key-bindings bar, or the latest message when there is one."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    pygame.draw.line(surface, (50, 50, 70), (0, y), (SCREEN_W, y))

    text = message or (
        "[Space] Run  [P] Play/Pause  [</>] Step  [Home/End] Seek  [A] Algorithm  "
        "[1-5] Maze  [B] Brush  [C] Clear path  [W] Clear walls  [R] Reset  "
        "[+/-] Speed  [Tab] Mode  [Esc] Quit"
    )
    label = font.render(text, True, TEXT_COLOR if message else TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
