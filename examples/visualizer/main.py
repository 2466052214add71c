"""Pathfinder - draw a weighted grid and watch the searches explore it.

Run the four searches on an editable grid, or two of them side by side on
identical half-width grids, then replay the recorded exploration at any
speed and scrub through it.

Controls:
  Space         Run the selected algorithm(s)
  P             Play / Pause replay
  Left/Right    Step back / forward (pauses)
  Home/End      Jump to first / last step
  A / Shift+A   Cycle algorithm of the left / right lane
  1-5           Maze: random, recursive, vertical, horizontal, spiral
  B             Toggle brush (wall / weight)
  [ / ]         Weight brush value down / up
  C             Clear path
  W             Clear walls and weights
  R             Reset grid
  + / -         Faster / slower replay
  Tab           Switch single / compare mode
  Left-click    Paint with brush, drag start/end markers
  Right-click   Erase
  Escape        Quit
"""
from __future__ import annotations

import argparse
import logging
import random
import sys

import pygame

from gridtrace import FULL_LAYOUT, HALF_LAYOUT, Algorithm, Playback, Session
from gridtrace.config import MAX_STEP_DELAY_MS, MIN_STEP_DELAY_MS
from gridtrace_maze import generate

from game.editor import Editor
from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W
from ui.grid import cell_at, draw_drag_cursor, draw_lanes
from ui.sidebar import draw_sidebar, draw_status_bar
from ui.timeline import TimelineSlider

logger = logging.getLogger("visualizer")

MAZE_KEYS = {
    pygame.K_1: "random",
    pygame.K_2: "recursive",
    pygame.K_3: "vertical",
    pygame.K_4: "horizontal",
    pygame.K_5: "spiral",
}
ALGORITHMS = list(Algorithm)
MESSAGE_MS = 2500


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Pathfinder: gridtrace visual demo")
    p.add_argument("--mode", choices=["single", "compare"], default="single",
                   help="Start in single or compare mode (default: single)")
    p.add_argument("--algorithm", choices=[a.value for a in Algorithm], default="dijkstra",
                   help="Algorithm of the left lane (default: dijkstra)")
    p.add_argument("--versus", choices=[a.value for a in Algorithm], default="astar",
                   help="Algorithm of the right lane in compare mode (default: astar)")
    p.add_argument("--speed", type=int, default=10,
                   help=f"Replay delay per step in ms ({MIN_STEP_DELAY_MS}-{MAX_STEP_DELAY_MS}, default: 10)")
    p.add_argument("--seed", type=int, default=None, help="Maze seed (default: random)")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: WARNING)")
    args = p.parse_args()
    args.speed = max(MIN_STEP_DELAY_MS, min(MAX_STEP_DELAY_MS, args.speed))
    return args


class App:
    """Holds the session plus the UI state around it."""

    def __init__(self, args: argparse.Namespace) -> None:
        self.algorithms = [Algorithm(args.algorithm), Algorithm(args.versus)]
        self.rng = random.Random(args.seed)
        self.editor = Editor()
        self.slider = TimelineSlider()
        self.maze: str | None = None
        self._message = ""
        self._message_until = 0
        self.session = self._build_session(args.mode, args.speed)

    def _build_session(self, mode: str, delay_ms: float) -> Session:
        playback = Playback(delay_ms=delay_ms)
        if mode == "compare":
            return Session.compare(HALF_LAYOUT, tuple(self.algorithms), playback)
        return Session.single(FULL_LAYOUT, self.algorithms[0], playback)

    # --- Messages ---

    def say(self, message: str) -> None:
        self._message = message
        self._message_until = pygame.time.get_ticks() + MESSAGE_MS

    @property
    def message(self) -> str:
        if pygame.time.get_ticks() > self._message_until:
            return ""
        return self._message

    # --- Actions ---

    def visualize(self) -> None:
        if self.session.visualize():
            self.say("Running " + " vs ".join(lane.algorithm.label for lane in self.session.lanes))
        elif self.session.running:
            self.say("Already playing; pause first")
        else:
            self.say("Place a start and an end cell first")

    def switch_mode(self) -> None:
        mode = "single" if self.session.mode == "compare" else "compare"
        self.session.pause()
        self.session = self._build_session(mode, self.session.playback.delay_ms)
        self.maze = None
        logger.info("switched to %s mode", mode)
        self.say(f"{mode.capitalize()} mode")

    def cycle_algorithm(self, index: int) -> None:
        if index >= len(self.session.lanes) or self.session.running:
            return
        current = self.session.lane(index).algorithm
        algorithm = ALGORITHMS[(ALGORITHMS.index(current) + 1) % len(ALGORITHMS)]
        self.algorithms[index] = algorithm
        self.session.set_algorithm(index, algorithm)
        self.say(f"Lane {index + 1}: {algorithm.label}")

    def build_maze(self, name: str) -> None:
        if self.session.running:
            self.say("Pause before generating a maze")
            return
        maze = generate(name, self.session.lane(0).grid, self.rng)
        self.session.replace_grid(maze)
        self.maze = name
        self.say(f"Generated {name} maze")

    def change_speed(self, delta: int) -> None:
        delay = self.session.playback.delay_ms + delta
        delay = max(MIN_STEP_DELAY_MS, min(MAX_STEP_DELAY_MS, delay))
        self.session.set_speed(delay)
        self.say(f"Speed: {delay:g} ms/step")

    def handle_key(self, event: pygame.event.Event) -> bool:
        """Apply one key press. Returns False when the app should quit."""
        session = self.session
        key = event.key
        if key == pygame.K_ESCAPE:
            return False
        if key == pygame.K_SPACE:
            self.visualize()
        elif key == pygame.K_p:
            session.toggle_play()
        elif key == pygame.K_LEFT:
            session.seek(session.playback.position - 1)
        elif key == pygame.K_RIGHT:
            session.seek(session.playback.position + 1)
        elif key == pygame.K_HOME:
            session.rewind()
        elif key == pygame.K_END:
            session.skip_to_end()
        elif key == pygame.K_a:
            self.cycle_algorithm(1 if event.mod & pygame.KMOD_SHIFT else 0)
        elif key in MAZE_KEYS:
            self.build_maze(MAZE_KEYS[key])
        elif key == pygame.K_b:
            self.say(f"Brush: {self.editor.cycle_brush()}")
        elif key == pygame.K_LEFTBRACKET:
            self.say(f"Weight: {self.editor.adjust_weight(-1)}")
        elif key == pygame.K_RIGHTBRACKET:
            self.say(f"Weight: {self.editor.adjust_weight(1)}")
        elif key == pygame.K_c:
            session.clear_path()
        elif key == pygame.K_w:
            session.clear_walls()
            self.maze = None
        elif key == pygame.K_r:
            session.reset()
            self.maze = None
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self.change_speed(-10)
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self.change_speed(10)
        elif key == pygame.K_TAB:
            self.switch_mode()
        return True

    def handle_mouse(self, event: pygame.event.Event) -> None:
        session = self.session
        if event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 3):
            if event.button == 1 and self.slider.hit(event.pos):
                self.slider.dragging = True
                session.seek(self.slider.index_at(event.pos[0], session.playback.length))
                return
            target = cell_at(session, event.pos)
            if target is not None:
                _, row, col = target
                self.editor.press(session, row, col, erase=event.button == 3)
                if session.running:
                    self.say("Pause before editing")

        elif event.type == pygame.MOUSEMOTION:
            if self.slider.dragging:
                session.seek(self.slider.index_at(event.pos[0], session.playback.length))
            elif self.editor.active:
                target = cell_at(session, event.pos)
                if target is not None:
                    _, row, col = target
                    self.editor.drag(session, row, col)

        elif event.type == pygame.MOUSEBUTTONUP:
            self.slider.dragging = False
            self.editor.release()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Pathfinder")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    app = App(args)

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                running = app.handle_key(event)
            elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP):
                app.handle_mouse(event)

        # --- Advance replay ---
        app.session.update()

        # --- Render ---
        screen.fill(BG_COLOR)
        draw_lanes(screen, font, app.session)
        if not app.session.running:
            draw_drag_cursor(screen, app.session, cell_at(app.session, pygame.mouse.get_pos()))
        app.slider.draw(screen, font, app.session.playback)
        draw_sidebar(screen, font, app.session, app.editor.brush, app.editor.weight, app.maze)
        draw_status_bar(screen, font, app.message)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
