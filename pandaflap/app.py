"""Window, input and main loop."""

from __future__ import annotations

import argparse
import random

import pygame

from .buttons import LEFT_ID, RIGHT_ID, ButtonPanel
from .game import BLACK
from .menus import MenuController
from .render import FONT_SIZE, double_wipe_frames, draw_centre_string, rgb565, wipe_frames

SCREEN_SIZE = (240, 240)
_WIPE_FPS = 120

_KEYS = {
    pygame.K_LEFT: LEFT_ID,
    pygame.K_a: LEFT_ID,
    pygame.K_SPACE: LEFT_ID,
    pygame.K_UP: LEFT_ID,
    pygame.K_RIGHT: RIGHT_ID,
    pygame.K_d: RIGHT_ID,
}
_MOUSE = {1: LEFT_ID, 3: RIGHT_ID}


def _count(minimum: int):
    def parse(text: str) -> int:
        value = int(text)
        if value < minimum:
            raise argparse.ArgumentTypeError(f"must be at least {minimum}")
        return value

    return parse


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pandaflap", description="Two-button menus and a side-scrolling bird game."
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--fps", type=_count(1), default=60, help="frames per second")
    parser.add_argument(
        "--frames", type=_count(0), default=None, help="stop after this many frames"
    )
    return parser


def _handle_events(buttons: ButtonPanel) -> bool:
    """Feed input to the buttons; return False when the window is closed."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            if event.key == pygame.K_ESCAPE:
                return False
            name = _KEYS.get(event.key)
            down = event.type == pygame.KEYDOWN
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            name = _MOUSE.get(event.button)
            down = event.type == pygame.MOUSEBUTTONDOWN
        else:
            continue
        if name is None:
            continue
        if down:
            buttons[name].on_press()
        else:
            buttons[name].on_click()
    return True


def _pause(milliseconds: int) -> None:
    end = pygame.time.get_ticks() + milliseconds
    while pygame.time.get_ticks() < end:
        pygame.event.pump()
        pygame.time.wait(10)


def _wipe(screen: pygame.Surface, clock: pygame.time.Clock, speed: int, color: int, double: bool) -> None:
    width, height = screen.get_size()
    rgb = rgb565(color)
    heights = double_wipe_frames(height, speed) if double else wipe_frames(height, speed)
    for covered in heights:
        screen.fill(rgb, (0, 0, width, covered))
        if double:
            screen.fill(rgb, (0, height - covered, width, height - covered))
        pygame.display.flip()
        pygame.event.pump()
        clock.tick(_WIPE_FPS)


def _play_effects(screen: pygame.Surface, controller: MenuController, clock: pygame.time.Clock) -> None:
    for effect in controller.effects:
        if effect.kind == "wipe":
            _wipe(screen, clock, effect.speed, effect.color, double=False)
        elif effect.kind == "double_wipe":
            _wipe(screen, clock, effect.speed, effect.color, double=True)
        elif effect.kind == "game_over":
            _pause(1000)
            _wipe(screen, clock, effect.speed, effect.color, double=True)
            width, height = screen.get_size()
            draw_centre_string(screen, "GAME OVER", width / 2, height / 2 - 10, FONT_SIZE, BLACK)
            pygame.display.flip()
            _pause(2000)
    controller.effects.clear()


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the menus until closed or out of frames."""
    args = _parser().parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption("Panda Voyager")
        buttons = ButtonPanel()
        controller = MenuController(buttons, random.Random(args.seed))
        clock = pygame.time.Clock()
        frame = 0
        while args.frames is None or frame < args.frames:
            if not _handle_events(buttons):
                break
            controller.advance(screen)
            pygame.display.flip()
            _play_effects(screen, controller, clock)
            clock.tick(args.fps)
            frame += 1
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())