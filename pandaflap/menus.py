"""Screen state machine: splash, main menu, game, clock and portrait."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass

import pygame

from .buttons import LEFT_ID, RIGHT_ID, ButtonPanel
from .game import BLACK, CANVAS_HEIGHT, CANVAS_WIDTH, DAY, PADDING, WHITE, Bird, Game, Mode
from .hour import colombia_now, format_clock, format_date
from .render import (
    FONT_SIZE,
    GREEN,
    LARGE_FONT_SIZE,
    YELLOW,
    display_button_indications,
    draw_bird,
    draw_centre_string,
    draw_game_menu,
    draw_playfield,
    rgb565,
)

PLAY_BUTTON = LEFT_ID
MENU_BACKGROUND = 0x196B

MAX_LOGO_DIMENSIONS = 128
PANDA_SIZE = 120
PORTRAIT_SIZE = 200

ARROW_TRIANGLE_STARTING_X = 185
ARROW_TRIANGLE_HALF = -20
ARROW_TRIANGLE_BASE = 20


class MenuName(enum.Enum):
    INIT = enum.auto()
    MAIN_MENU = enum.auto()
    FLAPPY_BIRD = enum.auto()
    HOUR = enum.auto()
    PORTRAIT = enum.auto()
    SENSOR = enum.auto()


class Logo(enum.Enum):
    """Entries of the main menu, in the order the right button cycles them."""

    RESIZED_BIRD = 0
    PORTRAIT = 1
    HOUR = 2

    @property
    def menu(self) -> MenuName:
        """The screen that selecting this entry opens."""
        return {
            Logo.RESIZED_BIRD: MenuName.FLAPPY_BIRD,
            Logo.PORTRAIT: MenuName.PORTRAIT,
            Logo.HOUR: MenuName.HOUR,
        }[self]


@dataclass(frozen=True)
class _Effect:
    kind: str
    speed: int
    color: int


class MenuController:
    """Runs the current screen once per frame and switches between screens."""

    def __init__(self, buttons: ButtonPanel, rng: random.Random | None = None) -> None:
        self.buttons = buttons
        self._rng = rng if rng is not None else random.Random()
        self.game = Game(self._rng)
        self.current = MenuName.INIT
        self.first_entrance = True
        self.logo = Logo.RESIZED_BIRD
        self.effects: list[_Effect] = []
        self.clock = colombia_now
        self._canvas = pygame.Surface((CANVAS_WIDTH, CANVAS_HEIGHT))
        self._screens = {
            MenuName.INIT: self._init_menu,
            MenuName.MAIN_MENU: self._main_menu,
            MenuName.FLAPPY_BIRD: self._game_menu,
            MenuName.HOUR: self._hour_menu,
            MenuName.PORTRAIT: self._portrait_menu,
        }

    def change_menu(self, name: MenuName) -> None:
        """Switch to another screen behind a black double wipe."""
        self.current = name
        self.effects.append(_Effect("double_wipe", 5, BLACK))
        self.first_entrance = True

    def change_logo(self) -> None:
        """Move the main-menu selection to the next entry."""
        entries = list(Logo)
        self.logo = entries[(entries.index(self.logo) + 1) % len(entries)]

    def advance(self, surface: pygame.Surface) -> None:
        """Run one frame of the current screen onto ``surface``."""
        screen = self._screens.get(self.current)
        if screen is not None:
            screen(surface)

    def _clicked(self, name: str) -> bool:
        return self.buttons[name].consume_click()

    def _present(self, surface: pygame.Surface) -> None:
        surface.blit(self._canvas, (PADDING, PADDING))

    def _init_menu(self, surface: pygame.Surface) -> None:
        if self.first_entrance:
            width, height = surface.get_size()
            surface.fill(rgb565(WHITE))
            draw_centre_string(surface, "Panda Voyager", width / 2, height * 0.1, FONT_SIZE, BLACK)
            _draw_panda(surface, width // 2, height // 2)
            display_button_indications(surface, "Juego", "Menu")
            self.first_entrance = False

        if self._clicked(RIGHT_ID):
            self.change_menu(MenuName.MAIN_MENU)
        elif self._clicked(LEFT_ID):
            self.change_menu(MenuName.FLAPPY_BIRD)

    def _main_menu(self, surface: pygame.Surface) -> None:
        self.first_entrance = False
        canvas = self._canvas
        width, height = canvas.get_size()
        canvas.fill(rgb565(MENU_BACKGROUND))
        draw_centre_string(canvas, "Menu Principal", width / 2, 10, FONT_SIZE, WHITE)
        display_button_indications(canvas, "OK", "Cambiar")

        _draw_logo(
            canvas,
            self.logo,
            int(width * 0.425 - MAX_LOGO_DIMENSIONS / 2),
            int(width * 0.175),
        )

        middle = height // 2 + ARROW_TRIANGLE_HALF
        pygame.draw.polygon(
            canvas,
            rgb565(GREEN),
            [
                (ARROW_TRIANGLE_STARTING_X, middle),
                (ARROW_TRIANGLE_STARTING_X, middle + ARROW_TRIANGLE_BASE),
                (
                    ARROW_TRIANGLE_STARTING_X + ARROW_TRIANGLE_BASE,
                    middle + ARROW_TRIANGLE_BASE // 2,
                ),
            ],
        )
        self._present(surface)

        if self._clicked(RIGHT_ID):
            self.change_logo()
        elif self._clicked(LEFT_ID):
            self.change_menu(self.logo.menu)

    def _game_menu(self, surface: pygame.Surface) -> None:
        game = self.game
        if self.first_entrance:
            surface.fill(rgb565(BLACK))
            game.change_palette()
            self.first_entrance = False

        if game.mode is Mode.MENU:
            draw_game_menu(self._canvas, game, game.menu_reps)
            self._present(surface)
            game.menu_reps += 1

            if self._clicked(PLAY_BUTTON):
                self._reset_game()
                self.effects.append(_Effect("double_wipe", 5, BLACK))
                game.mode = Mode.PLAYING
            elif self._clicked(RIGHT_ID):
                self._reset_game()
                self.change_menu(MenuName.MAIN_MENU)

        elif game.mode is Mode.PLAYING:
            ended = game.advance(self.buttons[PLAY_BUTTON].consume_press())
            draw_playfield(self._canvas, game)
            self._present(surface)
            if ended:
                self.effects.append(_Effect("game_over", 3, YELLOW))
                self.effects.append(_Effect("double_wipe", 3, game.palette.sky))
                self.buttons.reset()

            if self._clicked(RIGHT_ID):
                game.mode = Mode.MENU
                self.effects.append(_Effect("wipe", 10, BLACK))
                self.buttons.reset()

    def _reset_game(self) -> None:
        self.game.reset()
        self.buttons.reset()

    def _hour_menu(self, surface: pygame.Surface) -> None:
        width, height = surface.get_size()
        moment = self.clock()
        surface.fill(rgb565(MENU_BACKGROUND))
        display_button_indications(surface, "", "Menu")
        draw_centre_string(surface, "Hora Colombia", width * 0.5, 20, FONT_SIZE, WHITE)
        draw_centre_string(
            surface, format_clock(moment), width * 0.475, height * 0.3, LARGE_FONT_SIZE, WHITE
        )
        draw_centre_string(surface, format_date(moment), width * 0.5, height * 0.6, FONT_SIZE, WHITE)
        self.first_entrance = False

        if self._clicked(RIGHT_ID):
            self.change_menu(MenuName.MAIN_MENU)

    def _portrait_menu(self, surface: pygame.Surface) -> None:
        canvas = self._canvas
        width, height = canvas.get_size()
        if self.first_entrance:
            canvas.fill(rgb565(BLACK))
            self.first_entrance = False
        _draw_portrait(
            canvas,
            width // 2 - PORTRAIT_SIZE // 2,
            int(height * 0.8 / 2 - PORTRAIT_SIZE / 2),
        )
        display_button_indications(canvas, "", "Menu")
        self._present(surface)

        if self._clicked(RIGHT_ID):
            self.change_menu(MenuName.MAIN_MENU)


def _draw_panda(surface: pygame.Surface, cx: int, cy: int) -> None:
    black = rgb565(BLACK)
    white = rgb565(WHITE)
    half = PANDA_SIZE // 2
    surface.fill(white, (cx - half, cy - half, PANDA_SIZE, PANDA_SIZE))
    for dx in (-35, 35):
        pygame.draw.circle(surface, black, (cx + dx, cy - 35), 16)
    pygame.draw.circle(surface, white, (cx, cy + 5), 45)
    pygame.draw.circle(surface, black, (cx, cy + 5), 45, 2)
    for dx in (-17, 17):
        pygame.draw.ellipse(surface, black, (cx + dx - 9, cy - 10, 18, 24))
        pygame.draw.circle(surface, white, (cx + dx, cy - 2), 4)
    pygame.draw.ellipse(surface, black, (cx - 7, cy + 18, 14, 9))


def _draw_portrait(surface: pygame.Surface, left: int, top: int) -> None:
    frame = pygame.Rect(left, top, PORTRAIT_SIZE, PORTRAIT_SIZE)
    surface.fill(rgb565(DAY.sky), frame)
    pygame.draw.rect(surface, rgb565(WHITE), frame, 6)
    head = (frame.centerx, frame.top + 75)
    pygame.draw.circle(surface, rgb565(DAY.satellite), head, 35)
    pygame.draw.ellipse(
        surface, rgb565(DAY.wall), (frame.centerx - 60, frame.top + 120, 120, 90)
    )
    pygame.draw.rect(surface, rgb565(WHITE), frame, 6)


def _draw_logo(surface: pygame.Surface, logo: Logo, left: int, top: int) -> None:
    size = MAX_LOGO_DIMENSIONS
    centre = (left + size // 2, top + size // 2)
    if logo is Logo.RESIZED_BIRD:
        sprite = pygame.Surface((Bird.WIDTH, Bird.HEIGHT), pygame.SRCALPHA)
        draw_bird(sprite, False, 0, 0)
        scaled = pygame.transform.scale(sprite, (Bird.WIDTH * 3, Bird.HEIGHT * 3))
        surface.blit(scaled, scaled.get_rect(center=centre))
    elif logo is Logo.PORTRAIT:
        frame = pygame.Rect(0, 0, 80, 100)
        frame.center = centre
        surface.fill(rgb565(DAY.sky), frame)
        pygame.draw.circle(surface, rgb565(DAY.satellite), (frame.centerx, frame.top + 38), 18)
        pygame.draw.ellipse(
            surface, rgb565(DAY.wall), (frame.centerx - 30, frame.top + 62, 60, 45)
        )
        pygame.draw.rect(surface, rgb565(WHITE), frame, 4)
    else:
        black = rgb565(BLACK)
        pygame.draw.circle(surface, rgb565(WHITE), centre, 55)
        pygame.draw.circle(surface, black, centre, 55, 3)
        pygame.draw.line(surface, black, centre, (centre[0], centre[1] - 40), 4)
        pygame.draw.line(surface, black, centre, (centre[0] + 28, centre[1]), 4)