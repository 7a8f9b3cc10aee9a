import random
from datetime import datetime

import pygame
import pytest

from pandaflap.buttons import ButtonPanel
from pandaflap.game import WHITE, Bird, Mode
from pandaflap.hour import COLOMBIA
from pandaflap.menus import MENU_BACKGROUND, Logo, MenuController, MenuName
from pandaflap.render import rgb565


@pytest.fixture
def controller():
    return MenuController(ButtonPanel(), random.Random(7))


@pytest.fixture
def surface():
    return pygame.Surface((240, 240))


def _pixel(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def _click(controller, name):
    controller.buttons[name].on_press()
    controller.buttons[name].on_click()


def test_starts_on_splash(controller, surface):
    assert controller.current is MenuName.INIT
    controller.advance(surface)
    assert controller.first_entrance is False
    assert _pixel(surface, 0, 0) == rgb565(WHITE)
    assert controller.effects == []


def test_splash_right_opens_main_menu(controller, surface):
    controller.advance(surface)
    _click(controller, "right")
    controller.advance(surface)
    assert controller.current is MenuName.MAIN_MENU
    assert controller.first_entrance is True
    assert [effect.kind for effect in controller.effects] == ["double_wipe"]


def test_splash_left_opens_game(controller, surface):
    _click(controller, "left")
    controller.advance(surface)
    assert controller.current is MenuName.FLAPPY_BIRD


def test_change_logo_cycles_in_order(controller):
    seen = []
    for _ in range(3):
        controller.change_logo()
        seen.append(controller.logo)
    assert seen == [Logo.PORTRAIT, Logo.HOUR, Logo.RESIZED_BIRD]


def test_main_menu_right_changes_logo(controller, surface):
    controller.change_menu(MenuName.MAIN_MENU)
    _click(controller, "right")
    controller.advance(surface)
    assert controller.logo is Logo.PORTRAIT
    assert controller.current is MenuName.MAIN_MENU


@pytest.mark.parametrize(
    "logo,target",
    [
        (Logo.RESIZED_BIRD, MenuName.FLAPPY_BIRD),
        (Logo.PORTRAIT, MenuName.PORTRAIT),
        (Logo.HOUR, MenuName.HOUR),
    ],
)
def test_main_menu_left_opens_selected(controller, surface, logo, target):
    controller.change_menu(MenuName.MAIN_MENU)
    controller.logo = logo
    _click(controller, "left")
    controller.advance(surface)
    assert controller.current is target
    assert logo.menu is target


def test_game_menu_counts_frames_and_starts_play(controller, surface):
    controller.change_menu(MenuName.FLAPPY_BIRD)
    controller.effects.clear()
    controller.advance(surface)
    assert controller.first_entrance is False
    assert controller.game.menu_reps == 1
    _click(controller, "left")
    controller.advance(surface)
    assert controller.game.mode is Mode.PLAYING
    assert controller.game.menu_reps == 0
    assert controller.effects[-1].kind == "double_wipe"


def test_game_menu_right_returns_to_main(controller, surface):
    controller.change_menu(MenuName.FLAPPY_BIRD)
    controller.advance(surface)
    _click(controller, "right")
    controller.advance(surface)
    assert controller.current is MenuName.MAIN_MENU


def test_right_during_play_returns_to_game_menu(controller, surface):
    controller.change_menu(MenuName.FLAPPY_BIRD)
    controller.advance(surface)
    _click(controller, "left")
    controller.advance(surface)
    controller.advance(surface)
    assert controller.game.mode is Mode.PLAYING
    _click(controller, "right")
    controller.advance(surface)
    assert controller.game.mode is Mode.MENU
    assert controller.effects[-1].kind == "wipe"
    assert controller.current is MenuName.FLAPPY_BIRD


def test_collision_ends_round_with_game_over(controller, surface):
    controller.change_menu(MenuName.FLAPPY_BIRD)
    controller.advance(surface)
    _click(controller, "left")
    controller.advance(surface)
    game = controller.game
    game.walls.x[0] = Bird.X
    game.walls.y[0] = game.bird.y + 60
    controller.buttons["left"].on_press()
    controller.advance(surface)
    assert game.mode is Mode.MENU
    assert game.high_score == game.score
    assert "game_over" in [effect.kind for effect in controller.effects]
    assert controller.buttons["left"].consume_press() is False


def test_hour_menu_uses_clock_and_returns(controller, surface):
    moments = []

    def fixed_clock():
        moment = datetime(2023, 7, 26, 15, 2, 30, tzinfo=COLOMBIA)
        moments.append(moment)
        return moment

    controller.clock = fixed_clock
    controller.change_menu(MenuName.HOUR)
    controller.advance(surface)
    assert len(moments) == 1
    assert _pixel(surface, 0, 0) == rgb565(MENU_BACKGROUND)
    _click(controller, "right")
    controller.advance(surface)
    assert controller.current is MenuName.MAIN_MENU


def test_portrait_menu_returns_to_main(controller, surface):
    controller.change_menu(MenuName.PORTRAIT)
    controller.advance(surface)
    assert controller.first_entrance is False
    _click(controller, "right")
    controller.advance(surface)
    assert controller.current is MenuName.MAIN_MENU


def test_sensor_screen_does_nothing(controller, surface):
    controller.current = MenuName.SENSOR
    surface.fill((9, 9, 9))
    controller.advance(surface)
    assert _pixel(surface, 120, 120) == (9, 9, 9)
    assert controller.effects == []