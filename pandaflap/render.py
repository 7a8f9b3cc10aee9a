"""Drawing of the game screens onto pygame surfaces, with RGB565 colours."""

from __future__ import annotations

import pygame

from .game import BLACK, SATELLITE_RADIUS, WHITE, Bird, Game, Palette, Walls

LIGHT_GREY = 0xD69A
PURPLE = 0x780F
YELLOW = 0xFFE0
GREEN = 0x07E0
ORANGE = 0xFDA0

FONT_SIZE = 26
LARGE_FONT_SIZE = 48

_fonts: dict[int, pygame.font.Font] = {}


def rgb565(color: int) -> tuple[int, int, int]:
    """Expand a 16-bit RGB565 colour to an 8-bit-per-channel RGB triple."""
    red = (color >> 11) & 0x1F
    green = (color >> 5) & 0x3F
    blue = color & 0x1F
    return red * 255 // 31, green * 255 // 63, blue * 255 // 31


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
        _fonts.clear()
    font = _fonts.get(size)
    if font is None:
        font = _fonts[size] = pygame.font.Font(None, size)
    return font


def draw_centre_string(
    surface: pygame.Surface, text: str, x: float, y: float, size: int, color: int
) -> None:
    """Draw ``text`` horizontally centred on ``x`` with its top at ``y``."""
    image = _font(size).render(text, True, rgb565(color))
    surface.blit(image, (int(x) - image.get_width() // 2, int(y)))


def draw_background(surface: pygame.Surface, palette: Palette) -> None:
    """Fill the sky and draw the sun or moon in the upper right."""
    width, height = surface.get_size()
    surface.fill(rgb565(palette.sky))
    pygame.draw.circle(
        surface,
        rgb565(palette.satellite),
        (int(width * 0.8), int(height * 0.2)),
        SATELLITE_RADIUS,
    )


def draw_bird(surface: pygame.Surface, flappy: bool, x: int, y: int) -> None:
    """Draw the bird inside the box at (x, y); ``flappy`` raises the wing."""
    body = pygame.Rect(x + 2, y + 4, Bird.WIDTH - 8, Bird.HEIGHT - 6)
    pygame.draw.ellipse(surface, rgb565(YELLOW), body)
    pygame.draw.ellipse(surface, rgb565(BLACK), body, 1)

    eye = (x + Bird.WIDTH - 12, y + 8)
    pygame.draw.circle(surface, rgb565(WHITE), eye, 5)
    pygame.draw.circle(surface, rgb565(BLACK), (eye[0] + 2, eye[1]), 2)

    beak = [
        (x + Bird.WIDTH - 8, y + 13),
        (x + Bird.WIDTH - 1, y + 16),
        (x + Bird.WIDTH - 8, y + 19),
    ]
    pygame.draw.polygon(surface, rgb565(ORANGE), beak)

    wing_top = y + 3 if flappy else y + 13
    wing = pygame.Rect(x + 3, wing_top, 12, 8)
    pygame.draw.ellipse(surface, rgb565(WHITE), wing)
    pygame.draw.ellipse(surface, rgb565(BLACK), wing, 1)


def draw_walls(surface: pygame.Surface, game: Game) -> None:
    """Draw both halves of every wall, leaving the gap open."""
    height = surface.get_height()
    color = rgb565(game.palette.wall)
    for wall_x, gap_y in zip(game.walls.x, game.walls.y):
        surface.fill(color, (wall_x, 0, Walls.WIDTH, gap_y))
        bottom = gap_y + Walls.GAP
        surface.fill(color, (wall_x, bottom, Walls.WIDTH, height - bottom))


def draw_playfield(surface: pygame.Surface, game: Game) -> None:
    """Draw one frame of play: sky, walls, score and bird."""
    draw_background(surface, game.palette)
    draw_walls(surface, game)
    draw_centre_string(
        surface, str(game.score), surface.get_width() // 2, 10, FONT_SIZE,
        game.palette.text,
    )
    draw_bird(surface, game.bird.velocity < 0, Bird.X, game.bird.y)


def draw_game_menu(surface: pygame.Surface, game: Game, menu_reps: int) -> None:
    """Draw the game's own menu with the best and the last score."""
    width, height = surface.get_size()
    draw_background(surface, game.palette)

    base = 0.45
    surface.fill(
        rgb565(WHITE),
        (int(width * 0.4), int(height * base), int(width * 0.6), int(height * 0.35)),
    )
    draw_centre_string(
        surface, f"Record: {game.high_score}", width * 0.7, height * (base + 0.05),
        FONT_SIZE, BLACK,
    )
    draw_centre_string(
        surface, f"Ultimo: {game.score}", width * 0.7, height * (base + 0.2),
        FONT_SIZE, BLACK,
    )

    display_button_indications(surface, "Juega", "Menu")

    draw_centre_string(
        surface, "JUEGO", width * 0.35, height * 0.15, FONT_SIZE, game.palette.text
    )
    draw_bird(
        surface,
        menu_reps % 20 < 10,
        int(width * 0.1),
        int(height / 2 - Bird.HEIGHT * 0.25),
    )


def display_button_indications(
    surface: pygame.Surface, left_text: str = "", right_text: str = ""
) -> None:
    """Draw the bottom bar that labels the left and right buttons."""
    width, height = surface.get_size()
    top = int(height * 0.8)
    surface.fill(rgb565(LIGHT_GREY), (0, top, width, int(height * 0.2)))
    if left_text:
        draw_centre_string(surface, left_text, width * 0.25, height * 0.85, FONT_SIZE, BLACK)
    if right_text:
        draw_centre_string(surface, right_text, width * 0.75, height * 0.85, FONT_SIZE, BLACK)
    pygame.draw.line(surface, rgb565(PURPLE), (width // 2, top), (width // 2, height))


def _check_speed(speed: int) -> None:
    if speed <= 0:
        raise ValueError(f"wipe speed must be positive, got {speed}")


def wipe_frames(height: int, speed: int) -> range:
    """Heights covered, frame by frame, by a top-down wipe."""
    _check_speed(speed)
    return range(0, height, speed)


def double_wipe_frames(height: int, speed: int) -> range:
    """Heights covered from top and bottom, frame by frame, until they meet."""
    _check_speed(speed)
    return range(0, height // 2 + speed, speed)