"""Game state and physics for the side-scrolling bird game."""

from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass

CANVAS_WIDTH = 236
CANVAS_HEIGHT = 236
PADDING = 1
SATELLITE_RADIUS = 25

BLACK = 0x0000
WHITE = 0xFFFF


@dataclass(frozen=True)
class Palette:
    """RGB565 colours for one background style."""

    sky: int
    text: int
    wall: int
    satellite: int


DAY = Palette(sky=0x66FF, text=BLACK, wall=0x6E84, satellite=0xFF67)
NIGHT = Palette(sky=0x196B, text=WHITE, wall=0x5DA2, satellite=0xFFFF)


def _random_between(rng: random.Random, low: int, high: int) -> int:
    """Random integer in [low, high); low when the range is empty."""
    if high <= low:
        return low
    return rng.randrange(low, high)


class Bird:
    """The player's bird: a fixed column, a height and a vertical speed."""

    WIDTH = 32
    HEIGHT = 26
    X = 45
    GRAVITY = 0.5
    IMPULSE = -4.5

    def __init__(self) -> None:
        self.y = CANVAS_HEIGHT // 2
        self.velocity = 0.0

    def displace(self, pressed: bool) -> None:
        """Apply one frame of gravity, then a flap if pressed."""
        self.velocity += self.GRAVITY
        self.y += math.floor(self.velocity)
        self.y = max(0, min(self.y, CANVAS_HEIGHT - self.HEIGHT))
        if pressed:
            self.velocity = self.IMPULSE

    def reset(self) -> None:
        self.y = CANVAS_HEIGHT // 2
        self.velocity = 0.0


class Walls:
    """Pairs of wall halves with a gap, scrolling leftwards."""

    NUM = 2
    WIDTH = 30
    GAP = 95
    MINIMAL_HEIGHT = 20
    BETWEEN_WALLS_GAP = CANVAS_WIDTH // 2
    FIRST_WALL = int(CANVAS_WIDTH * 0.75)
    LOWER_BOUND = MINIMAL_HEIGHT
    UPPER_BOUND = CANVAS_HEIGHT - GAP - MINIMAL_HEIGHT
    NEW_WALL_DIFFERENTIAL = 120
    INITIAL_DISPLACEMENT = 3

    def __init__(self, rng: random.Random) -> None:
        self._rng = rng
        self.x = [0] * self.NUM
        self.y = [0] * self.NUM
        self.last_height = CANVAS_HEIGHT // 2
        self.closest_to_bird = 0
        self.displacement = self.INITIAL_DISPLACEMENT

    def compute_new(self, index: int, x: int) -> None:
        """Place wall ``index`` at ``x`` with a gap near the previous one."""
        half = self.NEW_WALL_DIFFERENTIAL // 2
        if self.last_height - self.LOWER_BOUND > half:
            lower = self.last_height - half
        else:
            lower = self.LOWER_BOUND
        if self.UPPER_BOUND - self.last_height > half:
            upper = self.last_height + half
        else:
            upper = self.UPPER_BOUND
        height = _random_between(self._rng, lower, upper)
        self.last_height = height
        self.x[index] = x
        self.y[index] = height

    def reset(self) -> None:
        for index in range(self.NUM):
            self.compute_new(index, self.FIRST_WALL + self.BETWEEN_WALLS_GAP * index)
        self.last_height = CANVAS_HEIGHT // 2
        self.closest_to_bird = 0


class Mode(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"


class Game:
    """The whole game: bird, walls, scores and colour style."""

    SPEEDUP_EVERY = 20

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.bird = Bird()
        self.walls = Walls(self._rng)
        self.mode = Mode.MENU
        self.score = 0
        self.high_score = 0
        self.menu_reps = 0
        self.score_has_changed = False
        self.palette = DAY
        self.change_palette()

    def change_palette(self) -> None:
        """Pick the day or night style at random."""
        self.palette = DAY if self._rng.randrange(0, 2) else NIGHT

    def reset(self) -> None:
        """Prepare a fresh round."""
        self.walls.reset()
        self.bird.reset()
        self.score = 0
        self.menu_reps = 0
        self.walls.displacement = Walls.INITIAL_DISPLACEMENT
        self.change_palette()

    def _hits(self, index: int) -> bool:
        wall_x = self.walls.x[index]
        wall_y = self.walls.y[index]
        level_with_wall = Bird.X + Bird.WIDTH > wall_x and Bird.X < wall_x + Walls.WIDTH
        outside_gap = (
            self.bird.y < wall_y or self.bird.y + Bird.HEIGHT > wall_y + Walls.GAP
        )
        return level_with_wall and outside_gap

    def advance(self, pressed: bool) -> bool:
        """Run one frame of play; return True if the round ended."""
        self.bird.displace(pressed)
        walls = self.walls
        for index in range(Walls.NUM):
            if walls.x[index] < 0:
                walls.compute_new(index, CANVAS_WIDTH)
            if index == walls.closest_to_bird:
                if walls.x[index] <= Bird.X:
                    self.score += 1
                    self.score_has_changed = True
                    walls.closest_to_bird = (walls.closest_to_bird + 1) % Walls.NUM
                if self._hits(index):
                    self.mode = Mode.MENU
            walls.x[index] -= walls.displacement

        if (
            self.score > 0
            and self.score_has_changed
            and self.score % self.SPEEDUP_EVERY == 0
        ):
            walls.displacement += 1
        self.score_has_changed = False

        if self.mode is Mode.MENU:
            self.high_score = max(self.score, self.high_score)
            return True
        return False