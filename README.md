# pandaflap

A small flappy-bird style arcade game in a 240×240 pygame window, with a
start screen, a main menu that cycles between screens, a clock screen
showing Colombian time (UTC−5) and a portrait screen. On-screen text is in
Spanish.

## Installing

```
pip install .
```

## Playing

```
pandaflap
```

Options:

- `--seed N` seeds the random choices (wall heights, day or night sky).
- `--fps N` sets the frame rate (at least 1, default 60).
- `--frames N` stops after that many frames (at least 0).

The game is played with two buttons, left and right:

- left: Left arrow, `A`, Space, Up arrow, or the left mouse button;
- right: Right arrow, `D`, or the right mouse button.

A button press counts once; release it before pressing again.
Escape or closing the window quits.

- **Start screen ("Panda Voyager"):** left opens the game, right opens the
  main menu.
- **Main menu ("Menu Principal"):** right cycles through the game, the
  portrait and the clock; left opens the one shown.
- **Game menu:** left plays, right returns to the main menu. The best score
  ("Record") and the last score ("Ultimo") are shown.
- **Playing:** press left to flap and fly through the gap between walls.
  Every wall passed adds a point; every 20 points the walls speed up.
  Touching a wall ends the round with a "GAME OVER" screen; the top and
  bottom of the screen do not. Right leaves the round at once.
- **Clock ("Hora Colombia"):** shows the current time and a short date such
  as `Mierco. 26 Julio`; right returns to the main menu.
- **Portrait:** right returns to the main menu.

Each round picks a day or night sky at random. Changes of screen are shown
with a wipe.

## Using the pieces

The game logic has no drawing in it and can be driven directly:

```python
import random
from pandaflap.game import Game, Mode

game = Game(random.Random(1))
game.reset()
game.mode = Mode.PLAYING
while game.mode is Mode.PLAYING:
    game.advance(pressed=False)
print(game.score, game.high_score)
```

`Game.advance` runs one frame and returns `True` when the round has ended.

- `pandaflap.buttons`: `Button` and `ButtonPanel`, the two buttons with
  press and click events that are consumed once each.
- `pandaflap.hour`: `colombia_now`, `format_clock`, `format_date` and
  `format_time` for the time shown on the clock screen.
- `pandaflap.render`: drawing of the playfield, the game menu and the button
  bar onto pygame surfaces, with RGB565 colours (`rgb565`).
- `pandaflap.menus`: `MenuController`, which runs the current screen once
  per frame and switches between screens.
- `pandaflap.app`: `main`, the window and main loop behind the `pandaflap`
  command.

## What it does not do

- The clock reads the computer's own clock; it does not connect to a
  network or a time server.
- The bird, panda, portrait and menu logos are drawn from simple shapes;
  no image files are shipped.
- `MenuName.SENSOR` exists but has no screen behind it.

## Tests

```
pip install .[test]
pytest
```