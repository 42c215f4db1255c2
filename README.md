# pong

The classic Pong arcade game in a 1280×720 window. You control the paddle on
the right; the computer plays the paddle on the left. The first side to reach
10 points wins.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window, renders the text and plays the
sounds.

## Playing

```
pong
```

Options:

- `--assets DIR` – load the sound effects `wall.ogg`, `paddle.ogg` and
  `score.ogg` from `DIR`. All three files must be present, otherwise the
  command stops with a `FileNotFoundError`. Without this option the sounds are
  loaded from an `assets` directory inside the installed `pong` package if
  one exists; if it does not, the game runs silently.
- `--font FILE` – a TrueType font for the score and the result. A missing
  file is reported as a `FileNotFoundError`. Without it pygame's default font
  is used.

Controls:

- **Up arrow** – move your paddle up while held
- **Down arrow** – move your paddle down while held

Closing the window ends the program.

How a match goes:

- The ball is served from the centre in a random direction at a gentle speed.
- Every paddle hit counts as a volley. Until the fourth volley the ball's
  speed is capped; after that it may travel faster. The angle it leaves a
  paddle at depends on which eighth of the paddle it struck, and longer
  rallies open up steeper angles.
- The ball bounces off the top and bottom walls.
- When the ball reaches the left or right edge of the screen, a point is
  awarded and a new round is served from the centre line at a random height.
- When either side reaches 10 points the game ends and the screen shows
  `WINNER` and `LOSER` on the two sides.

While the ball is heading away from it, the computer wanders up and down its
side of the court; when the ball is coming towards it, it predicts where the
ball will arrive and moves to meet it.

## Using it from Python

The game logic in `pong.game.Game` runs without opening a window, which makes
it easy to script or test. `Game` accepts an optional `sounds` mapping (as
returned by `pong.audio.load_sounds`) and an optional `rng` (a
`random.Random`) for reproducible play:

```python
import random

from pong.game import Game
from pong.settings import GameState

game = Game(rng=random.Random(1))
for _ in range(100_000):
    game.update()
    if game.state is GameState.GAME_OVER:
        break
print(game.score)
```

`Game.update()` advances the game by one frame. The right-hand paddle only
moves when its velocity is changed, for example through
`game.player.paddle.key_down(Direction.UP)` and `key_up(...)` with
`pong.paddle.Direction`.

To show a game in a window, pass it to `pong.app.run`; it uses pygame's
default font and plays until the window is closed:

```python
from pong.app import run
from pong.game import Game

run(Game())
```

`pong.app.draw_game(surface, game, hud)` renders a game's current frame onto
any pygame surface, using the fonts held by a `pong.app.Hud` (built with an
optional path to a TrueType font).

## What it does not do

- There is no pause key. The game has a `GameState.PAUSED` state, and a paused
  game is drawn with `PAUSED` on screen, but nothing in the window switches to
  it.
- There is no way to start a new match after one ends; close the window and
  run `pong` again.
- No sound files or fonts are shipped with the package; supply them with
  `--assets` and `--font`.