# wuziqi

Gomoku (five in a row) on a square grid. Play it against another person at
the same screen, or against a computer opponent that scores every empty
point and plays at one of the best ones, chosen at random among equals.

## Installing

```
pip install .
```

The window is drawn with Tkinter, which ships with most Python
installations. There are no other dependencies.

## Playing

```
wuziqi
```

The command takes no options besides `--help`.

- Move the mouse over the board. When the pointer is close to a free
  intersection, a small square in the colour of the player to move marks it.
  Release the mouse button to place a stone there. The outermost row and
  column of intersections are not playable.
- White moves first. Five equal stones in a row (horizontally, vertically or
  diagonally) win. When every playable point is filled, the game is a draw.
  Either way a message is shown and a new game of the same kind begins.
- The newest stone carries a small cross.
- The "游戏模式切换" menu switches between a two-player game (人人对战) and a
  game against the computer (人机对战). Against the computer you play white
  and the computer answers with black after 0.7 seconds.
- The "悔棋" menu, or Ctrl+Z, takes back one move in a two-player game, or
  your last move together with the computer's reply in a game against the
  computer. When there is nothing to take back a message says so.

## Using the game in your own code

`wuziqi.model.GameModel` holds the board (0 empty, 1 white, -1 black), whose
turn it is, the move history and the last move, with no user interface
attached. It takes an optional `random.Random` used to break ties in the
computer's choice:

```python
import random
from wuziqi.model import GameModel, GameType

game = GameModel(random.Random(1))
game.start_game(GameType.BOT)
game.action_by_person(7, 7)
row, col = game.action_by_ai()
print(game.is_win(row, col), game.undo())
```

- `start_game(game_type)` clears the board and gives the move to white.
- `action_by_person(row, col)` / `update_game_map(row, col)` place the
  current player's stone and pass the turn; a point off the board raises
  `IndexError`.
- `action_by_ai()` scores the board with `calculate_score()`, places black's
  stone and returns its `(row, col)`.
- `undo()` removes and returns the last `Move`; with no history it raises
  `IndexError`.
- `is_win(row, col)` and `is_dead_game()` check for five in a row through a
  point and for a full board.

`wuziqi.controller.Controller` adds the rules of the window and runs without
a display: `start_pvp()`, `start_pve()`, `hover(x, y)` (pixel position to
board point, also available as `hit_test(x, y)`), `release()`, `play_ai()`,
`undo()` (raises `UndoError` when nothing can be taken back or the game is
not running) and `check_outcome()`, which returns an `Outcome` and starts a
new game when one has ended.

`wuziqi.app.build_scene(controller)` lists the `Shape`s to draw for the
current position, and `wuziqi.app.BoardWindow` draws them on a Tkinter
canvas.

## What it does not do

Games are not saved or loaded, there is no network play, and the computer
has a single fixed strength. No sounds are played.