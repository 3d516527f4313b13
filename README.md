# plutonio

A small terminal game. Homero is lost in the dark on a 20 × 20 grid. He has
to pick up all ten plutonium bars (`B`) before his energy runs out. The
in-game text is in Spanish.

## Installing

```
pip install .
```

The package has no dependencies outside the standard library.

## Playing

```
plutonio
plutonio --seed 42
```

`--seed` fixes the random layout, so the same board comes up again. The game
shows an introduction screen for five seconds and clears the terminal. It
uses the `clear` command and falls back to an ANSI escape sequence if that
command is missing. After that it asks for one action per turn:

| Key | Action               |
|-----|----------------------|
| `W` | move up              |
| `S` | move down            |
| `A` | move left            |
| `D` | move right           |
| `L` | turn on a flashlight |

Input is case-sensitive. Any other character makes the game ask again. When
input ends, or on Ctrl-C, the command exits with status 1. After a finished
game it exits with status 0.

Each step costs 1 energy. A move that would leave the grid does nothing and
costs nothing. Turning on the flashlight costs no energy. You start with 400
energy and 5 flashlights.

## What is on the grid

Most objects are hidden. You can see them in two ways:

- **Switches (`I`)** are always visible. Standing on one reveals the whole
  grid for that turn and moves the rats to random free cells.
- **Flashlight (`L`)** works only if you have one left and none is already
  on. It uses up one flashlight and moves the rats. While it is on, each move
  also reveals every object within a Manhattan distance of 2. It goes out
  after four moves.

The objects:

- `D`: donut, +10 energy. It is eaten when you step on it.
- `A`: barrel, −15 energy.
- `R`: rat, takes away one flashlight.
- `E` / `C`: thrusters. Stepping on one carries you up to 3 more cells, up
  for `E` and down for `C`. The path bends one column left or right on every
  cell if the move onto the thruster was sideways, and stops at the edge of
  the grid. On an `E` you meet the donuts and barrels along the path. On a
  `C` you meet the bars and rats along it.
- `B`: plutonium bar, the goal.

You win when you hold all ten bars and still have energy. You lose when your
energy is exactly zero before you have all the bars. Energy below zero, which
a barrel can cause, does not end the game.

## Using it as a library

- `plutonio.rules.new_game(rng)` builds a random `Game`. The character and
  every object start on distinct cells.
- `plutonio.rules.play_turn(game, action, rng)` applies one action and
  returns a `GameStatus` (`WON`, `LOST` or `PLAYING`). The action can be an
  `Action` or its letter. An invalid letter raises `ValueError`.
- `plutonio.rules.Action.parse(text)` turns input into an `Action`.
- `plutonio.rules.activate_flashlight`, `relocate_rats` and
  `random_free_coordinate` expose the separate rules.
- `plutonio.model` holds `Coordinate`, `GameObject`, `Character`, `Game`
  (with `all_objects()`, `is_occupied()` and `status()`) and `GameStatus`.
- `plutonio.render` returns the screens as strings: `render_game`,
  `render_board`, `render_status_bar`, `render_messages`, `render_intro` and
  `render_outcome`.
- `plutonio.cli.run(game, rng, stdin, stdout, clear)` plays a game on any
  pair of text streams. `read_action(stdin, stdout)` prompts for one action.
  `main(argv)` is the `plutonio` command.

## What it does not do

There is no saving or loading of games, no score history and no settings for
the board size or object counts.