"""Interactive terminal front end for the game."""

from __future__ import annotations

import argparse
import random
import subprocess
import sys
import time
from typing import Callable, TextIO

from plutonio.model import Game, GameStatus
from plutonio.render import INTRO_LINES, render_game, render_intro, render_outcome
from plutonio.rules import Action, new_game, play_turn

INTRO_DELAY = 5

_PROMPT = (
    "\n\tIngrese una accion: \n\t1. W si es arriba\n\t2. S si es abajo"
    "\n\t3. D si es derecha\n\t4. A izquierda\n\t5. L linterna\n"
)
_RETRY_PROMPT = (
    "\n\tIngrese de nuevo una accion valida: \n\t1. W si es arriba"
    "\n\t2. S si es abajo\n\t3. D si es derecha\n\t4.A izquierda\n\t5. L linterna\n"
)


def _read_char(stdin: TextIO) -> str:
    while True:
        char = stdin.read(1)
        if not char:
            raise EOFError("no more input")
        if not char.isspace():
            return char


def read_action(stdin: TextIO | None = None, stdout: TextIO | None = None) -> Action:
    """Prompt until a valid action character is read; raise EOFError at end of input."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stdout.write(_PROMPT)
    stdout.flush()
    while True:
        char = _read_char(stdin)
        try:
            return Action(char)
        except ValueError:
            stdout.write(_RETRY_PROMPT)
            stdout.flush()


def _clear_screen() -> None:
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        sys.stdout.write("\033[H\033[2J")
        sys.stdout.flush()


def run(
    game: Game,
    rng: random.Random | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    clear: Callable[[], None] | None = None,
) -> GameStatus:
    """Play the game interactively until it is won or lost; return the final status."""
    rng = rng if rng is not None else random.Random()
    stdout = stdout if stdout is not None else sys.stdout
    clear = clear if clear is not None else (lambda: None)

    stdout.write(render_game(game))
    status = game.status()
    while status is GameStatus.PLAYING:
        action = read_action(stdin, stdout)
        clear()
        status = play_turn(game, action, rng)
        stdout.write(render_game(game))
        stdout.write(render_outcome(game))
        stdout.flush()
    return status


def main(argv: list[str] | None = None) -> int:
    """Show the introduction and run a game in the terminal."""
    parser = argparse.ArgumentParser(
        prog="plutonio", description="Collect every plutonium bar before running out of energy."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the random layout")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    _clear_screen()
    sys.stdout.write(render_intro(INTRO_LINES))
    sys.stdout.flush()
    time.sleep(INTRO_DELAY)
    _clear_screen()

    game = new_game(rng)
    try:
        run(game, rng, sys.stdin, sys.stdout, _clear_screen)
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())