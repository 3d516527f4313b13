"""Text rendering of the game state for an ANSI terminal."""

from __future__ import annotations

from typing import Iterable

from plutonio.model import (
    BARREL,
    BOARD_SIZE,
    EMPTY,
    HOMER,
    RAT,
    SWITCH,
    Game,
    GameObject,
    GameStatus,
)

RESET = "\033[0m"
GREEN = "\033[1;32m"
PINK = "\033[1;35m"
TITLE = "\033[1;36;4m"
MAGENTA = "\033[95m"
BLUE = "\033[94m"

INTRO_LINES = (
    "DESASTRE NUCLEAR",
    "Las RATAS (R) te quitaran 1 linterna",
    "Los BARRILES (A) te quitaran 15 de energia",
    "Los PROPULSORES (E) o (C) te haran moverte 3 veces consumiendo 1 de energia.",
    "Las DONAS (D) te sumaran 10 de energia",
    "Las BARRAS (B) es lo que tienes como objetivo agarrar, "
    "se te restara uno a la cantidad de barras que te quedan.",
)

_RULE = "\t=================================================================\t\n"
_BANNER = "###################################"


def _place_visible(grid: list[list[str]], objects: Iterable[GameObject]) -> None:
    for obj in objects:
        if obj.visible:
            grid[obj.position.row][obj.position.col] = obj.kind


def _on_switch(game: Game) -> bool:
    here = game.character.position
    return any(t.kind == SWITCH and t.position == here for t in game.tools)


def render_board(game: Game) -> str:
    """Return the board as text, one bracketed cell per square."""
    grid = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
    objects = list(game.all_objects())
    here = game.character.position

    for tool in game.tools:
        if tool.kind == SWITCH:
            grid[tool.position.row][tool.position.col] = SWITCH
            if tool.position == here:
                _place_visible(grid, objects)

    if game.character.flashlight_on:
        _place_visible(grid, objects)

    grid[here.row][here.col] = HOMER
    return "".join(
        "\t" + "".join(f"[{cell}]" for cell in row) + "\n" for row in grid
    )


def render_status_bar(game: Game) -> str:
    """Return the title and the character's flashlights, bars and energy."""
    character = game.character
    rule = f"{MAGENTA}{_RULE}{RESET}"
    counts = (
        f"\t{PINK}|| Linternas = {GREEN} {character.flashlights:3d} "
        f"\t{PINK}|| Barras = {GREEN} {character.bars:3d} "
        f"\t{PINK}|| Energia = {GREEN} {character.energy:3d}\n"
    )
    title = f"\n\t\t\t{TITLE}DESASTRE NATURAL{RESET}\t\n\n"
    return title + rule + counts + rule + "\n"


def render_messages(game: Game) -> str:
    """Return the notices about switches, the flashlight and collisions."""
    parts: list[str] = []
    character = game.character
    here = character.position

    for tool in game.tools:
        if tool.kind == SWITCH and tool.position == here:
            parts.append(
                "\n\tEstas sobre un interruptor (I), se enciende la luz y "
                "cambian las posiciones de las ratas (R)!!!\n\n"
            )

    if character.flashlight_on:
        parts.append(
            "\n\tEncendiste la linterna (L), se veran los objetos que se "
            "encuentren a 2 distancia manhattan!!\n"
        )
        parts.append(
            f"\n\tSolo tienes 4 movimientos, movimientos "
            f"{character.flashlight_moves}\n\n"
        )

    for obstacle in game.obstacles:
        if obstacle.position != here:
            continue
        if obstacle.kind == BARREL:
            parts.append(
                "\tOh no!! chocaste con un barril, se te restara 15 de energia\n\n"
            )
        elif obstacle.kind == RAT:
            parts.append(
                "\tOh no!! chocaste con una rata, se te restara 1 a la linterna\n\n"
            )

    return "".join(parts)


def render_game(game: Game) -> str:
    """Return the full screen: status bar, notices and board."""
    return render_status_bar(game) + render_messages(game) + render_board(game)


def render_intro(lines: Iterable[str] = INTRO_LINES) -> str:
    """Return the introduction banner; the first line is the title."""
    parts: list[str] = []
    for index, text in enumerate(lines):
        if index == 0:
            parts.append(f"\t\t{MAGENTA}{_BANNER}\n")
            parts.append(f"\t\t###\t{TITLE} {text} {RESET} {MAGENTA}\t###\n")
            parts.append(f"\t\t{_BANNER}{RESET}\n")
        else:
            parts.append(f"\t{MAGENTA}### {BLUE} {text} {MAGENTA}###\n")
            parts.append(f"\t{RESET}")
        parts.append(f"\n{RESET}")
    return "".join(parts)


def render_outcome(game: Game) -> str:
    """Return the win or loss message, or an empty string while playing."""
    status = game.status()
    if status is GameStatus.WON:
        return "\n\n\tGANASTE!!!\n\n"
    if status is GameStatus.LOST:
        return "\n\n\tHAS PERDIDO!!!\n\n"
    return ""