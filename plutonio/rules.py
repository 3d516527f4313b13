"""Game rules: setting up a board and applying the player's actions."""

from __future__ import annotations

import enum
import random

from plutonio.model import (
    BAR,
    BARREL,
    BARREL_COUNT,
    BARREL_ENERGY,
    BOARD_SIZE,
    BOOSTER_STEPS,
    DONUT,
    DONUT_COUNT,
    DONUT_ENERGY,
    FLASHLIGHT_MOVES,
    FLASHLIGHT_RANGE,
    MAX_BARS,
    PUDDLE,
    PUDDLE_COUNT,
    RAT,
    RAT_COUNT,
    STAIRS,
    STAIRS_COUNT,
    SWITCH,
    SWITCH_COUNT,
    Character,
    Coordinate,
    Game,
    GameObject,
    GameStatus,
)


class Action(enum.Enum):
    """A move the player can make."""

    UP = "W"
    LEFT = "A"
    DOWN = "S"
    RIGHT = "D"
    FLASHLIGHT = "L"

    @classmethod
    def parse(cls, text: str) -> Action:
        """Turn the player's input into an action; raise ValueError if invalid."""
        token = text.strip()
        try:
            return cls(token)
        except ValueError:
            raise ValueError(f"invalid action: {text!r}") from None


_STEPS = {
    Action.UP: (-1, 0),
    Action.LEFT: (0, -1),
    Action.DOWN: (1, 0),
    Action.RIGHT: (0, 1),
}

# Column drift while a booster carries the character, by the move that led onto it.
_BOOST_DRIFT = {
    Action.UP: 0,
    Action.DOWN: 0,
    Action.LEFT: -1,
    Action.RIGHT: 1,
}


def _random_cell(rng: random.Random) -> Coordinate:
    row = rng.randrange(BOARD_SIZE)
    col = rng.randrange(BOARD_SIZE)
    return Coordinate(row, col)


def new_game(rng: random.Random | None = None) -> Game:
    """Create a game with the character and every object on distinct cells."""
    rng = rng if rng is not None else random.Random()
    used: set[Coordinate] = set()

    def place() -> Coordinate:
        while True:
            cell = _random_cell(rng)
            if cell not in used:
                used.add(cell)
                return cell

    character = Character(position=place())
    tools = [GameObject(place(), DONUT) for _ in range(DONUT_COUNT)]
    tools += [GameObject(place(), SWITCH, visible=True) for _ in range(SWITCH_COUNT)]
    obstacles = [GameObject(place(), RAT) for _ in range(RAT_COUNT)]
    obstacles += [GameObject(place(), BARREL) for _ in range(BARREL_COUNT)]
    bars = [GameObject(place(), BAR) for _ in range(MAX_BARS)]
    boosters = [GameObject(place(), STAIRS) for _ in range(STAIRS_COUNT)]
    boosters += [GameObject(place(), PUDDLE) for _ in range(PUDDLE_COUNT)]
    return Game(
        character=character,
        tools=tools,
        obstacles=obstacles,
        bars=bars,
        boosters=boosters,
    )


def random_free_coordinate(game: Game, rng: random.Random) -> Coordinate:
    """Return a random cell that neither the character nor any object occupies."""
    while True:
        cell = _random_cell(rng)
        if not game.is_occupied(cell):
            return cell


def relocate_rats(game: Game, rng: random.Random) -> None:
    """Move every rat to a random free cell."""
    for obstacle in game.obstacles:
        if obstacle.kind == RAT:
            obstacle.position = random_free_coordinate(game, rng)


def activate_flashlight(game: Game, rng: random.Random) -> bool:
    """Switch the flashlight on if one is left and it is off; return True if it was."""
    character = game.character
    if character.flashlights > 0 and not character.flashlight_on:
        character.flashlight_on = True
        character.flashlights -= 1
        character.flashlight_moves += 1
        relocate_rats(game, rng)
        return True
    return False


def _collect_bars(game: Game) -> None:
    here = game.character.position
    kept = [bar for bar in game.bars if bar.position != here]
    game.character.bars += len(game.bars) - len(kept)
    game.bars = kept


def _hit_barrels(game: Game) -> None:
    here = game.character.position
    for obstacle in game.obstacles:
        if obstacle.kind == BARREL and obstacle.position == here:
            game.character.energy -= BARREL_ENERGY


def _hit_rats(game: Game) -> None:
    here = game.character.position
    for obstacle in game.obstacles:
        if obstacle.kind == RAT and obstacle.position == here:
            game.character.flashlights -= 1


def _eat_donuts(game: Game) -> None:
    here = game.character.position
    kept = []
    for tool in game.tools:
        if tool.kind == DONUT and tool.position == here:
            game.character.energy += DONUT_ENERGY
        else:
            kept.append(tool)
    game.tools = kept


def _step_on_switch(game: Game, rng: random.Random) -> bool:
    here = game.character.position
    on_switch = False
    for tool in game.tools:
        if tool.kind == SWITCH and tool.position == here:
            relocate_rats(game, rng)
            on_switch = True
    return on_switch


def _ride_booster(game: Game, booster: GameObject, action: Action) -> None:
    row_step = -1 if booster.kind == STAIRS else 1
    col_step = _BOOST_DRIFT[action]
    for _ in range(BOOSTER_STEPS):
        current = game.character.position
        target = Coordinate(current.row + row_step, current.col + col_step)
        if target.in_bounds():
            game.character.position = target
        if booster.kind == STAIRS:
            _eat_donuts(game)
            _hit_barrels(game)
        else:
            _collect_bars(game)
            _hit_rats(game)


def _use_boosters(game: Game, action: Action) -> None:
    here = game.character.position
    for booster in list(game.boosters):
        if booster.position == here:
            _ride_booster(game, booster, action)


def _tick_flashlight(game: Game) -> None:
    character = game.character
    if character.flashlight_on:
        character.flashlight_moves += 1
        if character.flashlight_moves >= FLASHLIGHT_MOVES:
            character.flashlight_on = False
            character.flashlight_moves = 0


def _move(game: Game, action: Action, rng: random.Random) -> bool:
    d_row, d_col = _STEPS[action]
    current = game.character.position
    target = Coordinate(current.row + d_row, current.col + d_col)
    if not target.in_bounds():
        return False
    game.character.position = target
    game.character.energy -= 1
    _tick_flashlight(game)
    _collect_bars(game)
    _hit_barrels(game)
    _hit_rats(game)
    _eat_donuts(game)
    on_switch = _step_on_switch(game, rng)
    _use_boosters(game, action)
    return on_switch


def _update_visibility(game: Game, on_switch: bool) -> None:
    if on_switch:
        for obj in game.all_objects():
            obj.visible = True

    character = game.character
    if character.flashlight_on:
        for obj in game.all_objects():
            if obj.position.manhattan(character.position) <= FLASHLIGHT_RANGE:
                obj.visible = True

    if not character.flashlight_on and not on_switch:
        for obj in game.all_objects():
            obj.visible = obj.kind == SWITCH


def play_turn(game: Game, action: Action | str, rng: random.Random) -> GameStatus:
    """Apply one action to the game and return the resulting status."""
    if not isinstance(action, Action):
        action = Action.parse(action)
    on_switch = False
    if action is Action.FLASHLIGHT:
        activate_flashlight(game, rng)
    else:
        on_switch = _move(game, action, rng)
    _update_visibility(game, on_switch)
    return game.status()