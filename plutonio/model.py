"""Core data types for the plutonium-collecting board game."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterator

BOARD_SIZE = 20

MAX_BARS = 10
DONUT_COUNT = 5
SWITCH_COUNT = 4
STAIRS_COUNT = 3
PUDDLE_COUNT = 3
RAT_COUNT = 5
BARREL_COUNT = 15

DONUT_ENERGY = 10
BARREL_ENERGY = 15
BOOSTER_STEPS = 3
FLASHLIGHT_RANGE = 2
FLASHLIGHT_MOVES = 5

INITIAL_FLASHLIGHTS = 5
INITIAL_ENERGY = 400

DONUT = "D"
SWITCH = "I"
RAT = "R"
BARREL = "A"
BAR = "B"
STAIRS = "E"
PUDDLE = "C"
HOMER = "H"
EMPTY = "."


@dataclass(frozen=True)
class Coordinate:
    """A cell on the board, addressed by row and column."""

    row: int
    col: int

    def manhattan(self, other: Coordinate) -> int:
        """Return the Manhattan distance to another coordinate."""
        return abs(self.row - other.row) + abs(self.col - other.col)

    def in_bounds(self) -> bool:
        """Return True if the coordinate lies on the board."""
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE


@dataclass
class GameObject:
    """An item placed on the board."""

    position: Coordinate
    kind: str
    visible: bool = False


@dataclass
class Character:
    """The player's character and its resources."""

    position: Coordinate
    flashlights: int = INITIAL_FLASHLIGHTS
    bars: int = 0
    energy: int = INITIAL_ENERGY
    flashlight_on: bool = False
    flashlight_moves: int = 0


class GameStatus(enum.IntEnum):
    """Outcome of a game at a given moment."""

    LOST = -1
    PLAYING = 0
    WON = 1


@dataclass
class Game:
    """Complete state of one game."""

    character: Character
    tools: list[GameObject] = field(default_factory=list)
    obstacles: list[GameObject] = field(default_factory=list)
    bars: list[GameObject] = field(default_factory=list)
    boosters: list[GameObject] = field(default_factory=list)

    def all_objects(self) -> Iterator[GameObject]:
        """Yield every object: tools, bars, boosters, then obstacles."""
        yield from self.tools
        yield from self.bars
        yield from self.boosters
        yield from self.obstacles

    def is_occupied(self, coordinate: Coordinate) -> bool:
        """Return True if the character or any object stands on the cell."""
        if self.character.position == coordinate:
            return True
        return any(obj.position == coordinate for obj in self.all_objects())

    def status(self) -> GameStatus:
        """Return whether the game is won, lost or still going."""
        character = self.character
        if character.energy > 0 and character.bars == MAX_BARS:
            return GameStatus.WON
        if character.energy == 0 and character.bars < MAX_BARS:
            return GameStatus.LOST
        return GameStatus.PLAYING