import pytest

from plutonio.model import (
    BAR,
    BARREL,
    BOARD_SIZE,
    DONUT,
    INITIAL_ENERGY,
    INITIAL_FLASHLIGHTS,
    MAX_BARS,
    RAT,
    STAIRS,
    SWITCH,
    Character,
    Coordinate,
    Game,
    GameObject,
    GameStatus,
)


def _game(**character_fields):
    character = Character(position=Coordinate(5, 5), **character_fields)
    return Game(
        character=character,
        tools=[GameObject(Coordinate(0, 0), DONUT), GameObject(Coordinate(0, 1), SWITCH, True)],
        obstacles=[GameObject(Coordinate(1, 0), RAT), GameObject(Coordinate(1, 1), BARREL)],
        bars=[GameObject(Coordinate(2, 0), BAR)],
        boosters=[GameObject(Coordinate(3, 0), STAIRS)],
    )


def test_manhattan_with_itself_is_zero():
    c = Coordinate(7, 3)
    assert c.manhattan(c) == 0


@pytest.mark.parametrize(
    "a,b",
    [(Coordinate(0, 0), Coordinate(4, 9)), (Coordinate(10, 2), Coordinate(1, 15))],
)
def test_manhattan_is_symmetric(a, b):
    assert a.manhattan(b) == b.manhattan(a)


def test_manhattan_along_one_axis_equals_offset():
    assert Coordinate(2, 2).manhattan(Coordinate(2, 6)) == 4


@pytest.mark.parametrize(
    "coord,expected",
    [
        (Coordinate(0, 0), True),
        (Coordinate(BOARD_SIZE - 1, BOARD_SIZE - 1), True),
        (Coordinate(BOARD_SIZE, 0), False),
        (Coordinate(0, BOARD_SIZE), False),
        (Coordinate(-1, 0), False),
        (Coordinate(0, -1), False),
    ],
)
def test_in_bounds(coord, expected):
    assert coord.in_bounds() is expected


def test_coordinate_is_hashable_and_equal_by_value():
    assert {Coordinate(1, 2), Coordinate(1, 2)} == {Coordinate(1, 2)}


def test_character_defaults_follow_source():
    ch = Character(position=Coordinate(0, 0))
    assert ch.flashlights == INITIAL_FLASHLIGHTS == 5
    assert ch.energy == INITIAL_ENERGY == 400
    assert ch.bars == 0
    assert ch.flashlight_on is False
    assert ch.flashlight_moves == 0


@pytest.mark.parametrize(
    "fields,code",
    [
        ({"bars": MAX_BARS}, 1),
        ({"energy": 0, "bars": 3}, -1),
        ({}, 0),
    ],
)
def test_status_values_match_source_codes(fields, code):
    assert _game(**fields).status() == code


def test_all_objects_order():
    game = _game()
    kinds = [obj.kind for obj in game.all_objects()]
    assert kinds == [DONUT, SWITCH, BAR, STAIRS, RAT, BARREL]


def test_is_occupied_by_character_and_objects():
    game = _game()
    assert game.is_occupied(Coordinate(5, 5))
    assert game.is_occupied(Coordinate(3, 0))
    assert game.is_occupied(Coordinate(1, 1))
    assert not game.is_occupied(Coordinate(19, 19))


def test_status_won_when_all_bars_collected():
    assert _game(bars=MAX_BARS).status() is GameStatus.WON


def test_status_lost_when_energy_exhausted():
    assert _game(energy=0, bars=3).status() is GameStatus.LOST


def test_status_playing_in_progress():
    assert _game().status() is GameStatus.PLAYING


def test_status_negative_energy_keeps_playing():
    assert _game(energy=-5, bars=3).status() is GameStatus.PLAYING


def test_status_all_bars_without_energy_is_not_won():
    assert _game(energy=0, bars=MAX_BARS).status() is GameStatus.PLAYING