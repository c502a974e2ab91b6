import pytest

from tcpfighter.defines import MOVE_DELTAS, Direction


def test_direction_wire_values():
    assert Direction.LL == 0
    assert Direction.RR == 4
    assert Direction.LD == 7
    assert Direction(3) is Direction.RU


@pytest.mark.parametrize("direction", [Direction.RR, Direction.RU, Direction.RD])
def test_right_directions_face_right(direction):
    assert direction.facing() is Direction.RR


@pytest.mark.parametrize("direction", [Direction.LL, Direction.LU, Direction.LD])
def test_left_directions_face_left(direction):
    assert direction.facing() is Direction.LL


@pytest.mark.parametrize("direction", [Direction.UU, Direction.DD])
def test_vertical_directions_keep_facing(direction):
    assert direction.facing() is None


def test_move_deltas_cover_every_direction():
    assert set(MOVE_DELTAS) == set(Direction)
    for dx, dy in MOVE_DELTAS.values():
        assert dx in (-1, 0, 1) and dy in (-1, 0, 1)
        assert (dx, dy) != (0, 0)


def test_move_deltas_are_opposite_in_pairs():
    for direction in Direction:
        opposite = Direction((direction + 4) % 8)
        dx, dy = MOVE_DELTAS[direction]
        assert MOVE_DELTAS[opposite] == (-dx, -dy)


def test_move_delta_right_and_up():
    assert MOVE_DELTAS[Direction.RD.facing()] == (1, 0)
    assert MOVE_DELTAS[Direction.LU.facing()] == (-1, 0)
    assert MOVE_DELTAS[Direction(2)] == (0, -1)


@pytest.mark.parametrize("value", range(8))
def test_facing_matches_horizontal_delta(value):
    direction = Direction(value)
    facing = Direction.facing(direction)
    dx, _ = MOVE_DELTAS[direction]
    if facing is Direction.RR:
        assert dx == 1
    elif facing is Direction.LL:
        assert dx == -1
    else:
        assert facing is None
        assert dx == 0


def test_invalid_direction_raises():
    with pytest.raises(ValueError):
        Direction(8)