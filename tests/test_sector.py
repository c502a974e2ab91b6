from dataclasses import dataclass

import pytest

from tcpfighter.sector import Sector


@dataclass
class _Thing:
    object_id: int


def test_register_and_delete():
    sector = Sector(3, 4)
    first, second = _Thing(1), _Thing(2)
    sector.register_object(first)
    sector.register_object(second)
    assert dict(sector.objects) == {1: first, 2: second}
    sector.delete_object(first)
    assert dict(sector.objects) == {2: second}


def test_register_keeps_existing_id():
    sector = Sector(0, 0)
    original = _Thing(5)
    sector.register_object(original)
    sector.register_object(_Thing(5))
    assert sector.objects[5] is original
    assert len(sector.objects) == 1


def test_delete_missing_raises():
    sector = Sector(0, 0)
    with pytest.raises(KeyError):
        sector.delete_object(_Thing(9))


def test_around_sectors_keep_order():
    center = Sector(1, 1)
    neighbours = [Sector(0, 0), Sector(1, 0), Sector(2, 0)]
    for neighbour in neighbours:
        center.insert_around_sector(neighbour)
    assert center.around_sectors == tuple(neighbours)


def test_objects_view_is_read_only():
    sector = Sector(0, 0)
    with pytest.raises(TypeError):
        sector.objects[1] = _Thing(1)


def test_objects_view_follows_changes():
    sector = Sector(0, 0)
    view = sector.objects
    sector.register_object(_Thing(7))
    assert 7 in view


def test_position_is_stored():
    sector = Sector(12, 34)
    assert (sector.x, sector.y) == (12, 34)