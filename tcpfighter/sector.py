"""One cell of the world grid with the objects inside it and its neighbours."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


class Sector:
    """A grid cell at index (x, y) tracking its objects by id."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self._objects: dict[int, Any] = {}
        self._around: list[Sector] = []

    def __repr__(self) -> str:
        return f"Sector({self.x}, {self.y})"

    def register_object(self, obj: Any) -> None:
        """Add ``obj`` under its ``object_id``; an id already present is kept."""
        self._objects.setdefault(obj.object_id, obj)

    def delete_object(self, obj: Any) -> None:
        """Remove ``obj``; raises ``KeyError`` if it is not in this sector."""
        try:
            del self._objects[obj.object_id]
        except KeyError:
            raise KeyError(f"object {obj.object_id} is not in {self!r}") from None

    def insert_around_sector(self, sector: Sector) -> None:
        """Append ``sector`` to the list of surrounding sectors."""
        self._around.append(sector)

    @property
    def around_sectors(self) -> tuple[Sector, ...]:
        """Surrounding sectors in the order they were inserted."""
        return tuple(self._around)

    @property
    def objects(self) -> Mapping[int, Any]:
        """Read-only view of the objects in this sector, keyed by id."""
        return MappingProxyType(self._objects)