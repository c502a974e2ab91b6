"""Object pool that recycles freed instances instead of discarding them."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class PoolError(Exception):
    """Raised when an object is returned to a pool that does not own it."""


class MemoryPool(Generic[T]):
    """A LIFO pool of objects built by ``factory``.

    With ``placement_new`` each allocation hands out a freshly built object;
    without it a recycled object keeps whatever state it had when freed.
    """

    def __init__(
        self,
        factory: Callable[[], T],
        initial_size: int = 0,
        placement_new: bool = False,
    ) -> None:
        if initial_size < 0:
            raise ValueError("initial size must not be negative")
        self._factory = factory
        self._placement_new = placement_new
        self._owned: dict[int, T] = {}
        self._free: list[T] = []
        self._free_ids: set[int] = set()
        self._allocated = 0
        for _ in range(initial_size):
            self._push_free(self._create())

    def _create(self) -> T:
        obj = self._factory()
        self._owned[id(obj)] = obj
        return obj

    def _push_free(self, obj: T) -> None:
        self._free.append(obj)
        self._free_ids.add(id(obj))

    @property
    def pool_count(self) -> int:
        """Objects created by the pool, in use or free."""
        return len(self._owned)

    @property
    def allocated_count(self) -> int:
        """Objects currently handed out."""
        return self._allocated

    def alloc(self) -> T:
        """Take an object from the free list, creating one if it is empty."""
        if self._free:
            obj = self._free.pop()
            self._free_ids.discard(id(obj))
            if self._placement_new:
                del self._owned[id(obj)]
                obj = self._create()
        else:
            obj = self._create()
        self._allocated += 1
        return obj

    def free(self, obj: T) -> None:
        """Return ``obj`` to the pool."""
        if obj is None:
            raise PoolError("cannot free None")
        if self._owned.get(id(obj)) is not obj:
            raise PoolError("object does not belong to this pool")
        if id(obj) in self._free_ids:
            raise PoolError("object is already free")
        self._push_free(obj)
        self._allocated -= 1

    def usage(self) -> str:
        """Describe the pool's object type and counts."""
        type_name = getattr(self._factory, "__name__", repr(self._factory))
        return (
            f"Pool type: {type_name}\n"
            f"Total objects: {self.pool_count}\n"
            f"In use: {self.allocated_count}\n"
        )