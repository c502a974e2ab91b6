"""Base class for everything that lives in the game world."""

from __future__ import annotations

import itertools
import logging
from typing import Any, ClassVar, Optional

from .defines import NETWORK_PACKET_RECV_TIMEOUT

logger = logging.getLogger(__name__)

SectorIndex = tuple[int, int]


class GameObject:
    """A positioned world object with a unique id and an inactivity timeout."""

    _ids: ClassVar[itertools.count] = itertools.count()
    max_timeout_gap: ClassVar[int] = 0

    def __init__(self, x: int = 0, y: int = 0) -> None:
        self.object_id: int = next(GameObject._ids)
        self._x = x
        self._y = y
        self.session: Optional[Any] = None
        self._dead = False
        self.last_activity = 0
        self.pre_sector: Optional[SectorIndex] = None
        self.cur_sector: Optional[SectorIndex] = None

    @property
    def position(self) -> tuple[int, int]:
        return (self._x, self._y)

    def set_position(self, x: int, y: int) -> None:
        self._x = x
        self._y = y

    @property
    def is_dead(self) -> bool:
        return self._dead

    def touch(self, now: int) -> None:
        """Record activity at server time ``now`` (milliseconds)."""
        self.last_activity = now

    def check_timeout(self, now: int) -> bool:
        """Mark the object dead if it has been idle too long; return whether it is dead."""
        gap = now - self.last_activity
        if gap > GameObject.max_timeout_gap:
            GameObject.max_timeout_gap = gap
            logger.debug("timeout max record: object %d, gap %d ms", self.object_id, gap)
        if gap > NETWORK_PACKET_RECV_TIMEOUT:
            self._dead = True
            logger.debug("timeout: object %d idle for %d ms", self.object_id, gap)
        return self._dead

    def update(self, now: int) -> None:
        """Advance one frame at server time ``now``."""
        self.check_timeout(now)

    def update_sector(self, sector_x: int, sector_y: int) -> bool:
        """Move to sector (sector_x, sector_y); return True if the sector changed."""
        self.pre_sector = self.cur_sector
        self.cur_sector = (sector_x, sector_y)
        return self.pre_sector != self.cur_sector

    def move(self) -> bool:
        """Move one step; a plain object stays where it is."""
        return False