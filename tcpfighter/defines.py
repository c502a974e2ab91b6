"""Game-wide constants: world bounds, combat ranges, speeds and directions."""

from __future__ import annotations

import enum
from typing import Optional

# A session that sends nothing for this many milliseconds is disconnected.
NETWORK_PACKET_RECV_TIMEOUT = 30000

# World bounds; valid coordinates satisfy LEFT <= x < RIGHT and TOP <= y < BOTTOM.
RANGE_MOVE_TOP = 0
RANGE_MOVE_LEFT = 0
RANGE_MOVE_RIGHT = 6400
RANGE_MOVE_BOTTOM = 6400

ATTACK1_RANGE_X = 80
ATTACK2_RANGE_X = 90
ATTACK3_RANGE_X = 100
ATTACK1_RANGE_Y = 10
ATTACK2_RANGE_Y = 10
ATTACK3_RANGE_Y = 20

ATTACK1_DAMAGE = 1
ATTACK2_DAMAGE = 2
ATTACK3_DAMAGE = 3

# Movement per frame at 25 frames per second.
SPEED_PLAYER_X = 6
SPEED_PLAYER_Y = 4

# Largest tolerated gap between client and server positions.
ERROR_RANGE = 50

NETWORK_PACKET_CODE = 0x89

SECTOR_WIDTH_CNT = 40
SECTOR_HEIGHT_CNT = 40

EXPECTED_ACTIVE_USERS = 7000


class Direction(enum.IntEnum):
    """The eight movement directions, numbered as on the wire."""

    LL = 0
    LU = 1
    UU = 2
    RU = 3
    RR = 4
    RD = 5
    DD = 6
    LD = 7

    def facing(self) -> Optional[Direction]:
        """The way a character faces while moving this way.

        Straight up and down do not change facing, so they give ``None``.
        """
        if self in (Direction.RR, Direction.RU, Direction.RD):
            return Direction.RR
        if self in (Direction.LL, Direction.LU, Direction.LD):
            return Direction.LL
        return None


# Unit step (dx, dy) for each direction; y grows downwards.
MOVE_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.LL: (-1, 0),
    Direction.LU: (-1, -1),
    Direction.UU: (0, -1),
    Direction.RU: (1, -1),
    Direction.RR: (1, 0),
    Direction.RD: (1, 1),
    Direction.DD: (0, 1),
    Direction.LD: (-1, 1),
}