"""Named-section timing profiler with outlier-trimmed averages."""

from __future__ import annotations

import math
import sys
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

THRESHOLD = 10
PRECISION = 8

_HEADER = "\tName\t|\tAverage\t|\tMin\t|\tMax\t|\tCall\n"
_RULE = "-" * 100 + "\n"
_PADDED_TAB = "\t".ljust(15)


def _insert_ranked(ranking: list[float], value: float, better) -> None:
    for index, current in enumerate(ranking):
        if better(value, current):
            ranking.insert(index, value)
            ranking.pop()
            return


@dataclass
class ProfileData:
    """Timing statistics for one named section."""

    name: str
    total_time: float = 0.0
    min_times: list[float] = field(default_factory=lambda: [math.inf] * THRESHOLD)
    max_times: list[float] = field(default_factory=lambda: [sys.float_info.min] * THRESHOLD)
    call_count: int = 0
    start_time: float = field(default_factory=time.perf_counter)

    def record(self, elapsed: float) -> None:
        """Add one measured duration in seconds."""
        self.total_time += elapsed
        _insert_ranked(self.min_times, elapsed, lambda new, old: new < old)
        _insert_ranked(self.max_times, elapsed, lambda new, old: new > old)
        self.call_count += 1

    def average(self) -> float:
        """Mean duration, dropping the extreme samples once there are enough calls."""
        if self.call_count == 0:
            return math.nan
        if self.call_count > THRESHOLD * 2:
            trimmed = self.total_time - sum(self.min_times) - sum(self.max_times)
            return trimmed / (self.call_count - THRESHOLD * 2)
        return self.total_time / self.call_count


class Profiler:
    """Collects timings for named sections in the order they first appear."""

    def __init__(self) -> None:
        self._data: dict[str, ProfileData] = {}

    def find(self, name: str) -> Optional[ProfileData]:
        return self._data.get(name)

    def begin(self, name: str) -> None:
        """Start timing ``name``, creating its record if needed."""
        data = self._data.get(name)
        if data is None:
            data = self._data[name] = ProfileData(name)
        data.start_time = time.perf_counter()

    def end(self, name: str) -> None:
        """Stop timing ``name`` and record the duration; unknown names are ignored."""
        data = self._data.get(name)
        if data is not None:
            data.record(time.perf_counter() - data.start_time)

    @contextmanager
    def profile(self, name: str) -> Iterator[ProfileData]:
        """Time the enclosed block under ``name``."""
        self.begin(name)
        try:
            yield self._data[name]
        finally:
            self.end(name)

    def reset(self) -> None:
        self._data.clear()

    def write_report(self, path: Union[str, Path]) -> None:
        """Write a tab-separated table of all sections to ``path``."""
        with open(path, "w", encoding="utf-8") as report:
            report.write(_HEADER)
            report.write(_RULE)
            for data in self._data.values():
                report.write(
                    f"\t{data.name}\t{data.average():.{PRECISION}f}"
                    f"{_PADDED_TAB}{data.min_times[0]:.{PRECISION}f}"
                    f"{_PADDED_TAB}{data.max_times[0]:.{PRECISION}f}"
                    f"{_PADDED_TAB}{data.call_count}\n"
                )