"""Text and length-prefixed binary logging for the game server."""

from __future__ import annotations

import enum
import struct
import sys
import time
from pathlib import Path
from typing import Optional, TextIO, Union

LOG_FILE_NAME = "log.txt"
BINARY_LOG_NAME = "log.bin"
PERFORMANCE_LOG_PREFIX = "server_performance_log_"

# Each binary record is a 64-bit little-endian length followed by the message bytes.
RECORD_HEADER = struct.Struct("<Q")


class LogLevel(enum.IntEnum):
    """Severity of a log message; messages below the current level are dropped."""

    DEBUG = 0
    ERROR = 1
    SYSTEM = 2


def _join(args: tuple) -> str:
    return "".join(str(arg) for arg in args)


class LogManager:
    """Writes leveled text logs and a binary record log into ``directory``."""

    def __init__(
        self,
        directory: Union[str, Path] = ".",
        level: LogLevel = LogLevel.ERROR,
    ) -> None:
        self.directory = Path(directory)
        self.level = LogLevel(level)

        stamp = time.strftime("%Y-%m-%d_%H-%M-%S", time.localtime())
        self.performance_log_path = self.directory / f"{PERFORMANCE_LOG_PREFIX}{stamp}.txt"
        self._performance_log: Optional[TextIO]
        try:
            self._performance_log = open(self.performance_log_path, "a", encoding="utf-8")
        except OSError:
            print(f"Failed to open log file: {self.performance_log_path}", file=sys.stderr)
            self._performance_log = None

        self.log_path = self.directory / LOG_FILE_NAME
        self.binary_log_path = self.directory / BINARY_LOG_NAME
        self._binary_log = open(self.binary_log_path, "ab")

    def set_log_level(self, level: LogLevel) -> None:
        """Set the lowest level that is still written."""
        self.level = LogLevel(level)

    def log_message(self, level: LogLevel, *args) -> None:
        """Append a timestamped line to the text log if ``level`` is high enough."""
        level = LogLevel(level)
        if level < self.level:
            return
        line = f"[{self.current_time()}][{level.name}] {_join(args)}\n"
        with open(self.log_path, "a", encoding="utf-8") as log_file:
            log_file.write(line)

    def log_debug(self, *args) -> None:
        self.log_message(LogLevel.DEBUG, *args)

    def log_error(self, *args) -> None:
        self.log_message(LogLevel.ERROR, *args)

    def log_system(self, *args) -> None:
        self.log_message(LogLevel.SYSTEM, *args)

    def save_log_to_binary(self, *args) -> None:
        """Append one length-prefixed record built from ``args`` to the binary log."""
        data = _join(args).encode("utf-8")
        self._binary_log.write(RECORD_HEADER.pack(len(data)))
        self._binary_log.write(data)
        self._binary_log.flush()

    def current_time(self) -> str:
        """Local time formatted as ``YYYY-MM-DD HH:MM:SS``."""
        return time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())

    def close(self) -> None:
        """Close the log files held open by this manager."""
        if self._performance_log is not None and not self._performance_log.closed:
            self._performance_log.close()
        if not self._binary_log.closed:
            self._binary_log.close()

    def __enter__(self) -> LogManager:
        return self

    def __exit__(self, *args) -> None:
        self.close()