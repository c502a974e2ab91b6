"""Search the binary server log for records holding two keys."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO, Optional, Sequence, Union

from .logmanager import RECORD_HEADER

DEFAULT_LOG = "log.bin"
DEFAULT_OUTPUT = "filtered_logs.txt"
DEFAULT_KEY1 = "MOVE_START"
DEFAULT_KEY2 = "MY ID : 13"


def iter_binary_log(stream: BinaryIO) -> Iterator[str]:
    """Yield each length-prefixed message in ``stream`` until the end."""
    while True:
        header = stream.read(RECORD_HEADER.size)
        if len(header) < RECORD_HEADER.size:
            return
        (size,) = RECORD_HEADER.unpack(header)
        data = stream.read(size)
        yield data.decode("utf-8", errors="replace")


def search_log_and_save(
    log_path: Union[str, Path],
    output_path: Union[str, Path],
    key1: str,
    key2: str,
) -> int:
    """Write every message containing both keys to ``output_path``; return the count."""
    count = 0
    with open(log_path, "rb") as log_file, open(output_path, "w", encoding="utf-8") as out:
        for message in iter_binary_log(log_file):
            if key1 in message and key2 in message:
                out.write(message + "\n")
                count += 1
    return count


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="tcpfighter-logfilter",
        description="Extract binary log records that contain both search keys.",
    )
    parser.add_argument("key1", nargs="?", default=DEFAULT_KEY1)
    parser.add_argument("key2", nargs="?", default=DEFAULT_KEY2)
    parser.add_argument("--log", default=DEFAULT_LOG, help="binary log to read")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="text file to write")
    args = parser.parse_args(argv)
    try:
        search_log_and_save(args.log, args.output, args.key1, args.key2)
    except OSError:
        print(f"Error: Unable to open {args.log}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())