# tcpfighter

Pieces of a sector-based fighting game server, usable on their own:

- `tcpfighter.ringbuffer.RingBuffer`: a fixed-capacity byte ring buffer with
  `enqueue`, `dequeue`, `peek`, `resize`, `move_front`/`move_rear` and the
  `capacity` and `free_size` properties.
- `tcpfighter.packet.Packet`: a bounded serialisation buffer (100 bytes by
  default) that writes and reads values with `struct` formats, little-endian
  unless the format says otherwise; overruns raise `PacketError`.
- `tcpfighter.circular_queue.CircularQueue`: a bounded queue that drops its
  oldest item when full.
- `tcpfighter.memory_pool.MemoryPool`: a free-list object pool that tracks how
  many objects it owns (`pool_count`) and how many are in use
  (`allocated_count`); returning a foreign or already-free object raises
  `PoolError`.
- `tcpfighter.logmanager.LogManager`: levelled text logging to `log.txt`
  (`LogLevel.DEBUG`, `ERROR`, `SYSTEM`; `ERROR` by default) plus a
  length-prefixed binary log, `log.bin`.
- `tcpfighter.logfilter`: reads that binary log back (`iter_binary_log`) and
  filters entries (`search_log_and_save`).
- `tcpfighter.profile.Profiler`: named timing sections, usable as a context
  manager through `profile(name)`, with a tabular report that trims the ten
  fastest and ten slowest samples once a section has more than twenty calls.
- `tcpfighter.defines`, `tcpfighter.sector`, `tcpfighter.game_object`,
  `tcpfighter.player`: world constants, the `Direction` enum, sectors and the
  player model (movement, facing, damage, `PlayerFlag` flags, timeouts).

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Filtering the binary log

`LogManager.save_log_to_binary` writes each entry to `log.bin` as a 64-bit
little-endian length followed by the UTF-8 text. To keep only the entries
that contain two search strings:

```
tcpfighter-logfilter
```

With no arguments this reads `log.bin` in the current directory and writes
the entries containing both `MOVE_START` and `MY ID : 13` to
`filtered_logs.txt`, one per line. Both keys can be given as positional
arguments, and `--log` and `--output` choose other files. If the log cannot
be opened the command prints an error and exits with status 1.

## Example

```python
from tcpfighter.packet import Packet
from tcpfighter.ringbuffer import RingBuffer

packet = Packet(100)
packet.write("I", 7)
packet.write("B", 0)
assert packet.data_size == 5
assert packet.read("I") == 7

queue = RingBuffer(16)
queue.enqueue(b"hello")
assert queue.peek(5) == b"hello"
assert queue.dequeue(5) == b"hello"
assert len(queue) == 0
```

## What is not included

There is no network server here: no listening socket, session handling,
select loop, packet dispatch to game actions, attack resolution, or manager
that builds the sector grid and moves objects between sectors. The modules
provide the data structures and game-object logic such a server would use;
tying them to sockets is left to the caller.