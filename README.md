# heistsim

A small simulation of a distributed mutual-exclusion protocol. A group of
processes (ranks) repeatedly go through the same cycle:

1. Compete for one of a limited number of **houses** (3).
2. Once admitted, wait at a barrier with all the others, ask every other rank
   which house number it holds, and pick a number nobody else reports.
3. Compete for one of a limited number of **fences** (2), who buy the loot.
4. Release everything and start again.

Access is decided with Lamport logical clocks: every request carries a
timestamp, every process keeps the requests it has seen in a priority queue
ordered by `(timestamp, rank)`, and a process enters once it has collected an
acknowledgement from every other process and its own request is among the
first *N* in the queue, where *N* is the number of houses or fences.

Each simulated process runs in its own pair of threads — a worker that walks
through the cycle and a receiver that answers requests — and they talk to
each other over an in-memory network.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The package installs a `heistsim` command that starts a whole group of
processes in one interpreter and prints what each of them does, coloured per
rank and prefixed with the rank and its current Lamport clock:

```
heistsim
```

Options:

- `-n`, `--size` — number of processes (default 3).
- `-c`, `--cycles` — full cycles each process runs; without it the
  simulation runs until interrupted with Ctrl-C (exit status 130).

```
heistsim --size 4 --cycles 2
heistsim --help
```

## Library use

The building blocks can be used on their own:

- `heistsim.packet` — `Packet`, the message tags `Tag`, the resource kinds
  `Resource`, and `tag_name(tag)` for readable names of tags.
- `heistsim.packetqueue` — `PacketQueue`, a bounded, thread-safe queue kept
  in `(timestamp, source)` order that holds at most one packet per source,
  with `enqueue`, `remove_source`, `clear`, `snapshot` and `heads`.
- `heistsim.clock` — `LamportClock` with `increment()`, `update(received)`,
  `reset(value)` and the `value` property.
- `heistsim.state` — the process `State` and a thread-safe `StateCell`; once
  finished, a cell ignores further changes.
- `heistsim.transport` — `Network`, the in-memory message exchange with
  `send`, `receive`, `barrier` and `close`, delivering `Message` objects.
- `heistsim.node` — `Node`, one process's shared data: rank, clock, state,
  queues, house number and acknowledgement count, plus `send`, `broadcast`
  and `log`.
- `heistsim.receiver` — `handle_message(node, message)` and
  `run_receiver(node)`.
- `heistsim.worker` — the cycle itself: `acquire_house`, `acquire_fence`,
  `release_all`, `main_loop`, and the pure helper `choose_house_number`.
- `heistsim.cli` — `run(size, cycles)` runs a complete simulation from
  Python and returns the nodes.

```python
from heistsim.cli import run

nodes = run(3, 2)  # three processes, two full cycles each
```

## What it does not do

All processes live as threads in a single Python interpreter and exchange
messages through `Network`, which is in memory only. There is no way to run
the ranks as separate programs or on separate machines.