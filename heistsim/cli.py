"""Command-line entry point: run a group of nodes sharing houses and fences."""

from __future__ import annotations

import argparse
import threading
from typing import Optional, Sequence

from .node import Node
from .receiver import run_receiver
from .transport import Network
from .worker import main_loop


def run(size: int = 3, cycles: Optional[int] = None) -> list[Node]:
    """Run ``size`` nodes for ``cycles`` cycles each and return them."""
    network = Network(size)
    nodes = [Node(rank, network) for rank in range(size)]
    errors: list[BaseException] = []

    def work(node: Node) -> None:
        try:
            main_loop(node, cycles)
        except BaseException as exc:
            errors.append(exc)
            network.close()

    receivers = [threading.Thread(target=run_receiver, args=(n,), daemon=True) for n in nodes]
    workers = [threading.Thread(target=work, args=(n,), daemon=True) for n in nodes]
    for thread in receivers + workers:
        thread.start()
    try:
        for thread in workers:
            thread.join()
    finally:
        network.close()
        for thread in receivers:
            thread.join()
    if errors:
        raise errors[0]
    return nodes


def _positive(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return value


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="heistsim",
        description="Simulate nodes competing for houses and fences with Lamport clocks.",
    )
    parser.add_argument("-n", "--size", type=_positive, default=3, help="number of nodes")
    parser.add_argument(
        "-c", "--cycles", type=_positive, default=None,
        help="cycles per node (default: run until interrupted)",
    )
    args = parser.parse_args(argv)
    try:
        run(args.size, args.cycles)
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())