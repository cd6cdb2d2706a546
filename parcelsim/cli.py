"""Command-line entry point running a scenario file through the simulation."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

from parcelsim.network import Graph
from parcelsim.package import Package, RouteNotFoundError
from parcelsim.reader import read_file
from parcelsim.scheduler import DuplicateEventError, Scheduler


def simulate(graph: Graph, packages: Sequence[Package]) -> Iterator[str]:
    """Post every package at its origin and run the simulation, yielding log lines."""
    scheduler = Scheduler()
    for package in packages:
        scheduler.new_package_event(package)
    yield from scheduler.run(packages, graph)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Error: No input file was provided as a parameter.", file=sys.stderr)
        print("Usage: parcelsim <file_path>", file=sys.stderr)
        return 1

    path = Path(args[0])
    if not path.is_file():
        print(f"Error: The file '{path}' does not exist.", file=sys.stderr)
        return 1

    try:
        graph, packages = read_file(path)
        for line in simulate(graph, packages):
            print(line)
    except (RouteNotFoundError, DuplicateEventError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())