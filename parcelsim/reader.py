"""Reading simulation scenarios from their text format."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from os import PathLike
from typing import NamedTuple

from parcelsim.network import Graph, Transport
from parcelsim.package import Package

_PACKAGE_KEYWORDS = frozenset({"pac", "org", "dst"})


class _PackageLine(NamedTuple):
    arrival: int
    label: int
    origin: int
    destination: int


def parse_warehouse_line(line: str) -> list[int]:
    """Return the column indices marked '1' in an adjacency-matrix row."""
    columns = (ch for ch in line if ch != " ")
    return [index for index, ch in enumerate(columns) if ch == "1"]


def parse_package_line(line: str) -> _PackageLine:
    """Parse ``<time> pac <id> org <origin> dst <destination>``."""
    numbers = [int(token) for token in line.split() if token not in _PACKAGE_KEYWORDS]
    if len(numbers) != 4:
        raise ValueError(f"Malformed package line: {line!r}")
    return _PackageLine(*numbers)


def read_scenario(lines: Iterable[str]) -> tuple[Graph, list[Package]]:
    """Build the network and the routed packages from the lines of a scenario."""
    lines_iter = (line.rstrip("\r\n") for line in lines)

    def next_int(what: str) -> int:
        try:
            return int(next(lines_iter))
        except StopIteration:
            raise ValueError(f"Scenario ends before {what}.") from None

    capacity = next_int("transport capacity")
    latency = next_int("transport latency")
    interval = next_int("transport interval")
    removal_cost = next_int("removal cost")
    max_warehouses = next_int("warehouse count")

    graph = Graph(max_warehouses, removal_cost, Transport(capacity, latency, interval))
    for index in range(max_warehouses):
        try:
            row = next(lines_iter)
        except StopIteration:
            raise ValueError("Scenario ends before all warehouses are listed.") from None
        graph.add_warehouse(index, parse_warehouse_line(row))

    package_count = next_int("package count")
    packages: list[Package] = []
    for line in lines_iter:
        if not line.strip():
            continue
        if len(packages) == package_count:
            raise ValueError(f"More than {package_count} packages listed.")
        data = parse_package_line(line)
        package = Package(len(packages), data.arrival, data.origin, data.destination)
        package.calc_route(graph)
        packages.append(package)

    if len(packages) != package_count:
        raise ValueError(f"Expected {package_count} packages, found {len(packages)}.")
    return graph, packages


def read_file(path: str | PathLike[str]) -> tuple[Graph, list[Package]]:
    """Read a scenario file."""
    with open(path, encoding="utf-8") as handle:
        return read_scenario(handle)


def format_packages(packages: Sequence[Package]) -> str:
    """One line per package: id, arrival, origin and destination."""
    return "\n".join(
        f"{p.id} {p.arrival} {p.origin_id} {p.destination_id}" for p in packages
    )