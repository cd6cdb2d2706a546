"""The warehouse network: warehouses, their sections and the transport between them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from parcelsim.package import Package, State


@dataclass(frozen=True)
class Transport:
    """Transport parameters shared by every link in the network."""

    capacity: int  # packages carried per departure
    latency: int  # travel time between two warehouses
    interval: int  # time between consecutive departures


class Warehouse:
    """A warehouse holding one stack of packages per neighbouring warehouse."""

    def __init__(self, id: int, neighbor_ids: Iterable[int]) -> None:
        self.id = id
        self._sections: dict[int, list[int]] = {}
        for neighbor_id in neighbor_ids:
            self._sections.setdefault(neighbor_id, [])

    def __repr__(self) -> str:
        return f"Warehouse(id={self.id}, neighbor_ids={list(self._sections)})"

    @property
    def neighbor_ids(self) -> tuple[int, ...]:
        """Ids of neighbouring warehouses, in the order they were given."""
        return tuple(self._sections)

    def find_section(self, neighbor_id: int) -> list[int] | None:
        """Return the stack of package ids bound for a neighbour, or None."""
        return self._sections.get(neighbor_id)

    def push_package(self, package: Package) -> None:
        """Store a package in the section for the next step of its route."""
        section = self._sections.get(package.next_step())
        if section is not None:
            section.append(package.id)

    def describe(self) -> str:
        neighbors = "".join(f"{n} " for n in self._sections)
        return f"Id: {self.id}, Neighbors: {neighbors}"


@dataclass
class RemovalResult:
    """Outcome of emptying a section when a transport departs."""

    removed_ids: list[int] = field(default_factory=list)
    clock_time: int = 0
    log: list[str] = field(default_factory=list)


class Graph:
    """The network of warehouses."""

    def __init__(self, max_warehouses: int, removal_cost: int, transport: Transport) -> None:
        self.max_warehouses = max_warehouses
        self.removal_cost = removal_cost
        self.transport = transport
        self._warehouses: list[Warehouse] = []

    @property
    def warehouses(self) -> tuple[Warehouse, ...]:
        return tuple(self._warehouses)

    def add_warehouse(self, id: int, neighbor_ids: Iterable[int]) -> Warehouse:
        """Add a warehouse with the given neighbours."""
        if len(self._warehouses) >= self.max_warehouses:
            raise ValueError(f"Graph already holds {self.max_warehouses} warehouses.")
        warehouse = Warehouse(id, neighbor_ids)
        self._warehouses.append(warehouse)
        return warehouse

    def warehouse(self, warehouse_id: int) -> Warehouse | None:
        """Return the warehouse with the given id, or None."""
        return next((w for w in self._warehouses if w.id == warehouse_id), None)

    def _require(self, warehouse_id: int) -> Warehouse:
        warehouse = self.warehouse(warehouse_id)
        if warehouse is None:
            raise KeyError(f"Unknown warehouse {warehouse_id}.")
        return warehouse

    def store_package(self, package: Package, warehouse_id: int) -> None:
        """Store a package in a warehouse."""
        self._require(warehouse_id).push_package(package)

    def remove_packages(
        self,
        origin_id: int,
        destination_id: int,
        clock_time: int,
        packages: Sequence[Package],
    ) -> RemovalResult | None:
        """Empty the section of origin bound for destination and load the transport.

        Up to the transport capacity leave in transit; the rest are stored back.
        Returns None when origin has no section for destination.
        """
        section = self._require(origin_id).find_section(destination_id)
        if section is None:
            return None

        result = RemovalResult(clock_time=clock_time)
        while section:
            package_id = section.pop()
            result.clock_time += self.removal_cost
            result.log.append(
                f"{result.clock_time:07d} pacote {package_id:03d} removido de "
                f"{origin_id:03d} na secao {destination_id:03d}"
            )
            result.removed_ids.append(package_id)

        loaded = 0
        for package_id in reversed(result.removed_ids):
            package = packages[package_id]
            if loaded < self.transport.capacity:
                result.log.append(
                    f"{result.clock_time:07d} pacote {package_id:03d} em transito de "
                    f"{origin_id:03d} para {destination_id:03d}"
                )
                package.state = State.SECTION_REMOVED
                loaded += 1
            else:
                section.append(package_id)
                result.log.append(
                    f"{result.clock_time:07d} pacote {package_id:03d} rearmazenado em "
                    f"{origin_id:03d} na secao {destination_id:03d}"
                )
                package.state = State.SECTION_STORED

        for package_id in result.removed_ids:
            packages[package_id].p_time = result.clock_time

        return result

    def describe(self) -> str:
        return "\n".join(w.describe() for w in self._warehouses)