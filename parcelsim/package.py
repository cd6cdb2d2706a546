"""Packages travelling through the warehouse network and their routes."""

from __future__ import annotations

from collections import deque
from enum import IntEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parcelsim.network import Graph


class State(IntEnum):
    """Lifecycle of a package during the simulation."""

    NOT_POSTED = 0
    WAREHOUSE_ARRIVAL = 1
    SECTION_STORED = 2
    SECTION_REMOVED = 3
    DELIVERED = 4


class RouteNotFoundError(Exception):
    """Raised when no path links a package's origin to its destination."""

    def __init__(self, origin_id: int, destination_id: int) -> None:
        super().__init__(
            f"There is no route between the warehouses {origin_id} and {destination_id}."
        )
        self.origin_id = origin_id
        self.destination_id = destination_id


class Package:
    """A package with an origin, a destination and the route still ahead of it."""

    def __init__(self, id: int, arrival: int, origin_id: int, destination_id: int) -> None:
        self.id = id
        self.arrival = arrival
        self.origin_id = origin_id
        self.destination_id = destination_id
        self.state = State.NOT_POSTED
        self.current_location: int | None = None
        # Last time the package was handled by a transport.
        self.p_time: int | None = None
        self._route: deque[int] = deque()

    def __repr__(self) -> str:
        return (
            f"Package(id={self.id}, arrival={self.arrival}, origin_id={self.origin_id}, "
            f"destination_id={self.destination_id}, state={self.state.name})"
        )

    @property
    def route(self) -> tuple[int, ...]:
        """Warehouses still to be visited, in order."""
        return tuple(self._route)

    def next_step(self) -> int:
        """Return the next warehouse on the route."""
        if not self._route:
            raise IndexError("Route is empty.")
        return self._route[0]

    def calc_route(self, graph: Graph) -> None:
        """Compute the shortest route (breadth-first) from origin to destination."""
        antecedent: dict[int, int | None] = {self.origin_id: None}
        queue: deque[int] = deque([self.origin_id])

        while queue:
            warehouse_id = queue.popleft()
            if warehouse_id == self.destination_id:
                break
            warehouse = graph.warehouse(warehouse_id)
            if warehouse is None:
                continue
            for neighbor_id in warehouse.neighbor_ids:
                if neighbor_id not in antecedent:
                    antecedent[neighbor_id] = warehouse_id
                    queue.append(neighbor_id)
        else:
            raise RouteNotFoundError(self.origin_id, self.destination_id)

        current: int | None = self.destination_id
        while current is not None:
            self._route.appendleft(current)
            current = antecedent[current]

    def advance_in_route(self) -> bool:
        """Move to the next warehouse on the route; return True once it is the last."""
        if not self._route:
            raise IndexError("Route is empty.")
        self.current_location = self._route.popleft()
        return not self._route

    def route_text(self) -> str:
        """Human-readable description of the remaining route."""
        steps = "".join(f"{key} " for key in self._route)
        return f"Package Id: {self.id}, route: {steps}"