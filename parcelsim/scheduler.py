"""Discrete-event scheduler driving packages and transports through the network."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import IntEnum

from parcelsim.network import Graph
from parcelsim.package import Package, State


class DuplicateEventError(Exception):
    """Raised when two events share the same time and event data."""

    def __init__(self, first: EventKey, second: EventKey) -> None:
        super().__init__(f"Identical keys detected! ({first.text}, {second.text})")
        self.first = first
        self.second = second


class EventKind(IntEnum):
    PACKAGE = 1
    TRANSPORT = 2


@dataclass(frozen=True)
class EventKey:
    """A 13-character priority key: time, event data and event kind.

    Package events are ``[6-digit time][6-digit package id][1]``;
    transport events are ``[6-digit time][3-digit origin][3-digit destination][2]``.
    """

    text: str

    @classmethod
    def package_event(cls, time: int, package_id: int) -> EventKey:
        return cls(f"{time:06d}{package_id:06d}{EventKind.PACKAGE.value}")

    @classmethod
    def transport_event(cls, time: int, origin: int, destination: int) -> EventKey:
        return cls(f"{time:06d}{origin:03d}{destination:03d}{EventKind.TRANSPORT.value}")

    @property
    def time(self) -> int:
        return int(self.text[0:6])

    @property
    def data(self) -> int:
        return int(self.text[6:12])

    @property
    def kind(self) -> EventKind:
        return EventKind(int(self.text[12:13]))

    @property
    def package_id(self) -> int:
        return int(self.text[6:12])

    @property
    def origin(self) -> int:
        return int(self.text[6:9])

    @property
    def destination(self) -> int:
        return int(self.text[9:12])

    def __lt__(self, other: EventKey) -> bool:
        if self.time != other.time:
            return self.time < other.time
        if self.data != other.data:
            return self.data < other.data
        raise DuplicateEventError(self, other)


class Scheduler:
    """Min-heap of pending events and the simulation loop that consumes them."""

    def __init__(self) -> None:
        self.clock_time = -1
        self._heap: list[EventKey] = []

    def __len__(self) -> int:
        return len(self._heap)

    def pending(self) -> tuple[EventKey, ...]:
        """Pending events in heap order."""
        return tuple(self._heap)

    def new_event(self, key: EventKey) -> bool:
        """Insert an event unless an identical one is already pending."""
        if key in self._heap:
            return False
        self._heap.append(key)
        self._sift_up(len(self._heap) - 1)
        return True

    def new_package_event(self, package: Package) -> bool:
        """Schedule a package's arrival at its origin."""
        return self.new_event(EventKey.package_event(package.arrival, package.id))

    def pop_event(self) -> EventKey:
        """Remove and return the earliest pending event."""
        if not self._heap:
            raise IndexError("No pending events.")
        first = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return first

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if not heap[index] < heap[parent]:
                break
            heap[index], heap[parent] = heap[parent], heap[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left, right, smallest = 2 * index + 1, 2 * index + 2, index
            if left < size and heap[left] < heap[smallest]:
                smallest = left
            if right < size and heap[right] < heap[smallest]:
                smallest = right
            if smallest == index:
                return
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest

    def run(self, packages: Sequence[Package], graph: Graph) -> Iterator[str]:
        """Process events until none remain, yielding one log line per action."""
        transport = graph.transport
        prev_transport = -1
        next_transport = -1

        while self._heap:
            key = self.pop_event()
            self.clock_time = key.time

            if key.kind is EventKind.PACKAGE:
                package = packages[key.package_id]
                package.state = State.WAREHOUSE_ARRIVAL
                if not package.advance_in_route():
                    location = package.current_location
                    graph.store_package(package, location)
                    package.state = State.SECTION_STORED
                    if next_transport == -1:
                        next_transport = self.clock_time + transport.interval
                    next_step = package.next_step()
                    self.new_event(EventKey.transport_event(next_transport, location, next_step))
                    line = (
                        f"{self.clock_time:07d} pacote {package.id:03d} armazenado em "
                        f"{location:03d} na secao {next_step:03d}"
                    )
                else:
                    package.state = State.DELIVERED
                    line = (
                        f"{self.clock_time:07d} pacote {package.id:03d} entregue em "
                        f"{package.destination_id:03d}"
                    )
                if prev_transport != next_transport:
                    prev_transport = next_transport
                yield line
                continue

            result = graph.remove_packages(key.origin, key.destination, self.clock_time, packages)
            removed_ids: list[int] = []
            if result is not None:
                self.clock_time = result.clock_time
                removed_ids = result.removed_ids
                yield from result.log

            if next_transport <= prev_transport:
                next_transport += transport.interval

            for package_id in removed_ids:
                package = packages[package_id]
                if package.state == State.SECTION_REMOVED:
                    self.new_event(
                        EventKey.package_event(package.p_time + transport.latency, package_id)
                    )
                elif package.state == State.SECTION_STORED:
                    self.new_event(
                        EventKey.transport_event(
                            next_transport, package.current_location, package.next_step()
                        )
                    )