import pytest

from parcelsim.network import Graph, Transport
from parcelsim.package import Package, State
from parcelsim.scheduler import DuplicateEventError, EventKey, EventKind, Scheduler


def _line_graph(size, capacity=1, latency=10, interval=5, cost=1):
    graph = Graph(size, cost, Transport(capacity, latency, interval))
    for i in range(size):
        graph.add_warehouse(i, [n for n in (i - 1, i + 1) if 0 <= n < size])
    return graph


def _packages(graph, specs):
    packages = []
    for i, (arrival, origin, destination) in enumerate(specs):
        package = Package(i, arrival, origin, destination)
        package.calc_route(graph)
        packages.append(package)
    return packages


def test_package_key_format():
    key = EventKey.package_event(5, 3)
    assert key.text == "000005" + "000003" + "1"
    assert key.kind is EventKind.PACKAGE
    assert key.time == 5
    assert key.package_id == 3


def test_transport_key_format():
    key = EventKey.transport_event(5, 1, 2)
    assert key.text == "000005" + "001" + "002" + "2"
    assert key.kind is EventKind.TRANSPORT
    assert (key.origin, key.destination) == (1, 2)


def test_pop_order_by_time_then_data():
    scheduler = Scheduler()
    keys = [
        EventKey.package_event(9, 0),
        EventKey.package_event(3, 4),
        EventKey.transport_event(3, 0, 1),
        EventKey.package_event(1, 7),
    ]
    for key in keys:
        scheduler.new_event(key)
    popped = [scheduler.pop_event() for _ in range(len(keys))]
    assert popped == [keys[3], keys[2], keys[1], keys[0]]
    assert len(scheduler) == 0


def test_identical_key_is_ignored():
    scheduler = Scheduler()
    assert scheduler.new_event(EventKey.package_event(2, 1)) is True
    assert scheduler.new_event(EventKey.package_event(2, 1)) is False
    assert scheduler.pending() == (EventKey.package_event(2, 1),)


def test_clashing_keys_raise():
    scheduler = Scheduler()
    scheduler.new_event(EventKey.package_event(5, 1))
    with pytest.raises(DuplicateEventError):
        scheduler.new_event(EventKey.transport_event(5, 0, 1))


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Scheduler().pop_event()


def test_new_package_event_uses_arrival_and_id():
    scheduler = Scheduler()
    scheduler.new_package_event(Package(4, 12, 0, 1))
    assert scheduler.pop_event() == EventKey.package_event(12, 4)


def test_run_delivers_every_package():
    graph = _line_graph(4)
    packages = _packages(graph, [(0, 0, 3), (2, 3, 1), (4, 1, 2)])
    scheduler = Scheduler()
    for package in packages:
        scheduler.new_package_event(package)
    lines = list(scheduler.run(packages, graph))
    delivered = [line for line in lines if "entregue" in line]
    assert len(delivered) == len(packages)
    for package in packages:
        assert package.state == State.DELIVERED
        assert package.current_location == package.destination_id
    assert len(scheduler) == 0


def test_run_single_hop_log():
    graph = _line_graph(2)
    packages = _packages(graph, [(0, 0, 1)])
    scheduler = Scheduler()
    scheduler.new_package_event(packages[0])
    lines = list(scheduler.run(packages, graph))
    assert lines[0] == "0000000 pacote 000 armazenado em 000 na secao 001"
    assert lines[-1].endswith("pacote 000 entregue em 001")


def test_capacity_forces_restore():
    graph = _line_graph(2, capacity=1)
    packages = _packages(graph, [(0, 0, 1), (1, 0, 1)])
    scheduler = Scheduler()
    for package in packages:
        scheduler.new_package_event(package)
    lines = list(scheduler.run(packages, graph))
    assert any("rearmazenado" in line for line in lines)
    assert all(p.state == State.DELIVERED for p in packages)