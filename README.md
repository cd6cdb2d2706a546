# parcelsim

A discrete event simulation of packages travelling through a network of
warehouses. Each package is routed along the shortest path (by number of
hops) from its origin to its destination. At every warehouse it waits in
the section for its next hop, a stack where the last package stored is the
first removed, until a transport departs. Every event is printed as it
happens.

## Installation

```
pip install .
```

## Running a simulation

```
parcelsim scenario.txt
```

The output is one line per event, prefixed with the seven-digit simulation
clock. For the example scenario below it is:

```
0000010 pacote 000 armazenado em 000 na secao 001
0000111 pacote 000 removido de 000 na secao 001
0000111 pacote 000 em transito de 000 para 001
0000131 pacote 000 entregue em 001
```

The command exits with status 1 and a message on standard error when no
file is given, when the file does not exist, when the scenario is
malformed, or when a package has no route to its destination.

## Input format

The scenario file is plain text, one value per line:

1. transport capacity (packages per departure)
2. transport latency (travel time between two warehouses)
3. transport interval (time between departures)
4. cost of removing one package from a section
5. number of warehouses `N`
6. `N` lines of the adjacency matrix: `1` marks a connection to that warehouse
7. number of packages
8. one line per package: `<time> pac <id> org <origin> dst <destination>`

Packages are numbered in the order they are listed; blank lines after the
package count are ignored.

Example:

```
2
20
100
1
2
0 1
1 0
1
10 pac 0 org 0 dst 1
```

## Simulation rules

- When a package arrives at a warehouse that is not its destination it is
  stored in the section for its next hop, and a transport for that link is
  scheduled.
- When a transport departs, every package is removed from the section, each
  removal advancing the clock by the removal cost. Up to the transport
  capacity go into transit and arrive after the latency; the rest are
  stored back and wait for the next departure.

## Using it from Python

```python
from parcelsim.reader import read_file
from parcelsim.cli import simulate

graph, packages = read_file("scenario.txt")
for line in simulate(graph, packages):
    print(line)
```

- `parcelsim.reader.read_scenario` takes an iterable of lines instead of a
  path; `parcelsim.reader.format_packages` lists the packages read.
- `parcelsim.scheduler.Scheduler` holds the event queue (`new_event`,
  `new_package_event`, `pop_event`, `pending`) and `run` yields the log
  lines. Events are `parcelsim.scheduler.EventKey` values; two pending
  events with the same time and data raise `DuplicateEventError`.
- `parcelsim.network.Graph`, `Warehouse` and `Transport` model the network;
  `parcelsim.package.Package` models a parcel and its route, and
  `Package.calc_route` raises `parcelsim.package.RouteNotFoundError` when
  no route joins its origin and destination.

## Tests

```
pip install .[test]
pytest
```