# dronefleet

A small, tick-based simulation of a drone fleet delivering packages from a
hub at `(0, 0)`.

Each tick the drone with the most battery left (lowest id breaks ties) takes
the most urgent package. If several packages share the top priority, it takes
the one it can finish fastest. When the drone's battery covers the trip, the
delivery is made, the trip time is taken off the battery and the drone stays
at the destination. When it does not, the drone returns to the hub and cools
down, and the package is held back with it. After five ticks of cooldown the
drone is recharged to full battery (300), the held package is put back in the
queue, and the drone takes a package again.

Travel time is distance divided by effective speed. Effective speed is the base
speed, scaled down by the package weight (out of a maximum of 10) and by how
drained the battery is. Distance, speed and time are each truncated to one
decimal.

## Installing

```
pip install .
```

## Input files

Both files are read as whitespace-separated numbers.

Drone file: the number of drones, then for each drone its id, battery life and
base speed:

```
2
1 100 10
2 80 12
```

Package file: the number of packages, then for each package its id,
destination x and y, weight and priority (higher is more urgent):

```
3
1 30 40 2 5
2 10 10 1 5
3 60 80 8 1
```

## Running

```
dronefleet drones.txt packages.txt
```

One line is printed per assignment, in one of two forms:

```
Drone <id> Package <id> at tick <tick> (delivery time: <time>, battery life: <battery left>)
Drone <id> Package <id> at tick <tick> cool down
```

If a file cannot be opened, or it holds fewer records than its count says,
an `Error: ...` line is printed and the command exits with status 1.

## Using it from Python

```python
from dronefleet.delivery import PackageDelivery, completion_time
from dronefleet.drone import Drone
from dronefleet.parcel import Package

sim = PackageDelivery.from_files("drones.txt", "packages.txt")
for event in sim.run():
    print(event.tick, event.drone_id, event.package_id, event.cooled_down)
print(sim.format_state())

drone = Drone(1, 300.0, 10.0)
print(completion_time(drone, Package(1, 3, 4, 0.0, 1)))
```

- `dronefleet.delivery`: `PackageDelivery` (built from lists of drones and
  packages, or with `from_files`), whose `run()` is a generator of
  `DeliveryEvent`s and whose `format_state()` lists the contents of its four
  queues; `read_drones`, `read_packages`, `distance`, `effective_speed`,
  `completion_time` and the command's `main`.
- `dronefleet.drone`: `Drone`, ordered by battery life.
- `dronefleet.parcel`: `Package`, ordered by priority.
- `dronefleet.heap`: `MaxHeap`, the fixed-capacity max-heap the simulation
  uses for its queues. It works with any items that support `>` and `<`.
  `push` returns `False` on a full heap, `pop` and `peek` raise `IndexError`
  on an empty one, `remove` raises `ValueError` for a missing item, and
  `find_by_id` looks items up by their `id`, raising `KeyError` if none match.

## Limits

Each queue holds at most 50 items; drones or packages beyond that are dropped
without notice. The simulation keeps no state between runs and produces only
the printed event lines: there is no map, plot or saved report.