"""Drone package delivery simulation."""

from __future__ import annotations

import argparse
import math
import struct
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from dronefleet.drone import Drone
from dronefleet.heap import MaxHeap
from dronefleet.parcel import Package

MAX_PACKAGE_WEIGHT = 10.0
COOLDOWN_PERIOD = 5
MAX_BATTERY = 300.0


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


WEIGHT_FACTOR = _f32(0.2)
BATTERY_FACTOR = _f32(0.3)


def _floor_tenth(value: float) -> float:
    """Truncate ``value`` to one decimal place."""
    if not math.isfinite(value):
        return value
    return _f32(math.floor(_f32(value * 10.0)) / 10.0)


def _num(value: float) -> str:
    return format(value, "g")


def distance(drone: Drone, package: Package) -> float:
    """Straight-line distance from the drone to the package, truncated to 0.1."""
    dx = _f32(package.x - drone.x)
    dy = _f32(package.y - drone.y)
    squared = _f32(_f32(dx * dx) + _f32(dy * dy))
    return _floor_tenth(_f32(math.sqrt(squared)))


def effective_speed(drone: Drone, package: Package) -> float:
    """Drone speed slowed by package weight and drained battery, truncated to 0.1."""
    weight_ratio = _f32(package.weight / MAX_PACKAGE_WEIGHT)
    weight_multiplier = _f32(1.0 - _f32(WEIGHT_FACTOR * weight_ratio))
    drained = _f32(1.0 - _f32(drone.battery_life / MAX_BATTERY))
    battery_multiplier = _f32(1.0 - _f32(BATTERY_FACTOR * drained))
    speed = _f32(_f32(drone.base_speed * weight_multiplier) * battery_multiplier)
    return _floor_tenth(speed)


def completion_time(drone: Drone, package: Package) -> float:
    """Time for the drone to reach the package destination, truncated to 0.1."""
    speed = effective_speed(drone, package)
    dist = distance(drone, package)
    if speed == 0:
        return math.copysign(math.inf, speed) if dist else math.nan
    return _floor_tenth(_f32(dist / speed))


def _read_records(path: str | Path, width: int, kind: str) -> list[list[str]]:
    tokens = iter(Path(path).read_text().split())
    first = next(tokens, None)
    if first is None:
        raise ValueError(f"{path}: missing {kind} count")
    count = int(first)
    records = []
    for _ in range(count):
        record = list(islice(tokens, width))
        if len(record) < width:
            raise ValueError(f"{path}: expected {count} {kind} records")
        records.append(record)
    return records


def read_drones(path: str | Path) -> list[Drone]:
    """Read a drone count followed by ``id battery_life speed`` records."""
    return [
        Drone(int(drone_id), _f32(float(battery)), _f32(float(speed)))
        for drone_id, battery, speed in _read_records(path, 3, "drone")
    ]


def read_packages(path: str | Path) -> list[Package]:
    """Read a package count followed by ``id x y weight priority`` records."""
    return [
        Package(int(package_id), int(x), int(y), _f32(float(weight)), int(priority))
        for package_id, x, y, weight, priority in _read_records(path, 5, "package")
    ]


@dataclass(frozen=True)
class DeliveryEvent:
    """A drone taking a package, or going to cool down instead."""

    tick: int
    drone_id: int
    package_id: int
    delivery_time: float | None = None
    battery_life: float | None = None

    @property
    def cooled_down(self) -> bool:
        return self.delivery_time is None

    def __str__(self) -> str:
        head = f"Drone {self.drone_id} Package {self.package_id} at tick {self.tick}"
        if self.cooled_down:
            return f"{head} cool down"
        return (
            f"{head} (delivery time: {_num(self.delivery_time)}, "
            f"battery life: {_num(self.battery_life)})"
        )


class PackageDelivery:
    """Dispatches drones to packages, highest priority first."""

    def __init__(self, drones: Iterable[Drone], packages: Iterable[Package]) -> None:
        self.drones: MaxHeap[Drone] = MaxHeap()
        self.packages: MaxHeap[Package] = MaxHeap()
        self.cooldown_drones: MaxHeap[Drone] = MaxHeap()
        self.cooldown_packages: MaxHeap[Package] = MaxHeap()
        self.tick = 0
        for drone in drones:
            self.drones.push(drone)
        for package in packages:
            self.packages.push(package)

    @classmethod
    def from_files(cls, drone_file: str | Path, package_file: str | Path) -> PackageDelivery:
        return cls(read_drones(drone_file), read_packages(package_file))

    def run(self) -> Iterator[DeliveryEvent]:
        """Run the simulation, yielding one event per assignment."""
        self.tick = 0
        if not self.drones:
            return
        while self.packages or self.cooldown_packages:
            if (
                self.cooldown_drones
                and self.cooldown_drones.peek().cooldown_count >= COOLDOWN_PERIOD
            ):
                event = self._return_from_cooldown()
            elif self.drones:
                event = self._execute_or_cool_down(self.drones.pop())
            elif not self.cooldown_drones:
                break
            else:
                event = None
            if event is not None:
                yield event
            self.tick += 1
            for drone in self.cooldown_drones:
                drone.tick_cooldown(COOLDOWN_PERIOD)

    def _return_from_cooldown(self) -> DeliveryEvent | None:
        drone = self.cooldown_drones.pop()
        drone.tick_cooldown(COOLDOWN_PERIOD)
        drone.battery_life = MAX_BATTERY
        package = self.cooldown_packages.find_by_id(drone.assigned_package_id)
        self.cooldown_packages.remove(package)
        self.packages.push(package)
        return self._execute_or_cool_down(drone)

    def _choose_package(self, drone: Drone) -> tuple[Package, float]:
        best = self.packages.peek()
        best_time = completion_time(drone, best)
        for candidate in islice(self.packages, 1, None):
            if candidate.priority != best.priority:
                break
            candidate_time = completion_time(drone, candidate)
            if candidate_time < best_time:
                best, best_time = candidate, candidate_time
        drone.assigned_package_id = best.id
        return best, best_time

    def _execute_or_cool_down(self, drone: Drone) -> DeliveryEvent | None:
        if not self.packages:
            return None
        package, time = self._choose_package(drone)
        self.packages.remove(package)
        if drone.battery_life >= time:
            drone.battery_life = _f32(drone.battery_life - time)
            drone.x, drone.y = package.x, package.y
            self.drones.push(drone)
            return DeliveryEvent(self.tick, drone.id, package.id, time, drone.battery_life)
        drone.cooldown = True
        drone.x = drone.y = 0
        self.cooldown_drones.push(drone)
        self.cooldown_packages.push(package)
        return DeliveryEvent(self.tick, drone.id, package.id)

    def format_state(self) -> str:
        """Describe the contents of all four heaps."""
        lines = ["Drones:"]
        lines.extend(
            f"id: {d.id} battery: {_num(d.battery_life)} speed: {_num(d.base_speed)}"
            f" x: {d.x} y: {d.y}"
            for d in self.drones
        )
        lines.append("Packages:")
        lines.extend(_describe_package(p) for p in self.packages)
        lines.append("Cooldown Drones:")
        lines.extend(
            f"id: {d.id} battery: {_num(d.battery_life)} count: {d.cooldown_count}"
            f" x: {d.x} y: {d.y}"
            for d in self.cooldown_drones
        )
        lines.append("Cooldown Packages:")
        lines.extend(_describe_package(p) for p in self.cooldown_packages)
        return "\n".join(lines) + "\n"


def _describe_package(package: Package) -> str:
    return (
        f"id: {package.id} priority: {package.priority} weight: {_num(package.weight)}"
        f" x: {package.x} y: {package.y}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dronefleet", description="Simulate drone package deliveries."
    )
    parser.add_argument("drone_file", help="file with the drone count and records")
    parser.add_argument("package_file", help="file with the package count and records")
    args = parser.parse_args(argv)
    try:
        delivery = PackageDelivery.from_files(args.drone_file, args.package_file)
    except OSError as exc:
        print(f"Error: Could not open {exc.filename}")
        return 1
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    for event in delivery.run():
        print(event)
    return 0