"""Delivery drones, their cooldown state and battery ordering."""

from __future__ import annotations


class Drone:
    """A drone starting at the hub ``(0, 0)``.

    Drones order by remaining battery life. Between equal batteries the one
    with the lower id ranks higher. Equality and hashing use the id alone.
    """

    def __init__(self, drone_id: int, battery_life: float, base_speed: float) -> None:
        self.id = drone_id
        self.battery_life = battery_life
        self.base_speed = base_speed
        self.x = 0
        self.y = 0
        self.assigned_package_id: int | None = None
        self.cooldown = False
        self.cooldown_count = 0

    def tick_cooldown(self, period: int) -> None:
        """Advance the cooldown counter; once it has reached ``period``, end the cooldown."""
        if self.cooldown_count < period:
            self.cooldown_count += 1
            return
        self.cooldown = False
        self.cooldown_count = 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Drone):
            return NotImplemented
        if self.battery_life != other.battery_life:
            return self.battery_life < other.battery_life
        return self.id > other.id

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Drone):
            return NotImplemented
        if self.battery_life != other.battery_life:
            return self.battery_life > other.battery_life
        return self.id < other.id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Drone):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return (
            f"Drone(id={self.id}, battery_life={self.battery_life}, "
            f"base_speed={self.base_speed}, x={self.x}, y={self.y})"
        )