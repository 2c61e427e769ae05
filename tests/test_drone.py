import pytest

from dronefleet.drone import Drone


def test_new_drone_starts_at_hub_idle():
    d = Drone(3, 120.0, 15.0)
    assert (d.id, d.battery_life, d.base_speed) == (3, 120.0, 15.0)
    assert (d.x, d.y) == (0, 0)
    assert d.cooldown is False
    assert d.cooldown_count == 0
    assert d.assigned_package_id is None


def test_tick_cooldown_counts_up_to_period():
    d = Drone(1, 10.0, 1.0)
    d.cooldown = True
    d.tick_cooldown(2)
    assert d.cooldown_count == 1
    d.tick_cooldown(2)
    assert d.cooldown_count == 2
    assert d.cooldown is True


def test_tick_cooldown_resets_after_period():
    d = Drone(1, 10.0, 1.0)
    d.cooldown = True
    for _ in range(3):
        d.tick_cooldown(2)
    assert d.cooldown is False
    assert d.cooldown_count == 0


def test_more_battery_is_greater():
    weak = Drone(1, 50.0, 10.0)
    strong = Drone(2, 200.0, 10.0)
    assert strong > weak
    assert weak < strong
    assert not weak > strong


def test_equal_battery_lower_id_ranks_higher():
    a = Drone(1, 100.0, 10.0)
    b = Drone(2, 100.0, 20.0)
    assert a > b
    assert b < a


def test_equality_and_hash_use_id():
    a = Drone(5, 10.0, 1.0)
    b = Drone(5, 99.0, 7.0)
    assert a == b
    assert len({a, b, Drone(6, 10.0, 1.0)}) == 2


def test_comparison_with_other_types():
    assert (Drone(1, 1.0, 1.0) == "x") is False
    with pytest.raises(TypeError):
        Drone(1, 1.0, 1.0) > 0