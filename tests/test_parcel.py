import pytest

from dronefleet.parcel import Package


def test_defaults_place_package_at_hub():
    p = Package(7)
    assert (p.x, p.y, p.weight, p.priority) == (0, 0, 0.0, 0)


def test_higher_priority_is_greater():
    low = Package(1, priority=1)
    high = Package(2, priority=5)
    assert high > low
    assert low < high
    assert not low > high


def test_equal_priority_lower_id_ranks_higher():
    a = Package(1, priority=3)
    b = Package(2, priority=3)
    assert a > b
    assert b < a
    assert not a < b


def test_equality_uses_id_only():
    a = Package(4, 1, 2, 3.0, 9)
    b = Package(4, 8, 8, 1.0, 0)
    assert a == b
    assert a != Package(5, 1, 2, 3.0, 9)


def test_hash_matches_equality():
    packages = {Package(1, priority=2), Package(1, priority=9), Package(2)}
    assert len(packages) == 2


def test_comparison_with_other_types():
    assert (Package(1) == 1) is False
    with pytest.raises(TypeError):
        Package(1) < 3


def test_package_is_immutable():
    p = Package(1, priority=2)
    with pytest.raises(AttributeError):
        p.priority = 4
    assert p.priority == 2