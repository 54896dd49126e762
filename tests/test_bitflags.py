from enum import Enum

import pytest

from manifoldkit.bitflags import BitFlags


class Permission(Enum):
    READ = 0
    WRITE = 1


class Other(Enum):
    A = 0


@pytest.fixture
def bp0():
    return BitFlags(Permission.WRITE)


@pytest.fixture
def bp1():
    return BitFlags(Permission.READ, Permission.WRITE)


def test_equality_operations(bp0, bp1):
    assert bp0 != bp1
    assert not (bp0 == bp1)


def test_equal_sets_compare_equal():
    assert BitFlags(Permission.READ, Permission.WRITE) == BitFlags(
        Permission.WRITE, Permission.READ
    )


def test_method_operations(bp0, bp1):
    assert bp0.raw() != bp1.raw()

    assert not bp0[Permission.READ]
    assert bp1[Permission.READ]

    bp0.set(Permission.READ, True)
    assert bp0.contains(Permission.READ)

    bp1.clear()
    assert bp1.empty()
    assert not bp1.contains(Permission.READ)


def test_raw_values(bp0, bp1):
    assert bp0.raw() == 2
    assert bp1.raw() == 3
    assert bp0.raw_flag(Permission.READ) == 1


def test_default_is_empty():
    flags = BitFlags()
    assert flags.empty()
    assert flags.raw() == 0


def test_set_false_clears_flag(bp1):
    bp1.set(Permission.WRITE, False)
    assert bp1.raw() == 1
    assert Permission.WRITE not in bp1
    assert Permission.READ in bp1


def test_int_flags():
    flags = BitFlags(0, 3)
    assert flags.raw() == 0b1001
    assert flags[3]


def test_mixed_types_rejected():
    with pytest.raises(TypeError):
        BitFlags(Permission.READ, Other.A)


def test_out_of_range_flag():
    with pytest.raises(ValueError):
        BitFlags(64)