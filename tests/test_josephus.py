import pytest

from contestkit.josephus import joseph_min_m, power_crisis_step, survivor_offset


def test_single_person_survives():
    assert survivor_offset(1, 5) == 0


@pytest.mark.parametrize("count", [1, 2, 5, 12, 40])
def test_step_one_leaves_the_last(count):
    assert survivor_offset(count, 1) == count - 1


@pytest.mark.parametrize("count, step", [(7, 3), (10, 4), (25, 9), (3, 100)])
def test_survivor_is_in_range(count, step):
    assert 0 <= survivor_offset(count, step) < count


@pytest.mark.parametrize("count, step", [(0, 1), (5, 0)])
def test_survivor_rejects_bad_arguments(count, step):
    with pytest.raises(ValueError):
        survivor_offset(count, step)


def test_power_crisis_sample():
    assert power_crisis_step(17) == 7


def test_power_crisis_without_region_thirteen():
    with pytest.raises(ValueError):
        power_crisis_step(12)


def test_joseph_three():
    assert joseph_min_m(3) == 5


def test_joseph_four():
    assert joseph_min_m(4) == 30


@pytest.mark.parametrize("k", range(1, 7))
def test_joseph_m_exceeds_k(k):
    assert joseph_min_m(k) > k


def test_joseph_rejects_zero():
    with pytest.raises(ValueError):
        joseph_min_m(0)