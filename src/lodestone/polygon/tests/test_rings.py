import numpy as np
import pytest

from lodestone.polygon.errors import InvalidPositionError, RingNotClosedError, RingTooShortError
from lodestone.polygon.rings import as_ring, compare_rings, validate_ring


RING = ((0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (0.0, 0.0))


def test_as_ring_coerces_to_float_tuples():
    r = as_ring([[0, 0], [0, 1], [1, 1], [0, 0]])
    assert r == RING
    assert all(isinstance(v, float) for pos in r for v in pos)


def test_as_ring_accepts_numpy():
    r = as_ring(np.array(RING))
    assert r == RING


@pytest.mark.parametrize("pos", ["ab", [1.0], [1.0, 2.0, 3.0], [True, 1.0], None])
def test_as_ring_rejects_bad_positions(pos):
    with pytest.raises(InvalidPositionError) as ei:
        as_ring([pos], ring_index=3)
    assert ei.value.ring_index == 3


def test_validate_ring_ok():
    validate_ring(RING)


def test_validate_ring_short():
    with pytest.raises(RingTooShortError):
        validate_ring(RING[1:])


def test_validate_ring_open():
    with pytest.raises(RingNotClosedError):
        validate_ring(RING[:-1] + ((5.0, 5.0),))


def test_compare_rings_tolerance():
    near = tuple((x + 9e-8, y - 9e-8) for x, y in RING)
    far = tuple((x, y + 1e-6) for x, y in RING)
    assert compare_rings(RING, near)
    assert not compare_rings(RING, far)


def test_compare_rings_single_axis_mismatch():
    other = list(RING)
    other[2] = (1.0 + 1e-6, 1.0)
    assert not compare_rings(RING, other)


def test_compare_rings_length_mismatch():
    longer = RING[:-1] + ((1.0, 0.0), (0.0, 0.0))
    assert not compare_rings(RING, longer)


@pytest.mark.parametrize("pos", [
    [0.0, float("inf")],
    [float("-inf"), 0.0],
    [float("nan"), 1.0],
    [0.0, 95.0],
    [1.0, -90.5],
])
def test_as_ring_rejects_non_finite_and_out_of_range(pos):
    with pytest.raises(InvalidPositionError, match="finite"):
        as_ring([[0.0, 0.0], pos], ring_index=2)


def test_as_ring_accepts_poles_and_wide_longitudes():
    r = as_ring([[0.0, 90.0], [190.0, -90.0]])
    assert r == ((0.0, 90.0), (190.0, -90.0))
