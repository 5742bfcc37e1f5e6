import numpy as np
from lodestone.polygon import angle_utils as au


def test_normalize_angle_examples():
    assert au.normalize_angle(30) == 30.0
    assert au.normalize_angle(-30) == 330.0
    assert au.normalize_angle(710) == 350.0
    assert au.normalize_angle(-180) == 180.0


def test_normalize_angle_full_turns():
    assert au.normalize_angle(360.0) == 0.0
    assert au.normalize_angle(360.0 * 12 + 179.0) == 179.0


def test_normalize_angle_broadcasting():
    out = au.normalize_angle(np.array([-90.0, 0.0, 450.0]))
    assert out.shape == (3,)
    assert np.allclose(out, [270.0, 0.0, 90.0])


def test_bearing_cardinal_directions():
    # east along the equator
    assert abs(au.bearing((0.0, 0.0), (1.0, 0.0)) - 90.0) < 1e-9
    # west along the equator, normalized
    assert abs(au.normalize_angle(au.bearing((1.0, 0.0), (0.0, 0.0))) - 270.0) < 1e-9
    # due south along a meridian
    assert abs(au.normalize_angle(au.bearing((1.0, 1.0), (1.0, 0.0))) - 180.0) < 1e-9


def test_bearing_not_planar():
    # initial bearing along a parallel leans poleward
    b = au.bearing((0.0, 1.0), (1.0, 1.0))
    assert 89.98 < b < 90.0


def test_bearings_vectorised_matches_scalar():
    lons1 = np.array([0.0, 3.0, 2.0])
    lats1 = np.array([0.0, 3.0, 0.0])
    lons2 = np.array([3.0, 2.0, 5.0])
    lats2 = np.array([3.0, 0.0, -1.0])
    vec = au.bearings(lons1, lats1, lons2, lats2)
    for i in range(3):
        assert abs(vec[i] - au.bearing((lons1[i], lats1[i]), (lons2[i], lats2[i]))) < 1e-9


def test_bearing_is_great_circle():
    # atan(cos 1 deg) on a sphere; an ellipsoid would give ~45.19
    b = au.bearing((0.0, 0.0), (1.0, 1.0))
    assert abs(b - 44.99564) < 1e-3
