# -*- coding: utf-8 -*-
import numpy as np
import pytest
from horizon3d.core import Ellipsoid
from horizon3d.math import Vec3

def test_transform_to_scaled_space():
    e = Ellipsoid(2.0, 2.0, 3.0)
    scaled = e.transform_position_to_scaled_space(Vec3(2.0, 4.0, 6.0))
    assert np.allclose(scaled.as_np(), [1.0, 2.0, 2.0])

def test_transform_accepts_tuples():
    e = Ellipsoid(2.0, 4.0, 8.0)
    scaled = e.transform_position_to_scaled_space((2.0, 2.0, 2.0))
    assert np.allclose(scaled.as_np(), [1.0, 0.5, 0.25])

def test_scaled_space_back_to_position():
    e = Ellipsoid(1.0, 1.1, 0.9)
    p = e.transform_scaled_space_to_position(Vec3(1.0, 1.0, 1.0))
    assert np.allclose(p.as_np(), [1.0, 1.1, 0.9])

def test_surface_points_land_on_unit_sphere():
    e = Ellipsoid.WGS84
    for axis in range(3):
        point = np.zeros(3)
        point[axis] = e.radii.as_np()[axis]
        assert np.isclose(e.transform_position_to_scaled_space(point).length(), 1.0)

def test_radii_and_inverse():
    e = Ellipsoid(1.0, 2.0, 4.0)
    assert e.radii == Vec3(1.0, 2.0, 4.0)
    assert e.one_over_radii == Vec3(1.0, 0.5, 0.25)
    assert Ellipsoid.from_radii((1.0, 2.0, 4.0)) == e

def test_radii_are_copies():
    e = Ellipsoid(1.0, 2.0, 4.0)
    r = e.radii
    r.x = 100.0
    assert e.radii.x == 1.0

@pytest.mark.parametrize("radii", [(0.0, 1.0, 1.0), (1.0, -1.0, 1.0), (1.0, 1.0, 0.0)])
def test_invalid_radii(radii):
    with pytest.raises(ValueError):
        Ellipsoid(*radii)

def test_constants():
    assert Ellipsoid.UNIT_SPHERE.radii == Vec3(1.0, 1.0, 1.0)
    assert Ellipsoid.WGS84.radii.x == 6378137.0
    assert Ellipsoid.WGS84.radii.z == pytest.approx(6356752.3142451793)
