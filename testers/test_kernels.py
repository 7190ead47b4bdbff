# -*- coding: utf-8 -*-
import numpy as np
import pytest

from horizon3d.culling import kernels


CAMERA = np.array([0.0, 0.0, 3.0])
HORIZON_SQ = 8.0


@pytest.mark.parametrize("fn", [kernels.scaled_points_visible,
                                kernels.scaled_points_visible.py_func])
def test_scaled_points_visible(fn):
    points = np.array([
        [0.0, 0.0, -3.0],   # за сферой
        [3.0, 0.0, 0.0],    # сбоку
        [0.0, 0.0, 3.0],    # совпадает с камерой
        [0.0, 0.0, 1.5],    # перед сферой
    ])
    assert fn(points, CAMERA, HORIZON_SQ).tolist() == [False, True, True, True]

def test_scaled_points_visible_empty():
    out = kernels.scaled_points_visible(np.zeros((0, 3)), CAMERA, HORIZON_SQ)
    assert out.shape == (0,)

def test_magnitude_empty():
    magnitude, status, index = kernels.horizon_culling_magnitude(
        np.zeros((0, 3)), np.array([0.0, 0.0, 1.0]))
    assert magnitude == 0.0
    assert status == kernels.STATUS_OK
    assert index == -1

def test_magnitude_along_direction():
    points = np.array([[0.0, 0.0, 2.0], [0.0, 0.0, 1.5]])
    magnitude, status, _ = kernels.horizon_culling_magnitude(points, np.array([0.0, 0.0, 1.0]))
    assert status == kernels.STATUS_OK
    assert magnitude == pytest.approx(2.0)

def test_magnitude_off_axis_exceeds_distance():
    p = np.array([[np.sin(0.2) * 1.1, 0.0, np.cos(0.2) * 1.1]])
    magnitude, status, _ = kernels.horizon_culling_magnitude(p, np.array([0.0, 0.0, 1.0]))
    beta = np.arccos(1.0 / 1.1)
    assert status == kernels.STATUS_OK
    assert magnitude == pytest.approx(1.0 / np.cos(0.2 + beta))

def test_magnitude_degenerate():
    u = np.array([0.0, 0.0, 1.0])
    _, status, index = kernels.horizon_culling_magnitude(
        np.array([[0.0, 0.0, 2.0], [0.0, 0.0, 0.5]]), u)
    assert status == kernels.STATUS_INSIDE_ELLIPSOID
    assert index == 1

    magnitude, status, index = kernels.horizon_culling_magnitude(np.array([[0.0, 0.0, -2.0]]), u)
    assert status == kernels.STATUS_UNBOUNDED
    assert index == 0
    assert np.isinf(magnitude)

def test_jit_matches_python():
    rng = np.random.default_rng(7)
    dirs = rng.normal(size=(50, 3))
    dirs /= np.linalg.norm(dirs, axis=1)[:, None]
    points = dirs * rng.uniform(1.0, 3.0, size=(50, 1))
    camera = np.array([0.5, -1.0, 2.5])
    horizon_sq = float(camera @ camera - 1.0)

    jit = kernels.scaled_points_visible(points, camera, horizon_sq)
    py = kernels.scaled_points_visible.py_func(points, camera, horizon_sq)
    assert jit.tolist() == py.tolist()

@pytest.mark.parametrize("fn", [kernels.scaled_points_visible,
                                kernels.scaled_points_visible.py_func])
def test_origin_is_visible(fn):
    for camera in (CAMERA, np.array([4.0, -1.0, 0.5]), np.array([0.0, -1.5, 0.0])):
        horizon_sq = float(camera @ camera - 1.0)
        assert fn(np.zeros((1, 3)), camera, horizon_sq).tolist() == [True]

@pytest.mark.parametrize("bad", [np.nan, np.inf])
def test_magnitude_non_finite(bad):
    points = np.array([[0.0, 0.0, 1.5], [bad, 0.0, 2.0], [0.0, 0.0, 3.0]])
    magnitude, status, index = kernels.horizon_culling_magnitude(points, np.array([0.0, 0.0, 1.0]))
    assert status == kernels.STATUS_NON_FINITE
    assert index == 1
    assert np.isnan(magnitude)
