# -*- coding: utf-8 -*-
"""
horizon3d/culling/kernels.py

Numba‑ядра для пакетных запросов горизонта. Работают только с
ndarray float64 в масштабированном пространстве, никаких Vec3 внутри.

API:
    scaled_points_visible(points, camera, horizon_sq) -> ndarray[bool]
    horizon_culling_magnitude(points, direction) -> (magnitude, status, index)

* points     – (N, 3), C‑contiguous.
* camera     – (3,) позиция камеры в масштабированном пространстве.
* direction  – (3,) нормализованное направление на точку отсечения.

Коды статуса совпадают со скалярной версией в occluder.py.
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit

STATUS_OK = 0
STATUS_INSIDE_ELLIPSOID = 1   # |p| < 1 – sqrt от отрицательного числа
STATUS_UNBOUNDED = 2          # cos(alpha + beta) <= 0 – точка за «краем»
STATUS_NON_FINITE = 3         # NaN / inf в координатах


@njit
def scaled_points_visible(points, camera, horizon_sq):
    n = points.shape[0]
    out = np.empty(n, dtype=np.bool_)
    cx = camera[0]
    cy = camera[1]
    cz = camera[2]
    for i in range(n):
        vx = points[i, 0] - cx
        vy = points[i, 1] - cy
        vz = points[i, 2] - cz
        vt_mag_sq = vx * vx + vy * vy + vz * vz
        # начало координат (точка отсечения пустого кластера) видно всегда
        p_mag_sq = (points[i, 0] * points[i, 0] + points[i, 1] * points[i, 1] +
                    points[i, 2] * points[i, 2])
        if vt_mag_sq == 0.0 or p_mag_sq == 0.0:
            out[i] = True
            continue
        vt_dot_vc = -(vx * cx + vy * cy + vz * cz)
        occluded = (vt_dot_vc > horizon_sq and
                    vt_dot_vc * vt_dot_vc / vt_mag_sq > horizon_sq)
        out[i] = not occluded
    return out


@njit
def horizon_culling_magnitude(points, direction):
    ux = direction[0]
    uy = direction[1]
    uz = direction[2]
    result = 0.0
    for i in range(points.shape[0]):
        px = points[i, 0]
        py = points[i, 1]
        pz = points[i, 2]
        mag_sq = px * px + py * py + pz * pz
        if not math.isfinite(mag_sq):
            return np.nan, STATUS_NON_FINITE, i
        if mag_sq < 1.0:
            return np.nan, STATUS_INSIDE_ELLIPSOID, i
        mag = math.sqrt(mag_sq)
        dx = px / mag
        dy = py / mag
        dz = pz / mag

        cos_alpha = dx * ux + dy * uy + dz * uz
        cx = dy * uz - dz * uy
        cy = dz * ux - dx * uz
        cz = dx * uy - dy * ux
        sin_alpha = math.sqrt(cx * cx + cy * cy + cz * cz)
        cos_beta = 1.0 / mag
        sin_beta = math.sqrt(mag_sq - 1.0) * cos_beta

        denominator = cos_alpha * cos_beta - sin_alpha * sin_beta
        if not denominator > 0.0:
            return np.inf, STATUS_UNBOUNDED, i
        candidate = 1.0 / denominator
        if candidate > result:
            result = candidate
    return result, STATUS_OK, -1
