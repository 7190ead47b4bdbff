"""
Ограничивающая сфера для набора точек.

Центр сферы – разумное направление `direction_to_point` при расчёте
точки отсечения по горизонту для кластера (тайла).
"""

from __future__ import annotations

import numpy as np
from typing import Tuple

from horizon3d.math.vec3 import Vec3, as_points_array


class BoundingSphere:
    """Сфера (center, radius)."""

    __slots__ = ("center", "radius")

    def __init__(self, center=None, radius: float = 0.0):
        self.center = Vec3() if center is None else Vec3.coerce(center)
        self.radius = float(radius)

    @staticmethod
    def from_points(points) -> "BoundingSphere":
        """
        Алгоритм Ритера + «наивная» сфера вокруг центра AABB;
        возвращается меньшая из двух.
        """
        arr = as_points_array(points)
        if arr.shape[0] == 0:
            return BoundingSphere()

        # Ритер: стартуем с самой длинной пары экстремумов по осям
        min_idx = arr.argmin(axis=0)
        max_idx = arr.argmax(axis=0)
        spans = [np.sum((arr[max_idx[k]] - arr[min_idx[k]]) ** 2) for k in range(3)]
        k = int(np.argmax(spans))
        a, b = arr[min_idx[k]], arr[max_idx[k]]

        center = (a + b) * 0.5
        radius = float(np.linalg.norm(b - a)) * 0.5
        for p in arr:
            d = float(np.linalg.norm(p - center))
            if d > radius:
                new_radius = (radius + d) * 0.5
                center = center + (p - center) * ((d - new_radius) / d)
                radius = new_radius

        naive_center = (arr.min(axis=0) + arr.max(axis=0)) * 0.5
        naive_radius = float(np.max(np.linalg.norm(arr - naive_center, axis=1)))

        if naive_radius < radius:
            return BoundingSphere(naive_center, naive_radius)
        return BoundingSphere(center, radius)

    def contains(self, point, eps: float = 1e-9) -> bool:
        p = Vec3.coerce(point)
        return (p - self.center).length() <= self.radius * (1.0 + eps) + eps

    def as_tuple(self) -> Tuple[np.ndarray, float]:
        """Кортеж (centre ndarray, radius)."""
        return self.center.as_np(), self.radius

    def __repr__(self):
        return f"BoundingSphere({self.center!r}, {self.radius:.3f})"
