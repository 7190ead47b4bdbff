# -*- coding: utf-8 -*-
"""
Трёхмерный вектор на базе NumPy (float64 – планетарные координаты
в float32 теряют точность на метрах).
"""
import numpy as np
from typing import Tuple

class Vec3:
    __slots__ = ("_v",)

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._v = np.array([x, y, z], dtype=np.float64)

    @staticmethod
    def coerce(value) -> "Vec3":
        """Vec3 / кортеж / ndarray длины 3 → новый Vec3."""
        if isinstance(value, Vec3):
            return Vec3(*value._v)
        arr = np.asarray(value, dtype=np.float64).reshape(-1)
        if arr.shape[0] != 3:
            raise ValueError(f"Expected 3 components, got {arr.shape[0]}")
        return Vec3(*arr)

    # -------------------------------------------------
    # свойства с сеттерами
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float):
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float):
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float):
        self._v[2] = float(value)

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other):
        return Vec3(*(self._v + other._v))

    def __sub__(self, other):
        return Vec3(*(self._v - other._v))

    def __mul__(self, scalar):
        return Vec3(*(self._v * scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        return Vec3(*(self._v / scalar))

    def __neg__(self):
        return Vec3(*(-self._v))

    def __iter__(self):
        return iter(self.to_tuple())

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    __hash__ = None

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def dot(self, other):
        return float(np.dot(self._v, other._v))

    def cross(self, other):
        return Vec3(*np.cross(self._v, other._v))

    def length(self):
        return float(np.linalg.norm(self._v))

    def length_squared(self):
        return self.dot(self)

    def normalized(self):
        n = self.length()
        if n == 0.0:
            return Vec3()
        return Vec3(*(self._v / n))

    def set(self, other: "Vec3") -> "Vec3":
        """Скопировать компоненты `other` в себя (in‑place), вернуть self."""
        self._v[:] = other._v
        return self

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self._v)))

    def as_np(self) -> np.ndarray:
        """Возврат копии 3‑элементного массива float64."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"


def as_points_array(points) -> np.ndarray:
    """ndarray / последовательность Vec3 или кортежей → (N, 3) float64."""
    if isinstance(points, np.ndarray):
        return np.asarray(points, dtype=np.float64).reshape(-1, 3)
    rows = [Vec3.coerce(p).as_np() for p in points]
    if not rows:
        return np.zeros((0, 3), dtype=np.float64)
    return np.vstack(rows)
