# horizon3d/math/quat.py
# ---------------------------------------------------------------
# Краткая реализация кватернионов (x, y, z, w) с поддержкой:
# - создания из угла/оси,
# - умножения,
# - нормализации,
# - вращения вектора вокруг начала координат.
# ---------------------------------------------------------------

import numpy as np
from math import sin, cos, radians, sqrt

from horizon3d.math.vec3 import Vec3

class Quat:
    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x=0.0, y=0.0, z=0.0, w=1.0):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.w = float(w)

    @staticmethod
    def from_axis_angle(axis, angle_deg):
        """axis – Vec3 или 3‑элементный iterable, angle – в градусах."""
        a = radians(angle_deg) / 2.0
        s = sin(a)
        ax = Vec3.coerce(axis).as_np()
        norm = np.linalg.norm(ax)
        if norm == 0.0:
            raise ValueError("Rotation axis must be non-zero")
        ax = ax / norm
        return Quat(ax[0] * s, ax[1] * s, ax[2] * s, cos(a))

    def __mul__(self, other: "Quat") -> "Quat":
        """Гамма‑умножение кватернионов."""
        x = self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y
        y = self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x
        z = self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w
        w = self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z
        return Quat(x, y, z, w)

    def normalized(self) -> "Quat":
        n = sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)
        if n == 0:
            return Quat()
        inv = 1.0 / n
        return Quat(self.x*inv, self.y*inv, self.z*inv, self.w*inv)

    def rotate_vector(self, vec) -> Vec3:
        """Вращает 3‑D вектор `vec` (Vec3 / iterable), возвращает Vec3."""
        v = Vec3.coerce(vec)
        qvec = Quat(v.x, v.y, v.z, 0.0)
        res = self * qvec * self.conjugate()
        return Vec3(res.x, res.y, res.z)

    def conjugate(self):
        return Quat(-self.x, -self.y, -self.z, self.w)

    def __repr__(self):
        return f"Quat({self.x:.3f}, {self.y:.3f}, {self.z:.3f}, {self.w:.3f})"
