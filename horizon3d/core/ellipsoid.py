"""
Эллипсоид с центром в начале координат, оси совпадают с осями системы.

В «масштабированном пространстве» (каждая координата делится на
соответствующий радиус) эллипсоид превращается в единичную сферу.
"""

from __future__ import annotations

from horizon3d.math.vec3 import Vec3


class Ellipsoid:
    """Неизменяемый эллипсоид с радиусами (x, y, z)."""

    __slots__ = ("_radii", "_one_over_radii")

    def __init__(self, x: float, y: float, z: float):
        if x <= 0.0 or y <= 0.0 or z <= 0.0:
            raise ValueError(f"Ellipsoid radii must be positive, got ({x}, {y}, {z})")
        self._radii = Vec3(x, y, z)
        self._one_over_radii = Vec3(1.0 / x, 1.0 / y, 1.0 / z)

    @staticmethod
    def from_radii(radii) -> "Ellipsoid":
        r = Vec3.coerce(radii)
        return Ellipsoid(r.x, r.y, r.z)

    @property
    def radii(self) -> Vec3:
        return Vec3.coerce(self._radii)

    @property
    def one_over_radii(self) -> Vec3:
        return Vec3.coerce(self._one_over_radii)

    def transform_position_to_scaled_space(self, position) -> Vec3:
        """Декартова позиция → масштабированное пространство (x/a, y/b, z/c)."""
        p = Vec3.coerce(position)
        return Vec3(*(p.as_np() * self._one_over_radii.as_np()))

    def transform_scaled_space_to_position(self, scaled_position) -> Vec3:
        """Обратное преобразование: (x*a, y*b, z*c)."""
        p = Vec3.coerce(scaled_position)
        return Vec3(*(p.as_np() * self._radii.as_np()))

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return NotImplemented
        return self._radii == other._radii

    def __hash__(self):
        return hash(self._radii.to_tuple())

    def __repr__(self):
        r = self._radii
        return f"Ellipsoid({r.x!r}, {r.y!r}, {r.z!r})"


Ellipsoid.WGS84 = Ellipsoid(6378137.0, 6378137.0, 6356752.3142451793)
Ellipsoid.UNIT_SPHERE = Ellipsoid(1.0, 1.0, 1.0)
