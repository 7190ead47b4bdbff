"""
Horizon3D – отсечение по горизонту эллипсоида (планеты) для 3‑D рендеринга.
Проверка видимости точки и точка отсечения для целого тайла без
трассировки лучей по поверхности.
"""

from horizon3d.utils import logger
from horizon3d.math import Vec3, Quat
from horizon3d.core import Ellipsoid
from horizon3d.culling import EllipsoidalOccluder, BoundingSphere, Visibility

__version__ = "1.0.0"

__all__ = [
    "Vec3",
    "Quat",
    "Ellipsoid",
    "EllipsoidalOccluder",
    "BoundingSphere",
    "Visibility",
]
