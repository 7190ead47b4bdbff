"""
Математический суб‑пакет: Vec3, Quat.
"""

from horizon3d.math.vec3 import Vec3, as_points_array
from horizon3d.math.quat import Quat

__all__ = ["Vec3", "Quat", "as_points_array"]
