"""
Пакет culling – отсечение по горизонту эллипсоида и ограничивающие сферы.
"""

from horizon3d.culling.visibility import Visibility
from horizon3d.culling.bounding_sphere import BoundingSphere
from horizon3d.culling.occluder import EllipsoidalOccluder

__all__ = ["Visibility", "BoundingSphere", "EllipsoidalOccluder"]
