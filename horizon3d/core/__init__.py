"""
Пакет core – эллипсоид‑окклюдер (WGS84, единичная сфера и т.п.).
"""

from horizon3d.core.ellipsoid import Ellipsoid

__all__ = ["Ellipsoid"]
