# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: эллипсоиды, окклюдеры и изолированная
конфигурация (singleton Config сбрасывается до и после теста).
"""

import logging

import pytest

from horizon3d.core import Ellipsoid
from horizon3d.culling import EllipsoidalOccluder
from horizon3d.math import Vec3
from horizon3d.utils.config import Config
from horizon3d.utils.logger import logger


# ----------------------------------------------------------------------
# Эллипсоид‑«шпион»: считает вызовы преобразования в scaled space
# ----------------------------------------------------------------------
class SpyEllipsoid(Ellipsoid):
    """Ellipsoid, который записывает каждое преобразование координат."""

    def __init__(self, x: float, y: float, z: float):
        super().__init__(x, y, z)
        self.transform_calls = 0

    def transform_position_to_scaled_space(self, position) -> Vec3:
        self.transform_calls += 1
        return super().transform_position_to_scaled_space(position)


@pytest.fixture
def unit_sphere() -> Ellipsoid:
    return Ellipsoid.UNIT_SPHERE


@pytest.fixture
def reference_ellipsoid() -> Ellipsoid:
    """Эллипсоид с радиусами (1.0, 1.1, 0.9)."""
    return Ellipsoid(1.0, 1.1, 0.9)


@pytest.fixture
def spy_ellipsoid() -> SpyEllipsoid:
    return SpyEllipsoid(1.0, 1.1, 0.9)


@pytest.fixture
def reference_occluder(reference_ellipsoid) -> EllipsoidalOccluder:
    """Камера в (0, 0, 2.5) над эллипсоидом (1.0, 1.1, 0.9)."""
    return EllipsoidalOccluder(reference_ellipsoid, Vec3(0.0, 0.0, 2.5))


@pytest.fixture
def config_path(tmp_path):
    """Путь к JSON‑конфигу во временной папке; Config и уровень логгера сброшены."""
    Config.reset()
    yield tmp_path / "horizon3d.json"
    Config.reset()
    logger.setLevel(logging.NOTSET)
