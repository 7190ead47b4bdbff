# horizon3d/culling/occluder.py
"""
Отсечение по горизонту эллипсоида (планеты).

Вся геометрия считается в масштабированном пространстве эллипсоида,
где он становится единичной сферой с центром в начале координат:
задача «горизонт эллипсоида» сводится к задаче «горизонт сферы».

Две операции:
    * видна ли точка из камеры (не ушла ли она за горизонт);
    * точка отсечения для кластера точек: если она за горизонтом,
      то и весь кластер гарантированно за горизонтом.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

import numpy as np

from horizon3d.core.ellipsoid import Ellipsoid
from horizon3d.culling import kernels
from horizon3d.culling.kernels import (
    STATUS_OK,
    STATUS_INSIDE_ELLIPSOID,
    STATUS_NON_FINITE,
    STATUS_UNBOUNDED,
)
from horizon3d.culling.visibility import Visibility
from horizon3d.math.vec3 import Vec3, as_points_array
from horizon3d.utils.config import Config
from horizon3d.utils.logger import logger
from horizon3d.utils.profiler import Profiler


def _candidate_magnitude(scaled_position: Vec3, direction: Vec3):
    """
    Длина вдоль `direction`, при которой конус горизонта точки,
    повёрнутый на угол alpha, касается `scaled_position`.
    Возвращает (magnitude, status).
    """
    magnitude_squared = scaled_position.length_squared()
    if not math.isfinite(magnitude_squared):
        return math.nan, STATUS_NON_FINITE
    if magnitude_squared < 1.0:
        return math.nan, STATUS_INSIDE_ELLIPSOID
    magnitude = math.sqrt(magnitude_squared)
    d = scaled_position / magnitude

    cos_alpha = d.dot(direction)
    sin_alpha = d.cross(direction).length()
    cos_beta = 1.0 / magnitude
    sin_beta = math.sqrt(magnitude_squared - 1.0) * cos_beta

    # cos(alpha + beta)
    denominator = cos_alpha * cos_beta - sin_alpha * sin_beta
    if not denominator > 0.0:
        return math.inf, STATUS_UNBOUNDED
    return 1.0 / denominator, STATUS_OK


class EllipsoidalOccluder:
    """
    Окклюдер‑эллипсоид + позиция камеры.

    Эллипсоид считается расположенным в начале координат, все точки
    задаются в его локальной (выровненной по осям) системе.

    Пример::

        ellipsoid = Ellipsoid(1.0, 1.1, 0.9)
        occluder = EllipsoidalOccluder(ellipsoid, Vec3(0.0, 0.0, 2.5))
        occluder.is_point_visible(Vec3(0.0, -3.0, -3.0))   # True

    strict=True превращает вырожденные случаи (камера внутри эллипсоида,
    точки кластера под поверхностью и т.п.) в ValueError.
    """

    def __init__(self, ellipsoid: Ellipsoid, camera_position=None,
                 strict: bool = False, use_jit: bool = True):
        if ellipsoid is None:
            raise ValueError("ellipsoid is required.")

        self._ellipsoid = ellipsoid
        self.strict = bool(strict)
        self.use_jit = bool(use_jit)

        self._camera_position: Optional[Vec3] = None
        self._camera_position_scaled: Optional[Vec3] = None
        self._horizon_distance_squared_scaled = 0.0

        if camera_position is not None:
            self.set_camera_position(camera_position)

    @classmethod
    def from_config(cls, ellipsoid: Ellipsoid, camera_position=None,
                    config: Optional[Config] = None) -> "EllipsoidalOccluder":
        """Создать окклюдер с параметрами из секции "occluder" конфигурации."""
        config = config if config is not None else Config()
        section = config.section("occluder")
        return cls(ellipsoid, camera_position,
                   strict=section.get("strict", False),
                   use_jit=section.get("batch_jit", True))

    # -----------------------------------------------------------------
    # состояние
    # -----------------------------------------------------------------
    @property
    def ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    def get_ellipsoid(self) -> Ellipsoid:
        return self._ellipsoid

    @property
    def camera_position(self) -> Optional[Vec3]:
        return self._camera_position

    @camera_position.setter
    def camera_position(self, value) -> None:
        self.set_camera_position(value)

    def get_camera_position(self) -> Optional[Vec3]:
        return self._camera_position

    @property
    def camera_position_scaled(self) -> Optional[Vec3]:
        return self._camera_position_scaled

    @property
    def horizon_distance_squared_scaled(self) -> float:
        return self._horizon_distance_squared_scaled

    def set_camera_position(self, camera_position) -> None:
        """
        Запомнить позицию камеры и пересчитать кэш масштабированного
        пространства: cv = scaled(p), |vh|² = |cv|² - 1 (квадрат длины
        касательной от камеры до единичной сферы).
        """
        if camera_position is None:
            raise ValueError("camera_position is required.")

        position = Vec3.coerce(camera_position)
        cv = self._ellipsoid.transform_position_to_scaled_space(position)
        vh_magnitude_squared = cv.length_squared() - 1.0

        if not vh_magnitude_squared > 0.0:
            message = f"camera position {position!r} is not outside the ellipsoid"
            if self.strict:
                raise ValueError(message)
            logger.warning(f"[Occluder] {message}; visibility results are undefined")

        self._camera_position = position
        self._camera_position_scaled = cv
        self._horizon_distance_squared_scaled = vh_magnitude_squared

    def _require_camera(self) -> Vec3:
        cv = self._camera_position_scaled
        if cv is None:
            raise RuntimeError("camera position is not set; call set_camera_position() first")
        return cv

    # -----------------------------------------------------------------
    # видимость точки
    # -----------------------------------------------------------------
    def is_point_visible(self, occludee) -> bool:
        """True, если точка (локальная система эллипсоида) видна."""
        scaled = self._ellipsoid.transform_position_to_scaled_space(occludee)
        return self.is_scaled_space_point_visible(scaled)

    def is_scaled_space_point_visible(self, occludee_scaled_space_position) -> bool:
        """
        То же, но точка уже в масштабированном пространстве
        (см. Ellipsoid.transform_position_to_scaled_space).
        """
        cv = self._require_camera()
        vh_magnitude_squared = self._horizon_distance_squared_scaled

        occludee = Vec3.coerce(occludee_scaled_space_position)
        # начало координат (точка отсечения пустого кластера) видно всегда
        if occludee.length_squared() == 0.0:
            return True

        vt = occludee - cv
        vt_magnitude_squared = vt.length_squared()
        if vt_magnitude_squared == 0.0:
            return True

        vt_dot_vc = -vt.dot(cv)
        is_occluded = (vt_dot_vc > vh_magnitude_squared and
                       vt_dot_vc * vt_dot_vc / vt_magnitude_squared > vh_magnitude_squared)
        return not is_occluded

    def compute_visibility(self, occludee_scaled_space_position) -> Visibility:
        """Тройное состояние: VISIBLE / OCCLUDED / INDETERMINATE."""
        self._require_camera()
        point = Vec3.coerce(occludee_scaled_space_position)
        if not self._horizon_distance_squared_scaled > 0.0 or not point.is_finite():
            return Visibility.INDETERMINATE
        if self.is_scaled_space_point_visible(point):
            return Visibility.VISIBLE
        return Visibility.OCCLUDED

    def are_points_visible(self, points) -> np.ndarray:
        """Пакетный is_point_visible: (N, 3) → (N,) bool."""
        arr = as_points_array(points)
        scaled = arr * self._ellipsoid.one_over_radii.as_np()
        return self.are_scaled_space_points_visible(scaled)

    def are_scaled_space_points_visible(self, points) -> np.ndarray:
        """Пакетный is_scaled_space_point_visible: (N, 3) → (N,) bool."""
        cv = self._require_camera()
        arr = np.ascontiguousarray(as_points_array(points))
        kernel = self._kernel(kernels.scaled_points_visible)
        with Profiler(f"are_scaled_space_points_visible[{arr.shape[0]}]"):
            return kernel(arr, cv.as_np(), float(self._horizon_distance_squared_scaled))

    # -----------------------------------------------------------------
    # точка отсечения по горизонту
    # -----------------------------------------------------------------
    def compute_horizon_culling_point(self, direction_to_point, positions: Iterable,
                                      result: Optional[Vec3] = None) -> Optional[Vec3]:
        """
        Точка (в масштабированном пространстве), которая лежит на
        направлении `direction_to_point`: если она за горизонтом, то все
        `positions` тоже за горизонтом. Годится для
        is_scaled_space_point_visible.

        direction_to_point – направление, не обязательно нормированное;
            разумный выбор – центр ограничивающей сферы позиций.
        positions – точки в локальной системе эллипсоида.
        result – Vec3, в который записать ответ вместо нового объекта.

        Пустой `positions` → нулевой вектор. None – если такой точки не
        существует (позиция под поверхностью или «за краем» направления).
        """
        if direction_to_point is None:
            raise ValueError("direction_to_point is required.")
        if positions is None:
            raise ValueError("positions is required.")

        ellipsoid = self._ellipsoid
        direction = self._scaled_direction(direction_to_point)
        if direction is None:
            return None

        result_magnitude = 0.0
        for index, position in enumerate(positions):
            scaled = ellipsoid.transform_position_to_scaled_space(position)
            candidate, status = _candidate_magnitude(scaled, direction)
            if status != STATUS_OK:
                return self._degenerate_culling_point(status, index)
            result_magnitude = max(result_magnitude, candidate)

        return self._store(direction * result_magnitude, result)

    def compute_horizon_culling_point_from_vertices(self, direction_to_point, vertices,
                                                    stride: int = 3, center=None,
                                                    result: Optional[Vec3] = None) -> Optional[Vec3]:
        """
        Как compute_horizon_culling_point, но позиции упакованы в плоский
        буфер вершин: `stride` чисел на вершину, первые три – x, y, z
        относительно `center` (по умолчанию – начало координат).
        """
        if direction_to_point is None:
            raise ValueError("direction_to_point is required.")
        if vertices is None:
            raise ValueError("vertices is required.")
        if stride < 3:
            raise ValueError(f"stride must be at least 3, got {stride}")

        flat = np.asarray(vertices, dtype=np.float64).reshape(-1)
        if flat.shape[0] % stride != 0:
            raise ValueError(f"vertex buffer length {flat.shape[0]} is not a multiple of stride {stride}")

        direction = self._scaled_direction(direction_to_point)
        if direction is None:
            return None

        positions = flat.reshape(-1, stride)[:, :3]
        if center is not None:
            positions = positions + Vec3.coerce(center).as_np()
        scaled = np.ascontiguousarray(positions * self._ellipsoid.one_over_radii.as_np())

        kernel = self._kernel(kernels.horizon_culling_magnitude)
        with Profiler(f"horizon_culling_magnitude[{scaled.shape[0]}]"):
            magnitude, status, index = kernel(scaled, direction.as_np())
        if status != STATUS_OK:
            return self._degenerate_culling_point(int(status), int(index))

        return self._store(direction * float(magnitude), result)

    # -----------------------------------------------------------------
    # вспомогательные методы
    # -----------------------------------------------------------------
    def _kernel(self, fn):
        return fn if self.use_jit else fn.py_func

    def _scaled_direction(self, direction_to_point) -> Optional[Vec3]:
        scaled = self._ellipsoid.transform_position_to_scaled_space(direction_to_point)
        if scaled.length_squared() == 0.0:
            message = "direction_to_point must be non-zero"
            if self.strict:
                raise ValueError(message)
            logger.debug(f"[Occluder] {message}; no culling point")
            return None
        return scaled.normalized()

    def _degenerate_culling_point(self, status: int, index: int) -> None:
        if status == STATUS_INSIDE_ELLIPSOID:
            message = f"position #{index} lies inside the ellipsoid"
        elif status == STATUS_NON_FINITE:
            message = f"position #{index} is not finite"
        else:
            message = f"position #{index} cannot be bounded along direction_to_point"
        if self.strict:
            raise ValueError(message)
        logger.debug(f"[Occluder] {message}; no culling point")
        return None

    @staticmethod
    def _store(value: Vec3, result: Optional[Vec3]) -> Vec3:
        if result is None:
            return value
        return result.set(value)

    def __repr__(self):
        return (f"EllipsoidalOccluder({self._ellipsoid!r}, "
                f"camera={self._camera_position!r})")
