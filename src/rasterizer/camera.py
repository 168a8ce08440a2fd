"""Pinhole camera and perspective projection."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .errors import DegenerateProjectionError
from .vector import Vec3


@dataclass(frozen=True, slots=True)
class Projection:
    """Screen cell hit by a projected point and its inverse depth."""

    x: int
    y: int
    inv_z: float


@dataclass(frozen=True, slots=True)
class Camera:
    """Camera looking down +Z onto a ``width`` x ``height`` screen."""

    position: Vec3
    width: int
    height: int
    projection_distance: float

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("Camera requires width and height >= 1")
        if self.projection_distance <= 0:
            raise ValueError("Camera requires a positive projection distance")

    @classmethod
    def centred(cls, width: int, height: int, projection_distance: float) -> "Camera":
        """Camera placed at the screen centre on the z = 0 plane."""
        return cls(
            Vec3(float(width // 2), float(height // 2), 0.0),
            width,
            height,
            projection_distance,
        )

    @property
    def center_x(self) -> int:
        return self.width // 2

    @property
    def center_y(self) -> int:
        return self.height // 2

    def project(self, position: Vec3) -> Optional[Projection]:
        """Project ``position`` onto the screen.

        Returns ``None`` for points behind the camera. Raises
        :class:`DegenerateProjectionError` for points on the camera plane.
        The returned cell may lie outside the screen; see :meth:`contains`.
        """
        relative = position - self.position
        z = relative.z
        if z == 0:
            raise DegenerateProjectionError(
                f"Point {position} lies on the camera plane z={self.position.z}"
            )
        if z < 0:
            return None

        scale = self.projection_distance / z
        screen_x = math.floor(scale * relative.x + self.center_x)
        screen_y = math.floor(scale * relative.y + self.center_y)
        return Projection(screen_x, screen_y, 1.0 / z)

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height
