"""Surface sample generators."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Tuple

from .vector import Vec3


@dataclass(frozen=True, slots=True)
class SamplePoint:
    """A point on a surface paired with the outward unit normal at that point."""

    position: Vec3
    normal: Vec3


class CubeSurface:
    """Lazy, restartable sequence of samples on the faces of an axis-aligned cube.

    The cube spans ``[corner, corner + side_length]`` on every axis. Faces are
    visited in the order -Z, +Z, -Y, +Y, -X, +X; each face is swept row-major
    over its two free axes at offsets ``0, step, 2 * step, ...`` below
    ``side_length``.
    """

    def __init__(self, corner: Vec3, side_length: float, step: float = 1.0) -> None:
        if side_length < 1:
            raise ValueError("CubeSurface requires side_length >= 1")
        if step <= 0:
            raise ValueError("CubeSurface requires a positive step")
        self.corner = corner
        self.side_length = side_length
        self.step = step

    def __iter__(self) -> Iterator[SamplePoint]:
        corner = self.corner
        side = self.side_length
        offsets = self._offsets()

        for far in (0, 1):
            normal = Vec3(0.0, 0.0, 2.0 * far - 1.0)
            z = corner.z + far * side
            for dy in offsets:
                for dx in offsets:
                    yield SamplePoint(Vec3(corner.x + dx, corner.y + dy, z), normal)

        for far in (0, 1):
            normal = Vec3(0.0, 2.0 * far - 1.0, 0.0)
            y = corner.y + far * side
            for dz in offsets:
                for dx in offsets:
                    yield SamplePoint(Vec3(corner.x + dx, y, corner.z + dz), normal)

        for far in (0, 1):
            normal = Vec3(2.0 * far - 1.0, 0.0, 0.0)
            x = corner.x + far * side
            for dz in offsets:
                for dy in offsets:
                    yield SamplePoint(Vec3(x, corner.y + dy, corner.z + dz), normal)

    def __len__(self) -> int:
        per_axis = self._steps_per_axis()
        return 6 * per_axis * per_axis

    def translated(self, offset: Vec3) -> "CubeSurface":
        return CubeSurface(self.corner + offset, self.side_length, self.step)

    def _steps_per_axis(self) -> int:
        count = math.ceil(self.side_length / self.step)
        # offsets are i * step, so settle the count against those exact products
        while count > 0 and (count - 1) * self.step >= self.side_length:
            count -= 1
        while count * self.step < self.side_length:
            count += 1
        return count

    def _offsets(self) -> Tuple[float, ...]:
        step = self.step
        return tuple(i * step for i in range(self._steps_per_axis()))
