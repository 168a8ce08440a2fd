"""Single point-light shading."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vec3


@dataclass(frozen=True, slots=True)
class Light:
    position: Vec3
    intensity: float


def shade(position: Vec3, normal: Vec3, light: Light) -> float:
    """Return the unclamped luminance of a surface sample.

    The light direction runs from the light source to the sample. A sample
    coincident with the light raises ``ZeroLengthVectorError``.
    """
    direction = (position - light.position).normalized()
    return light.intensity * direction.dot(normal)
