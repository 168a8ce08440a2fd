"""Point-cloud rendering pipeline."""

from __future__ import annotations

import asyncio
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Union

from .camera import Camera
from .framebuffer import FrameBuffer
from .objects import SamplePoint
from .quantize import compose_frame, quantize
from .shading import Light, shade

LuminanceGrid = List[List[float]]
GlyphMatrix = List[List[str]]


def render(
    points: Iterable[SamplePoint],
    light: Light,
    width: int,
    height: int,
    projection_distance: float,
    *,
    camera: Optional[Camera] = None,
) -> LuminanceGrid:
    """Render ``points`` into a ``height`` x ``width`` luminance grid.

    Untouched pixels hold ``UNLIT``. Domain errors raised while projecting or
    shading a point propagate and abandon the whole frame.
    """
    if camera is None:
        camera = Camera.centred(width, height, projection_distance)
    elif camera.width != width or camera.height != height:
        raise ValueError("Camera screen size does not match the requested frame")

    buffer = FrameBuffer(width, height)
    for sample in points:
        projected = camera.project(sample.position)
        if projected is None:
            continue

        x, y, inv_z = projected.x, projected.y, projected.inv_z
        if not camera.contains(x, y) or not buffer.is_nearer(x, y, inv_z):
            continue

        luminance = shade(sample.position, sample.normal, light)
        buffer.write(x, y, inv_z, luminance)

    return buffer.luminance_rows()


class RenderEngine:
    """Renders sample sequences with a fixed camera and light."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        projection_distance: float,
        light: Light,
        camera: Optional[Camera] = None,
    ) -> None:
        if camera is None:
            camera = Camera.centred(width, height, projection_distance)
        self.camera = camera
        self.light = light
        self.width = camera.width
        self.height = camera.height
        self.projection_distance = camera.projection_distance

    def render(
        self,
        points: Iterable[SamplePoint],
        *,
        output_format: str = "luminance",
    ) -> Union[LuminanceGrid, GlyphMatrix, str]:
        if output_format not in ("luminance", "glyphs", "text"):
            raise ValueError(f"Unsupported output_format '{output_format}'")

        grid = render(
            points,
            self.light,
            self.width,
            self.height,
            self.projection_distance,
            camera=self.camera,
        )
        if output_format == "luminance":
            return grid
        glyphs = quantize(grid)
        if output_format == "glyphs":
            return glyphs
        return compose_frame(glyphs)

    async def render_async(
        self,
        points: Iterable[SamplePoint],
        *,
        output_format: str = "luminance",
        executor: ThreadPoolExecutor | None = None,
    ) -> Union[LuminanceGrid, GlyphMatrix, str]:
        loop = asyncio.get_running_loop()
        local_executor = executor
        created_executor = False
        if local_executor is None:
            local_executor = ThreadPoolExecutor(max_workers=1)
            created_executor = True

        try:
            return await loop.run_in_executor(
                local_executor,
                lambda: self.render(points, output_format=output_format),
            )
        finally:
            if created_executor:
                local_executor.shutdown(wait=True)
