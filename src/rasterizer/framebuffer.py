"""Depth-tested luminance buffer."""

from __future__ import annotations

from typing import List

UNLIT = float("-inf")


class FrameBuffer:
    """Per-pixel inverse depth and luminance for a single frame.

    Larger inverse depth means nearer to the camera. A depth of 0 marks a pixel
    nothing has claimed yet; its luminance stays at :data:`UNLIT`.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("FrameBuffer requires width and height >= 1")
        self.width = width
        self.height = height
        self.depth: List[List[float]] = [[0.0] * width for _ in range(height)]
        self.luminance: List[List[float]] = [[UNLIT] * width for _ in range(height)]

    def is_nearer(self, x: int, y: int, inv_z: float) -> bool:
        # ties stay candidates; write() settles them by luminance
        return inv_z >= self.depth[y][x] and inv_z > 0.0

    def write(self, x: int, y: int, inv_z: float, luminance: float) -> bool:
        """Store a sample if it beats the one currently holding the pixel."""
        current = self.depth[y][x]
        if inv_z > current or (inv_z == current and luminance > self.luminance[y][x]):
            self.depth[y][x] = inv_z
            self.luminance[y][x] = luminance
            return True
        return False

    def luminance_rows(self) -> List[List[float]]:
        return [list(row) for row in self.luminance]
