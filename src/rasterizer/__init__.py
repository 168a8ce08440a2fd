"""Point-cloud software rasterizer for terminal output."""

from .camera import Camera, Projection
from .engine import RenderEngine, render
from .errors import DegenerateProjectionError, DomainError, ZeroLengthVectorError
from .framebuffer import UNLIT, FrameBuffer
from .objects import CubeSurface, SamplePoint
from .quantize import PALETTE, compose_frame, glyph, quantize
from .shading import Light, shade
from .terminal import TerminalController
from .vector import Vec3

__all__ = [
    "Camera",
    "CubeSurface",
    "DegenerateProjectionError",
    "DomainError",
    "FrameBuffer",
    "Light",
    "PALETTE",
    "Projection",
    "RenderEngine",
    "SamplePoint",
    "TerminalController",
    "UNLIT",
    "Vec3",
    "ZeroLengthVectorError",
    "compose_frame",
    "glyph",
    "quantize",
    "render",
    "shade",
]
