"""Entry point for the terminal point-cloud cube demo."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO, cast

from .rasterizer.engine import RenderEngine
from .rasterizer.errors import DomainError
from .rasterizer.objects import CubeSurface
from .rasterizer.shading import Light
from .rasterizer.terminal import TerminalController
from .rasterizer.vector import Vec3


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a sampled cube as terminal glyphs")
    parser.add_argument(
        "--corner",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        default=(10.0, 10.0, 8.0),
        help="Cube corner with the lowest x, y, z values (default: 10 10 8)",
    )
    parser.add_argument("--side", type=float, default=3.0, help="Cube side length (default: 3)")
    parser.add_argument(
        "--step",
        type=float,
        default=1.0,
        help="Distance between neighbouring samples on a face (default: 1)",
    )
    parser.add_argument(
        "--light",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        default=(0.0, -2.0, 0.0),
        help="Point light position (default: 0 -2 0)",
    )
    parser.add_argument("--intensity", type=float, default=12.0, help="Light intensity (default: 12)")
    parser.add_argument("--width", type=int, default=16, help="Screen width in cells (default: 16)")
    parser.add_argument("--height", type=int, default=16, help="Screen height in cells (default: 16)")
    parser.add_argument(
        "--distance",
        type=float,
        default=16.0,
        help="Projection distance between camera and screen plane (default: 16)",
    )
    parser.add_argument("--frames", type=int, default=2, help="Number of frames to draw (default: 2)")
    parser.add_argument(
        "--shift",
        type=float,
        default=-7.0,
        help="Offset along x applied to the cube on every frame (default: -7)",
    )
    parser.add_argument("--delay", type=float, default=3.0, help="Seconds between frames (default: 3)")
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the screen before drawing each frame",
    )
    return parser.parse_args(argv)


@dataclass
class RuntimeConfig:
    surface: CubeSurface
    light: Light
    width: int
    height: int
    projection_distance: float
    frames: int
    frame_offset: Vec3
    delay: float
    clear: bool
    warnings: list[str]


def _setup_runtime(args: argparse.Namespace) -> RuntimeConfig:
    warnings: list[str] = []

    side = args.side
    if side < 1.0:
        warnings.append(f"Side length {side} too small; using 1")
        side = 1.0

    step = args.step
    if step <= 0.0:
        warnings.append(f"Sampling step {step} must be positive; using 1")
        step = 1.0

    width = args.width
    height = args.height
    if width < 1 or height < 1:
        warnings.append(f"Screen {width}x{height} too small; using at least 1x1")
        width = max(1, width)
        height = max(1, height)

    projection_distance = args.distance
    if projection_distance <= 0.0:
        projection_distance = float(max(width, height))
        warnings.append(f"Projection distance must be positive; using {projection_distance:g}")

    frames = max(1, args.frames)
    delay = max(0.0, args.delay)

    return RuntimeConfig(
        surface=CubeSurface(Vec3(*args.corner), side, step),
        light=Light(Vec3(*args.light), args.intensity),
        width=width,
        height=height,
        projection_distance=projection_distance,
        frames=frames,
        frame_offset=Vec3(args.shift, 0.0, 0.0),
        delay=delay,
        clear=not args.no_clear,
        warnings=warnings,
    )


def _emit_warnings(warnings: Sequence[str], stream: TextIO | None = None) -> None:
    if not warnings:
        return
    out = stream if stream is not None else sys.stderr
    for warning in warnings:
        out.write(f"[rasterizer] {warning}\n")
    out.flush()


def _report_error(message: str, stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stderr
    out.write(f"[rasterizer] error: {message}\n")
    out.flush()


def _run_frames(config: RuntimeConfig, controller: TerminalController) -> int:
    engine = RenderEngine(
        config.width,
        config.height,
        projection_distance=config.projection_distance,
        light=config.light,
    )

    surface = config.surface
    with controller as terminal:
        for frame_index in range(config.frames):
            if frame_index:
                time.sleep(config.delay)
                surface = surface.translated(config.frame_offset)

            try:
                frame = cast(str, engine.render(surface, output_format="text"))
            except DomainError as exc:
                _report_error(f"frame {frame_index} aborted: {exc}")
                return 1
            terminal.draw(frame)
    return 0


def run(argv: Optional[Sequence[str]] = None, stream: TextIO | None = None) -> int:
    args = parse_arguments(argv)
    config = _setup_runtime(args)
    _emit_warnings(config.warnings)

    controller = TerminalController(stream, clear=config.clear)
    try:
        return _run_frames(config, controller)
    except KeyboardInterrupt:  # pragma: no cover - interactive loop
        controller.restore()
        sys.stdout.write("\nInterrupted. Bye!\n")
        sys.stdout.flush()
        return 130


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
