import asyncio
import math
import random
import unittest

from src.rasterizer.camera import Camera
from src.rasterizer.engine import RenderEngine, render
from src.rasterizer.errors import DegenerateProjectionError, ZeroLengthVectorError
from src.rasterizer.framebuffer import UNLIT
from src.rasterizer.objects import CubeSurface, SamplePoint
from src.rasterizer.quantize import quantize
from src.rasterizer.shading import Light
from src.rasterizer.vector import Vec3

SIZE = 16
DISTANCE = 16.0
LIGHT = Light(Vec3(0.0, -2.0, 0.0), 12.0)


def _lit_columns(grid):
    return {x for row in grid for x, value in enumerate(row) if value != UNLIT}


class RenderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.surface = CubeSurface(Vec3(10.0, 10.0, 8.0), 3)

    def test_cube_scene(self) -> None:
        grid = render(self.surface, LIGHT, SIZE, SIZE, DISTANCE)
        self.assertEqual(len(grid), SIZE)
        self.assertTrue(all(len(row) == SIZE for row in grid))

        camera = Camera.centred(SIZE, SIZE, DISTANCE)
        self.assertEqual(camera.position, Vec3(8.0, 8.0, 0.0))
        hit = set()
        for sample in self.surface:
            projected = camera.project(sample.position)
            if projected is not None and camera.contains(projected.x, projected.y):
                hit.add((projected.x, projected.y))

        for y, row in enumerate(grid):
            for x, value in enumerate(row):
                if (x, y) in hit:
                    self.assertNotEqual(value, UNLIT)
                else:
                    self.assertEqual(value, UNLIT)

        # projected centroid of the cube
        self.assertIn((13, 13), hit)
        self.assertAlmostEqual(grid[13][13], 12.0 * 11.0 / math.sqrt(461.0))
        self.assertEqual(quantize(grid)[13][13], "=")

    def test_render_is_order_independent(self) -> None:
        samples = list(self.surface)
        expected = render(samples, LIGHT, SIZE, SIZE, DISTANCE)
        self.assertEqual(render(list(reversed(samples)), LIGHT, SIZE, SIZE, DISTANCE), expected)

        shuffled = list(samples)
        random.Random(7).shuffle(shuffled)
        self.assertEqual(render(shuffled, LIGHT, SIZE, SIZE, DISTANCE), expected)

    def test_nearest_sample_wins(self) -> None:
        light = Light(Vec3(8.0, 8.0, -10.0), 3.0)
        near = SamplePoint(Vec3(8.0, 8.0, 4.0), Vec3(0.0, 0.0, 1.0))
        far = SamplePoint(Vec3(8.0, 8.0, 9.0), Vec3(0.0, 0.0, -1.0))
        for points in ([near, far], [far, near]):
            grid = render(points, light, SIZE, SIZE, DISTANCE)
            self.assertAlmostEqual(grid[8][8], 3.0)

    def test_moving_cube_along_x_shifts_image(self) -> None:
        original = _lit_columns(render(self.surface, LIGHT, SIZE, SIZE, DISTANCE))
        moved = _lit_columns(
            render(self.surface.translated(Vec3(-7.0, 0.0, 0.0)), LIGHT, SIZE, SIZE, DISTANCE)
        )
        self.assertTrue(original)
        self.assertTrue(moved)
        self.assertLess(max(moved), min(original))

    def test_points_off_screen_or_behind_are_dropped(self) -> None:
        points = [
            SamplePoint(Vec3(100.0, 8.0, 4.0), Vec3(0.0, 0.0, -1.0)),
            SamplePoint(Vec3(8.0, -40.0, 4.0), Vec3(0.0, 0.0, -1.0)),
            SamplePoint(Vec3(8.0, 8.0, -3.0), Vec3(0.0, 0.0, -1.0)),
        ]
        grid = render(points, LIGHT, SIZE, SIZE, DISTANCE)
        self.assertTrue(all(value == UNLIT for row in grid for value in row))

    def test_degenerate_projection_aborts_frame(self) -> None:
        points = [
            SamplePoint(Vec3(8.0, 8.0, 4.0), Vec3(0.0, 0.0, -1.0)),
            SamplePoint(Vec3(9.0, 8.0, 0.0), Vec3(0.0, 0.0, -1.0)),
        ]
        with self.assertRaises(DegenerateProjectionError):
            render(points, LIGHT, SIZE, SIZE, DISTANCE)

    def test_sample_at_light_aborts_frame(self) -> None:
        points = [SamplePoint(Vec3(8.0, 8.0, 4.0), Vec3(0.0, 0.0, -1.0))]
        with self.assertRaises(ZeroLengthVectorError):
            render(points, Light(Vec3(8.0, 8.0, 4.0), 1.0), SIZE, SIZE, DISTANCE)

    def test_camera_must_match_frame_size(self) -> None:
        with self.assertRaises(ValueError):
            render([], LIGHT, SIZE, SIZE, DISTANCE, camera=Camera.centred(8, 8, DISTANCE))

    def test_custom_camera(self) -> None:
        camera = Camera(Vec3(0.0, 0.0, 0.0), 4, 4, 1.0)
        point = SamplePoint(Vec3(0.0, 0.0, 2.0), Vec3(0.0, 0.0, -1.0))
        grid = render([point], Light(Vec3(0.0, 0.0, 10.0), 2.0), 4, 4, 1.0, camera=camera)
        self.assertAlmostEqual(grid[2][2], 2.0)


class RenderEngineTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = RenderEngine(SIZE, SIZE, projection_distance=DISTANCE, light=LIGHT)
        self.surface = CubeSurface(Vec3(10.0, 10.0, 8.0), 3)

    def test_output_formats(self) -> None:
        grid = self.engine.render(self.surface)
        glyphs = self.engine.render(self.surface, output_format="glyphs")
        text = self.engine.render(self.surface, output_format="text")

        self.assertEqual(glyphs, quantize(grid))  # type: ignore[arg-type]
        lines = text.splitlines()  # type: ignore[union-attr]
        self.assertEqual(len(lines), SIZE)
        self.assertEqual(lines[13].split(" ")[13], "=")
        self.assertEqual(lines[0], " ".join(["."] * SIZE))

    def test_unknown_output_format(self) -> None:
        with self.assertRaises(ValueError):
            self.engine.render(self.surface, output_format="ansi")

    def test_render_async_matches_sync(self) -> None:
        expected = self.engine.render(self.surface, output_format="text")
        result = asyncio.run(self.engine.render_async(self.surface, output_format="text"))
        self.assertEqual(result, expected)

    def test_render_async_propagates_domain_errors(self) -> None:
        engine = RenderEngine(SIZE, SIZE, projection_distance=DISTANCE, light=Light(Vec3(8.0, 8.0, 4.0), 1.0))
        points = [SamplePoint(Vec3(8.0, 8.0, 4.0), Vec3(0.0, 0.0, -1.0))]
        with self.assertRaises(ZeroLengthVectorError):
            asyncio.run(engine.render_async(points))


if __name__ == "__main__":
    unittest.main()
