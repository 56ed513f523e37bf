import os
import tempfile
import unittest
import numpy as np
from PIL import Image
from canvas import *
from utils import vec, frozen_vec, add, subtract, scale, dot, magnitude, surface_normal, frozen_color
import cli


class TestVectorAlgebra(unittest.TestCase):

    def test_basic_ops(self):
        a, b = vec([1,2,3]), vec([-4,5,0.5])
        np.testing.assert_array_equal(add(a, b), [-3, 7, 3.5])
        np.testing.assert_array_equal(subtract(a, b), [5, -3, 2.5])
        np.testing.assert_array_equal(scale(a, -2), [-2, -4, -6])
        self.assertEqual(dot(a, b), 7.5)
        self.assertAlmostEqual(magnitude(vec([3,4,12])), 13.0)
        self.assertEqual(magnitude(vec([0,0,0])), 0.0)
        # inputs untouched
        np.testing.assert_array_equal(a, [1, 2, 3])

    def test_surface_normal_is_not_normalized(self):
        n = surface_normal(vec([0,3,0]), vec([0,1,0]))
        np.testing.assert_array_equal(n, [0, 2, 0])
        self.assertEqual(magnitude(n), 2.0)

    def test_frozen_vec(self):
        v = frozen_vec([1, 2, 3])
        with self.assertRaises(ValueError):
            v[0] = 5
        with self.assertRaises(ValueError):
            frozen_vec([1, 2, 3, 4])
        with self.assertRaises(ValueError):
            frozen_vec([1, np.inf, 3])

    def test_frozen_color(self):
        c = frozen_color([0, 127.5, 255])
        np.testing.assert_array_equal(c, [0, 127.5, 255])
        self.assertFalse(c.flags.writeable)
        for bad in ([256, 0, 0], [-1, 0, 0], [0, np.nan, 0], [1, 2]):
            with self.assertRaises(ValueError):
                frozen_color(bad)


class TestCoordinateMapping(unittest.TestCase):

    def test_translate_to_center(self):
        self.assertEqual(translate_to_center(600, 600, 0, 0), (300, 300))
        self.assertEqual(translate_to_center(600, 400, 10, 20), (310, 180))

    def test_round_trip(self):
        rng = np.random.default_rng(11)
        for width, height, x, y in rng.uniform(-1000, 1000, size=(50, 4)):
            x1, y1 = translate_to_center(width, height, x, y)
            x2, y2 = translate_from_center(width, height, x1, y1)
            self.assertAlmostEqual(x2, x)
            self.assertAlmostEqual(y2, y)

    def test_canvas_to_viewport(self):
        np.testing.assert_allclose(canvas_to_viewport(300, -300, 600, 600, Viewport()), [0.5, -0.5, 1])
        np.testing.assert_allclose(canvas_to_viewport(100, 50, 400, 200, Viewport(2, 1, 5)), [0.5, 0.25, 5])

    def test_bad_viewport(self):
        for args in ((0, 1, 1), (1, -1, 1), (1, 1, 0)):
            with self.assertRaises(ValueError):
                Viewport(*args)


class TestCanvas(unittest.TestCase):

    def test_every_pixel_covered_once(self):
        for width, height in ((4, 4), (3, 5), (1, 2)):
            canvas = Canvas(width, height)
            seen = set()
            for y in canvas.row_coords():
                for x in canvas.column_coords():
                    x1, y1 = translate_to_center(width, height, x, y)
                    seen.add((int(x1), int(y1)))
            self.assertEqual(seen, {(i, j) for i in range(width) for j in range(height)})

    def test_put_pixel(self):
        canvas = Canvas(4, 4)
        canvas.put_pixel(0, 0, vec([300, -20, 128.4]))
        np.testing.assert_array_equal(canvas.pixels[2, 2], [255, 0, 128])
        # top-left corner
        canvas.put_pixel(-2, 2, vec([1, 2, 3]))
        np.testing.assert_array_equal(canvas.pixels[0, 0], [1, 2, 3])
        # outside the canvas
        canvas.put_pixel(5, 0, vec([9, 9, 9]))
        self.assertEqual(int(canvas.pixels.sum()), 255 + 128 + 6)

    def test_put_row(self):
        canvas = Canvas(3, 3)
        canvas.put_row(-1, [vec([10, 10, 10]), vec([20, 20, 20]), vec([30, 30, 30])])
        np.testing.assert_array_equal(canvas.pixels[2, :, 0], [10, 20, 30])
        np.testing.assert_array_equal(canvas.pixels[:2], 0)

    def test_save(self):
        canvas = Canvas(5, 3)
        canvas.put_pixel(0, 0, vec([255, 0, 0]))
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'out.png')
            canvas.save(path)
            with Image.open(path) as img:
                self.assertEqual(img.size, (5, 3))
                self.assertEqual(img.getpixel((2, 1)), (255, 0, 0))

    def test_bad_canvas(self):
        with self.assertRaises(ValueError):
            Canvas(0, 10)


class TestCli(unittest.TestCase):

    def test_parse_args_defaults(self):
        args = cli.parse_args([])
        self.assertEqual((args.width, args.height), (600, 600))
        self.assertEqual(args.processes, 1)
        self.assertFalse(args.textbook)

    def test_rejects_bad_size(self):
        with self.assertRaises(SystemExit):
            cli.parse_args(['--width', '0'])

    def test_main_writes_png(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'scene.png')
            cli.main(['--width', '6', '--height', '4', '-o', path, '-q'])
            with Image.open(path) as img:
                self.assertEqual(img.size, (6, 4))


if __name__ == '__main__':
    unittest.main()
