import unittest
import numpy as np
from lights import *
from utils import vec


def unit(v):
    return v / np.linalg.norm(v)


class TestAmbientLight(unittest.TestCase):

    def test_ambient_only(self):
        rng = np.random.default_rng(7)
        lights = [AmbientLight(0.35)]
        for _ in range(20):
            n, p, v = rng.normal(size=(3, 3))
            specular = rng.uniform(-10, 1000)
            self.assertEqual(compute_lighting(lights, n, p, v, specular), 0.35)

    def test_no_lights(self):
        self.assertEqual(compute_lighting([], vec([0,1,0]), vec([0,0,0]), vec([0,1,0]), 10), 0.0)


class TestPointLight(unittest.TestCase):

    def shading_test(self, n, l, r, I, v=vec([1,1,0]), specular=-1):
        # shading at the origin with normal n, light at distance r along l
        p = vec([0,0,0])
        light = PointLight(p + r * unit(l), I)
        return compute_lighting([light], n, p, v, specular)

    def test_diffuse(self):
        # light directly overhead
        self.assertAlmostEqual(self.shading_test(vec([0,1,0]), vec([0,1,0]), 1, 0.7), 0.7)
        # distance does not attenuate
        self.assertAlmostEqual(self.shading_test(vec([0,1,0]), vec([0,1,0]), 25, 0.7), 0.7)
        # unnormalized normal
        self.assertAlmostEqual(self.shading_test(vec([0,4,0]), vec([0,1,0]), 3, 0.7), 0.7)
        # light at 60 degrees
        self.assertAlmostEqual(self.shading_test(vec([0,1,0]), vec([0,1,np.sqrt(3)]), 1, 1.0), 0.5)

    def test_light_behind_surface(self):
        self.assertEqual(self.shading_test(vec([0,1,0]), vec([0,-1,0]), 2, 1.0), 0.0)
        self.assertEqual(self.shading_test(vec([0,1,0]), vec([0,-1,0]), 2, 1.0, v=vec([0,1,0]), specular=10), 0.0)

    def test_specular_disabled_ignores_view(self):
        rng = np.random.default_rng(3)
        n = vec([0,1,0])
        l = vec([1,2,0.5])
        for specular in (0, -1, -100):
            expected = self.shading_test(n, l, 3, 0.8, v=vec([0,1,0]), specular=specular)
            for v in rng.normal(size=(10, 3)):
                self.assertEqual(self.shading_test(n, l, 3, 0.8, v=v, specular=specular), expected)

    def test_light_at_surface_point(self):
        light = PointLight(vec([1,2,3]), 1.0)
        value = light.illuminate(vec([0,1,0]), vec([1,2,3]), vec([0,1,0]), 10)
        self.assertEqual(value, 0.0)

    def test_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            PointLight(vec([0,0,0]), -0.1)
        with self.assertRaises(ValueError):
            PointLight(vec([0,0]), 1.0)
        with self.assertRaises(ValueError):
            AmbientLight(-1)


class TestDirectionalLight(unittest.TestCase):

    def test_diffuse_ignores_position(self):
        light = DirectionalLight(vec([0,3,0]), 0.4)
        for p in (vec([0,0,0]), vec([10,-5,2])):
            self.assertAlmostEqual(light.illuminate(vec([0,1,0]), p, vec([1,0,0]), -1), 0.4)

    def test_specular(self):
        light = DirectionalLight(vec([0,1,0]), 1.0)
        n = vec([0,1,0])
        # mirror direction equals view direction: full highlight
        self.assertAlmostEqual(light.illuminate(n, vec([0,0,0]), vec([0,1,0]), 2), 2.0)
        # 60 degrees off the mirror direction: 0.5 ** 2
        self.assertAlmostEqual(light.illuminate(n, vec([0,0,0]), vec([0,1,np.sqrt(3)]), 2), 1.25)
        # zero-length view vector contributes no highlight
        self.assertAlmostEqual(light.illuminate(n, vec([0,0,0]), vec([0,0,0]), 2), 1.0)

    def test_rejects_zero_direction(self):
        with self.assertRaises(ValueError):
            DirectionalLight(vec([0,0,0]), 1.0)


class TestComputeLighting(unittest.TestCase):

    def test_sums_all_lights(self):
        lights = [
            AmbientLight(0.2),
            PointLight(vec([2,1,0]), 0.6),
            DirectionalLight(vec([1,4,4]), 0.2),
        ]
        n, p, v = vec([0,1,-1]), vec([0,0,3]), vec([0,0,-1])
        total = compute_lighting(lights, n, p, v, 500)
        self.assertAlmostEqual(total, sum(light.illuminate(n, p, v, 500) for light in lights))
        self.assertGreater(total, 0.2)
        # order does not matter
        self.assertAlmostEqual(total, compute_lighting(lights[::-1], n, p, v, 500))


if __name__ == '__main__':
    unittest.main()
