import unittest
import numpy as np
from ray import *
from geometry import Hit, Sphere, NO_INTERSECTION, intersect_ray_sphere, no_hit
from lights import AmbientLight, PointLight
from materials import Material
from utils import vec

gray = Material(vec([128, 128, 128]))


class TestSphereIntersect(unittest.TestCase):

    def test_unitsphere_hits(self):
        unit_sphere = Sphere(vec([0,0,0]), 1.0, gray)
        # dead center hit: both roots, the near one at distance - radius
        t1, t2 = unit_sphere.intersect(Ray(vec([2.0,0.0,0.0]), vec([-1.0,0.0,0.0])))
        self.assertAlmostEqual(t1, 3.0)
        self.assertAlmostEqual(t2, 1.0)
        # dead center with non-unit direction
        t1, t2 = unit_sphere.intersect(Ray(vec([3.0,0.0,0.0]), vec([-2.0,0.0,0.0])))
        self.assertAlmostEqual(t1, 2.0)
        self.assertAlmostEqual(t2, 1.0)
        # off center hit
        t1, t2 = unit_sphere.intersect(Ray(vec([1.0,0.5,0.0]), vec([-1.0,0.0,0.0])))
        self.assertAlmostEqual(t2, 1 - np.sin(np.pi/3))
        # center hit from off axis
        t1, t2 = unit_sphere.intersect(Ray(vec([2.0,3.0,4.0]), vec([-2.0,-3.0,-4.0])))
        self.assertAlmostEqual(t2, 1 - 1 / np.sqrt(29))

    def test_center_aimed_distance(self):
        sphere = Sphere(vec([-1,-5,-7]), 3.0, gray)
        for origin in (vec([10,2,3]), vec([-1,-5,20]), vec([4,4,4])):
            direction = sphere.center - origin
            t1, t2 = intersect_ray_sphere(origin, direction, sphere)
            self.assertTrue(np.isfinite(t1) and np.isfinite(t2))
            # t is measured in units of |direction|
            dist = np.linalg.norm(direction)
            self.assertAlmostEqual(min(t for t in (t1, t2) if t > 0) * dist, dist - sphere.radius)

    def test_roots_behind_origin_are_returned(self):
        sphere = Sphere(vec([0,0,0]), 1.0, gray)
        t1, t2 = intersect_ray_sphere(vec([0,0,5]), vec([0,0,1]), sphere)
        self.assertAlmostEqual(t1, -4.0)
        self.assertAlmostEqual(t2, -6.0)

    def test_unitsphere_misses(self):
        unit_sphere = Sphere(vec([0,0,0]), 1.0, gray)
        # on axis miss
        roots = unit_sphere.intersect(Ray(vec([2.0,3.0,0.0]), vec([-1.0,0.0,0.0])))
        self.assertEqual(roots, NO_INTERSECTION)
        self.assertFalse(np.any(np.isnan(roots)))

    def test_zero_direction_rejected(self):
        sphere = Sphere(vec([0,0,0]), 1.0, gray)
        with self.assertRaises(ValueError):
            intersect_ray_sphere(vec([2,0,0]), vec([0,0,0]), sphere)

    def test_bad_spheres_rejected(self):
        for radius in (0, -1.0, np.nan):
            with self.assertRaises(ValueError):
                Sphere(vec([0,0,0]), radius, gray)
        with self.assertRaises(ValueError):
            Sphere(vec([0,0]), 1.0, gray)

    def test_sphere_exposes_material(self):
        mat = Material(vec([10, 20, 30]), specular=42)
        sphere = Sphere([1, 2, 3], 2, mat)
        np.testing.assert_array_equal(sphere.color, [10, 20, 30])
        self.assertEqual(sphere.specular, 42.0)
        self.assertFalse(sphere.center.flags.writeable)


class TestSceneIntersect(unittest.TestCase):

    def test_nearest_wins(self):
        near = Sphere(vec([0,0,5]), 1.0, gray)
        far = Sphere(vec([0,0,10]), 1.0, gray)
        scene = Scene([far, near], [])
        hit = scene.intersect(Ray(vec([0,0,0]), vec([0,0,1])))
        self.assertIs(hit.sphere, near)
        self.assertAlmostEqual(hit.t, 4.0)

    def test_hit_carries_t_and_sphere_only(self):
        sphere = Sphere(vec([0,0,5]), 1.0, gray)
        hit = Scene([sphere], []).intersect(Ray(vec([0,0,0]), vec([0,0,1])))
        self.assertIsInstance(hit, Hit)
        self.assertIs(hit.sphere, sphere)
        self.assertAlmostEqual(hit.t, 4.0)
        self.assertFalse(hasattr(hit, "point"))
        self.assertFalse(hasattr(hit, "normal"))
        self.assertIsNone(no_hit.sphere)

    def test_tie_goes_to_first_sphere(self):
        first = Sphere(vec([0,0,5]), 1.0, Material(vec([255,0,0])))
        second = Sphere(vec([0,0,5]), 1.0, Material(vec([0,0,255])))
        ray = Ray(vec([0,0,0]), vec([0,0,1]))
        for _ in range(3):
            self.assertIs(Scene([first, second], []).intersect(ray).sphere, first)
            self.assertIs(Scene([second, first], []).intersect(ray).sphere, second)

    def test_start_bound_is_strict(self):
        # origin inside the sphere: roots at 1.5 and -0.5
        sphere = Sphere(vec([0,0,0.5]), 1.0, gray)
        scene = Scene([sphere], [])
        self.assertAlmostEqual(scene.intersect(Ray(vec([0,0,0]), vec([0,0,1]), start=1.)).t, 1.5)
        self.assertEqual(scene.intersect(Ray(vec([0,0,0]), vec([0,0,1]), start=1.5)).t, np.inf)

    def test_end_bound(self):
        scene = Scene([Sphere(vec([0,0,10]), 1.0, gray)], [])
        self.assertEqual(scene.intersect(Ray(vec([0,0,0]), vec([0,0,1]), end=9.)).t, np.inf)
        self.assertAlmostEqual(scene.intersect(Ray(vec([0,0,0]), vec([0,0,1]), end=9.5)).t, 9.0)

    def test_empty_scene(self):
        self.assertEqual(Scene([], []).intersect(Ray(vec([0,0,0]), vec([0,0,1]))).t, np.inf)


class TestTraceRay(unittest.TestCase):

    def test_miss_returns_background(self):
        bg = vec([12, 34, 56])
        scene = Scene([Sphere(vec([0,0,10]), 1.0, gray)], [AmbientLight(1.0)], bg_color=bg)
        color = trace_ray(Ray(vec([0,0,0]), vec([0,1,0])), scene)
        np.testing.assert_array_equal(color, bg)
        self.assertIs(color, scene.bg_color)

    def test_default_background_is_white(self):
        color = trace_ray(Ray(vec([0,0,0]), vec([0,0,1])), Scene([], []))
        np.testing.assert_array_equal(color, [255, 255, 255])
        self.assertFalse(BG_COLOR.flags.writeable)
        np.testing.assert_array_equal(Scene([], []).camera_position, [0, 0, 0])

    def test_background_channels_checked(self):
        for bg in ([999, -5, 0], [0, 0, 256], [0, np.nan, 0], [0, 0]):
            with self.assertRaises(ValueError):
                Scene([], [], bg_color=bg)
        scene = Scene([], [], bg_color=[0, 128, 255])
        self.assertFalse(scene.bg_color.flags.writeable)

    def test_ambient_scales_color(self):
        scene = Scene([Sphere(vec([0,0,5]), 1.0, Material(vec([200,100,50])))], [AmbientLight(0.5)])
        color = trace_ray(Ray(vec([0,0,0]), vec([0,0,1])), scene)
        np.testing.assert_allclose(color, [100, 50, 25])

    def test_diffuse_from_camera_light(self):
        # hit at (0,0,4) with the normal pointing straight back at the light
        mat = Material(vec([100,200,250]))
        scene = Scene([Sphere(vec([0,0,5]), 1.0, mat)],
                      [AmbientLight(0.2), PointLight(vec([0,0,0]), 0.6)])
        color = trace_ray(Ray(vec([0,0,0]), vec([0,0,1])), scene)
        np.testing.assert_allclose(color, [80, 160, 200])

    def test_specular_highlight_is_not_clamped(self):
        mat = Material(vec([100,200,250]), specular=10)
        scene = Scene([Sphere(vec([0,0,5]), 1.0, mat)],
                      [AmbientLight(0.2), PointLight(vec([0,0,0]), 0.6)])
        color = trace_ray(Ray(vec([0,0,0]), vec([0,0,1])), scene)
        # ambient 0.2 + diffuse 0.6 + specular 0.6
        np.testing.assert_allclose(color, [140, 280, 350])

    def test_hit_point_formulas(self):
        ray = Ray(vec([1,0,0]), vec([0,0,1]))
        np.testing.assert_allclose(hit_point(ray, 2.0), [-1, 0, 2])
        np.testing.assert_allclose(hit_point(ray, 2.0, textbook=True), [1, 0, 2])

    def test_view_direction_formulas(self):
        ray = Ray(vec([1,0,0]), vec([0,0,1]))
        camera_position = vec([0,1,0])
        point = vec([1,0,2])
        np.testing.assert_allclose(view_direction(ray, point, camera_position), [0, -1, -1])
        np.testing.assert_allclose(view_direction(ray, point, camera_position, textbook=True), [-1, 1, -2])

    def test_modes_agree_for_camera_at_origin(self):
        import example_scene
        camera, scene = example_scene.camera, example_scene.scene
        for x, y in [(0, -50), (120, 10), (-150, -20), (0, -280), (250, 250)]:
            ray = camera.generate_ray(x, y, 600, 600)
            np.testing.assert_allclose(
                trace_ray(ray, scene), trace_ray(ray, scene, textbook=True), rtol=1e-9)

    def test_modes_differ_for_offset_origin(self):
        scene = Scene([Sphere(vec([0,0,5]), 1.0, gray)], [PointLight(vec([0,0,0]), 1.0)])
        ray = Ray(vec([0,0.5,0]), vec([0,0,1]), start=0.)
        as_written = trace_ray(ray, scene)
        textbook = trace_ray(ray, scene, textbook=True)
        self.assertFalse(np.allclose(as_written, textbook))


class TestCamera(unittest.TestCase):

    def test_default_camera(self):
        cam = Camera()
        ray = cam.generate_ray(0, 0, 600, 600)
        np.testing.assert_almost_equal(ray.origin, vec([0,0,0]))
        np.testing.assert_almost_equal(ray.direction, vec([0,0,1]))
        self.assertEqual(ray.start, T_MIN)
        self.assertEqual(ray.end, T_MAX)
        # corners of a 1x1 viewport at distance 1
        ray = cam.generate_ray(-300, 300, 600, 600)
        np.testing.assert_almost_equal(ray.direction, vec([-0.5,0.5,1]))

    def test_viewport_and_aspect(self):
        cam = Camera(vec([1,2,3]), Viewport(2, 1, 3))
        ray = cam.generate_ray(400, -100, 800, 400)
        np.testing.assert_almost_equal(ray.origin, vec([1,2,3]))
        np.testing.assert_almost_equal(ray.direction, vec([1,-0.25,3]))


class TestRenderImage(unittest.TestCase):

    def test_small_render(self):
        import example_scene
        canvas = render_image(example_scene.camera, example_scene.scene, 8, 6, verbose=False)
        self.assertEqual(canvas.pixels.shape, (6, 8, 3))
        # the top-left ray passes above every sphere
        np.testing.assert_array_equal(canvas.pixels[0, 0], [255, 255, 255])
        # the bottom-center ray hits the red sphere
        r, g, b = canvas.pixels[5, 4]
        self.assertGreater(r, 0)
        self.assertEqual(g, 0)
        self.assertEqual(b, 0)

    def test_parallel_matches_sequential(self):
        import example_scene
        seq = render_image(example_scene.camera, example_scene.scene, 8, 6, verbose=False)
        par = render_image(example_scene.camera, example_scene.scene, 8, 6, processes=2, verbose=False)
        np.testing.assert_array_equal(seq.pixels, par.pixels)


if __name__ == '__main__':
    unittest.main()
