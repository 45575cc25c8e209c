import unittest
import numpy as np
from ray import *
from color import Color, BLACK, WHITE, RED
from utils import normalize, vec, dot, magnitude, magnitude2


class TestVector(unittest.TestCase):

    def test_arithmetic(self):
        a = vec([1, 2, 3])
        b = vec([4, -1, 0])
        np.testing.assert_array_equal(a + b, [5, 1, 3])
        np.testing.assert_array_equal(a - b, [-3, 3, 3])
        np.testing.assert_array_equal(a * 2, [2, 4, 6])
        np.testing.assert_array_equal(a / 2, [0.5, 1, 1.5])
        # operations return new arrays
        np.testing.assert_array_equal(a, [1, 2, 3])

    def test_magnitude(self):
        v = vec([3, 4, 0])
        self.assertEqual(magnitude2(v), 25)
        self.assertEqual(magnitude(v), 5)
        np.testing.assert_almost_equal(normalize(v), [0.6, 0.8, 0])

    def test_normalize_is_unit(self):
        for v in ([1, 0, 0], [2, 3, 4], [-7, 0.5, 100], [1e-3, 1e-3, 0]):
            self.assertAlmostEqual(magnitude(normalize(vec(v))), 1.0)

    def test_normalize_zero_is_nan(self):
        with np.errstate(invalid='ignore', divide='ignore'):
            n = normalize(vec([0, 0, 0]))
        self.assertTrue(np.all(np.isnan(n)))

    def test_dot_symmetric(self):
        a = vec([1.5, -2, 3])
        b = vec([0.25, 8, -1])
        self.assertEqual(dot(a, b), dot(b, a))
        self.assertEqual(dot(a, b), 1.5 * 0.25 - 16 - 3)


class TestSphereIntersect(unittest.TestCase):

    def test_unitsphere_hits(self):
        unit_sphere = Sphere(vec([0, 0, 0]), 1.0)
        # dead center: b = -6, c = 8, disc = 4, t is not halved
        hit = unit_sphere.intersect(Ray(vec([0, 0, -3]), vec([0, 0, 1])))
        self.assertTrue(hit)
        self.assertEqual(hit.t, 4.0)
        np.testing.assert_array_equal(hit.point, [0, 0, 1])
        np.testing.assert_array_equal(hit.normal, [0, 0, 1])

    def test_tangent_hit(self):
        unit_sphere = Sphere(vec([0, 0, 0]), 1.0)
        hit = unit_sphere.intersect(Ray(vec([1, 0, -3]), vec([0, 0, 1])))
        self.assertTrue(hit)
        self.assertEqual(hit.t, 6.0)

    def test_behind_origin_still_hits(self):
        unit_sphere = Sphere(vec([0, 0, 0]), 1.0)
        hit = unit_sphere.intersect(Ray(vec([0, 0, 3]), vec([0, 0, 1])))
        self.assertTrue(hit)
        self.assertEqual(hit.t, -8.0)

    def test_unitsphere_misses(self):
        unit_sphere = Sphere(vec([0, 0, 0]), 1.0)
        hit = unit_sphere.intersect(Ray(vec([2, 0, -3]), vec([0, 0, 1])))
        self.assertFalse(hit)
        self.assertIs(hit, no_hit)
        self.assertEqual(hit.t, np.inf)

    def test_hit_truth_is_plain_bool(self):
        # intersect produces numpy float t values
        hit = Hit(np.float64(4.0))
        self.assertIs(hit.__bool__(), True)
        self.assertIs(no_hit.__bool__(), False)
        self.assertIs(Hit(np.float64(np.inf)).__bool__(), False)
        self.assertFalse(not hit)

    def test_formula(self):
        sphere = Sphere(vec([-1, -5, -7]), 3.0)
        ray = Ray(vec([0.5, -4, 2]), normalize(vec([-0.1, -0.2, -1])))
        oc = ray.origin - sphere.center
        b = 2 * np.dot(oc, ray.direction)
        c = np.dot(oc, oc) - 9.0
        disc = b * b - 4 * c
        self.assertGreaterEqual(disc, 0)
        hit = sphere.intersect(ray)
        self.assertEqual(hit.t, -b - np.sqrt(disc))
        np.testing.assert_array_equal(hit.point, ray.origin + ray.direction * hit.t)

    def test_normal(self):
        sphere = Sphere(vec([1, 2, 3]), 2.0)
        np.testing.assert_array_equal(sphere.normal(vec([1, 2, 5])), [0, 0, 1])
        np.testing.assert_array_equal(sphere.normal(vec([-1, 2, 3])), [-1, 0, 0])


class TestColor(unittest.TestCase):

    def test_constants(self):
        self.assertEqual(BLACK.ints(), (0, 0, 0))
        self.assertEqual(WHITE.ints(), (255, 255, 255))
        self.assertEqual(RED.ints(), (255, 0, 0))

    def test_add_averages(self):
        a = Color(10, 20, 255)
        b = Color(30, 0, 100)
        self.assertEqual(a + b, Color(20, 10, 177.5))
        self.assertEqual(RED + WHITE, Color(255, 127.5, 127.5))

    def test_scale(self):
        self.assertEqual(WHITE * 0.5, Color(127.5, 127.5, 127.5))
        self.assertEqual(RED * -1, Color(-255, 0, 0))

    def test_cap(self):
        c = Color(-10, 300, 42.5)
        capped = c.cap()
        self.assertEqual(capped, Color(0, 255, 42.5))
        self.assertEqual(capped.cap(), capped)
        # original untouched
        self.assertEqual(c, Color(-10, 300, 42.5))

    def test_ints_truncate(self):
        self.assertEqual(Color(70.9, 0.2, 254.99).ints(), (70, 0, 254))


class TestShade(unittest.TestCase):

    def setUp(self):
        self.sphere = Sphere(vec([320, 240, 50]), 150)
        self.light = Sphere(vec([0, 0, 0]), 1)

    def test_center_pixel(self):
        # t = -200, point (320, 240, -200); the diffuse term is negative
        ray = primary_ray(320, 240)
        hit = self.sphere.intersect(ray)
        self.assertEqual(hit.t, -200.0)
        L = normalize(self.light.center - hit.point)
        diffuse = np.dot(L, vec([0, 0, -1]))
        self.assertLess(diffuse, 0)
        pixel = shade(hit, self.light)
        self.assertAlmostEqual(pixel.r, (255 + 255 * diffuse) / 2)
        self.assertEqual(pixel.ints(), (70, 0, 0))

    def test_trace_hit(self):
        pixel = trace(primary_ray(320, 240), self.sphere, self.light)
        self.assertEqual(pixel.ints(), (70, 0, 0))

    def test_shade_blend(self):
        # light straight along the normal: diffuse is 1, so red blends with white
        hit = Hit(1.0, vec([0, 0, 1]), vec([0, 0, 1]))
        light = Sphere(vec([0, 0, 5]), 1)
        self.assertEqual(shade(hit, light), Color(255, 127.5, 127.5))

    def test_background(self):
        self.assertIs(trace(primary_ray(0, 0), self.sphere, self.light), BLACK)

    def test_silhouette(self):
        # hit exactly when the pixel is within the radius of the center
        self.assertTrue(self.sphere.intersect(primary_ray(470, 240)))
        self.assertFalse(self.sphere.intersect(primary_ray(471, 240)))
        self.assertTrue(self.sphere.intersect(primary_ray(320, 90)))
        self.assertFalse(self.sphere.intersect(primary_ray(320, 89)))

    def test_render_small(self):
        img = render_image(self.sphere, self.light, nx=8, ny=4)
        self.assertEqual(img.shape, (4, 8, 3))
        # far corner of a tiny image is outside the sphere
        np.testing.assert_array_equal(img, np.zeros((4, 8, 3)))


if __name__ == '__main__':
    unittest.main()
