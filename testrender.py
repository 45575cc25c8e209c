import contextlib
import io
import os
import tempfile
import unittest
import numpy as np
from PIL import Image
from ray import *
from cli import render, FILE_NAME
from utils import write_ppm, save_image
import single_sphere


def load_rgb(path):
    return np.array(Image.open(path).convert('RGB'))


class TestWritePPM(unittest.TestCase):

    def test_layout(self):
        img = np.array([[[255, 0, 0], [70.9, 12.2, 3.0]]])
        f = io.StringIO()
        write_ppm(f, img)
        self.assertEqual(f.getvalue(), "P3\n2\n1\n255\n255\n0\n0\n70\n12\n3\n")

    def test_row_major(self):
        img = np.zeros((2, 3, 3))
        img[1, 0] = [1, 2, 3]
        f = io.StringIO()
        write_ppm(f, img)
        values = f.getvalue().split()[4:]
        self.assertEqual(len(values), 2 * 3 * 3)
        self.assertEqual(values[9:12], ['1', '2', '3'])


class TestMainWritesFile(unittest.TestCase):

    @classmethod
    def setUpClass(cls):
        cls.tmpdir = tempfile.TemporaryDirectory()
        cwd = os.getcwd()
        os.chdir(cls.tmpdir.name)
        try:
            with contextlib.redirect_stdout(io.StringIO()) as out:
                single_sphere.main()
        finally:
            os.chdir(cwd)
        cls.progress = out.getvalue().splitlines()
        cls.path = os.path.join(cls.tmpdir.name, FILE_NAME)
        with open(cls.path) as f:
            cls.lines = f.read().splitlines()

    @classmethod
    def tearDownClass(cls):
        cls.tmpdir.cleanup()

    def pixel(self, x, y):
        i = 4 + 3 * (y * WIDTH + x)
        return tuple(int(v) for v in self.lines[i:i + 3])

    def test_scene(self):
        np.testing.assert_array_equal(single_sphere.sphere.center, [320, 240, 50])
        self.assertEqual(single_sphere.sphere.radius, 150)
        np.testing.assert_array_equal(single_sphere.light.center, [0, 0, 0])

    def test_header(self):
        self.assertEqual(self.lines[:4], ['P3', '640', '480', '255'])

    def test_pixel_count(self):
        values = self.lines[4:]
        self.assertEqual(len(values), WIDTH * HEIGHT * 3)
        ints = np.array([int(v) for v in values])
        self.assertTrue(np.all(ints >= 0))
        self.assertTrue(np.all(ints <= 255))

    def test_center_and_corner(self):
        self.assertEqual(self.pixel(0, 0), (0, 0, 0))
        self.assertEqual(self.pixel(320, 240), (70, 0, 0))

    def test_pixels_match_trace(self):
        sphere, light = single_sphere.sphere, single_sphere.light
        for (x, y) in [(170, 240), (470, 240), (320, 90), (320, 390), (400, 300), (639, 479)]:
            self.assertEqual(self.pixel(x, y), trace(primary_ray(x, y), sphere, light).ints())

    def test_silhouette_in_file(self):
        # every pixel inside the disc is shaded, everything outside stays black
        self.assertNotEqual(self.pixel(470, 240)[0], 0)
        self.assertEqual(self.pixel(471, 240), (0, 0, 0))

    def test_progress(self):
        self.assertEqual(self.progress[0], "rendering row 1/480...")
        self.assertEqual(self.progress[479], "rendering row 480/480...")
        self.assertTrue(self.progress[-1].startswith("wrote 640x480 image to out.ppm"))

    def test_pillow_reads_output(self):
        img = load_rgb(self.path)
        self.assertEqual(img.shape, (HEIGHT, WIDTH, 3))
        np.testing.assert_array_equal(img[240, 320], [70, 0, 0])
        np.testing.assert_array_equal(img[0, 0], [0, 0, 0])


class TestPreview(unittest.TestCase):

    def test_png_preview(self):
        sphere = Sphere(vec([4, 3, 5]), 3)
        light = Sphere(vec([0, 0, 0]), 1)
        with tempfile.TemporaryDirectory() as d:
            ppm = os.path.join(d, 'small.ppm')
            png = os.path.join(d, 'small.png')
            img = render(sphere, light, output_path=ppm, nx=8, ny=6,
                         preview_path=png, verbose=False)
            np.testing.assert_array_equal(load_rgb(png), img.astype(np.uint8))
            np.testing.assert_array_equal(load_rgb(ppm), img.astype(np.uint8))
            with open(ppm) as f:
                self.assertEqual(f.read().splitlines()[:4], ['P3', '8', '6', '255'])

    def test_save_clamps(self):
        with tempfile.TemporaryDirectory() as d:
            png = os.path.join(d, 'c.png')
            save_image(png, np.array([[[300.0, -4.0, 128.7]]]))
            np.testing.assert_array_equal(load_rgb(png)[0, 0], [255, 0, 128])


if __name__ == '__main__':
    unittest.main()
