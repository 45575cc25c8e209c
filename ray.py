import numpy as np
from geometry import Sphere, Hit, no_hit
from color import BLACK, WHITE, RED
from utils import *

"""
Core implementation of the ray tracer.  Primary rays are parallel to +z
(an orthographic camera), each pixel is tested against a single sphere, and
hits are shaded with an unclamped diffuse term.
"""

WIDTH = 640
HEIGHT = 480


class Ray:

    def __init__(self, origin, direction):
        """Create a ray with the given origin and direction.

        Parameters:
          origin : (3,) -- the start point of the ray, a 3D point
          direction : (3,) -- the direction of the ray (not normalized here)
        """
        # Convert these vectors to double to help ensure intersection
        # computations will be done in double precision
        self.origin = np.array(origin, np.float64)
        self.direction = np.array(direction, np.float64)


def primary_ray(x, y):
    """The camera ray through pixel (x, y): parallel to +z, starting on z=0."""
    return Ray(vec([x, y, 0]), vec([0, 0, 1]))


def shade(hit, light):
    """Compute the color of a surface point lit by a point light.

    Parameters:
      hit : Hit -- the intersection, with point and normal filled in
      light : Sphere -- the point light; only its center is used
    Return:
      Color -- capped to [0, 255]
    """
    light_vec = light.center - hit.point
    # negative values are kept; they pull the blend below plain red
    diffuse = dot(normalize(light_vec), normalize(hit.normal))
    pixel = RED + WHITE * diffuse
    return pixel.cap()


def trace(ray, sphere, light):
    hit = sphere.intersect(ray)
    if not hit:
        return BLACK
    return shade(hit, light)


def render_image(sphere, light, nx=WIDTH, ny=HEIGHT, verbose=False):
    """
    render a ray traced image.

    Returns an (ny, nx, 3) float array of capped 0-255 channel values,
    filled in row-major order, top row first.
    """
    output_image = np.zeros((ny, nx, 3), np.float64)

    for y in range(ny):
        if verbose:
            print(f"rendering row {y+1}/{ny}...")
        for x in range(nx):
            pixel = trace(primary_ray(x, y), sphere, light)
            output_image[y, x] = pixel.as_array()

    return output_image
