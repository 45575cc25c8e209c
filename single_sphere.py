from utils import *
from ray import *
from cli import render


# One red sphere facing the camera, centered on the image
sphere = Sphere(vec([WIDTH / 2, HEIGHT / 2, 50]), 150)

# Point light at the origin, modelled as a tiny sphere
light = Sphere(vec([0, 0, 0]), 1)


def main():
    render(sphere, light)


if __name__ == '__main__':
    main()
