import numpy as np
from PIL import Image

def vec(list):
    """Handy shorthand to make a double-precision float array."""
    return np.array(list, dtype=np.float64)

def dot(a, b):
    return np.dot(a, b)

def magnitude2(v):
    """Return the squared length of the vector v."""
    return np.dot(v, v)

def magnitude(v):
    return np.sqrt(magnitude2(v))

def normalize(v):
    """Return a unit vector in the direction of the vector v.

    The zero vector has no direction; the result is NaN in every component.
    """
    return v / magnitude(v)


def to_uint8(img):
    # truncate like int(), after clamping to the displayable range
    return np.clip(img, 0, 255).astype(np.uint8)

def save_image(filename, img):
    """Save an (ny, nx, 3) array of 0-255 channel values; format follows the extension."""
    Image.fromarray(to_uint8(img), 'RGB').save(filename)


def write_ppm(f, img):
    """Write an image in the plain-text PPM (P3) format.

    Argument f is an open text file or a path; img is an (ny, nx, 3) array
    of channel values already in [0, 255].  Each channel is written on its
    own line, truncated to an integer, pixels in row-major order.
    """
    if isinstance(f, (str, bytes)) or hasattr(f, '__fspath__'):
        with open(f, 'w') as out:
            write_ppm(out, img)
        return

    ny, nx = img.shape[0], img.shape[1]
    f.write(f"P3\n{nx}\n{ny}\n255\n")
    for row in img.astype(np.int64):
        f.write(''.join(f"{r}\n{g}\n{b}\n" for (r, g, b) in row))
