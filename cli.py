import time
from ray import render_image, WIDTH, HEIGHT
from utils import write_ppm, save_image

FILE_NAME = "out.ppm"


def render(sphere, light, output_path=FILE_NAME, nx=WIDTH, ny=HEIGHT,
           preview_path=None, verbose=True):
    """Render the scene and write it out as a plain PPM file.

    Parameters:
      sphere : Sphere -- the object to draw
      light : Sphere -- the point light (only its center matters)
      output_path : str -- where the P3 file goes, relative to the working directory
      nx, ny : int -- image width and height in pixels
      preview_path : str -- if given, also save an 8-bit copy there (e.g. a .png)
      verbose : bool -- print per-row progress and a summary
    Return:
      (ny, nx, 3) array -- the rendered channel values
    """
    start = time.time()
    img = render_image(sphere, light, nx, ny, verbose=verbose)
    write_ppm(output_path, img)
    if preview_path is not None:
        save_image(preview_path, img)
    if verbose:
        print(f"wrote {nx}x{ny} image to {output_path} in {time.time() - start:.2f}s")
    return img
