import math
import numpy as np
from PIL import Image
from utils import vec

"""
Mapping between canvas pixels, centered canvas coordinates and the viewport.

Centered coordinates put (0, 0) in the middle of the canvas with y pointing
up; raw canvas coordinates put (0, 0) at the top-left with y pointing down.
"""


class Viewport:

    def __init__(self, width=1., height=1., distance=1.):
        """The rectangle in camera space that the canvas is projected onto.

        Parameters:
          width, height : float -- size of the rectangle
          distance : float -- its distance from the camera along +z
        """
        if not width > 0 or not height > 0:
            raise ValueError(f"viewport size must be positive, got {width}x{height}")
        if not distance > 0:
            raise ValueError(f"viewport distance must be positive, got {distance}")
        self.width = float(width)
        self.height = float(height)
        self.distance = float(distance)


def translate_to_center(width, height, x, y):
    """Centered canvas coordinates -> raw canvas coordinates."""
    return (width / 2 + x, height / 2 - y)

def translate_from_center(width, height, x1, y1):
    """Raw canvas coordinates -> centered canvas coordinates."""
    return (x1 - width / 2, height / 2 - y1)

def canvas_to_viewport(x, y, canvas_width, canvas_height, viewport):
    """Direction from the camera through the centered canvas point (x, y)."""
    return vec([
        x * viewport.width / canvas_width,
        y * viewport.height / canvas_height,
        viewport.distance,
    ])


class Canvas:

    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), np.uint8)

    def row_coords(self):
        """Centered y coordinate of each row, top row first."""
        return range(self.height // 2, self.height // 2 - self.height, -1)

    def column_coords(self):
        """Centered x coordinate of each column, leftmost first."""
        return range(-(self.width // 2), self.width - self.width // 2)

    def put_pixel(self, x, y, color):
        """Store color at centered coordinates (x, y), clamping channels to [0, 255].

        Pixels falling outside the canvas are ignored.
        """
        x1, y1 = translate_to_center(self.width, self.height, x, y)
        x1, y1 = math.floor(x1), math.floor(y1)
        if not (0 <= x1 < self.width and 0 <= y1 < self.height):
            return
        self.pixels[y1, x1] = np.clip(np.round(color), 0, 255).astype(np.uint8)

    def put_row(self, y, colors):
        """Store a full row of colors (left to right) at centered row y."""
        for x, color in zip(self.column_coords(), colors):
            self.put_pixel(x, y, color)

    def to_image(self):
        return Image.fromarray(self.pixels)

    def save(self, filename):
        self.to_image().save(filename)
