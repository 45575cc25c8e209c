import numpy as np

class Color:

    def __init__(self, r=0., g=0., b=0.):
        """Create a color from channel values on the 0-255 scale.

        Channels are kept as unclamped floats until cap() is called.
        """
        self.r = float(r)
        self.g = float(g)
        self.b = float(b)

    def __mul__(self, k):
        return Color(self.r * k, self.g * k, self.b * k)

    def __add__(self, other):
        """Blend two colors: each channel is the average of the two."""
        return Color(
            (self.r + other.r) / 2,
            (self.g + other.g) / 2,
            (self.b + other.b) / 2)

    def cap(self):
        """Return a copy with every channel clamped into [0, 255]."""
        r, g, b = np.clip([self.r, self.g, self.b], 0, 255)
        return Color(r, g, b)

    def ints(self):
        return (int(self.r), int(self.g), int(self.b))

    def as_array(self):
        return np.array([self.r, self.g, self.b], dtype=np.float64)

    def __eq__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return (self.r, self.g, self.b) == (other.r, other.g, other.b)

    def __repr__(self):
        return f"Color({self.r}, {self.g}, {self.b})"


BLACK = Color(0x00, 0x00, 0x00)
WHITE = Color(0xff, 0xff, 0xff)
RED = Color(0xff, 0x00, 0x00)
