import numpy as np
from utils import frozen_vec, subtract, scale, dot, magnitude

"""
Light sources and the Phong-style lighting model.

Each light type answers illuminate(normal, point, view, specular) with the
scalar intensity it adds at a surface point. compute_lighting sums these in
list order.
"""


def _check_intensity(intensity):
    intensity = float(intensity)
    if not intensity >= 0 or not np.isfinite(intensity):
        raise ValueError(f"light intensity must be non-negative, got {intensity}")
    return intensity


def diffuse_specular(intensity, light_vec, normal, view, specular):
    """Diffuse plus specular contribution of a light arriving along light_vec.

    A term whose denominator contains a zero-length vector contributes 0.
    """
    total = 0.0
    n_dot_l = dot(normal, light_vec)
    if n_dot_l > 0:
        denom = magnitude(normal) * magnitude(light_vec)
        if denom > 0:
            total += intensity * n_dot_l / denom

    if specular > 0:
        reflected = subtract(scale(normal, 2 * n_dot_l), light_vec)
        r_dot_v = dot(reflected, view)
        if r_dot_v > 0:
            denom = magnitude(reflected) * magnitude(view)
            if denom > 0:
                total += intensity * (r_dot_v / denom) ** specular
    return total


class AmbientLight:

    def __init__(self, intensity):
        """Create an ambient light of given intensity
        """
        self.intensity = _check_intensity(intensity)

    def illuminate(self, normal, point, view, specular):
        """Ambient light reaches every point equally, with no diffuse or specular term."""
        return self.intensity

    def __repr__(self):
        return f"AmbientLight({self.intensity})"


class PointLight:
    def __init__(self, position, intensity):
        """Create a point light at given position and with given intensity"""
        self.position = frozen_vec(position, "light position")
        self.intensity = _check_intensity(intensity)

    def illuminate(self, normal, point, view, specular):
        """Compute the shading at a surface point due to this light."""
        light_vec = subtract(self.position, point)
        return diffuse_specular(self.intensity, light_vec, normal, view, specular)

    def __repr__(self):
        return f"PointLight({self.position.tolist()}, {self.intensity})"


class DirectionalLight:
    def __init__(self, direction, intensity):
        """Create a light shining from the given direction (pointing toward the light)."""
        self.direction = frozen_vec(direction, "light direction")
        if not np.any(self.direction):
            raise ValueError("light direction must be non-zero")
        self.intensity = _check_intensity(intensity)

    def illuminate(self, normal, point, view, specular):
        """Compute the shading at a surface point due to this light."""
        return diffuse_specular(self.intensity, self.direction, normal, view, specular)

    def __repr__(self):
        return f"DirectionalLight({self.direction.tolist()}, {self.intensity})"


def compute_lighting(lights, normal, point, view, specular):
    """Total light intensity at a surface point.

    Parameters:
      lights : sequence of lights, summed in order
      normal : (3,) -- surface normal, any non-zero length
      point : (3,) -- the surface point
      view : (3,) -- direction from the point toward the viewer
      specular : float -- specular exponent, <= 0 disables highlights
    Return:
      float -- unbounded intensity, used directly as a color multiplier
    """
    intensity = 0.0
    for light in lights:
        intensity += light.illuminate(normal, point, view, specular)
    return intensity
