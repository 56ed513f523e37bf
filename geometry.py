import numpy as np
from utils import frozen_vec, subtract, dot

# Root pair returned when a ray misses a sphere
NO_INTERSECTION = (np.inf, np.inf)


class Hit:
    def __init__(self, t, sphere=None):
        """Create a Hit with the given data.

        Parameters:
          t : float -- the t value of the nearest intersection along the ray
          sphere : Sphere -- the sphere that was hit

        The hit point and normal depend on which formula trace_ray uses, so
        they are not stored here.
        """
        self.t = t
        self.sphere = sphere

# Value to represent absence of an intersection
no_hit = Hit(np.inf)


def intersect_ray_sphere(origin, direction, sphere):
    """Solve |O + tD - C|^2 = r^2 for t.

    Parameters:
      origin : (3,) -- ray origin O
      direction : (3,) -- ray direction D, need not be unit length
      sphere : Sphere -- the sphere to intersect
    Return:
      (t1, t2) -- both roots regardless of sign, t1 >= t2, or
      NO_INTERSECTION when the discriminant is negative
    """
    a = dot(direction, direction)
    if a == 0:
        raise ValueError("ray direction must be non-zero")
    sphere_vec = subtract(origin, sphere.center)
    b = 2 * dot(sphere_vec, direction)
    c = dot(sphere_vec, sphere_vec) - sphere.radius * sphere.radius
    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return NO_INTERSECTION
    disc_sqrt = np.sqrt(discriminant)
    t1 = (-b + disc_sqrt) / (2 * a)
    t2 = (-b - disc_sqrt) / (2 * a)
    return (float(t1), float(t2))


class Sphere:

    def __init__(self, center, radius, material):
        """Create a sphere with the given center and radius.

        Parameters:
          center : (3,) -- a 3D point specifying the sphere's center
          radius : float -- a Python float specifying the sphere's radius, > 0
          material : Material -- color and specular exponent of the surface
        """
        radius = float(radius)
        if not radius > 0 or not np.isfinite(radius):
            raise ValueError(f"sphere radius must be positive, got {radius}")
        self.center = frozen_vec(center, "sphere center")
        self.radius = radius
        self.material = material

    @property
    def color(self):
        return self.material.color

    @property
    def specular(self):
        return self.material.specular

    def intersect(self, ray):
        """Both intersection parameters of ray with this sphere (see intersect_ray_sphere)."""
        return intersect_ray_sphere(ray.origin, ray.direction, self)

    def __repr__(self):
        return f"Sphere(center={self.center.tolist()}, radius={self.radius}, material={self.material!r})"
