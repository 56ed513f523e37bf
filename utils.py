import numpy as np


def vec(list):
    """Handy shorthand to make a double-precision float array."""
    return np.array(list, dtype=np.float64)

def frozen_vec(list, name="vector"):
    """Make a read-only 3D vector, rejecting anything that is not a finite 3-vector."""
    v = vec(list)
    if v.shape != (3,):
        raise ValueError(f"{name} must have 3 components, got shape {v.shape}")
    if not np.all(np.isfinite(v)):
        raise ValueError(f"{name} must be finite, got {v}")
    v.setflags(write=False)
    return v


def frozen_color(list, name="color"):
    """Make a read-only RGB color, rejecting channels outside [0, 255]."""
    c = vec(list)
    if c.shape != (3,):
        raise ValueError(f"{name} must have 3 channels, got shape {c.shape}")
    if not np.all((c >= 0) & (c <= 255)):
        raise ValueError(f"{name} channels must be in [0, 255], got {c}")
    c.setflags(write=False)
    return c


# Vector algebra. None of these modify their arguments.

def add(a, b):
    return a + b

def subtract(a, b):
    return a - b

def scale(v, s):
    """Multiply the vector v by the scalar s."""
    return v * s

def dot(a, b):
    return float(np.dot(a, b))

def magnitude(v):
    """Euclidean length of v; 0 for the zero vector."""
    return float(np.sqrt(dot(v, v)))

def surface_normal(point, center):
    """Outward normal of a sphere at point.

    The result is not normalized: its length is the distance from the
    center. compute_lighting divides by magnitudes itself.
    """
    return subtract(point, center)
