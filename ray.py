import numpy as np
from concurrent.futures import ProcessPoolExecutor
from canvas import Canvas, Viewport, canvas_to_viewport
from geometry import Hit, no_hit
from lights import compute_lighting
from utils import frozen_vec, frozen_color, add, subtract, scale, surface_normal

"""
Core implementation of the ray tracer.
"""

T_MIN = 1.  # rays start at the viewport, not at the eye
T_MAX = np.inf
BG_COLOR = frozen_color([255, 255, 255], "background color")


class Ray:

    def __init__(self, origin, direction, start=T_MIN, end=T_MAX):
        """Create a ray with the given origin and direction.

        Only parameters strictly between start and end count as hits.
        """
        self.origin = np.array(origin, np.float64)
        self.direction = np.array(direction, np.float64)
        self.start = start
        self.end = end


class Camera:

    def __init__(self, position=None, viewport=None):
        """Create a camera at position (default the origin) looking down +z through viewport.
        """
        self.position = frozen_vec(position if position is not None else [0, 0, 0], "camera position")
        self.viewport = viewport if viewport is not None else Viewport()

    def generate_ray(self, x, y, canvas_width, canvas_height):
        """Compute the ray through the centered canvas point (x, y).
        """
        direction = canvas_to_viewport(x, y, canvas_width, canvas_height, self.viewport)
        return Ray(self.position, direction)


class Scene:

    def __init__(self, spheres, lights, bg_color=BG_COLOR, camera_position=None):
        """Create a scene containing the given spheres and lights.

        Both sequences are copied into tuples and never change afterwards.
        """
        self.spheres = tuple(spheres)
        self.lights = tuple(lights)
        self.bg_color = frozen_color(bg_color, "background color")
        if camera_position is None:
            camera_position = [0, 0, 0]
        self.camera_position = frozen_vec(camera_position, "camera position")

    def intersect(self, ray):
        """Computes the first (smallest t) intersection between a ray and the scene.

        On equal t the sphere listed first wins.
        """
        closest_t = ray.end
        closest_sphere = None
        for sphere in self.spheres:
            for t in sphere.intersect(ray):
                if ray.start < t < closest_t:
                    closest_t = t
                    closest_sphere = sphere
        if closest_sphere is None:
            return no_hit
        return Hit(closest_t, closest_sphere)


def hit_point(ray, t, textbook=False):
    """Point at parameter t.

    The default evaluates O + t(D - O), which only equals the usual O + tD
    when the ray starts at the origin. textbook=True gives O + tD.
    """
    if textbook:
        return add(ray.origin, scale(ray.direction, t))
    return add(ray.origin, scale(subtract(ray.direction, ray.origin), t))

def view_direction(ray, point, camera_position, textbook=False):
    """Direction from the surface toward the viewer.

    The default is -D - camera_position; textbook=True gives camera_position - P.
    """
    if textbook:
        return subtract(camera_position, point)
    return subtract(scale(ray.direction, -1), camera_position)


def trace_ray(ray, scene, textbook=False):
    """Color seen along ray: the nearest sphere's color scaled by its lighting.

    Returns scene.bg_color when nothing is hit. Channels are not clamped.
    """
    hit = scene.intersect(ray)
    if hit.t == np.inf:
        return scene.bg_color

    sphere = hit.sphere
    point = hit_point(ray, hit.t, textbook)
    normal = surface_normal(point, sphere.center)
    view = view_direction(ray, point, scene.camera_position, textbook)
    intensity = compute_lighting(scene.lights, normal, point, view, sphere.specular)
    return scale(sphere.color, intensity)


def render_row(camera, scene, y, nx, ny, textbook=False):
    """Colors of one centered row y of an nx by ny canvas, left to right."""
    return [
        trace_ray(camera.generate_ray(x, y, nx, ny), scene, textbook)
        for x in range(-(nx // 2), nx - nx // 2)
    ]

def _render_row_job(args):
    return render_row(*args)


def render_image(camera, scene, nx, ny, textbook=False, processes=1, verbose=True):
    """
    render a ray traced image.

    Rows are independent, so with processes > 1 they are traced in a pool of
    worker processes, each with its own copy of the read-only scene.
    """
    canvas = Canvas(nx, ny)
    rows = list(canvas.row_coords())
    jobs = [(camera, scene, y, nx, ny, textbook) for y in rows]

    if processes > 1:
        with ProcessPoolExecutor(max_workers=processes) as pool:
            results = pool.map(_render_row_job, jobs, chunksize=max(1, len(jobs) // (4 * processes)))
            for i, (y, colors) in enumerate(zip(rows, results)):
                if verbose:
                    print(f"rendering row {i+1}/{ny}...")
                canvas.put_row(y, colors)
    else:
        for i, job in enumerate(jobs):
            if verbose:
                print(f"rendering row {i+1}/{ny}...")
            canvas.put_row(job[2], _render_row_job(job))

    return canvas
