from utils import vec
from canvas import Viewport
from geometry import Sphere
from lights import AmbientLight, PointLight, DirectionalLight
from materials import Material
from ray import Camera, Scene, BG_COLOR

red    = Material(vec([255, 0, 0]),   specular=500)
blue   = Material(vec([0, 0, 255]),   specular=500)
green  = Material(vec([0, 255, 0]),   specular=10)
yellow = Material(vec([255, 255, 0]), specular=1000)

spheres = [
    Sphere(vec([0, -1, 3]), 1, red),
    Sphere(vec([2, 0, 4]), 1, blue),
    Sphere(vec([-2, 0, 4]), 1, green),
    # ground
    Sphere(vec([0, -5001, 0]), 5000, yellow),
]

lights = [
    AmbientLight(0.2),
    PointLight(vec([2, 1, 0]), 0.6),
    DirectionalLight(vec([1, 4, 4]), 0.2),
]

camera = Camera(vec([0, 0, 0]), Viewport(1, 1, 1))
scene = Scene(spheres, lights, bg_color=BG_COLOR, camera_position=camera.position)


if __name__ == '__main__':
    from cli import render
    render(camera, scene)
