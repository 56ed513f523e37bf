import argparse
import time
from example_scene import camera, scene
from ray import render_image


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Single-bounce sphere ray tracer")
    parser.add_argument('--width', type=int, default=600, help='Image width in pixels')
    parser.add_argument('--height', type=int, default=600, help='Image height in pixels')
    parser.add_argument('--output', '-o', type=str, default='render.png', help='Output PNG path')
    parser.add_argument('--processes', '-j', type=int, default=1, help='Worker processes for rendering rows')
    parser.add_argument('--textbook', action='store_true',
                        help='Use P = O + tD and V = camera - P instead of the as-written formulas')
    parser.add_argument('--quiet', '-q', action='store_true', help='Do not print progress')
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error('--width and --height must be positive')
    if args.processes < 1:
        parser.error('--processes must be at least 1')
    return args


def render(camera, scene, argv=None):
    """Render scene through camera with options from the command line and save it."""
    args = parse_args(argv)
    start = time.time()
    canvas = render_image(camera, scene, args.width, args.height,
                          textbook=args.textbook, processes=args.processes,
                          verbose=not args.quiet)
    canvas.save(args.output)
    if not args.quiet:
        print(f"wrote {args.output} ({args.width}x{args.height}) in {time.time() - start:.2f}s")
    return canvas


def main(argv=None):
    render(camera, scene, argv)


if __name__ == '__main__':
    main()
