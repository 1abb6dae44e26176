"""
Example Usage and Demonstrations

This module contains the demo entry point: render one harmonic to an image
file, print a small table of values, or open the interactive viewer.
"""

import argparse
import math
import logging
import sys
from typing import List, Optional

from .config import ShvizConfig, MeshConfig, DEFAULT_DEGREE, DEFAULT_ORDER, MAX_DEGREE
from .core import HarmonicSphere
from .exceptions import ShvizError
from .math_utils import spherical_harmonic_value
from .colormap import value_to_color

logger = logging.getLogger(__name__)

# Mesh density for the demo; the full 512 segments is slow to draw with matplotlib
DEMO_SEGMENTS = 128


def print_value_table(degree: int, order: int, steps: int = 5) -> None:
    """Print harmonic values and colors along the meridian phi = 0."""
    print(f"Y_{degree}^{order} along phi = 0")
    print(f"{'theta':>8} {'value':>12} {'hue':>6} {'light':>6}")
    for i in range(steps):
        theta = math.pi * i / (steps - 1)
        value = spherical_harmonic_value(degree, order, theta, 0.0)
        color = value_to_color(value)
        print(f"{theta:8.4f} {value:12.6f} {color.hue:6.3f} {color.lightness:6.3f}")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Spherical harmonic sphere viewer')
    parser.add_argument('--degree', '-l', type=int, default=DEFAULT_DEGREE,
                        help=f'Degree l, 0 to {MAX_DEGREE} (default: {DEFAULT_DEGREE})')
    parser.add_argument('--order', '-m', type=int, default=DEFAULT_ORDER,
                        help=f'Order m, -l to l (default: {DEFAULT_ORDER})')
    parser.add_argument('--segments', type=int, default=None,
                        help=f'Sphere segments (default: {DEMO_SEGMENTS}, or the config file value)')
    parser.add_argument('--config', help='JSON configuration file')
    parser.add_argument('--output', '-o', help='Save the rendered sphere to this image file')
    parser.add_argument('--interactive', '-i', action='store_true',
                        help='Open the interactive viewer')
    parser.add_argument('--table', action='store_true',
                        help='Print values along the phi = 0 meridian')
    parser.add_argument('--verbose', '-v', action='count', default=0,
                        help='Increase logging verbosity')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the demo; returns the process exit status."""
    args = parse_args(argv)
    
    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format='%(asctime)s %(name)s %(levelname)s: %(message)s')
    
    try:
        if args.config:
            config = ShvizConfig.load(args.config)
            if args.segments is not None:
                config.mesh = MeshConfig(config.mesh.radius, args.segments, args.segments)
        else:
            segments = args.segments if args.segments is not None else DEMO_SEGMENTS
            config = ShvizConfig(mesh=MeshConfig(width_segments=segments, height_segments=segments))
        
        sphere = HarmonicSphere(args.degree, args.order, config=config)
        logger.info(f"Created {sphere!r}")
        
        if args.table or not (args.output or args.interactive):
            print_value_table(sphere.degree, sphere.order)
        
        if args.output:
            from .viewer import save_harmonic
            save_harmonic(sphere, args.output, config=config)
        
        if args.interactive:
            from .viewer import HarmonicViewer
            HarmonicViewer(sphere, config=config).show()
    except ShvizError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    
    return 0


if __name__ == '__main__':
    sys.exit(main())
