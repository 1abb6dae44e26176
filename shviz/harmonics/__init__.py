"""
Spherical Harmonic Visualizer (shviz) Package

Evaluates real-part spherical harmonics Y_l^m on a tessellated sphere and
maps the values to a purple-to-yellow HSL colormap for display.
"""

from .math_utils import associated_legendre, spherical_harmonic_value, factorial, normalization_constant
from .colormap import HSLColor, value_to_color, values_to_rgb, hsl_to_rgb
from .geometry import SphereMesh, sphere_mesh, convert_to_spherical, convert_to_cartesian, cartesian_to_spherical_array
from .utils import HarmonicParameters, SphericalAngle
from .core import HarmonicSphere
from .controls import DebouncedParameterController
from .config import ShvizConfig, default_config
from .exceptions import ShvizError

__version__ = '0.1.0'
