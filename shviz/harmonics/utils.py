"""
General Utility Functions and Definitions

This module contains type definitions and the small value types passed
between the evaluator, the mesh, and the parameter controls.

See Also:
    - config: For centralized configuration management
    - math_utils: For the harmonic evaluation itself
"""

import math
import logging
import numpy as np
from dataclasses import dataclass, replace
from typing import Tuple

from .config import MAX_DEGREE
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

# Type aliases for improved readability
Vector3 = Tuple[float, float, float]  # (x, y, z)
SphericalCoord = Tuple[float, float, float]  # (polar, azimuthal, radius) in radians/units
CartesianCoord = Tuple[float, float, float]  # (x, y, z)
RGB = Tuple[float, float, float]  # Each channel in [0, 1]
VertexArray = np.ndarray  # Shape: (n_vertices, 3)
ColorArray = np.ndarray  # Shape: (n_vertices, 3), RGB in [0, 1]


@dataclass(frozen=True)
class HarmonicParameters:
    """
    Degree and order selecting one spherical harmonic.
    
    The evaluator tolerates |order| > degree (the harmonic is zero there),
    but the update helpers keep the pair valid the same way the degree and
    order sliders do.
    
    Attributes:
        degree: Non-negative integer l
        order: Integer m with |m| <= l
    """
    degree: int
    order: int = 0
    
    @property
    def is_valid(self) -> bool:
        """Whether 0 <= degree and |order| <= degree."""
        return self.degree >= 0 and abs(self.order) <= self.degree
    
    def order_range(self) -> range:
        """All orders available for the current degree."""
        return range(-self.degree, self.degree + 1)
    
    def with_degree(self, degree: int, max_degree: int = MAX_DEGREE) -> 'HarmonicParameters':
        """
        Return parameters with a new degree.
        
        The degree is clamped to [0, max_degree]. An order that no longer
        fits resets to 0.
        """
        clamped = max(0, min(max_degree, int(degree)))
        if clamped != degree:
            logger.warning(f"Degree {degree} clamped to {clamped}")
        
        order = self.order if abs(self.order) <= clamped else 0
        return replace(self, degree=clamped, order=order)
    
    def with_order(self, order: int) -> 'HarmonicParameters':
        """Return parameters with a new order clamped to [-degree, degree]."""
        clamped = max(-self.degree, min(self.degree, int(order)))
        if clamped != order:
            logger.warning(f"Order {order} clamped to {clamped} for degree {self.degree}")
        return replace(self, order=clamped)
    
    def __str__(self):
        return f"Y_{self.degree}^{self.order}"


@dataclass(frozen=True)
class SphericalAngle:
    """
    Direction on the unit sphere.
    
    Attributes:
        polar: Angle from the +z axis in radians [0, pi]
        azimuthal: Angle in the x-y plane from +x in radians
    """
    polar: float
    azimuthal: float
    
    def __post_init__(self):
        """Validate the polar angle."""
        if not (0.0 <= self.polar <= math.pi):
            raise ValidationError(f"Polar angle must be in [0, pi], got {self.polar}")
