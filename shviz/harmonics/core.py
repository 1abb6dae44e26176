"""
Core Harmonic Sphere Module

This module contains the HarmonicSphere class that ties together the mesh,
the harmonic evaluator, and the colormap. It evaluates the harmonic once per
vertex and re-colors the mesh whenever the degree or order changes.
"""

import logging
import time
import numpy as np
from typing import Optional

from .config import ShvizConfig, DEFAULT_DEGREE, DEFAULT_ORDER, default_config
from .colormap import values_to_rgb
from .geometry import SphereMesh, sphere_mesh, cartesian_to_spherical_array
from .math_utils import spherical_harmonic_value, ArrayLike
from .utils import HarmonicParameters, ColorArray

logger = logging.getLogger(__name__)


class HarmonicSphere:
    """
    A sphere mesh colored by one real spherical harmonic.
    
    The per-vertex angles are computed once when the mesh is built. Values
    and colors are cached and recomputed lazily after a parameter change.
    """
    
    def __init__(self, degree: int = DEFAULT_DEGREE, order: int = DEFAULT_ORDER,
                 config: Optional[ShvizConfig] = None):
        """
        Initialize the harmonic sphere.
        
        Args:
            degree: Initial degree l
            order: Initial order m, clamped to [-degree, degree]
            config: Visualizer configuration (mesh and colormap sections are used)
        """
        self.config = config or default_config
        
        mesh_config = self.config.mesh
        self.mesh: SphereMesh = sphere_mesh(mesh_config.radius,
                                            mesh_config.width_segments,
                                            mesh_config.height_segments)
        self.theta, self.phi = cartesian_to_spherical_array(self.mesh.vertices)
        
        self._parameters = HarmonicParameters(DEFAULT_DEGREE).with_degree(degree).with_order(order)
        self._values: Optional[np.ndarray] = None
        self._colors: Optional[ColorArray] = None
        
        logger.debug(f"Built sphere with {self.mesh.n_vertices} vertices for {self._parameters}")
    
    @property
    def parameters(self) -> HarmonicParameters:
        return self._parameters
    
    @property
    def degree(self) -> int:
        return self._parameters.degree
    
    @property
    def order(self) -> int:
        return self._parameters.order
    
    def set_parameters(self, degree: int, order: int) -> bool:
        """
        Select a new harmonic.
        
        The degree is clamped to the supported range first, then the order
        is clamped to the new degree.
        
        Args:
            degree: New degree l
            order: New order m
            
        Returns:
            True if the harmonic changed and the cached colors were dropped
        """
        parameters = self._parameters.with_degree(degree).with_order(order)
        
        if parameters == self._parameters:
            return False
        
        logger.debug(f"Harmonic changed from {self._parameters} to {parameters}")
        self._parameters = parameters
        self._values = None
        self._colors = None
        return True
    
    def evaluate(self, theta: ArrayLike, phi: ArrayLike) -> ArrayLike:
        """Evaluate the current harmonic at arbitrary angles."""
        return spherical_harmonic_value(self.degree, self.order, theta, phi)
    
    @property
    def values(self) -> np.ndarray:
        """Harmonic value at every mesh vertex, shape (n_vertices,)."""
        if self._values is None:
            start = time.perf_counter()
            self._values = self.evaluate(self.theta, self.phi)
            elapsed = time.perf_counter() - start
            logger.debug(f"Evaluated {self._parameters} on {self.mesh.n_vertices} vertices "
                         f"in {elapsed * 1000:.1f} ms")
        return self._values
    
    @property
    def colors(self) -> ColorArray:
        """RGB color at every mesh vertex, shape (n_vertices, 3)."""
        if self._colors is None:
            self._colors = values_to_rgb(self.values, self.config.colormap)
        return self._colors
    
    def __repr__(self):
        return (f"HarmonicSphere(degree={self.degree}, order={self.order}, "
                f"vertices={self.mesh.n_vertices})")
