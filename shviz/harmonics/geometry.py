"""
Sphere Geometry and Coordinate Conversion

This module builds the tessellated unit sphere that carries the harmonic
colors and converts its vertices to the spherical angles the evaluator
expects.

Conventions:
- Polar angle theta is measured from the +z axis, theta = acos(z / r)
- Azimuthal angle phi is measured in the x-y plane from +x, phi = atan2(y, x)
"""

import math
import numpy as np
from dataclasses import dataclass
from typing import Tuple

from .config import DEFAULT_RADIUS, DEFAULT_SEGMENTS, MIN_WIDTH_SEGMENTS, MIN_HEIGHT_SEGMENTS
from .exceptions import MathError, ValidationError
from .utils import CartesianCoord, SphericalCoord, VertexArray


def convert_to_spherical(cartesian: CartesianCoord) -> SphericalCoord:
    """
    Convert Cartesian coordinates (x, y, z) to spherical coordinates (theta, phi, r).
    
    Args:
        cartesian: (x, y, z) coordinates
        
    Returns:
        (polar, azimuthal, radius); phi lies in (-pi, pi]
    """
    x, y, z = cartesian
    
    r = math.sqrt(x*x + y*y + z*z)
    
    # Handle the origin
    if r < 1e-12:
        return (0.0, 0.0, 0.0)
    
    theta = math.acos(max(-1.0, min(1.0, z / r)))
    phi = math.atan2(y, x)
    
    return (theta, phi, r)


def convert_to_cartesian(spherical: SphericalCoord) -> CartesianCoord:
    """
    Convert spherical coordinates (theta, phi, r) to Cartesian coordinates (x, y, z).
    
    Args:
        spherical: (polar, azimuthal, radius)
        
    Returns:
        (x, y, z)
    """
    theta, phi, r = spherical
    
    x = r * math.sin(theta) * math.cos(phi)
    y = r * math.sin(theta) * math.sin(phi)
    z = r * math.cos(theta)
    
    return (x, y, z)


def cartesian_to_spherical_array(vertices: VertexArray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Vectorized conversion of an (N, 3) vertex array to polar and azimuthal angles.
    
    Vertices at the origin map to (0, 0).
    
    Raises:
        MathError.DomainError: If vertices is not of shape (N, 3)
    """
    vertices = np.asarray(vertices, dtype=float)
    if vertices.ndim != 2 or vertices.shape[1] != 3:
        raise MathError.DomainError(f"Expected vertices of shape (N, 3), got {vertices.shape}")
    
    x, y, z = vertices[:, 0], vertices[:, 1], vertices[:, 2]
    r = np.sqrt(x*x + y*y + z*z)
    
    cos_theta = np.divide(z, r, out=np.ones_like(r), where=r >= 1e-12)
    theta = np.arccos(np.clip(cos_theta, -1.0, 1.0))
    phi = np.arctan2(y, x)
    
    return theta, phi


@dataclass
class SphereMesh:
    """
    Triangulated UV sphere.
    
    Vertices are laid out row by row from the +y pole (row 0) to the -y
    pole, with width_segments + 1 vertices per row; the first and last
    vertex of each row coincide to close the seam.
    
    Attributes:
        vertices: (n_vertices, 3) positions
        faces: (n_faces, 3) vertex indices, counter-clockwise seen from outside
        width_segments: Number of segments around the equator
        height_segments: Number of segments from pole to pole
    """
    vertices: VertexArray
    faces: np.ndarray
    width_segments: int
    height_segments: int
    
    @property
    def grid_shape(self) -> Tuple[int, int]:
        """(rows, columns) of the vertex grid."""
        return (self.height_segments + 1, self.width_segments + 1)
    
    @property
    def n_vertices(self) -> int:
        return self.vertices.shape[0]
    
    def as_grid(self, values: np.ndarray) -> np.ndarray:
        """Reshape per-vertex data of shape (n_vertices, ...) to the vertex grid."""
        return np.asarray(values).reshape(self.grid_shape + np.shape(values)[1:])


def sphere_mesh(radius: float = DEFAULT_RADIUS, width_segments: int = DEFAULT_SEGMENTS,
                height_segments: int = DEFAULT_SEGMENTS) -> SphereMesh:
    """
    Build a UV sphere.
    
    For v = iy / height_segments and u = ix / width_segments the vertex is
    x = -r cos(2 pi u) sin(pi v), y = r cos(pi v), z = r sin(2 pi u) sin(pi v).
    Each quad is split into two triangles, except at the poles where the
    degenerate triangle is dropped.
    
    Args:
        radius: Sphere radius
        width_segments: Segments around the equator (>= 3)
        height_segments: Segments from pole to pole (>= 2)
        
    Returns:
        SphereMesh
    
    Raises:
        ValidationError: If the radius or segment counts are out of range
    """
    if radius <= 0:
        raise ValidationError(f"Radius must be positive, got {radius}")
    if width_segments < MIN_WIDTH_SEGMENTS:
        raise ValidationError(f"Width segments must be at least {MIN_WIDTH_SEGMENTS}, got {width_segments}")
    if height_segments < MIN_HEIGHT_SEGMENTS:
        raise ValidationError(f"Height segments must be at least {MIN_HEIGHT_SEGMENTS}, got {height_segments}")
    
    u = np.arange(width_segments + 1) / width_segments
    v = np.arange(height_segments + 1) / height_segments
    uu, vv = np.meshgrid(u, v)
    
    azimuth = 2.0 * np.pi * uu
    polar = np.pi * vv
    
    vertices = np.stack([
        -radius * np.cos(azimuth) * np.sin(polar),
        radius * np.cos(polar),
        radius * np.sin(azimuth) * np.sin(polar)
    ], axis=-1).reshape(-1, 3)
    
    # Quad corners: a = (iy, ix+1), b = (iy, ix), c = (iy+1, ix), d = (iy+1, ix+1)
    row = width_segments + 1
    iy, ix = np.meshgrid(np.arange(height_segments), np.arange(width_segments), indexing='ij')
    a = iy * row + ix + 1
    b = iy * row + ix
    c = (iy + 1) * row + ix
    d = (iy + 1) * row + ix + 1
    
    upper = np.stack([a, b, d], axis=-1)[1:]
    lower = np.stack([b, c, d], axis=-1)[:-1]
    
    faces = np.concatenate([upper.reshape(-1, 3), lower.reshape(-1, 3)])
    
    return SphereMesh(
        vertices=vertices,
        faces=faces.astype(np.int64),
        width_segments=width_segments,
        height_segments=height_segments
    )
