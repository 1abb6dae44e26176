"""
Core Mathematical Functions for Spherical Harmonics

This module provides the numerical kernel of the visualizer: factorials,
associated Legendre polynomials, and the real-part spherical harmonic value
used as the colormap input for each mesh vertex.

All functions are pure and accept either scalars or numpy arrays. Scalar
inputs produce Python floats, array inputs produce arrays of the broadcast
shape, so the same code colors a single point or a whole sphere.

See Also:
    - colormap: For mapping harmonic values to colors
    - geometry: For the Cartesian to spherical conversion of mesh vertices
"""

import numpy as np
import math
import functools
from typing import Union

from .exceptions import MathError

# Scalar or array input/output of the kernel
ArrayLike = Union[float, np.ndarray]

# Cache size for factorial memoization (l + |m| <= 40 for degree 20)
_FACTORIAL_CACHE_SIZE = 64


@functools.lru_cache(maxsize=_FACTORIAL_CACHE_SIZE)
def factorial(n: int) -> int:
    """
    Compute factorial, optimized with caching for repeated calls.
    
    Arguments of one or less, including negative ones, yield 1. The
    normalization constant relies on this when asked for an order that
    does not fit the degree.
    
    Args:
        n: Integer
        
    Returns:
        n! (n factorial), or 1 for n <= 1
    
    Examples:
        >>> factorial(5)
        120
        >>> factorial(-3)
        1
    """
    if n <= 1:
        return 1
    
    return n * factorial(n - 1)


def associated_legendre(l: int, m: int, x: ArrayLike) -> ArrayLike:
    """
    Compute the associated Legendre polynomial P_l^m(x).
    
    The polynomial is built with the upward recurrence in l, seeded by
    P_m^m and P_{m+1}^m. Closed-form factorial expressions are unstable
    for degrees beyond about 20, the recurrence is not.
    
    Args:
        l: Degree (l >= 0)
        m: Order, only 0 <= m <= l contributes
        x: Value or array where -1 <= x <= 1
        
    Returns:
        The associated Legendre polynomial value(s). Zero when m < 0 or m > l.
    
    Notes:
        The Condon-Shortley phase (-1)^m is part of the seed, so
        P_1^1(x) = -sqrt(1 - x^2). No phase factor is applied for negative
        orders here; callers pass |m|.
    
    Examples:
        >>> associated_legendre(1, 1, 0.5)
        -0.8660254037844386
        >>> associated_legendre(2, 3, 0.5)
        0.0
    """
    is_array = isinstance(x, np.ndarray)
    
    if m < 0 or m > l:
        return np.zeros_like(x, dtype=float) if is_array else 0.0
    
    if l == 0:
        return np.ones_like(x, dtype=float) if is_array else 1.0
    
    x_array = np.asarray(x, dtype=float)
    
    # Seed P_m^m = (-1)^m (2m-1)!! (1-x^2)^(m/2), accumulated factor by factor
    pmm = np.ones_like(x_array)
    somx2 = np.sqrt((1.0 - x_array) * (1.0 + x_array))
    fact = 1.0
    for i in range(1, m + 1):
        pmm = pmm * (-fact * somx2)
        fact += 2.0
    
    if l == m:
        return pmm if is_array else float(pmm)
    
    pmmp1 = x_array * (2.0 * m + 1.0) * pmm
    
    if l == m + 1:
        return pmmp1 if is_array else float(pmmp1)
    
    # P_ll^m = ((2ll-1) x P_{ll-1}^m - (ll+m-1) P_{ll-2}^m) / (ll-m)
    pll = np.zeros_like(x_array)
    for ll in range(m + 2, l + 1):
        pll = (x_array * (2.0 * ll - 1.0) * pmmp1 - (ll + m - 1.0) * pmm) / (ll - m)
        pmm = pmmp1
        pmmp1 = pll
    
    return pll if is_array else float(pll)


@functools.lru_cache(maxsize=None)
def normalization_constant(l: int, m: int) -> float:
    """
    Compute sqrt((2l+1) (l-|m|)! / (4 pi (l+|m|)!)).
    
    Raises:
        MathError.DomainError: If l is negative
        MathError.PrecisionError: If the factorials overflow a double
    """
    if l < 0:
        raise MathError.DomainError(f"Degree l must be non-negative, got {l}")
    
    m_abs = abs(m)
    try:
        return math.sqrt(((2 * l + 1) * factorial(l - m_abs)) /
                         (4 * math.pi * factorial(l + m_abs)))
    except OverflowError:
        raise MathError.PrecisionError(f"Numerical overflow in normalization for l={l}, m={m}")


def spherical_harmonic_value(l: int, m: int, theta: ArrayLike, phi: ArrayLike) -> ArrayLike:
    """
    Compute the real part of the spherical harmonic Y_l^m(theta, phi).
    
    Only the cosine component of e^(i m phi) is kept, giving a single real
    channel for the colormap. For negative orders the result is multiplied
    by (-1)^|m|.
    
    Args:
        l: Degree of the spherical harmonic (l >= 0)
        m: Order of the spherical harmonic (-l <= m <= l)
        theta: Polar angle(s) in radians [0, pi]
        phi: Azimuthal angle(s) in radians
        
    Returns:
        The harmonic value, a float for scalar angles or an array of the
        broadcast shape of theta and phi. Zero when |m| > l.
    
    Raises:
        MathError.DomainError: If l is negative
    """
    is_array = isinstance(theta, np.ndarray) or isinstance(phi, np.ndarray)
    
    if l < 0:
        raise MathError.DomainError(f"Degree l must be non-negative, got {l}")
    
    # Out-of-range orders contribute nothing; their factorials need not fit a double
    if abs(m) > l:
        if is_array:
            return np.zeros(np.broadcast(np.asarray(theta), np.asarray(phi)).shape)
        return 0.0
    
    norm = normalization_constant(l, m)
    
    cos_theta = np.cos(np.asarray(theta, dtype=float))
    legendre = associated_legendre(l, abs(m), cos_theta)
    real = np.cos(m * np.asarray(phi, dtype=float))
    
    m_sign = (1.0 if abs(m) % 2 == 0 else -1.0) if m < 0 else 1.0
    
    value = norm * legendre * real * m_sign
    return value if is_array else float(value)
