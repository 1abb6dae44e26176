"""
Colormap Functions

Maps harmonic values to colors in hue-saturation-lightness space. Values
are clamped to [-1, 1] and swept from purple (low) to yellow (high), with
lightness rising alongside so that sign changes stay readable on a shaded
sphere.
"""

import colorsys
import math
import numpy as np
from typing import NamedTuple, Optional

from .config import ColormapConfig
from .utils import RGB, ColorArray

_DEFAULT_COLORMAP = ColormapConfig()

# Hue offsets of the red and blue channels in HSL to RGB conversion
_ONE_THIRD = 1.0 / 3.0


class HSLColor(NamedTuple):
    """Color in HSL space, every component a fraction in [0, 1]."""
    hue: float
    saturation: float
    lightness: float
    
    def to_rgb(self) -> RGB:
        """Convert to an (r, g, b) tuple with channels in [0, 1]."""
        # colorsys orders the arguments hue, lightness, saturation
        return colorsys.hls_to_rgb(self.hue, self.lightness, self.saturation)


def _normalize(value: float) -> float:
    """Clamp to [-1, 1] and rescale to [0, 1]; NaN counts as zero."""
    if math.isnan(value):
        value = 0.0
    return (max(-1.0, min(1.0, value)) + 1.0) / 2.0


def value_to_color(value: float, config: Optional[ColormapConfig] = None) -> HSLColor:
    """
    Map a harmonic value to an HSL color.
    
    Args:
        value: Harmonic value, clamped to [-1, 1]
        config: Colormap constants, defaults to the purple-to-yellow sweep
        
    Returns:
        HSLColor with hue 0.8 at -1 down to 0.1 at +1, saturation 0.8,
        lightness 0.3 at -1 up to 0.7 at +1
    
    Examples:
        >>> value_to_color(-1.0)
        HSLColor(hue=0.8, saturation=0.8, lightness=0.3)
    """
    config = config or _DEFAULT_COLORMAP
    normalized = _normalize(value)
    
    return HSLColor(
        hue=config.hue_start - normalized * config.hue_span,
        saturation=config.saturation,
        lightness=config.lightness_base + normalized * config.lightness_span
    )


def _hue_to_channel(m1: np.ndarray, m2: np.ndarray, hue: np.ndarray) -> np.ndarray:
    hue = np.mod(hue, 1.0)
    return np.select(
        [hue < 1.0 / 6.0, hue < 0.5, hue < 2.0 / 3.0],
        [m1 + (m2 - m1) * hue * 6.0, m2, m1 + (m2 - m1) * (2.0 / 3.0 - hue) * 6.0],
        default=m1
    )


def hsl_to_rgb(hue: np.ndarray, saturation: np.ndarray, lightness: np.ndarray) -> ColorArray:
    """
    Vectorized HSL to RGB conversion.
    
    Follows the same piecewise definition as colorsys.hls_to_rgb so that
    per-vertex and batch colors agree.
    
    Args:
        hue: Hue fractions, any shape
        saturation: Saturation fractions, broadcastable to hue
        lightness: Lightness fractions, broadcastable to hue
        
    Returns:
        Array of shape hue.shape + (3,) with RGB channels in [0, 1]
    """
    hue, saturation, lightness = np.broadcast_arrays(
        np.asarray(hue, dtype=float),
        np.asarray(saturation, dtype=float),
        np.asarray(lightness, dtype=float)
    )
    
    m2 = np.where(lightness <= 0.5,
                  lightness * (1.0 + saturation),
                  lightness + saturation - lightness * saturation)
    m1 = 2.0 * lightness - m2
    
    rgb = np.stack([
        _hue_to_channel(m1, m2, hue + _ONE_THIRD),
        _hue_to_channel(m1, m2, hue),
        _hue_to_channel(m1, m2, hue - _ONE_THIRD)
    ], axis=-1)
    
    # Zero saturation is pure grey
    grey = saturation == 0.0
    rgb[grey] = lightness[grey][..., np.newaxis]
    return rgb


def values_to_rgb(values: np.ndarray, config: Optional[ColormapConfig] = None) -> ColorArray:
    """
    Map an array of harmonic values to RGB colors.
    
    Batch counterpart of value_to_color(value).to_rgb(). NaN values are
    colored as zero on both paths.
    
    Args:
        values: Harmonic values, any shape
        config: Colormap constants
        
    Returns:
        Array of shape values.shape + (3,)
    """
    config = config or _DEFAULT_COLORMAP
    values = np.nan_to_num(np.asarray(values, dtype=float), nan=0.0)
    normalized = (np.clip(values, -1.0, 1.0) + 1.0) / 2.0
    
    hue = config.hue_start - normalized * config.hue_span
    lightness = config.lightness_base + normalized * config.lightness_span
    return hsl_to_rgb(hue, config.saturation, lightness)
