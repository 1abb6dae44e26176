"""
Configuration Management Module

This module provides centralized configuration management for the visualizer,
including constants, default settings, and configuration utilities.
"""

from typing import Dict, Any, Tuple
from dataclasses import dataclass, field
import json

from .exceptions import ConfigurationError


# =====================================================================================
# Constants
# =====================================================================================

# Harmonic parameter limits (matches the degree slider range)
MAX_DEGREE = 20  # The upward recurrence loses accuracy beyond this
DEFAULT_DEGREE = 3
DEFAULT_ORDER = 0

# Mesh settings
DEFAULT_RADIUS = 1.0
DEFAULT_SEGMENTS = 512  # Width and height segments of the sphere
MIN_WIDTH_SEGMENTS = 3
MIN_HEIGHT_SEGMENTS = 2

# Colormap settings (HSL fractions, hue 0..1 maps to 0..360 degrees)
HUE_START = 0.8  # purple at value -1
HUE_SPAN = 0.7  # down to yellow at value +1
SATURATION = 0.8
LIGHTNESS_BASE = 0.3
LIGHTNESS_SPAN = 0.4

# Viewer settings
DEFAULT_DEBOUNCE_DELAY = 0.1  # seconds
DEFAULT_FIGURE_SIZE = (8.0, 8.0)  # inches
DEFAULT_BACKGROUND = '#ffffff'
DEFAULT_ROTATE_SPEED = 90.0  # degrees per second, one turn every 4 s
DEFAULT_ELEVATION = 20.0  # degrees


# =====================================================================================
# Configuration Classes
# =====================================================================================

@dataclass
class MeshConfig:
    """Configuration for the tessellated sphere"""
    
    radius: float = DEFAULT_RADIUS
    width_segments: int = DEFAULT_SEGMENTS
    height_segments: int = DEFAULT_SEGMENTS
    
    def __post_init__(self):
        """Validate configuration after initialization"""
        if self.radius <= 0:
            raise ConfigurationError("Sphere radius must be positive")
        
        if self.width_segments < MIN_WIDTH_SEGMENTS:
            raise ConfigurationError(f"Width segments must be at least {MIN_WIDTH_SEGMENTS}")
        
        if self.height_segments < MIN_HEIGHT_SEGMENTS:
            raise ConfigurationError(f"Height segments must be at least {MIN_HEIGHT_SEGMENTS}")


@dataclass
class ColormapConfig:
    """Configuration for the value to HSL color mapping"""
    
    hue_start: float = HUE_START
    hue_span: float = HUE_SPAN
    saturation: float = SATURATION
    lightness_base: float = LIGHTNESS_BASE
    lightness_span: float = LIGHTNESS_SPAN
    
    def __post_init__(self):
        """Validate configuration after initialization"""
        if not (0 <= self.hue_start <= 1):
            raise ConfigurationError("Hue start must be between 0 and 1")
        
        if not (0 <= self.saturation <= 1):
            raise ConfigurationError("Saturation must be between 0 and 1")
        
        low = self.lightness_base
        high = self.lightness_base + self.lightness_span
        if not (0 <= low <= 1 and 0 <= high <= 1):
            raise ConfigurationError("Lightness range must stay between 0 and 1")


@dataclass
class ViewerConfig:
    """Configuration for the matplotlib viewer"""
    
    debounce_delay: float = DEFAULT_DEBOUNCE_DELAY
    figure_size: Tuple[float, float] = DEFAULT_FIGURE_SIZE
    background: str = DEFAULT_BACKGROUND
    
    # Camera settings
    auto_rotate: bool = True
    rotate_speed: float = DEFAULT_ROTATE_SPEED
    elevation: float = DEFAULT_ELEVATION
    
    def __post_init__(self):
        """Validate configuration after initialization"""
        if self.debounce_delay < 0:
            raise ConfigurationError("Debounce delay must be non-negative")
        
        self.figure_size = tuple(self.figure_size)
        if len(self.figure_size) != 2 or any(s <= 0 for s in self.figure_size):
            raise ConfigurationError("Figure size must be a positive (width, height) pair")


@dataclass
class ShvizConfig:
    """Complete configuration for the visualizer"""
    
    mesh: MeshConfig = field(default_factory=MeshConfig)
    colormap: ColormapConfig = field(default_factory=ColormapConfig)
    viewer: ViewerConfig = field(default_factory=ViewerConfig)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for serialization"""
        return {
            'mesh': {
                'radius': self.mesh.radius,
                'width_segments': self.mesh.width_segments,
                'height_segments': self.mesh.height_segments
            },
            'colormap': {
                'hue_start': self.colormap.hue_start,
                'hue_span': self.colormap.hue_span,
                'saturation': self.colormap.saturation,
                'lightness_base': self.colormap.lightness_base,
                'lightness_span': self.colormap.lightness_span
            },
            'viewer': {
                'debounce_delay': self.viewer.debounce_delay,
                'figure_size': list(self.viewer.figure_size),
                'background': self.viewer.background,
                'auto_rotate': self.viewer.auto_rotate,
                'rotate_speed': self.viewer.rotate_speed,
                'elevation': self.viewer.elevation
            }
        }
    
    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ShvizConfig':
        """Create configuration from dictionary"""
        if not isinstance(config_dict, dict):
            raise ConfigurationError(f"Configuration must be an object, got {type(config_dict).__name__}")
        
        sections = {}
        for name in ('mesh', 'colormap', 'viewer'):
            section = config_dict.get(name, {})
            if not isinstance(section, dict):
                raise ConfigurationError(f"Section '{name}' must be an object, got {type(section).__name__}")
            sections[name] = section
        
        try:
            mesh_config = MeshConfig(**sections['mesh'])
            colormap_config = ColormapConfig(**sections['colormap'])
            viewer_config = ViewerConfig(**sections['viewer'])
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
        
        return cls(
            mesh=mesh_config,
            colormap=colormap_config,
            viewer=viewer_config
        )
    
    def save(self, file_path: str) -> None:
        """Save configuration to file"""
        with open(file_path, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)
    
    @classmethod
    def load(cls, file_path: str) -> 'ShvizConfig':
        """Load configuration from file"""
        try:
            with open(file_path, 'r') as f:
                return cls.from_dict(json.load(f))
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Could not read configuration {file_path}: {e}") from e


# Create a default configuration
default_config = ShvizConfig()
