"""
Custom Exceptions Module

This module defines the exception hierarchy for the spherical harmonic
visualizer, providing more specific error types for better error handling.
"""

class ShvizError(Exception):
    """Base exception class for all visualizer errors."""
    pass


class ConfigurationError(ShvizError):
    """Error in visualizer configuration."""
    pass


class ValidationError(ShvizError):
    """Error during parameter validation."""
    pass


class RenderError(ShvizError):
    """Error while drawing a harmonic."""
    pass


class MathError(ShvizError):
    """Error in mathematical calculations."""
    
    class PrecisionError(ShvizError):
        """Error due to numerical precision issues."""
        pass
    
    class DomainError(ShvizError):
        """Error due to input values outside the valid domain."""
        pass
