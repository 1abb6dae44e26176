"""
Unit tests for the parameter value types.
"""

import pytest
import math
from shviz.harmonics.utils import HarmonicParameters, SphericalAngle
from shviz.harmonics.config import MAX_DEGREE
from shviz.harmonics.exceptions import ValidationError


class TestHarmonicParameters:
    """Tests for the slider rules on degree and order."""
    
    def test_validity(self):
        assert HarmonicParameters(3, -3).is_valid
        assert not HarmonicParameters(2, 3).is_valid
        assert not HarmonicParameters(-1, 0).is_valid
    
    def test_order_range(self):
        assert list(HarmonicParameters(2, 0).order_range()) == [-2, -1, 0, 1, 2]
    
    def test_with_degree_keeps_fitting_order(self):
        assert HarmonicParameters(5, -2).with_degree(3) == HarmonicParameters(3, -2)
    
    def test_with_degree_resets_order(self):
        """An order that no longer fits resets to zero rather than clamping."""
        assert HarmonicParameters(5, 4).with_degree(2) == HarmonicParameters(2, 0)
        assert HarmonicParameters(5, -4).with_degree(3) == HarmonicParameters(3, 0)
    
    def test_with_degree_clamps(self):
        assert HarmonicParameters(3).with_degree(MAX_DEGREE + 1).degree == MAX_DEGREE
        assert HarmonicParameters(3).with_degree(-2).degree == 0
        assert HarmonicParameters(3).with_degree(50, max_degree=40).degree == 40
    
    def test_with_order_clamps(self):
        assert HarmonicParameters(3, 0).with_order(7) == HarmonicParameters(3, 3)
        assert HarmonicParameters(3, 0).with_order(-7) == HarmonicParameters(3, -3)
        assert HarmonicParameters(3, 0).with_order(-1) == HarmonicParameters(3, -1)
    
    def test_immutable(self):
        params = HarmonicParameters(3, 1)
        with pytest.raises(AttributeError):
            params.degree = 4
    
    def test_str(self):
        assert str(HarmonicParameters(4, -2)) == "Y_4^-2"


class TestSphericalAngle:
    """Tests for the direction value type."""
    
    def test_valid(self):
        angle = SphericalAngle(math.pi, -1.0)
        assert angle.polar == math.pi
    
    def test_polar_out_of_range(self):
        with pytest.raises(ValidationError):
            SphericalAngle(-0.1, 0.0)
        with pytest.raises(ValidationError):
            SphericalAngle(4.0, 0.0)
