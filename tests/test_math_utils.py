"""
Unit tests for the math_utils module.

These tests verify the harmonic evaluation kernel, especially the Legendre
recurrence, the normalization, and the sign convention for negative orders.
"""

import pytest
import numpy as np
import math
from shviz.harmonics.math_utils import (
    factorial, associated_legendre, normalization_constant, spherical_harmonic_value
)
from shviz.harmonics.exceptions import MathError


class TestFactorials:
    """Tests for the factorial function."""
    
    def test_factorial_basic(self):
        """Test basic factorial calculations."""
        assert factorial(0) == 1
        assert factorial(1) == 1
        assert factorial(5) == 120
        assert factorial(10) == 3628800
    
    def test_factorial_at_or_below_one(self):
        """Arguments of one or less give 1, negative ones included."""
        assert factorial(-1) == 1
        assert factorial(-7) == 1
    
    def test_factorial_is_exact(self):
        """Large factorials stay exact integers."""
        assert factorial(40) == math.factorial(40)


class TestLegendrePolynomials:
    """Tests for associated Legendre polynomial functions."""
    
    def test_associated_legendre_scalar(self):
        """Test associated Legendre polynomials with scalar inputs."""
        assert abs(associated_legendre(0, 0, 0.5) - 1.0) < 1e-15
        assert abs(associated_legendre(1, 0, 0.5) - 0.5) < 1e-15
        assert abs(associated_legendre(2, 0, 0.5) - (-0.125)) < 1e-15
        assert isinstance(associated_legendre(3, 2, 0.3), float)
    
    def test_seed_step(self):
        """P_1^1(0.5) = -sqrt(1 - 0.25)."""
        assert associated_legendre(1, 1, 0.5) == pytest.approx(-math.sqrt(0.75), abs=1e-15)
    
    @pytest.mark.parametrize("l", range(0, 21))
    def test_order_zero_at_one(self, l):
        """P_l^0(1) = 1 for every degree."""
        assert associated_legendre(l, 0, 1.0) == 1.0
    
    def test_degree_zero_is_one(self, sample_x):
        """P_0^0(x) = 1."""
        for x in sample_x:
            assert associated_legendre(0, 0, x) == 1.0
    
    def test_degree_one_is_identity(self, sample_x):
        """P_1^0(x) = x."""
        for x in sample_x:
            assert associated_legendre(1, 0, x) == pytest.approx(x, abs=1e-15)
    
    @pytest.mark.parametrize("l,m", [(2, 3), (0, 1), (5, 6), (3, -1), (0, -2), (4, -4)])
    def test_out_of_range_order_is_zero(self, l, m, sample_x):
        """Orders outside 0 <= m <= l contribute nothing."""
        for x in sample_x:
            assert associated_legendre(l, m, x) == 0.0
        np.testing.assert_array_equal(associated_legendre(l, m, sample_x), np.zeros(5))
    
    def test_closed_forms(self):
        """Compare low degrees with their closed forms, Condon-Shortley phase included."""
        x = np.linspace(-1.0, 1.0, 21)
        s = np.sqrt(1.0 - x**2)
        expected = {
            (2, 1): -3.0 * x * s,
            (2, 2): 3.0 * (1.0 - x**2),
            (3, 0): 0.5 * (5.0 * x**3 - 3.0 * x),
            (3, 1): -1.5 * (5.0 * x**2 - 1.0) * s,
            (3, 2): 15.0 * x * (1.0 - x**2),
            (3, 3): -15.0 * s**3,
        }
        for (l, m), values in expected.items():
            np.testing.assert_allclose(associated_legendre(l, m, x), values, atol=1e-12)
    
    def test_associated_legendre_array(self):
        """Array inputs keep their shape and match the scalar path."""
        x = np.linspace(-0.9, 0.9, 12).reshape(3, 4)
        result = associated_legendre(6, 2, x)
        assert result.shape == (3, 4)
        for idx in np.ndindex(x.shape):
            assert result[idx] == pytest.approx(associated_legendre(6, 2, float(x[idx])), abs=1e-12)
    
    @pytest.mark.parametrize("l", [2, 5, 8, 12])
    def test_norm_integral(self, l):
        """Integral of (P_l^m)^2 over [-1, 1] is 2/(2l+1) (l+m)!/(l-m)!."""
        nodes, weights = np.polynomial.legendre.leggauss(40)
        for m in range(0, l + 1):
            integral = np.sum(weights * associated_legendre(l, m, nodes) ** 2)
            expected = 2.0 / (2 * l + 1) * math.factorial(l + m) / math.factorial(l - m)
            assert integral == pytest.approx(expected, rel=1e-9)
    
    def test_against_scipy(self):
        """Match scipy's associated Legendre function up to degree 20."""
        special = pytest.importorskip("scipy.special")
        if not hasattr(special, "lpmv"):
            pytest.skip("scipy.special.lpmv not available")
        x = np.linspace(-0.95, 0.95, 17)
        for l in range(0, 21):
            for m in range(0, l + 1):
                expected = special.lpmv(m, l, x)
                np.testing.assert_allclose(associated_legendre(l, m, x), expected,
                                           rtol=1e-8, atol=1e-8 * np.max(np.abs(expected)))


class TestSphericalHarmonics:
    """Tests for the real-part spherical harmonic value."""
    
    @pytest.mark.parametrize("theta,phi", [(0.0, 0.0), (0.7, 1.3), (math.pi, 5.0), (2.0, -2.5)])
    def test_degree_zero_is_constant(self, theta, phi):
        """Y_0^0 = 1 / sqrt(4 pi) everywhere."""
        value = spherical_harmonic_value(0, 0, theta, phi)
        assert value == pytest.approx(1.0 / math.sqrt(4 * math.pi), rel=1e-15)
    
    def test_explicit_formula(self):
        """Y_2^1 at a fixed direction matches the formula written out by hand."""
        theta, phi = 0.9, 0.4
        x = math.cos(theta)
        norm = math.sqrt(5 * 1 / (4 * math.pi * 6))
        p21 = -3.0 * x * math.sqrt(1 - x * x)
        expected = norm * p21 * math.cos(phi)
        assert spherical_harmonic_value(2, 1, theta, phi) == pytest.approx(expected, rel=1e-12)
    
    def test_negative_odd_order_flips_sign(self):
        """For odd |m| the value at -m is the negation of the value at m."""
        theta, phi = 1.1, 0.6
        positive = spherical_harmonic_value(2, 1, theta, phi)
        negative = spherical_harmonic_value(2, -1, theta, phi)
        assert positive != 0.0
        assert negative == pytest.approx(-positive, rel=1e-15)
    
    def test_negative_even_order_keeps_sign(self):
        """For even |m| the values at m and -m are equal."""
        theta, phi = 1.1, 0.6
        assert spherical_harmonic_value(4, -2, theta, phi) == pytest.approx(
            spherical_harmonic_value(4, 2, theta, phi), rel=1e-15)
    
    def test_invalid_order_is_zero(self):
        """|m| > l gives zero instead of raising."""
        assert spherical_harmonic_value(2, 3, 0.5, 0.5) == 0.0
        assert spherical_harmonic_value(1, -4, 0.5, 0.5) == 0.0
    
    @pytest.mark.parametrize("l,m", [(5, 300), (5, -300), (2, 2000)])
    def test_large_invalid_order_is_zero(self, l, m):
        """Orders far beyond the degree give zero even where their factorials overflow."""
        assert spherical_harmonic_value(l, m, 0.5, 0.5) == 0.0
        values = spherical_harmonic_value(l, m, np.linspace(0.0, math.pi, 4)[:, np.newaxis], np.zeros(3))
        assert values.shape == (4, 3)
        assert np.all(values == 0.0)
    
    def test_negative_degree_raises(self):
        """A negative degree is outside the domain."""
        with pytest.raises(MathError.DomainError):
            spherical_harmonic_value(-1, 0, 0.5, 0.5)
    
    def test_repeated_evaluation_is_identical(self):
        """Same inputs give bit-identical output."""
        first = spherical_harmonic_value(7, -3, 1.234, 4.321)
        second = spherical_harmonic_value(7, -3, 1.234, 4.321)
        assert first == second
    
    def test_array_broadcasting(self):
        """Angles broadcast like numpy arrays."""
        theta = np.linspace(0.0, math.pi, 5)[:, np.newaxis]
        phi = np.linspace(0.0, 2 * math.pi, 7, endpoint=False)[np.newaxis, :]
        values = spherical_harmonic_value(3, 2, theta, phi)
        assert values.shape == (5, 7)
        assert values[2, 3] == pytest.approx(
            spherical_harmonic_value(3, 2, float(theta[2, 0]), float(phi[0, 3])), abs=1e-14)
    
    def test_matches_complex_harmonic_real_part(self):
        """For m >= 0 the value is the real part of the orthonormal Y_l^m."""
        theta, phi = 0.8, 2.1
        for l in range(0, 6):
            for m in range(0, l + 1):
                norm = math.sqrt((2 * l + 1) / (4 * math.pi)
                                 * math.factorial(l - m) / math.factorial(l + m))
                expected = norm * associated_legendre(l, m, math.cos(theta)) * math.cos(m * phi)
                assert spherical_harmonic_value(l, m, theta, phi) == pytest.approx(expected, abs=1e-14)


class TestNormalization:
    """Tests for the normalization constant."""
    
    def test_normalization_values(self):
        assert normalization_constant(0, 0) == pytest.approx(1.0 / math.sqrt(4 * math.pi))
        assert normalization_constant(1, 1) == pytest.approx(math.sqrt(3 / (8 * math.pi)))
    
    def test_normalization_is_even_in_order(self):
        assert normalization_constant(5, -3) == normalization_constant(5, 3)
    
    def test_normalization_overflow(self):
        """Factorials beyond double range are reported as a precision error."""
        with pytest.raises(MathError.PrecisionError):
            normalization_constant(200, 200)
