"""Numerical methods for the closed-form reference values."""

from lpssim.numerics.integration import integrate_adaptive_simpson, integrate_to_infinity

__all__ = [
    "integrate_adaptive_simpson",
    "integrate_to_infinity",
]
