"""Smooth curves through numerically computed points."""

from revsurflib.curves._numerical_curve import CURVE_TYPES, NumericalCurve

__all__ = [
    'CURVE_TYPES',
    'NumericalCurve',
]
