"""
Geometric measures of sampled profiles.

The profiles produced by the solvers are parametrised by arc length, so
``r'(s)^2 + h'(s)^2 = 1`` and the Gaussian curvature of the surface of
revolution is ``K = -r''(s) / r(s)``. These helpers check and use that.
"""

import numpy as np
from scipy.integrate import trapezoid


def _derivative(y, s):
    return np.gradient(y, s, edge_order=2)


def arc_length_defect(profile) -> np.ndarray:
    """Per-sample deviation ``r'^2 + h'^2 - 1`` (finite differences in ``s``)."""
    dr = _derivative(profile.r, profile.s)
    dh = _derivative(profile.h, profile.s)
    return dr ** 2 + dh ** 2 - 1.0


def gaussian_curvature(profile) -> np.ndarray:
    """Finite-difference estimate of ``K = -r'' / r`` at every sample.

    Samples on the axis (``r == 0``) give NaN.
    """
    d2r = _derivative(_derivative(profile.r, profile.s), profile.s)
    with np.errstate(divide='ignore', invalid='ignore'):
        K = -d2r / profile.r
    K[profile.r == 0.0] = np.nan
    return K


def surface_area(profile) -> float:
    """Area of the surface of revolution, ``2 pi * integral of r ds``."""
    return float(2.0 * np.pi * trapezoid(profile.r, profile.s))


def enclosed_volume(profile) -> float:
    """Volume swept by the region between axis and profile, ``pi * |integral of r^2 dh|``."""
    return float(np.pi * abs(trapezoid(profile.r ** 2, profile.h)))
