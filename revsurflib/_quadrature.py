"""
Cumulative quadrature of a scalar function on a closed interval.

Usage
-----
    from revsurflib._quadrature import quadrature

    ts, values = quadrature(np.sin, 0.0, np.pi, 200, vectorized=True)
    values[-1]  # ~ 2.0

values[i] approximates the integral of f from t_min to ts[i] using the
composite trapezoidal rule on a uniform grid.
"""

import logging

import numpy as np
from scipy.integrate import cumulative_trapezoid

logger = logging.getLogger(__name__)


def quadrature(f, t_min, t_max, steps, vectorized=False):
    """Cumulative trapezoidal quadrature of *f* on ``[t_min, t_max]``.

    Update rule::

        dt        = (t_max - t_min) / steps
        ts[i]     = t_min + i * dt
        values[0] = 0
        values[i] = values[i-1] + 0.5 * dt * (f(ts[i-1]) + f(ts[i]))

    Parameters
    ----------
    f : callable
        Integrand ``f(t) -> float``. With ``vectorized=True`` it is called
        once as ``f(ts) -> ndarray``.
    t_min, t_max : float
        Interval endpoints (``t_max >= t_min``).
    steps : int
        Number of subintervals (``>= 1``).
    vectorized : bool
        Whether *f* accepts and returns arrays.

    Returns
    -------
    ts : ndarray of shape (steps + 1,)
        Sample points, strictly increasing.
    values : ndarray of shape (steps + 1,)
        Accumulated integral at each sample point; ``values[-1]`` is the
        estimate over the whole interval.

    Notes
    -----
    Preconditions are not validated. ``steps < 1`` gives two empty arrays,
    and non-finite integrand values propagate into ``values``.
    """
    steps = int(steps)
    if steps < 1:
        logger.warning("quadrature called with steps=%d; returning empty samples", steps)
        return np.empty(0), np.empty(0)

    dt = (t_max - t_min) / steps
    ts = t_min + dt * np.arange(steps + 1, dtype=np.float64)

    if vectorized:
        fs = np.asarray(f(ts), dtype=np.float64)
    else:
        fs = np.fromiter((f(t) for t in ts), dtype=np.float64, count=steps + 1)

    values = cumulative_trapezoid(fs, dx=dt, initial=0.0)
    return ts, values


def integral(f, t_min, t_max, steps, vectorized=False):
    """Trapezoidal estimate of the integral of *f* over ``[t_min, t_max]``."""
    _, values = quadrature(f, t_min, t_max, steps, vectorized=vectorized)
    if values.size == 0:
        return np.nan
    return float(values[-1])
