"""
Profile-curve solvers for surfaces of constant Gaussian curvature.

All solvers share one pipeline and differ only in their radius function,
height rate and domain rule::

    s_min, s_max = solver.domain(a)
    heights      = cumulative quadrature of h'(s)     (method="quadrature")
                   or the profile ODE state [r, r', h] (method="ode")
    points       = (r(s), h(s))

Usage
-----
    from revsurflib.profiles import solve_profile

    profile = solve_profile('spindle', a=0.5, steps=400).recentered()
    profile.points  # (401, 2) array of (r, h)

The solvers do not validate ``a``. Parameters outside the valid range of a
case give NaN or collapsed profiles; see :func:`validate_shape_parameter`.
"""

import logging
from abc import ABC, abstractmethod

import numpy as np

from revsurflib._quadrature import quadrature
from revsurflib._registry import MethodRegistry
from revsurflib.integrators import integrate
from revsurflib.profiles._cases import CurvatureCase
from revsurflib.profiles._profile import Profile

logger = logging.getLogger(__name__)


def _inverse(a):
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.float64(1.0) / np.float64(a)


def _clamped_sqrt(x):
    """Square root with the radicand clamped to >= 0."""
    return np.sqrt(np.maximum(0.0, x))


class ProfileSolver(ABC):
    """Abstract constant-curvature profile solver.

    Subclasses define the closed-form radius ``r(s)``, its derivative, the
    height rate ``h'(s) = sqrt(1 - r'(s)^2)`` and the domain policy.
    """

    #: Sign of the Gaussian curvature (+1 or -1).
    curvature = 1
    #: Solve on ``[0, s_max]`` and mirror to ``[-s_max, s_max]``.
    mirrored = False

    @abstractmethod
    def case_for(self, a) -> CurvatureCase:
        """Curvature case a profile solved for *a* belongs to."""

    @abstractmethod
    def radius(self, s, a):
        """Radial distance ``r(s)`` from the axis."""

    @abstractmethod
    def radius_rate(self, s, a):
        """Derivative ``r'(s)``."""

    @abstractmethod
    def height_rate(self, s, a):
        """Height derivative ``h'(s)`` with the radicand clamped to >= 0."""

    @abstractmethod
    def domain(self, a) -> tuple:
        """Arc-length interval ``(s_min, s_max)`` for parameter *a*."""

    def extent(self, a) -> float:
        """Arc length of the full (mirrored, if applicable) profile."""
        s_min, s_max = self.domain(a)
        width = float(s_max - s_min)
        return 2.0 * width if self.mirrored else width

    def solve(self, a, steps=200, method='quadrature', stepper=None) -> Profile:
        """Solve the profile for shape parameter *a*.

        Parameters
        ----------
        a : float
            Shape parameter.
        steps : int
            Number of subintervals over the solved domain (200-400 is the
            usual range; mirrored profiles end up with ``2 * steps + 1``
            samples).
        method : str
            ``"quadrature"`` (closed-form radius, cumulative quadrature of
            the height rate) or ``"ode"`` (fixed-step integration of the
            profile ODE).
        stepper : callable, str or None
            Stepper for ``method="ode"`` (default ``"rk4"``).

        Returns
        -------
        Profile
        """
        s_min, s_max = self.domain(a)
        solve_fn = profile_methods[method]
        s, r, h = solve_fn(self, a, s_min, s_max, steps, stepper)
        if self.mirrored:
            s, r, h = _mirror(s, r, h)
        logger.debug(
            "solved %s profile: a=%g, s in [%g, %g], %d samples (%s)",
            type(self).__name__, a, s_min, s_max, len(s), method,
        )
        return Profile(s=s, r=r, h=h, a=float(a), case=self.case_for(a))


class SphericalProfileSolver(ProfileSolver):
    """K = +1: ``r = a sin s``, ``h' = sqrt(1 - a^2 cos^2 s)``.

    For ``a <= 1`` (spindle, sphere at ``a = 1``) the profile runs tip to
    tip on ``[0, pi]``. For ``a > 1`` (barrel) it is cut where ``h'``
    vanishes, ``s in [arccos(1/a), pi - arccos(1/a)]``.
    """

    curvature = 1

    def case_for(self, a) -> CurvatureCase:
        return CurvatureCase.spherical(a)

    def radius(self, s, a):
        return np.maximum(0.0, a * np.sin(s))

    def radius_rate(self, s, a):
        return a * np.cos(s)

    def height_rate(self, s, a):
        return _clamped_sqrt(1.0 - a * a * np.cos(s) ** 2)

    def domain(self, a) -> tuple:
        if a <= 1:
            return 0.0, np.pi
        s_min = float(np.arccos(_inverse(a)))
        return s_min, np.pi - s_min


class TrumpetProfileSolver(ProfileSolver):
    """K = -1, hyperbolic type: ``r = a cosh s``, ``h' = sqrt(1 - a^2 sinh^2 s)``.

    The profile has its neck (``r = a``) at ``s = 0`` and is symmetric about
    it, so only ``[0, arcsinh(1/a)]`` is solved and the lower half is
    mirrored.
    """

    curvature = -1
    mirrored = True

    def case_for(self, a) -> CurvatureCase:
        return CurvatureCase.TRUMPET

    def radius(self, s, a):
        return a * np.cosh(s)

    def radius_rate(self, s, a):
        return a * np.sinh(s)

    def height_rate(self, s, a):
        return _clamped_sqrt(1.0 - a * a * np.sinh(s) ** 2)

    def domain(self, a) -> tuple:
        return 0.0, float(np.arcsinh(_inverse(a)))


class PseudosphereProfileSolver(ProfileSolver):
    """K = -1, cone type: ``r = a sinh s``, ``h' = sqrt(1 - a^2 cosh^2 s)``.

    Requires ``a < 1``. The cusp (``r = 0``) is at ``s = 0`` and the flared
    edge at ``s = arccosh(1/a)``.
    """

    curvature = -1

    def case_for(self, a) -> CurvatureCase:
        return CurvatureCase.PSEUDOSPHERE

    def radius(self, s, a):
        return a * np.sinh(s)

    def radius_rate(self, s, a):
        return a * np.cosh(s)

    def height_rate(self, s, a):
        return _clamped_sqrt(1.0 - a * a * np.cosh(s) ** 2)

    def domain(self, a) -> tuple:
        with np.errstate(invalid='ignore'):
            return 0.0, float(np.arccosh(_inverse(a)))


# Solve methods

def _solve_by_quadrature(solver, a, s_min, s_max, steps, stepper=None):
    """Closed-form radius and quadrature of the height rate."""
    s, h = quadrature(lambda t: solver.height_rate(t, a), s_min, s_max, steps,
                      vectorized=True)
    return s, solver.radius(s, a), h


def _solve_by_ode(solver, a, s_min, s_max, steps, stepper=None):
    """Integrate ``[r, r', h]' = [r', -K r, sqrt(1 - r'^2)]`` from ``s_min``."""
    K = solver.curvature

    def deriv(y, s):
        r, rp, _ = y
        return [rp, -K * r, np.sqrt(max(0.0, 1.0 - rp * rp))]

    initial = [solver.radius(s_min, a), solver.radius_rate(s_min, a), 0.0]
    dt = (s_max - s_min) / steps if steps >= 1 else 0.0
    states, s = integrate(deriv, initial, dt, steps, stepper=stepper, t0=s_min)
    r = states[:, 0]
    if K > 0:
        r = np.maximum(0.0, r)
    return s, r, states[:, 2]


def _mirror(s, r, h):
    """Reflect a half profile on ``[0, s_max]`` to ``[-s_max, s_max]``.

    The lower half is the upper half reversed with ``s`` and ``h`` negated;
    the duplicated ``s = 0`` sample is dropped.
    """
    return (
        np.concatenate([-s[:0:-1], s]),
        np.concatenate([r[:0:-1], r]),
        np.concatenate([-h[:0:-1], h]),
    )


profile_methods = MethodRegistry("profile solve", default="quadrature")
profile_methods.register("quadrature", _solve_by_quadrature)
profile_methods.register("ode", _solve_by_ode)

_spherical = SphericalProfileSolver()
profile_solvers = MethodRegistry("profile solver")
profile_solvers.register(CurvatureCase.SPINDLE, _spherical)
profile_solvers.register(CurvatureCase.BARREL, _spherical)
profile_solvers.register(CurvatureCase.TRUMPET, TrumpetProfileSolver())
profile_solvers.register(CurvatureCase.PSEUDOSPHERE, PseudosphereProfileSolver())


def get_solver(case) -> ProfileSolver:
    """Return the solver registered for *case* (enum or string value)."""
    return profile_solvers[CurvatureCase.coerce(case)]


def solve_profile(case, a, steps=200, method='quadrature', stepper=None) -> Profile:
    """Solve the profile of curvature case *case* for shape parameter *a*.

    See :meth:`ProfileSolver.solve` for the parameters.
    """
    return get_solver(case).solve(a, steps=steps, method=method, stepper=stepper)


def strip_width(case, a) -> float:
    """Arc-length extent of the profile of *case* (``2 arcsinh(1/a)`` for the trumpet)."""
    return get_solver(case).extent(a)
