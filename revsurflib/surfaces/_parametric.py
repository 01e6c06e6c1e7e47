"""
Parametric surface interface.

A parametric surface maps a rectangle ``[u_min, u_max] x [v_min, v_max]``
to points in 3D. Surfaces that know their normals analytically advertise it
through the ``has_analytic_normal`` flag; the tessellator averages face
normals for all others.

Usage
-----
    from revsurflib.surfaces import Domain, FunctionSurface

    plane = FunctionSurface(
        lambda u, v: (u, v, 0.0),
        Domain(0.0, 1.0, 0.0, 1.0),
        normal_fn=lambda u, v: (0.0, 0.0, 1.0),
    )
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Domain:
    """Parameter rectangle ``[u_min, u_max] x [v_min, v_max]``."""
    u_min: float
    u_max: float
    v_min: float
    v_max: float

    def is_finite(self) -> bool:
        return all(math.isfinite(x) for x in (self.u_min, self.u_max,
                                               self.v_min, self.v_max))

    def replace_bounds(self, u_min=None, u_max=None, v_min=None, v_max=None) -> 'Domain':
        """Return a domain with the given bounds overridden."""
        return Domain(
            self.u_min if u_min is None else u_min,
            self.u_max if u_max is None else u_max,
            self.v_min if v_min is None else v_min,
            self.v_max if v_max is None else v_max,
        )


class ParametricSurface(ABC):
    """Abstract parametric surface ``(u, v) -> (x, y, z)``."""

    #: Whether :meth:`normal` is implemented.
    has_analytic_normal = False

    @abstractmethod
    def evaluate(self, u: float, v: float) -> np.ndarray:
        """Point on the surface at ``(u, v)``."""

    @abstractmethod
    def domain(self) -> Domain:
        """Parameter rectangle of the surface."""

    def normal(self, u: float, v: float) -> np.ndarray:
        """Unit normal at ``(u, v)``; only for surfaces with analytic normals."""
        raise NotImplementedError(
            f"{type(self).__name__} does not provide analytic normals"
        )


class FunctionSurface(ParametricSurface):
    """Parametric surface built from plain callables.

    Parameters
    ----------
    evaluate_fn : callable
        ``evaluate_fn(u, v) -> (x, y, z)``.
    domain : Domain or tuple
        ``Domain`` or ``(u_min, u_max, v_min, v_max)``.
    normal_fn : callable or None
        ``normal_fn(u, v) -> (nx, ny, nz)``. Enables analytic normals.
    """

    def __init__(self, evaluate_fn, domain, normal_fn=None):
        if not callable(evaluate_fn):
            raise TypeError("evaluate_fn must be callable")
        self._evaluate_fn = evaluate_fn
        self._normal_fn = normal_fn
        self._domain = domain if isinstance(domain, Domain) else Domain(*domain)

    @property
    def has_analytic_normal(self) -> bool:
        return self._normal_fn is not None

    def evaluate(self, u, v):
        return np.asarray(self._evaluate_fn(u, v), dtype=np.float64)

    def domain(self) -> Domain:
        return self._domain

    def normal(self, u, v):
        if self._normal_fn is None:
            return super().normal(u, v)
        return np.asarray(self._normal_fn(u, v), dtype=np.float64)
