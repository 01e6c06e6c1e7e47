"""
Closed-form reference surfaces with analytic normals.

Both surfaces use the same convention as :class:`SurfaceOfRevolution`:
revolution about the y axis, ``u`` the angle, ``v`` running up the profile,
so that ``du x dv`` points outward.
"""

import numpy as np

from revsurflib.surfaces._parametric import Domain, ParametricSurface


def sech(x):
    return 1 / np.cosh(x)


class SphereSurface(ParametricSurface):
    """Sphere of radius *R* centred on the origin.

    ``(R sin v cos u, -R cos v, -R sin v sin u)`` on ``[0, 2 pi] x [0, pi]``.
    """

    has_analytic_normal = True

    def __init__(self, R=1.0):
        self.R = float(R)

    def evaluate(self, u, v):
        R = self.R
        return np.array([R * np.sin(v) * np.cos(u),
                         -R * np.cos(v),
                         -R * np.sin(v) * np.sin(u)])

    def normal(self, u, v):
        return np.array([np.sin(v) * np.cos(u),
                         -np.cos(v),
                         -np.sin(v) * np.sin(u)])

    def domain(self) -> Domain:
        return Domain(0.0, 2 * np.pi, 0.0, np.pi)

    def gaussian_curvature(self, u=None, v=None) -> float:
        return 1.0 / self.R ** 2


class CatenoidSurface(ParametricSurface):
    """Catenoid with neck radius *a*, cut to height *length*.

    Profile ``r(v) = a cosh(v / a)``, ``h = v`` for ``v in [-length/2, length/2]``.
    """

    has_analytic_normal = True

    def __init__(self, a=1.0, length=2.0):
        self.a = float(a)
        self.length = float(length)

    def evaluate(self, u, v):
        r = self.a * np.cosh(v / self.a)
        return np.array([r * np.cos(u), v, -r * np.sin(u)])

    def normal(self, u, v):
        c = sech(v / self.a)
        return np.array([c * np.cos(u), -np.tanh(v / self.a), -c * np.sin(u)])

    def domain(self) -> Domain:
        return Domain(0.0, 2 * np.pi, -self.length / 2, self.length / 2)

    def gaussian_curvature(self, u, v) -> float:
        return -(sech(v / self.a)) ** 4 / (self.a ** 2)
