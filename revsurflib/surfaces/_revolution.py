"""Surface of revolution swept by a profile curve about the y axis."""

import numpy as np

from revsurflib.surfaces._parametric import Domain, ParametricSurface


class SurfaceOfRevolution(ParametricSurface):
    """Revolve a profile curve through a full turn about the y axis.

    ::

        p = curve.evaluate(v)
        evaluate(u, v) = (p.x cos u, p.y, -p.x sin u)

    with ``u in [0, 2 pi]`` and ``v in [0, 1]``. ``p.x`` is the radius and
    ``p.y`` the height. The surface holds a reference to *curve*, so
    ``curve.update_points(...)`` changes the surface in place.

    No analytic normal is provided; the tessellator averages face normals.
    The averaged normals point away from the axis when the profile height
    increases with ``v``.

    Parameters
    ----------
    curve : NumericalCurve
        Profile curve with ``evaluate(t)`` on ``[0, 1]``.
    """

    def __init__(self, curve):
        self.curve = curve

    def evaluate(self, u, v):
        p = self.curve.evaluate(v)
        return np.array([p[0] * np.cos(u), p[1], -p[0] * np.sin(u)])

    def domain(self) -> Domain:
        t_min, t_max = self.curve.domain()
        return Domain(0.0, 2 * np.pi, t_min, t_max)
