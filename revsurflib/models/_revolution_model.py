"""
RevolutionModel: convenience runner for the profile -> surface -> mesh pipeline.

Bundles profile solve, profile curve, surface of revolution and its
tessellation into a single object.  Cases can use this OR call the pieces
directly; it is purely a convenience layer.

Usage
-----
    from revsurflib.models import RevolutionModel, ModelParams

    model = RevolutionModel(ModelParams.for_case('trumpet', a=0.5))
    model.geometry                      # MeshBuffer
    model.set_a(1.2)                    # re-solve, update curve, rebuild mesh
    frames = model.sweep(np.linspace(0.1, 2.0, 20))
"""

import logging
import time
from typing import Callable, Iterable, List, Optional

from revsurflib.curves import NumericalCurve
from revsurflib.models._params import ModelParams, ProfileParams
from revsurflib.profiles import CurvatureCase, Profile, solve_profile
from revsurflib.surfaces import MeshBuffer, SurfaceMesh, SurfaceOfRevolution

logger = logging.getLogger(__name__)


class RevolutionModel:
    """Surface of revolution driven by a single shape parameter.

    Parameters
    ----------
    params : ModelParams or None
        Pipeline parameters (default: spindle with ``a = 0.5``).

    Attributes
    ----------
    profile : Profile
        Current (post-processed) profile.
    curve : NumericalCurve
        Profile curve through ``profile.points``; the same object for the
        lifetime of the model.
    surface : SurfaceOfRevolution
        Surface revolving ``curve``.
    mesh : SurfaceMesh
        Surface paired with its tessellation.
    """

    def __init__(self, params: Optional[ModelParams] = None):
        self.params = params if params is not None else ModelParams()
        self.profile = self._solve(self.params.profile)

        c = self.params.curve
        self.curve = NumericalCurve(
            self.profile.points,
            closed=c.closed,
            curve_type=c.curve_type,
            tension=c.tension,
            arc_length_divisions=c.arc_length_divisions,
        )
        self.surface = SurfaceOfRevolution(self.curve)
        self.mesh = SurfaceMesh(
            self.surface,
            u_segments=self.params.mesh.u_segments,
            v_segments=self.params.mesh.v_segments,
        )

    @property
    def geometry(self) -> MeshBuffer:
        """Current mesh buffers."""
        return self.mesh.geometry

    @property
    def a(self) -> float:
        return self.params.profile.a

    @property
    def case(self) -> CurvatureCase:
        return self.params.profile.case

    @staticmethod
    def _solve(p: ProfileParams) -> Profile:
        profile = solve_profile(p.case, p.a, steps=p.steps, method=p.method,
                                stepper=p.stepper)
        if p.flip:
            profile = profile.flipped().reversed()
        if p.recenter:
            profile = profile.recentered()
        return profile

    def set_a(self, a: float) -> MeshBuffer:
        """Change the shape parameter and rebuild the mesh.

        A spindle or barrel model switches between the two cases as *a*
        crosses 1.

        Returns
        -------
        MeshBuffer
            The rebuilt geometry.

        Raises
        ------
        ValueError
            If *a* is outside the valid range of the model's case.
        """
        case = self.case
        if case.curvature > 0:
            case = CurvatureCase.spherical(a)

        t0 = time.perf_counter()
        # ProfileParams validates a before anything is mutated
        profile_params = ProfileParams(
            case=case, a=a,
            steps=self.params.profile.steps,
            method=self.params.profile.method,
            stepper=self.params.profile.stepper,
            recenter=self.params.profile.recenter,
            flip=self.params.profile.flip,
        )
        profile = self._solve(profile_params)

        self.params.profile = profile_params
        self.profile = profile
        self.curve.update_points(profile.points)
        geometry = self.mesh.rebuild()
        logger.debug("set_a(%g) [%s]: rebuilt %d vertices in %.3f ms",
                     a, case.value, geometry.vertex_count,
                     1e3 * (time.perf_counter() - t0))
        return geometry

    def sweep(self, values: Iterable[float],
              callback: Optional[Callable] = None) -> List[MeshBuffer]:
        """Apply :meth:`set_a` for each value in turn.

        Parameters
        ----------
        values : iterable of float
            Shape parameters.
        callback : callable or None
            Called as ``callback(model, a)`` after each rebuild.

        Returns
        -------
        list of MeshBuffer
            Copies of the geometry after each step.
        """
        frames = []
        for a in values:
            geometry = self.set_a(a)
            frames.append(geometry.copy())
            if callback is not None:
                callback(self, a)
        logger.info("swept %d values of a for %s", len(frames), self.case.value)
        return frames
