"""
Parameters of the profile -> curve -> mesh pipeline.

Usage
-----
    from revsurflib.models import ModelParams, ProfileParams, MeshParams

    params = ModelParams(
        profile=ProfileParams(case='trumpet', a=0.5),
        mesh=MeshParams(u_segments=96, v_segments=48),
    )
    params = ModelParams.for_case('pseudosphere', a=0.25)   # demo preset
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Union

from revsurflib.profiles import CurvatureCase, validate_shape_parameter


@dataclass
class ProfileParams:
    """Profile solve parameters.

    Attributes
    ----------
    case : CurvatureCase or str
        Curvature family; strings are converted to :class:`CurvatureCase`.
    a : float
        Shape parameter, validated against the range of *case*.
    steps : int
        Solver subintervals.
    method : str
        ``"quadrature"`` or ``"ode"``.
    stepper : str
        Stepper name for ``method="ode"``.
    recenter : bool
        Shift the profile so it is vertically centred.
    flip : bool
        Reflect the profile in a horizontal plane (used for the pseudosphere).
    """
    case: Union[CurvatureCase, str] = CurvatureCase.SPINDLE
    a: float = 0.5
    steps: int = 200
    method: str = 'quadrature'
    stepper: str = 'rk4'
    recenter: bool = True
    flip: bool = False

    def __post_init__(self):
        self.case = CurvatureCase.coerce(self.case)
        if int(self.steps) < 1:
            raise ValueError(f"steps must be >= 1, got {self.steps}")
        validate_shape_parameter(self.case, self.a)


@dataclass
class CurveParams:
    """Profile curve interpolation parameters."""
    curve_type: str = 'centripetal'
    tension: float = 0.5
    closed: bool = False
    arc_length_divisions: int = 200


@dataclass
class MeshParams:
    """Tessellation resolution."""
    u_segments: int = 32
    v_segments: int = 32

    def __post_init__(self):
        if int(self.u_segments) < 1 or int(self.v_segments) < 1:
            raise ValueError(
                f"segment counts must be >= 1, got "
                f"u={self.u_segments}, v={self.v_segments}"
            )


# Settings used by the interactive demos for each case
_CASE_PRESETS = {
    CurvatureCase.SPINDLE: dict(steps=400, recenter=True, flip=False),
    CurvatureCase.BARREL: dict(steps=400, recenter=True, flip=False),
    CurvatureCase.TRUMPET: dict(steps=200, recenter=False, flip=False),
    CurvatureCase.PSEUDOSPHERE: dict(steps=200, recenter=True, flip=True),
}


@dataclass
class ModelParams:
    """All parameters of a :class:`RevolutionModel`."""
    profile: ProfileParams = field(default_factory=ProfileParams)
    curve: CurveParams = field(default_factory=CurveParams)
    mesh: MeshParams = field(default_factory=MeshParams)

    @classmethod
    def for_case(cls, case, a: float, curve: Optional[CurveParams] = None,
                 mesh: Optional[MeshParams] = None, **profile_overrides) -> 'ModelParams':
        """Preset matching the demos: 96 x 48 mesh, Catmull-Rom curve."""
        case = CurvatureCase.coerce(case)
        profile_kw = dict(_CASE_PRESETS[case])
        profile_kw.update(profile_overrides)
        return cls(
            profile=ProfileParams(case=case, a=a, **profile_kw),
            curve=curve if curve is not None else CurveParams(curve_type='catmullrom',
                                                              tension=0.5),
            mesh=mesh if mesh is not None else MeshParams(u_segments=96, v_segments=48),
        )

    def with_a(self, a: float) -> 'ModelParams':
        """Copy with a new (validated) shape parameter."""
        return replace(self, profile=replace(self.profile, a=a))
