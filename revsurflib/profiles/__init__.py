"""
Profile curves of surfaces with constant Gaussian curvature.

Submodules
----------
_cases    : CurvatureCase enum and shape-parameter validation
_profile  : Profile, the immutable (r, h) sample sequence
_solvers  : ProfileSolver family (spherical, trumpet, pseudosphere)
_measures : Arc-length check, curvature estimate, area and volume
"""

from revsurflib.profiles._cases import (
    CurvatureCase,
    validate_shape_parameter,
    spindle_parameter_for_texture,
)
from revsurflib.profiles._profile import Profile
from revsurflib.profiles._solvers import (
    ProfileSolver,
    SphericalProfileSolver,
    TrumpetProfileSolver,
    PseudosphereProfileSolver,
    profile_methods,
    profile_solvers,
    get_solver,
    solve_profile,
    strip_width,
)
from revsurflib.profiles._measures import (
    arc_length_defect,
    gaussian_curvature,
    surface_area,
    enclosed_volume,
)

__all__ = [
    'CurvatureCase',
    'validate_shape_parameter',
    'spindle_parameter_for_texture',
    'Profile',
    'ProfileSolver',
    'SphericalProfileSolver',
    'TrumpetProfileSolver',
    'PseudosphereProfileSolver',
    'profile_methods',
    'profile_solvers',
    'get_solver',
    'solve_profile',
    'strip_width',
    'arc_length_defect',
    'gaussian_curvature',
    'surface_area',
    'enclosed_volume',
]
