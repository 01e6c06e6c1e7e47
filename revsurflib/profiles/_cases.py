"""
Curvature cases for surfaces of revolution with constant Gaussian curvature.

Each case is one closed-form radius family. ``K = +1`` profiles satisfy
``r'' = -r`` and ``K = -1`` profiles satisfy ``r'' = r``, with ``s`` the
arc length along the profile and ``h' = sqrt(1 - r'^2)``.
"""

import math
from enum import Enum


class CurvatureCase(Enum):
    """Closed set of constant-curvature profile families."""

    SPINDLE = 'spindle'            # K = +1, r = a sin s, a <= 1
    BARREL = 'barrel'              # K = +1, r = a sin s, a > 1
    TRUMPET = 'trumpet'            # K = -1, r = a cosh s
    PSEUDOSPHERE = 'pseudosphere'  # K = -1, r = a sinh s, a < 1

    @property
    def curvature(self) -> int:
        """Sign of the Gaussian curvature (+1 or -1)."""
        if self in (CurvatureCase.SPINDLE, CurvatureCase.BARREL):
            return 1
        return -1

    @classmethod
    def spherical(cls, a: float) -> 'CurvatureCase':
        """Return SPINDLE for ``a <= 1`` and BARREL otherwise."""
        return cls.SPINDLE if a <= 1 else cls.BARREL

    @classmethod
    def coerce(cls, case) -> 'CurvatureCase':
        """Accept a :class:`CurvatureCase` or its string value."""
        if isinstance(case, cls):
            return case
        try:
            return cls(str(case).lower())
        except ValueError:
            raise ValueError(
                f"Unknown curvature case: {case!r}. "
                f"Available: {[c.value for c in cls]}"
            ) from None


def validate_shape_parameter(case, a: float) -> None:
    """Reject shape parameters outside the valid range of *case*.

    Solvers accept any ``a`` and degrade to NaN or collapsed profiles; this
    check is for the configuration layer that feeds them.

    Raises
    ------
    ValueError
        If ``a`` is not finite or positive, or lies outside the range of
        the case (SPINDLE ``a <= 1``, BARREL ``a > 1``, PSEUDOSPHERE
        ``a < 1``).
    """
    case = CurvatureCase.coerce(case)
    if not math.isfinite(a) or a <= 0:
        raise ValueError(f"shape parameter a must be finite and > 0, got {a!r}")
    if case is CurvatureCase.SPINDLE and a > 1:
        raise ValueError(f"spindle profiles need a <= 1, got a={a!r} (use 'barrel')")
    if case is CurvatureCase.BARREL and a <= 1:
        raise ValueError(f"barrel profiles need a > 1, got a={a!r} (use 'spindle')")
    if case is CurvatureCase.PSEUDOSPHERE and a >= 1:
        raise ValueError(f"pseudosphere profiles need a < 1, got a={a!r}")


def spindle_parameter_for_texture(width: float, height: float) -> float:
    """Spindle parameter that fits an equirectangular texture of given size.

    A spindle with ``r = a sin s`` has a meridian of length ``pi`` and an
    equator of circumference ``2 pi a``, so the texture aspect ratio
    ``width / height`` is preserved when ``a = width / (2 height)``.
    """
    return width / (2.0 * height)
