"""Sampled profile curves ``(r(s), h(s))`` of surfaces of revolution."""

from dataclasses import dataclass, replace

import numpy as np

from revsurflib.profiles._cases import CurvatureCase


def _frozen(x) -> np.ndarray:
    arr = np.array(x, dtype=np.float64)
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class Profile:
    """Immutable profile sample sequence.

    Attributes
    ----------
    s : ndarray
        Arc-length parameter of each sample.
    r : ndarray
        Radial distance from the axis.
    h : ndarray
        Height along the axis.
    a : float
        Shape parameter the profile was solved for.
    case : CurvatureCase
        Curvature family.
    """
    s: np.ndarray
    r: np.ndarray
    h: np.ndarray
    a: float
    case: CurvatureCase

    def __post_init__(self):
        for name in ('s', 'r', 'h'):
            object.__setattr__(self, name, _frozen(getattr(self, name)))
        if not (self.s.shape == self.r.shape == self.h.shape):
            raise ValueError(
                f"profile arrays must have equal length, got "
                f"{self.s.shape}, {self.r.shape}, {self.h.shape}"
            )

    def __len__(self) -> int:
        return self.s.shape[0]

    @property
    def points(self) -> np.ndarray:
        """``(n, 2)`` array of ``(r, h)`` pairs."""
        return np.column_stack([self.r, self.h])

    @property
    def total_height(self) -> float:
        if len(self) == 0:
            return 0.0
        return float(np.max(self.h) - np.min(self.h))

    @property
    def s_range(self) -> tuple:
        if len(self) == 0:
            return (np.nan, np.nan)
        return (float(self.s[0]), float(self.s[-1]))

    def recentered(self) -> 'Profile':
        """Shift heights so the end points sit symmetrically about ``h = 0``.

        For a profile accumulated from ``h = 0`` this subtracts half of the
        total accumulated height.
        """
        if len(self) == 0:
            return self
        offset = 0.5 * (self.h[0] + self.h[-1])
        return replace(self, h=self.h - offset)

    def flipped(self) -> 'Profile':
        """Mirror heights end for end (``h -> h[0] + h[-1] - h``).

        The surface is reflected in a horizontal plane; follow with
        :meth:`reversed` to keep heights increasing with the sample index.
        """
        if len(self) == 0:
            return self
        return replace(self, h=self.h[0] + self.h[-1] - self.h)

    def reversed(self) -> 'Profile':
        """Reverse the sample order."""
        return replace(self, s=self.s[::-1], r=self.r[::-1], h=self.h[::-1])
