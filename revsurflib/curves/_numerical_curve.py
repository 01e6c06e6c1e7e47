"""
NumericalCurve: smooth interpolation through numerically computed points.

A curve defined by an ordered point sequence (profile samples, ODE
trajectories, ...) and evaluated on the parameter domain ``[0, 1]``.

Usage
-----
    from revsurflib.curves import NumericalCurve

    curve = NumericalCurve(profile.points, curve_type='catmullrom', tension=0.5)
    curve.evaluate(0.5)        # (3,) point
    curve.tangent(0.5)         # (3,) unit tangent
    curve.length()             # arc length (cached)

    curve.update_points(new_profile.points)   # same object, new shape

Curve types
-----------
centripetal, chordal, catmullrom
    Catmull-Rom splines (C1). ``t * (n - 1)`` selects the segment, so every
    control point is hit at ``t = i / (n - 1)``; the end segments use
    reflected phantom points. ``catmullrom`` is the uniform variant scaled by
    ``tension``.
natural
    C2 cubic spline (natural end conditions, periodic when closed) over
    centripetal knots normalised to ``[0, 1]``.

Derived state (spline fit, arc-length table) is rebuilt lazily: every
mutation marks the curve dirty and every query refreshes a dirty curve
before answering.
"""

import logging

import numpy as np
from scipy.interpolate import CubicSpline

logger = logging.getLogger(__name__)

CURVE_TYPES = ('centripetal', 'chordal', 'catmullrom', 'natural')

# Exponents applied to squared chord lengths
_KNOT_EXPONENTS = {'centripetal': 0.25, 'chordal': 0.5}
_EPS_KNOT = 1e-4


def _as_points(points) -> np.ndarray:
    """Copy *points* into a read-only ``(n, 3)`` float array."""
    arr = np.array(points, dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] not in (2, 3):
        raise ValueError(f"points must have shape (n, 2) or (n, 3), got {arr.shape}")
    if arr.shape[0] < 2:
        raise ValueError(f"a curve needs at least 2 points, got {arr.shape[0]}")
    if arr.shape[1] == 2:
        arr = np.hstack([arr, np.zeros((arr.shape[0], 1))])
    arr.flags.writeable = False
    return arr


class NumericalCurve:
    """Interpolating spline through an ordered point sequence.

    Parameters
    ----------
    points : array_like of shape (n, 2) or (n, 3)
        Control points, ``n >= 2``. 2D points get ``z = 0``.
    closed : bool
        Whether the curve wraps from the last point back to the first.
    curve_type : str
        One of ``"centripetal"`` (default), ``"chordal"``, ``"catmullrom"``,
        ``"natural"``.
    tension : float
        Tangent scale of the uniform ``"catmullrom"`` type.
    arc_length_divisions : int
        Number of chords in the arc-length table.
    """

    def __init__(self, points, closed=False, curve_type='centripetal',
                 tension=0.5, arc_length_divisions=200):
        if curve_type not in CURVE_TYPES:
            raise ValueError(
                f"Unknown curve_type: {curve_type!r}. Available: {list(CURVE_TYPES)}"
            )
        if int(arc_length_divisions) < 1:
            raise ValueError("arc_length_divisions must be >= 1")
        self._closed = bool(closed)
        self._curve_type = curve_type
        self._tension = float(tension)
        self.arc_length_divisions = int(arc_length_divisions)

        self._points = _as_points(points)
        self._spline = None
        self._arc_lengths = None
        self._dirty = True

    # -- configuration ---------------------------------------------------

    @property
    def points(self) -> np.ndarray:
        """Read-only ``(n, 3)`` control points."""
        return self._points

    @property
    def closed(self) -> bool:
        return self._closed

    @closed.setter
    def closed(self, value):
        self._closed = bool(value)
        self._dirty = True

    @property
    def curve_type(self) -> str:
        return self._curve_type

    @curve_type.setter
    def curve_type(self, value):
        if value not in CURVE_TYPES:
            raise ValueError(
                f"Unknown curve_type: {value!r}. Available: {list(CURVE_TYPES)}"
            )
        self._curve_type = value
        self._dirty = True

    @property
    def tension(self) -> float:
        return self._tension

    @tension.setter
    def tension(self, value):
        self._tension = float(value)
        self._dirty = True

    @property
    def is_dirty(self) -> bool:
        """True until the derived state matches the current points."""
        return self._dirty

    def update_points(self, points) -> None:
        """Replace the control points and invalidate the derived state."""
        self._points = _as_points(points)
        self._dirty = True
        logger.debug("curve points replaced: %d points", self._points.shape[0])

    def update_arc_lengths(self) -> None:
        """Force an immediate rebuild of the derived state."""
        self._dirty = True
        self._refresh()

    def _refresh(self) -> None:
        if not self._dirty:
            return
        self._spline = self._fit_natural() if self._curve_type == 'natural' else None
        ts = np.linspace(0.0, 1.0, self.arc_length_divisions + 1)
        chords = np.linalg.norm(np.diff(self._eval(ts), axis=0), axis=1)
        self._arc_lengths = np.concatenate([[0.0], np.cumsum(chords)])
        self._arc_lengths.flags.writeable = False
        self._dirty = False

    # -- queries -----------------------------------------------------------

    def domain(self) -> tuple:
        """Parameter domain, always ``(0.0, 1.0)``."""
        return (0.0, 1.0)

    def evaluate(self, t) -> np.ndarray:
        """Point at parameter *t* (scalar gives ``(3,)``, array gives ``(..., 3)``)."""
        self._refresh()
        return self._vectorised(self._eval, t)

    def tangent(self, t) -> np.ndarray:
        """Unit tangent at parameter *t*."""
        self._refresh()
        return self._vectorised(self._unit_tangent, t)

    @property
    def arc_lengths(self) -> np.ndarray:
        """Cumulative chord lengths at ``arc_length_divisions + 1`` uniform ``t``."""
        self._refresh()
        return self._arc_lengths

    def length(self) -> float:
        """Total arc length."""
        return float(self.arc_lengths[-1])

    def t_from_arc_length(self, u):
        """Map normalised arc length *u* in ``[0, 1]`` to the curve parameter."""
        lengths = self.arc_lengths
        u_arr = np.clip(np.asarray(u, dtype=np.float64), 0.0, 1.0)
        total = lengths[-1]
        if not total > 0.0:
            return u_arr if u_arr.ndim else float(u_arr)

        divisions = lengths.shape[0] - 1
        target = u_arr * total
        i = np.clip(np.searchsorted(lengths, target, side='right') - 1, 0, divisions - 1)
        seg = lengths[i + 1] - lengths[i]
        with np.errstate(divide='ignore', invalid='ignore'):
            frac = np.where(seg > 0.0, (target - lengths[i]) / seg, 0.0)
        t = (i + frac) / divisions
        return t if t.ndim else float(t)

    def evaluate_at(self, u) -> np.ndarray:
        """Point at normalised arc length *u* (arc-length uniform parameter)."""
        return self.evaluate(self.t_from_arc_length(u))

    def spaced_points(self, divisions=5) -> np.ndarray:
        """``divisions + 1`` points equally spaced in arc length."""
        return self.evaluate_at(np.linspace(0.0, 1.0, int(divisions) + 1))

    # -- internals ---------------------------------------------------------

    @staticmethod
    def _vectorised(fn, t):
        t_arr = np.asarray(t, dtype=np.float64)
        out = fn(np.atleast_1d(t_arr).ravel())
        if t_arr.ndim == 0:
            return out[0]
        return out.reshape(t_arr.shape + (3,))

    def _eval(self, t):
        if self._curve_type == 'natural':
            return self._spline(self._natural_t(t))
        c0, c1, c2, c3, w, p1, p2 = self._segments(t)
        wc = w[:, None]
        p = c0 + wc * (c1 + wc * (c2 + wc * c3))
        # control points are hit exactly
        p = np.where((w == 0.0)[:, None], p1, p)
        return np.where((w == 1.0)[:, None], p2, p)

    def _unit_tangent(self, t):
        if self._curve_type == 'natural':
            d = self._spline(self._natural_t(t), 1)
        else:
            c0, c1, c2, c3, w, _, _ = self._segments(t)
            wc = w[:, None]
            d = c1 + wc * (2.0 * c2 + 3.0 * wc * c3)
        norm = np.linalg.norm(d, axis=1, keepdims=True)
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.where(norm > 0.0, d / norm, 0.0)

    @staticmethod
    def _natural_t(t):
        return np.clip(t, 0.0, 1.0)

    def _fit_natural(self):
        pts = self._points
        if self._closed:
            pts = np.vstack([pts, pts[:1]])
        chords = np.linalg.norm(np.diff(pts, axis=0), axis=1) ** 0.5
        knots = np.concatenate([[0.0], np.cumsum(np.maximum(chords, 1e-12))])
        knots /= knots[-1]
        bc_type = 'periodic' if self._closed else 'natural'
        return CubicSpline(knots, pts, axis=0, bc_type=bc_type)

    def _segments(self, t):
        """Cubic coefficients and local weights of the segments holding *t*."""
        pts = self._points
        n = pts.shape[0]
        t = np.clip(t, 0.0, 1.0)

        if self._closed:
            p = n * t
            idx = np.floor(p).astype(np.intp)
            w = p - idx
            idx %= n
            p0 = pts[(idx - 1) % n]
            p1 = pts[idx]
            p2 = pts[(idx + 1) % n]
            p3 = pts[(idx + 2) % n]
        else:
            p = (n - 1) * t
            idx = np.floor(p).astype(np.intp)
            w = p - idx
            end = idx >= n - 1
            idx[end] = n - 2
            w[end] = 1.0
            p1 = pts[idx]
            p2 = pts[idx + 1]
            p0 = np.where((idx > 0)[:, None], pts[np.maximum(idx - 1, 0)],
                          2.0 * pts[0] - pts[1])
            p3 = np.where((idx + 2 < n)[:, None], pts[np.minimum(idx + 2, n - 1)],
                          2.0 * pts[n - 1] - pts[n - 2])

        if self._curve_type == 'catmullrom':
            t1 = self._tension * (p2 - p0)
            t2 = self._tension * (p3 - p1)
        else:
            exponent = _KNOT_EXPONENTS[self._curve_type]
            dt0 = np.sum((p0 - p1) ** 2, axis=1) ** exponent
            dt1 = np.sum((p1 - p2) ** 2, axis=1) ** exponent
            dt2 = np.sum((p2 - p3) ** 2, axis=1) ** exponent
            # coincident points
            dt1 = np.where(dt1 < _EPS_KNOT, 1.0, dt1)
            dt0 = np.where(dt0 < _EPS_KNOT, dt1, dt0)
            dt2 = np.where(dt2 < _EPS_KNOT, dt1, dt2)
            dt0, dt1, dt2 = dt0[:, None], dt1[:, None], dt2[:, None]
            t1 = (p1 - p0) / dt0 - (p2 - p0) / (dt0 + dt1) + (p2 - p1) / dt1
            t2 = (p2 - p1) / dt1 - (p3 - p1) / (dt1 + dt2) + (p3 - p2) / dt2
            t1 = t1 * dt1
            t2 = t2 * dt1

        c0 = p1
        c1 = t1
        c2 = -3.0 * p1 + 3.0 * p2 - 2.0 * t1 - t2
        c3 = 2.0 * p1 - 2.0 * p2 + t1 + t2
        return c0, c1, c2, c3, w, p1, p2
