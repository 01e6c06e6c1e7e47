"""
Tessellation of parametric surfaces into triangle mesh buffers.

Usage
-----
    from revsurflib.surfaces import build_geometry

    mesh = build_geometry(surface, u_segments=96, v_segments=48)
    mesh.positions   # flat (3 * N,) float64
    mesh.normals     # flat (3 * N,) float64, unit length
    mesh.uvs         # flat (2 * N,) float64 in [0, 1]
    mesh.indices     # flat (3 * M,) uint32

The grid has ``N = (u_segments + 1) * (v_segments + 1)`` vertices stored
row-major (outer loop over v, inner loop over u) and ``M = 2 * u_segments *
v_segments`` triangles.
"""

import logging
from dataclasses import dataclass

import numpy as np

from revsurflib.surfaces._parametric import Domain

logger = logging.getLogger(__name__)

# Positions are rounded to this many decimals to find coincident vertices
WELD_DECIMALS = 9


@dataclass(eq=False)
class MeshBuffer:
    """Flat triangle mesh buffers ready for a rendering layer.

    Attributes
    ----------
    positions : ndarray of shape (3 * N,)
    normals : ndarray of shape (3 * N,)
    uvs : ndarray of shape (2 * N,)
    indices : ndarray of shape (3 * M,), uint32
    u_segments, v_segments : int
        Grid resolution the buffers were built with.
    """
    positions: np.ndarray
    normals: np.ndarray
    uvs: np.ndarray
    indices: np.ndarray
    u_segments: int
    v_segments: int

    @property
    def vertex_count(self) -> int:
        return self.positions.shape[0] // 3

    @property
    def triangle_count(self) -> int:
        return self.indices.shape[0] // 3

    @property
    def vertices(self) -> np.ndarray:
        """``(N, 3)`` view of the positions."""
        return self.positions.reshape(-1, 3)

    @property
    def vertex_normals(self) -> np.ndarray:
        """``(N, 3)`` view of the normals."""
        return self.normals.reshape(-1, 3)

    @property
    def faces(self) -> np.ndarray:
        """``(M, 3)`` view of the triangle indices."""
        return self.indices.reshape(-1, 3)

    def face_normals(self) -> np.ndarray:
        """Unnormalised face normals ``(p1 - p0) x (p2 - p0)`` (length = 2 * area)."""
        return _face_cross(self.vertices, self.faces)

    def area(self) -> float:
        """Total triangle area."""
        return float(0.5 * np.linalg.norm(self.face_normals(), axis=1).sum())

    def copy(self) -> 'MeshBuffer':
        return MeshBuffer(
            self.positions.copy(), self.normals.copy(), self.uvs.copy(),
            self.indices.copy(), self.u_segments, self.v_segments,
        )

    def equals(self, other: 'MeshBuffer') -> bool:
        """Exact equality of all four buffers."""
        return (
            np.array_equal(self.positions, other.positions)
            and np.array_equal(self.normals, other.normals)
            and np.array_equal(self.uvs, other.uvs)
            and np.array_equal(self.indices, other.indices)
        )


def _face_cross(vertices, faces):
    p0 = vertices[faces[:, 0]]
    p1 = vertices[faces[:, 1]]
    p2 = vertices[faces[:, 2]]
    return np.cross(p1 - p0, p2 - p0)


def grid_indices(u_segments: int, v_segments: int) -> np.ndarray:
    """Triangle indices of a ``(v_segments + 1) x (u_segments + 1)`` vertex grid.

    Each cell ``(i, j)`` emits ``(v0, v2, v1)`` and ``(v1, v2, v3)`` with::

        v0 = i * (U + 1) + j          v2 = v0 + 1
        v1 = (i + 1) * (U + 1) + j    v3 = v1 + 1

    so the face normal ``(v2 - v0) x (v1 - v0)`` follows ``du x dv``.
    """
    U, V = int(u_segments), int(v_segments)
    i, j = np.meshgrid(np.arange(V), np.arange(U), indexing='ij')
    v0 = i * (U + 1) + j
    v1 = (i + 1) * (U + 1) + j
    v2 = v0 + 1
    v3 = v1 + 1
    return np.stack([v0, v2, v1, v1, v2, v3], axis=-1).reshape(-1).astype(np.uint32)


def compute_vertex_normals(vertices, faces, decimals=WELD_DECIMALS) -> np.ndarray:
    """Area-weighted average of adjacent face normals, normalised.

    Vertices at the same position (seams, poles of a surface of revolution)
    share one accumulated normal.

    Parameters
    ----------
    vertices : ndarray of shape (N, 3)
    faces : ndarray of shape (M, 3)
    decimals : int
        Rounding used to detect coincident vertices.

    Returns
    -------
    ndarray of shape (N, 3)
        Unit normals. Vertices touching only degenerate faces get zeros.
    """
    vertices = np.asarray(vertices, dtype=np.float64)
    faces = np.asarray(faces, dtype=np.intp)
    fn = _face_cross(vertices, faces)

    # + 0.0 folds -0.0 into 0.0
    keys = np.round(vertices, decimals) + 0.0
    _, group = np.unique(keys, axis=0, return_inverse=True)
    group = np.asarray(group).reshape(-1)

    acc = np.zeros((group.max() + 1 if group.size else 0, 3))
    for corner in range(3):
        np.add.at(acc, group[faces[:, corner]], fn)
    vn = acc[group]

    norm = np.linalg.norm(vn, axis=1, keepdims=True)
    n_degenerate = int(np.count_nonzero(~(norm[:, 0] > 0.0)))
    if n_degenerate:
        logger.warning("%d vertices have no non-degenerate adjacent face; "
                       "their normals are set to zero", n_degenerate)
    return np.divide(vn, norm, out=np.zeros_like(vn), where=norm > 0.0)


def _check_surface(surface):
    if not callable(getattr(surface, 'evaluate', None)):
        raise TypeError(
            f"surface must provide evaluate(u, v); got {type(surface).__name__}"
        )
    if not callable(getattr(surface, 'domain', None)):
        raise TypeError(
            f"surface must provide domain(); got {type(surface).__name__}"
        )


def build_geometry(surface, u_segments=32, v_segments=32,
                   u_min=None, u_max=None, v_min=None, v_max=None) -> MeshBuffer:
    """Tessellate *surface* on a regular grid in parameter space.

    Parameters
    ----------
    surface : ParametricSurface
        Anything with ``evaluate(u, v)`` and ``domain()``; analytic normals
        are used when ``surface.has_analytic_normal`` is true.
    u_segments, v_segments : int
        Grid resolution (>= 1).
    u_min, u_max, v_min, v_max : float or None
        Override the surface's domain bounds.

    Returns
    -------
    MeshBuffer

    Raises
    ------
    TypeError
        If *surface* lacks ``evaluate`` or ``domain``.
    ValueError
        If the domain bounds are not finite or a segment count is < 1.
    """
    _check_surface(surface)
    domain = surface.domain()
    if not isinstance(domain, Domain):
        domain = Domain(*domain)
    domain = domain.replace_bounds(u_min, u_max, v_min, v_max)
    if not domain.is_finite():
        raise ValueError(f"surface domain must be finite, got {domain}")

    U, V = int(u_segments), int(v_segments)
    if U < 1 or V < 1:
        raise ValueError(f"segment counts must be >= 1, got u={U}, v={V}")

    has_normals = bool(getattr(surface, 'has_analytic_normal', False))

    n = (U + 1) * (V + 1)
    positions = np.empty((n, 3))
    normals = np.empty((n, 3))
    uvs = np.empty((n, 2))

    k = 0
    for i in range(V + 1):
        v = domain.v_min + (domain.v_max - domain.v_min) * (i / V)
        for j in range(U + 1):
            u = domain.u_min + (domain.u_max - domain.u_min) * (j / U)
            positions[k] = surface.evaluate(u, v)
            if has_normals:
                normals[k] = surface.normal(u, v)
            uvs[k] = (j / U, i / V)
            k += 1

    indices = grid_indices(U, V)
    if not has_normals:
        normals = compute_vertex_normals(positions, indices.reshape(-1, 3))

    logger.debug("tessellated %s: %d vertices, %d triangles, %s normals",
                 type(surface).__name__, n, indices.shape[0] // 3,
                 "analytic" if has_normals else "averaged")

    return MeshBuffer(
        positions=positions.reshape(-1),
        normals=normals.reshape(-1),
        uvs=uvs.reshape(-1),
        indices=indices,
        u_segments=U,
        v_segments=V,
    )
