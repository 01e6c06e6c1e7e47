"""Save and load mesh buffers and profiles to/from JSON files.

The formats store the flat buffers exactly as the tessellator produces them
(positions, normals, uvs, indices) together with the grid resolution, so a
loaded mesh compares equal to the one that was saved.

Usage
-----
    from revsurflib.data import save_mesh, load_mesh, export_mesh

    save_mesh(model.geometry, 'trumpet.json', extra_meta={'a': 0.5})
    mesh, meta = load_mesh('trumpet.json')
    export_mesh(mesh, 'trumpet.obj')          # any meshio format
"""

import json
from pathlib import Path
from typing import Optional

import numpy as np

from revsurflib.profiles import CurvatureCase, Profile
from revsurflib.surfaces import MeshBuffer

MESH_FORMAT = 'revsurflib_mesh_v1'
PROFILE_FORMAT = 'revsurflib_profile_v1'


def _write_json(data: dict, path) -> str:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(data, f, indent=2)
    return str(path)


def _read_json(path, expected_format: str) -> dict:
    with open(path) as f:
        data = json.load(f)
    fmt = data.get('format')
    if fmt != expected_format:
        raise ValueError(
            f"{path}: expected format {expected_format!r}, got {fmt!r}"
        )
    return data


def save_mesh(mesh: MeshBuffer, path='mesh.json',
              extra_meta: Optional[dict] = None) -> str:
    """Serialize mesh buffers to a JSON file.

    Parameters
    ----------
    mesh : MeshBuffer
        Tessellated geometry.
    path : str or Path
        Output file path.
    extra_meta : dict or None
        Additional metadata to store.

    Returns
    -------
    str
        The path written to (for chaining).
    """
    state = {
        'format': MESH_FORMAT,
        'u_segments': int(mesh.u_segments),
        'v_segments': int(mesh.v_segments),
        'n_vertices': mesh.vertex_count,
        'n_triangles': mesh.triangle_count,
        'positions': mesh.positions.tolist(),
        'normals': mesh.normals.tolist(),
        'uvs': mesh.uvs.tolist(),
        'indices': mesh.indices.tolist(),
    }
    if extra_meta:
        state['meta'] = extra_meta
    return _write_json(state, path)


def load_mesh(path) -> tuple:
    """Load mesh buffers from a JSON file.

    Returns
    -------
    mesh : MeshBuffer
    meta : dict
        Any ``extra_meta`` stored with the mesh.

    Raises
    ------
    ValueError
        If the file is not a ``revsurflib_mesh_v1`` file or its buffer
        lengths do not match the stored counts.
    """
    state = _read_json(path, MESH_FORMAT)
    mesh = MeshBuffer(
        positions=np.asarray(state['positions'], dtype=np.float64),
        normals=np.asarray(state['normals'], dtype=np.float64),
        uvs=np.asarray(state['uvs'], dtype=np.float64),
        indices=np.asarray(state['indices'], dtype=np.uint32),
        u_segments=int(state['u_segments']),
        v_segments=int(state['v_segments']),
    )
    n, m = state['n_vertices'], state['n_triangles']
    if (mesh.positions.shape != (3 * n,) or mesh.normals.shape != (3 * n,)
            or mesh.uvs.shape != (2 * n,) or mesh.indices.shape != (3 * m,)):
        raise ValueError(f"{path}: buffer lengths do not match "
                         f"n_vertices={n}, n_triangles={m}")
    return mesh, state.get('meta', {})


def save_profile(profile: Profile, path='profile.json',
                 extra_meta: Optional[dict] = None) -> str:
    """Serialize a profile to a JSON file. Returns the path written to."""
    state = {
        'format': PROFILE_FORMAT,
        'case': profile.case.value,
        'a': float(profile.a),
        'n_samples': len(profile),
        's': profile.s.tolist(),
        'r': profile.r.tolist(),
        'h': profile.h.tolist(),
    }
    if extra_meta:
        state['meta'] = extra_meta
    return _write_json(state, path)


def load_profile(path) -> tuple:
    """Load a profile from a JSON file.

    Returns
    -------
    profile : Profile
    meta : dict
    """
    state = _read_json(path, PROFILE_FORMAT)
    profile = Profile(
        s=state['s'], r=state['r'], h=state['h'],
        a=float(state['a']),
        case=CurvatureCase.coerce(state['case']),
    )
    return profile, state.get('meta', {})


def _check_meshio():
    try:
        import meshio
        return meshio
    except ImportError:
        raise ImportError(
            "meshio is required for mesh export. "
            "Install it with: pip install meshio"
        )


def export_mesh(mesh: MeshBuffer, path, file_format: Optional[str] = None) -> str:
    """Write mesh buffers to any format meshio supports.

    Normals and texture coordinates are attached as point data
    (``"normals"``, ``"uv"``) where the format can hold them.

    Parameters
    ----------
    mesh : MeshBuffer
    path : str or Path
        Output file; the format is inferred from the suffix unless
        *file_format* is given.
    file_format : str or None
        meshio format name (``"obj"``, ``"ply"``, ``"vtk"``, ...).

    Returns
    -------
    str
        The path written to.
    """
    meshio = _check_meshio()
    out = meshio.Mesh(
        points=mesh.vertices,
        cells=[('triangle', mesh.faces.astype(np.int64))],
        point_data={
            'normals': mesh.vertex_normals,
            'uv': mesh.uvs.reshape(-1, 2),
        },
    )
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    meshio.write(str(path), out, file_format=file_format)
    return str(path)
