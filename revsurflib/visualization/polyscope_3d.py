"""Interactive viewing of tessellated surfaces with polyscope.

polyscope is imported on first use; the functions raise an ImportError
naming the package when it is missing.

Usage
-----
    from revsurflib.visualization.polyscope_3d import (
        register_surface_mesh, register_profile_curve, update_surface_mesh)

    ps_mesh = register_surface_mesh(model.geometry, name='trumpet')
    register_profile_curve(model.curve, name='meridian')
    update_surface_mesh(ps_mesh, model.set_a(1.2))
"""

import numpy as np


def _check_polyscope():
    try:
        import polyscope
    except ImportError:
        raise ImportError(
            "polyscope is needed for interactive surface viewing. "
            "Install it with: pip install polyscope"
        )
    return polyscope


def _add_normals(ps_mesh, mesh):
    ps_mesh.add_vector_quantity('normals', mesh.vertex_normals,
                                defined_on='vertices', enabled=False)


def register_surface_mesh(mesh, name: str = 'surface', smooth: bool = True):
    """Register a :class:`MeshBuffer` as a polyscope surface mesh.

    Normals are attached as a (hidden) vertex vector quantity and the
    texture coordinates as a ``'uv'`` parameterization.

    Parameters
    ----------
    mesh : MeshBuffer
    name : str
        Surface mesh name in polyscope.
    smooth : bool
        Shade with interpolated vertex normals instead of flat faces.

    Returns
    -------
    ps_mesh
        Polyscope SurfaceMesh object.
    """
    ps = _check_polyscope()
    ps.init()

    ps_mesh = ps.register_surface_mesh(
        name, mesh.vertices, mesh.faces.astype(np.int64),
        smooth_shade=smooth,
    )
    _add_normals(ps_mesh, mesh)
    ps_mesh.add_parameterization_quantity('uv', mesh.uvs.reshape(-1, 2),
                                          defined_on='vertices')
    return ps_mesh


def register_profile_curve(curve, name: str = 'profile', samples: int = 200):
    """Register the generating curve of a surface as a polyline.

    The curve lies in the xy plane, which is the ``u = 0`` meridian of the
    revolved surface, so it is drawn on top of the mesh seam.
    """
    ps = _check_polyscope()
    nodes = curve.evaluate(np.linspace(0.0, 1.0, samples))
    return ps.register_curve_network(name, nodes, 'line')


def update_surface_mesh(ps_mesh, mesh):
    """Push rebuilt buffers into a registered polyscope surface mesh.

    The grid resolution must be unchanged; otherwise register a new mesh.
    """
    _check_polyscope()
    ps_mesh.update_vertex_positions(mesh.vertices)
    _add_normals(ps_mesh, mesh)
    return ps_mesh
