"""
Parametric surfaces and their tessellation into triangle meshes.

Submodules
----------
_parametric   : Domain, ParametricSurface interface, FunctionSurface
_analytic     : SphereSurface, CatenoidSurface (analytic normals)
_revolution   : SurfaceOfRevolution built on a profile curve
_tessellate   : build_geometry, MeshBuffer, vertex normal averaging
_surface_mesh : SurfaceMesh (surface + current tessellation, rebuild())
"""

from revsurflib.surfaces._parametric import (
    Domain,
    ParametricSurface,
    FunctionSurface,
)
from revsurflib.surfaces._analytic import SphereSurface, CatenoidSurface
from revsurflib.surfaces._revolution import SurfaceOfRevolution
from revsurflib.surfaces._tessellate import (
    MeshBuffer,
    build_geometry,
    compute_vertex_normals,
    grid_indices,
)
from revsurflib.surfaces._surface_mesh import SurfaceMesh

__all__ = [
    'Domain',
    'ParametricSurface',
    'FunctionSurface',
    'SphereSurface',
    'CatenoidSurface',
    'SurfaceOfRevolution',
    'MeshBuffer',
    'build_geometry',
    'compute_vertex_normals',
    'grid_indices',
    'SurfaceMesh',
]
