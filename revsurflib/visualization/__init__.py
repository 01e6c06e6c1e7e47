"""Visualization utilities for revsurflib profiles and meshes.

Submodules
----------
matplotlib_2d : Profile and curve plots in the (r, h) plane
matplotlib_3d : Triangulated surface and normal plots
polyscope_3d  : Polyscope surface mesh registration (optional)
"""

from revsurflib.visualization.matplotlib_2d import (
    plot_profile,
    plot_curve,
)
from revsurflib.visualization.matplotlib_3d import (
    plot_mesh,
    plot_normals,
)

__all__ = [
    'plot_profile',
    'plot_curve',
    'plot_mesh',
    'plot_normals',
]
