"""Data handling: save/load mesh buffers and profiles, export meshes."""

from revsurflib.data._io import (
    save_mesh,
    load_mesh,
    save_profile,
    load_profile,
    export_mesh,
)

__all__ = ['save_mesh', 'load_mesh', 'save_profile', 'load_profile', 'export_mesh']
