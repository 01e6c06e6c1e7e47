"""
SurfaceMesh: a parametric surface paired with its current tessellation.

Usage
-----
    mesh = SurfaceMesh(surface, u_segments=96, v_segments=48)
    curve.update_points(new_points)   # surface changes shape
    mesh.rebuild()                    # regenerate all buffers
"""

from revsurflib.surfaces._tessellate import MeshBuffer, build_geometry


class SurfaceMesh:
    """Parametric surface with automatic geometry tessellation.

    Parameters
    ----------
    surface : ParametricSurface
        Surface to tessellate.
    u_segments, v_segments : int
        Grid resolution.
    """

    def __init__(self, surface, u_segments: int = 32, v_segments: int = 32):
        self.surface = surface
        self.u_segments = u_segments
        self.v_segments = v_segments
        self.geometry = None
        self.rebuild()

    def rebuild(self) -> MeshBuffer:
        """Rebuild geometry from the surface. Call after changing the surface shape.

        The previous buffers are discarded, never patched.
        """
        self.geometry = build_geometry(
            self.surface,
            u_segments=self.u_segments,
            v_segments=self.v_segments,
        )
        return self.geometry
