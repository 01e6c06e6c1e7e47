"""3D visualization: triangulated surfaces and their vertex normals."""

import numpy as np


def _get_ax3d(ax):
    import matplotlib.pyplot as plt

    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111, projection='3d')
    else:
        fig = ax.get_figure()
    return fig, ax


def _set_equal_aspect(ax, vertices):
    lo = vertices.min(axis=0)
    hi = vertices.max(axis=0)
    ax.set_box_aspect(np.maximum(hi - lo, 1e-12))


def plot_mesh(
    mesh,
    ax=None,
    cmap: str = 'viridis',
    color_by: str = 'height',
    alpha: float = 1.0,
    title: str = None,
    **trisurf_kwargs,
):
    """Draw a :class:`MeshBuffer` with ``plot_trisurf``.

    Parameters
    ----------
    mesh : MeshBuffer
    ax : mpl_toolkits.mplot3d.Axes3D or None
        If None, a new 3D figure is created.
    cmap : str
        Colormap name.
    color_by : str
        ``"height"`` colours faces by their mean y coordinate, ``"u"`` or
        ``"v"`` by the texture coordinate, ``"none"`` uses a flat colour.
    alpha : float
        Face transparency.
    title : str or None
    **trisurf_kwargs
        Forwarded to ``ax.plot_trisurf()``.

    Returns
    -------
    fig, ax
    """
    if color_by not in ('height', 'u', 'v', 'none'):
        raise ValueError(
            f"Unknown color_by: {color_by!r}. "
            f"Available: ['height', 'u', 'v', 'none']"
        )
    fig, ax = _get_ax3d(ax)
    verts = mesh.vertices
    faces = mesh.faces.astype(np.int64)

    # plot_trisurf draws (x, y, z); put the revolution axis (y) vertical
    x, y, z = verts[:, 0], verts[:, 2], verts[:, 1]
    surf = ax.plot_trisurf(x, y, z, triangles=faces, alpha=alpha,
                           **trisurf_kwargs)

    if color_by != 'none':
        if color_by == 'height':
            c = verts[:, 1]
        else:
            c = mesh.uvs.reshape(-1, 2)[:, 0 if color_by == 'u' else 1]
        surf.set_array(c[faces].mean(axis=1))
        surf.set_cmap(cmap)

    ax.set_xlabel('x')
    ax.set_ylabel('z')
    ax.set_zlabel('y')
    _set_equal_aspect(ax, np.column_stack([x, y, z]))
    if title:
        ax.set_title(title)
    return fig, ax


def plot_normals(
    mesh,
    ax=None,
    stride: int = 7,
    length: float = 0.1,
    color: str = 'k',
):
    """Quiver plot of every *stride*-th vertex normal.

    Uses the same axis convention as :func:`plot_mesh`, so the two can
    share an axes.

    Returns
    -------
    fig, ax
    """
    fig, ax = _get_ax3d(ax)
    idx = np.arange(0, mesh.vertex_count, max(1, int(stride)))
    p = mesh.vertices[idx]
    n = mesh.vertex_normals[idx]
    ax.quiver(p[:, 0], p[:, 2], p[:, 1], n[:, 0], n[:, 2], n[:, 1],
              length=length, color=color)
    return fig, ax
