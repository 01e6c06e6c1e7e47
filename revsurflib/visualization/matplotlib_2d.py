"""2D visualization: profile curves in the (r, h) half plane."""

import numpy as np


def _get_ax(ax):
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.get_figure()
    return fig, ax


def plot_profile(
    profile,
    ax=None,
    mirror: bool = False,
    title: str = None,
    **plot_kwargs,
):
    """Plot one or more profiles as ``h`` against ``r``.

    Parameters
    ----------
    profile : Profile or sequence of Profile
        Profiles to draw; each is labelled with its case and ``a``.
    ax : matplotlib.axes.Axes or None
        If None, a new figure is created.
    mirror : bool
        Also draw the reflection ``-r`` (the full meridian section).
    title : str or None
        Plot title.
    **plot_kwargs
        Forwarded to ``ax.plot()``.

    Returns
    -------
    fig, ax
    """
    fig, ax = _get_ax(ax)
    profiles = [profile] if hasattr(profile, 'r') else list(profile)

    for p in profiles:
        label = f"{p.case.value}, a={p.a:g}"
        line, = ax.plot(p.r, p.h, label=label, **plot_kwargs)
        if mirror:
            ax.plot(-np.asarray(p.r), p.h, color=line.get_color(), **plot_kwargs)

    ax.set_xlabel('r')
    ax.set_ylabel('h')
    ax.set_aspect('equal', adjustable='datalim')
    ax.legend()
    if title:
        ax.set_title(title)
    return fig, ax


def plot_curve(
    curve,
    samples: int = 200,
    ax=None,
    show_points: bool = True,
    title: str = None,
):
    """Plot a :class:`NumericalCurve` in its xy plane.

    Parameters
    ----------
    curve : NumericalCurve
    samples : int
        Number of evaluation points on ``[0, 1]``.
    ax : matplotlib.axes.Axes or None
    show_points : bool
        Overlay the control points.
    title : str or None

    Returns
    -------
    fig, ax
    """
    fig, ax = _get_ax(ax)
    t = np.linspace(0.0, 1.0, samples)
    pts = curve.evaluate(t)
    ax.plot(pts[:, 0], pts[:, 1], '-', label=curve.curve_type)
    if show_points:
        cp = curve.points
        ax.plot(cp[:, 0], cp[:, 1], 'o', markersize=3, label='control points')
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_aspect('equal', adjustable='datalim')
    ax.legend()
    if title:
        ax.set_title(title)
    return fig, ax
