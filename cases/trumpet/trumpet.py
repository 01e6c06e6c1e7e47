"""
Hyperbolic trumpet (K = -1, ``r = a cosh s``) over the slider range of a.

The profile is symmetric about its neck ``r = a``; its arc length, the
width of the strip of the hyperbolic plane it carries, is
``2 arcsinh(1 / a)``.

    1. Model       : Demo preset (200 steps, Catmull-Rom curve, 96 x 48 mesh)
    2. Sweep       : a from 0.1 to 2
    3. Postprocess : Strip widths, profile plot, interactive view (polyscope)
"""

import logging
import os

import numpy as np
import matplotlib.pyplot as plt

from revsurflib.models import ModelParams, RevolutionModel
from revsurflib.profiles import gaussian_curvature, strip_width
from revsurflib.visualization import plot_mesh, plot_profile

logging.basicConfig(level=logging.INFO)

_HERE = os.path.dirname(os.path.abspath(__file__))
_FIG = os.path.join(_HERE, 'fig')
os.makedirs(_FIG, exist_ok=True)

A_MIN, A_MAX, A_DEFAULT = 0.1, 2.0, 0.5

# ============================================================================
# Step 1: Model
# ============================================================================

model = RevolutionModel(ModelParams.for_case('trumpet', a=A_DEFAULT))
print(f"a = {A_DEFAULT}: strip width = {strip_width('trumpet', A_DEFAULT):.4f}")

# ============================================================================
# Step 2: Sweep
# ============================================================================

a_values = np.linspace(A_MIN, A_MAX, 9)
profiles = []


def record(m, a):
    profiles.append(m.profile)
    K = gaussian_curvature(m.profile)
    print(f"  a = {a:5.3f}  strip width = {strip_width('trumpet', a):7.4f}  "
          f"mean K = {np.nanmean(K[10:-10]):+.4f}")


frames = model.sweep(a_values, callback=record)

# ============================================================================
# Step 3: Post-processing
# ============================================================================

fig, ax = plot_profile(profiles[::2], mirror=True, title='trumpet profiles')
fig.savefig(os.path.join(_FIG, 'trumpet_profiles.png'), dpi=150)

model.set_a(A_DEFAULT)
fig, ax = plot_mesh(model.geometry, title=f'trumpet, a = {A_DEFAULT}')
fig.savefig(os.path.join(_FIG, 'trumpet_mesh.png'), dpi=150)
plt.close('all')

if os.environ.get('REVSURFLIB_SHOW'):
    import polyscope as ps
    import polyscope.imgui as psim
    from revsurflib.visualization.polyscope_3d import (
        register_profile_curve, register_surface_mesh, update_surface_mesh)
    ps_mesh = register_surface_mesh(model.geometry, name='trumpet')
    register_profile_curve(model.curve, name='meridian')
    state = {'a': A_DEFAULT}

    def slider():
        changed, state['a'] = psim.SliderFloat(
            f"a (width {strip_width('trumpet', state['a']):.3f})",
            state['a'], A_MIN, A_MAX)
        if changed:
            update_surface_mesh(ps_mesh, model.set_a(state['a']))

    ps.set_user_callback(slider)
    ps.show()
