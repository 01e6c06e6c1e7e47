"""
Cone-type pseudosphere (K = -1, ``r = a sinh s``, ``a < 1``).

The solved profile runs from the tip on the axis to the rim where it turns
horizontal. It is reflected and re-centred for display so the rim sits at
the bottom.
"""

import logging
import os

import numpy as np
import matplotlib.pyplot as plt

from revsurflib.data import save_profile
from revsurflib.models import ModelParams, RevolutionModel
from revsurflib.profiles import enclosed_volume, gaussian_curvature, surface_area
from revsurflib.visualization import plot_mesh, plot_normals, plot_profile

logging.basicConfig(level=logging.INFO)

_HERE = os.path.dirname(os.path.abspath(__file__))
_FIG = os.path.join(_HERE, 'fig')
os.makedirs(_FIG, exist_ok=True)

a = 0.25
model = RevolutionModel(ModelParams.for_case('pseudosphere', a=a))
profile = model.profile

K = gaussian_curvature(profile)
print(f"a = {a}: rim radius = {profile.r.max():.4f} "
      f"(sqrt(1 - a^2) = {np.sqrt(1 - a * a):.4f}), height = {profile.total_height:.4f}")
print(f"K over interior samples: [{np.nanmin(K[10:-10]):.4f}, {np.nanmax(K[10:-10]):.4f}]")
print(f"area = {surface_area(profile):.4f}, volume = {enclosed_volume(profile):.4f}")

frames = model.sweep([0.1, 0.25, 0.5, 0.75, 0.9])
print(f"swept {len(frames)} meshes of {frames[0].vertex_count} vertices")

model.set_a(a)
fig, ax = plot_profile(profile, mirror=True, title='pseudosphere profile')
fig.savefig(os.path.join(_FIG, 'pseudosphere_profile.png'), dpi=150)

fig, ax = plot_mesh(model.geometry, alpha=0.6, title=f'pseudosphere, a = {a}')
plot_normals(model.geometry, ax=ax, stride=37, length=0.15)
fig.savefig(os.path.join(_FIG, 'pseudosphere_mesh.png'), dpi=150)
plt.close('all')

save_profile(profile, os.path.join(_FIG, 'pseudosphere_profile.json'))
