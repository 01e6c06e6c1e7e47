"""
Spindle sized to an equirectangular texture of the eastern hemisphere.

A hemisphere map of ``4679 x 4096`` pixels covers 180 degrees of longitude
and 180 degrees of latitude. Rolling it round a spindle with
``a = width / (2 height)`` keeps the aspect ratio of the texture: the
meridian has length ``pi`` and the equator ``2 pi a``.
"""

import logging
import os

import numpy as np
import matplotlib.pyplot as plt

from revsurflib.data import save_mesh
from revsurflib.models import ModelParams, RevolutionModel
from revsurflib.profiles import spindle_parameter_for_texture, surface_area
from revsurflib.visualization import plot_mesh

logging.basicConfig(level=logging.INFO)

_HERE = os.path.dirname(os.path.abspath(__file__))
_FIG = os.path.join(_HERE, 'fig')
os.makedirs(_FIG, exist_ok=True)

TEXTURE_WIDTH, TEXTURE_HEIGHT = 4679, 4096

a = spindle_parameter_for_texture(TEXTURE_WIDTH, TEXTURE_HEIGHT)
model = RevolutionModel(ModelParams.for_case('spindle', a=a))
geometry = model.geometry

# Texture aspect vs surface aspect (equator length / meridian length)
equator = 2 * np.pi * model.profile.r.max()
meridian = model.profile.s[-1] - model.profile.s[0]
print(f"a = {a:.6f}")
print(f"texture aspect = {TEXTURE_WIDTH / TEXTURE_HEIGHT:.6f}, "
      f"surface aspect = {equator / meridian:.6f}")
print(f"area = {surface_area(model.profile):.5f}, "
      f"{geometry.vertex_count} vertices")

# uvs run 0..1 in both directions; u wraps once round the axis
uv = geometry.uvs.reshape(-1, 2)
print(f"uv range: u in [{uv[:, 0].min()}, {uv[:, 0].max()}], "
      f"v in [{uv[:, 1].min()}, {uv[:, 1].max()}]")

fig, ax = plot_mesh(geometry, color_by='u', title=f'eastern hemisphere spindle, a = {a:.4f}')
fig.savefig(os.path.join(_FIG, 'spindle_eastern_hemi.png'), dpi=150)
plt.close('all')

save_mesh(geometry, os.path.join(_FIG, 'spindle_eastern_hemi.json'),
          extra_meta={'texture': [TEXTURE_WIDTH, TEXTURE_HEIGHT], 'a': a})
