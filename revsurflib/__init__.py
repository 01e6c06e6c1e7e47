"""Surfaces of revolution with constant Gaussian curvature.

Subpackages
-----------
profiles      : Constant-curvature profile solvers (spindle, barrel, trumpet,
                pseudosphere)
integrators   : Fixed-step ODE steppers and driver
curves        : NumericalCurve spline interpolation with arc-length tables
surfaces      : Parametric surfaces and grid tessellation
models        : Parameter dataclasses and the RevolutionModel runner
data          : JSON save/load and meshio export
visualization : matplotlib and polyscope plotting (optional)
"""

__version__ = '0.1.0'
