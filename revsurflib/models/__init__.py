"""
Pipeline configuration and the RevolutionModel convenience runner.
"""

from revsurflib.models._params import (
    ProfileParams,
    CurveParams,
    MeshParams,
    ModelParams,
)
from revsurflib.models._revolution_model import RevolutionModel

__all__ = [
    'ProfileParams',
    'CurveParams',
    'MeshParams',
    'ModelParams',
    'RevolutionModel',
]
