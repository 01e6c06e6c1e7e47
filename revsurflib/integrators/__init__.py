"""Fixed-step ODE integration (explicit one-step methods)."""

from revsurflib.integrators._steppers import (
    euler,
    midpoint,
    rk4,
    stepper_methods,
)
from revsurflib.integrators._integrate import integrate

__all__ = [
    'euler',
    'midpoint',
    'rk4',
    'stepper_methods',
    'integrate',
]
