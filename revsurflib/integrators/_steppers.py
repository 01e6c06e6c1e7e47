"""
Fixed-step explicit one-step methods for first-order ODE systems.

Every stepper shares the signature::

    next_state = stepper(deriv, state, t, dt)

where ``deriv(state, t)`` returns dstate/dt. Steppers are pure: the input
state is never modified and a new array is returned.
"""

import numpy as np

from revsurflib._registry import MethodRegistry

stepper_methods = MethodRegistry("stepper", default="rk4")


def _f(deriv, state, t):
    return np.asarray(deriv(state, t), dtype=np.float64)


@stepper_methods.register("euler")
def euler(deriv, state, t, dt):
    """Forward Euler step: ``y + dt * f(y, t)``."""
    y = np.asarray(state, dtype=np.float64)
    return y + dt * _f(deriv, y, t)


@stepper_methods.register("midpoint")
def midpoint(deriv, state, t, dt):
    """Explicit midpoint (second order Runge-Kutta) step."""
    y = np.asarray(state, dtype=np.float64)
    k1 = _f(deriv, y, t)
    k2 = _f(deriv, y + 0.5 * dt * k1, t + 0.5 * dt)
    return y + dt * k2


@stepper_methods.register("rk4")
def rk4(deriv, state, t, dt):
    """Classical fourth order Runge-Kutta step.

    ::

        k1 = f(y,             t)
        k2 = f(y + dt/2 * k1, t + dt/2)
        k3 = f(y + dt/2 * k2, t + dt/2)
        k4 = f(y + dt   * k3, t + dt)
        y' = y + dt/6 * (k1 + 2 k2 + 2 k3 + k4)
    """
    y = np.asarray(state, dtype=np.float64)
    half = 0.5 * dt
    k1 = _f(deriv, y, t)
    k2 = _f(deriv, y + half * k1, t + half)
    k3 = _f(deriv, y + half * k2, t + half)
    k4 = _f(deriv, y + dt * k3, t + dt)
    return y + (dt / 6.0) * (k1 + 2.0 * k2 + 2.0 * k3 + k4)
