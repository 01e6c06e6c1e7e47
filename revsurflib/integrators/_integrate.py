"""
Trajectory integration: run a stepper in a loop and collect the results.

Usage
-----
    from revsurflib.integrators import integrate

    # Harmonic oscillator: r'' = -r
    states, times = integrate(
        lambda y, t: [y[1], -y[0]],
        initial=[0.0, 1.0],
        dt=0.01,
        steps=628,
    )
    # states[:, 0] ~ sin(times)
"""

import logging

import numpy as np

from revsurflib.integrators._steppers import stepper_methods

logger = logging.getLogger(__name__)


def integrate(deriv, initial, dt, steps, stepper=None, stop=None, t0=0.0):
    """Integrate an ODE with a fixed step and return the full trajectory.

    Parameters
    ----------
    deriv : callable
        ``deriv(state, t) -> array_like`` returning dstate/dt.
    initial : array_like
        Initial state vector.
    dt : float
        Time step.
    steps : int
        Maximum number of steps.
    stepper : callable, str or None
        ``stepper(deriv, state, t, dt) -> next_state`` or the name of a
        registered stepper (``"rk4"``, ``"midpoint"``, ``"euler"``).
        Defaults to ``"rk4"``.
    stop : callable or None
        ``stop(state, t) -> bool`` evaluated after every step. Returning
        true ends the integration early.
    t0 : float
        Time of the initial state.

    Returns
    -------
    states : ndarray of shape (n, dim)
        ``states[0]`` is the initial state. ``n == steps + 1`` unless
        *stop* ended the loop early.
    times : ndarray of shape (n,)
        Time of each state.
    """
    step = stepper_methods.resolve(stepper)

    state = np.array(initial, dtype=np.float64)
    t = float(t0)
    states = [state]
    times = [t]

    for i in range(int(steps)):
        state = np.asarray(step(deriv, state, t, dt), dtype=np.float64)
        t += dt
        states.append(state)
        times.append(t)

        if stop is not None and stop(state, t):
            logger.debug("integration stopped early after %d of %d steps", i + 1, steps)
            break

    return np.array(states), np.array(times)
