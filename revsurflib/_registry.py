"""
Name-keyed registries for interchangeable numerical methods.

A registry maps lower-case names to callables (steppers, profile solve
strategies) or to solver objects. Configuration selects entries by name;
callers may also hand in a callable directly, which :meth:`resolve` passes
through unchanged.

Usage
-----
    stepper_methods = MethodRegistry("stepper", default="rk4")

    @stepper_methods.register("rk4")
    def rk4(deriv, state, t, dt):
        ...

    stepper_methods.resolve(None)      # rk4, the default
    stepper_methods.resolve("RK4")     # rk4, keys are case-insensitive
    stepper_methods.resolve(my_step)   # my_step, callables pass through
"""

from typing import Any, Callable, Optional


def _key(key) -> str:
    # Enum members register and resolve by their value
    return str(getattr(key, 'value', key)).lower()


class MethodRegistry:
    """Registry of named methods.

    Parameters
    ----------
    name : str
        Kind of method held, used in error messages (e.g. "stepper").
    default : str, optional
        Entry returned by ``resolve(None)``.
    """

    def __init__(self, name: str, default: Optional[str] = None):
        self.name = name
        self.default = default
        self._entries: dict[str, Any] = {}

    def register(self, key, fn: Any = None):
        """Register *fn* under *key*.

        Without *fn* this returns a decorator that registers the decorated
        function and hands it back unchanged.
        """
        if fn is None:
            def decorator(f):
                self._entries[_key(key)] = f
                return f
            return decorator
        self._entries[_key(key)] = fn
        return fn

    def __getitem__(self, key) -> Any:
        try:
            return self._entries[_key(key)]
        except KeyError:
            raise KeyError(
                f"Unknown {self.name} method: {key!r}. "
                f"Available: {self.available()}"
            ) from None

    def __contains__(self, key) -> bool:
        return _key(key) in self._entries

    def __iter__(self):
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def available(self) -> list[str]:
        """Registered names in registration order."""
        return list(self._entries)

    def resolve(self, method=None) -> Callable:
        """Return the entry selected by *method*.

        ``None`` selects the default entry, a callable is returned as is and
        anything else is looked up by name.
        """
        if method is None:
            if self.default is None:
                raise KeyError(f"No default {self.name} method registered")
            method = self.default
        if callable(method):
            return method
        return self[method]
