"""Dual numbers: a value with an optional derivative w.r.t. one parameter.

Scalars and duals are handled uniformly through ``value_of``: every entry
point reduces its arguments to plain floats first and only looks at the
derivative where it defines a rule for it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class HasValue(Protocol):
    value: float


@runtime_checkable
class Differentiable(HasValue, Protocol):
    derivative: Optional[float]


@dataclass(frozen=True)
class Dual:
    """A value paired with its derivative w.r.t. one tracked parameter.

    ``upstream`` links back to the input this value was computed from and
    ``partial`` holds d(self)/d(upstream). Together they are enough for a
    caller runtime to chain reverse-mode sensitivities; the tangent in
    ``derivative`` is already the forward-mode chain-rule product.
    """

    value: float
    derivative: Optional[float] = None
    upstream: Optional["Dual"] = None
    partial: Optional[float] = None

    @classmethod
    def seed(cls, value, derivative: float = 1.0) -> "Dual":
        """Tracked input with tangent ``derivative`` (unit seed by default)."""
        return cls(value=float(value), derivative=float(derivative))

    @property
    def is_tracked(self) -> bool:
        return self.derivative is not None

    def __float__(self) -> float:
        return float(self.value)

    def __repr__(self):
        if self.derivative is None:
            return f"Dual({self.value!r})"
        return f"Dual({self.value!r}, d={self.derivative!r})"


def value_of(x) -> float:
    """Plain float value of a scalar or of anything with a ``value``."""
    if isinstance(x, HasValue):
        return float(x.value)
    if isinstance(x, (bool, np.bool_)):
        raise TypeError("Expected a number, got a bool")
    if isinstance(x, (int, float, np.integer, np.floating)):
        return float(x)
    raise TypeError(f"Expected a number or an object with a value, got {type(x).__name__}")


def derivative_of(x) -> Optional[float]:
    if is_dual(x):
        return float(x.derivative)
    return None


def is_dual(x) -> bool:
    return isinstance(x, Differentiable) and x.derivative is not None
