"""Log of a half-infinite power-weighted integral.

    L(alpha, z, w, m) = log ∫_m^∞ x^(-alpha) z^(x-1) w^((x-1)^2) dx

Derivative information on the arguments is discarded: the result is always a
plain float, evaluated in float64 whatever the inputs are.
"""

import logging
import warnings
from typing import Optional, TextIO

import numpy as np

from zetaquad.dual import is_dual, value_of
from zetaquad.errors import ConvergenceWarning, DomainError
from zetaquad.quadrature import integrate

logger = logging.getLogger(__name__)


def _integrand(alpha: float, z: float, w: float):
    def f(x):
        with np.errstate(all="ignore"):
            return np.power(x, -alpha) * np.power(z, x - 1.0) * np.power(w, (x - 1.0) ** 2)
    return f


def log_integral_transform(
    alpha,
    z,
    w,
    m,
    stream: Optional[TextIO] = None,
    tolerance: Optional[float] = None,
    max_level: Optional[int] = None,
) -> float:
    """Return log(∫_m^∞ x^-alpha z^(x-1) w^((x-1)^2) dx).

    Raises:
        DomainError: if the integral is not a finite positive number. For
            positive z, w and m the integrand is positive, so this only
            happens when the power terms underflow or overflow.
    """
    args = (alpha, z, w, m)
    if any(is_dual(a) for a in args):
        logger.debug("log_integral_transform: dropping derivative information on inputs")
    alpha_v, z_v, w_v, m_v = (value_of(a) for a in args)

    q = integrate(
        _integrand(alpha_v, z_v, w_v),
        m_v,
        tolerance=tolerance,
        max_level=max_level,
        stream=stream,
        label="log_integral_transform",
    )
    if not np.isfinite(q.value) or q.value <= 0.0:
        raise DomainError(
            f"integral is {q.value!r} for alpha={alpha_v}, z={z_v}, w={w_v}, m={m_v}; "
            "its logarithm is undefined"
        )
    if not q.converged:
        warnings.warn(
            f"log_integral_transform: quadrature did not converge "
            f"(error={q.error:.3g}, levels={q.levels})",
            ConvergenceWarning,
            stacklevel=2,
        )
    return float(np.log(q.value))
