"""Riemann zeta with a derivative rule for tracked duals.

The derivative comes from differentiating the integral representation

    ζ(s) Γ(s) = ∫_0^∞ x^(s-1) / (e^x - 1) dx,        s > 1

under the integral sign, which gives

    ζ'(s) = (1/Γ(s)) ∫_0^∞ x^(s-1) (ln x - ψ(s)) / (e^x - 1) dx.
"""

import logging
import warnings
from typing import Optional, TextIO

import numpy as np
from scipy import special

from zetaquad.config import get_settings
from zetaquad.dual import Dual, HasValue, is_dual, value_of
from zetaquad.errors import ConvergenceWarning, DomainError
from zetaquad.quadrature import integrate, patch_nonfinite

logger = logging.getLogger(__name__)


def _scalar_zeta(s: float) -> float:
    if s == 1.0:
        raise DomainError("zeta has a pole at s=1")
    return float(special.zeta(s))


def _derivative_integrand(s: float):
    psi = float(special.digamma(s))

    def g(x):
        with np.errstate(all="ignore"):
            return np.power(x, s - 1.0) * (np.log(x) - psi) / np.expm1(x)
    return g


def zeta_derivative(
    s: float,
    stream: Optional[TextIO] = None,
    tolerance: Optional[float] = None,
    max_level: Optional[int] = None,
) -> float:
    """dζ/ds at a plain float ``s > 1``."""
    s = value_of(s)
    if not s > 1.0:
        raise DomainError(f"integral representation of dζ/ds requires s > 1, got s={s}")

    g = _derivative_integrand(s)
    if get_settings().patch_nonfinite:
        g = patch_nonfinite(g)

    q = integrate(g, 0.0, tolerance=tolerance, max_level=max_level, stream=stream, label="zeta_derivative")
    if not q.converged:
        warnings.warn(
            f"zeta_derivative: quadrature did not converge at s={s} "
            f"(error={q.error:.3g}, levels={q.levels})",
            ConvergenceWarning,
            stacklevel=2,
        )
    return q.value / float(special.gamma(s))


def zeta(s, stream: Optional[TextIO] = None, tolerance: Optional[float] = None, max_level: Optional[int] = None):
    """Riemann zeta function.

    A plain number gives a float. A tracked ``Dual`` gives a ``Dual`` whose
    tangent is ζ'(s) times the tangent of ``s`` and which links back to
    ``s``. Any other object with a ``value`` gives an untracked ``Dual``.

    Raises:
        DomainError: at the pole s=1, or for a tracked s <= 1 where the
            derivative's integral representation diverges.
    """
    s_val = value_of(s)
    f = _scalar_zeta(s_val)
    if not is_dual(s):
        if isinstance(s, HasValue):
            return Dual(f)
        return f

    deriv = zeta_derivative(s_val, stream=stream, tolerance=tolerance, max_level=max_level)
    logger.debug("zeta(%r) = %.17g, dzeta/ds = %.17g", s_val, f, deriv)
    return Dual(value=f, derivative=deriv * float(s.derivative), upstream=s, partial=deriv)
