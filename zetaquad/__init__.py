"""Special functions with quadrature-based derivatives."""

from zetaquad.dual import Differentiable, Dual, HasValue, derivative_of, is_dual, value_of
from zetaquad.errors import ConvergenceWarning, DomainError
from zetaquad.functions import log_integral_transform, zeta, zeta_derivative
from zetaquad.quadrature import QuadratureResult, integrate

__all__ = [
    "ConvergenceWarning",
    "Differentiable",
    "DomainError",
    "Dual",
    "HasValue",
    "QuadratureResult",
    "derivative_of",
    "integrate",
    "is_dual",
    "log_integral_transform",
    "value_of",
    "zeta",
    "zeta_derivative",
]
