"""Exceptions and warnings raised by the special functions."""


class DomainError(ValueError):
    """An argument lies outside the domain where the function is defined."""


class ConvergenceWarning(RuntimeWarning):
    """Quadrature stopped before its error estimate met the tolerance."""
