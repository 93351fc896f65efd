"""Numerical checks: a function of this package against an independent reference."""

import warnings
from dataclasses import dataclass, field
from typing import Any, Callable, Literal

import numpy as np

from zetaquad.dual import HasValue
from zetaquad.errors import ConvergenceWarning


def _read(out, component: str) -> float:
    """Pull the compared quantity out of a float or a dual result.

    A plain number is taken as the quantity itself, so references can
    return floats for either component.
    """
    if isinstance(out, HasValue):
        x = getattr(out, component, None)
        if x is None:
            raise TypeError(f"result {out!r} carries no {component}")
        return float(x)
    return float(out)


@dataclass
class CaseResult:
    inputs: dict[str, Any]
    expected: float | None = None
    computed: float | None = None
    abs_error: float | None = None
    passed: bool = False
    error: str | None = None
    warnings: list[str] = field(default_factory=list)


@dataclass
class CheckResult:
    check_id: str
    category: str
    cases: list[CaseResult]

    @property
    def n_passed(self) -> int:
        return sum(c.passed for c in self.cases)

    @property
    def passed(self) -> bool:
        return self.n_passed == len(self.cases)

    @property
    def n_warnings(self) -> int:
        return sum(len(c.warnings) for c in self.cases)

    @property
    def max_abs_error(self) -> float:
        errors = [c.abs_error for c in self.cases if c.abs_error is not None]
        return max(errors) if errors else np.nan


@dataclass
class Check:
    """``candidate`` graded case by case against ``reference``.

    ``component`` picks what is compared when the candidate returns a dual:
    its value or its tangent. Convergence warnings raised while a case runs
    are recorded on that case rather than printed.
    """

    id: str
    category: str
    description: str
    candidate: Callable
    reference: Callable
    cases: list[dict[str, Any]]
    component: Literal["value", "derivative"] = "value"
    atol: float = 1e-6
    rtol: float = 0.0

    def grade(self, fn: Callable | None = None) -> CheckResult:
        fn = self.candidate if fn is None else fn
        return CheckResult(self.id, self.category, [self._run_case(fn, inputs) for inputs in self.cases])

    def _run_case(self, fn: Callable, inputs: dict[str, Any]) -> CaseResult:
        case = CaseResult(inputs=inputs)
        try:
            case.expected = float(self.reference(**inputs))
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always", ConvergenceWarning)
                out = fn(**inputs)
            case.warnings = [str(w.message) for w in caught if issubclass(w.category, ConvergenceWarning)]
            case.computed = _read(out, self.component)
        except (ArithmeticError, TypeError, ValueError) as e:
            case.error = f"{type(e).__name__}: {e}"
            return case

        case.abs_error = abs(case.computed - case.expected)
        case.passed = bool(np.isclose(case.computed, case.expected, atol=self.atol, rtol=self.rtol))
        return case
