"""Category: Riemann zeta values and derivatives.

Values are checked against closed forms at even integers, derivatives
against central differences of ``scipy.special.zeta`` and against the
tabulated ζ'(2).
"""

import numpy as np
from scipy.special import zeta as _zeta

from zetaquad.check import Check
from zetaquad.dual import Dual
from zetaquad.functions import zeta


# --- Closed forms ---

_CLOSED_FORMS = {
    2.0: np.pi**2 / 6,
    4.0: np.pi**4 / 90,
    6.0: np.pi**6 / 945,
    3.0: 1.2020569031595942,  # Apéry's constant
}

C_ZETA_CLOSED_FORM = Check(
    id="zeta_closed_form",
    category="zeta",
    description="ζ(s) at s = 2, 3, 4, 6 against closed forms.",
    candidate=zeta,
    reference=lambda s: _CLOSED_FORMS[s],
    cases=[{"s": s} for s in _CLOSED_FORMS],
    atol=1e-9,
)


# --- dζ/ds by central differences ---

def _ref_zeta_fd(s: float, seed: float = 1.0, h: float = 1e-5) -> float:
    return seed * (_zeta(s + h) - _zeta(s - h)) / (2 * h)


def _seeded_zeta(s: float, seed: float = 1.0) -> Dual:
    return zeta(Dual.seed(s, seed))


C_ZETA_DERIV_FD = Check(
    id="zeta_derivative_fd",
    category="zeta",
    description="Tangent of ζ on a unit-seeded dual against central differences.",
    candidate=_seeded_zeta,
    reference=_ref_zeta_fd,
    cases=[{"s": s} for s in [1.5, 2.0, 2.5, 3.0, 4.0, 6.0]],
    component="derivative",
    atol=1e-4,
)

C_ZETA_DERIV_SEED = Check(
    id="zeta_derivative_chain_rule",
    category="zeta",
    description="Tangent of ζ scales with the seed of the input dual.",
    candidate=_seeded_zeta,
    reference=_ref_zeta_fd,
    cases=[{"s": s, "seed": seed} for s, seed in [(2.0, 0.5), (2.0, -3.0), (3.0, 2.0), (5.0, 0.0)]],
    component="derivative",
    atol=1e-4,
)

C_ZETA_DUAL_VALUE = Check(
    id="zeta_dual_value",
    category="zeta",
    description="Value carried by a seeded dual equals scipy.special.zeta.",
    candidate=_seeded_zeta,
    reference=lambda s: _zeta(s),
    cases=[{"s": s} for s in [1.5, 2.0, 7.0]],
    component="value",
    atol=0.0,
    rtol=1e-15,
)


# --- Tabulated value ---
# ζ'(2) = ζ(2) (γ + ln 2π - 12 ln A), A the Glaisher-Kinkelin constant.

ZETA_PRIME_2 = -0.93754825431584375370

C_ZETA_PRIME_2 = Check(
    id="zeta_prime_2",
    category="zeta",
    description="ζ'(2) against its tabulated value.",
    candidate=_seeded_zeta,
    reference=lambda s: ZETA_PRIME_2,
    cases=[{"s": 2.0}],
    component="derivative",
    atol=1e-7,
)


ALL = [C_ZETA_CLOSED_FORM, C_ZETA_DERIV_FD, C_ZETA_DERIV_SEED, C_ZETA_DUAL_VALUE, C_ZETA_PRIME_2]
