"""Category: log-integral transform against QUADPACK.

The reference integrates the same integrand with ``scipy.integrate.quad``
(adaptive Gauss-Kronrod on a mapped infinite interval), which shares no
code with the tanh-sinh path under test.
"""

import numpy as np
from scipy import integrate

from zetaquad.check import Check
from zetaquad.functions import log_integral_transform


def _ref_log_integral(alpha: float, z: float, w: float, m: float) -> float:
    def integrand(x):
        return x**-alpha * z**(x - 1) * w**((x - 1)**2)
    result, _ = integrate.quad(integrand, m, np.inf, epsabs=0.0, epsrel=1e-12, limit=200)
    return np.log(result)


_CASES = [
    (2.0, 0.5, 0.5, 1.0),
    (1.0, 0.9, 0.8, 0.5),
    (0.5, 0.3, 0.95, 2.0),
    (3.0, 0.7, 0.6, 1.5),
    (-1.0, 0.5, 0.9, 1.0),
]

C_LOGINTEGRAL_QUAD = Check(
    id="logintegral_vs_quad",
    category="logintegral",
    description="log ∫_m^∞ x^-α z^(x-1) w^((x-1)²) dx against scipy.integrate.quad.",
    candidate=log_integral_transform,
    reference=_ref_log_integral,
    cases=[{"alpha": a, "z": z, "w": w, "m": m} for a, z, w, m in _CASES],
    atol=1e-6,
)


ALL = [C_LOGINTEGRAL_QUAD]
