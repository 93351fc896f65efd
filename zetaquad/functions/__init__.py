from zetaquad.functions.logintegral import log_integral_transform
from zetaquad.functions.zeta import zeta, zeta_derivative

__all__ = ["log_integral_transform", "zeta", "zeta_derivative"]
