"""Process-wide numerical settings, overridable from the environment."""

import os
from dataclasses import dataclass
from functools import lru_cache

import numpy as np


DEFAULT_TOLERANCE = float(np.sqrt(np.finfo(np.float64).eps))
DEFAULT_MAX_LEVEL = 10

# Non-finite integrand samples are replaced by 0.0 in the zeta derivative.
# This is an approximation, not a limit: accuracy degrades where the
# integrand really does blow up (s close to 1).
NUMERICAL_PATCH_REPLACES_NONFINITE_WITH_ZERO = True

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    tolerance: float = DEFAULT_TOLERANCE
    max_level: int = DEFAULT_MAX_LEVEL
    patch_nonfinite: bool = NUMERICAL_PATCH_REPLACES_NONFINITE_WITH_ZERO

    def __post_init__(self):
        if not self.tolerance > 0:
            raise ValueError(f"tolerance must be positive, got {self.tolerance}")
        if self.max_level < 1:
            raise ValueError(f"max_level must be at least 1, got {self.max_level}")

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Build settings from ZETAQUAD_* environment variables."""
        env = os.environ if environ is None else environ
        kwargs = {}
        if env.get("ZETAQUAD_TOLERANCE"):
            kwargs["tolerance"] = float(env["ZETAQUAD_TOLERANCE"])
        if env.get("ZETAQUAD_MAX_LEVEL"):
            kwargs["max_level"] = int(env["ZETAQUAD_MAX_LEVEL"])
        if env.get("ZETAQUAD_PATCH_NONFINITE"):
            flag = env["ZETAQUAD_PATCH_NONFINITE"].strip().lower()
            if flag in _TRUE:
                kwargs["patch_nonfinite"] = True
            elif flag in _FALSE:
                kwargs["patch_nonfinite"] = False
            else:
                raise ValueError(f"ZETAQUAD_PATCH_NONFINITE must be a boolean, got {flag!r}")
        return cls(**kwargs)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def reset_settings():
    get_settings.cache_clear()
