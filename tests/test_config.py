"""
Tests for settings and their environment overrides.
"""

import math

import numpy as np
import pytest

from zetaquad.config import (
    DEFAULT_MAX_LEVEL,
    DEFAULT_TOLERANCE,
    NUMERICAL_PATCH_REPLACES_NONFINITE_WITH_ZERO,
    Settings,
    get_settings,
    reset_settings,
)
from zetaquad.quadrature import integrate


class TestDefaults:

    def test_tolerance_is_sqrt_machine_epsilon(self):
        assert DEFAULT_TOLERANCE == math.sqrt(np.finfo(np.float64).eps)
        assert 1.49e-8 < DEFAULT_TOLERANCE < 1.50e-8

    def test_defaults(self):
        s = Settings()
        assert s.tolerance == DEFAULT_TOLERANCE
        assert s.max_level == DEFAULT_MAX_LEVEL
        assert s.patch_nonfinite is NUMERICAL_PATCH_REPLACES_NONFINITE_WITH_ZERO

    def test_patch_enabled_by_default(self):
        assert NUMERICAL_PATCH_REPLACES_NONFINITE_WITH_ZERO is True


class TestValidation:

    def test_rejects_non_positive_tolerance(self):
        with pytest.raises(ValueError):
            Settings(tolerance=0.0)
        with pytest.raises(ValueError):
            Settings(tolerance=-1e-8)

    def test_rejects_zero_max_level(self):
        with pytest.raises(ValueError):
            Settings(max_level=0)


class TestFromEnv:

    def test_empty_environment_gives_defaults(self):
        assert Settings.from_env({}) == Settings()

    def test_reads_all_variables(self):
        s = Settings.from_env({
            "ZETAQUAD_TOLERANCE": "1e-10",
            "ZETAQUAD_MAX_LEVEL": "8",
            "ZETAQUAD_PATCH_NONFINITE": "off",
        })
        assert s.tolerance == 1e-10
        assert s.max_level == 8
        assert s.patch_nonfinite is False

    @pytest.mark.parametrize("flag", ["1", "true", "YES", " on "])
    def test_truthy_patch_flags(self, flag):
        assert Settings.from_env({"ZETAQUAD_PATCH_NONFINITE": flag}).patch_nonfinite is True

    def test_invalid_patch_flag(self):
        with pytest.raises(ValueError):
            Settings.from_env({"ZETAQUAD_PATCH_NONFINITE": "maybe"})

    def test_invalid_number(self):
        with pytest.raises(ValueError):
            Settings.from_env({"ZETAQUAD_MAX_LEVEL": "ten"})


class TestGetSettings:

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_environment_picked_up_after_reset(self, monkeypatch):
        monkeypatch.setenv("ZETAQUAD_MAX_LEVEL", "3")
        reset_settings()
        assert get_settings().max_level == 3

    def test_integrate_honours_max_level_setting(self, monkeypatch):
        monkeypatch.setenv("ZETAQUAD_MAX_LEVEL", "3")
        reset_settings()
        result = integrate(lambda x: 1.0 / x, 1.0)
        assert result.levels <= 3
