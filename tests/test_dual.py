"""
Tests for dual numbers and the value/derivative accessors.
"""

import numpy as np
import pytest

from zetaquad.dual import Differentiable, Dual, HasValue, derivative_of, is_dual, value_of


class _Var:
    """Foreign node type exposing the same attributes as Dual."""

    def __init__(self, value, derivative=None):
        self.value = value
        self.derivative = derivative


class TestValueOf:

    def test_plain_numbers(self):
        assert value_of(2) == 2.0
        assert value_of(2.5) == 2.5
        assert value_of(np.float32(0.5)) == 0.5
        assert value_of(np.int64(3)) == 3.0

    def test_dual_and_foreign_nodes(self):
        assert value_of(Dual.seed(1.5)) == 1.5
        assert value_of(Dual(4.0)) == 4.0
        assert value_of(_Var(7.0, 1.0)) == 7.0

    def test_returns_python_float(self):
        assert type(value_of(np.float64(1.0))) is float
        assert type(value_of(Dual(1))) is float

    def test_rejects_bools(self):
        with pytest.raises(TypeError):
            value_of(True)
        with pytest.raises(TypeError):
            value_of(np.bool_(False))

    def test_rejects_non_numbers(self):
        with pytest.raises(TypeError):
            value_of("2.0")
        with pytest.raises(TypeError):
            value_of(None)


class TestDual:

    def test_seed_defaults_to_unit_derivative(self):
        s = Dual.seed(2.0)
        assert s.value == 2.0
        assert s.derivative == 1.0
        assert s.is_tracked
        assert s.upstream is None

    def test_untracked_dual(self):
        s = Dual(2.0)
        assert not s.is_tracked
        assert not is_dual(s)
        assert derivative_of(s) is None

    def test_zero_seed_is_still_tracked(self):
        s = Dual.seed(2.0, 0.0)
        assert is_dual(s)
        assert derivative_of(s) == 0.0

    def test_protocols(self):
        assert isinstance(Dual(1.0), HasValue)
        assert isinstance(Dual.seed(1.0), Differentiable)
        assert isinstance(_Var(1.0, 2.0), Differentiable)
        assert not isinstance(1.0, HasValue)

    def test_foreign_node_is_dual(self):
        assert is_dual(_Var(1.0, 0.25))
        assert derivative_of(_Var(1.0, 0.25)) == 0.25
        assert not is_dual(_Var(1.0))

    def test_scalars_are_not_duals(self):
        assert not is_dual(1.0)
        assert derivative_of(1.0) is None

    def test_float_conversion(self):
        assert float(Dual.seed(3.0)) == 3.0
