"""
Tests for numeric kinds: lookup, literal reading, casting and widening.
"""

import math
from fractions import Fraction

import numpy as np
import pytest
import sympy as sp

from siquantity import InvalidCast, available_kinds, kind_of, resolve_kind
from siquantity.numeric.kinds import (
	FLOAT,
	FLOAT32,
	FLOAT64,
	FRACTION,
	INT,
	INT8,
	INT16,
	INT32,
	INT64,
	RATIONAL,
	read_literal,
	unify,
)


class TestLookup:
	"""kind_of / resolve_kind"""

	@pytest.mark.parametrize("value, kind", [
		(1, INT),
		(1.0, FLOAT),
		(Fraction(1, 2), FRACTION),
		(sp.Rational(1, 2), RATIONAL),
		(sp.Integer(0), RATIONAL),
		(np.int8(1), INT8),
		(np.int32(1), INT32),
		(np.float32(1), FLOAT32),
		(np.float64(1), FLOAT64),
	])
	def test_kind_of(self, value, kind):
		assert kind_of(value) is kind

	@pytest.mark.parametrize("value", [True, np.bool_(False), "1", None, 1j])
	def test_kind_of_rejects(self, value):
		with pytest.raises(TypeError):
			kind_of(value)

	def test_resolve_by_type_and_name(self):
		assert resolve_kind(int) is INT
		assert resolve_kind(float) is FLOAT
		assert resolve_kind(Fraction) is FRACTION
		assert resolve_kind(sp.Rational) is RATIONAL
		assert resolve_kind(np.int16) is INT16
		assert resolve_kind("int64") is INT64
		assert resolve_kind(FLOAT32) is FLOAT32

	def test_resolve_unknown(self):
		with pytest.raises(ValueError):
			resolve_kind("decimal")
		with pytest.raises(TypeError):
			resolve_kind(complex)

	def test_available_kinds(self):
		assert set(available_kinds()) == {
			"int", "float", "fraction", "rational",
			"int8", "int16", "int32", "int64", "float32", "float64",
		}


class TestReadLiteral:
	"""Exact literal reading used for exponents"""

	def test_exact_forms(self):
		assert read_literal("2") == Fraction(2)
		assert read_literal(" 1.5 ") == Fraction(3, 2)
		assert read_literal("3/2") == Fraction(3, 2)
		assert read_literal("1e3") == Fraction(1000)

	def test_non_finite(self):
		assert math.isinf(read_literal("inf"))
		assert math.isnan(read_literal("nan"))

	@pytest.mark.parametrize("text", ["", "x", "1/0", "1..2"])
	def test_not_a_number(self, text):
		with pytest.raises(ValueError):
			read_literal(text)


class TestFromLiteral:
	"""Casting a literal into a kind"""

	def test_int_accepts_integral(self):
		assert INT.from_literal(Fraction(4)) == 4

	def test_int_rejects_fraction(self):
		with pytest.raises(InvalidCast):
			INT.from_literal(Fraction(3, 2))

	def test_int_rejects_non_finite(self):
		with pytest.raises(InvalidCast):
			INT.from_literal(float("inf"))

	def test_int8_bounds(self):
		assert INT8.from_literal(Fraction(-128)) == -128
		with pytest.raises(InvalidCast):
			INT8.from_literal(Fraction(128))

	def test_float32_overflow(self):
		with pytest.raises(InvalidCast):
			FLOAT32.from_literal(Fraction(10 ** 40))

	def test_float_overflow(self):
		with pytest.raises(InvalidCast):
			FLOAT.from_literal(Fraction(10 ** 400))

	def test_float_accepts_non_finite(self):
		assert math.isinf(FLOAT.from_literal(float("-inf")))

	def test_exact_kinds(self):
		assert FRACTION.from_literal(Fraction(1, 3)) == Fraction(1, 3)
		assert RATIONAL.from_literal(Fraction(1, 3)) == sp.Rational(1, 3)
		with pytest.raises(InvalidCast):
			RATIONAL.from_literal(float("nan"))


class TestWidening:
	"""Which conversions count as widening"""

	@pytest.mark.parametrize("src, dst", [
		(INT, FLOAT),
		(INT, FRACTION),
		(INT, RATIONAL),
		(INT8, INT16),
		(INT32, FLOAT64),
		(INT32, INT),
		(FLOAT32, FLOAT),
		(FLOAT, FLOAT64),
		(FLOAT64, FLOAT),
		(FRACTION, RATIONAL),
		(RATIONAL, FRACTION),
	])
	def test_widens(self, src, dst):
		assert src.widens_to(dst)

	@pytest.mark.parametrize("src, dst", [
		(FLOAT, INT),
		(FLOAT64, FLOAT32),
		(INT16, INT8),
		(INT, INT32),
		(FLOAT, FRACTION),
		(FRACTION, FLOAT),
	])
	def test_does_not_widen(self, src, dst):
		assert not src.widens_to(dst)

	def test_convert_values(self):
		assert FLOAT.convert(3) == 3.0
		assert isinstance(FLOAT64.convert(np.float32(0.5)), np.float64)
		assert FRACTION.convert(sp.Rational(2, 3)) == Fraction(2, 3)
		assert RATIONAL.convert(Fraction(2, 3)) == sp.Rational(2, 3)

	def test_convert_rejects_narrowing(self):
		with pytest.raises(TypeError):
			INT8.convert(1000)


class TestUnify:
	"""Common kind for a group of exponents"""

	def test_only_ints(self):
		assert unify([0, 1, 2]) is INT

	def test_ints_adopt_other_kind(self):
		assert unify([0, 1.5, 0]) is FLOAT
		assert unify([np.int8(1), 0]) is INT8

	def test_widest_wins(self):
		assert unify([np.int8(1), np.int32(2)]) is INT32

	def test_incompatible(self):
		with pytest.raises(TypeError):
			unify([Fraction(1, 2), 0.5])
