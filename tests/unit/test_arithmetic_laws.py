"""
Algebraic laws of quantity arithmetic, checked on exact magnitudes.
"""

from fractions import Fraction

import pytest

from siquantity import DimensionVector, Quantity


SAME_UNIT_PAIRS = [
	(Quantity.new(Fraction(1, 3), 1, 0, -1), Quantity.new(Fraction(5, 7), 1, 0, -1)),
	(Quantity.new(-4, 0, 1, -2), Quantity.new(9, 0, 1, -2)),
	(Quantity.new(Fraction(2), 0, 0, 0, 1, 1), Quantity.new(Fraction(-11, 5), 0, 0, 0, 1, 1)),
]

MIXED_UNIT_PAIRS = [
	(Quantity.new(Fraction(3, 2), 1), Quantity.new(Fraction(4), 0, 0, 1)),
	(Quantity.new(Fraction(-6), 2, 1, -3), Quantity.new(Fraction(1, 9), -1, 0, 1, 0, 0, 0, 2)),
	(Quantity.new(Fraction(5), 0, 0, 0, 0, 0, 1), Quantity.new(Fraction(5), 0, 0, 0, 0, 0, -1)),
]


class TestAddLaws:

	@pytest.mark.parametrize("a, b", SAME_UNIT_PAIRS)
	def test_add_commutes(self, a, b):
		assert a + b == b + a

	@pytest.mark.parametrize("a, b", SAME_UNIT_PAIRS)
	def test_subtract_undoes_add(self, a, b):
		assert (a + b) - b == a

	@pytest.mark.parametrize("a, b", MIXED_UNIT_PAIRS)
	def test_mismatch_is_void(self, a, b):
		assert (a + b).is_void
		assert (a - b).is_void


class TestMultiplyLaws:

	@pytest.mark.parametrize("a, b", MIXED_UNIT_PAIRS + SAME_UNIT_PAIRS)
	def test_product_unit_is_exponent_sum(self, a, b):
		expected = tuple(x + y for x, y in zip(a.unit.to_tuple(), b.unit.to_tuple()))
		assert (a * b).unit == DimensionVector(*expected)

	@pytest.mark.parametrize("a, b", MIXED_UNIT_PAIRS + SAME_UNIT_PAIRS)
	def test_quotient_unit_is_exponent_difference(self, a, b):
		expected = tuple(x - y for x, y in zip(a.unit.to_tuple(), b.unit.to_tuple()))
		assert (a / b).unit == DimensionVector(*expected)

	@pytest.mark.parametrize("a, b", MIXED_UNIT_PAIRS + SAME_UNIT_PAIRS)
	def test_divide_undoes_multiply(self, a, b):
		assert (a * b) / b == a
