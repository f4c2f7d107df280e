"""
Class DimensionVector models SI exponents as an immutable 7-tuple over
(length, mass, time, temperature, current, amount, luminous_intensity).
It supports the group-like arithmetic used by Quantity:

  • d1 * d2     → exponent-wise addition (dimension of a product)
  • d1 / d2     → exponent-wise subtraction (dimension of a quotient)
  • d ** n      → every exponent scaled by the integer n
  • d1 == d2    → structural equality over all seven slots
  • same, is_dimensionless, to_tuple, format, parse, convert

All seven exponents share one numeric kind (int by default). Plain Python
ints passed next to another kind are treated as literals of that kind, so
DimensionVector(length=2.0) stores 0.0 in the other slots.

The module also exposes convenient base constants:
  DIMLESS, LENGTH, MASS, TIME, TEMPERATURE, CURRENT, AMOUNT, LUMINOUS_INTENSITY
"""

from __future__ import annotations
from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Optional, Tuple

from ..config import DEFAULT_TEXT_CONFIG, TextConfig
from ..errors import InvalidCast
from ..io.text import read_exponents, split_dimension, write_dimension
from ..numeric.kinds import INT, KindLike, NumericKind, kind_of, resolve_kind, unify


FIELDS: Tuple[str, ...] = (
	"length", "mass", "time", "temperature", "current", "amount", "luminous_intensity",
)


def _adopt(kind: NumericKind, value: Any) -> Any:
	if kind_of(value) is INT:
		try:
			return kind.from_literal(Fraction(value))
		except InvalidCast as exc:
			raise ValueError(f"exponent {value} does not fit {kind.name}") from exc
	return kind.convert(value)


@dataclass(frozen=True, eq=False)
class DimensionVector:
	"""Immutable SI dimension vector over the seven base dimensions."""
	length: Any = 0
	mass: Any = 0
	time: Any = 0
	temperature: Any = 0
	current: Any = 0
	amount: Any = 0
	luminous_intensity: Any = 0

	def __post_init__(self) -> None:
		values = self.to_tuple()
		kind = unify(values)
		for name, v in zip(FIELDS, values):
			if kind_of(v) is not kind:
				object.__setattr__(self, name, _adopt(kind, v))

	@classmethod
	def from_tuple(cls, values) -> "DimensionVector":
		return cls(*values)

	@property
	def kind(self) -> NumericKind:
		"""Numeric kind shared by the exponents."""
		return kind_of(self.length)

	def multiply(self, other: "DimensionVector") -> "DimensionVector":
		return DimensionVector(*(a + b for a, b in zip(self.to_tuple(), other.to_tuple())))

	def divide(self, other: "DimensionVector") -> "DimensionVector":
		return DimensionVector(*(a - b for a, b in zip(self.to_tuple(), other.to_tuple())))

	def pow(self, n: int) -> "DimensionVector":
		if isinstance(n, bool) or not isinstance(n, int):
			raise TypeError("pow expects int")
		return DimensionVector(*(e * n for e in self.to_tuple()))

	def __mul__(self, other: "DimensionVector") -> "DimensionVector":
		if not isinstance(other, DimensionVector):
			return NotImplemented
		return self.multiply(other)

	def __truediv__(self, other: "DimensionVector") -> "DimensionVector":
		if not isinstance(other, DimensionVector):
			return NotImplemented
		return self.divide(other)

	def __pow__(self, n: int) -> "DimensionVector":
		return self.pow(n)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, DimensionVector):
			return NotImplemented
		return all(bool(a == b) for a, b in zip(self.to_tuple(), other.to_tuple()))

	def __hash__(self) -> int:
		return hash(self.to_tuple())

	def same(self, other: "DimensionVector") -> bool:
		return self == other

	def is_dimensionless(self) -> bool:
		kind = self.kind
		return all(kind.is_zero(e) for e in self.to_tuple())

	def to_tuple(self) -> Tuple[Any, ...]:
		return (
			self.length, self.mass, self.time, self.temperature,
			self.current, self.amount, self.luminous_intensity,
		)

	def as_dict(self) -> dict:
		return dict(zip(FIELDS, self.to_tuple()))

	def convert(self, exponent: KindLike) -> "DimensionVector":
		"""Element-wise widening conversion into another exponent kind."""
		kind = resolve_kind(exponent)
		return DimensionVector(*(kind.convert(e) for e in self.to_tuple()))

	def format(self, config: Optional[TextConfig] = None) -> str:
		"""
		Render as (sym^exp) tokens in field order, omitting zero exponents.
		The dimensionless vector renders as the empty string.
		"""
		return write_dimension(self.as_dict(), self.kind, config or DEFAULT_TEXT_CONFIG)

	def __str__(self) -> str:
		return self.format()

	@classmethod
	def parse(cls, text: str, exponent: KindLike = int, config: Optional[TextConfig] = None) -> "DimensionVector":
		"""
		Read '(sym^exp)(sym^exp)...' into a vector of the given exponent kind.
		Symbols missing from the text default to zero.

		Raises InvalidValueLayout for malformed structure, InvalidCast when an
		exponent does not fit the kind, and InvalidUnit for unknown symbols in
		strict mode.
		"""
		cfg = config or DEFAULT_TEXT_CONFIG
		kind = resolve_kind(exponent)
		values = read_exponents(split_dimension(text), kind, text, cfg)
		zero = kind.zero()
		return cls(*(values.get(name, zero) for name in FIELDS))


DIMLESS = DimensionVector()
LENGTH = DimensionVector(length=1)
MASS = DimensionVector(mass=1)
TIME = DimensionVector(time=1)
TEMPERATURE = DimensionVector(temperature=1)
CURRENT = DimensionVector(current=1)
AMOUNT = DimensionVector(amount=1)
LUMINOUS_INTENSITY = DimensionVector(luminous_intensity=1)
