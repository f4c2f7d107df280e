"""
Quantity: a numeric magnitude paired with a DimensionVector.

Typing rules for the arithmetic operators:

  • a + b, a - b : require equal unit vectors; result keeps that unit.
  • a * b, a / b : unit vectors multiply/divide (exponents add/subtract); always legal.
  • a ** n       : integer n; magnitude power, unit exponents scaled by n.

Illegal arithmetic does not raise. It returns the void quantity (magnitude and
unit both None), which is also the default value; callers test `is_void`.
Parsing is the opposite: Quantity.parse raises a typed SiParseError.

Magnitude arithmetic is whatever the magnitude type does: int / int gives a
float, a zero Python divisor raises ZeroDivisionError, numpy floats give
inf/nan.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Any, Optional

from ..config import DEFAULT_TEXT_CONFIG, TextConfig
from ..errors import InvalidValueLayout
from ..io.text import read_exponents, split_quantity
from ..numeric.kinds import KindLike, kind_of, resolve_kind
from .dim import FIELDS, DimensionVector


logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Quantity:
	"""Magnitude with SI unit exponents, or the void sentinel when both are None."""
	magnitude: Any = None
	unit: Optional[DimensionVector] = None

	def __post_init__(self) -> None:
		if (self.magnitude is None) != (self.unit is None):
			raise ValueError("magnitude and unit must be given together")
		if self.unit is None:
			return
		if not isinstance(self.unit, DimensionVector):
			raise TypeError("unit must be a DimensionVector")
		kind_of(self.magnitude)

	def __eq__(self, other: object) -> bool:
		# magnitudes compare with ==, so a NaN quantity is not equal to itself
		if not isinstance(other, Quantity):
			return NotImplemented
		if self.is_void or other.is_void:
			return self.is_void and other.is_void
		return bool(self.magnitude == other.magnitude) and self.unit == other.unit

	def __hash__(self) -> int:
		return hash((self.magnitude, self.unit))

	@classmethod
	def new(cls, magnitude: Any, length: Any = 0, mass: Any = 0, time: Any = 0, temperature: Any = 0,
			current: Any = 0, amount: Any = 0, luminous_intensity: Any = 0) -> "Quantity":
		"""Valid quantity from a magnitude and the seven exponents."""
		if magnitude is None:
			raise ValueError("magnitude is required; use Quantity.void() for the sentinel")
		return cls(magnitude, DimensionVector(length, mass, time, temperature, current, amount, luminous_intensity))

	@classmethod
	def void(cls) -> "Quantity":
		return cls()

	@property
	def is_void(self) -> bool:
		return self.unit is None

	@property
	def is_valid(self) -> bool:
		return self.unit is not None

	def is_dimensionless(self) -> bool:
		return self.is_valid and self.unit.is_dimensionless()

	def add(self, other: "Quantity") -> "Quantity":
		if not self._same_unit(other, "+"):
			return VOID
		return Quantity(self.magnitude + other.magnitude, self.unit)

	def subtract(self, other: "Quantity") -> "Quantity":
		if not self._same_unit(other, "-"):
			return VOID
		return Quantity(self.magnitude - other.magnitude, self.unit)

	def multiply(self, other: "Quantity") -> "Quantity":
		if self.is_void or other.is_void:
			return VOID
		return Quantity(self.magnitude * other.magnitude, self.unit * other.unit)

	def divide(self, other: "Quantity") -> "Quantity":
		if self.is_void or other.is_void:
			return VOID
		return Quantity(self.magnitude / other.magnitude, self.unit / other.unit)

	def pow(self, n: int) -> "Quantity":
		if self.is_void:
			return VOID
		unit = self.unit.pow(n)
		return Quantity(self.magnitude ** n, unit)

	def _same_unit(self, other: "Quantity", op: str) -> bool:
		if self.is_void or other.is_void:
			return False
		if self.unit != other.unit:
			logger.debug("unit mismatch in '%s': %s vs %s, result is void", op, self.unit, other.unit)
			return False
		return True

	def __add__(self, other: "Quantity") -> "Quantity":
		if not isinstance(other, Quantity):
			return NotImplemented
		return self.add(other)

	def __sub__(self, other: "Quantity") -> "Quantity":
		if not isinstance(other, Quantity):
			return NotImplemented
		return self.subtract(other)

	def __mul__(self, other: "Quantity") -> "Quantity":
		if not isinstance(other, Quantity):
			return NotImplemented
		return self.multiply(other)

	def __truediv__(self, other: "Quantity") -> "Quantity":
		if not isinstance(other, Quantity):
			return NotImplemented
		return self.divide(other)

	def __pow__(self, n: int) -> "Quantity":
		return self.pow(n)

	def __neg__(self) -> "Quantity":
		if self.is_void:
			return VOID
		return Quantity(-self.magnitude, self.unit)

	def convert(self, magnitude: KindLike, exponent: KindLike) -> "Quantity":
		"""Widen magnitude and exponents into other kinds; void stays void."""
		mkind = resolve_kind(magnitude)
		ekind = resolve_kind(exponent)
		if self.is_void:
			return VOID
		return Quantity(mkind.convert(self.magnitude), self.unit.convert(ekind))

	def format(self, config: Optional[TextConfig] = None) -> str:
		"""
		'<magnitude> <units>'. A magnitude equal to zero is written as empty
		text, so zero quantities come out as ' <units>' and do not parse back.
		The void quantity renders as the config's void_text.
		"""
		cfg = config or DEFAULT_TEXT_CONFIG
		if self.is_void:
			return cfg.void_text
		kind = kind_of(self.magnitude)
		mag = "" if kind.is_zero(self.magnitude) else kind.format(self.magnitude)
		return f"{mag} {self.unit.format(cfg)}"

	def __str__(self) -> str:
		return self.format()

	@classmethod
	def parse(cls, text: str, magnitude: KindLike = float, exponent: KindLike = float,
			config: Optional[TextConfig] = None) -> "Quantity":
		"""
		Read '<magnitude> (<sym^exp>)(...)'. The magnitude goes through the
		magnitude kind's own parser; unit tokens follow DimensionVector.parse.

		Raises InvalidValueLayout (bad magnitude, missing ' (' or ')', malformed
		tokens), InvalidCast (exponent does not fit), InvalidUnit (strict mode).
		"""
		cfg = config or DEFAULT_TEXT_CONFIG
		mkind = resolve_kind(magnitude)
		ekind = resolve_kind(exponent)
		mag_text, tokens = split_quantity(text)
		try:
			value = mkind.parse(mag_text)
		except (ValueError, TypeError, OverflowError) as exc:
			raise InvalidValueLayout(f"magnitude {mag_text!r} is not a {mkind.name}", text) from exc
		values = read_exponents(tokens, ekind, text, cfg)
		zero = ekind.zero()
		return cls(value, DimensionVector(*(values.get(name, zero) for name in FIELDS)))


VOID = Quantity()
