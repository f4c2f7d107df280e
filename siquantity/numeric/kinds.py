"""
Numeric kinds: the capability set a magnitude or exponent type provides.

Arithmetic and equality use the values' own operators. Everything else a
quantity needs from its numbers goes through a NumericKind:

  • zero(), is_zero(v)           neutral element and the zero test used by formatting
  • parse(text)                  the kind's own textual parser (raises ValueError)
  • format(v)                    the kind's textual form
  • from_literal(lit)            cast an exactly-read literal, raising InvalidCast if it does not fit
  • convert(v)                   widening conversion from another kind (TypeError if not widening)

Registered kinds:
  int, float, fraction (fractions.Fraction), rational (sympy.Rational),
  int8, int16, int32, int64, float32, float64 (numpy scalars)

Widening between numpy-backed kinds (Python float counts as float64) follows
numpy.can_cast(..., casting="safe"); the remaining edges are listed per kind.
"""

from __future__ import annotations
from fractions import Fraction
import math
from typing import Any, Dict, Iterable, Optional, Union

import numpy as np
import sympy as sp

from ..errors import InvalidCast


Literal = Union[Fraction, float]
KindLike = Union["NumericKind", type, str]


def read_literal(text: str) -> Literal:
	"""
	Read a numeric literal without rounding: integer, decimal, exponent and p/q
	forms become a Fraction, inf/nan spellings a float. Raises ValueError for
	anything that is not a number.
	"""
	s = (text or "").strip()
	try:
		return Fraction(s)
	except (ValueError, ZeroDivisionError):
		pass
	return float(s)


class NumericKind:
	"""Capability set of one concrete numeric type."""

	def __init__(self, name: str, pytype: type, dtype: Optional[str] = None, widens: Iterable[str] = ()) -> None:
		self.name = name
		self.pytype = pytype
		self.dtype = np.dtype(dtype) if dtype is not None else None
		self.widens = frozenset(widens)

	def __repr__(self) -> str:
		return f"NumericKind({self.name!r})"

	def zero(self) -> Any:
		return self.coerce(0)

	def is_zero(self, value: Any) -> bool:
		return bool(value == self.zero())

	def format(self, value: Any) -> str:
		return str(value)

	def parse(self, text: str) -> Any:
		raise NotImplementedError

	def from_literal(self, lit: Literal) -> Any:
		raise NotImplementedError

	def coerce(self, value: Any) -> Any:
		raise NotImplementedError

	def widens_to(self, other: "NumericKind") -> bool:
		if other is self or other.name in self.widens:
			return True
		if self.dtype is not None and other.dtype is not None:
			return bool(np.can_cast(self.dtype, other.dtype, casting="safe"))
		return False

	def convert(self, value: Any) -> Any:
		"""Convert a value of any kind that widens into this one."""
		source = kind_of(value)
		if not source.widens_to(self):
			raise TypeError(f"no widening conversion from {source.name} to {self.name}")
		return self.coerce(value)

	def _exact(self, lit: Literal) -> Fraction:
		if isinstance(lit, float):
			raise InvalidCast(f"{lit!r} is not representable as {self.name}", str(lit))
		return lit

	def _integral(self, lit: Literal) -> int:
		frac = self._exact(lit)
		if frac.denominator != 1:
			raise InvalidCast(f"{frac} is not representable as {self.name}", str(frac))
		return frac.numerator


class IntKind(NumericKind):

	def __init__(self) -> None:
		super().__init__("int", int, widens=("fraction", "rational", "float", "float64"))

	def parse(self, text: str) -> int:
		return int(text)

	def from_literal(self, lit: Literal) -> int:
		return self._integral(lit)

	def coerce(self, value: Any) -> int:
		return int(value)


class FloatKind(NumericKind):

	def __init__(self) -> None:
		super().__init__("float", float, dtype="float64")

	def parse(self, text: str) -> float:
		return float(text)

	def from_literal(self, lit: Literal) -> float:
		try:
			return float(lit)
		except OverflowError as exc:
			raise InvalidCast(f"{lit} overflows {self.name}", str(lit)) from exc

	def coerce(self, value: Any) -> float:
		return float(value)


class FractionKind(NumericKind):

	def __init__(self) -> None:
		super().__init__("fraction", Fraction, widens=("rational",))

	def parse(self, text: str) -> Fraction:
		try:
			return Fraction(text.strip())
		except ZeroDivisionError as exc:
			raise ValueError(f"zero denominator in {text!r}") from exc

	def from_literal(self, lit: Literal) -> Fraction:
		return self._exact(lit)

	def coerce(self, value: Any) -> Fraction:
		if isinstance(value, Fraction):
			return value
		if isinstance(value, sp.Rational):
			return Fraction(int(value.p), int(value.q))
		return Fraction(int(value))


class RationalKind(NumericKind):
	"""Exact rationals backed by sympy.Rational (sympy.Integer included)."""

	def __init__(self) -> None:
		super().__init__("rational", sp.Rational, widens=("fraction",))

	def parse(self, text: str) -> sp.Rational:
		return self.coerce(FRACTION.parse(text))

	def from_literal(self, lit: Literal) -> sp.Rational:
		return self.coerce(self._exact(lit))

	def coerce(self, value: Any) -> sp.Rational:
		if isinstance(value, sp.Rational):
			return value
		if isinstance(value, Fraction):
			return sp.Rational(value.numerator, value.denominator)
		return sp.Integer(int(value))


class NumpyIntKind(NumericKind):

	def __init__(self, dtype: str) -> None:
		super().__init__(dtype, np.dtype(dtype).type, dtype=dtype, widens=("int", "fraction", "rational"))
		self._info = np.iinfo(self.dtype)

	def _bounded(self, n: int) -> Any:
		if n < self._info.min or n > self._info.max:
			raise OverflowError(f"{n} out of range for {self.name}")
		return self.pytype(n)

	def parse(self, text: str) -> Any:
		try:
			return self._bounded(int(text))
		except OverflowError as exc:
			raise ValueError(str(exc)) from exc

	def from_literal(self, lit: Literal) -> Any:
		n = self._integral(lit)
		try:
			return self._bounded(n)
		except OverflowError as exc:
			raise InvalidCast(str(exc), str(n)) from exc

	def coerce(self, value: Any) -> Any:
		return self._bounded(int(value))


class NumpyFloatKind(NumericKind):

	def __init__(self, dtype: str) -> None:
		super().__init__(dtype, np.dtype(dtype).type, dtype=dtype)
		self._max = float(np.finfo(self.dtype).max)

	def parse(self, text: str) -> Any:
		return self.pytype(float(text))

	def from_literal(self, lit: Literal) -> Any:
		try:
			f = float(lit)
		except OverflowError as exc:
			raise InvalidCast(f"{lit} overflows {self.name}", str(lit)) from exc
		if math.isfinite(f) and abs(f) > self._max:
			raise InvalidCast(f"{lit} overflows {self.name}", str(lit))
		return self.pytype(f)

	def coerce(self, value: Any) -> Any:
		return self.pytype(float(value))


INT = IntKind()
FLOAT = FloatKind()
FRACTION = FractionKind()
RATIONAL = RationalKind()
INT8 = NumpyIntKind("int8")
INT16 = NumpyIntKind("int16")
INT32 = NumpyIntKind("int32")
INT64 = NumpyIntKind("int64")
FLOAT32 = NumpyFloatKind("float32")
FLOAT64 = NumpyFloatKind("float64")

_KINDS: Dict[str, NumericKind] = {}
_BY_TYPE: Dict[type, NumericKind] = {}

for _k in (INT, FLOAT, FRACTION, RATIONAL, INT8, INT16, INT32, INT64, FLOAT32, FLOAT64):
	_KINDS[_k.name] = _k
	_BY_TYPE[_k.pytype] = _k


def kind_of(value: Any) -> NumericKind:
	"""Return the registered kind of a numeric value."""
	if isinstance(value, (bool, np.bool_)):
		raise TypeError("bool is not a numeric kind")
	k = _BY_TYPE.get(type(value))
	if k is not None:
		return k
	if isinstance(value, sp.Rational):
		return RATIONAL
	if isinstance(value, np.generic) and value.dtype.name in _KINDS:
		return _KINDS[value.dtype.name]
	raise TypeError(f"unsupported numeric type: {type(value).__name__}")


def resolve_kind(kind_like: KindLike) -> NumericKind:
	"""Accept a NumericKind, a kind name, or a Python/numpy/sympy number type."""
	if isinstance(kind_like, NumericKind):
		return kind_like
	if isinstance(kind_like, str):
		if kind_like not in _KINDS:
			raise ValueError(f"unknown numeric kind: {kind_like!r}")
		return _KINDS[kind_like]
	if isinstance(kind_like, type):
		if kind_like in _BY_TYPE:
			return _BY_TYPE[kind_like]
		if issubclass(kind_like, sp.Rational):
			return RATIONAL
		if issubclass(kind_like, np.generic) and np.dtype(kind_like).name in _KINDS:
			return _KINDS[np.dtype(kind_like).name]
	raise TypeError(f"unsupported numeric kind: {kind_like!r}")


def unify(values: Iterable[Any]) -> NumericKind:
	"""
	Pick the single kind a group of values is stored as.

	Python ints act as untyped integer literals and adopt the kind of the other
	values; among the remaining kinds the one every other kind widens to wins.
	"""
	kinds: list[NumericKind] = []
	for v in values:
		k = kind_of(v)
		if k is not INT and k not in kinds:
			kinds.append(k)
	if not kinds:
		return INT
	for candidate in kinds:
		if all(k.widens_to(candidate) for k in kinds):
			return candidate
	names = ", ".join(k.name for k in kinds)
	raise TypeError(f"no common kind for {names}")


def available_kinds() -> tuple[str, ...]:
	return tuple(_KINDS)
