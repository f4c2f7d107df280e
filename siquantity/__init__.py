"""
SI quantities with dimension-checked arithmetic.

Public API:
	DimensionVector — seven SI exponents; * and / add/subtract exponents
	Quantity        — magnitude + DimensionVector; +/- need equal units, else void
	VOID            — the void quantity (result of illegal arithmetic)
	SiParseError, InvalidValueLayout, InvalidUnit, InvalidCast — parse errors
	TextConfig      — symbols and void text used by parse/format
	NumericKind, kind_of, resolve_kind — numeric kinds for magnitudes and exponents
"""

from .config import DEFAULT_TEXT_CONFIG, SI_SYMBOLS, TextConfig
from .errors import InvalidCast, InvalidUnit, InvalidValueLayout, SiParseError
from .numeric import NumericKind, available_kinds, kind_of, resolve_kind
from .units import (
	AMOUNT, CURRENT, DIMLESS, LENGTH, LUMINOUS_INTENSITY, MASS, TEMPERATURE, TIME,
	DimensionVector, Quantity, VOID,
)

__all__ = [
	"DimensionVector", "Quantity", "VOID",
	"DIMLESS", "LENGTH", "MASS", "TIME", "TEMPERATURE", "CURRENT", "AMOUNT", "LUMINOUS_INTENSITY",
	"SiParseError", "InvalidValueLayout", "InvalidUnit", "InvalidCast",
	"TextConfig", "DEFAULT_TEXT_CONFIG", "SI_SYMBOLS",
	"NumericKind", "available_kinds", "kind_of", "resolve_kind",
]
