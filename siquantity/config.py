"""
Text configuration for the dimension/quantity readers and writers.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple


SymbolTable = Tuple[Tuple[str, str], ...]

SI_SYMBOLS: SymbolTable = (
	("length", "m"),
	("mass", "kg"),
	("time", "s"),
	("temperature", "k"),
	("current", "A"),
	("amount", "mol"),
	("luminous_intensity", "cd"),
)


@dataclass(frozen=True)
class TextConfig:
	"""
	Symbols, in field order, used when writing and (case-insensitively) when
	reading unit tokens. With strict_symbols the readers reject unknown
	symbols with InvalidUnit instead of dropping them.
	"""
	symbols: SymbolTable = SI_SYMBOLS
	void_text: str = "Value is None"
	strict_symbols: bool = False

	def field_for_symbol(self) -> Dict[str, str]:
		"""Lower-cased symbol -> DimensionVector field name."""
		return {sym.lower(): name for name, sym in self.symbols}


DEFAULT_TEXT_CONFIG = TextConfig()
