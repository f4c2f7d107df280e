"""
Canonical text grammar for dimension vectors and quantities.

  dimension text := token*                      e.g. (m^2)(kg^3)(s^-1)
  token          := "(" SYMBOL "^" EXPONENT ")"
  quantity text  := MAGNITUDE " (" body ")"     e.g. 3 (s^4)(m^2)(cd^8)

Both readers share split_body/read_exponents, so layout and cast failures are
reported identically whichever entry point was used. Symbols are matched
case-insensitively; unknown symbols are dropped unless the config is strict.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Tuple

from ..config import DEFAULT_TEXT_CONFIG, TextConfig
from ..errors import InvalidUnit, InvalidValueLayout
from ..numeric.kinds import NumericKind, read_literal


logger = logging.getLogger(__name__)

Token = Tuple[str, str]


def split_body(body: str, source: str) -> List[Token]:
	"""Split 'm^2)(s^-1' into [('m', '2'), ('s', '-1')]. Blank body has no tokens."""
	if not body.strip():
		return []
	tokens: List[Token] = []
	for raw in body.split(")("):
		if "(" in raw or ")" in raw or raw.count("^") != 1:
			raise InvalidValueLayout(f"malformed unit token {raw!r}", source)
		sym, exp = (part.strip() for part in raw.split("^"))
		if not sym or not exp:
			raise InvalidValueLayout(f"malformed unit token {raw!r}", source)
		tokens.append((sym, exp))
	return tokens


def split_dimension(text: str) -> List[Token]:
	"""Tokenize a full dimension text; the empty string is the dimensionless vector."""
	s = (text or "").strip()
	if not s:
		return []
	if not (s.startswith("(") and s.endswith(")")):
		raise InvalidValueLayout("unit text must be enclosed in parentheses", text)
	return split_body(s[1:-1], text)


def split_quantity(text: str) -> Tuple[str, List[Token]]:
	"""Split '<magnitude> (<tokens>)' into the magnitude literal and its unit tokens."""
	head, sep, tail = (text or "").partition(" (")
	if not sep:
		raise InvalidValueLayout("expected '<magnitude> (<units>)'", text)
	head = head.strip()
	if not head:
		raise InvalidValueLayout("missing magnitude", text)
	tail = tail.strip()
	if not tail.endswith(")"):
		raise InvalidValueLayout("missing closing parenthesis", text)
	return head, split_body(tail[:-1], text)


def read_exponents(tokens: Iterable[Token], kind: NumericKind, source: str, config: TextConfig = DEFAULT_TEXT_CONFIG) -> Dict[str, Any]:
	"""
	Map tokens onto DimensionVector field names. Each exponent is read as an
	exact literal first (non-numbers are a layout error), then cast into the
	exponent kind (InvalidCast if it does not fit). Later duplicates win.
	"""
	fields = config.field_for_symbol()
	out: Dict[str, Any] = {}
	for sym, exp in tokens:
		try:
			lit = read_literal(exp)
		except ValueError as exc:
			raise InvalidValueLayout(f"exponent {exp!r} is not a number", source) from exc
		name = fields.get(sym.lower())
		if name is None:
			if config.strict_symbols:
				raise InvalidUnit(f"unknown unit symbol {sym!r}", source)
			logger.debug("dropping unknown unit symbol %r in %r", sym, source)
			continue
		out[name] = kind.from_literal(lit)
	return out


def write_dimension(exponents: Dict[str, Any], kind: NumericKind, config: TextConfig = DEFAULT_TEXT_CONFIG) -> str:
	"""Render non-zero exponents as (sym^exp) tokens in field order."""
	parts = []
	for name, sym in config.symbols:
		e = exponents[name]
		if kind.is_zero(e):
			continue
		parts.append(f"({sym}^{kind.format(e)})")
	return "".join(parts)
