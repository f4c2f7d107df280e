"""
Parse-error taxonomy shared by the dimension and quantity text readers.

  • SiParseError        — base class (a ValueError), carries the offending text
  • InvalidValueLayout  — bracket/caret/magnitude structure does not match the grammar
  • InvalidUnit         — unit symbol rejected (strict symbol mode only)
  • InvalidCast         — exponent literal does not fit the requested exponent kind

Arithmetic never raises these: dimension mismatches degrade to the void quantity.
"""

from __future__ import annotations


class SiParseError(ValueError):
	"""Base class for every failure of the text readers."""

	def __init__(self, message: str, text: str | None = None) -> None:
		super().__init__(message)
		self.text = text


class InvalidValueLayout(SiParseError):
	pass


class InvalidUnit(SiParseError):
	pass


class InvalidCast(SiParseError):
	pass
