"""
Numeric kinds for magnitudes and exponents (see kinds.py).
"""

from .kinds import NumericKind, available_kinds, kind_of, read_literal, resolve_kind

__all__ = ["NumericKind", "available_kinds", "kind_of", "read_literal", "resolve_kind"]
