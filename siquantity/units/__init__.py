from .dim import (
	AMOUNT, CURRENT, DIMLESS, LENGTH, LUMINOUS_INTENSITY, MASS, TEMPERATURE, TIME,
	DimensionVector,
)
from .quantity import Quantity, VOID

__all__ = [
	"DimensionVector", "Quantity", "VOID",
	"DIMLESS", "LENGTH", "MASS", "TIME", "TEMPERATURE", "CURRENT", "AMOUNT", "LUMINOUS_INTENSITY",
]
