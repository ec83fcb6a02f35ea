"""Route group exports."""

from . import cars, health

__all__ = ["cars", "health"]
