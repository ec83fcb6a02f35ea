"""Car service helpers."""

from .results import ErrorKind, ServiceResult
from .service import CarService

__all__ = ["CarService", "ErrorKind", "ServiceResult"]
