"""Exception hierarchy for the Vehicles API."""

from __future__ import annotations


class VehiclesError(Exception):
    """Base class for errors raised by this package."""


class ServiceConfigurationError(VehiclesError):
    """A collaborator is missing or has unusable configuration (e.g. a base URL)."""


class LookupFailure(VehiclesError):
    """An external lookup failed after the transport gave up.

    Carries the service name and the URL that was requested so the HTTP layer can
    report which collaborator broke.
    """

    service = "lookup"

    def __init__(self, message: str, *, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class PriceLookupError(LookupFailure):
    service = "pricing"


class LocationLookupError(LookupFailure):
    service = "maps"
