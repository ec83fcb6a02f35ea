"""HTTP client for the maps (reverse geocoding) service."""

from __future__ import annotations

import httpx

from ...config import settings
from ...exceptions import LocationLookupError
from ...models.domain import Location
from ..http import LookupTransport


class MapsClient:
    def __init__(
        self,
        base_url: str | None = None,
        *,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._http = LookupTransport(
            base_url if base_url is not None else settings.maps_base_url,
            error_cls=LocationLookupError,
            timeout=timeout,
            max_retries=max_retries,
            backoff_seconds=backoff_seconds,
            transport=transport,
        )

    def get_address(self, location: Location) -> Location:
        """Resolve a coordinate pair into a new Location carrying the address.

        The coordinates of the returned Location are the ones that were asked for,
        not whatever the service echoes back.
        """
        data = self._http.get_json("/maps", params={"lat": location.lat, "lon": location.lon})
        if not isinstance(data, dict) or not data.get("address"):
            raise LocationLookupError(
                f"Maps response for ({location.lat}, {location.lon}) missing address."
            )
        return Location(
            lat=location.lat,
            lon=location.lon,
            address=str(data["address"]),
            city=data.get("city"),
            state=data.get("state"),
            zip=None if data.get("zip") is None else str(data["zip"]),
        )

    def check_health(self) -> bool:
        return self._http.check_health("/maps", params={"lat": 0.0, "lon": 0.0})
