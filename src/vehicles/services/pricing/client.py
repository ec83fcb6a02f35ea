"""HTTP client for the pricing service."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import httpx

from ...config import settings
from ...exceptions import PriceLookupError
from ..http import LookupTransport

CURRENCY_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£", "JPY": "¥"}


def format_price(currency: str, amount: Decimal) -> str:
    """Render ``("USD", 30987.04)`` as ``"$30,987.04"``; unknown codes keep the code."""
    code = currency.strip().upper()
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol:
        return f"{symbol}{amount:,.2f}"
    return f"{code} {amount:,.2f}"


class PriceClient:
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
            base_url if base_url is not None else settings.pricing_base_url,
            error_cls=PriceLookupError,
            timeout=timeout,
            max_retries=max_retries,
            backoff_seconds=backoff_seconds,
            transport=transport,
        )

    def get_price(self, vehicle_id: int) -> str:
        """Fetch the current price for a vehicle as a display string."""
        data = self._http.get_json("/services/price", params={"vehicleId": vehicle_id})
        if not isinstance(data, dict):
            raise PriceLookupError(f"Pricing response for vehicle {vehicle_id} is not an object.")
        currency = data.get("currency")
        raw_price = data.get("price")
        if not currency or raw_price is None:
            raise PriceLookupError(f"Pricing response for vehicle {vehicle_id} missing currency/price.")
        try:
            amount = Decimal(str(raw_price))
        except InvalidOperation as exc:
            raise PriceLookupError(f"Pricing response for vehicle {vehicle_id} has invalid price {raw_price!r}.") from exc
        return format_price(str(currency), amount)

    def check_health(self) -> bool:
        return self._http.check_health("/prices")
