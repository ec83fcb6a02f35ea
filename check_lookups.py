#!/usr/bin/env python3
"""Verify that the pricing and maps services configured for the vehicles API answer."""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root / "src"))

from vehicles.config import settings
from vehicles.exceptions import LookupFailure
from vehicles.models.domain import Location
from vehicles.services.maps.client import MapsClient
from vehicles.services.pricing.client import PriceClient


def main() -> int:
    print("=" * 60)
    print("Lookup Service Connection Test")
    print("=" * 60)
    print()

    print(f"   Pricing URL: {settings.pricing_base_url}")
    print(f"   Maps URL:    {settings.maps_base_url}")
    print()

    failures = 0

    print("1. Pricing service...")
    try:
        price = PriceClient().get_price(1)
        print(f"   [OK] Price for vehicle 1: {price}")
    except LookupFailure as e:
        print(f"   [ERROR] {e}")
        failures += 1

    print("2. Maps service...")
    try:
        location = MapsClient().get_address(Location(lat=40.73061, lon=-73.935242))
        print(f"   [OK] Address for (40.73061, -73.935242): {location.address}")
    except LookupFailure as e:
        print(f"   [ERROR] {e}")
        failures += 1

    print()
    print("=" * 60)
    print("[SUCCESS] Both lookups answered." if not failures else f"[FAILED] {failures} lookup(s) failed.")
    print("=" * 60)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
