"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/lookups", status_code=status.HTTP_200_OK)
def health_lookups(request: Request) -> dict:
    """Check that the pricing and maps services answer."""
    service = request.app.state.car_service
    checks = {}
    for name, client in (("pricing", service.price_client), ("maps", service.maps_client)):
        check = getattr(client, "check_health", None)
        checks[name] = {"healthy": bool(check()) if check else False}
    return {
        "status": "ok" if all(entry["healthy"] for entry in checks.values()) else "degraded",
        "services": checks,
    }
