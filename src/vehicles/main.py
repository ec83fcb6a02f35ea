"""FastAPI application entry point and composition root."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from .api.routes import cars, health
from .config import settings
from .db.supabase import get_supabase_client
from .logging_config import setup_logging
from .persistence.repository import CarRepository, InMemoryCarRepository, SupabaseCarRepository
from .services.cars import CarService
from .services.maps.client import MapsClient
from .services.pricing.client import PriceClient

logger = logging.getLogger(__name__)


def build_repository() -> CarRepository:
    client = get_supabase_client()
    if client is None:
        logger.info("Using in-memory car store")
        return InMemoryCarRepository()
    logger.info(f"Using Supabase car store (table '{settings.supabase_table}')")
    return SupabaseCarRepository(client, table=settings.supabase_table)


def build_car_service() -> CarService:
    return CarService(
        build_repository(),
        PriceClient(settings.pricing_base_url),
        MapsClient(settings.maps_base_url),
        max_workers=settings.enrichment_max_workers,
    )


def create_app(car_service: CarService | None = None) -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.app_name)
    app.state.car_service = car_service or build_car_service()

    @app.get("/")
    def root():
        return {
            "service": settings.app_name,
            "status": "running",
            "cars": f"{settings.api_prefix}/cars",
            "health": f"{settings.api_prefix}/health",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(cars.router, prefix=settings.api_prefix)
    return app


app = create_app()
