"""FastAPI application for the pricing service."""

from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI, HTTPException, Path, Query, Request, Response, status

from vehicles.logging_config import setup_logging

from .config import settings
from .repository import PriceRepository, generate_prices
from .schemas import PriceCreateRequest, PriceListResponse, PriceModel, PriceUpdateRequest

router = APIRouter(tags=["prices"])

logger = logging.getLogger(__name__)


def _repository(request: Request) -> PriceRepository:
    return request.app.state.price_repository


def _get_or_404(repository: PriceRepository, vehicle_id: int) -> PriceModel:
    price = repository.find_by_vehicle_id(vehicle_id)
    if price is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No price found for vehicle {vehicle_id}",
        )
    return PriceModel.from_domain(price)


@router.get("/services/price", response_model=PriceModel, status_code=status.HTTP_200_OK)
def get_price(request: Request, vehicleId: int = Query(..., ge=1)) -> PriceModel:
    return _get_or_404(_repository(request), vehicleId)


@router.get("/prices", response_model=PriceListResponse, status_code=status.HTTP_200_OK)
def list_prices(request: Request) -> PriceListResponse:
    items = [PriceModel.from_domain(price) for price in _repository(request).find_all()]
    return PriceListResponse(items=items, total=len(items))


@router.get("/prices/{vehicle_id}", response_model=PriceModel, status_code=status.HTTP_200_OK)
def get_price_by_path(request: Request, vehicle_id: int = Path(..., ge=1)) -> PriceModel:
    return _get_or_404(_repository(request), vehicle_id)


@router.post("/prices", response_model=PriceModel, status_code=status.HTTP_201_CREATED)
def create_price(payload: PriceCreateRequest, request: Request, response: Response) -> PriceModel:
    saved = _repository(request).save(payload.to_domain(payload.vehicleId), replace=False)
    if saved is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Vehicle {payload.vehicleId} already has a price",
        )
    logger.info(f"Created price for vehicle {saved.vehicle_id}")
    response.headers["Location"] = str(request.url_for("get_price_by_path", vehicle_id=str(saved.vehicle_id)))
    return PriceModel.from_domain(saved)


@router.put("/prices/{vehicle_id}", response_model=PriceModel, status_code=status.HTTP_200_OK)
def update_price(
    payload: PriceUpdateRequest,
    request: Request,
    vehicle_id: int = Path(..., ge=1),
) -> PriceModel:
    saved = _repository(request).save(payload.to_domain(vehicle_id))
    logger.info(f"Stored price for vehicle {vehicle_id}")
    return PriceModel.from_domain(saved)


@router.delete("/prices/{vehicle_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_price(request: Request, vehicle_id: int = Path(..., ge=1)) -> Response:
    if not _repository(request).delete(vehicle_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No price found for vehicle {vehicle_id}",
        )
    logger.info(f"Deleted price for vehicle {vehicle_id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def build_repository() -> PriceRepository:
    return PriceRepository(
        generate_prices(
            range(1, settings.seed_vehicle_count + 1),
            currency=settings.currency,
            min_price=settings.min_price,
            max_price=settings.max_price,
            seed=settings.random_seed,
        )
    )


def create_app(repository: PriceRepository | None = None) -> FastAPI:
    setup_logging(settings.log_level)
    app = FastAPI(title=settings.app_name)
    app.state.price_repository = repository or build_repository()

    @app.get("/health")
    def health_root() -> dict:
        return {"status": "ok"}

    app.include_router(router)
    return app


app = create_app()
