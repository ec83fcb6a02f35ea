"""Car endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Request, Response, status

from ...exceptions import LookupFailure
from ...models.domain import Car
from ...schemas.cars import CarCollectionResource, CarRequest, CarResource, LinkModel
from ...services.cars import CarService, ErrorKind, ServiceResult

router = APIRouter(prefix="/cars", tags=["cars"])

logger = logging.getLogger(__name__)


def get_car_service(request: Request) -> CarService:
    """The service instance built by ``create_app`` for this application."""
    return request.app.state.car_service


def _to_resource(request: Request, car: Car) -> CarResource:
    return CarResource.from_domain(
        car,
        self_href=str(request.url_for("get_car", car_id=str(car.id))),
        collection_href=str(request.url_for("list_cars")),
    )


def _unwrap(result: ServiceResult):
    if result.error is ErrorKind.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.detail)
    return result.value


def _lookup_failed(exc: LookupFailure) -> HTTPException:
    logger.exception(f"{exc.service} lookup failed: {exc}")
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=f"Failed to fetch data from the {exc.service} service.",
    )


def _unexpected(action: str, exc: Exception) -> HTTPException:
    logger.exception(f"Error {action}: {exc}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed {action}.",
    )


@router.get("", name="list_cars", response_model=CarCollectionResource, status_code=status.HTTP_200_OK)
def list_cars(request: Request, service: CarService = Depends(get_car_service)) -> CarCollectionResource:
    try:
        cars = _unwrap(service.list())
    except LookupFailure as exc:
        raise _lookup_failed(exc) from exc
    except HTTPException:
        raise
    except Exception as exc:
        raise _unexpected("listing cars", exc) from exc
    return CarCollectionResource(
        embedded={"cars": [_to_resource(request, car) for car in cars]},
        links={"self": LinkModel(href=str(request.url_for("list_cars")))},
    )


@router.get("/{car_id}", name="get_car", response_model=CarResource, status_code=status.HTTP_200_OK)
def get_car(
    request: Request,
    car_id: int = Path(..., ge=1),
    service: CarService = Depends(get_car_service),
) -> CarResource:
    try:
        car = _unwrap(service.find_by_id(car_id))
    except LookupFailure as exc:
        raise _lookup_failed(exc) from exc
    except HTTPException:
        raise
    except Exception as exc:
        raise _unexpected(f"fetching car {car_id}", exc) from exc
    return _to_resource(request, car)


@router.post("", response_model=CarResource, status_code=status.HTTP_201_CREATED)
def create_car(
    payload: CarRequest,
    request: Request,
    response: Response,
    service: CarService = Depends(get_car_service),
) -> CarResource:
    car = payload.to_domain()
    car.id = None
    try:
        saved = _unwrap(service.save(car))
    except HTTPException:
        raise
    except Exception as exc:
        raise _unexpected("creating car", exc) from exc
    resource = _to_resource(request, saved)
    response.headers["Location"] = resource.links["self"].href
    return resource


@router.put("/{car_id}", response_model=CarResource, status_code=status.HTTP_200_OK)
def update_car(
    payload: CarRequest,
    request: Request,
    car_id: int = Path(..., ge=1),
    service: CarService = Depends(get_car_service),
) -> CarResource:
    car = payload.to_domain()
    car.id = car_id
    try:
        saved = _unwrap(service.save(car))
    except HTTPException:
        raise
    except Exception as exc:
        raise _unexpected(f"updating car {car_id}", exc) from exc
    return _to_resource(request, saved)


@router.delete("/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_car(car_id: int = Path(..., ge=1), service: CarService = Depends(get_car_service)) -> Response:
    try:
        _unwrap(service.delete(car_id))
    except HTTPException:
        raise
    except Exception as exc:
        raise _unexpected(f"deleting car {car_id}", exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
