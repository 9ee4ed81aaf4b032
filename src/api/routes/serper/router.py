"""Rotas do Serper: localizações e captação de empresas."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from api.routes.gateway_adapter import GATEWAY_METHODS, dispatch
from app.bootstrap.dependencies import (
    get_location_gateway,
    get_location_search_gateway,
    get_places_gateway,
)
from app.gateway import ForwardingGateway

router = APIRouter()


@router.api_route("/buscar-localizacoes", methods=GATEWAY_METHODS)
async def search_locations(
    request: Request,
    gateway: ForwardingGateway = Depends(get_location_search_gateway),
) -> Response:
    """Sugestões de localização para o autocomplete."""
    return await dispatch(request, gateway)


@router.api_route("/location", methods=GATEWAY_METHODS)
async def location(
    request: Request,
    gateway: ForwardingGateway = Depends(get_location_gateway),
) -> Response:
    return await dispatch(request, gateway)


@router.api_route("/captar-empresas", methods=GATEWAY_METHODS)
async def capture_companies(
    request: Request,
    gateway: ForwardingGateway = Depends(get_places_gateway),
) -> Response:
    """Busca estabelecimentos por tipo e localização."""
    return await dispatch(request, gateway)
