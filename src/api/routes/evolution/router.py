"""Rotas da Evolution API: números WhatsApp, instâncias e webhook."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from api.routes.gateway_adapter import GATEWAY_METHODS, dispatch
from app.bootstrap.dependencies import (
    get_create_instance_gateway,
    get_delete_instance_gateway,
    get_logout_gateway,
    get_refresh_connections_gateway,
    get_set_webhook_gateway,
    get_user_connections_gateway,
    get_verify_numbers_gateway,
)
from app.gateway import ForwardingGateway

router = APIRouter()


@router.api_route("/verificar-whatsapp", methods=GATEWAY_METHODS)
async def verify_numbers(
    request: Request,
    gateway: ForwardingGateway = Depends(get_verify_numbers_gateway),
) -> Response:
    """Verifica quais números possuem WhatsApp."""
    return await dispatch(request, gateway)


@router.api_route("/evolution", methods=GATEWAY_METHODS)
async def create_instance(
    request: Request,
    gateway: ForwardingGateway = Depends(get_create_instance_gateway),
) -> Response:
    """Cria a instância do usuário e devolve o QR code."""
    return await dispatch(request, gateway)


@router.api_route("/logout", methods=GATEWAY_METHODS)
async def logout(
    request: Request,
    gateway: ForwardingGateway = Depends(get_logout_gateway),
) -> Response:
    return await dispatch(request, gateway)


@router.api_route("/deleteInstance", methods=GATEWAY_METHODS)
async def delete_instance(
    request: Request,
    gateway: ForwardingGateway = Depends(get_delete_instance_gateway),
) -> Response:
    return await dispatch(request, gateway)


@router.api_route("/atualizarConexoes", methods=GATEWAY_METHODS)
async def refresh_connections(
    request: Request,
    gateway: ForwardingGateway = Depends(get_refresh_connections_gateway),
) -> Response:
    return await dispatch(request, gateway)


@router.api_route("/atualizar", methods=GATEWAY_METHODS)
async def user_connections(
    request: Request,
    gateway: ForwardingGateway = Depends(get_user_connections_gateway),
) -> Response:
    """Lista as conexões do usuário com status normalizado."""
    return await dispatch(request, gateway)


@router.api_route("/atualizar-webhook", methods=GATEWAY_METHODS)
@router.api_route("/atualizar-webhook/{instance_name}", methods=GATEWAY_METHODS)
async def set_webhook(
    request: Request,
    gateway: ForwardingGateway = Depends(get_set_webhook_gateway),
) -> Response:
    """Aponta o webhook de mensagens da instância (último segmento da URL)."""
    return await dispatch(request, gateway)
