"""Endpoints da Evolution API expostos pelo gateway.

Cada factory monta um ForwardSpec a partir de EvolutionSettings; as
funções `_extract_*` e `_shape_*` são a parte específica de cada endpoint.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from api.connectors.evolution.payloads import (
    build_create_instance_payload,
    normalize_instance_name,
    summarize_user_instances,
)
from api.validators import read_json_object, require_email, require_string, require_unique_list
from app.gateway import (
    ErrorFormat,
    ErrorPolicy,
    ForwardSpec,
    InboundRequest,
    Success,
    UpstreamCall,
    UpstreamReply,
)
from utils.errors import InvalidRequestError

if TYPE_CHECKING:
    from config.settings import EvolutionSettings

logger = logging.getLogger(__name__)

WEBHOOK_ROUTE_SEGMENT = "atualizar-webhook"
EVOLUTION_ERROR_LABEL = "Erro na Evolution API"
USER_EMAIL_REQUIRED = "userEmail é obrigatório"


# ──────────────────────────────────────────────────────────────
# Consulta de números WhatsApp
# ──────────────────────────────────────────────────────────────


def _extract_numbers(request: InboundRequest) -> UpstreamCall:
    payload = read_json_object(request)
    raw_numbers = payload.get("numeros")
    numbers = require_unique_list(
        payload,
        "numeros",
        missing_message="Array de números é obrigatório e não pode estar vazio",
        empty_message="Nenhum número válido encontrado após remoção de duplicatas",
    )
    logger.info(
        "numbers_deduplicated",
        extra={"received": len(raw_numbers), "unique": len(numbers)},
    )
    return UpstreamCall(json={"numbers": numbers})


def build_verify_numbers_spec(settings: EvolutionSettings) -> ForwardSpec:
    """POST /verificar-whatsapp -> consulta quais números têm WhatsApp."""
    return ForwardSpec(
        name="verificar_whatsapp",
        upstream_url=settings.get_numbers_endpoint(),
        extractor=_extract_numbers,
        method="POST",
        headers=settings.headers,
        timeout_seconds=settings.request_timeout_seconds,
        error_policy=ErrorPolicy.PASS_THROUGH,
        error_format=ErrorFormat.PLAIN,
        upstream_error_message=EVOLUTION_ERROR_LABEL,
    )


# ──────────────────────────────────────────────────────────────
# Criação de instância
# ──────────────────────────────────────────────────────────────


def _extract_instance(request: InboundRequest) -> UpstreamCall:
    payload = read_json_object(request)
    email = require_string(payload, "instanceName", "O campo instanceName é obrigatório.")
    require_email(email)
    instance_name = normalize_instance_name(email)
    return UpstreamCall(
        json=build_create_instance_payload(instance_name),
        context={"instance_name": instance_name, "user_email": email},
    )


def _shape_instance(reply: UpstreamReply, call: UpstreamCall) -> Success:
    body = reply.body if isinstance(reply.body, dict) else {"data": reply.body}
    return Success(
        status_code=reply.status_code,
        body={
            **body,
            "instanceName": call.context["instance_name"],
            "userEmail": call.context["user_email"],
            "success": True,
        },
    )


def build_create_instance_spec(settings: EvolutionSettings) -> ForwardSpec:
    """POST /evolution -> cria instância com nome derivado do email."""
    return ForwardSpec(
        name="criar_instancia",
        upstream_url=settings.endpoint("instance/create"),
        extractor=_extract_instance,
        method="POST",
        headers=settings.headers,
        timeout_seconds=settings.request_timeout_seconds,
        error_policy=ErrorPolicy.PASS_THROUGH,
        error_format=ErrorFormat.ENVELOPE,
        shape_success=_shape_instance,
        error_message="Erro ao criar instância",
        upstream_error_message=EVOLUTION_ERROR_LABEL,
    )


# ──────────────────────────────────────────────────────────────
# Logout e remoção de instância
# ──────────────────────────────────────────────────────────────


def _extract_user_email(request: InboundRequest) -> UpstreamCall:
    payload = read_json_object(request)
    email = require_string(payload, "userEmail", USER_EMAIL_REQUIRED)
    return UpstreamCall(path_params={"user_email": email}, context={"user_email": email})


def _session_shaper(message: str):
    def _shape(reply: UpstreamReply, call: UpstreamCall) -> Success:
        return Success(
            body={
                "success": True,
                "message": message,
                "userEmail": call.context["user_email"],
                "status": reply.status_code,
            }
        )

    return _shape


def build_logout_spec(settings: EvolutionSettings) -> ForwardSpec:
    """POST /logout -> encerra a sessão WhatsApp da instância do usuário."""
    return ForwardSpec(
        name="logout",
        upstream_url=settings.endpoint("instance/logout/{user_email}"),
        extractor=_extract_user_email,
        method="DELETE",
        headers=settings.headers,
        timeout_seconds=settings.request_timeout_seconds,
        shape_success=_session_shaper("Logout realizado com sucesso"),
        error_message="Erro ao realizar logout",
    )


def build_delete_instance_spec(settings: EvolutionSettings) -> ForwardSpec:
    """POST /deleteInstance -> remove a instância do usuário."""
    return ForwardSpec(
        name="delete_instance",
        upstream_url=settings.endpoint("instance/delete/{user_email}"),
        extractor=_extract_user_email,
        method="DELETE",
        headers=settings.headers,
        timeout_seconds=settings.request_timeout_seconds,
        shape_success=_session_shaper("Delete realizado com sucesso"),
        error_message="Erro ao remover instância",
    )


# ──────────────────────────────────────────────────────────────
# Conexões
# ──────────────────────────────────────────────────────────────


def _extract_nothing(request: InboundRequest) -> UpstreamCall:
    return UpstreamCall()


def _shape_refresh(reply: UpstreamReply, call: UpstreamCall) -> Success:
    # Dados das instâncias não são expostos ao frontend
    return Success(
        body={
            "success": True,
            "message": "Conexões atualizadas com sucesso",
            "timestamp": datetime.now(UTC).isoformat(),
        }
    )


def build_refresh_connections_spec(settings: EvolutionSettings) -> ForwardSpec:
    """GET|POST /atualizarConexoes -> dispara atualização das instâncias."""
    return ForwardSpec(
        name="atualizar_conexoes",
        upstream_url=settings.endpoint("instance/fetchInstances"),
        extractor=_extract_nothing,
        method="GET",
        headers=settings.headers,
        timeout_seconds=settings.request_timeout_seconds,
        allowed_methods=frozenset({"GET", "POST"}),
        shape_success=_shape_refresh,
        error_message="Erro ao atualizar conexões",
    )


def _shape_user_connections(reply: UpstreamReply, call: UpstreamCall) -> Success:
    if not isinstance(reply.body, list):
        raise ValueError("Resposta inesperada da Evolution API")

    instances = summarize_user_instances(reply.body, call.context["user_email"])
    message = (
        "Conexões atualizadas com sucesso"
        if instances
        else "Nenhuma instância encontrada para este usuário"
    )
    return Success(
        body={
            "success": True,
            "message": message,
            "instances": instances,
            "found": len(instances),
        }
    )


def build_user_connections_spec(settings: EvolutionSettings) -> ForwardSpec:
    """POST /atualizar -> status de conexão das instâncias do usuário."""
    return ForwardSpec(
        name="atualizar",
        upstream_url=settings.endpoint("instance/fetchInstances"),
        extractor=_extract_user_email,
        method="GET",
        headers=settings.headers,
        timeout_seconds=settings.request_timeout_seconds,
        shape_success=_shape_user_connections,
        error_message="Erro ao atualizar conexões",
    )


# ──────────────────────────────────────────────────────────────
# Webhook de mensagens
# ──────────────────────────────────────────────────────────────


def build_set_webhook_spec(settings: EvolutionSettings) -> ForwardSpec:
    """POST /atualizar-webhook/{instancia} -> aponta o webhook da instância.

    Resposta da Evolution é repassada literalmente (status, corpo e
    content-type).
    """
    webhook_config = settings.webhook_config()

    def _extract(request: InboundRequest) -> UpstreamCall:
        instance_name = request.last_segment
        if not instance_name or instance_name == WEBHOOK_ROUTE_SEGMENT:
            raise InvalidRequestError("Nome da instância não fornecido")
        logger.info("webhook_config_requested", extra={"instance": instance_name})
        return UpstreamCall(path_params={"instance": instance_name}, json=webhook_config)

    return ForwardSpec(
        name="atualizar_webhook",
        upstream_url=settings.endpoint("webhook/set/{instance}"),
        extractor=_extract,
        method="POST",
        headers=settings.headers,
        timeout_seconds=settings.request_timeout_seconds,
        error_policy=ErrorPolicy.PASS_THROUGH,
        error_format=ErrorFormat.PLAIN,
        relay_raw=True,
        upstream_error_message=EVOLUTION_ERROR_LABEL,
    )
