"""Endpoints do Serper expostos pelo gateway.

- /buscar-localizacoes: sugestões de localização (GET ou POST)
- /location: sugestões resumidas, no máximo 10
- /captar-empresas: estabelecimentos por tipo e localização
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.serper.payloads import (
    build_location_label,
    build_places_payload,
    project_locations,
    unique_places,
)
from api.validators import optional_string, parse_int, read_json_object, require_string
from app.gateway import (
    ErrorFormat,
    ForwardSpec,
    InboundRequest,
    Success,
    UpstreamCall,
    UpstreamReply,
)

if TYPE_CHECKING:
    from config.settings import SerperSettings

logger = logging.getLogger(__name__)

LOCATION_DEFAULT_LIMIT = 25
LOCATION_MIN_QUERY_LENGTH = 2
LOCATION_RESULT_CAP = 10
PLACES_DEFAULT_COUNT = 10
PLACES_MAX_COUNT = 20
LOCATION_ERROR_MESSAGE = "Erro ao buscar localizações"


def _empty_locations(message: str) -> Success:
    return Success(body={"success": True, "data": [], "message": message})


def _location_items(reply: UpstreamReply) -> list[Any]:
    if not isinstance(reply.body, list):
        raise ValueError("Resposta inesperada do Serper")
    return reply.body


# ──────────────────────────────────────────────────────────────
# Busca de localizações
# ──────────────────────────────────────────────────────────────


def _extract_location_search(request: InboundRequest) -> UpstreamCall | Success:
    if request.method.upper() == "GET":
        query = (request.query.get("q") or "").strip()
        limit_value: Any = request.query.get("limit")
    else:
        payload = read_json_object(request)
        query = optional_string(payload, "q")
        limit_value = payload.get("limit")

    if len(query) < LOCATION_MIN_QUERY_LENGTH:
        return _empty_locations("Query muito curto. Digite pelo menos 2 caracteres.")

    limit = parse_int(limit_value, LOCATION_DEFAULT_LIMIT)
    logger.info("location_search_requested", extra={"query_length": len(query), "limit": limit})
    return UpstreamCall(
        params={"q": query, "limit": limit},
        context={"query": query, "limit": limit},
    )


def _shape_location_search(reply: UpstreamReply, call: UpstreamCall) -> Success:
    items = _location_items(reply)[: call.context["limit"]]
    return Success(
        body={
            "success": True,
            "data": items,
            "query": call.context["query"],
            "total": len(items),
        }
    )


def build_location_search_spec(settings: SerperSettings) -> ForwardSpec:
    """GET|POST /buscar-localizacoes."""
    return ForwardSpec(
        name="buscar_localizacoes",
        upstream_url=settings.locations_url,
        extractor=_extract_location_search,
        method="GET",
        headers=settings.headers,
        timeout_seconds=settings.request_timeout_seconds,
        allowed_methods=frozenset({"GET", "POST"}),
        shape_success=_shape_location_search,
        error_message=LOCATION_ERROR_MESSAGE,
    )


# ──────────────────────────────────────────────────────────────
# Localização resumida
# ──────────────────────────────────────────────────────────────


def _extract_location(request: InboundRequest) -> UpstreamCall | Success:
    payload = read_json_object(request)
    query = optional_string(payload, "q")
    if not query:
        return _empty_locations("Digite algo para buscar localizações")
    return UpstreamCall(
        params={"q": query, "limit": LOCATION_DEFAULT_LIMIT},
        context={"query": query},
    )


def _shape_location(reply: UpstreamReply, call: UpstreamCall) -> Success:
    # Corpo fora do formato de lista equivale a nenhum resultado
    items = reply.body if isinstance(reply.body, list) else []
    locations = project_locations(items, LOCATION_RESULT_CAP)
    return Success(
        body={
            "success": True,
            "data": locations,
            "query": call.context["query"],
            "total": len(locations),
        }
    )


def build_location_spec(settings: SerperSettings) -> ForwardSpec:
    """POST /location."""
    return ForwardSpec(
        name="location",
        upstream_url=settings.locations_url,
        extractor=_extract_location,
        method="GET",
        headers=settings.headers,
        timeout_seconds=settings.request_timeout_seconds,
        shape_success=_shape_location,
        error_message=LOCATION_ERROR_MESSAGE,
    )


# ──────────────────────────────────────────────────────────────
# Captação de empresas
# ──────────────────────────────────────────────────────────────


def _extract_places(request: InboundRequest) -> UpstreamCall:
    payload = read_json_object(request)
    business_type = require_string(payload, "tipoEmpresa", "Tipo de empresa é obrigatório")
    country = optional_string(payload, "pais", "BR")
    location = optional_string(payload, "localizacao")
    language = optional_string(payload, "idioma", "pt-br")
    count = parse_int(
        payload.get("quantidadeEmpresas"),
        PLACES_DEFAULT_COUNT,
        maximum=PLACES_MAX_COUNT,
    )

    location_label = build_location_label(country, location)
    return UpstreamCall(
        json=build_places_payload(business_type, location_label, country, language),
        context={
            "tipoEmpresa": business_type,
            "localizacao": location_label,
            "pais": country,
            "idioma": language,
            "quantidadeSolicitada": count,
        },
    )


def _shape_places(reply: UpstreamReply, call: UpstreamCall) -> Success:
    raw_places = reply.body.get("places") if isinstance(reply.body, dict) else None
    places = unique_places(raw_places or [], call.context["quantidadeSolicitada"])
    business_type = call.context["tipoEmpresa"]
    location_label = call.context["localizacao"]
    return Success(
        body={
            "success": True,
            "data": {
                "empresas": places,
                "totalEncontradas": len(places),
                "parametrosBusca": dict(call.context),
            },
            "message": (
                f'Encontradas {len(places)} empresas do tipo "{business_type}" '
                f"em {location_label}"
            ),
        }
    )


def build_places_spec(settings: SerperSettings) -> ForwardSpec:
    """POST /captar-empresas."""
    return ForwardSpec(
        name="captar_empresas",
        upstream_url=settings.places_url,
        extractor=_extract_places,
        method="POST",
        headers=settings.headers,
        timeout_seconds=settings.request_timeout_seconds,
        error_format=ErrorFormat.PLAIN,
        shape_success=_shape_places,
        error_message="Erro ao buscar empresas",
    )
