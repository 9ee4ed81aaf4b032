"""Factories dos gateways: um ForwardingGateway por endpoint.

Specs são montados a partir das settings injetadas por ambiente; o
cliente HTTP é compartilhado (não guarda estado entre chamadas).

Os providers são usados como dependências FastAPI nas rotas e podem ser
substituídos em testes via `app.dependency_overrides`.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from api.connectors.evolution import (
    build_create_instance_spec,
    build_delete_instance_spec,
    build_logout_spec,
    build_refresh_connections_spec,
    build_set_webhook_spec,
    build_user_connections_spec,
    build_verify_numbers_spec,
)
from api.connectors.serper import (
    build_location_search_spec,
    build_location_spec,
    build_places_spec,
)
from app.gateway import ForwardingGateway
from app.infra.http import create_upstream_http_client
from config.settings import get_evolution_settings, get_gateway_settings, get_serper_settings

if TYPE_CHECKING:
    from app.gateway import ForwardSpec
    from app.protocols.http_client import UpstreamClientProtocol

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_upstream_client() -> UpstreamClientProtocol:
    """Cliente HTTP compartilhado por todos os gateways."""
    return create_upstream_http_client()


def create_gateway(spec: ForwardSpec) -> ForwardingGateway:
    """Cria gateway com o cliente padrão e os headers CORS configurados."""
    gateway = ForwardingGateway(
        spec,
        get_upstream_client(),
        cors_headers=get_gateway_settings().cors_headers,
    )
    logger.debug("gateway_created", extra={"gateway": spec.name})
    return gateway


# ──────────────────────────────────────────────────────────────────────────────
# Evolution API
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_verify_numbers_gateway() -> ForwardingGateway:
    return create_gateway(build_verify_numbers_spec(get_evolution_settings()))


@lru_cache(maxsize=1)
def get_create_instance_gateway() -> ForwardingGateway:
    return create_gateway(build_create_instance_spec(get_evolution_settings()))


@lru_cache(maxsize=1)
def get_logout_gateway() -> ForwardingGateway:
    return create_gateway(build_logout_spec(get_evolution_settings()))


@lru_cache(maxsize=1)
def get_delete_instance_gateway() -> ForwardingGateway:
    return create_gateway(build_delete_instance_spec(get_evolution_settings()))


@lru_cache(maxsize=1)
def get_refresh_connections_gateway() -> ForwardingGateway:
    return create_gateway(build_refresh_connections_spec(get_evolution_settings()))


@lru_cache(maxsize=1)
def get_user_connections_gateway() -> ForwardingGateway:
    return create_gateway(build_user_connections_spec(get_evolution_settings()))


@lru_cache(maxsize=1)
def get_set_webhook_gateway() -> ForwardingGateway:
    return create_gateway(build_set_webhook_spec(get_evolution_settings()))


# ──────────────────────────────────────────────────────────────────────────────
# Serper
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_location_search_gateway() -> ForwardingGateway:
    return create_gateway(build_location_search_spec(get_serper_settings()))


@lru_cache(maxsize=1)
def get_location_gateway() -> ForwardingGateway:
    return create_gateway(build_location_spec(get_serper_settings()))


@lru_cache(maxsize=1)
def get_places_gateway() -> ForwardingGateway:
    return create_gateway(build_places_spec(get_serper_settings()))
