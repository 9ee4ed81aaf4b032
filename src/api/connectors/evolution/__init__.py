"""Conector da Evolution API (instâncias e números WhatsApp)."""

from api.connectors.evolution.endpoints import (
    build_create_instance_spec,
    build_delete_instance_spec,
    build_logout_spec,
    build_refresh_connections_spec,
    build_set_webhook_spec,
    build_user_connections_spec,
    build_verify_numbers_spec,
)

__all__ = [
    "build_create_instance_spec",
    "build_delete_instance_spec",
    "build_logout_spec",
    "build_refresh_connections_spec",
    "build_set_webhook_spec",
    "build_user_connections_spec",
    "build_verify_numbers_spec",
]
