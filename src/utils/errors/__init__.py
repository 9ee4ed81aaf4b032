"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    GatewayError,
    InvalidRequestError,
)

__all__ = [
    "GatewayError",
    "InvalidRequestError",
]
