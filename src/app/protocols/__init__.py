"""Protocolos e contratos do core da aplicação."""

from .http_client import UpstreamClientProtocol

__all__ = ["UpstreamClientProtocol"]
