"""Cliente HTTP para upstreams externos."""

from app.infra.http.client import (
    HttpClientConfig,
    UpstreamHttpClient,
    create_upstream_http_client,
)

__all__ = [
    "HttpClientConfig",
    "UpstreamHttpClient",
    "create_upstream_http_client",
]
