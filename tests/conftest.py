"""Configuração do pytest para o projeto conecta-edge."""

import os
import sys
from pathlib import Path

import httpx
import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

# Logs em texto durante os testes
os.environ.setdefault("LOG_FORMAT", "text")


class UpstreamRecorder:
    """Handler de httpx.MockTransport que registra as requisições recebidas."""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def upstream_gateway():
    """Monta um ForwardingGateway real cujo upstream é um MockTransport.

    Uso:
        gateway, recorder = upstream_gateway(spec, httpx.Response(200, json=[]))
    """
    from app.gateway import ForwardingGateway
    from app.infra.http import UpstreamHttpClient

    def _build(spec, response: httpx.Response):
        recorder = UpstreamRecorder(response)
        client = UpstreamHttpClient(transport=recorder.transport)
        return ForwardingGateway(spec, client), recorder

    return _build
