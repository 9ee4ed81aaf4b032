"""Testes de ponta a ponta das rotas com TestClient."""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from api.connectors.evolution import build_logout_spec, build_verify_numbers_spec
from api.connectors.serper import build_location_search_spec
from app.app import create_app
from app.bootstrap.dependencies import (
    get_location_search_gateway,
    get_logout_gateway,
    get_verify_numbers_gateway,
)
from app.gateway import ForwardingGateway
from app.infra.http import UpstreamHttpClient
from config.settings import EvolutionSettings, SerperSettings

EVOLUTION = EvolutionSettings(base_url="https://evo.example.com", default_instance="crm")
SERPER = SerperSettings(
    api_key="sk",
    locations_url="https://serper.example.com/locations",
    places_url="https://serper.example.com/places",
)


def _gateway(spec, handler) -> ForwardingGateway:
    return ForwardingGateway(spec, UpstreamHttpClient(transport=httpx.MockTransport(handler)))


@pytest.fixture
def app():
    fastapi_app = create_app()
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


def test_options_on_any_path_returns_empty_200(app) -> None:
    client = TestClient(app)

    for path in ("/verificar-whatsapp", "/nao-existe", "/atualizar-webhook/x"):
        response = client.options(path)
        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        assert "content-type" in response.headers["access-control-allow-headers"]


def test_verify_numbers_route(app) -> None:
    sent: list[httpx.Request] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        sent.append(request)
        return httpx.Response(200, json=[{"exists": True}, {"exists": False}])

    gateway = _gateway(build_verify_numbers_spec(EVOLUTION), _handler)
    app.dependency_overrides[get_verify_numbers_gateway] = lambda: gateway
    client = TestClient(app)

    response = client.post(
        "/verificar-whatsapp",
        json={"numeros": ["+551199990000", "+551199990000", "+551199991111"]},
        headers={"x-correlation-id": "req-1"},
    )

    assert response.status_code == 200
    assert response.json() == [{"exists": True}, {"exists": False}]
    assert response.headers["x-correlation-id"] == "req-1"
    assert response.headers["access-control-allow-origin"] == "*"
    assert len(sent) == 1


def test_location_search_get_route(app) -> None:
    def _handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[{"name": "Rio de Janeiro"}])

    gateway = _gateway(build_location_search_spec(SERPER), _handler)
    app.dependency_overrides[get_location_search_gateway] = lambda: gateway
    client = TestClient(app)

    response = client.get("/buscar-localizacoes", params={"q": "Rio"})

    assert response.json() == {
        "success": True,
        "data": [{"name": "Rio de Janeiro"}],
        "query": "Rio",
        "total": 1,
    }


def test_wrong_method_is_405_json(app) -> None:
    gateway = _gateway(build_verify_numbers_spec(EVOLUTION), lambda request: httpx.Response(200))
    app.dependency_overrides[get_verify_numbers_gateway] = lambda: gateway
    client = TestClient(app)

    response = client.get("/verificar-whatsapp")

    assert response.status_code == 405
    assert response.json() == {"error": "Método não permitido. Use POST."}


def test_missing_configuration_becomes_json_500(app) -> None:
    def _unconfigured() -> ForwardingGateway:
        spec = build_logout_spec(EvolutionSettings())
        return _gateway(spec, lambda request: httpx.Response(200))

    app.dependency_overrides[get_logout_gateway] = _unconfigured
    client = TestClient(app)

    response = client.post("/logout", json={"userEmail": "ana@mail.com"})

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert "EVOLUTION_API_BASE_URL" in body["details"]
    assert response.headers["access-control-allow-origin"] == "*"


def test_health_has_cors_headers(app) -> None:
    response = TestClient(app).get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.headers["access-control-allow-origin"] == "*"
