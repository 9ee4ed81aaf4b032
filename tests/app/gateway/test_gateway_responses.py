"""Testes de build_response: tabela de status e formatos de erro."""

from __future__ import annotations

import pytest

from app.gateway import (
    ErrorFormat,
    ErrorPolicy,
    ForwardSpec,
    InternalError,
    Success,
    TransportError,
    UpstreamCall,
    UpstreamError,
    ValidationError,
    build_response,
    preflight_response,
)

CORS = {"Access-Control-Allow-Origin": "*", "Access-Control-Allow-Headers": "content-type"}


def _spec(**overrides) -> ForwardSpec:
    values = {
        "name": "responses",
        "upstream_url": "https://upstream.example.com",
        "extractor": lambda request: UpstreamCall(),
        "error_message": "Falhou",
    }
    values.update(overrides)
    return ForwardSpec(**values)


def test_preflight_has_only_cors_headers() -> None:
    response = preflight_response(CORS)
    assert response.status_code == 200
    assert response.body == b""
    assert "Content-Type" not in response.headers


def test_success_serializes_utf8_json() -> None:
    response = build_response(Success(body={"q": "São Paulo"}), _spec(), CORS)
    assert response.body.decode("utf-8") == '{"q": "São Paulo"}'
    assert response.headers["Content-Type"] == "application/json"
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_raw_success_keeps_upstream_content_type() -> None:
    result = Success(status_code=201, raw=b"<ok/>", content_type="text/xml")
    response = build_response(result, _spec(), CORS)
    assert response.status_code == 201
    assert response.body == b"<ok/>"
    assert response.headers["Content-Type"] == "text/xml"


@pytest.mark.parametrize(
    ("error_format", "expected"),
    [
        (ErrorFormat.ENVELOPE, {"success": False, "error": "campo"}),
        (ErrorFormat.PLAIN, {"error": "campo"}),
    ],
)
def test_validation_error_formats(error_format: ErrorFormat, expected: dict) -> None:
    response = build_response(ValidationError("campo"), _spec(error_format=error_format), CORS)
    assert response.status_code == 400
    assert response.json() == expected


def test_relay_raw_upstream_error() -> None:
    spec = _spec(error_policy=ErrorPolicy.PASS_THROUGH, relay_raw=True)
    result = UpstreamError(status_code=404, body="x", raw=b"not found", content_type="text/plain")
    response = build_response(result, spec, CORS)
    assert response.status_code == 404
    assert response.body == b"not found"
    assert response.headers["Content-Type"] == "text/plain"


def test_sanitized_transport_error_omits_details() -> None:
    response = build_response(TransportError("dns failure"), _spec(), CORS)
    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Falhou"}


def test_internal_error_includes_details() -> None:
    spec = _spec(error_format=ErrorFormat.PLAIN)
    response = build_response(InternalError("boom"), spec, CORS)
    assert response.status_code == 500
    assert response.json() == {"error": "Falhou", "details": "boom"}


def test_unknown_result_raises() -> None:
    with pytest.raises(TypeError):
        build_response(object(), _spec(), CORS)  # type: ignore[arg-type]
