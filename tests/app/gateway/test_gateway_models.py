"""Testes dos modelos do gateway."""

from __future__ import annotations

import pytest

from app.gateway import ForwardSpec, InboundRequest, UpstreamCall
from utils.errors import InvalidRequestError


def _noop(request: InboundRequest) -> UpstreamCall:
    return UpstreamCall()


class TestInboundRequest:
    def test_json_decodes_body(self) -> None:
        assert InboundRequest(method="POST", body=b'{"a": 1}').json() == {"a": 1}

    def test_whitespace_body_is_empty(self) -> None:
        with pytest.raises(InvalidRequestError, match="Body vazio"):
            InboundRequest(method="POST", body=b"  \n").json()

    def test_last_segment(self) -> None:
        request = InboundRequest(method="POST", path_segments=("atualizar-webhook", "inst1"))
        assert request.last_segment == "inst1"
        assert InboundRequest(method="POST").last_segment == ""


class TestForwardSpec:
    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValueError, match="timeout_seconds"):
            ForwardSpec(name="x", upstream_url="https://u", extractor=_noop, timeout_seconds=0)

    def test_rejects_missing_url(self) -> None:
        with pytest.raises(ValueError, match="upstream_url"):
            ForwardSpec(name="x", upstream_url="", extractor=_noop)

    def test_build_url_escapes_path_params(self) -> None:
        spec = ForwardSpec(name="x", upstream_url="https://u/logout/{email}", extractor=_noop)
        call = UpstreamCall(path_params={"email": "ana@x.com/../admin"})
        assert spec.build_url(call) == "https://u/logout/ana%40x.com%2F..%2Fadmin"

    def test_default_timeout_is_ten_seconds(self) -> None:
        spec = ForwardSpec(name="x", upstream_url="https://u", extractor=_noop)
        assert spec.timeout_seconds == 10.0
        assert spec.allowed_methods == frozenset({"POST"})
