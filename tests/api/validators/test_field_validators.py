"""Testes para api.validators.fields."""

from __future__ import annotations

import pytest

from api.validators import (
    optional_string,
    parse_int,
    read_json_object,
    require_email,
    require_string,
    require_unique_list,
)
from app.gateway import InboundRequest
from utils.errors import InvalidRequestError


class TestReadJsonObject:
    def test_returns_object(self) -> None:
        request = InboundRequest(method="POST", body=b'{"q": "Rio"}')
        assert read_json_object(request) == {"q": "Rio"}

    def test_rejects_array(self) -> None:
        request = InboundRequest(method="POST", body=b"[1, 2]")
        with pytest.raises(InvalidRequestError, match="JSON deve ser um objeto"):
            read_json_object(request)


class TestStrings:
    def test_require_string_strips(self) -> None:
        assert require_string({"userEmail": "  a@b.com "}, "userEmail") == "a@b.com"

    @pytest.mark.parametrize("value", [None, "", "   ", 42])
    def test_require_string_rejects(self, value: object) -> None:
        with pytest.raises(InvalidRequestError) as exc_info:
            require_string({"userEmail": value}, "userEmail", "userEmail é obrigatório")
        assert exc_info.value.reason == "userEmail é obrigatório"
        assert exc_info.value.status_code == 400

    def test_optional_string_default(self) -> None:
        assert optional_string({}, "pais", "BR") == "BR"
        assert optional_string({"pais": " US "}, "pais", "BR") == "US"

    def test_require_email(self) -> None:
        assert require_email("ana@empresa.com.br") == "ana@empresa.com.br"
        with pytest.raises(InvalidRequestError, match="Formato de email inválido."):
            require_email("ana@empresa")


class TestRequireUniqueList:
    def test_deduplicates_preserving_order(self) -> None:
        payload = {"numeros": ["+551199990000", "+551199990000", "+551199991111"]}
        assert require_unique_list(payload, "numeros", "faltou", "vazio") == [
            "+551199990000",
            "+551199991111",
        ]

    def test_string_and_int_are_the_same_value(self) -> None:
        assert require_unique_list({"numeros": ["5511", 5511]}, "numeros", "faltou", "vazio") == [
            "5511"
        ]

    @pytest.mark.parametrize("value", [None, [], "5511"])
    def test_missing_list(self, value: object) -> None:
        with pytest.raises(InvalidRequestError, match="faltou"):
            require_unique_list({"numeros": value}, "numeros", "faltou", "vazio")

    def test_empty_after_cleanup(self) -> None:
        with pytest.raises(InvalidRequestError, match="vazio"):
            require_unique_list({"numeros": ["", "  ", None]}, "numeros", "faltou", "vazio")

    @pytest.mark.parametrize("item", [55.11, True, {"n": "5511"}, ["5511"]])
    def test_non_text_item_is_rejected(self, item: object) -> None:
        with pytest.raises(InvalidRequestError) as exc_info:
            require_unique_list({"numeros": ["5511", item]}, "numeros", "faltou", "vazio")
        assert exc_info.value.reason == "Itens de numeros devem ser texto ou inteiros"
        assert exc_info.value.status_code == 400


class TestParseInt:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [("15", 15), (None, 10), ("abc", 10), (0, 10), (True, 10), (50, 20)],
    )
    def test_bounds_and_defaults(self, value: object, expected: int) -> None:
        assert parse_int(value, 10, maximum=20) == expected
