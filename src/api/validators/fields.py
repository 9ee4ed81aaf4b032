"""Extração e validação de campos da requisição de entrada.

Todas as funções levantam InvalidRequestError com mensagem legível
para o usuário; o gateway converte em resposta 400.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from utils.errors import InvalidRequestError

if TYPE_CHECKING:
    from app.gateway.models import InboundRequest

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def read_json_object(request: InboundRequest) -> dict[str, Any]:
    """Decodifica o corpo e exige um objeto JSON."""
    payload = request.json()
    if not isinstance(payload, dict):
        raise InvalidRequestError("JSON deve ser um objeto")
    return payload


def require_string(payload: Mapping[str, Any], field: str, message: str | None = None) -> str:
    """Retorna o campo como string não vazia (sem espaços nas pontas)."""
    value = payload.get(field)
    if not isinstance(value, str) or not value.strip():
        raise InvalidRequestError(message or f"{field} é obrigatório")
    return value.strip()


def optional_string(payload: Mapping[str, Any], field: str, default: str = "") -> str:
    value = payload.get(field)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


def require_email(value: str, message: str = "Formato de email inválido.") -> str:
    if not EMAIL_PATTERN.match(value):
        raise InvalidRequestError(message)
    return value


def require_unique_list(
    payload: Mapping[str, Any],
    field: str,
    missing_message: str,
    empty_message: str,
) -> list[str]:
    """Exige lista não vazia e remove duplicatas.

    Itens são comparados como texto (`"5511"` e `5511` são o mesmo valor);
    itens vazios ou nulos são descartados. Se nada sobrar, levanta
    `empty_message`. Itens de outro tipo (float, booleano, objeto, lista)
    são rejeitados.

    Returns:
        Valores únicos, na ordem da primeira ocorrência.
    """
    value = payload.get(field)
    if not isinstance(value, list) or not value:
        raise InvalidRequestError(missing_message)

    items = (_as_text(field, item) for item in value)
    unique = list(dict.fromkeys(item for item in items if item))
    if not unique:
        raise InvalidRequestError(empty_message)
    return unique


def parse_int(
    value: Any,
    default: int,
    minimum: int = 1,
    maximum: int | None = None,
) -> int:
    """Converte para inteiro dentro dos limites; valor inválido usa o padrão."""
    if isinstance(value, bool):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if number < minimum:
        return default
    if maximum is not None:
        number = min(number, maximum)
    return number


def _as_text(field: str, item: Any) -> str:
    if item is None:
        return ""
    if isinstance(item, bool) or not isinstance(item, (str, int)):
        raise InvalidRequestError(f"Itens de {field} devem ser texto ou inteiros")
    return str(item).strip()
