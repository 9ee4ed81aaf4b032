"""Helpers de payload da Evolution API."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

INTEGRATION_BAILEYS = "WHATSAPP-BAILEYS"

_INVALID_NAME_CHARS = re.compile(r"[^a-z0-9.]")

# connectionStatus da Evolution -> status exibido no CRM
CONNECTION_STATUS_MAP: dict[str, str] = {
    "open": "connected",
    "connecting": "connecting",
}


def normalize_instance_name(email: str) -> str:
    """Deriva o nome da instância a partir do email do usuário.

    Minúsculas, remove tudo que não for letra, dígito ou ponto, e troca
    pontos por underscore: "Joao.Silva@mail.com" -> "joao_silvamail_com".
    """
    cleaned = _INVALID_NAME_CHARS.sub("", email.lower())
    return cleaned.replace(".", "_")


def build_create_instance_payload(instance_name: str) -> dict[str, Any]:
    return {
        "instanceName": instance_name,
        "token": "",
        "qrcode": True,
        "integration": INTEGRATION_BAILEYS,
    }


def map_connection_status(raw_status: Any) -> str:
    return CONNECTION_STATUS_MAP.get(str(raw_status or ""), "disconnected")


def belongs_to_user(instance_name: str, email: str) -> bool:
    """Verifica se a instância pertence ao usuário.

    Aceita o email literal, o email com o primeiro `@` e o primeiro `.`
    trocados por `_`, ou o nome normalizado (com sufixo de versão, se houver).
    """
    if not instance_name:
        return False
    if instance_name == email:
        return True
    formatted = email.replace("@", "_", 1).replace(".", "_", 1)
    if formatted in instance_name:
        return True
    return instance_name.startswith(normalize_instance_name(email))


def summarize_user_instances(instances: Iterable[Any], email: str) -> list[dict[str, str]]:
    """Filtra instâncias do usuário e mapeia o status de conexão."""
    summary: list[dict[str, str]] = []
    for instance in instances:
        if not isinstance(instance, dict):
            continue
        name = str(instance.get("name") or "")
        if not belongs_to_user(name, email):
            continue
        raw_status = instance.get("connectionStatus")
        summary.append(
            {
                "instanceName": name,
                "connectionStatus": str(raw_status or ""),
                "status": map_connection_status(raw_status),
            }
        )
    return summary
