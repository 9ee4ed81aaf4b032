"""Endpoints de health check."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import (
    get_base_settings,
    get_evolution_settings,
    get_gateway_settings,
    get_serper_settings,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de configuração de um upstream."""

    status: Literal["ok", "failed"]
    errors: tuple[str, ...] = ()

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "errors": list(self.errors),
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe: settings de cada upstream precisam estar completas."""
    checks = {
        "gateway": _check_settings(get_gateway_settings().validate()),
        "evolution": _check_settings(get_evolution_settings().validate()),
        "serper": _check_settings(get_serper_settings().validate()),
    }
    ready = all(check.status == "ok" for check in checks.values())
    if not ready:
        failed = sorted(name for name, check in checks.items() if check.status != "ok")
        logger.warning("readiness_check_failed", extra={"failed": failed})

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {name: check.as_dict() for name, check in checks.items()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_settings(errors: list[str]) -> DependencyCheck:
    if errors:
        return DependencyCheck(status="failed", errors=tuple(errors))
    return DependencyCheck(status="ok")
