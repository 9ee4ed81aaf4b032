"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (Logflare, BigQuery, CloudWatch Insights etc.).

Métricas suportadas:
- Latência: tempo de cada chamada ao upstream por gateway
- Resultado: contador de desfechos por gateway (success, timeout...)

Uso:
    start = time.perf_counter()
    # ... chamada ...
    record_latency("verificar_whatsapp", "upstream_call", latency_ms)
    record_gateway_result("verificar_whatsapp", "timeout", 408)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "verificar_whatsapp")
        operation: Nome da operação (ex: "upstream_call")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_gateway_result(
    gateway: str,
    outcome: str,
    status_code: int,
) -> None:
    """Registra o desfecho de uma requisição tratada pelo gateway."""
    logger.info(
        "metric_gateway_result",
        extra={
            "metric_type": "counter",
            "gateway": gateway,
            "outcome": outcome,
            "status_code": status_code,
        },
    )
