"""Entrypoint da aplicação conecta-edge.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.gateway.models import GENERIC_ERROR_MESSAGE
from config.logging import get_logger
from config.settings import get_gateway_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações (falha rápido em staging/production)
    """
    logger.info("app_starting", extra={"service": "conecta-edge"})
    validate_runtime_settings()

    yield

    logger.info("app_shutting_down", extra={"service": "conecta-edge"})


async def edge_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Preflight em qualquer caminho, CORS em toda resposta e erro final em JSON."""
    cors_headers = get_gateway_settings().cors_headers

    if request.method == "OPTIONS":
        return Response(status_code=200, headers=cors_headers)

    try:
        response = await call_next(request)
    except Exception as exc:
        logger.exception(
            "request_unhandled_error",
            extra={"path": request.url.path, "error_type": type(exc).__name__},
        )
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": GENERIC_ERROR_MESSAGE, "details": str(exc)},
            headers=cors_headers,
        )

    for name, value in cors_headers.items():
        response.headers.setdefault(name, value)
    return response


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="conecta-edge",
        description="Gateway de encaminhamento do CRM para Evolution API e Serper",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.middleware("http")(edge_middleware)

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "conecta-edge"})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting conecta-edge in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
