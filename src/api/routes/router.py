"""Agregador de rotas — registra todos os routers por upstream.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.evolution.router import router as evolution_router
from api.routes.health.router import router as health_router
from api.routes.serper.router import router as serper_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Caminhos na raiz, como o frontend já consome
    api_router.include_router(evolution_router, tags=["evolution"])
    api_router.include_router(serper_router, tags=["serper"])

    return api_router
