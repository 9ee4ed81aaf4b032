"""Rotas HTTP da API — adapters de entrada por upstream.

Estrutura:
- routes/evolution/: números WhatsApp, instâncias e webhook
- routes/serper/: localizações e captação de empresas
- routes/health/: health checks e readiness
- gateway_adapter.py: Request <-> ForwardingGateway

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
