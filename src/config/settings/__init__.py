"""Agregador de settings do conecta-edge.

Re-exporta todas as settings e funções de cada módulo.
Organização por upstream para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Upstream-specific settings
from config.settings.evolution import (
    EvolutionSettings,
    get_evolution_settings,
)

# Gateway settings
from config.settings.gateway import (
    DEFAULT_ALLOWED_HEADERS,
    GatewaySettings,
    get_gateway_settings,
)
from config.settings.serper import (
    SerperSettings,
    get_serper_settings,
)

__all__ = [
    # Constants
    "DEFAULT_ALLOWED_HEADERS",
    # Base
    "BaseSettings",
    "Environment",
    # Upstreams
    "EvolutionSettings",
    "GatewaySettings",
    "SerperSettings",
    "get_base_settings",
    "get_evolution_settings",
    "get_gateway_settings",
    "get_serper_settings",
]
