"""Conector do Serper (localizações e estabelecimentos)."""

from api.connectors.serper.endpoints import (
    build_location_search_spec,
    build_location_spec,
    build_places_spec,
)

__all__ = [
    "build_location_search_spec",
    "build_location_spec",
    "build_places_spec",
]
