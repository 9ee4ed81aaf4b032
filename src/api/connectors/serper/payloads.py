"""Helpers de payload do Serper (localizações e estabelecimentos)."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

# Campos mantidos de cada localização retornada
LOCATION_FIELDS: tuple[str, ...] = (
    "name",
    "canonicalName",
    "googleId",
    "countryCode",
    "targetType",
)

COUNTRY_CODES: dict[str, str] = {
    "BR": "br",
    "US": "us",
    "PT": "pt",
    "ES": "es",
    "AR": "ar",
    "MX": "mx",
}

COUNTRY_NAMES: dict[str, str] = {
    "BR": "Brazil",
    "US": "United States",
    "PT": "Portugal",
    "ES": "Spain",
    "AR": "Argentina",
    "MX": "Mexico",
}

LANGUAGES: dict[str, str] = {
    "pt-br": "pt-br",
    "pt": "pt",
    "en": "en",
    "es": "es",
}


def project_locations(items: Iterable[Any], limit: int) -> list[dict[str, Any]]:
    """Mantém apenas os campos públicos de cada localização, até `limit`."""
    projected: list[dict[str, Any]] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        projected.append({field: item.get(field) for field in LOCATION_FIELDS})
        if len(projected) >= limit:
            break
    return projected


def build_location_label(country: str, location: str = "") -> str:
    """Monta "cidade, país" para a busca; sem cidade, só o país."""
    country_name = COUNTRY_NAMES.get(country.upper(), COUNTRY_NAMES["BR"])
    if location:
        return f"{location}, {country_name}"
    return country_name


def build_places_payload(
    business_type: str,
    location_label: str,
    country: str,
    language: str,
) -> dict[str, Any]:
    return {
        "q": f"{business_type.lower()} {location_label}",
        "gl": COUNTRY_CODES.get(country.upper(), "br"),
        "hl": LANGUAGES.get(language.lower(), "pt-br"),
        "page": 1,
    }


def unique_places(places: Iterable[Any], limit: int) -> list[dict[str, Any]]:
    """Remove estabelecimentos repetidos (mesmo título e endereço)."""
    seen: set[tuple[Any, Any]] = set()
    result: list[dict[str, Any]] = []
    for place in places:
        if not isinstance(place, dict):
            continue
        key = (place.get("title"), place.get("address"))
        if key in seen:
            continue
        seen.add(key)
        result.append(place)
        if len(result) >= limit:
            break
    return result
