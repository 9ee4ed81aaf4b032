"""Validadores de campos das requisições de entrada."""

from api.validators.fields import (
    EMAIL_PATTERN,
    optional_string,
    parse_int,
    read_json_object,
    require_email,
    require_string,
    require_unique_list,
)

__all__ = [
    "EMAIL_PATTERN",
    "optional_string",
    "parse_int",
    "read_json_object",
    "require_email",
    "require_string",
    "require_unique_list",
]
