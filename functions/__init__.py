"""Custom functions: STRUCTIFY, SCHEMIFY and API key administration"""

from .extraction import Structifier, expand_records, placeholder_row
from .generation import Schemifier
from .sheet import (
    structify,
    structify_table,
    schemify,
    set_api_key,
    check_api_key,
)

__all__ = [
    "Structifier",
    "Schemifier",
    "expand_records",
    "placeholder_row",
    "structify",
    "structify_table",
    "schemify",
    "set_api_key",
    "check_api_key",
]
