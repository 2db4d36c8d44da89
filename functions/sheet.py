"""Spreadsheet-style entry points"""

from typing import List, Optional

from core.enums import PromptStyle, RowFailurePolicy
from core.interfaces import ModelGateway
from core.models import OutputRow, Table
from credentials.store import get_credential_accessor
from llm.client import OpenAIGateway
from utils.tables import join_rows
from config import settings
from .generation import Schemifier
from .extraction import Structifier


def default_gateway(model: Optional[str] = None) -> OpenAIGateway:
    """Gateway using the stored API key"""
    return OpenAIGateway(get_credential_accessor().get(), model=model)


def default_prompt_style() -> PromptStyle:
    return PromptStyle.CONSTRAINED if settings.STRUCTURED_OUTPUTS else PromptStyle.FREE_TEXT


def structify_table(
    input_table: Table,
    schema_table: Table,
    gateway: Optional[ModelGateway] = None,
    policy: Optional[RowFailurePolicy] = None,
    style: Optional[PromptStyle] = None,
    require_types: Optional[bool] = None
) -> List[OutputRow]:
    """
    STRUCTIFY returning rows

    Args:
        input_table: Rows of [identifier, free text]
        schema_table: [keys, descriptions] plus [types] when types are required
        gateway: Model gateway; defaults to OpenAI with the stored key
        policy: Row failure policy; defaults to ROW_FAILURE_POLICY
        style: Prompt style; defaults to constrained when STRUCTURED_OUTPUTS is set
        require_types: Whether the type row is mandatory; defaults to REQUIRE_SCHEMA_TYPES

    Returns:
        One [identifier, value, ...] row per extracted record
    """
    structifier = Structifier(
        gateway or default_gateway(),
        style=style or default_prompt_style(),
        policy=policy or RowFailurePolicy(settings.ROW_FAILURE_POLICY),
        require_types=settings.REQUIRE_SCHEMA_TYPES if require_types is None else require_types
    )
    return structifier.run(input_table, schema_table)


def structify(
    input_table: Table,
    schema_table: Table,
    row_separator: Optional[str] = None,
    column_separator: Optional[str] = None,
    **kwargs
) -> str:
    """STRUCTIFY returning a single delimited string (rows "|", columns "," by default)"""
    rows = structify_table(input_table, schema_table, **kwargs)
    return join_rows(
        rows,
        row_separator if row_separator is not None else settings.ROW_SEPARATOR,
        column_separator if column_separator is not None else settings.COLUMN_SEPARATOR
    )


def schemify(
    description: str,
    gateway: Optional[ModelGateway] = None,
    style: Optional[PromptStyle] = None
) -> Table:
    """SCHEMIFY: description such as "name and age" -> [keys, descriptions, types]"""
    schemifier = Schemifier(gateway or default_gateway(), style=style or default_prompt_style())
    return schemifier.run(description)


def set_api_key(token: str) -> str:
    return get_credential_accessor().set(token)


def check_api_key() -> str:
    return get_credential_accessor().check()
