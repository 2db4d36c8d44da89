"""Conversion between schema tables and field descriptors"""

from typing import Any, Dict, List

from .enums import FieldType
from .models import FieldDescriptor, Table


EXAMPLE_VALUES = {
    FieldType.STRING: "ABC",
    FieldType.NUMBER: 0,
    FieldType.BOOLEAN: False,
    FieldType.DATE: "2023-01-01",
}

UNKNOWN_TYPE_EXAMPLE = "N/A"


def _cell(row: List[Any], index: int) -> str:
    if index >= len(row) or row[index] is None:
        return ""
    return str(row[index])


def parse_schema(table: Table) -> List[FieldDescriptor]:
    """
    Zip the key, description and (optional) type rows into descriptors

    Expects validate_schema_table to have passed. Columns with a blank key
    (trailing cells of a wider host range) are skipped; a missing
    description becomes an empty string.
    """
    keys = table[0]
    descriptions = table[1]
    types = table[2] if len(table) > 2 else []

    schema = []
    for index in range(len(keys)):
        key = _cell(keys, index)
        if not key.strip():
            continue
        type_value = _cell(types, index).strip()
        schema.append(
            FieldDescriptor(
                key=key,
                description=_cell(descriptions, index),
                type=FieldType(type_value) if type_value else None
            )
        )
    return schema


def unparse_schema(schema: List[FieldDescriptor]) -> Table:
    """Inverse of parse_schema: [keys, descriptions, types]"""
    keys = [field.key for field in schema]
    descriptions = [field.description for field in schema]
    types = [field.type.value if field.type else "" for field in schema]
    return [keys, descriptions, types]


def generate_example_record(schema: List[FieldDescriptor]) -> Dict[str, Any]:
    """One synthetic record used to show the model the output format"""
    return {
        field.key: EXAMPLE_VALUES.get(field.type, UNKNOWN_TYPE_EXAMPLE)
        for field in schema
    }
