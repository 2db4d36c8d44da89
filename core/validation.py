"""Shape checks for the input and schema tables"""

from typing import Any

from .enums import FieldType
from .exceptions import ValidationError


def _is_row(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _is_blank(cell: Any) -> bool:
    return cell is None or str(cell).strip() == ""


def validate_input_table(rows: Any) -> None:
    """
    Check that the input table holds (identifier, text) pairs

    Raises:
        ValidationError: If the table is empty or a row is not a 2-column pair
    """
    if not rows:
        raise ValidationError(
            "Invalid input table: The input range must contain at least one row."
        )

    for index, row in enumerate(rows):
        if not _is_row(row) or len(row) != 2:
            raise ValidationError(
                "Invalid input table: Each row must have exactly 2 columns "
                "(identifier and input text).",
                row=index
            )


def validate_schema_table(table: Any, require_types: bool = True) -> None:
    """
    Check the schema table header rows

    Row 1 holds keys, row 2 descriptions and row 3 (mandatory when
    require_types is set) the field types.

    Raises:
        ValidationError: If a header row is missing, the key row is blank or
            the type row does not line up with the key row
    """
    minimum = 3 if require_types else 2
    if not table or len(table) < minimum:
        expected = (
            "3 rows (column names, descriptions, and types)"
            if require_types
            else "at least 2 rows (column names and descriptions)"
        )
        raise ValidationError(f"Invalid schema table: The schema must have {expected}.")

    for index, row in enumerate(table[:3]):
        if not _is_row(row):
            raise ValidationError(
                f"Invalid schema table: Row {index + 1} must be a list of cells.",
                row=index
            )

    keys = table[0]
    if len(keys) == 0 or all(_is_blank(key) for key in keys):
        raise ValidationError(
            "Invalid schema table: The first row (column names) must not be empty.",
            row=0
        )

    if len(table) < 3:
        return

    types = table[2]
    if len(types) != len(keys):
        raise ValidationError(
            "Invalid schema table: The third row (types) must have the same number "
            "of columns as the first row.",
            row=2
        )

    valid_types = FieldType.values()
    for column, value in enumerate(types):
        if value not in valid_types:
            raise ValidationError(
                "Invalid schema table: The third row (types) must contain only the "
                f"following types: {', '.join(valid_types)}. Got {value!r}.",
                row=2,
                column=column
            )
