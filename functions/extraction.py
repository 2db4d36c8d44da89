"""Free text to structured rows"""

import json
from typing import Any, Dict, List, Optional

from core.enums import PromptStyle, RowFailurePolicy
from core.exceptions import ROW_ERRORS
from core.interfaces import ModelGateway
from core.models import FieldDescriptor, InputRow, OutputRow, Table
from core.schema import parse_schema
from core.validation import validate_input_table, validate_schema_table
from llm.prompts import ExtractionPrompt
from utils.log import create_logger

logger = create_logger(__name__)


def _cell_value(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return value


def expand_records(
    identifier: Any,
    records: List[Dict[str, Any]],
    schema: List[FieldDescriptor]
) -> List[OutputRow]:
    """One output row per record: identifier followed by values in schema order"""
    return [
        [identifier] + [_cell_value(record.get(field.key)) for field in schema]
        for record in records
    ]


def placeholder_row(identifier: Any, schema: List[FieldDescriptor]) -> OutputRow:
    """Row emitted for an identifier whose conversion failed"""
    return [identifier] + ["" for _ in schema]


class Structifier:
    """Validates the tables, calls the model once per input row and expands the records"""

    def __init__(
        self,
        gateway: ModelGateway,
        style: PromptStyle = PromptStyle.CONSTRAINED,
        policy: RowFailurePolicy = RowFailurePolicy.STRICT,
        require_types: bool = True
    ):
        self.gateway = gateway
        self.style = style
        self.policy = policy
        self.require_types = require_types
        self.prompt_builder = ExtractionPrompt()

    def run(self, input_table: Table, schema_table: Table) -> List[OutputRow]:
        """
        Convert every input row

        Raises:
            ValidationError: Malformed input or schema table
            LLMError, ParseError: A row failed and the policy is strict
        """
        validate_input_table(input_table)
        validate_schema_table(schema_table, require_types=self.require_types)
        schema = parse_schema(schema_table)

        constrained = self.style == PromptStyle.CONSTRAINED
        context = {"schema": schema, "constrained": constrained}
        system_prompt = self.prompt_builder.build_prompt(context)
        response_format = self.prompt_builder.response_format(context) if constrained else None

        result = []
        for cells in input_table:
            row = InputRow.from_cells(cells)
            result.extend(self._convert_row(row, schema, system_prompt, response_format))

        logger.info(f"Converted {len(input_table)} input rows into {len(result)} output rows")
        return result

    def _convert_row(
        self,
        row: InputRow,
        schema: List[FieldDescriptor],
        system_prompt: str,
        response_format: Optional[dict]
    ) -> List[OutputRow]:
        try:
            raw = self.gateway.invoke(system_prompt, row.text, response_format)
            records = self.prompt_builder.parse_response(raw)
        except ROW_ERRORS as e:
            if self.policy == RowFailurePolicy.STRICT:
                raise
            logger.warning(f"Row {row.identifier!r} failed, emitting empty values: {e}")
            return [placeholder_row(row.identifier, schema)]

        return expand_records(row.identifier, records, schema)
