"""LLM prompt templates and constrained decoding schemas"""

import json
from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError

from core.enums import FieldType
from core.exceptions import ParseError
from core.interfaces import LLMTask
from core.models import FieldDescriptor, SchemaItem
from core.schema import generate_example_record
from .response import extract_json


RECORDS_PROPERTY = "records"
SCHEMA_ITEMS_PROPERTY = "schema_items"

# JSON schema type per field type; no native date type
JSON_TYPES = {
    FieldType.STRING: "string",
    FieldType.NUMBER: "number",
    FieldType.BOOLEAN: "boolean",
    FieldType.DATE: "string",
}


def _unwrap(value: Any, property_name: str) -> Any:
    """Unwrap {"<property_name>": [...]} as produced by constrained decoding"""
    if isinstance(value, dict) and property_name in value:
        return value[property_name]
    return value


class ExtractionPrompt(LLMTask):
    """Prompt for converting free text into schema records"""

    @property
    def prompt_template(self) -> str:
        return """Your task is to convert natural language input into structured data based on a given schema. The schema is provided as a JSON array where each item has a 'key' (the property name), a 'description' (explaining the attribute), and a 'type' (indicating the expected data type such as string, number, boolean, or date). Your job is to extract information from the input text and assign it to the corresponding 'key' in the schema. The 'key' must always match the schema exactly and be in snake_case, while the values must match the expected 'type'. The output must be a valid JSON array where each item corresponds to a single structured record. Do not include any extra text outside the JSON structure.

Schema:
{schema}

Here is an example of the expected output format based on the schema:
{example}

Each 'key' in the output corresponds to an entry in the schema. Below is a detailed explanation of each key:

{field_list}

Now, process the following input text according to the schema and rules described above:
"""

    @property
    def constrained_prompt_template(self) -> str:
        return """Your task is to convert natural language input into structured data.
Extract every distinct entity described in the input text as one item of the "records" array.
Each record must contain every key below, with a value of the stated type. Dates are written as ISO dates (YYYY-MM-DD).
If the text does not mention a value, use an empty string for text and date fields, 0 for numbers and false for booleans.

KEYS:
{field_list}

Now, process the following input text:
"""

    def build_prompt(self, context: Dict[str, Any]) -> str:
        schema: List[FieldDescriptor] = context["schema"]
        field_list = "\n".join(
            f"- {field.key} ({field.type.value if field.type else 'string'}): {field.description}"
            for field in schema
        )

        if context.get("constrained"):
            return self.constrained_prompt_template.format(field_list=field_list)

        return self.prompt_template.format(
            schema=json.dumps(
                [field.model_dump(mode="json") for field in schema],
                indent=2,
                ensure_ascii=False
            ),
            example=json.dumps(
                [generate_example_record(schema)], indent=2, ensure_ascii=False
            ),
            field_list=field_list
        )

    def response_format(self, context: Dict[str, Any]) -> Dict[str, Any]:
        """json_schema response format: {"records": [{<key>: <value>, ...}]}"""
        schema: List[FieldDescriptor] = context["schema"]
        properties = {}
        for field in schema:
            prop = {"type": JSON_TYPES.get(field.type, "string")}
            if field.description:
                prop["description"] = field.description
            properties[field.key] = prop

        record = {
            "type": "object",
            "properties": properties,
            "required": list(properties.keys()),
            "additionalProperties": False,
        }
        return {
            "type": "json_schema",
            "json_schema": {
                "name": "structured_records",
                "strict": True,
                "schema": {
                    "type": "object",
                    "properties": {
                        RECORDS_PROPERTY: {"type": "array", "items": record},
                    },
                    "required": [RECORDS_PROPERTY],
                    "additionalProperties": False,
                },
            },
        }

    def parse_response(self, response: Any) -> List[Dict[str, Any]]:
        """Parse the reply into a list of records"""
        records = _unwrap(extract_json(response), RECORDS_PROPERTY)
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise ParseError("Expected a JSON array of records.", response)
        return records


class SchemaGenerationPrompt(LLMTask):
    """Prompt for generating a schema from a natural language description"""

    @property
    def prompt_template(self) -> str:
        return """Your task is to generate a JSON schema based on the natural language description provided below. The schema should be represented as a JSON array where each item is an object containing a 'key', a 'description', and a 'type'. The 'key' should be a concise, snake_case identifier representing the attribute in English. The 'type' must be one of the following: 'string', 'number', 'date', or 'boolean', and it should always be written in English. The 'description' should explain what the attribute represents in detail, and it must respect the language of the input description. For example, if the input description is in Japanese, the 'description' should also be written in Japanese. You must accurately interpret the input regardless of the language and output the schema in a mixed language format: 'key' and 'type' in English, but 'description' in the input language. {output_rule}
For example, if the input is 'name and age' (in English), the output should look like this:
{english_example}
If the input is '名前と年齢' (in Japanese), the output should look like this:
{japanese_example}

Please make sure to only include attributes relevant to the natural language description provided below.

Input description: """

    def _examples(self, constrained: bool) -> Dict[str, str]:
        english = [
            {"key": "name", "description": "string which represents user name", "type": "string"},
            {"key": "age", "description": "number which represents user's age", "type": "number"},
        ]
        japanese = [
            {"key": "name", "description": "ユーザー名を表す文字列", "type": "string"},
            {"key": "age", "description": "ユーザーの年齢を表す数値", "type": "number"},
        ]
        if constrained:
            english = {SCHEMA_ITEMS_PROPERTY: english}
            japanese = {SCHEMA_ITEMS_PROPERTY: japanese}
        return {
            "english_example": json.dumps(english, indent=2, ensure_ascii=False),
            "japanese_example": json.dumps(japanese, indent=2, ensure_ascii=False),
        }

    def build_prompt(self, context: Dict[str, Any]) -> str:
        constrained = bool(context.get("constrained"))
        if constrained:
            output_rule = (
                f'Return a JSON object whose "{SCHEMA_ITEMS_PROPERTY}" array holds the items. '
                "Do not include any text other than the JSON output."
            )
        else:
            output_rule = (
                "Do not include any text other than the JSON output. "
                "The output must strictly be valid JSON."
            )
        return self.prompt_template.format(output_rule=output_rule, **self._examples(constrained))

    def response_format(self, context: Dict[str, Any] = None) -> Dict[str, Any]:
        """json_schema response format: {"schema_items": [{key, description, type}]}"""
        item = {
            "type": "object",
            "properties": {
                "key": {"type": "string"},
                "description": {"type": "string"},
                "type": {"type": "string", "enum": FieldType.values()},
            },
            "required": ["key", "description", "type"],
            "additionalProperties": False,
        }
        return {
            "type": "json_schema",
            "json_schema": {
                "name": "schema_items",
                "strict": True,
                "schema": {
                    "type": "object",
                    "properties": {
                        SCHEMA_ITEMS_PROPERTY: {"type": "array", "items": item},
                    },
                    "required": [SCHEMA_ITEMS_PROPERTY],
                    "additionalProperties": False,
                },
            },
        }

    def parse_response(self, response: Any) -> List[FieldDescriptor]:
        """Parse and check the generated schema items"""
        items = _unwrap(extract_json(response), SCHEMA_ITEMS_PROPERTY)
        invalid = ParseError(
            "Invalid schema format. Expected an array of objects with 'key', "
            "'description', and 'type' (one of: "
            f"{', '.join(FieldType.values())}), but received: "
            f"{json.dumps(items, ensure_ascii=False, default=str)}",
            response
        )
        if not isinstance(items, list) or not items:
            raise invalid
        try:
            return [SchemaItem.model_validate(item).to_descriptor() for item in items]
        except PydanticValidationError as e:
            raise invalid from e
