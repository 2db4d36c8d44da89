from core.enums import FieldType
from core.models import FieldDescriptor
from core.schema import generate_example_record, parse_schema, unparse_schema


def test_parse_schema_zips_rows(person_schema_table):
    schema = parse_schema(person_schema_table)

    assert schema == [
        FieldDescriptor(key="name", description="Full name of the person", type=FieldType.STRING),
        FieldDescriptor(key="age", description="Age in years", type=FieldType.NUMBER),
    ]


def test_parse_schema_without_type_row():
    schema = parse_schema([["name", "age"], ["n", "a"]])

    assert [field.type for field in schema] == [None, None]


def test_parse_schema_skips_blank_trailing_columns():
    schema = parse_schema([["name", "", "age", ""], ["n", "", "a", ""], ["string", "", "number", ""]])

    assert [field.key for field in schema] == ["name", "age"]


def test_parse_schema_pads_missing_descriptions():
    schema = parse_schema([["name", "age"], ["n"], ["string", "number"]])

    assert schema[1].description == ""


def test_round_trip_through_table_form():
    schema = [
        FieldDescriptor(key="invoice_date", description="請求日", type=FieldType.DATE),
        FieldDescriptor(key="paid", description="Whether it was paid", type=FieldType.BOOLEAN),
        FieldDescriptor(key="note", description="", type=None),
    ]

    table = unparse_schema(schema)

    assert table == [
        ["invoice_date", "paid", "note"],
        ["請求日", "Whether it was paid", ""],
        ["date", "boolean", ""],
    ]
    assert parse_schema(table) == schema


def test_example_record_uses_one_literal_per_type():
    schema = [
        FieldDescriptor(key="name", type=FieldType.STRING),
        FieldDescriptor(key="age", type=FieldType.NUMBER),
        FieldDescriptor(key="active", type=FieldType.BOOLEAN),
        FieldDescriptor(key="born", type=FieldType.DATE),
        FieldDescriptor(key="other"),
    ]

    assert generate_example_record(schema) == {
        "name": "ABC",
        "age": 0,
        "active": False,
        "born": "2023-01-01",
        "other": "N/A",
    }
