import pytest

from core.enums import PromptStyle, RowFailurePolicy
from core.exceptions import (
    ApiError, CredentialMissingError, ParseError, RefusalError, ValidationError
)
from core.schema import parse_schema
from functions import Structifier, expand_records, placeholder_row, structify, structify_table


def test_single_record(fake_gateway, person_schema_table):
    gateway = fake_gateway({"records": [{"name": "John Doe", "age": 29}]})

    rows = Structifier(gateway).run([["ID_1", "John Doe is 29 years old."]], person_schema_table)

    assert rows == [["ID_1", "John Doe", 29]]
    call = gateway.calls[0]
    assert call["user_text"] == "John Doe is 29 years old."
    assert call["response_format"]["json_schema"]["name"] == "structured_records"


def test_two_entities_share_the_identifier_in_model_order(fake_gateway, person_schema_table):
    gateway = fake_gateway(
        {"records": [{"name": "John", "age": 29}, {"name": "Jane", "age": 31}]},
        {"records": [{"name": "Kim", "age": 40}]},
    )

    rows = Structifier(gateway).run(
        [["ID_1", "John is 29 and his sister Jane is 31."], ["ID_2", "Kim, 40."]],
        person_schema_table,
    )

    assert rows == [["ID_1", "John", 29], ["ID_1", "Jane", 31], ["ID_2", "Kim", 40]]


def test_row_with_no_records_expands_to_nothing(fake_gateway, person_schema_table):
    gateway = fake_gateway({"records": []}, {"records": [{"name": "Kim", "age": 40}]})

    rows = Structifier(gateway).run([["ID_1", "nothing"], ["ID_2", "Kim, 40."]], person_schema_table)

    assert rows == [["ID_2", "Kim", 40]]


def test_values_follow_schema_order_not_record_order(fake_gateway, person_schema_table):
    gateway = fake_gateway({"records": [{"age": 29, "name": "John", "extra": "ignored"}]})

    rows = Structifier(gateway).run([[7, "John, 29"]], person_schema_table)

    assert rows == [[7, "John", 29]]


def test_missing_and_null_values_become_empty():
    schema = parse_schema([["name", "age", "tags"], ["", "", ""], ["string", "number", "string"]])

    rows = expand_records("ID", [{"name": None, "tags": ["a", "b"]}], schema)

    assert rows == [["ID", "", "", '["a", "b"]']]


def test_placeholder_row(person_schema_table):
    assert placeholder_row("ID_9", parse_schema(person_schema_table)) == ["ID_9", "", ""]


@pytest.mark.parametrize(
    "failure",
    [
        ApiError("HTTP 500", status=500, body="boom"),
        RefusalError("refused", refusal="no"),
        ParseError("bad", "not json"),
    ],
)
def test_lenient_policy_emits_one_empty_row_per_failed_identifier(
    fake_gateway, person_schema_table, failure
):
    gateway = fake_gateway(failure, {"records": [{"name": "Jane", "age": 31}]})

    rows = Structifier(gateway, policy=RowFailurePolicy.LENIENT).run(
        [["ID_1", "broken"], ["ID_2", "Jane is 31"]], person_schema_table
    )

    assert rows == [["ID_1", "", ""], ["ID_2", "Jane", 31]]


def test_lenient_policy_covers_non_array_results(fake_gateway, person_schema_table):
    gateway = fake_gateway({"records": "nope"})

    rows = Structifier(gateway, policy=RowFailurePolicy.LENIENT).run(
        [["ID_1", "text"]], person_schema_table
    )

    assert rows == [["ID_1", "", ""]]


def test_strict_policy_aborts_the_call(fake_gateway, person_schema_table):
    gateway = fake_gateway(
        {"records": [{"name": "John", "age": 29}]},
        ApiError("HTTP 500", status=500, body="boom"),
        {"records": [{"name": "Jane", "age": 31}]},
    )

    with pytest.raises(ApiError):
        Structifier(gateway, policy=RowFailurePolicy.STRICT).run(
            [["ID_1", "a"], ["ID_2", "b"], ["ID_3", "c"]], person_schema_table
        )

    assert len(gateway.calls) == 2


def test_validation_errors_abort_before_any_model_call(fake_gateway, person_schema_table):
    gateway = fake_gateway()

    with pytest.raises(ValidationError):
        Structifier(gateway, policy=RowFailurePolicy.LENIENT).run(
            [["ID_1", "text", "extra"]], person_schema_table
        )

    assert gateway.calls == []


def test_free_text_style(fake_gateway, person_schema_table):
    gateway = fake_gateway('Here you go:\n[{"name": "John Doe", "age": 29}]\nAnything else?')

    rows = Structifier(gateway, style=PromptStyle.FREE_TEXT).run(
        [["ID_1", "John Doe is 29 years old."]], person_schema_table
    )

    assert rows == [["ID_1", "John Doe", 29]]
    assert gateway.calls[0]["response_format"] is None
    assert "Schema:" in gateway.calls[0]["system_prompt"]


def test_schema_without_types(fake_gateway):
    gateway = fake_gateway({"records": [{"name": "John"}]})

    rows = Structifier(gateway, require_types=False).run(
        [["ID_1", "John"]], [["name"], ["Full name"]]
    )

    assert rows == [["ID_1", "John"]]


def test_structify_joins_rows_and_columns(fake_gateway, person_schema_table):
    gateway = fake_gateway(
        {"records": [{"name": "John", "age": 29}, {"name": "Jane", "age": 31}]},
    )

    result = structify([["ID_1", "John 29, Jane 31"]], person_schema_table, gateway=gateway)

    assert result == "ID_1,John,29|ID_1,Jane,31"


def test_structify_custom_separators(fake_gateway, person_schema_table):
    gateway = fake_gateway({"records": [{"name": "John", "age": 29}]}, {"records": []})

    result = structify(
        [["ID_1", "John 29"], ["ID_2", "nobody"]],
        person_schema_table,
        row_separator="\n",
        column_separator="\t",
        gateway=gateway,
    )

    assert result == "ID_1\tJohn\t29"


def test_structify_table_reads_policy_from_settings(monkeypatch, fake_gateway, person_schema_table):
    from config import settings

    monkeypatch.setattr(settings, "ROW_FAILURE_POLICY", "lenient")
    gateway = fake_gateway(ParseError("bad", "???"))

    rows = structify_table([["ID_1", "x"]], person_schema_table, gateway=gateway)

    assert rows == [["ID_1", "", ""]]


def test_missing_credential_always_aborts(isolated_store, person_schema_table):
    with pytest.raises(CredentialMissingError, match="main.py key set"):
        structify_table(
            [["ID_1", "John"]], person_schema_table, policy=RowFailurePolicy.LENIENT
        )
