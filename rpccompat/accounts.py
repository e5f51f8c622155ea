"""Validator for getAccountInfo and shared account-data checks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from rpccompat.common import (
    ValidationError,
    expect_array,
    expect_bool,
    expect_object,
    expect_str,
    expect_u64,
    mismatched_expectation,
    require_attributes,
    validate_context,
)

DEFAULT_BINARY_ENCODINGS = ("base58", "base64", "base64+zstd")
_PARSED_DATA_FIELDS = ("parsed", "program", "space")


@dataclass(frozen=True)
class AccountInfoExpectation:
    """Expectation for getAccountInfo."""

    required_result_attributes: Sequence[str]
    required_context_attributes: Sequence[str]
    required_value_attributes: Sequence[str]
    expected_value_attributes: Any
    expected_owner: str
    expected_data_encoding: str
    expected_parsed_program: str | None = None
    required_parsed_attributes: Sequence[str] = field(default_factory=tuple)


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def validate_account_data(
    data: Any,
    location: str,
    expected_data_encoding: str,
    expected_parsed_program: str | None,
    required_parsed_attributes: Iterable[str],
    binary_encodings: Iterable[str] = DEFAULT_BINARY_ENCODINGS,
) -> None:
    """Check an account's ``data`` member against the requested encoding.

    *location* names the data member in error messages, for example
    ``result.value.data``.
    """
    if expected_data_encoding in tuple(binary_encodings):
        data_array = expect_array(data, f"{location} was not an array")
        if len(data_array) != 2:
            raise ValidationError(
                f"{location} expected 2 elements, received {len(data_array)}"
            )
        expect_str(data_array[0], f"{location}[0] was not a string")
        encoding = expect_str(data_array[1], f"{location}[1] was not a string")
        if encoding != expected_data_encoding:
            raise ValidationError(
                f"{location}[1] expected '{expected_data_encoding}', "
                f"received '{encoding}'"
            )
    elif expected_data_encoding == "jsonParsed":
        data_object = expect_object(data, f"{location} was not an object")
        require_attributes(data_object, _PARSED_DATA_FIELDS, location)

        if expected_parsed_program is not None:
            actual_program = expect_str(
                data_object.get("program"), f"{location}.program was not a string"
            )
            if actual_program != expected_parsed_program:
                raise ValidationError(
                    f"{location}.program expected '{expected_parsed_program}', "
                    f"received '{actual_program}'"
                )

        expect_u64(data_object.get("space"), f"{location}.space was not a u64")

        parsed_object = expect_object(
            data_object.get("parsed"), f"{location}.parsed was not an object"
        )
        require_attributes(
            parsed_object, required_parsed_attributes, f"{location}.parsed"
        )
        expect_str(parsed_object.get("type"), f"{location}.parsed.type was not a string")
        expect_object(
            parsed_object.get("info"), f"{location}.parsed.info was not an object"
        )
    else:
        raise ValidationError(
            f"unsupported expected_data_encoding '{expected_data_encoding}'"
        )


def validate_account_info(expectation: Any, result: Any) -> str:
    """Validate a getAccountInfo result and return a summary line."""
    if not isinstance(expectation, AccountInfoExpectation):
        raise mismatched_expectation("getAccountInfo", "an accountInfo", expectation)

    result_object = expect_object(
        result,
        "result field was not an object as required by the getAccountInfo validator",
    )
    require_attributes(result_object, expectation.required_result_attributes, "result")
    validate_context(result_object, expectation.required_context_attributes)

    value_object = expect_object(
        result_object.get("value"), "result.value was not an object"
    )
    require_attributes(
        value_object, expectation.required_value_attributes, "result.value"
    )
    expected_values = expect_object(
        expectation.expected_value_attributes,
        "accountInfo expected_value_attributes was not an object",
    )

    executable = expect_bool(
        value_object.get("executable"), "result.value.executable was not a boolean"
    )
    expected_executable = expect_bool(
        expected_values.get("executable"),
        "expected_value_attributes.executable was not a boolean",
    )
    if executable != expected_executable:
        raise ValidationError(
            f"result.value.executable expected {_bool_text(expected_executable)}, "
            f"received {_bool_text(executable)}"
        )

    lamports = expect_u64(
        value_object.get("lamports"), "result.value.lamports was not a u64"
    )
    if lamports == 0:
        raise ValidationError("result.value.lamports must be greater than 0")

    owner = expect_str(value_object.get("owner"), "result.value.owner was not a string")
    if owner != expectation.expected_owner:
        raise ValidationError(
            f"result.value.owner expected '{expectation.expected_owner}', "
            f"received '{owner}'"
        )

    rent_epoch = expect_u64(
        value_object.get("rentEpoch"), "result.value.rentEpoch was not a u64"
    )
    if rent_epoch == 0:
        raise ValidationError("result.value.rentEpoch must be greater than 0")

    space = expect_u64(value_object.get("space"), "result.value.space was not a u64")
    expected_space = expect_u64(
        expected_values.get("space"), "expected_value_attributes.space was not a u64"
    )
    if space != expected_space:
        raise ValidationError(
            f"result.value.space expected {expected_space}, received {space}"
        )

    if "data" not in value_object:
        raise ValidationError("result.value.data was missing")
    validate_account_data(
        value_object["data"],
        "result.value.data",
        expectation.expected_data_encoding,
        expectation.expected_parsed_program,
        expectation.required_parsed_attributes,
    )

    return f"space={space} encoding={expectation.expected_data_encoding}"