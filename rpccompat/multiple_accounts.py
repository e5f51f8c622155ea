"""Validator for getMultipleAccounts."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from rpccompat.accounts import validate_account_data
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


@dataclass(frozen=True)
class MultipleAccountsExpectation:
    """Expectation for getMultipleAccounts.

    ``expected_value_attributes`` is a list with one object per requested
    account, each giving its expected ``owner``, ``executable`` and ``space``.
    """

    required_result_attributes: Sequence[str]
    required_context_attributes: Sequence[str]
    required_value_attributes: Sequence[str]
    expected_value_attributes: Any
    expected_data_encoding: str
    expected_parsed_program: str | None = None
    required_parsed_attributes: Sequence[str] = field(default_factory=tuple)


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _validate_account(
    expectation: MultipleAccountsExpectation,
    index: int,
    value: Any,
    expected_value: Any,
) -> None:
    prefix = f"result.value[{index}]"
    expected_prefix = f"expected_value_attributes[{index}]"

    value_object = expect_object(value, f"{prefix} was not an object")
    require_attributes(value_object, expectation.required_value_attributes, prefix)

    expected_object = expect_object(
        expected_value, f"{expected_prefix} was not an object"
    )

    executable = expect_bool(
        value_object.get("executable"), f"{prefix}.executable was not a boolean"
    )
    expected_executable = expect_bool(
        expected_object.get("executable"),
        f"{expected_prefix}.executable was not a boolean",
    )
    if executable != expected_executable:
        raise ValidationError(
            f"{prefix}.executable expected {_bool_text(expected_executable)}, "
            f"received {_bool_text(executable)}"
        )

    lamports = expect_u64(value_object.get("lamports"), f"{prefix}.lamports was not a u64")
    if lamports == 0:
        raise ValidationError(f"{prefix}.lamports must be greater than 0")

    owner = expect_str(value_object.get("owner"), f"{prefix}.owner was not a string")
    expected_owner = expect_str(
        expected_object.get("owner"), f"{expected_prefix}.owner was not a string"
    )
    if owner != expected_owner:
        raise ValidationError(
            f"{prefix}.owner expected '{expected_owner}', received '{owner}'"
        )

    rent_epoch = expect_u64(
        value_object.get("rentEpoch"), f"{prefix}.rentEpoch was not a u64"
    )
    if rent_epoch == 0:
        raise ValidationError(f"{prefix}.rentEpoch must be greater than 0")

    space = expect_u64(value_object.get("space"), f"{prefix}.space was not a u64")
    expected_space = expect_u64(
        expected_object.get("space"), f"{expected_prefix}.space was not a u64"
    )
    if space != expected_space:
        raise ValidationError(
            f"{prefix}.space expected {expected_space}, received {space}"
        )

    if "data" not in value_object:
        raise ValidationError(f"{prefix}.data was missing")
    validate_account_data(
        value_object["data"],
        f"{prefix}.data",
        expectation.expected_data_encoding,
        expectation.expected_parsed_program,
        expectation.required_parsed_attributes,
    )


def validate_multiple_accounts(expectation: Any, result: Any) -> str:
    """Validate a getMultipleAccounts result and return a summary line."""
    if not isinstance(expectation, MultipleAccountsExpectation):
        raise mismatched_expectation(
            "getMultipleAccounts", "a multipleAccounts", expectation
        )

    result_object = expect_object(
        result,
        "result field was not an object as required by the getMultipleAccounts validator",
    )
    require_attributes(result_object, expectation.required_result_attributes, "result")
    validate_context(result_object, expectation.required_context_attributes)

    values = expect_array(result_object.get("value"), "result.value was not an array")
    expected_values = expect_array(
        expectation.expected_value_attributes,
        "multipleAccounts expected_value_attributes was not an array",
    )
    if len(values) != len(expected_values):
        raise ValidationError(
            f"result.value length {len(values)} did not match expected length "
            f"{len(expected_values)}"
        )

    for index, (value, expected_value) in enumerate(zip(values, expected_values)):
        _validate_account(expectation, index, value, expected_value)

    return f"accounts={len(values)} encoding={expectation.expected_data_encoding}"