"""Validator for getProgramAccounts."""

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
)

_BINARY_ENCODINGS = ("base64", "base64+zstd")


@dataclass(frozen=True)
class ProgramAccountsExpectation:
    """Expectation for getProgramAccounts."""

    minimum_result_count: int
    required_result_attributes: Sequence[str]
    required_account_attributes: Sequence[str]
    expected_owner: str
    expected_data_encoding: str
    expected_parsed_program: str | None = None
    required_parsed_attributes: Sequence[str] = field(default_factory=tuple)


def _validate_entry(
    expectation: ProgramAccountsExpectation, index: int, entry: Any
) -> None:
    prefix = f"result[{index}]"
    entry_object = expect_object(entry, f"{prefix} was not an object")
    require_attributes(entry_object, expectation.required_result_attributes, prefix)

    expect_str(entry_object.get("pubkey"), f"{prefix}.pubkey was not a string")

    account_location = f"{prefix}.account"
    account_object = expect_object(
        entry_object.get("account"), f"{account_location} was not an object"
    )
    require_attributes(
        account_object, expectation.required_account_attributes, account_location
    )

    expect_bool(
        account_object.get("executable"),
        f"{account_location}.executable was not a boolean",
    )
    expect_u64(
        account_object.get("lamports"), f"{account_location}.lamports was not a u64"
    )

    owner = expect_str(
        account_object.get("owner"), f"{account_location}.owner was not a string"
    )
    if owner != expectation.expected_owner:
        raise ValidationError(
            f"{account_location}.owner expected '{expectation.expected_owner}', "
            f"received '{owner}'"
        )

    expect_u64(
        account_object.get("rentEpoch"), f"{account_location}.rentEpoch was not a u64"
    )
    expect_u64(account_object.get("space"), f"{account_location}.space was not a u64")

    data_location = f"{account_location}.data"
    if "data" not in account_object:
        raise ValidationError(f"{data_location} was missing")
    validate_account_data(
        account_object["data"],
        data_location,
        expectation.expected_data_encoding,
        expectation.expected_parsed_program,
        expectation.required_parsed_attributes,
        _BINARY_ENCODINGS,
    )


def validate_program_accounts(expectation: Any, result: Any) -> str:
    """Validate a getProgramAccounts result and return a summary line."""
    if not isinstance(expectation, ProgramAccountsExpectation):
        raise mismatched_expectation(
            "getProgramAccounts", "a programAccounts", expectation
        )

    entries = expect_array(
        result,
        "result field was not an array as required by the getProgramAccounts validator",
    )
    if len(entries) < expectation.minimum_result_count:
        raise ValidationError(
            f"result array length {len(entries)} was smaller than the required "
            f"minimum {expectation.minimum_result_count}"
        )

    for index, entry in enumerate(entries):
        _validate_entry(expectation, index, entry)

    return f"accounts={len(entries)} encoding={expectation.expected_data_encoding}"