"""Validators for context-wrapped RPC results: balance and latest blockhash."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from rpccompat.common import (
    ValidationError,
    expect_object,
    expect_str,
    expect_u64,
    mismatched_expectation,
    require_attributes,
    validate_context,
)


@dataclass(frozen=True)
class BalanceExpectation:
    """Expectation for getBalance; without an expected value the balance must be positive."""

    required_result_attributes: Sequence[str]
    required_context_attributes: Sequence[str]
    expected_value: int | None = None


@dataclass(frozen=True)
class LatestBlockhashExpectation:
    """Expectation for getLatestBlockhash."""

    required_result_attributes: Sequence[str]
    required_context_attributes: Sequence[str]
    required_value_attributes: Sequence[str]


def validate_balance(expectation: Any, result: Any) -> str:
    """Validate a getBalance result and return a summary line."""
    if not isinstance(expectation, BalanceExpectation):
        raise mismatched_expectation("getBalance", "a balance", expectation)

    result_object = expect_object(
        result, "result field was not an object as required by the getBalance validator"
    )
    require_attributes(result_object, expectation.required_result_attributes, "result")
    validate_context(result_object, expectation.required_context_attributes)

    value = expect_u64(result_object.get("value"), "result.value was not a u64")

    if expectation.expected_value is not None:
        if value != expectation.expected_value:
            raise ValidationError(
                f"result.value expected {expectation.expected_value}, received {value}"
            )
    elif value == 0:
        raise ValidationError("result.value must be greater than 0")

    return f"balance={value}"


def validate_latest_blockhash(expectation: Any, result: Any) -> str:
    """Validate a getLatestBlockhash result and return a summary line."""
    if not isinstance(expectation, LatestBlockhashExpectation):
        raise mismatched_expectation("getLatestBlockhash", "a latestBlockhash", expectation)

    result_object = expect_object(
        result,
        "result field was not an object as required by the getLatestBlockhash validator",
    )
    require_attributes(result_object, expectation.required_result_attributes, "result")

    context_object = expect_object(
        result_object.get("context"), "result.context was not an object"
    )
    require_attributes(
        context_object, expectation.required_context_attributes, "result.context"
    )
    api_version = expect_str(
        context_object.get("apiVersion"), "result.context.apiVersion was not a string"
    )
    slot = expect_u64(context_object.get("slot"), "result.context.slot was not a u64")

    value_object = expect_object(
        result_object.get("value"), "result.value was not an object"
    )
    require_attributes(
        value_object, expectation.required_value_attributes, "result.value"
    )

    blockhash = expect_str(
        value_object.get("blockhash"), "result.value.blockhash was not a string"
    )
    if not blockhash:
        raise ValidationError("result.value.blockhash was empty")

    last_valid_block_height = expect_u64(
        value_object.get("lastValidBlockHeight"),
        "result.value.lastValidBlockHeight was not a u64",
    )

    return (
        f"slot={slot} apiVersion={api_version} blockhash={blockhash} "
        f"lastValidBlockHeight={last_valid_block_height}"
    )