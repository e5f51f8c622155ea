"""Validator for getFeeForMessage."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from rpccompat.common import (
    ValidationError,
    expect_object,
    is_u64,
    mismatched_expectation,
    require_attributes,
    validate_context,
)


@dataclass(frozen=True)
class FeeForMessageExpectation:
    """Expectation for getFeeForMessage; the fee may be null."""

    required_result_attributes: Sequence[str]
    required_context_attributes: Sequence[str]


def validate_fee_for_message(expectation: Any, result: Any) -> str:
    """Validate a getFeeForMessage result and return a summary line."""
    if not isinstance(expectation, FeeForMessageExpectation):
        raise mismatched_expectation("getFeeForMessage", "a feeForMessage", expectation)

    result_object = expect_object(
        result,
        "result field was not an object as required by the getFeeForMessage validator",
    )
    require_attributes(result_object, expectation.required_result_attributes, "result")
    validate_context(result_object, expectation.required_context_attributes)

    if "value" not in result_object:
        raise ValidationError("result was missing required 'value' field")
    value = result_object["value"]

    if value is None:
        return "fee=null"
    if not is_u64(value):
        raise ValidationError("result.value was neither null nor a u64")
    return f"fee={value}"