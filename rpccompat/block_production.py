"""Validator for getBlockProduction."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from rpccompat.common import (
    ValidationError,
    expect_array,
    expect_object,
    expect_u64,
    mismatched_expectation,
    require_attributes,
    validate_context,
)


@dataclass(frozen=True)
class BlockProductionExpectation:
    """Expectation for getBlockProduction."""

    required_result_attributes: Sequence[str]
    required_context_attributes: Sequence[str]
    required_value_attributes: Sequence[str]
    required_range_attributes: Sequence[str]
    expected_identity: str


def validate_block_production(expectation: Any, result: Any) -> str:
    """Validate a getBlockProduction result and return a summary line."""
    if not isinstance(expectation, BlockProductionExpectation):
        raise mismatched_expectation(
            "getBlockProduction", "a blockProduction", expectation
        )

    result_object = expect_object(
        result,
        "result field was not an object as required by the getBlockProduction validator",
    )
    require_attributes(result_object, expectation.required_result_attributes, "result")
    validate_context(result_object, expectation.required_context_attributes)

    value_object = expect_object(
        result_object.get("value"), "result.value was not an object"
    )
    require_attributes(
        value_object, expectation.required_value_attributes, "result.value"
    )

    by_identity = expect_object(
        value_object.get("byIdentity"), "result.value.byIdentity was not an object"
    )
    identity = expectation.expected_identity
    if identity not in by_identity:
        raise ValidationError(
            f"result.value.byIdentity was missing expected identity '{identity}'"
        )
    counts = expect_array(
        by_identity[identity], "result.value.byIdentity.<identity> was not an array"
    )
    if len(counts) != 2:
        raise ValidationError(
            "result.value.byIdentity.<identity> must contain exactly 2 elements, "
            f"received {len(counts)}"
        )
    for index, count in enumerate(counts):
        expect_u64(count, f"result.value.byIdentity.<identity>[{index}] was not a u64")

    range_object = expect_object(
        value_object.get("range"), "result.value.range was not an object"
    )
    require_attributes(
        range_object, expectation.required_range_attributes, "result.value.range"
    )
    first_slot = expect_u64(
        range_object.get("firstSlot"), "result.value.range.firstSlot was not a u64"
    )
    last_slot = expect_u64(
        range_object.get("lastSlot"), "result.value.range.lastSlot was not a u64"
    )

    return f"identity={identity} range={first_slot}..{last_slot}"