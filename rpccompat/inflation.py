"""Validators for inflation-related RPC methods."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from rpccompat.common import (
    ValidationError,
    expect_array,
    expect_object,
    expect_u64,
    format_float,
    mismatched_expectation,
    require_attributes,
    require_number_field,
    require_u64_field,
)
from rpccompat.ledger import _json_equal


@dataclass(frozen=True)
class InflationGovernorExpectation:
    """Expectation for getInflationGovernor: the exact result payload."""

    required_result_attributes: Sequence[str]
    expected_result: Any


@dataclass(frozen=True)
class InflationRateExpectation:
    """Expectation for getInflationRate."""

    required_result_attributes: Sequence[str]


@dataclass(frozen=True)
class InflationRewardExpectation:
    """Expectation for getInflationReward: one entry per requested address."""

    expected_result_length: int
    required_reward_attributes: Sequence[str]


def validate_inflation_governor(expectation: Any, result: Any) -> str:
    """Validate a getInflationGovernor result against its snapshot."""
    if not isinstance(expectation, InflationGovernorExpectation):
        raise mismatched_expectation(
            "getInflationGovernor", "an inflationGovernor", expectation
        )

    result_object = expect_object(
        result,
        "result field was not an object as required by the getInflationGovernor validator",
    )
    require_attributes(
        result_object, expectation.required_result_attributes, "result object"
    )

    if not _json_equal(result, expectation.expected_result):
        raise ValidationError(
            "result payload did not match the expected inflation governor snapshot"
        )

    foundation = require_number_field(result_object, "foundation")
    foundation_term = require_number_field(result_object, "foundationTerm")
    initial = require_number_field(result_object, "initial")
    taper = require_number_field(result_object, "taper")
    terminal = require_number_field(result_object, "terminal")

    return (
        f"foundation={format_float(foundation)} "
        f"foundationTerm={format_float(foundation_term)} "
        f"initial={format_float(initial)} taper={format_float(taper)} "
        f"terminal={format_float(terminal)}"
    )


def validate_inflation_rate(expectation: Any, result: Any) -> str:
    """Validate a getInflationRate result and return a summary line."""
    if not isinstance(expectation, InflationRateExpectation):
        raise mismatched_expectation("getInflationRate", "an inflationRate", expectation)

    result_object = expect_object(
        result,
        "result field was not an object as required by the getInflationRate validator",
    )
    require_attributes(
        result_object, expectation.required_result_attributes, "result object"
    )

    total = require_number_field(result_object, "total")
    validator = require_number_field(result_object, "validator")
    foundation = require_number_field(result_object, "foundation")
    epoch = require_u64_field(result_object, "epoch")

    return (
        f"epoch={epoch} total={format_float(total)} "
        f"validator={format_float(validator)} foundation={format_float(foundation)}"
    )


def validate_inflation_reward(expectation: Any, result: Any) -> str:
    """Validate a getInflationReward result; null entries are allowed."""
    if not isinstance(expectation, InflationRewardExpectation):
        raise mismatched_expectation(
            "getInflationReward", "an inflationReward", expectation
        )

    rewards = expect_array(
        result,
        "result field was not an array as required by the getInflationReward validator",
    )
    if len(rewards) != expectation.expected_result_length:
        raise ValidationError(
            f"result array length {len(rewards)} did not match expected length "
            f"{expectation.expected_result_length}"
        )

    non_null_entries = 0
    for index, reward in enumerate(rewards):
        if reward is None:
            continue
        non_null_entries += 1
        prefix = f"result[{index}]"
        reward_object = expect_object(reward, f"{prefix} was neither null nor an object")
        require_attributes(
            reward_object, expectation.required_reward_attributes, prefix
        )
        for field_name in ("epoch", "effectiveSlot", "amount", "postBalance"):
            expect_u64(
                reward_object.get(field_name), f"{prefix}.{field_name} was not a u64"
            )
        if "commission" in reward_object:
            expect_u64(
                reward_object["commission"], f"{prefix}.commission was not a u64"
            )

    return f"rewards={len(rewards)} nonNullRewards={non_null_entries}"