"""Validators for RPC methods that return lists or maps of entries."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from rpccompat.common import (
    ValidationError,
    expect_array,
    expect_object,
    expect_str,
    expect_u64,
    mismatched_expectation,
    require_attributes,
    validate_context,
)


@dataclass(frozen=True)
class ClusterNodesExpectation:
    """Expectation for getClusterNodes; only the first node is inspected in detail."""

    minimum_result_count: int
    required_node_attributes: Sequence[str]
    required_string_attributes: Sequence[str]
    nullable_string_attributes: Sequence[str]
    required_u64_attributes: Sequence[str]


@dataclass(frozen=True)
class LeaderScheduleExpectation:
    """Expectation for getLeaderSchedule."""

    minimum_validator_count: int


@dataclass(frozen=True)
class LargestAccountsExpectation:
    """Expectation for getLargestAccounts."""

    minimum_result_count: int
    required_result_attributes: Sequence[str]
    required_context_attributes: Sequence[str]
    required_value_attributes: Sequence[str]


@dataclass(frozen=True)
class RecentPerformanceSamplesExpectation:
    """Expectation for getRecentPerformanceSamples."""

    minimum_result_count: int
    required_sample_attributes: Sequence[str]


@dataclass(frozen=True)
class RecentPrioritizationFeesExpectation:
    """Expectation for getRecentPrioritizationFees."""

    minimum_result_count: int
    required_fee_attributes: Sequence[str]


def validate_cluster_nodes(expectation: Any, result: Any) -> str:
    """Validate a getClusterNodes result and return a summary line."""
    if not isinstance(expectation, ClusterNodesExpectation):
        raise mismatched_expectation("getClusterNodes", "a clusterNodes", expectation)

    nodes = expect_array(
        result,
        "result field was not an array as required by the getClusterNodes validator",
    )
    if len(nodes) < expectation.minimum_result_count:
        raise ValidationError(
            f"result array must contain at least {expectation.minimum_result_count} "
            f"element(s), received {len(nodes)}"
        )

    first_node = expect_object(nodes[0] if nodes else None, "result[0] was not an object")
    require_attributes(first_node, expectation.required_node_attributes, "result[0]")

    for field_name in expectation.required_string_attributes:
        expect_str(first_node.get(field_name), f"result[0].{field_name} was not a string")

    for field_name in expectation.nullable_string_attributes:
        if field_name not in first_node:
            raise ValidationError(
                f"result[0] was missing required '{field_name}' field"
            )
        value = first_node[field_name]
        if value is not None and not isinstance(value, str):
            raise ValidationError(
                f"result[0].{field_name} was neither null nor a string"
            )

    for field_name in expectation.required_u64_attributes:
        expect_u64(first_node.get(field_name), f"result[0].{field_name} was not a u64")

    pubkey = expect_str(first_node.get("pubkey"), "result[0].pubkey was not a string")
    return f"nodes={len(nodes)} firstPubkey={pubkey}"


def validate_leader_schedule(expectation: Any, result: Any) -> str:
    """Validate a getLeaderSchedule result and return a summary line.

    Identities are visited in sorted key order.
    """
    if not isinstance(expectation, LeaderScheduleExpectation):
        raise mismatched_expectation("getLeaderSchedule", "a leaderSchedule", expectation)

    result_object = expect_object(
        result,
        "result field was not an object as required by the getLeaderSchedule validator",
    )
    minimum = expectation.minimum_validator_count
    if len(result_object) < minimum:
        suffix = "y" if minimum == 1 else "ies"
        raise ValidationError(
            f"result object must contain at least {minimum} validator entr{suffix} , "
            f"received {len(result_object)}"
        )

    entries = sorted(result_object.items())
    if not entries:
        raise ValidationError("result object was unexpectedly empty")

    first_identity, first_schedule = entries[0]
    if not first_identity:
        raise ValidationError("result object contained an empty validator identity key")
    first_schedule = expect_array(first_schedule, "result.<identity> was not an array")

    for identity, schedule in entries:
        if not identity:
            raise ValidationError(
                "result object contained an empty validator identity key"
            )
        slots = expect_array(schedule, f"result.{identity} was not an array")
        for index, slot_index in enumerate(slots):
            expect_u64(slot_index, f"result.{identity}[{index}] was not a u64")

    return (
        f"validators={len(result_object)} firstIdentity={first_identity} "
        f"firstScheduleLength={len(first_schedule)}"
    )


def validate_largest_accounts(expectation: Any, result: Any) -> str:
    """Validate a getLargestAccounts result and return a summary line."""
    if not isinstance(expectation, LargestAccountsExpectation):
        raise mismatched_expectation("getLargestAccounts", "a largestAccounts", expectation)

    result_object = expect_object(
        result,
        "result field was not an object as required by the getLargestAccounts validator",
    )
    require_attributes(result_object, expectation.required_result_attributes, "result")
    validate_context(
        result_object, expectation.required_context_attributes, require_api_version=False
    )

    values = expect_array(result_object.get("value"), "result.value was not an array")
    if len(values) < expectation.minimum_result_count:
        raise ValidationError(
            f"result.value length {len(values)} was smaller than the required "
            f"minimum {expectation.minimum_result_count}"
        )

    for index, value in enumerate(values):
        prefix = f"result.value[{index}]"
        value_object = expect_object(value, f"{prefix} was not an object")
        require_attributes(value_object, expectation.required_value_attributes, prefix)
        expect_str(value_object.get("address"), f"{prefix}.address was not a string")
        expect_u64(value_object.get("lamports"), f"{prefix}.lamports was not a u64")

    return f"accounts={len(values)}"


def _validate_u64_records(
    result: Any, method: str, minimum_result_count: int, required_attributes: Sequence[str]
) -> int:
    records = expect_array(
        result, f"result field was not an array as required by the {method} validator"
    )
    if len(records) < minimum_result_count:
        raise ValidationError(
            f"result array length {len(records)} was smaller than the required "
            f"minimum {minimum_result_count}"
        )

    for index, record in enumerate(records):
        prefix = f"result[{index}]"
        record_object = expect_object(record, f"{prefix} was not an object")
        require_attributes(record_object, required_attributes, prefix)
        for field_name in required_attributes:
            expect_u64(record_object.get(field_name), f"{prefix}.{field_name} was not a u64")

    return len(records)


def validate_recent_performance_samples(expectation: Any, result: Any) -> str:
    """Validate a getRecentPerformanceSamples result and return a summary line."""
    if not isinstance(expectation, RecentPerformanceSamplesExpectation):
        raise mismatched_expectation(
            "getRecentPerformanceSamples", "a recentPerformanceSamples", expectation
        )
    count = _validate_u64_records(
        result,
        "getRecentPerformanceSamples",
        expectation.minimum_result_count,
        expectation.required_sample_attributes,
    )
    return f"samples={count}"


def validate_recent_prioritization_fees(expectation: Any, result: Any) -> str:
    """Validate a getRecentPrioritizationFees result and return a summary line."""
    if not isinstance(expectation, RecentPrioritizationFeesExpectation):
        raise mismatched_expectation(
            "getRecentPrioritizationFees", "a recentPrioritizationFees", expectation
        )
    count = _validate_u64_records(
        result,
        "getRecentPrioritizationFees",
        expectation.minimum_result_count,
        expectation.required_fee_attributes,
    )
    return f"fees={count}"