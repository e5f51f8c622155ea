"""Validators for block snapshots, block lists and the genesis hash."""

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
)


@dataclass(frozen=True)
class BlockSnapshotExpectation:
    """Expectation for getBlock: the exact result payload."""

    required_result_attributes: Sequence[str]
    expected_result: Any


@dataclass(frozen=True)
class BlocksSnapshotExpectation:
    """Expectation for getBlocks: the exact list of slots."""

    expected_result: Any


@dataclass(frozen=True)
class BlocksWithLimitSnapshotExpectation:
    """Expectation for getBlocksWithLimit: the exact list of slots."""

    expected_result: Any


@dataclass(frozen=True)
class GenesisHashExpectation:
    """Expectation for getGenesisHash: a non-empty string."""


def _json_equal(left: Any, right: Any) -> bool:
    """Compare JSON values strictly: booleans, integers and floats never mix."""
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, dict):
        return (
            isinstance(right, dict)
            and left.keys() == right.keys()
            and all(_json_equal(value, right[key]) for key, value in left.items())
        )
    if isinstance(left, list):
        return (
            isinstance(right, list)
            and len(left) == len(right)
            and all(_json_equal(a, b) for a, b in zip(left, right))
        )
    if isinstance(left, (int, float)):
        return type(left) is type(right) and left == right
    return type(left) is type(right) and left == right


def _validate_slot_list(result: Any, expected_result: Any, method: str, label: str) -> str:
    slots = expect_array(
        result, f"result field was not an array as required by the {method} validator"
    )
    for index, value in enumerate(slots):
        expect_u64(value, f"result[{index}] was not an unsigned integer")

    if not _json_equal(result, expected_result):
        raise ValidationError(f"result payload did not match the expected {label} snapshot")

    if not slots:
        raise ValidationError("result array was unexpectedly empty")

    return f"blocks={len(slots)} range={slots[0]}..{slots[-1]}"


def validate_block(expectation: Any, result: Any) -> str:
    """Validate a getBlock result against its snapshot."""
    if not isinstance(expectation, BlockSnapshotExpectation):
        raise mismatched_expectation("getBlock", "a blockSnapshot", expectation)

    result_object = expect_object(
        result, "result field was not an object as required by the getBlock validator"
    )
    require_attributes(
        result_object, expectation.required_result_attributes, "result object"
    )

    if not _json_equal(result, expectation.expected_result):
        raise ValidationError("result payload did not match the expected block snapshot")

    parent_slot = expect_u64(
        result_object.get("parentSlot"),
        "result field 'parentSlot' was not an unsigned integer",
    )
    transactions = expect_array(
        result_object.get("transactions"),
        "result field 'transactions' was not an array",
    )
    return f"parentSlot={parent_slot} transactions={len(transactions)}"


def validate_blocks(expectation: Any, result: Any) -> str:
    """Validate a getBlocks result against its snapshot."""
    if not isinstance(expectation, BlocksSnapshotExpectation):
        raise mismatched_expectation("getBlocks", "a blocksSnapshot", expectation)
    return _validate_slot_list(result, expectation.expected_result, "getBlocks", "blocks")


def validate_blocks_with_limit(expectation: Any, result: Any) -> str:
    """Validate a getBlocksWithLimit result against its snapshot."""
    if not isinstance(expectation, BlocksWithLimitSnapshotExpectation):
        raise mismatched_expectation(
            "getBlocksWithLimit", "a blocksWithLimitSnapshot", expectation
        )
    return _validate_slot_list(
        result, expectation.expected_result, "getBlocksWithLimit", "blocks-with-limit"
    )


def validate_genesis_hash(expectation: Any, result: Any) -> str:
    """Validate a getGenesisHash result."""
    if not isinstance(expectation, GenesisHashExpectation):
        raise mismatched_expectation("getGenesisHash", "a genesisHash", expectation)
    value = expect_str(
        result, "result field was not a string as required by the getGenesisHash validator"
    )
    if not value:
        raise ValidationError("result string must not be empty")
    return f"genesisHash='{value}'"