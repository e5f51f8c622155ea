"""Validator for getBlockCommitment."""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from rpccompat.common import (
    ValidationError,
    expect_object,
    expect_u64,
    mismatched_expectation,
    require_attributes,
)
from rpccompat.ledger import _json_equal


@dataclass(frozen=True)
class BlockCommitmentExpectation:
    """Expectation for getBlockCommitment: the exact ``commitment`` value."""

    required_result_attributes: Sequence[str]
    expected_commitment: Any = None


def _compact(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def validate_block_commitment(expectation: Any, result: Any) -> str:
    """Validate a getBlockCommitment result and return a summary line."""
    if not isinstance(expectation, BlockCommitmentExpectation):
        raise mismatched_expectation(
            "getBlockCommitment", "a blockCommitment", expectation
        )

    result_object = expect_object(
        result,
        "result field was not an object as required by the getBlockCommitment validator",
    )
    require_attributes(
        result_object, expectation.required_result_attributes, "result object"
    )

    if "commitment" not in result_object:
        raise ValidationError("result object was missing required 'commitment' field")
    commitment = result_object["commitment"]
    if not _json_equal(commitment, expectation.expected_commitment):
        raise ValidationError(
            "result field 'commitment' did not match expected value: expected "
            f"{_compact(expectation.expected_commitment)}, received {_compact(commitment)}"
        )
    if isinstance(commitment, list):
        summary = str(len(commitment))
    elif commitment is None:
        summary = "null"
    else:
        raise ValidationError("result field 'commitment' was neither null nor an array")

    total_stake = expect_u64(
        result_object.get("totalStake"),
        "result field 'totalStake' was not an unsigned integer",
    )
    return f"commitment={summary} totalStake={total_stake}"