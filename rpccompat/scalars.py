"""Validators for RPC methods whose result is a single scalar value."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from rpccompat.common import (
    ValidationError,
    debug_list,
    expect_str,
    expect_u64,
    mismatched_expectation,
)


@dataclass(frozen=True)
class BlockHeightExpectation:
    """Expectation for getBlockHeight: a positive integer."""


@dataclass(frozen=True)
class FirstAvailableBlockExpectation:
    """Expectation for getFirstAvailableBlock: an exact slot."""

    expected_value: int


@dataclass(frozen=True)
class MaxRetransmitSlotExpectation:
    """Expectation for getMaxRetransmitSlot: a positive integer."""


@dataclass(frozen=True)
class MaxShredInsertSlotExpectation:
    """Expectation for getMaxShredInsertSlot: a positive integer."""


@dataclass(frozen=True)
class BlockTimeExpectation:
    """Expectation for getBlockTime: an exact timestamp."""

    expected_value: int


@dataclass(frozen=True)
class StringResultExpectation:
    """Expectation for a string result drawn from a fixed set of values."""

    allowed_values: Sequence[str]


def _positive_u64(result: Any, method: str) -> int:
    value = expect_u64(
        result, f"result field was not a u64 as required by the {method} validator"
    )
    if value == 0:
        raise ValidationError("result must be greater than 0")
    return value


def _exact_u64(result: Any, method: str, expected_value: int) -> int:
    value = expect_u64(
        result, f"result field was not a u64 as required by the {method} validator"
    )
    if value != expected_value:
        raise ValidationError(f"result expected {expected_value}, received {value}")
    return value


def validate_block_height(expectation: Any, result: Any) -> str:
    """Validate a getBlockHeight result."""
    if not isinstance(expectation, BlockHeightExpectation):
        raise mismatched_expectation("getBlockHeight", "a block height", expectation)
    return f"blockHeight={_positive_u64(result, 'getBlockHeight')}"


def validate_first_available_block(expectation: Any, result: Any) -> str:
    """Validate a getFirstAvailableBlock result."""
    if not isinstance(expectation, FirstAvailableBlockExpectation):
        raise mismatched_expectation(
            "getFirstAvailableBlock", "a firstAvailableBlock", expectation
        )
    value = _exact_u64(result, "getFirstAvailableBlock", expectation.expected_value)
    return f"firstAvailableBlock={value}"


def validate_max_retransmit_slot(expectation: Any, result: Any) -> str:
    """Validate a getMaxRetransmitSlot result."""
    if not isinstance(expectation, MaxRetransmitSlotExpectation):
        raise mismatched_expectation(
            "getMaxRetransmitSlot", "a maxRetransmitSlot", expectation
        )
    return f"maxRetransmitSlot={_positive_u64(result, 'getMaxRetransmitSlot')}"


def validate_max_shred_insert_slot(expectation: Any, result: Any) -> str:
    """Validate a getMaxShredInsertSlot result."""
    if not isinstance(expectation, MaxShredInsertSlotExpectation):
        raise mismatched_expectation(
            "getMaxShredInsertSlot", "a maxShredInsertSlot", expectation
        )
    return f"maxShredInsertSlot={_positive_u64(result, 'getMaxShredInsertSlot')}"


def validate_block_time(expectation: Any, result: Any) -> str:
    """Validate a getBlockTime result."""
    if not isinstance(expectation, BlockTimeExpectation):
        raise mismatched_expectation("getBlockTime", "a blockTime", expectation)
    value = _exact_u64(result, "getBlockTime", expectation.expected_value)
    return f"blockTime={value}"


def validate_health(expectation: Any, result: Any) -> str:
    """Validate a getHealth result against the allowed strings."""
    if not isinstance(expectation, StringResultExpectation):
        raise mismatched_expectation("getHealth", "a stringResult", expectation)
    actual = expect_str(
        result, "result field was not a string as required by the getHealth validator"
    )
    if actual not in expectation.allowed_values:
        raise ValidationError(
            f"expected result to be one of {debug_list(expectation.allowed_values)}, "
            f"received '{actual}'"
        )
    return f"result='{actual}'"