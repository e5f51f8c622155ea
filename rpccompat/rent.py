"""Validator for getMinimumBalanceForRentExemption."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rpccompat.common import ValidationError, expect_u64, mismatched_expectation


@dataclass(frozen=True)
class MinimumBalanceForRentExemptionExpectation:
    """Expectation for getMinimumBalanceForRentExemption: an exact lamport amount."""

    expected_value: int


def validate_minimum_balance_for_rent_exemption(expectation: Any, result: Any) -> str:
    """Validate a getMinimumBalanceForRentExemption result."""
    if not isinstance(expectation, MinimumBalanceForRentExemptionExpectation):
        raise mismatched_expectation(
            "getMinimumBalanceForRentExemption",
            "a minimumBalanceForRentExemption",
            expectation,
        )
    value = expect_u64(
        result,
        "result field was not a u64 as required by the "
        "getMinimumBalanceForRentExemption validator",
    )
    if value != expectation.expected_value:
        raise ValidationError(
            f"result expected {expectation.expected_value}, received {value}"
        )
    return f"minimumBalanceForRentExemption={value}"