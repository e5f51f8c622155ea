"""Validator for getIdentity."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from rpccompat.common import (
    ValidationError,
    expect_object,
    expect_str,
    mismatched_expectation,
    require_attributes,
)


@dataclass(frozen=True)
class IdentityExpectation:
    """Expectation for getIdentity."""

    required_result_attributes: Sequence[str]


def validate_identity(expectation: Any, result: Any) -> str:
    """Validate a getIdentity result and return a summary line."""
    if not isinstance(expectation, IdentityExpectation):
        raise mismatched_expectation("getIdentity", "an identity", expectation)

    result_object = expect_object(
        result, "result field was not an object as required by the getIdentity validator"
    )
    require_attributes(
        result_object, expectation.required_result_attributes, "result object"
    )

    identity = expect_str(
        result_object.get("identity"), "result.identity was not a string"
    )
    if not identity:
        raise ValidationError("result.identity must not be empty")

    return f"identity='{identity}'"