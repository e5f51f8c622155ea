"""Shared helpers for checking JSON-RPC result payloads."""

from __future__ import annotations

import json
import math
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

_U64_MAX = 2**64 - 1


class ValidationError(Exception):
    """Raised when an RPC result does not satisfy its expectation."""


def mismatched_expectation(method: str, kind: str, other: Any) -> ValidationError:
    """Build the error for a validator handed the wrong kind of expectation."""
    return ValidationError(f"{method} expected {kind} validator, received {other!r}")


def is_u64(value: Any) -> bool:
    """Return True if *value* is a JSON integer that fits in an unsigned 64-bit range."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value <= _U64_MAX
    )


def is_number(value: Any) -> bool:
    """Return True if *value* is a JSON number (integer or float)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_float(value: float) -> str:
    """Render a number the way a plain decimal display would: no exponent, no trailing '.0'."""
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "inf" if number > 0 else "-inf"
    if number == 0:
        return "-0" if math.copysign(1.0, number) < 0 else "0"
    if number.is_integer():
        return str(int(number))
    text = format(Decimal(repr(number)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def expect_object(value: Any, message: str) -> dict:
    """Return *value* if it is a JSON object, else raise with *message*."""
    if isinstance(value, dict):
        return value
    raise ValidationError(message)


def expect_array(value: Any, message: str) -> list:
    """Return *value* if it is a JSON array, else raise with *message*."""
    if isinstance(value, list):
        return value
    raise ValidationError(message)


def expect_u64(value: Any, message: str) -> int:
    """Return *value* if it is an unsigned 64-bit integer, else raise with *message*."""
    if is_u64(value):
        return value
    raise ValidationError(message)


def expect_str(value: Any, message: str) -> str:
    """Return *value* if it is a string, else raise with *message*."""
    if isinstance(value, str):
        return value
    raise ValidationError(message)


def expect_bool(value: Any, message: str) -> bool:
    """Return *value* if it is a boolean, else raise with *message*."""
    if isinstance(value, bool):
        return value
    raise ValidationError(message)


def expect_number(value: Any, message: str) -> float:
    """Return *value* as a float if it is a JSON number, else raise with *message*."""
    if is_number(value):
        return float(value)
    raise ValidationError(message)


def require_attributes(mapping: Mapping, required: Iterable[str], location: str) -> None:
    """Raise unless every name in *required* is a key of *mapping*."""
    for field_name in required:
        if field_name not in mapping:
            raise ValidationError(
                f"{location} was missing required '{field_name}' field"
            )


def _require_field(mapping: Mapping, field_name: str) -> Any:
    try:
        return mapping[field_name]
    except KeyError:
        raise ValidationError(
            f"result object was missing required '{field_name}' field"
        ) from None


def require_u64_field(mapping: Mapping, field_name: str) -> int:
    """Return the unsigned integer stored under *field_name*."""
    return expect_u64(
        _require_field(mapping, field_name),
        f"result field '{field_name}' was not an unsigned integer",
    )


def require_optional_u64_field(mapping: Mapping, field_name: str) -> int | None:
    """Return the unsigned integer under *field_name*, or None when it is null."""
    value = _require_field(mapping, field_name)
    if value is None:
        return None
    return expect_u64(
        value,
        f"result field '{field_name}' was neither null nor an unsigned integer",
    )


def require_number_field(mapping: Mapping, field_name: str) -> float:
    """Return the number stored under *field_name* as a float."""
    return expect_number(
        _require_field(mapping, field_name),
        f"result field '{field_name}' was not a number",
    )


def validate_context(
    result_object: Mapping,
    required_context_attributes: Iterable[str],
    require_api_version: bool = True,
) -> dict:
    """Check the ``context`` member of a response carrying a slot and API version."""
    context = expect_object(
        result_object.get("context"), "result.context was not an object"
    )
    require_attributes(context, required_context_attributes, "result.context")
    expect_u64(context.get("slot"), "result.context.slot was not a u64")
    if require_api_version:
        expect_str(
            context.get("apiVersion"), "result.context.apiVersion was not a string"
        )
    return context


def debug_list(values: Iterable[str]) -> str:
    """Render a list of strings as a bracketed, quoted list."""
    return "[" + ", ".join(json.dumps(v, ensure_ascii=False) for v in values) + "]"