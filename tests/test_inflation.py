import pytest

from rpccompat.common import ValidationError
from rpccompat.inflation import (
    InflationGovernorExpectation,
    InflationRateExpectation,
    InflationRewardExpectation,
    validate_inflation_governor,
    validate_inflation_rate,
    validate_inflation_reward,
)

GOVERNOR_ATTRIBUTES = ["foundation", "foundationTerm", "initial", "taper", "terminal"]


def governor_snapshot():
    return {
        "foundation": 0.0,
        "foundationTerm": 0.0,
        "initial": 0.08,
        "taper": 0.15,
        "terminal": 0.015,
    }


def governor_expectation():
    return InflationGovernorExpectation(
        required_result_attributes=GOVERNOR_ATTRIBUTES,
        expected_result=governor_snapshot(),
    )


def rate_expectation():
    return InflationRateExpectation(
        required_result_attributes=["epoch", "foundation", "total", "validator"]
    )


def reward_expectation():
    return InflationRewardExpectation(
        expected_result_length=1,
        required_reward_attributes=["epoch", "effectiveSlot", "amount", "postBalance"],
    )


def test_validates_matching_inflation_governor_snapshot():
    result = validate_inflation_governor(governor_expectation(), governor_snapshot())
    assert "initial=0.08" in result
    assert result == (
        "foundation=0 foundationTerm=0 initial=0.08 taper=0.15 terminal=0.015"
    )


def test_rejects_inflation_governor_snapshot_mismatch():
    payload = governor_snapshot()
    payload["initial"] = 0.09
    with pytest.raises(
        ValidationError,
        match="result payload did not match the expected inflation governor snapshot",
    ):
        validate_inflation_governor(governor_expectation(), payload)


def test_inflation_governor_missing_attribute():
    payload = governor_snapshot()
    del payload["taper"]
    with pytest.raises(
        ValidationError, match="result object was missing required 'taper' field"
    ):
        validate_inflation_governor(governor_expectation(), payload)


def test_inflation_governor_wrong_expectation_kind():
    with pytest.raises(ValidationError, match="getInflationGovernor expected an inflationGovernor"):
        validate_inflation_governor(rate_expectation(), governor_snapshot())


def test_validates_inflation_rate_shape():
    result = validate_inflation_rate(
        rate_expectation(),
        {
            "epoch": 951,
            "foundation": 0.0,
            "total": 0.03918552640613479,
            "validator": 0.03918552640613479,
        },
    )
    assert "epoch=951" in result
    assert result.startswith("epoch=951 total=0.03918552640613479")


def test_rejects_missing_inflation_rate_attribute():
    with pytest.raises(
        ValidationError, match="result object was missing required 'validator' field"
    ):
        validate_inflation_rate(
            rate_expectation(),
            {"epoch": 951, "foundation": 0.0, "total": 0.03918552640613479},
        )


def test_inflation_rate_epoch_must_be_unsigned():
    with pytest.raises(
        ValidationError, match="result field 'epoch' was not an unsigned integer"
    ):
        validate_inflation_rate(
            rate_expectation(),
            {"epoch": -1, "foundation": 0.0, "total": 0.1, "validator": 0.1},
        )


def test_inflation_rate_total_must_be_number():
    with pytest.raises(ValidationError, match="result field 'total' was not a number"):
        validate_inflation_rate(
            rate_expectation(),
            {"epoch": 1, "foundation": 0.0, "total": "0.1", "validator": 0.1},
        )


def test_validates_null_reward_entry():
    assert validate_inflation_reward(reward_expectation(), [None]) == (
        "rewards=1 nonNullRewards=0"
    )


def test_validates_reward_object_shape():
    result = validate_inflation_reward(
        reward_expectation(),
        [
            {
                "epoch": 951,
                "effectiveSlot": 123,
                "amount": 2500,
                "postBalance": 499999442500,
                "commission": 5,
            }
        ],
    )
    assert result == "rewards=1 nonNullRewards=1"


def test_rejects_missing_reward_attribute():
    with pytest.raises(
        ValidationError, match=r"result\[0\] was missing required 'postBalance' field"
    ):
        validate_inflation_reward(
            reward_expectation(),
            [{"epoch": 951, "effectiveSlot": 123, "amount": 2500}],
        )


def test_rejects_reward_length_mismatch():
    with pytest.raises(
        ValidationError, match="result array length 2 did not match expected length 1"
    ):
        validate_inflation_reward(reward_expectation(), [None, None])


def test_rejects_null_commission():
    with pytest.raises(ValidationError, match=r"result\[0\].commission was not a u64"):
        validate_inflation_reward(
            reward_expectation(),
            [
                {
                    "epoch": 1,
                    "effectiveSlot": 2,
                    "amount": 3,
                    "postBalance": 4,
                    "commission": None,
                }
            ],
        )


def test_rejects_non_object_reward():
    with pytest.raises(
        ValidationError, match=r"result\[0\] was neither null nor an object"
    ):
        validate_inflation_reward(reward_expectation(), [5])