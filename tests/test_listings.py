import pytest

from rpccompat.common import ValidationError
from rpccompat.listings import (
    ClusterNodesExpectation,
    LargestAccountsExpectation,
    LeaderScheduleExpectation,
    RecentPerformanceSamplesExpectation,
    RecentPrioritizationFeesExpectation,
    validate_cluster_nodes,
    validate_largest_accounts,
    validate_leader_schedule,
    validate_recent_performance_samples,
    validate_recent_prioritization_fees,
)


def cluster_expectation():
    return ClusterNodesExpectation(
        minimum_result_count=1,
        required_node_attributes=[
            "featureSet", "gossip", "pubkey", "pubsub", "rpc", "serveRepair",
            "shredVersion", "tpu", "tpuForwards", "tpuForwardsQuic", "tpuQuic",
            "tpuVote", "tvu", "version",
        ],
        required_string_attributes=[
            "gossip", "pubkey", "serveRepair", "tpu", "tpuForwards",
            "tpuForwardsQuic", "tpuQuic", "tpuVote", "tvu", "version",
        ],
        nullable_string_attributes=["pubsub", "rpc"],
        required_u64_attributes=["featureSet", "shredVersion"],
    )


def cluster_node(**overrides):
    node = {
        "featureSet": 1,
        "gossip": "10.0.0.1:8001",
        "pubkey": "node-1",
        "pubsub": None,
        "rpc": "10.0.0.1:8899",
        "serveRepair": "10.0.0.1:8002",
        "shredVersion": 2,
        "tpu": "10.0.0.1:8856",
        "tpuForwards": "10.0.0.1:8857",
        "tpuForwardsQuic": "10.0.0.1:8863",
        "tpuQuic": "10.0.0.1:8862",
        "tpuVote": "10.0.0.1:8858",
        "tvu": "10.0.0.1:8000",
        "version": "3.1.11",
    }
    node.update(overrides)
    return node


def test_validates_cluster_nodes_shape():
    assert validate_cluster_nodes(cluster_expectation(), [cluster_node()]) == (
        "nodes=1 firstPubkey=node-1"
    )


def test_rejects_empty_cluster_nodes_array():
    with pytest.raises(ValidationError, match="result array must contain at least 1 element"):
        validate_cluster_nodes(cluster_expectation(), [])


def test_rejects_nullable_field_of_wrong_type():
    with pytest.raises(ValidationError, match=r"result\[0\]\.rpc was neither null nor a string"):
        validate_cluster_nodes(cluster_expectation(), [cluster_node(rpc=5)])


def test_rejects_non_u64_feature_set():
    with pytest.raises(ValidationError, match=r"result\[0\]\.featureSet was not a u64"):
        validate_cluster_nodes(cluster_expectation(), [cluster_node(featureSet=-1)])


def test_cluster_nodes_wrong_expectation():
    with pytest.raises(ValidationError, match="getClusterNodes expected a clusterNodes validator"):
        validate_cluster_nodes(LeaderScheduleExpectation(1), [])


def test_validates_leader_schedule_shape():
    result = validate_leader_schedule(
        LeaderScheduleExpectation(minimum_validator_count=1),
        {"validator-1": [0, 1, 2, 3], "validator-2": [10, 11]},
    )
    assert result == "validators=2 firstIdentity=validator-1 firstScheduleLength=4"


def test_leader_schedule_first_identity_is_sorted():
    result = validate_leader_schedule(
        LeaderScheduleExpectation(minimum_validator_count=1),
        {"zeta": [1], "alpha": [0, 1, 2]},
    )
    assert result == "validators=2 firstIdentity=alpha firstScheduleLength=3"


def test_rejects_non_numeric_slot_index():
    with pytest.raises(ValidationError, match=r"result\.validator-1\[1\] was not a u64"):
        validate_leader_schedule(
            LeaderScheduleExpectation(minimum_validator_count=1),
            {"validator-1": [0, "1"]},
        )


def test_rejects_too_few_leader_entries():
    with pytest.raises(ValidationError) as info:
        validate_leader_schedule(LeaderScheduleExpectation(minimum_validator_count=2), {"a": []})
    assert str(info.value) == (
        "result object must contain at least 2 validator entries , received 1"
    )


def test_rejects_empty_identity_key():
    with pytest.raises(ValidationError, match="empty validator identity key"):
        validate_leader_schedule(LeaderScheduleExpectation(1), {"": [0]})


def largest_expectation():
    return LargestAccountsExpectation(
        minimum_result_count=1,
        required_result_attributes=["context", "value"],
        required_context_attributes=["slot"],
        required_value_attributes=["address", "lamports"],
    )


ADDRESS = "ExampleAccount111111111111111111111111111111"


def test_validates_largest_accounts_shape():
    result = validate_largest_accounts(
        largest_expectation(),
        {"context": {"slot": 54}, "value": [{"address": ADDRESS, "lamports": 999974}]},
    )
    assert result == "accounts=1"


def test_rejects_missing_largest_account_field():
    with pytest.raises(
        ValidationError, match=r"result\.value\[0\] was missing required 'lamports' field"
    ):
        validate_largest_accounts(
            largest_expectation(),
            {"context": {"slot": 54}, "value": [{"address": ADDRESS}]},
        )


def test_rejects_largest_accounts_below_minimum():
    with pytest.raises(
        ValidationError, match="result.value length 0 was smaller than the required minimum 1"
    ):
        validate_largest_accounts(largest_expectation(), {"context": {"slot": 54}, "value": []})


def samples_expectation():
    return RecentPerformanceSamplesExpectation(
        minimum_result_count=1,
        required_sample_attributes=[
            "numNonVoteTransactions", "numSlots", "numTransactions", "samplePeriodSecs", "slot",
        ],
    )


def test_validates_recent_performance_samples_shape():
    result = validate_recent_performance_samples(
        samples_expectation(),
        [{"numNonVoteTransactions": 10, "numSlots": 2, "numTransactions": 12,
          "samplePeriodSecs": 60, "slot": 99}],
    )
    assert result == "samples=1"


def test_rejects_missing_sample_field():
    with pytest.raises(ValidationError, match=r"result\[0\] was missing required 'slot' field"):
        validate_recent_performance_samples(
            samples_expectation(),
            [{"numNonVoteTransactions": 10, "numSlots": 2, "numTransactions": 12,
              "samplePeriodSecs": 60}],
        )


def fees_expectation():
    return RecentPrioritizationFeesExpectation(
        minimum_result_count=1, required_fee_attributes=["prioritizationFee", "slot"]
    )


def test_validates_recent_prioritization_fees_shape():
    result = validate_recent_prioritization_fees(
        fees_expectation(), [{"prioritizationFee": 0, "slot": 99}]
    )
    assert result == "fees=1"


def test_rejects_missing_fee_field():
    with pytest.raises(
        ValidationError, match=r"result\[0\] was missing required 'prioritizationFee' field"
    ):
        validate_recent_prioritization_fees(fees_expectation(), [{"slot": 99}])


def test_rejects_non_u64_fee_field():
    with pytest.raises(ValidationError, match=r"result\[0\]\.prioritizationFee was not a u64"):
        validate_recent_prioritization_fees(
            fees_expectation(), [{"prioritizationFee": 1.5, "slot": 99}]
        )