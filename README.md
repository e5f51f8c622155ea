# rpccompat

`rpccompat` checks the `result` field of Solana JSON-RPC responses. Each
supported RPC method has an expectation class and a validator function. You
describe what a compatible result must contain, and the validator either
returns a short one-line summary or raises `ValidationError`. The error
message names the field that failed.

## Installation

```
pip install .
```

The package has no runtime dependencies. To install the test tools as well:

```
pip install ".[test]"
```

## Usage

```python
from rpccompat.common import ValidationError
from rpccompat.context import BalanceExpectation, validate_balance

expectation = BalanceExpectation(
    required_result_attributes=["context", "value"],
    required_context_attributes=["apiVersion", "slot"],
    expected_value=None,
)

result = {"context": {"apiVersion": "3.1.11", "slot": 1}, "value": 123}

try:
    print(validate_balance(expectation, result))   # balance=123
except ValidationError as error:
    print(f"incompatible: {error}")
```

Pass as `result` the decoded JSON value of the response's `result` field, as
`json.loads` produces it.

## Validators by module

| Module | Expectation classes | Validators |
| --- | --- | --- |
| `rpccompat.accounts` | `AccountInfoExpectation` | `validate_account_info`, `validate_account_data` |
| `rpccompat.multiple_accounts` | `MultipleAccountsExpectation` | `validate_multiple_accounts` |
| `rpccompat.program_accounts` | `ProgramAccountsExpectation` | `validate_program_accounts` |
| `rpccompat.context` | `BalanceExpectation`, `LatestBlockhashExpectation` | `validate_balance`, `validate_latest_blockhash` |
| `rpccompat.ledger` | `BlockSnapshotExpectation`, `BlocksSnapshotExpectation`, `BlocksWithLimitSnapshotExpectation`, `GenesisHashExpectation` | `validate_block`, `validate_blocks`, `validate_blocks_with_limit`, `validate_genesis_hash` |
| `rpccompat.commitment` | `BlockCommitmentExpectation` | `validate_block_commitment` |
| `rpccompat.block_production` | `BlockProductionExpectation` | `validate_block_production` |
| `rpccompat.scalars` | `BlockHeightExpectation`, `BlockTimeExpectation`, `FirstAvailableBlockExpectation`, `MaxRetransmitSlotExpectation`, `MaxShredInsertSlotExpectation`, `StringResultExpectation` | `validate_block_height`, `validate_block_time`, `validate_first_available_block`, `validate_max_retransmit_slot`, `validate_max_shred_insert_slot`, `validate_health` |
| `rpccompat.rent` | `MinimumBalanceForRentExemptionExpectation` | `validate_minimum_balance_for_rent_exemption` |
| `rpccompat.fees` | `FeeForMessageExpectation` | `validate_fee_for_message` |
| `rpccompat.identity` | `IdentityExpectation` | `validate_identity` |
| `rpccompat.inflation` | `InflationGovernorExpectation`, `InflationRateExpectation`, `InflationRewardExpectation` | `validate_inflation_governor`, `validate_inflation_rate`, `validate_inflation_reward` |
| `rpccompat.listings` | `ClusterNodesExpectation`, `LeaderScheduleExpectation`, `LargestAccountsExpectation`, `RecentPerformanceSamplesExpectation`, `RecentPrioritizationFeesExpectation` | `validate_cluster_nodes`, `validate_leader_schedule`, `validate_largest_accounts`, `validate_recent_performance_samples`, `validate_recent_prioritization_fees` |

Each validator accepts only its own expectation class. Given any other
expectation, it raises `ValidationError`.

`rpccompat.common` holds `ValidationError` and the small checking helpers the
validators share, such as `expect_object`, `expect_u64`, `require_attributes`
and `validate_context`.

## Rules that apply to all validators

- Integers must be non-negative and fit in 64 bits. Booleans never count as
  numbers.
- Required attributes are checked for presence first. Types and values are
  checked after that.
- Snapshot validators (`validate_block`, `validate_blocks`,
  `validate_blocks_with_limit`, `validate_inflation_governor`) need the whole
  result to equal the expected value. The comparison is strict, so `1` and
  `1.0` are different, and so are `true` and `1`.
- `validate_leader_schedule` visits validator identities in sorted key order.
  The identity that sorts first is reported as `firstIdentity`.

## What the package does not do

- It sends no RPC requests and reads no fixture files. You fetch the
  responses and build the expectations yourself.
- It has no command-line tool.
- It has no validators for `getEpochInfo`, `getEpochSchedule` or
  `getHighestSnapshotSlot`.

## Running the tests

```
pytest
```