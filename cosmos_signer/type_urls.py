"""
Registered protobuf type URLs.
"""

# Public keys
SECP256K1_PUBKEY_TYPE_URL = "/cosmos.crypto.secp256k1.PubKey"
ETHERMINT_PUBKEY_TYPE_URL = "/ethermint.crypto.v1.ethsecp256k1.PubKey"

# Accounts
BASE_ACCOUNT_TYPE_URL = "/cosmos.auth.v1beta1.BaseAccount"
MODULE_ACCOUNT_TYPE_URL = "/cosmos.auth.v1beta1.ModuleAccount"
CONTINUOUS_VESTING_ACCOUNT_TYPE_URL = "/cosmos.vesting.v1beta1.ContinuousVestingAccount"
DELAYED_VESTING_ACCOUNT_TYPE_URL = "/cosmos.vesting.v1beta1.DelayedVestingAccount"
PERIODIC_VESTING_ACCOUNT_TYPE_URL = "/cosmos.vesting.v1beta1.PeriodicVestingAccount"
PERMANENT_LOCKED_ACCOUNT_TYPE_URL = "/cosmos.vesting.v1beta1.PermanentLockedAccount"

# Bank
MSG_SEND_TYPE_URL = "/cosmos.bank.v1beta1.MsgSend"

# Staking
MSG_DELEGATE_TYPE_URL = "/cosmos.staking.v1beta1.MsgDelegate"
MSG_BEGIN_REDELEGATE_TYPE_URL = "/cosmos.staking.v1beta1.MsgBeginRedelegate"
MSG_UNDELEGATE_TYPE_URL = "/cosmos.staking.v1beta1.MsgUndelegate"

# Governance
MSG_SUBMIT_PROPOSAL_TYPE_URL = "/cosmos.gov.v1beta1.MsgSubmitProposal"
MSG_VOTE_TYPE_URL = "/cosmos.gov.v1beta1.MsgVote"
TEXT_PROPOSAL_TYPE_URL = "/cosmos.gov.v1beta1.TextProposal"

# Distribution
MSG_FUND_COMMUNITY_POOL_TYPE_URL = "/cosmos.distribution.v1beta1.MsgFundCommunityPool"
MSG_WITHDRAW_DELEGATOR_REWARD_TYPE_URL = "/cosmos.distribution.v1beta1.MsgWithdrawDelegatorReward"
MSG_WITHDRAW_VALIDATOR_COMMISSION_TYPE_URL = (
    "/cosmos.distribution.v1beta1.MsgWithdrawValidatorCommission"
)

# Crisis
MSG_VERIFY_INVARIANT_TYPE_URL = "/cosmos.crisis.v1beta1.MsgVerifyInvariant"

# IBC
MSG_TRANSFER_TYPE_URL = "/ibc.applications.transfer.v1.MsgTransfer"
