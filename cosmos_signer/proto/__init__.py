"""
Protobuf message classes for the cosmos-sdk wire types.

The message types are declared here as descriptors and registered in a
private descriptor pool, so they never clash with another cosmos protobuf
package loaded in the same process. Field names and numbers follow the
upstream ``.proto`` files. Messages the client only reads (blocks, headers,
commits) declare just the fields it uses; parsing keeps the rest as unknown
fields.
"""
from typing import Iterable, Optional, Sequence, Tuple

from google.protobuf import (
    any_pb2, descriptor_pb2, descriptor_pool, message_factory, timestamp_pb2
)

_F = descriptor_pb2.FieldDescriptorProto

_SCALAR_TYPES = {
    "string": _F.TYPE_STRING,
    "bytes": _F.TYPE_BYTES,
    "bool": _F.TYPE_BOOL,
    "int32": _F.TYPE_INT32,
    "int64": _F.TYPE_INT64,
    "uint32": _F.TYPE_UINT32,
    "uint64": _F.TYPE_UINT64,
}

_POOL = descriptor_pool.DescriptorPool()
_POOL.AddSerializedFile(any_pb2.DESCRIPTOR.serialized_pb)
_POOL.AddSerializedFile(timestamp_pb2.DESCRIPTOR.serialized_pb)

_ANY = "google/protobuf/any.proto"
_TIMESTAMP = "google/protobuf/timestamp.proto"

# (name, number, type) where type is a scalar name, "enum:<full name>" or a
# message full name, optionally preceded by "repeated ".
FieldSpec = Tuple[str, int, str]


def _field(name: str, number: int, type_name: str, oneof_index: int = -1) -> _F:
    field = _F(name=name, number=number, label=_F.LABEL_OPTIONAL)
    if type_name.startswith("repeated "):
        field.label = _F.LABEL_REPEATED
        type_name = type_name[len("repeated "):]
    if type_name in _SCALAR_TYPES:
        field.type = _SCALAR_TYPES[type_name]
    elif type_name.startswith("enum:"):
        field.type = _F.TYPE_ENUM
        field.type_name = "." + type_name[len("enum:"):]
    else:
        field.type = _F.TYPE_MESSAGE
        field.type_name = "." + type_name
    if oneof_index >= 0:
        field.oneof_index = oneof_index
    return field


def _message(
    name: str,
    fields: Iterable[FieldSpec] = (),
    nested: Sequence[descriptor_pb2.DescriptorProto] = (),
    oneof: Optional[Tuple[str, Sequence[FieldSpec]]] = None
) -> descriptor_pb2.DescriptorProto:
    message = descriptor_pb2.DescriptorProto(name=name)
    message.field.extend(_field(*spec) for spec in fields)
    message.nested_type.extend(nested)
    if oneof:
        oneof_name, oneof_fields = oneof
        message.oneof_decl.add(name=oneof_name)
        message.field.extend(_field(*spec, oneof_index=0) for spec in oneof_fields)
    return message


def _enum(name: str, values: Sequence[Tuple[str, int]]) -> descriptor_pb2.EnumDescriptorProto:
    enum = descriptor_pb2.EnumDescriptorProto(name=name)
    for value_name, number in values:
        enum.value.add(name=value_name, number=number)
    return enum


def _add_file(
    name: str,
    package: str,
    messages: Sequence[descriptor_pb2.DescriptorProto],
    dependencies: Sequence[str] = (),
    enums: Sequence[descriptor_pb2.EnumDescriptorProto] = ()
) -> None:
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=name,
        package=package,
        syntax="proto3",
        dependency=list(dependencies),
    )
    file_proto.message_type.extend(messages)
    file_proto.enum_type.extend(enums)
    _POOL.AddSerializedFile(file_proto.SerializeToString())


def _class(full_name: str):
    return message_factory.GetMessageClass(_POOL.FindMessageTypeByName(full_name))


# ---------------------------------------------------------------------------
# Shared base types
# ---------------------------------------------------------------------------

_COIN_FILE = "cosmos/base/v1beta1/coin.proto"
_add_file(_COIN_FILE, "cosmos.base.v1beta1", [
    _message("Coin", [("denom", 1, "string"), ("amount", 2, "string")]),
])

_PAGINATION_FILE = "cosmos/base/query/v1beta1/pagination.proto"
_add_file(_PAGINATION_FILE, "cosmos.base.query.v1beta1", [
    _message("PageRequest", [
        ("key", 1, "bytes"),
        ("offset", 2, "uint64"),
        ("limit", 3, "uint64"),
        ("count_total", 4, "bool"),
        ("reverse", 5, "bool"),
    ]),
    _message("PageResponse", [("next_key", 1, "bytes"), ("total", 2, "uint64")]),
])

_add_file("cosmos/crypto/secp256k1/keys.proto", "cosmos.crypto.secp256k1", [
    _message("PubKey", [("key", 1, "bytes")]),
])

_add_file("ethermint/crypto/v1/ethsecp256k1/keys.proto", "ethermint.crypto.v1.ethsecp256k1", [
    _message("PubKey", [("key", 1, "bytes")]),
])

# ---------------------------------------------------------------------------
# Transactions
# ---------------------------------------------------------------------------

_SIGNING_FILE = "cosmos/tx/signing/v1beta1/signing.proto"
_add_file(_SIGNING_FILE, "cosmos.tx.signing.v1beta1", [], enums=[
    _enum("SignMode", [
        ("SIGN_MODE_UNSPECIFIED", 0),
        ("SIGN_MODE_DIRECT", 1),
        ("SIGN_MODE_TEXTUAL", 2),
        ("SIGN_MODE_DIRECT_AUX", 3),
        ("SIGN_MODE_LEGACY_AMINO_JSON", 127),
        ("SIGN_MODE_EIP_191", 191),
    ]),
])

_TX_FILE = "cosmos/tx/v1beta1/tx.proto"
_add_file(_TX_FILE, "cosmos.tx.v1beta1", [
    _message("Tx", [
        ("body", 1, "cosmos.tx.v1beta1.TxBody"),
        ("auth_info", 2, "cosmos.tx.v1beta1.AuthInfo"),
        ("signatures", 3, "repeated bytes"),
    ]),
    _message("TxRaw", [
        ("body_bytes", 1, "bytes"),
        ("auth_info_bytes", 2, "bytes"),
        ("signatures", 3, "repeated bytes"),
    ]),
    _message("SignDoc", [
        ("body_bytes", 1, "bytes"),
        ("auth_info_bytes", 2, "bytes"),
        ("chain_id", 3, "string"),
        ("account_number", 4, "uint64"),
    ]),
    _message("TxBody", [
        ("messages", 1, "repeated google.protobuf.Any"),
        ("memo", 2, "string"),
        ("timeout_height", 3, "uint64"),
        ("extension_options", 1023, "repeated google.protobuf.Any"),
        ("non_critical_extension_options", 2047, "repeated google.protobuf.Any"),
    ]),
    _message("AuthInfo", [
        ("signer_infos", 1, "repeated cosmos.tx.v1beta1.SignerInfo"),
        ("fee", 2, "cosmos.tx.v1beta1.Fee"),
        ("tip", 3, "cosmos.tx.v1beta1.Tip"),
    ]),
    _message("SignerInfo", [
        ("public_key", 1, "google.protobuf.Any"),
        ("mode_info", 2, "cosmos.tx.v1beta1.ModeInfo"),
        ("sequence", 3, "uint64"),
    ]),
    _message(
        "ModeInfo",
        nested=[_message("Single", [("mode", 1, "enum:cosmos.tx.signing.v1beta1.SignMode")])],
        oneof=("sum", [("single", 1, "cosmos.tx.v1beta1.ModeInfo.Single")]),
    ),
    _message("Fee", [
        ("amount", 1, "repeated cosmos.base.v1beta1.Coin"),
        ("gas_limit", 2, "uint64"),
        ("payer", 3, "string"),
        ("granter", 4, "string"),
    ]),
    _message("Tip", [
        ("amount", 1, "repeated cosmos.base.v1beta1.Coin"),
        ("tipper", 2, "string"),
    ]),
], dependencies=[_ANY, _COIN_FILE, _SIGNING_FILE])

_ABCI_TYPES_FILE = "tendermint/abci/types.proto"
_add_file(_ABCI_TYPES_FILE, "tendermint.abci", [
    _message("Event", [
        ("type", 1, "string"),
        ("attributes", 2, "repeated tendermint.abci.EventAttribute"),
    ]),
    _message("EventAttribute", [
        ("key", 1, "string"),
        ("value", 2, "string"),
        ("index", 3, "bool"),
    ]),
])

_ABCI_FILE = "cosmos/base/abci/v1beta1/abci.proto"
_add_file(_ABCI_FILE, "cosmos.base.abci.v1beta1", [
    _message("TxResponse", [
        ("height", 1, "int64"),
        ("txhash", 2, "string"),
        ("codespace", 3, "string"),
        ("code", 4, "uint32"),
        ("data", 5, "string"),
        ("raw_log", 6, "string"),
        ("logs", 7, "repeated cosmos.base.abci.v1beta1.ABCIMessageLog"),
        ("info", 8, "string"),
        ("gas_wanted", 9, "int64"),
        ("gas_used", 10, "int64"),
        ("tx", 11, "google.protobuf.Any"),
        ("timestamp", 12, "string"),
        ("events", 13, "repeated tendermint.abci.Event"),
    ]),
    _message("ABCIMessageLog", [
        ("msg_index", 1, "uint32"),
        ("log", 2, "string"),
        ("events", 3, "repeated cosmos.base.abci.v1beta1.StringEvent"),
    ]),
    _message("StringEvent", [
        ("type", 1, "string"),
        ("attributes", 2, "repeated cosmos.base.abci.v1beta1.Attribute"),
    ]),
    _message("Attribute", [("key", 1, "string"), ("value", 2, "string")]),
    _message("GasInfo", [("gas_wanted", 1, "uint64"), ("gas_used", 2, "uint64")]),
    _message("Result", [
        ("data", 1, "bytes"),
        ("log", 2, "string"),
        ("events", 3, "repeated tendermint.abci.Event"),
        ("msg_responses", 4, "repeated google.protobuf.Any"),
    ]),
], dependencies=[_ANY, _ABCI_TYPES_FILE])

_add_file("cosmos/tx/v1beta1/service.proto", "cosmos.tx.v1beta1", [
    _message("BroadcastTxRequest", [
        ("tx_bytes", 1, "bytes"),
        ("mode", 2, "enum:cosmos.tx.v1beta1.BroadcastMode"),
    ]),
    _message("BroadcastTxResponse", [("tx_response", 1, "cosmos.base.abci.v1beta1.TxResponse")]),
    _message("SimulateRequest", [("tx", 1, "cosmos.tx.v1beta1.Tx"), ("tx_bytes", 2, "bytes")]),
    _message("SimulateResponse", [
        ("gas_info", 1, "cosmos.base.abci.v1beta1.GasInfo"),
        ("result", 2, "cosmos.base.abci.v1beta1.Result"),
    ]),
    _message("GetTxRequest", [("hash", 1, "string")]),
    _message("GetTxResponse", [
        ("tx", 1, "cosmos.tx.v1beta1.Tx"),
        ("tx_response", 2, "cosmos.base.abci.v1beta1.TxResponse"),
    ]),
], dependencies=[_TX_FILE, _ABCI_FILE], enums=[
    _enum("BroadcastMode", [
        ("BROADCAST_MODE_UNSPECIFIED", 0),
        ("BROADCAST_MODE_BLOCK", 1),
        ("BROADCAST_MODE_SYNC", 2),
        ("BROADCAST_MODE_ASYNC", 3),
    ]),
])

# ---------------------------------------------------------------------------
# Blocks and chain parameters
# ---------------------------------------------------------------------------

_TM_TYPES_FILE = "tendermint/types/types.proto"
_add_file(_TM_TYPES_FILE, "tendermint.types", [
    _message("Header", [
        ("chain_id", 2, "string"),
        ("height", 3, "int64"),
        ("time", 4, "google.protobuf.Timestamp"),
    ]),
    _message("Data", [("txs", 1, "repeated bytes")]),
    _message("Commit", [("height", 1, "int64"), ("round", 2, "int32")]),
    _message("Block", [
        ("header", 1, "tendermint.types.Header"),
        ("data", 2, "tendermint.types.Data"),
        ("last_commit", 4, "tendermint.types.Commit"),
    ]),
], dependencies=[_TIMESTAMP])

_TM_PARAMS_FILE = "tendermint/types/params.proto"
_add_file(_TM_PARAMS_FILE, "tendermint.types", [
    _message("ConsensusParams", [("block", 1, "tendermint.types.BlockParams")]),
    _message("BlockParams", [("max_bytes", 1, "int64"), ("max_gas", 2, "int64")]),
])

_add_file("cosmos/base/tendermint/v1beta1/query.proto", "cosmos.base.tendermint.v1beta1", [
    _message("GetSyncingRequest"),
    _message("GetSyncingResponse", [("syncing", 1, "bool")]),
    _message("GetLatestBlockRequest"),
    _message("GetLatestBlockResponse", [("block", 2, "tendermint.types.Block")]),
    _message("GetBlockByHeightRequest", [("height", 1, "int64")]),
    _message("GetBlockByHeightResponse", [("block", 2, "tendermint.types.Block")]),
], dependencies=[_TM_TYPES_FILE])

_add_file("cosmos/consensus/v1/query.proto", "cosmos.consensus.v1", [
    _message("QueryParamsRequest"),
    _message("QueryParamsResponse", [("params", 1, "tendermint.types.ConsensusParams")]),
], dependencies=[_TM_PARAMS_FILE])

_add_file("cosmos/params/v1beta1/query.proto", "cosmos.params.v1beta1", [
    _message("ParamChange", [("subspace", 1, "string"), ("key", 2, "string"), ("value", 3, "string")]),
    _message("QueryParamsRequest", [("subspace", 1, "string"), ("key", 2, "string")]),
    _message("QueryParamsResponse", [("param", 1, "cosmos.params.v1beta1.ParamChange")]),
])

# ---------------------------------------------------------------------------
# Accounts and balances
# ---------------------------------------------------------------------------

_AUTH_FILE = "cosmos/auth/v1beta1/auth.proto"
_add_file(_AUTH_FILE, "cosmos.auth.v1beta1", [
    _message("BaseAccount", [
        ("address", 1, "string"),
        ("pub_key", 2, "google.protobuf.Any"),
        ("account_number", 3, "uint64"),
        ("sequence", 4, "uint64"),
    ]),
    _message("ModuleAccount", [
        ("base_account", 1, "cosmos.auth.v1beta1.BaseAccount"),
        ("name", 2, "string"),
        ("permissions", 3, "repeated string"),
    ]),
    _message("QueryAccountRequest", [("address", 1, "string")]),
    _message("QueryAccountResponse", [("account", 1, "google.protobuf.Any")]),
], dependencies=[_ANY])

_add_file("cosmos/vesting/v1beta1/vesting.proto", "cosmos.vesting.v1beta1", [
    _message("BaseVestingAccount", [
        ("base_account", 1, "cosmos.auth.v1beta1.BaseAccount"),
        ("original_vesting", 2, "repeated cosmos.base.v1beta1.Coin"),
        ("delegated_free", 3, "repeated cosmos.base.v1beta1.Coin"),
        ("delegated_vesting", 4, "repeated cosmos.base.v1beta1.Coin"),
        ("end_time", 5, "int64"),
    ]),
    _message("ContinuousVestingAccount", [
        ("base_vesting_account", 1, "cosmos.vesting.v1beta1.BaseVestingAccount"),
        ("start_time", 2, "int64"),
    ]),
    _message("DelayedVestingAccount", [
        ("base_vesting_account", 1, "cosmos.vesting.v1beta1.BaseVestingAccount"),
    ]),
    _message("Period", [
        ("length", 1, "int64"),
        ("amount", 2, "repeated cosmos.base.v1beta1.Coin"),
    ]),
    _message("PeriodicVestingAccount", [
        ("base_vesting_account", 1, "cosmos.vesting.v1beta1.BaseVestingAccount"),
        ("start_time", 2, "int64"),
        ("vesting_periods", 3, "repeated cosmos.vesting.v1beta1.Period"),
    ]),
    _message("PermanentLockedAccount", [
        ("base_vesting_account", 1, "cosmos.vesting.v1beta1.BaseVestingAccount"),
    ]),
], dependencies=[_AUTH_FILE, _COIN_FILE])

_add_file("cosmos/bank/v1beta1/bank.proto", "cosmos.bank.v1beta1", [
    _message("MsgSend", [
        ("from_address", 1, "string"),
        ("to_address", 2, "string"),
        ("amount", 3, "repeated cosmos.base.v1beta1.Coin"),
    ]),
    _message("QueryAllBalancesRequest", [
        ("address", 1, "string"),
        ("pagination", 2, "cosmos.base.query.v1beta1.PageRequest"),
    ]),
    _message("QueryAllBalancesResponse", [
        ("balances", 1, "repeated cosmos.base.v1beta1.Coin"),
        ("pagination", 2, "cosmos.base.query.v1beta1.PageResponse"),
    ]),
], dependencies=[_COIN_FILE, _PAGINATION_FILE])

# ---------------------------------------------------------------------------
# Other messages built by the client helpers
# ---------------------------------------------------------------------------

_add_file("cosmos/crisis/v1beta1/tx.proto", "cosmos.crisis.v1beta1", [
    _message("MsgVerifyInvariant", [
        ("sender", 1, "string"),
        ("invariant_module_name", 2, "string"),
        ("invariant_route", 3, "string"),
    ]),
])

_add_file("cosmos/staking/v1beta1/tx.proto", "cosmos.staking.v1beta1", [
    _message("MsgDelegate", [
        ("delegator_address", 1, "string"),
        ("validator_address", 2, "string"),
        ("amount", 3, "cosmos.base.v1beta1.Coin"),
    ]),
    _message("MsgBeginRedelegate", [
        ("delegator_address", 1, "string"),
        ("validator_src_address", 2, "string"),
        ("validator_dst_address", 3, "string"),
        ("amount", 4, "cosmos.base.v1beta1.Coin"),
    ]),
    _message("MsgUndelegate", [
        ("delegator_address", 1, "string"),
        ("validator_address", 2, "string"),
        ("amount", 3, "cosmos.base.v1beta1.Coin"),
    ]),
], dependencies=[_COIN_FILE])

_add_file("cosmos/distribution/v1beta1/tx.proto", "cosmos.distribution.v1beta1", [
    _message("MsgWithdrawDelegatorReward", [
        ("delegator_address", 1, "string"),
        ("validator_address", 2, "string"),
    ]),
    _message("MsgWithdrawValidatorCommission", [("validator_address", 1, "string")]),
    _message("MsgFundCommunityPool", [
        ("amount", 1, "repeated cosmos.base.v1beta1.Coin"),
        ("depositor", 2, "string"),
    ]),
], dependencies=[_COIN_FILE])

_add_file("cosmos/gov/v1beta1/tx.proto", "cosmos.gov.v1beta1", [
    _message("MsgSubmitProposal", [
        ("content", 1, "google.protobuf.Any"),
        ("initial_deposit", 2, "repeated cosmos.base.v1beta1.Coin"),
        ("proposer", 3, "string"),
    ]),
    _message("MsgVote", [
        ("proposal_id", 1, "uint64"),
        ("voter", 2, "string"),
        ("option", 3, "enum:cosmos.gov.v1beta1.VoteOption"),
    ]),
    _message("TextProposal", [("title", 1, "string"), ("description", 2, "string")]),
], dependencies=[_COIN_FILE, _ANY], enums=[
    _enum("VoteOption", [
        ("VOTE_OPTION_UNSPECIFIED", 0),
        ("VOTE_OPTION_YES", 1),
        ("VOTE_OPTION_ABSTAIN", 2),
        ("VOTE_OPTION_NO", 3),
        ("VOTE_OPTION_NO_WITH_VETO", 4),
    ]),
])

_IBC_CLIENT_FILE = "ibc/core/client/v1/client.proto"
_add_file(_IBC_CLIENT_FILE, "ibc.core.client.v1", [
    _message("Height", [("revision_number", 1, "uint64"), ("revision_height", 2, "uint64")]),
])

_add_file("ibc/applications/transfer/v1/tx.proto", "ibc.applications.transfer.v1", [
    _message("MsgTransfer", [
        ("source_port", 1, "string"),
        ("source_channel", 2, "string"),
        ("token", 3, "cosmos.base.v1beta1.Coin"),
        ("sender", 4, "string"),
        ("receiver", 5, "string"),
        ("timeout_height", 6, "ibc.core.client.v1.Height"),
        ("timeout_timestamp", 7, "uint64"),
        ("memo", 8, "string"),
    ]),
], dependencies=[_COIN_FILE, _IBC_CLIENT_FILE])


# ---------------------------------------------------------------------------
# Message classes
# ---------------------------------------------------------------------------

Any = _class("google.protobuf.Any")
Coin = _class("cosmos.base.v1beta1.Coin")
PageRequest = _class("cosmos.base.query.v1beta1.PageRequest")
PageResponse = _class("cosmos.base.query.v1beta1.PageResponse")

Secp256k1PubKey = _class("cosmos.crypto.secp256k1.PubKey")
EthSecp256k1PubKey = _class("ethermint.crypto.v1.ethsecp256k1.PubKey")

Tx = _class("cosmos.tx.v1beta1.Tx")
TxRaw = _class("cosmos.tx.v1beta1.TxRaw")
SignDoc = _class("cosmos.tx.v1beta1.SignDoc")
TxBody = _class("cosmos.tx.v1beta1.TxBody")
AuthInfo = _class("cosmos.tx.v1beta1.AuthInfo")
SignerInfo = _class("cosmos.tx.v1beta1.SignerInfo")
ModeInfo = _class("cosmos.tx.v1beta1.ModeInfo")
ModeInfoSingle = _class("cosmos.tx.v1beta1.ModeInfo.Single")
Fee = _class("cosmos.tx.v1beta1.Fee")
Tip = _class("cosmos.tx.v1beta1.Tip")

Event = _class("tendermint.abci.Event")
EventAttribute = _class("tendermint.abci.EventAttribute")
TxResponse = _class("cosmos.base.abci.v1beta1.TxResponse")
GasInfo = _class("cosmos.base.abci.v1beta1.GasInfo")
Result = _class("cosmos.base.abci.v1beta1.Result")

BroadcastTxRequest = _class("cosmos.tx.v1beta1.BroadcastTxRequest")
BroadcastTxResponse = _class("cosmos.tx.v1beta1.BroadcastTxResponse")
SimulateRequest = _class("cosmos.tx.v1beta1.SimulateRequest")
SimulateResponse = _class("cosmos.tx.v1beta1.SimulateResponse")
GetTxRequest = _class("cosmos.tx.v1beta1.GetTxRequest")
GetTxResponse = _class("cosmos.tx.v1beta1.GetTxResponse")

Header = _class("tendermint.types.Header")
Block = _class("tendermint.types.Block")
Commit = _class("tendermint.types.Commit")
ConsensusParams = _class("tendermint.types.ConsensusParams")
TendermintBlockParams = _class("tendermint.types.BlockParams")

GetSyncingRequest = _class("cosmos.base.tendermint.v1beta1.GetSyncingRequest")
GetSyncingResponse = _class("cosmos.base.tendermint.v1beta1.GetSyncingResponse")
GetLatestBlockRequest = _class("cosmos.base.tendermint.v1beta1.GetLatestBlockRequest")
GetLatestBlockResponse = _class("cosmos.base.tendermint.v1beta1.GetLatestBlockResponse")
GetBlockByHeightRequest = _class("cosmos.base.tendermint.v1beta1.GetBlockByHeightRequest")
GetBlockByHeightResponse = _class("cosmos.base.tendermint.v1beta1.GetBlockByHeightResponse")

ConsensusParamsRequest = _class("cosmos.consensus.v1.QueryParamsRequest")
ConsensusParamsResponse = _class("cosmos.consensus.v1.QueryParamsResponse")
ParamChange = _class("cosmos.params.v1beta1.ParamChange")
LegacyParamsRequest = _class("cosmos.params.v1beta1.QueryParamsRequest")
LegacyParamsResponse = _class("cosmos.params.v1beta1.QueryParamsResponse")

BaseAccount = _class("cosmos.auth.v1beta1.BaseAccount")
ModuleAccount = _class("cosmos.auth.v1beta1.ModuleAccount")
QueryAccountRequest = _class("cosmos.auth.v1beta1.QueryAccountRequest")
QueryAccountResponse = _class("cosmos.auth.v1beta1.QueryAccountResponse")

BaseVestingAccount = _class("cosmos.vesting.v1beta1.BaseVestingAccount")
ContinuousVestingAccount = _class("cosmos.vesting.v1beta1.ContinuousVestingAccount")
DelayedVestingAccount = _class("cosmos.vesting.v1beta1.DelayedVestingAccount")
Period = _class("cosmos.vesting.v1beta1.Period")
PeriodicVestingAccount = _class("cosmos.vesting.v1beta1.PeriodicVestingAccount")
PermanentLockedAccount = _class("cosmos.vesting.v1beta1.PermanentLockedAccount")

MsgSend = _class("cosmos.bank.v1beta1.MsgSend")
QueryAllBalancesRequest = _class("cosmos.bank.v1beta1.QueryAllBalancesRequest")
QueryAllBalancesResponse = _class("cosmos.bank.v1beta1.QueryAllBalancesResponse")

MsgDelegate = _class("cosmos.staking.v1beta1.MsgDelegate")
MsgBeginRedelegate = _class("cosmos.staking.v1beta1.MsgBeginRedelegate")
MsgUndelegate = _class("cosmos.staking.v1beta1.MsgUndelegate")

MsgWithdrawDelegatorReward = _class("cosmos.distribution.v1beta1.MsgWithdrawDelegatorReward")
MsgWithdrawValidatorCommission = _class("cosmos.distribution.v1beta1.MsgWithdrawValidatorCommission")
MsgFundCommunityPool = _class("cosmos.distribution.v1beta1.MsgFundCommunityPool")

MsgSubmitProposal = _class("cosmos.gov.v1beta1.MsgSubmitProposal")
MsgVote = _class("cosmos.gov.v1beta1.MsgVote")
TextProposal = _class("cosmos.gov.v1beta1.TextProposal")

MsgVerifyInvariant = _class("cosmos.crisis.v1beta1.MsgVerifyInvariant")
Height = _class("ibc.core.client.v1.Height")
MsgTransfer = _class("ibc.applications.transfer.v1.MsgTransfer")

# Enum values used on the wire
SIGN_MODE_DIRECT = 1
BROADCAST_MODE_BLOCK = 1
BROADCAST_MODE_SYNC = 2
BROADCAST_MODE_ASYNC = 3
