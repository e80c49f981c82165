"""
Values returned by node gateway calls.
"""
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, List, Optional

from google.protobuf.message import DecodeError as ProtoDecodeError

from .. import proto
from .. import type_urls
from ..address import Address
from ..exceptions import EncodingError
from .exceptions import DecodeError


class BroadcastMode(IntEnum):
    """How long a broadcast call waits before returning."""
    BLOCK = proto.BROADCAST_MODE_BLOCK
    SYNC = proto.BROADCAST_MODE_SYNC
    ASYNC = proto.BROADCAST_MODE_ASYNC


class ChainState(str, Enum):
    MOVING = "moving"
    SYNCING = "syncing"
    WAITING_TO_START = "waiting_to_start"


@dataclass(frozen=True)
class ChainStatus:
    """Whether the chain is producing blocks, and the latest height if so."""
    state: ChainState
    block_height: Optional[int] = None

    @classmethod
    def moving(cls, block_height: int) -> "ChainStatus":
        return cls(ChainState.MOVING, block_height)

    @classmethod
    def syncing(cls) -> "ChainStatus":
        return cls(ChainState.SYNCING)

    @classmethod
    def waiting_to_start(cls) -> "ChainStatus":
        return cls(ChainState.WAITING_TO_START)


@dataclass(frozen=True)
class LatestBlock:
    """Latest block as a three-state value; ``block`` is None while waiting to start."""
    state: ChainState
    block: Optional[Any] = None

    @classmethod
    def latest(cls, block) -> "LatestBlock":
        return cls(ChainState.MOVING, block)

    @classmethod
    def syncing(cls, block=None) -> "LatestBlock":
        return cls(ChainState.SYNCING, block)

    @classmethod
    def waiting_to_start(cls) -> "LatestBlock":
        return cls(ChainState.WAITING_TO_START)

    @property
    def height(self) -> Optional[int]:
        return self.block.header.height if self.block is not None else None

    @property
    def chain_id(self) -> Optional[str]:
        return self.block.header.chain_id if self.block is not None else None


@dataclass(frozen=True)
class BaseAccount:
    """Account number, sequence and public key of an on-chain account."""
    address: Address
    account_number: int
    sequence: int
    pubkey: Optional[Any] = None

    @classmethod
    def from_proto(cls, message) -> "BaseAccount":
        try:
            address = Address.from_bech32(message.address)
        except EncodingError as e:
            raise DecodeError(f"Account has an invalid address {message.address!r}: {e}") from e
        return cls(
            address=address,
            account_number=message.account_number,
            sequence=message.sequence,
            pubkey=message.pub_key if message.HasField("pub_key") else None,
        )


class AccountKind(str, Enum):
    """Account types the auth module may return, keyed by type URL."""
    BASE = type_urls.BASE_ACCOUNT_TYPE_URL
    MODULE = type_urls.MODULE_ACCOUNT_TYPE_URL
    CONTINUOUS_VESTING = type_urls.CONTINUOUS_VESTING_ACCOUNT_TYPE_URL
    DELAYED_VESTING = type_urls.DELAYED_VESTING_ACCOUNT_TYPE_URL
    PERIODIC_VESTING = type_urls.PERIODIC_VESTING_ACCOUNT_TYPE_URL
    PERMANENT_LOCKED = type_urls.PERMANENT_LOCKED_ACCOUNT_TYPE_URL


_ACCOUNT_MESSAGES = {
    AccountKind.BASE: proto.BaseAccount,
    AccountKind.MODULE: proto.ModuleAccount,
    AccountKind.CONTINUOUS_VESTING: proto.ContinuousVestingAccount,
    AccountKind.DELAYED_VESTING: proto.DelayedVestingAccount,
    AccountKind.PERIODIC_VESTING: proto.PeriodicVestingAccount,
    AccountKind.PERMANENT_LOCKED: proto.PermanentLockedAccount,
}


@dataclass(frozen=True)
class AccountType:
    """
    A decoded account of one of the known kinds.

    ``message`` is the decoded protobuf for ``kind``. Every kind embeds a
    ``BaseAccount``, which :meth:`get_base_account` extracts.
    """
    kind: AccountKind
    message: Any

    @classmethod
    def decode(cls, account_any) -> "AccountType":
        """
        Decode the ``Any`` returned by the auth ``Account`` query.

        Raises:
            DecodeError: If the type URL is not a known account type or the
                payload does not parse
        """
        try:
            kind = AccountKind(account_any.type_url)
        except ValueError:
            raise DecodeError(f"Unknown account type {account_any.type_url!r}") from None
        message = _ACCOUNT_MESSAGES[kind]()
        try:
            message.ParseFromString(account_any.value)
        except ProtoDecodeError as e:
            raise DecodeError(f"Failed to decode {kind.value}: {e}") from e
        return cls(kind, message)

    def get_base_account(self) -> BaseAccount:
        if self.kind is AccountKind.BASE:
            base = self.message
        elif self.kind is AccountKind.MODULE:
            base = self.message.base_account
        else:
            base = self.message.base_vesting_account.base_account
        return BaseAccount.from_proto(base)


def _events_from_proto(events) -> List[Dict[str, Any]]:
    return [
        {
            "type": event.type,
            "attributes": [(attribute.key, attribute.value) for attribute in event.attributes],
        }
        for event in events
    ]


@dataclass
class TxResponse:
    """
    Outcome of a broadcast or lookup, as reported by the node.

    ``code`` is zero on success. Non-zero codes are scoped by ``codespace``.
    """
    txhash: str = ""
    height: int = 0
    codespace: str = ""
    code: int = 0
    data: str = ""
    raw_log: str = ""
    info: str = ""
    gas_wanted: int = 0
    gas_used: int = 0
    timestamp: str = ""
    events: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.code == 0

    @classmethod
    def from_proto(cls, message) -> "TxResponse":
        return cls(
            txhash=message.txhash,
            height=message.height,
            codespace=message.codespace,
            code=message.code,
            data=message.data,
            raw_log=message.raw_log,
            info=message.info,
            gas_wanted=message.gas_wanted,
            gas_used=message.gas_used,
            timestamp=message.timestamp,
            events=_events_from_proto(message.events),
        )

    def to_proto(self):
        message = proto.TxResponse(
            txhash=self.txhash,
            height=self.height,
            codespace=self.codespace,
            code=self.code,
            data=self.data,
            raw_log=self.raw_log,
            info=self.info,
            gas_wanted=self.gas_wanted,
            gas_used=self.gas_used,
            timestamp=self.timestamp,
        )
        for event in self.events:
            message.events.add(
                type=event["type"],
                attributes=[
                    proto.EventAttribute(key=key, value=value)
                    for key, value in event["attributes"]
                ],
            )
        return message


@dataclass
class SimulationResult:
    """Gas estimate and execution trace from a simulated transaction."""
    gas_wanted: int = 0
    gas_used: int = 0
    log: str = ""
    events: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_proto(cls, message) -> "SimulationResult":
        return cls(
            gas_wanted=message.gas_info.gas_wanted,
            gas_used=message.gas_info.gas_used,
            log=message.result.log,
            events=_events_from_proto(message.result.events),
        )
