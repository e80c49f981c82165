"""
Data models for transactions: coins, fees, messages and signing context.
"""
from enum import IntEnum
from typing import Any, List, Optional

from google.protobuf.message import EncodeError as ProtoEncodeError
from google.protobuf.message import Message as ProtoMessage
from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import proto
from .address import Address
from .exceptions import EncodeError, ParseError

MAX_COIN_AMOUNT = 2 ** 256 - 1
MAX_U64 = 2 ** 64 - 1


class Coin(BaseModel):
    """An amount of a single denomination, e.g. ``100uatom``."""
    model_config = ConfigDict(frozen=True)

    amount: int = Field(..., ge=0, le=MAX_COIN_AMOUNT)
    denom: str

    @classmethod
    def from_str(cls, value: str) -> "Coin":
        """
        Parse ``"<amount><denom>"``.

        The amount is everything before the first alphabetic character.

        Raises:
            ParseError: If there is no denom, or the amount is not a
                non-negative 256-bit integer
        """
        text = value.strip()
        split = next((i for i, char in enumerate(text) if char.isalpha()), None)
        if split is None:
            raise ParseError(f"Coin {value!r} has no denom")
        amount_text, denom = text[:split], text[split:]
        if not amount_text or not (amount_text.isascii() and amount_text.isdigit()):
            raise ParseError(f"Coin {value!r} has an invalid amount")
        amount = int(amount_text)
        if amount > MAX_COIN_AMOUNT:
            raise ParseError(f"Coin {value!r} amount does not fit in 256 bits")
        return cls(amount=amount, denom=denom)

    @classmethod
    def from_proto(cls, message) -> "Coin":
        try:
            amount = int(message.amount) if message.amount else 0
        except ValueError as e:
            raise ParseError(f"Coin amount {message.amount!r} is not an integer") from e
        return cls(amount=amount, denom=message.denom)

    def to_proto(self):
        return proto.Coin(denom=self.denom, amount=str(self.amount))

    def __str__(self) -> str:
        return f"{self.amount}{self.denom}"


def _parse_address(value: Any) -> Any:
    if isinstance(value, str):
        return Address.from_str(value) if value else None
    return value


class Fee(BaseModel):
    """
    Transaction fee: coins paid, gas limit and optional fee payer/granter.

    An empty ``amount`` means a zero fee.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    amount: List[Coin] = Field(default_factory=list)
    gas_limit: int = Field(0, ge=0, le=MAX_U64)
    payer: Optional[Address] = None
    granter: Optional[str] = None

    @field_validator("payer", mode="before")
    @classmethod
    def _payer_from_str(cls, value):
        return _parse_address(value)

    @field_validator("granter", mode="before")
    @classmethod
    def _empty_granter(cls, value):
        return value or None

    @classmethod
    def from_proto(cls, message) -> "Fee":
        return cls(
            amount=[Coin.from_proto(coin) for coin in message.amount],
            gas_limit=message.gas_limit,
            payer=message.payer,
            granter=message.granter,
        )

    def to_proto(self):
        return proto.Fee(
            amount=[coin.to_proto() for coin in self.amount],
            gas_limit=self.gas_limit,
            payer=str(self.payer) if self.payer else "",
            granter=self.granter or "",
        )


class Tip(BaseModel):
    """Tip paid to the fee payer, in any denomination."""
    amount: List[Coin] = Field(default_factory=list)
    tipper: str = ""

    def to_proto(self):
        return proto.Tip(amount=[coin.to_proto() for coin in self.amount], tipper=self.tipper)


class Msg(BaseModel):
    """
    A chain message: its registered type URL plus the encoded protobuf body.

    The body is encoded once when the message is created and never
    inspected afterwards.
    """
    model_config = ConfigDict(frozen=True)

    type_url: str
    value: bytes

    @classmethod
    def new(cls, type_url: str, message: ProtoMessage) -> "Msg":
        """
        Encode ``message`` and pair it with ``type_url``.

        Raises:
            EncodeError: If the message cannot be serialized
        """
        try:
            value = message.SerializeToString(deterministic=True)
        except ProtoEncodeError as e:
            raise EncodeError(f"Failed to encode {type_url}: {e}") from e
        return cls(type_url=type_url, value=value)

    @classmethod
    def from_any(cls, message) -> "Msg":
        return cls(type_url=message.type_url, value=message.value)

    def to_any(self):
        return proto.Any(type_url=self.type_url, value=self.value)


class MessageArgs(BaseModel):
    """Account and chain state needed to sign one transaction."""
    sequence: int = Field(..., ge=0, le=MAX_U64)
    account_number: int = Field(..., ge=0, le=MAX_U64)
    chain_id: str
    fee: Fee
    tip: Optional[Tip] = None
    timeout_height: int = Field(0, ge=0, le=MAX_U64)


class BlockParams(BaseModel):
    """Consensus block limits. ``max_gas`` of None means unlimited."""
    max_bytes: int
    max_gas: Optional[int] = None


class VoteOption(IntEnum):
    """Governance vote choices, numbered as on the wire."""
    UNSPECIFIED = 0
    YES = 1
    ABSTAIN = 2
    NO = 3
    NO_WITH_VETO = 4
