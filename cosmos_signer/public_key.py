"""
secp256k1 public keys for the Cosmos and Ethermint key families.

Both families store a 33-byte compressed point and a bech32 prefix. They
differ only in how the account address is derived and in the protobuf type
URL the key is wrapped in when it goes on the wire.
"""
import base64
import binascii
from typing import Optional, Protocol

import coincurve
from eth_utils import to_checksum_address

from . import bech32_codec
from .address import Address
from .ec_constants import COMPRESSED_PUBLIC_KEY_LENGTH
from .exceptions import (
    Base64DecodeError, Bech32InvalidEncoding, Bech32WrongLength,
    BytesDecodeErrorWrongLength, CurveError
)
from .proto import Any as AnyProto, EthSecp256k1PubKey, Secp256k1PubKey
from .type_urls import ETHERMINT_PUBKEY_TYPE_URL, SECP256K1_PUBKEY_TYPE_URL
from .utils import (
    bytes_to_hex_str, hex_str_to_bytes, is_hex, keccak256, ripemd160, sha256,
    validate_prefix
)

DEFAULT_PUBLIC_KEY_PREFIX = "cosmospub"

# Amino prefix for a secp256k1 public key
AMINO_PUBKEY_PREFIX = bytes.fromhex("eb5ae98721")
AMINO_PUBKEY_LENGTH = len(AMINO_PUBKEY_PREFIX) + COMPRESSED_PUBLIC_KEY_LENGTH


class PublicKey(Protocol):
    """Capabilities shared by both public key families."""

    prefix: str

    def as_bytes(self) -> bytes: ...

    def to_address(self) -> Address: ...

    def to_address_with_prefix(self, prefix: str) -> Address: ...

    def to_bech32(self, prefix: Optional[str] = None) -> str: ...

    def to_amino_bytes(self) -> bytes: ...

    def to_any(self) -> AnyProto: ...


def _validate_point(data: bytes) -> bytes:
    data = bytes(data)
    if len(data) != COMPRESSED_PUBLIC_KEY_LENGTH:
        raise BytesDecodeErrorWrongLength(len(data), str(COMPRESSED_PUBLIC_KEY_LENGTH))
    try:
        coincurve.PublicKey(data)
    except ValueError as e:
        raise CurveError(f"Not a valid compressed secp256k1 point: {e}") from e
    return data


def _address_prefix(key_prefix: str) -> str:
    # "cosmospub" -> "cosmos", "evmospub" -> "evmos"
    if key_prefix.endswith("pub") and len(key_prefix) > len("pub"):
        return key_prefix[:-len("pub")]
    return key_prefix


def _amino_bech32(prefix: str, data: bytes) -> str:
    return bech32_codec.encode(validate_prefix(prefix), AMINO_PUBKEY_PREFIX + data)


def _parse_amino_bech32(value: str):
    hrp, payload, variant = bech32_codec.decode(value)
    if variant is not bech32_codec.Variant.BECH32:
        raise Bech32InvalidEncoding(f"Public key {value!r} uses bech32m, expected bech32")
    if len(payload) != AMINO_PUBKEY_LENGTH:
        raise Bech32WrongLength(
            f"Public key payload is {len(payload)} bytes, expected {AMINO_PUBKEY_LENGTH}"
        )
    if payload[:len(AMINO_PUBKEY_PREFIX)] != AMINO_PUBKEY_PREFIX:
        raise Bech32InvalidEncoding("Public key payload is missing the amino secp256k1 prefix")
    return hrp, payload[len(AMINO_PUBKEY_PREFIX):]


def _parse_text(value: str):
    """
    Return (prefix or None, key bytes) for a textual public key.

    Hex is tried first since hex text may contain the bech32 separator.
    Single-case text with a separator is bech32, anything else base64.
    """
    value = value.strip()
    if is_hex(value):
        return None, hex_str_to_bytes(value)
    single_case = value.lower() == value or value.upper() == value
    if bech32_codec.SEPARATOR in value and single_case:
        return _parse_amino_bech32(value)
    try:
        return None, base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as e:
        raise Base64DecodeError(f"Public key is not valid base64: {e}") from e


class CosmosPublicKey:
    """
    Public key of the standard Cosmos family.

    The address is ``RIPEMD160(SHA256(compressed key))``.
    """

    __slots__ = ("_data", "prefix")

    def __init__(self, data: bytes, prefix: str = DEFAULT_PUBLIC_KEY_PREFIX):
        self._data = _validate_point(data)
        self.prefix = validate_prefix(prefix)

    @classmethod
    def from_bytes(cls, data: bytes, prefix: str = DEFAULT_PUBLIC_KEY_PREFIX) -> "CosmosPublicKey":
        return cls(data, prefix)

    @classmethod
    def from_bech32(cls, value: str) -> "CosmosPublicKey":
        hrp, data = _parse_amino_bech32(value)
        return cls(data, hrp)

    @classmethod
    def from_str(cls, value: str, prefix: str = DEFAULT_PUBLIC_KEY_PREFIX) -> "CosmosPublicKey":
        """Parse bech32, 33-byte hex or 33-byte base64 text."""
        parsed_prefix, data = _parse_text(value)
        return cls(data, parsed_prefix or prefix)

    def as_bytes(self) -> bytes:
        return self._data

    def to_address(self) -> Address:
        return self.to_address_with_prefix(_address_prefix(self.prefix))

    def to_address_with_prefix(self, prefix: str) -> Address:
        return Address(ripemd160(sha256(self._data)), prefix)

    def to_bech32(self, prefix: Optional[str] = None) -> str:
        return _amino_bech32(prefix or self.prefix, self._data)

    def to_amino_bytes(self) -> bytes:
        return AMINO_PUBKEY_PREFIX + self._data

    def to_any(self) -> AnyProto:
        key = Secp256k1PubKey(key=self._data)
        return AnyProto(type_url=SECP256K1_PUBKEY_TYPE_URL, value=key.SerializeToString())

    def to_hex(self) -> str:
        return bytes_to_hex_str(self._data)

    def __eq__(self, other):
        if not isinstance(other, CosmosPublicKey):
            return NotImplemented
        return self._data == other._data and self.prefix == other.prefix

    def __hash__(self):
        return hash((type(self), self._data, self.prefix))

    def __str__(self) -> str:
        return self.to_bech32()

    def __repr__(self) -> str:
        return f"CosmosPublicKey({self.to_bech32()!r})"


class EthermintPublicKey:
    """
    Public key of the Ethermint (Ethereum-compatible) family.

    The address is the last 20 bytes of the Keccak-256 hash of the
    uncompressed point without its ``0x04`` tag, the same as an Ethereum
    account address.
    """

    __slots__ = ("_data", "prefix")

    def __init__(self, data: bytes, prefix: str = DEFAULT_PUBLIC_KEY_PREFIX):
        self._data = _validate_point(data)
        self.prefix = validate_prefix(prefix)

    @classmethod
    def from_bytes(cls, data: bytes, prefix: str = DEFAULT_PUBLIC_KEY_PREFIX) -> "EthermintPublicKey":
        return cls(data, prefix)

    @classmethod
    def from_bech32(cls, value: str) -> "EthermintPublicKey":
        hrp, data = _parse_amino_bech32(value)
        return cls(data, hrp)

    @classmethod
    def from_str(cls, value: str, prefix: str = DEFAULT_PUBLIC_KEY_PREFIX) -> "EthermintPublicKey":
        parsed_prefix, data = _parse_text(value)
        return cls(data, parsed_prefix or prefix)

    def as_bytes(self) -> bytes:
        return self._data

    def to_uncompressed_bytes(self) -> bytes:
        return coincurve.PublicKey(self._data).format(compressed=False)

    def to_address(self) -> Address:
        return self.to_address_with_prefix(_address_prefix(self.prefix))

    def to_address_with_prefix(self, prefix: str) -> Address:
        digest = keccak256(self.to_uncompressed_bytes()[1:])
        return Address(digest[12:], prefix)

    def to_eth_address(self) -> str:
        """EIP-55 checksummed ``0x`` form of the account address."""
        return to_checksum_address(self.to_address_with_prefix("eth").as_bytes())

    def to_bech32(self, prefix: Optional[str] = None) -> str:
        return _amino_bech32(prefix or self.prefix, self._data)

    def to_amino_bytes(self) -> bytes:
        return AMINO_PUBKEY_PREFIX + self._data

    def to_any(self) -> AnyProto:
        key = EthSecp256k1PubKey(key=self._data)
        return AnyProto(type_url=ETHERMINT_PUBKEY_TYPE_URL, value=key.SerializeToString())

    def to_hex(self) -> str:
        return bytes_to_hex_str(self._data)

    def __eq__(self, other):
        if not isinstance(other, EthermintPublicKey):
            return NotImplemented
        return self._data == other._data and self.prefix == other.prefix

    def __hash__(self):
        return hash((type(self), self._data, self.prefix))

    def __str__(self) -> str:
        return self.to_bech32()

    def __repr__(self) -> str:
        return f"EthermintPublicKey({self.to_bech32()!r})"
