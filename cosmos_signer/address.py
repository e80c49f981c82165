"""
Account addresses.
"""
from dataclasses import dataclass
from typing import Optional

from . import bech32_codec
from .exceptions import Bech32InvalidEncoding, BytesDecodeErrorWrongLength
from .utils import bytes_to_hex_str, hex_str_to_bytes, is_hex, sha256, validate_prefix

DEFAULT_PREFIX = "cosmos"

BASE_ADDRESS_LENGTH = 20
DERIVED_ADDRESS_LENGTH = 32


@dataclass(frozen=True)
class Address:
    """
    A 20-byte (base) or 32-byte (derived) account identifier.

    The address carries the bech32 prefix it is displayed with. Two addresses
    are equal only if both the bytes and the prefix match.
    """
    data: bytes
    prefix: str = DEFAULT_PREFIX

    def __post_init__(self):
        data = bytes(self.data)
        if len(data) not in (BASE_ADDRESS_LENGTH, DERIVED_ADDRESS_LENGTH):
            raise BytesDecodeErrorWrongLength(len(data), "20 or 32")
        object.__setattr__(self, "data", data)
        object.__setattr__(self, "prefix", validate_prefix(self.prefix))

    @classmethod
    def from_bytes(cls, data: bytes, prefix: str = DEFAULT_PREFIX) -> "Address":
        return cls(data, prefix)

    @classmethod
    def from_bech32(cls, value: str) -> "Address":
        """
        Parse a bech32 address, keeping its human-readable part as the prefix.

        Raises:
            Bech32Error: If the string is not valid bech32
            BytesDecodeErrorWrongLength: If the payload is not 20 or 32 bytes
        """
        hrp, payload, variant = bech32_codec.decode(value)
        if variant is not bech32_codec.Variant.BECH32:
            raise Bech32InvalidEncoding(f"Address {value!r} uses bech32m, expected bech32")
        return cls(payload, hrp)

    @classmethod
    def from_str(cls, value: str) -> "Address":
        """
        Parse an address from text.

        Pure hex input is decoded with the default ``cosmos`` prefix, anything
        else is treated as bech32.
        """
        if is_hex(value):
            return cls(hex_str_to_bytes(value), DEFAULT_PREFIX)
        return cls.from_bech32(value)

    @property
    def is_derived(self) -> bool:
        return len(self.data) == DERIVED_ADDRESS_LENGTH

    def as_bytes(self) -> bytes:
        return self.data

    def to_bech32(self, prefix: Optional[str] = None) -> str:
        """Encode with ``prefix`` (the stored prefix when omitted)."""
        prefix = validate_prefix(prefix) if prefix is not None else self.prefix
        return bech32_codec.encode(prefix, self.data)

    def change_prefix(self, prefix: str) -> "Address":
        return Address(self.data, prefix)

    def to_hex(self) -> str:
        return bytes_to_hex_str(self.data)

    def __str__(self) -> str:
        return self.to_bech32()

    def __repr__(self) -> str:
        return f"Address({self.to_bech32()!r})"


def get_module_account_address(module_name: str, prefix: str = DEFAULT_PREFIX) -> Address:
    """
    Address of a module account such as ``"distribution"`` or ``"gov"``.

    Module accounts have no keys; the address is the first 20 bytes of the
    SHA-256 hash of the module name.
    """
    return Address(sha256(module_name.encode("utf-8"))[:BASE_ADDRESS_LENGTH], prefix)
