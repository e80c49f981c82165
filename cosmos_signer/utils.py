"""
Byte, hex and hashing helpers shared across the package.
"""
import hashlib
import string
from typing import Union

from Crypto.Hash import RIPEMD160
from eth_utils import keccak

from .exceptions import AddressError, HexDecodeError, PrefixTooLong

# Longest chain prefix accepted for addresses and public keys
MAX_PREFIX_LENGTH = 32

_HEX_DIGITS = frozenset(string.hexdigits)


def bytes_to_hex_str(data: bytes) -> str:
    """Render bytes as lowercase hex without a ``0x`` prefix."""
    return bytes(data).hex()


def hex_str_to_bytes(value: Union[str, bytes]) -> bytes:
    """
    Decode a hex string, ignoring an optional ``0x`` prefix.

    Upper and lower case digits are both accepted.

    Args:
        value: Hex text (``str``, or ASCII ``bytes``)

    Returns:
        Decoded bytes

    Raises:
        HexDecodeError: If the input is not ASCII, holds a non-hex digit,
            or has an odd number of digits
    """
    if isinstance(value, (bytes, bytearray)):
        try:
            value = bytes(value).decode("ascii")
        except UnicodeDecodeError as e:
            raise HexDecodeError(f"Hex input is not valid ASCII: {e}", HexDecodeError.UTF8) from e

    if not value.isascii():
        raise HexDecodeError("Hex input contains non-ASCII characters", HexDecodeError.UTF8)

    if value[:2] in ("0x", "0X"):
        value = value[2:]

    bad = [c for c in value if c not in _HEX_DIGITS]
    if bad:
        raise HexDecodeError(f"Invalid hex digit {bad[0]!r}", HexDecodeError.PARSE_INT)
    if len(value) % 2:
        raise HexDecodeError(
            f"Hex input has an odd number of digits ({len(value)})",
            HexDecodeError.WRONG_LENGTH
        )
    return bytes.fromhex(value)


def is_hex(value: str) -> bool:
    """Return True if ``value`` is non-empty and consists only of hex digits."""
    return bool(value) and all(c in _HEX_DIGITS for c in value)


def validate_prefix(prefix: str) -> str:
    """
    Check that ``prefix`` can serve as a bech32 human-readable part.

    Args:
        prefix: Chain prefix such as ``"cosmos"`` or ``"cosmospub"``

    Returns:
        The prefix in lower case, the form bech32 encodes it in

    Raises:
        PrefixTooLong: If the prefix is longer than 32 characters
        AddressError: If the prefix is empty or holds characters outside
            the printable ASCII range
    """
    if not isinstance(prefix, str) or not prefix:
        raise AddressError("Prefix must be a non-empty string")
    if len(prefix) > MAX_PREFIX_LENGTH:
        raise PrefixTooLong(
            f"Prefix {prefix!r} is {len(prefix)} characters, maximum is {MAX_PREFIX_LENGTH}"
        )
    if any(ord(c) < 33 or ord(c) > 126 for c in prefix):
        raise AddressError(f"Prefix {prefix!r} contains characters not allowed in bech32")
    if prefix.lower() != prefix and prefix.upper() != prefix:
        raise AddressError(f"Prefix {prefix!r} mixes upper and lower case")
    return prefix.lower()


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def ripemd160(data: bytes) -> bytes:
    # hashlib's ripemd160 depends on the OpenSSL build, pycryptodome always has it
    return RIPEMD160.new(data).digest()


def keccak256(data: bytes) -> bytes:
    return keccak(data)


def tx_hash(tx_bytes: bytes) -> str:
    """Return the uppercase hex SHA-256 hash used by Tendermint to identify a tx."""
    return sha256(tx_bytes).hex().upper()
