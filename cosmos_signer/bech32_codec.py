"""
Bech32 encoding with classified errors.

The ``bech32`` package supplies the charset, checksum polynomial and bit
regrouping. Its decoder only reports success or failure, so decoding is done
here step by step to tell the failure kinds apart.
"""
from enum import Enum
from typing import Tuple

from bech32 import CHARSET, bech32_encode, bech32_hrp_expand, bech32_polymod, convertbits

from .exceptions import (
    Bech32InvalidBase32, Bech32InvalidChecksum, Bech32InvalidEncoding,
    Bech32MixedCase, Bech32WrongLength
)

SEPARATOR = "1"
MAX_LENGTH = 90
CHECKSUM_LENGTH = 6

_BECH32_CONST = 1
_BECH32M_CONST = 0x2BC830A3


class Variant(Enum):
    """Checksum constant a bech32 string was created with."""
    BECH32 = "bech32"
    BECH32M = "bech32m"


def _check_hrp(hrp: str) -> str:
    if not hrp:
        raise Bech32InvalidEncoding("Human-readable part is empty")
    if any(ord(c) < 33 or ord(c) > 126 for c in hrp):
        raise Bech32InvalidEncoding(f"Human-readable part {hrp!r} contains invalid characters")
    if hrp.lower() != hrp and hrp.upper() != hrp:
        raise Bech32MixedCase(f"Human-readable part {hrp!r} mixes upper and lower case")
    return hrp.lower()


def encode(hrp: str, payload: bytes) -> str:
    """
    Encode ``payload`` as a bech32 string with human-readable part ``hrp``.

    Args:
        hrp: Human-readable part, e.g. ``"cosmos"``
        payload: Raw bytes to encode

    Returns:
        Lowercase bech32 string

    Raises:
        Bech32InvalidEncoding: If the HRP is empty or invalid, or the result
            would exceed 90 characters
    """
    hrp = _check_hrp(hrp)
    data = convertbits(bytes(payload), 8, 5, True)
    encoded = bech32_encode(hrp, data)
    if len(encoded) > MAX_LENGTH:
        raise Bech32InvalidEncoding(
            f"Encoded string is {len(encoded)} characters, maximum is {MAX_LENGTH}"
        )
    return encoded


def decode(value: str) -> Tuple[str, bytes, Variant]:
    """
    Decode a bech32 string.

    Args:
        value: bech32 text in a single case

    Returns:
        Tuple of (hrp, payload bytes, checksum variant)

    Raises:
        Bech32WrongLength: If the string is too short or too long
        Bech32MixedCase: If upper and lower case are mixed
        Bech32InvalidBase32: If the data part holds a non-charset character
        Bech32InvalidChecksum: If the checksum does not verify
        Bech32InvalidEncoding: For a missing separator or bad padding
    """
    if len(value) < 1 + len(SEPARATOR) + CHECKSUM_LENGTH or len(value) > MAX_LENGTH:
        raise Bech32WrongLength(f"bech32 string has invalid length {len(value)}")
    if any(ord(c) < 33 or ord(c) > 126 for c in value):
        raise Bech32InvalidEncoding("bech32 string contains invalid characters")
    if value.lower() != value and value.upper() != value:
        raise Bech32MixedCase("bech32 string mixes upper and lower case")

    value = value.lower()
    pos = value.rfind(SEPARATOR)
    if pos < 1:
        raise Bech32InvalidEncoding("bech32 string has no separator or an empty prefix")
    if pos + 1 + CHECKSUM_LENGTH > len(value):
        raise Bech32WrongLength("bech32 data part is shorter than the checksum")

    hrp = value[:pos]
    data = []
    for char in value[pos + 1:]:
        index = CHARSET.find(char)
        if index == -1:
            raise Bech32InvalidBase32(f"Character {char!r} is not in the bech32 charset")
        data.append(index)

    const = bech32_polymod(bech32_hrp_expand(hrp) + data)
    if const == _BECH32_CONST:
        variant = Variant.BECH32
    elif const == _BECH32M_CONST:
        variant = Variant.BECH32M
    else:
        raise Bech32InvalidChecksum(f"Invalid bech32 checksum for {value!r}")

    payload = convertbits(data[:-CHECKSUM_LENGTH], 5, 8, False)
    if payload is None:
        raise Bech32InvalidEncoding("bech32 data part has invalid padding")
    return hrp, bytes(payload), variant
