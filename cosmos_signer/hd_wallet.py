"""
BIP-32 hierarchical deterministic key derivation for secp256k1.

Scalar addition modulo the curve order is delegated to libsecp256k1 through
``coincurve`` so that child derivation runs in constant time.
"""
import hashlib
import hmac
import re
from typing import List, Tuple

import coincurve

from .ec_constants import HARDENED_OFFSET, SECP256K1_N
from .exceptions import CurveError, InvalidPathSpec, ZeroPrivateKey

MASTER_KEY_HMAC_KEY = b"Bitcoin seed"

_SEGMENT = re.compile(r"([0-9]+)(')?")

# (index, hardened) pairs; index excludes the hardened offset
DerivationPath = List[Tuple[int, bool]]


def parse_path(path: str) -> DerivationPath:
    """
    Parse a derivation path such as ``m/44'/118'/0'/0/0``.

    Args:
        path: ``m`` followed by one or more ``/``-separated segments, each an
            unsigned integer optionally suffixed with ``'`` for hardened

    Returns:
        List of (index, hardened) pairs

    Raises:
        InvalidPathSpec: If the path has any other syntax or an index is
            outside the 31-bit range
    """
    parts = path.split("/")
    if len(parts) < 2 or parts[0] != "m":
        raise InvalidPathSpec(path)

    segments = []
    for part in parts[1:]:
        match = _SEGMENT.fullmatch(part)
        if not match:
            raise InvalidPathSpec(path)
        index = int(match.group(1))
        if index >= HARDENED_OFFSET:
            raise InvalidPathSpec(path)
        segments.append((index, match.group(2) is not None))
    return segments


def master_key_from_seed(seed: bytes) -> Tuple[bytes, bytes]:
    """
    Derive the master secret and chain code from a BIP-39 seed.

    Returns:
        Tuple of (32-byte secret, 32-byte chain code)

    Raises:
        ZeroPrivateKey: If the derived secret is zero
        CurveError: If the derived secret is not below the curve order
    """
    digest = hmac.new(MASTER_KEY_HMAC_KEY, seed, hashlib.sha512).digest()
    secret, chain_code = digest[:32], digest[32:]
    value = int.from_bytes(secret, "big")
    if value == 0:
        raise ZeroPrivateKey("Master secret derived from seed is zero")
    if value >= SECP256K1_N:
        raise CurveError("Master secret derived from seed is not below the curve order")
    return secret, chain_code


def get_child_key(
    parent_secret: bytes,
    parent_chain_code: bytes,
    index: int,
    hardened: bool
) -> Tuple[bytes, bytes]:
    """
    Derive one child (secret, chain code) pair.

    Args:
        parent_secret: 32-byte parent private key
        parent_chain_code: 32-byte parent chain code
        index: Child index below 2**31
        hardened: Whether to derive the hardened child ``index'``

    Returns:
        Tuple of (child secret, child chain code)

    Raises:
        CurveError: If the child key is invalid (probability about 2**-127)
    """
    if hardened:
        data = b"\x00" + parent_secret + (index + HARDENED_OFFSET).to_bytes(4, "big")
    else:
        parent_public = coincurve.PrivateKey(parent_secret).public_key.format(compressed=True)
        data = parent_public + index.to_bytes(4, "big")

    digest = hmac.new(parent_chain_code, data, hashlib.sha512).digest()
    tweak, chain_code = digest[:32], digest[32:]
    try:
        child = coincurve.PrivateKey(parent_secret).add(tweak)
    except ValueError as e:
        raise CurveError(f"Child key at index {index} is invalid: {e}") from e
    return child.secret, chain_code


def derive_path(seed: bytes, path: str) -> Tuple[bytes, bytes]:
    """Derive the (secret, chain code) pair at ``path`` below the master key."""
    secret, chain_code = master_key_from_seed(seed)
    for index, hardened in parse_path(path):
        secret, chain_code = get_child_key(secret, chain_code, index, hardened)
    return secret, chain_code
