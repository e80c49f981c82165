"""
secp256k1 private keys for the Cosmos and Ethermint key families.

Cosmos keys sign the SHA-256 digest of the sign doc and emit the 64-byte
compact ``r || s`` signature. Ethermint keys sign the Keccak-256 digest and
emit the 65-byte recoverable ``r || s || v`` signature with ``v`` in {0, 1},
which is what Ethermint chains verify against.
"""
import hmac
from typing import Protocol, Sequence

import coincurve

from .address import DEFAULT_PREFIX, Address
from .ec_constants import PRIVATE_KEY_LENGTH, SECP256K1_N
from .exceptions import BadWordCount, BytesDecodeErrorWrongLength, CurveError, ZeroPrivateKey
from .hd_wallet import derive_path
from .mnemonic import Mnemonic
from .models import MessageArgs, Msg
from .public_key import DEFAULT_PUBLIC_KEY_PREFIX, CosmosPublicKey, EthermintPublicKey, PublicKey
from .tx_builder import SignedTx, build_tx
from .utils import hex_str_to_bytes, is_hex, keccak256, sha256

COSMOS_DEFAULT_PATH = "m/44'/118'/0'/0/0"
ETHERMINT_DEFAULT_PATH = "m/44'/60'/0'/0/0"


class PrivateKey(Protocol):
    """Capabilities shared by both private key families."""

    def to_public_key(self, prefix: str = DEFAULT_PUBLIC_KEY_PREFIX) -> PublicKey: ...

    def to_address(self, prefix: str = DEFAULT_PREFIX) -> Address: ...

    def sign(self, data: bytes) -> bytes: ...

    def build_tx(self, messages: Sequence[Msg], args: MessageArgs, memo: str = "") -> SignedTx: ...

    def sign_std_msg(self, messages: Sequence[Msg], args: MessageArgs, memo: str = "") -> bytes: ...


def _validate_secret(secret: bytes) -> bytes:
    secret = bytes(secret)
    if len(secret) != PRIVATE_KEY_LENGTH:
        raise BytesDecodeErrorWrongLength(len(secret), str(PRIVATE_KEY_LENGTH))
    value = int.from_bytes(secret, "big")
    if value == 0:
        raise ZeroPrivateKey("Private key is zero")
    if value >= SECP256K1_N:
        raise CurveError("Private key is not below the secp256k1 curve order")
    return secret


def secret_from_hashed_secret(secret: bytes) -> bytes:
    """
    Map arbitrary bytes to a valid scalar: ``SHA256(secret) mod (N - 1) + 1``.

    Meant for deterministic test keys. The big-integer arithmetic is not
    constant time.
    """
    value = int.from_bytes(sha256(secret), "big") % (SECP256K1_N - 1) + 1
    return value.to_bytes(PRIVATE_KEY_LENGTH, "big")


def secret_from_hd_wallet_path(path: str, phrase: str, passphrase: str = "") -> bytes:
    """
    Derive the secret at ``path`` from a BIP-39 phrase and passphrase.

    Raises:
        HdWalletError: If the phrase or the path is invalid
    """
    if not phrase.strip():
        raise BadWordCount(0)
    seed = Mnemonic.parse(phrase).to_seed(passphrase)
    secret, _ = derive_path(seed, path)
    return secret


def secret_from_str(value: str, default_path: str) -> bytes:
    """64 hex digits (optionally ``0x``-prefixed) are a raw key, anything else a phrase."""
    text = value.strip()
    digits = text[2:] if text[:2] in ("0x", "0X") else text
    if len(digits) == 2 * PRIVATE_KEY_LENGTH and is_hex(digits):
        return hex_str_to_bytes(digits)
    return secret_from_hd_wallet_path(default_path, text, "")


class CosmosPrivateKey:
    """
    Private key of the standard Cosmos family (``/cosmos.crypto.secp256k1``).
    """

    __slots__ = ("_secret",)

    DEFAULT_PATH = COSMOS_DEFAULT_PATH

    def __init__(self, secret: bytes):
        self._secret = _validate_secret(secret)

    @classmethod
    def from_secret(cls, secret: bytes) -> "CosmosPrivateKey":
        return cls(secret_from_hashed_secret(secret))

    @classmethod
    def from_phrase(cls, phrase: str, passphrase: str = "") -> "CosmosPrivateKey":
        return cls.from_hd_wallet_path(cls.DEFAULT_PATH, phrase, passphrase)

    @classmethod
    def from_hd_wallet_path(cls, path: str, phrase: str, passphrase: str = "") -> "CosmosPrivateKey":
        return cls(secret_from_hd_wallet_path(path, phrase, passphrase))

    @classmethod
    def from_str(cls, value: str) -> "CosmosPrivateKey":
        return cls(secret_from_str(value, cls.DEFAULT_PATH))

    def to_public_key(self, prefix: str = DEFAULT_PUBLIC_KEY_PREFIX) -> CosmosPublicKey:
        point = coincurve.PrivateKey(self._secret).public_key.format(compressed=True)
        return CosmosPublicKey(point, prefix)

    def to_address(self, prefix: str = DEFAULT_PREFIX) -> Address:
        return self.to_public_key().to_address_with_prefix(prefix)

    def sign(self, data: bytes) -> bytes:
        """Deterministic (RFC 6979) low-S ECDSA over SHA-256 of ``data``, as ``r || s``."""
        signature = coincurve.PrivateKey(self._secret).sign_recoverable(sha256(data), hasher=None)
        return signature[:64]

    def build_tx(self, messages: Sequence[Msg], args: MessageArgs, memo: str = "") -> SignedTx:
        return build_tx(messages, args, memo, self.to_public_key().to_any(), self.sign)

    def sign_std_msg(self, messages: Sequence[Msg], args: MessageArgs, memo: str = "") -> bytes:
        """
        Sign ``messages`` and return the ``TxRaw`` bytes ready for broadcast.

        Raises:
            EncodeError: If a protobuf message cannot be encoded
        """
        return self.build_tx(messages, args, memo).tx_raw

    def __eq__(self, other):
        if not isinstance(other, CosmosPrivateKey):
            return NotImplemented
        return hmac.compare_digest(self._secret, other._secret)

    def __hash__(self):
        return hash((type(self), self.to_public_key().as_bytes()))

    def __repr__(self) -> str:
        return f"CosmosPrivateKey(address={self.to_address()})"


class EthermintPrivateKey:
    """
    Private key of the Ethermint family (``/ethermint.crypto.v1.ethsecp256k1``).
    """

    __slots__ = ("_secret",)

    DEFAULT_PATH = ETHERMINT_DEFAULT_PATH

    def __init__(self, secret: bytes):
        self._secret = _validate_secret(secret)

    @classmethod
    def from_secret(cls, secret: bytes) -> "EthermintPrivateKey":
        return cls(secret_from_hashed_secret(secret))

    @classmethod
    def from_phrase(cls, phrase: str, passphrase: str = "") -> "EthermintPrivateKey":
        return cls.from_hd_wallet_path(cls.DEFAULT_PATH, phrase, passphrase)

    @classmethod
    def from_hd_wallet_path(cls, path: str, phrase: str, passphrase: str = "") -> "EthermintPrivateKey":
        return cls(secret_from_hd_wallet_path(path, phrase, passphrase))

    @classmethod
    def from_str(cls, value: str) -> "EthermintPrivateKey":
        return cls(secret_from_str(value, cls.DEFAULT_PATH))

    def to_public_key(self, prefix: str = DEFAULT_PUBLIC_KEY_PREFIX) -> EthermintPublicKey:
        point = coincurve.PrivateKey(self._secret).public_key.format(compressed=True)
        return EthermintPublicKey(point, prefix)

    def to_address(self, prefix: str = DEFAULT_PREFIX) -> Address:
        return self.to_public_key().to_address_with_prefix(prefix)

    def sign(self, data: bytes) -> bytes:
        """Recoverable ECDSA over Keccak-256 of ``data``, as ``r || s || v``."""
        return coincurve.PrivateKey(self._secret).sign_recoverable(keccak256(data), hasher=None)

    def build_tx(self, messages: Sequence[Msg], args: MessageArgs, memo: str = "") -> SignedTx:
        return build_tx(messages, args, memo, self.to_public_key().to_any(), self.sign)

    def sign_std_msg(self, messages: Sequence[Msg], args: MessageArgs, memo: str = "") -> bytes:
        return self.build_tx(messages, args, memo).tx_raw

    def __eq__(self, other):
        if not isinstance(other, EthermintPrivateKey):
            return NotImplemented
        return hmac.compare_digest(self._secret, other._secret)

    def __hash__(self):
        return hash((type(self), self.to_public_key().as_bytes()))

    def __repr__(self) -> str:
        return f"EthermintPrivateKey(address={self.to_address()})"
