"""
Exceptions for key handling, encoding and parsing.

Gateway and transaction errors live in :mod:`cosmos_signer.gateway.exceptions`
and share the same root class.
"""
from typing import List, Optional


class CosmosSignerError(Exception):
    """Base exception for all errors raised by this package."""
    pass


# ---------------------------------------------------------------------------
# Keys and curve operations
# ---------------------------------------------------------------------------

class CryptoError(CosmosSignerError):
    """Base exception for key and signature errors."""
    pass


class ZeroPrivateKey(CryptoError):
    """Raised when a private key scalar is zero."""
    pass


class CurveError(CryptoError):
    """Raised when a scalar or point is not valid on secp256k1."""
    pass


class EncodeError(CryptoError):
    """Raised when a protobuf message cannot be encoded."""
    pass


class HdWalletError(CryptoError):
    """Base exception for BIP-32 and BIP-39 failures."""
    pass


class InvalidPathSpec(HdWalletError):
    """Raised when a derivation path does not parse."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Invalid derivation path: {path!r}")


class Bip39Error(HdWalletError):
    """Base exception for mnemonic errors."""
    pass


class BadWordCount(Bip39Error):
    """Raised when a mnemonic has an unsupported number of words."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Mnemonic has a bad word count: {count}")


class UnknownWord(Bip39Error):
    """Raised when a mnemonic word is missing from the word list."""

    def __init__(self, word: str):
        self.word = word
        super().__init__(f"Mnemonic contains an unknown word: {word!r}")


class BadEntropyBitCount(Bip39Error):
    """Raised when entropy is not 128 to 256 bits in steps of 32."""

    def __init__(self, bits: int):
        self.bits = bits
        super().__init__(f"Entropy bit count is invalid: {bits}")


class InvalidChecksum(Bip39Error):
    """Raised when the mnemonic checksum does not match its entropy."""
    pass


class AmbiguousWordList(Bip39Error):
    """Raised when the words match more than one language."""

    def __init__(self, languages: List[str]):
        self.languages = languages
        super().__init__(
            f"Mnemonic words are valid in more than one language: {', '.join(languages)}"
        )


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

class EncodingError(CosmosSignerError):
    """Base exception for textual and binary decoding failures."""
    pass


class HexDecodeError(EncodingError):
    """
    Raised when a hex string cannot be decoded.

    ``kind`` is one of ``"utf8"``, ``"parse_int"`` or ``"wrong_length"``.
    """

    UTF8 = "utf8"
    PARSE_INT = "parse_int"
    WRONG_LENGTH = "wrong_length"

    def __init__(self, message: str, kind: str):
        self.kind = kind
        super().__init__(message)


class Base64DecodeError(EncodingError):
    """Raised when a base64 string cannot be decoded."""
    pass


class Bech32Error(EncodingError):
    """Base exception for bech32 failures."""
    pass


class Bech32WrongLength(Bech32Error):
    """Raised when a bech32 string or its payload has the wrong length."""
    pass


class Bech32InvalidBase32(Bech32Error):
    """Raised when a bech32 data part holds a character outside the charset."""
    pass


class Bech32InvalidEncoding(Bech32Error):
    """Raised when a bech32 string is malformed."""
    pass


class Bech32MixedCase(Bech32InvalidEncoding):
    """Raised when a bech32 string mixes upper and lower case."""
    pass


class Bech32InvalidChecksum(Bech32InvalidEncoding):
    """Raised when a bech32 checksum does not verify."""
    pass


class BytesDecodeErrorWrongLength(EncodingError):
    """Raised when decoded bytes have an unexpected length."""

    def __init__(self, actual: int, expected: Optional[str] = None):
        self.actual = actual
        self.expected = expected
        message = f"Decoded {actual} bytes"
        if expected:
            message += f", expected {expected}"
        super().__init__(message)


class PrefixTooLong(EncodingError):
    """Raised when a bech32 prefix exceeds the supported length."""
    pass


class AddressError(CosmosSignerError):
    """Raised when an address cannot be rendered with the requested prefix."""
    pass


class ParseError(CosmosSignerError):
    """Raised when a textual value such as a coin cannot be parsed."""
    pass
