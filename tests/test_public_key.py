"""
Tests for the Cosmos and Ethermint public key families.
"""
import base64

import pytest
from eth_account import Account

from cosmos_signer.address import Address
from cosmos_signer.exceptions import (
    Base64DecodeError, Bech32InvalidChecksum, BytesDecodeErrorWrongLength, CurveError
)
from cosmos_signer.proto import EthSecp256k1PubKey, Secp256k1PubKey
from cosmos_signer.public_key import CosmosPublicKey, EthermintPublicKey
from cosmos_signer.type_urls import ETHERMINT_PUBKEY_TYPE_URL, SECP256K1_PUBKEY_TYPE_URL

MY_SECRET_PUBKEY_HEX = "029651a9aac4c22b27b3019aee6df746266e1ae746ee79772a6e5ead198ebd07c3"
MY_SECRET_PUBKEY_BECH32 = (
    "cosmospub1addwnpepq2t9r2d2cnpzkfanqxdwum0hgcnxuxh8gmh8jae2de026xvwh5ruxuv5let"
)
MY_SECRET_ADDRESS = "cosmos1nx7vqq8hsy8chwe27mcr4cmazdwus7zjl2ds0p"

OTHER_PUBKEY_HEX = "02A1633CAFCC01EBFB6D78E39F687A1F0995C62FC95F51EAD10A02EE0BE551B5DC"
OTHER_PUBKEY_BECH32 = (
    "cosmospub1addwnpepq2skx090esq7h7md0r3e76r6ruyet330e904r6k3pgpwuzl92x6actrt4uq"
)


def _other_char(char):
    """Return a bech32 character different from ``char``."""
    return "p" if char != "p" else "q"


class TestCosmosPublicKey:
    """Tests for CosmosPublicKey."""

    def test_address_from_known_key(self):
        key = CosmosPublicKey.from_bytes(bytes.fromhex(MY_SECRET_PUBKEY_HEX))
        assert str(key.to_address()) == MY_SECRET_ADDRESS

    def test_bech32_from_known_key(self):
        key = CosmosPublicKey.from_bytes(bytes.fromhex(MY_SECRET_PUBKEY_HEX))
        assert key.to_bech32() == MY_SECRET_PUBKEY_BECH32

    def test_uppercase_hex_vector(self):
        key = CosmosPublicKey.from_str(OTHER_PUBKEY_HEX)
        assert key.to_bech32() == OTHER_PUBKEY_BECH32

    def test_parse_bech32(self):
        key = CosmosPublicKey.from_str(OTHER_PUBKEY_BECH32)
        assert key.as_bytes() == bytes.fromhex(OTHER_PUBKEY_HEX)
        assert key.prefix == "cosmospub"
        assert CosmosPublicKey.from_bech32(OTHER_PUBKEY_BECH32) == key

    def test_parse_base64(self):
        encoded = base64.b64encode(bytes.fromhex(MY_SECRET_PUBKEY_HEX)).decode()
        key = CosmosPublicKey.from_str(encoded)
        assert key.to_hex() == MY_SECRET_PUBKEY_HEX

    def test_address_prefix_follows_key_prefix(self):
        key = CosmosPublicKey(bytes.fromhex(MY_SECRET_PUBKEY_HEX), "osmopub")
        assert key.to_address().prefix == "osmo"
        assert key.to_bech32().startswith("osmopub1")

    def test_address_with_explicit_prefix(self):
        key = CosmosPublicKey(bytes.fromhex(MY_SECRET_PUBKEY_HEX))
        address = key.to_address_with_prefix("evmos")
        assert address == Address.from_bech32(MY_SECRET_ADDRESS).change_prefix("evmos")

    def test_amino_bytes(self):
        key = CosmosPublicKey(bytes.fromhex(MY_SECRET_PUBKEY_HEX))
        assert key.to_amino_bytes() == bytes.fromhex("eb5ae98721" + MY_SECRET_PUBKEY_HEX)

    def test_to_any(self):
        key = CosmosPublicKey(bytes.fromhex(MY_SECRET_PUBKEY_HEX))
        wrapped = key.to_any()
        assert wrapped.type_url == SECP256K1_PUBKEY_TYPE_URL
        assert Secp256k1PubKey.FromString(wrapped.value).key == key.as_bytes()

    def test_wrong_length(self):
        with pytest.raises(BytesDecodeErrorWrongLength):
            CosmosPublicKey(bytes(32))

    def test_not_on_curve(self):
        with pytest.raises(CurveError):
            CosmosPublicKey(b"\x05" + bytes(32))

    def test_bad_base64(self):
        with pytest.raises(Base64DecodeError):
            CosmosPublicKey.from_str("not-base64!")

    def test_bad_bech32_checksum(self):
        with pytest.raises(Bech32InvalidChecksum):
            CosmosPublicKey.from_str(OTHER_PUBKEY_BECH32[:-1] + _other_char(OTHER_PUBKEY_BECH32[-1]))

    def test_upper_case_prefix_is_lowered(self):
        key = CosmosPublicKey(bytes.fromhex(MY_SECRET_PUBKEY_HEX), "COSMOSPUB")
        assert key.prefix == "cosmospub"
        assert key.to_bech32() == MY_SECRET_PUBKEY_BECH32
        assert CosmosPublicKey.from_bech32(key.to_bech32()) == key

    def test_families_are_not_equal(self):
        data = bytes.fromhex(MY_SECRET_PUBKEY_HEX)
        assert CosmosPublicKey(data) != EthermintPublicKey(data)


class TestEthermintPublicKey:
    """Tests for EthermintPublicKey."""

    def test_address_matches_ethereum(self, ethermint_key, ethermint_phrase):
        Account.enable_unaudited_hdwallet_features()
        account = Account.from_mnemonic(ethermint_phrase, account_path="m/44'/60'/0'/0/0")
        assert ethermint_key.to_public_key().to_eth_address() == account.address

    def test_evmos_address(self, ethermint_key):
        key = EthermintPublicKey(ethermint_key.to_public_key().as_bytes(), "evmospub")
        assert str(key.to_address()) == "evmos1zkunj49253lc6wgm0gp5nk8kj2naat0j8fzkfa"

    def test_address_differs_from_cosmos_family(self):
        data = bytes.fromhex(MY_SECRET_PUBKEY_HEX)
        assert EthermintPublicKey(data).to_address() != CosmosPublicKey(data).to_address()

    def test_uncompressed_bytes(self):
        key = EthermintPublicKey(bytes.fromhex(MY_SECRET_PUBKEY_HEX))
        uncompressed = key.to_uncompressed_bytes()
        assert len(uncompressed) == 65
        assert uncompressed[0] == 4
        assert uncompressed[1:33] == key.as_bytes()[1:]

    def test_to_any(self):
        key = EthermintPublicKey(bytes.fromhex(MY_SECRET_PUBKEY_HEX))
        wrapped = key.to_any()
        assert wrapped.type_url == ETHERMINT_PUBKEY_TYPE_URL
        assert EthSecp256k1PubKey.FromString(wrapped.value).key == key.as_bytes()

    def test_bech32_round_trip(self):
        key = EthermintPublicKey(bytes.fromhex(OTHER_PUBKEY_HEX), "evmospub")
        assert EthermintPublicKey.from_str(key.to_bech32()) == key
