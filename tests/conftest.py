"""
Pytest fixtures for the cosmos-signer SDK tests.
"""
import pytest
from bech32 import CHARSET, bech32_hrp_expand, bech32_polymod, convertbits

from cosmos_signer._rate_limited_log import reset_rate_limits
from cosmos_signer.client import CosmosClient
from cosmos_signer.gateway.contact import Contact
from cosmos_signer.gateway.stub_gateway import StubGateway
from cosmos_signer.private_key import CosmosPrivateKey, EthermintPrivateKey

COSMOS_PHRASE = (
    "purse sure leg gap above pull rescue glass circle attract erupt can sail gasp "
    "shy clarify inflict anger sketch hobby scare mad reject where"
)
ETHERMINT_PHRASE = (
    "whisper unknown entire effort supreme believe supply position noble radar badge "
    "check cotton spider affair muffin gold bird trust venue hub core they veteran"
)


@pytest.fixture(autouse=True)
def _fresh_rate_limits():
    """Each test starts with no suppressed log messages."""
    reset_rate_limits()
    yield
    reset_rate_limits()


@pytest.fixture
def cosmos_phrase():
    return COSMOS_PHRASE


@pytest.fixture
def ethermint_phrase():
    return ETHERMINT_PHRASE


@pytest.fixture
def cosmos_key():
    return CosmosPrivateKey.from_secret(b"mySecret")


@pytest.fixture
def ethermint_key():
    return EthermintPrivateKey.from_phrase(ETHERMINT_PHRASE)


@pytest.fixture
def bech32m_encode():
    """Encoder for bech32m strings, which the library only decodes."""
    def encode(hrp, payload):
        data = convertbits(payload, 8, 5, True)
        polymod = bech32_polymod(bech32_hrp_expand(hrp) + data + [0] * 6) ^ 0x2BC830A3
        checksum = [(polymod >> 5 * (5 - i)) & 31 for i in range(6)]
        return hrp + "1" + "".join(CHARSET[d] for d in data + checksum)
    return encode


@pytest.fixture
def contact():
    return Contact("http://localhost:9090", timeout=5.0, chain_prefix="cosmos")


@pytest.fixture
def stub_gateway(cosmos_key):
    """A running stub chain where ``cosmos_key`` owns account 7 at sequence 3."""
    gateway = StubGateway(chain_id="test-chain", block_height=10)
    gateway.add_account(cosmos_key.to_address(), account_number=7, sequence=3)
    return gateway


@pytest.fixture
def client(contact, stub_gateway, monkeypatch):
    """A client on the stub chain that polls without sleeping."""
    monkeypatch.setattr(CosmosClient, "POLL_INTERVAL", 0)
    return CosmosClient(contact, gateway=stub_gateway)
