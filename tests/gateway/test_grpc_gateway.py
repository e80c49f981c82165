"""
Tests for GrpcGateway against an in-process gRPC node.
"""
import asyncio
import logging
from unittest.mock import patch

import certifi
import grpc
import pytest

from cosmos_signer import proto
from cosmos_signer.address import Address
from cosmos_signer.gateway import grpc_gateway as paths
from cosmos_signer.gateway.contact import Contact
from cosmos_signer.gateway.exceptions import (
    BadResponse, DecodeError, GatewayConnectionError, GatewayTimeoutError, InsufficientFees,
    NoToken, RequestError
)
from cosmos_signer.gateway.grpc_gateway import (
    ENV_APPEND_CA, ENV_CA, ENV_STRICT_CA, PAGE_LIMIT, GrpcGateway, _parse_legacy_block_params,
    load_channel_credentials
)
from cosmos_signer.gateway.types import BroadcastMode, ChainState, ChainStatus
from cosmos_signer.models import BlockParams, Coin
from cosmos_signer.type_urls import BASE_ACCOUNT_TYPE_URL, MODULE_ACCOUNT_TYPE_URL

ACCOUNT = Address(bytes(range(20)), "cosmos")


def _block(height, chain_id="node-chain"):
    return proto.Block(header=proto.Header(chain_id=chain_id, height=height))


def _account_any(type_url, message):
    return proto.Any(type_url=type_url, value=message.SerializeToString())


class TestChainStatus:
    """Tests for chain status and block queries."""

    @pytest.mark.asyncio
    async def test_moving(self, fake_node, gateway):
        fake_node.respond(paths.GET_SYNCING, proto.GetSyncingResponse(syncing=False))
        fake_node.respond(paths.GET_LATEST_BLOCK, proto.GetLatestBlockResponse(block=_block(42)))
        assert await gateway.get_chain_status() == ChainStatus.moving(42)

    @pytest.mark.asyncio
    async def test_syncing(self, fake_node, gateway):
        """Test that a syncing node is reported without fetching the block."""
        fake_node.respond(paths.GET_SYNCING, proto.GetSyncingResponse(syncing=True))
        assert await gateway.get_chain_status() == ChainStatus.syncing()
        assert paths.GET_LATEST_BLOCK not in fake_node.requests

    @pytest.mark.asyncio
    async def test_nil_block_means_waiting(self, fake_node, gateway):
        fake_node.respond(paths.GET_SYNCING, proto.GetSyncingResponse(syncing=False))
        fake_node.fail(paths.GET_LATEST_BLOCK, grpc.StatusCode.UNKNOWN, "nil Block")
        assert await gateway.get_chain_status() == ChainStatus.waiting_to_start()

    @pytest.mark.asyncio
    async def test_missing_block_means_waiting(self, fake_node, gateway):
        fake_node.respond(paths.GET_SYNCING, proto.GetSyncingResponse(syncing=False))
        fake_node.respond(paths.GET_LATEST_BLOCK, proto.GetLatestBlockResponse())
        assert (await gateway.get_chain_status()).state is ChainState.WAITING_TO_START

    @pytest.mark.asyncio
    async def test_other_errors_propagate(self, fake_node, gateway):
        fake_node.respond(paths.GET_SYNCING, proto.GetSyncingResponse(syncing=False))
        fake_node.fail(paths.GET_LATEST_BLOCK, grpc.StatusCode.INTERNAL, "boom")
        with pytest.raises(RequestError) as exc_info:
            await gateway.get_chain_status()
        assert exc_info.value.status_code == grpc.StatusCode.INTERNAL

    @pytest.mark.asyncio
    async def test_latest_block(self, fake_node, gateway):
        fake_node.respond(paths.GET_SYNCING, proto.GetSyncingResponse(syncing=False))
        fake_node.respond(paths.GET_LATEST_BLOCK, proto.GetLatestBlockResponse(block=_block(7)))
        latest = await gateway.get_latest_block()
        assert latest.state is ChainState.MOVING
        assert latest.height == 7
        assert latest.chain_id == "node-chain"

    @pytest.mark.asyncio
    async def test_latest_block_while_syncing(self, fake_node, gateway):
        fake_node.respond(paths.GET_SYNCING, proto.GetSyncingResponse(syncing=True))
        fake_node.respond(paths.GET_LATEST_BLOCK, proto.GetLatestBlockResponse(block=_block(7)))
        latest = await gateway.get_latest_block()
        assert latest.state is ChainState.SYNCING
        assert latest.height == 7

    @pytest.mark.asyncio
    async def test_get_block(self, fake_node, gateway):
        fake_node.respond(paths.GET_BLOCK_BY_HEIGHT, proto.GetBlockByHeightResponse(block=_block(5)))
        block = await gateway.get_block(5)
        assert block.header.height == 5
        assert fake_node.requests[paths.GET_BLOCK_BY_HEIGHT][0].height == 5

    @pytest.mark.asyncio
    async def test_get_missing_block(self, fake_node, gateway):
        fake_node.respond(paths.GET_BLOCK_BY_HEIGHT, proto.GetBlockByHeightResponse())
        assert await gateway.get_block(5) is None


class TestBlockParams:
    """Tests for block parameter queries."""

    @pytest.mark.asyncio
    async def test_consensus_params(self, fake_node, gateway):
        params = proto.ConsensusParams(block=proto.TendermintBlockParams(max_bytes=100, max_gas=5000))
        fake_node.respond(paths.CONSENSUS_PARAMS, proto.ConsensusParamsResponse(params=params))
        assert await gateway.get_block_params() == BlockParams(max_bytes=100, max_gas=5000)

    @pytest.mark.asyncio
    async def test_unlimited_gas(self, fake_node, gateway):
        params = proto.ConsensusParams(block=proto.TendermintBlockParams(max_bytes=100, max_gas=-1))
        fake_node.respond(paths.CONSENSUS_PARAMS, proto.ConsensusParamsResponse(params=params))
        assert (await gateway.get_block_params()).max_gas is None

    @pytest.mark.asyncio
    async def test_missing_block_params(self, fake_node, gateway):
        fake_node.respond(paths.CONSENSUS_PARAMS, proto.ConsensusParamsResponse())
        with pytest.raises(BadResponse):
            await gateway.get_block_params()

    @pytest.mark.asyncio
    async def test_legacy_fallback(self, fake_node, gateway, caplog):
        """Test that chains without the consensus module use the params module."""
        fake_node.respond(paths.LEGACY_PARAMS, proto.LegacyParamsResponse(param=proto.ParamChange(
            subspace="baseapp", key="BlockParams", value='{"max_bytes":"22020096","max_gas":"-1"}'
        )))
        with caplog.at_level(logging.INFO, logger="cosmos_signer.gateway.grpc_gateway"):
            params = await gateway.get_block_params()
        assert params == BlockParams(max_bytes=22020096, max_gas=None)
        request = fake_node.requests[paths.LEGACY_PARAMS][0]
        assert (request.subspace, request.key) == ("baseapp", "BlockParams")
        assert "legacy params" in caplog.text

    @pytest.mark.asyncio
    async def test_no_fallback_on_other_errors(self, fake_node, gateway):
        fake_node.fail(paths.CONSENSUS_PARAMS, grpc.StatusCode.UNAVAILABLE, "down")
        with pytest.raises(RequestError):
            await gateway.get_block_params()
        assert paths.LEGACY_PARAMS not in fake_node.requests

    @pytest.mark.parametrize("value", ["", "{}", '{"max_bytes":"x","max_gas":"1"}', "[1]"])
    def test_bad_legacy_value(self, value):
        with pytest.raises(BadResponse):
            _parse_legacy_block_params(value)

    def test_legacy_numbers(self):
        assert _parse_legacy_block_params('{"max_bytes":10,"max_gas":20}') == BlockParams(
            max_bytes=10, max_gas=20
        )


class TestAccounts:
    """Tests for account and balance queries."""

    @pytest.mark.asyncio
    async def test_base_account(self, fake_node, gateway):
        account = proto.BaseAccount(address=str(ACCOUNT), account_number=5, sequence=2)
        fake_node.respond(paths.ACCOUNT, proto.QueryAccountResponse(
            account=_account_any(BASE_ACCOUNT_TYPE_URL, account)
        ))
        info = await gateway.get_account_info(ACCOUNT)
        assert info.address == ACCOUNT
        assert (info.account_number, info.sequence) == (5, 2)
        assert info.pubkey is None
        assert fake_node.requests[paths.ACCOUNT][0].address == str(ACCOUNT)

    @pytest.mark.asyncio
    async def test_module_account(self, fake_node, gateway):
        module = proto.ModuleAccount(
            base_account=proto.BaseAccount(address=str(ACCOUNT), account_number=1),
            name="distribution",
        )
        fake_node.respond(paths.ACCOUNT, proto.QueryAccountResponse(
            account=_account_any(MODULE_ACCOUNT_TYPE_URL, module)
        ))
        assert (await gateway.get_account_info(ACCOUNT)).account_number == 1

    @pytest.mark.asyncio
    async def test_unknown_account(self, fake_node, gateway):
        fake_node.fail(paths.ACCOUNT, grpc.StatusCode.NOT_FOUND, "account not found")
        with pytest.raises(NoToken):
            await gateway.get_account_info(ACCOUNT)

    @pytest.mark.asyncio
    async def test_unknown_account_type(self, fake_node, gateway):
        fake_node.respond(paths.ACCOUNT, proto.QueryAccountResponse(
            account=proto.Any(type_url="/custom.Account", value=b"")
        ))
        with pytest.raises(DecodeError):
            await gateway.get_account_info(ACCOUNT)

    @pytest.mark.asyncio
    async def test_empty_account_response(self, fake_node, gateway):
        fake_node.respond(paths.ACCOUNT, proto.QueryAccountResponse())
        with pytest.raises(BadResponse):
            await gateway.get_account_info(ACCOUNT)

    @pytest.mark.asyncio
    async def test_balances(self, fake_node, gateway):
        fake_node.respond(paths.ALL_BALANCES, proto.QueryAllBalancesResponse(balances=[
            proto.Coin(denom="stake", amount="10"), proto.Coin(denom="uatom", amount="3"),
        ]))
        balances = await gateway.get_balances(ACCOUNT)
        assert balances == [Coin(amount=10, denom="stake"), Coin(amount=3, denom="uatom")]
        request = fake_node.requests[paths.ALL_BALANCES][0]
        assert request.pagination.limit == PAGE_LIMIT


class TestTransactions:
    """Tests for tx lookup, simulation and broadcast."""

    @pytest.mark.asyncio
    async def test_get_tx(self, fake_node, gateway):
        event = proto.Event(type="transfer", attributes=[
            proto.EventAttribute(key="amount", value="1stake"),
            proto.EventAttribute(key="amount", value="2stake"),
        ])
        fake_node.respond(paths.GET_TX, proto.GetTxResponse(tx_response=proto.TxResponse(
            txhash="AB12", height=3, gas_used=10, events=[event]
        )))
        response = await gateway.get_tx_by_hash("AB12")
        assert response.txhash == "AB12"
        assert response.height == 3
        assert response.events == [
            {"type": "transfer", "attributes": [("amount", "1stake"), ("amount", "2stake")]}
        ]
        assert fake_node.requests[paths.GET_TX][0].hash == "AB12"

    @pytest.mark.asyncio
    async def test_get_tx_not_found(self, fake_node, gateway):
        fake_node.fail(paths.GET_TX, grpc.StatusCode.NOT_FOUND, "tx not found")
        with pytest.raises(RequestError) as exc_info:
            await gateway.get_tx_by_hash("AB12")
        assert exc_info.value.status_code == grpc.StatusCode.NOT_FOUND

    @pytest.mark.asyncio
    async def test_get_tx_empty_response(self, fake_node, gateway):
        fake_node.respond(paths.GET_TX, proto.GetTxResponse())
        assert await gateway.get_tx_by_hash("AB12") is None

    @pytest.mark.asyncio
    async def test_simulate(self, fake_node, gateway):
        fake_node.respond(paths.SIMULATE, proto.SimulateResponse(
            gas_info=proto.GasInfo(gas_wanted=100, gas_used=60),
            result=proto.Result(log="ok"),
        ))
        result = await gateway.simulate(b"tx")
        assert (result.gas_wanted, result.gas_used, result.log) == (100, 60, "ok")
        assert fake_node.requests[paths.SIMULATE][0].tx_bytes == b"tx"

    @pytest.mark.asyncio
    async def test_simulate_without_gas_info(self, fake_node, gateway):
        fake_node.respond(paths.SIMULATE, proto.SimulateResponse())
        with pytest.raises(BadResponse):
            await gateway.simulate(b"tx")

    @pytest.mark.asyncio
    async def test_broadcast(self, fake_node, gateway):
        fake_node.respond(paths.BROADCAST_TX, proto.BroadcastTxResponse(
            tx_response=proto.TxResponse(txhash="FF00")
        ))
        response = await gateway.broadcast_tx(b"tx")
        assert response.txhash == "FF00"
        request = fake_node.requests[paths.BROADCAST_TX][0]
        assert request.tx_bytes == b"tx"
        assert request.mode == BroadcastMode.SYNC

    @pytest.mark.asyncio
    async def test_broadcast_insufficient_fee(self, fake_node, gateway):
        """Test that the fee a node asks for is surfaced from a broadcast."""
        fake_node.respond(paths.BROADCAST_TX, proto.BroadcastTxResponse(
            tx_response=proto.TxResponse(
                txhash="FF00",
                codespace="sdk",
                code=13,
                raw_log="insufficient fees; got: 1foo required: 50000ualtg,250000ufootoken: insufficient fee",
            )
        ))
        with pytest.raises(InsufficientFees) as exc_info:
            await gateway.broadcast_tx(b"tx", BroadcastMode.BLOCK)
        assert [str(coin) for coin in exc_info.value.min_fees] == ["50000ualtg", "250000ufootoken"]

    @pytest.mark.asyncio
    async def test_broadcast_without_response(self, fake_node, gateway):
        fake_node.respond(paths.BROADCAST_TX, proto.BroadcastTxResponse())
        with pytest.raises(BadResponse):
            await gateway.broadcast_tx(b"tx")


class TestTransportErrors:
    """Tests for transport failures and timeouts."""

    @pytest.mark.asyncio
    async def test_unimplemented_method(self, gateway):
        with pytest.raises(RequestError) as exc_info:
            await gateway.get_block(1)
        assert exc_info.value.status_code == grpc.StatusCode.UNIMPLEMENTED

    @pytest.mark.asyncio
    async def test_slow_node(self, fake_node):
        """Test that a call past the deadline is a timeout, not a request error."""
        async def slow(request):
            await asyncio.sleep(2)
            return proto.GetSyncingResponse()

        fake_node.respond(paths.GET_SYNCING, slow)
        gateway = GrpcGateway(Contact(fake_node.url, timeout=0.2))
        with pytest.raises(GatewayTimeoutError):
            await gateway.get_chain_status()

    @pytest.mark.asyncio
    async def test_unreachable_node(self):
        gateway = GrpcGateway(Contact("http://127.0.0.1:1", timeout=0.2))
        with pytest.raises(GatewayTimeoutError):
            await gateway.get_chain_status()

    @pytest.mark.asyncio
    async def test_timeout_is_a_connection_error(self):
        gateway = GrpcGateway(Contact("http://127.0.0.1:1", timeout=0.2))
        with pytest.raises(GatewayConnectionError):
            await gateway.get_latest_block()


class TestCredentials:
    """Tests for TLS credential loading."""

    def test_plaintext_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="cosmos_signer.gateway.grpc_gateway"):
            gateway = GrpcGateway(Contact("http://localhost:9090"))
        assert gateway._credentials is None
        assert "plaintext" in caplog.text

    def test_tls_uses_credentials(self, monkeypatch):
        monkeypatch.delenv(ENV_CA, raising=False)
        gateway = GrpcGateway(Contact("https://grpc.example.com"))
        assert isinstance(gateway._credentials, grpc.ChannelCredentials)

    @patch("cosmos_signer.gateway.grpc_gateway.grpc.ssl_channel_credentials")
    def test_custom_ca_replaces_roots(self, mock_credentials, monkeypatch, tmp_path):
        ca_file = tmp_path / "ca.pem"
        ca_file.write_bytes(b"custom-ca")
        monkeypatch.setenv(ENV_CA, str(ca_file))
        monkeypatch.delenv(ENV_APPEND_CA, raising=False)

        load_channel_credentials()
        mock_credentials.assert_called_once_with(root_certificates=b"custom-ca")

    @patch("cosmos_signer.gateway.grpc_gateway.grpc.ssl_channel_credentials")
    def test_custom_ca_appended(self, mock_credentials, monkeypatch, tmp_path):
        ca_file = tmp_path / "ca.pem"
        ca_file.write_bytes(b"custom-ca")
        monkeypatch.setenv(ENV_CA, str(ca_file))
        monkeypatch.setenv(ENV_APPEND_CA, "1")

        load_channel_credentials()
        roots = mock_credentials.call_args.kwargs["root_certificates"]
        with open(certifi.where(), "rb") as f:
            assert roots.startswith(f.read())
        assert roots.endswith(b"custom-ca")

    @patch("cosmos_signer.gateway.grpc_gateway.grpc.ssl_channel_credentials")
    def test_missing_ca_falls_back(self, mock_credentials, monkeypatch, tmp_path):
        monkeypatch.setenv(ENV_CA, str(tmp_path / "missing.pem"))
        monkeypatch.delenv(ENV_STRICT_CA, raising=False)

        load_channel_credentials()
        mock_credentials.assert_called_once_with()

    def test_missing_ca_strict(self, monkeypatch, tmp_path):
        monkeypatch.setenv(ENV_CA, str(tmp_path / "missing.pem"))
        monkeypatch.setenv(ENV_STRICT_CA, "1")
        with pytest.raises(GatewayConnectionError):
            load_channel_credentials()
