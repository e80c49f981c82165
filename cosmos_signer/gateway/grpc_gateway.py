"""
gRPC implementation of the node gateway.

Requests are encoded with the runtime-built protobuf classes from
``cosmos_signer.proto`` and sent over ``grpc.aio``. Each call opens its own
channel, so a gateway can be shared freely between tasks.
"""
import asyncio
import json
import logging
import os
from typing import List, Optional

import certifi
import grpc

from .. import proto
from ..address import Address
from ..models import BlockParams, Coin
from .contact import Contact
from .exceptions import (
    BadResponse, GatewayConnectionError, GatewayTimeoutError, NoToken, RequestError
)
from .transport import NodeGateway
from .types import (
    AccountType, BaseAccount, BroadcastMode, ChainStatus, LatestBlock, SimulationResult, TxResponse
)

logger = logging.getLogger(__name__)

ENV_CA = "COSMOS_SIGNER_CA"
ENV_APPEND_CA = "COSMOS_SIGNER_APPEND_CA"
ENV_STRICT_CA = "COSMOS_SIGNER_STRICT_CA"

# Single oversized page instead of following pagination cursors
PAGE_LIMIT = 500_000

GET_SYNCING = "/cosmos.base.tendermint.v1beta1.Service/GetSyncing"
GET_LATEST_BLOCK = "/cosmos.base.tendermint.v1beta1.Service/GetLatestBlock"
GET_BLOCK_BY_HEIGHT = "/cosmos.base.tendermint.v1beta1.Service/GetBlockByHeight"
CONSENSUS_PARAMS = "/cosmos.consensus.v1.Query/Params"
LEGACY_PARAMS = "/cosmos.params.v1beta1.Query/Params"
ACCOUNT = "/cosmos.auth.v1beta1.Query/Account"
ALL_BALANCES = "/cosmos.bank.v1beta1.Query/AllBalances"
BROADCAST_TX = "/cosmos.tx.v1beta1.Service/BroadcastTx"
SIMULATE = "/cosmos.tx.v1beta1.Service/Simulate"
GET_TX = "/cosmos.tx.v1beta1.Service/GetTx"

CHANNEL_OPTIONS = [
    # Keepalive settings
    ("grpc.keepalive_time_ms", 30000),
    ("grpc.keepalive_timeout_ms", 10000),
    ("grpc.http2.max_pings_without_data", 0),
    ("grpc.http2.min_time_between_pings_ms", 10000),

    # Blocks with many transactions exceed the 4 MB default
    ("grpc.max_send_message_length", 32 * 1024 * 1024),
    ("grpc.max_receive_message_length", 32 * 1024 * 1024),
]


def load_channel_credentials() -> grpc.ChannelCredentials:
    """
    Build TLS credentials, honouring a custom CA from the environment.

    ``COSMOS_SIGNER_CA`` names a PEM file that replaces the system roots,
    unless ``COSMOS_SIGNER_APPEND_CA=1`` appends it to the certifi bundle.
    With ``COSMOS_SIGNER_STRICT_CA=1`` an unreadable PEM is an error instead
    of a fallback to the default roots.

    Raises:
        GatewayConnectionError: If strict mode is on and the CA cannot be read
    """
    ca_path = os.environ.get(ENV_CA)
    if not ca_path:
        return grpc.ssl_channel_credentials()

    append_ca = os.environ.get(ENV_APPEND_CA) == "1"
    strict_ca = os.environ.get(ENV_STRICT_CA) == "1"
    try:
        with open(ca_path, "rb") as f:
            ca_data = f.read()
        if append_ca:
            with open(certifi.where(), "rb") as f:
                ca_data = f.read() + b"\n" + ca_data
            logger.info(f"Using custom CA certificate from {ca_path} appended to system roots")
        else:
            logger.info(f"Using custom CA certificate from {ca_path} (replacing system roots)")
    except OSError as e:
        logger.warning(f"Failed to load custom CA certificate from {ca_path}: {e}")
        if strict_ca:
            raise GatewayConnectionError(f"Failed to load custom CA certificate from {ca_path}: {e}") from e
        return grpc.ssl_channel_credentials()
    return grpc.ssl_channel_credentials(root_certificates=ca_data)


def _parse_legacy_block_params(value: str) -> BlockParams:
    """Parse the JSON ``BlockParams`` value stored by the legacy params module."""
    try:
        params = json.loads(value)
        max_bytes = int(params["max_bytes"])
        max_gas = int(params["max_gas"])
    except (ValueError, KeyError, TypeError) as e:
        raise BadResponse(f"Invalid legacy block params {value!r}: {e}") from e
    return BlockParams(max_bytes=max_bytes, max_gas=max_gas if max_gas >= 0 else None)


class GrpcGateway(NodeGateway):
    """
    Node gateway backed by a Cosmos node's gRPC endpoint.

    Args:
        contact: Node URL, timeout and chain prefix
    """

    def __init__(self, contact: Contact):
        self.contact = contact
        self._credentials = load_channel_credentials() if contact.is_secure else None
        if self._credentials is None:
            logger.warning(f"Using plaintext gRPC channel to {contact.target}")
        self._compression = grpc.Compression.Gzip if contact.use_gzip else grpc.Compression.NoCompression
        logger.debug(f"Initialized gRPC gateway for {contact.url}")

    def _create_channel(self) -> grpc.aio.Channel:
        if self._credentials is not None:
            return grpc.aio.secure_channel(
                self.contact.target,
                self._credentials,
                options=CHANNEL_OPTIONS,
                compression=self._compression,
            )
        return grpc.aio.insecure_channel(
            self.contact.target,
            options=CHANNEL_OPTIONS,
            compression=self._compression,
        )

    async def _unary(self, path: str, request, response_cls):
        """
        Send one unary request on a fresh channel.

        Both connecting and the call itself are bounded by the contact timeout.

        Raises:
            GatewayTimeoutError: If the node does not answer in time
            RequestError: If the node answers with a non-OK status
        """
        timeout = self.contact.timeout
        try:
            async with self._create_channel() as channel:
                await asyncio.wait_for(channel.channel_ready(), timeout)
                call = channel.unary_unary(
                    path,
                    request_serializer=type(request).SerializeToString,
                    response_deserializer=response_cls.FromString,
                )
                return await call(request, timeout=timeout)
        except asyncio.TimeoutError as e:
            raise GatewayTimeoutError(f"{path} timed out after {timeout}s") from e
        except grpc.aio.AioRpcError as e:
            code = e.code()
            logger.debug(f"{path} failed: {code.name} - {e.details()}")
            if code == grpc.StatusCode.DEADLINE_EXCEEDED:
                raise GatewayTimeoutError(f"{path} timed out after {timeout}s") from e
            raise RequestError(f"{path} failed: {code.name} - {e.details()}", code) from e

    async def _is_syncing(self) -> bool:
        response = await self._unary(GET_SYNCING, proto.GetSyncingRequest(), proto.GetSyncingResponse)
        return response.syncing

    async def get_chain_status(self) -> ChainStatus:
        if await self._is_syncing():
            return ChainStatus.syncing()
        try:
            response = await self._unary(
                GET_LATEST_BLOCK, proto.GetLatestBlockRequest(), proto.GetLatestBlockResponse
            )
        except RequestError as e:
            # Nodes report a chain without blocks as an error on this query
            if "nil Block" in str(e):
                return ChainStatus.waiting_to_start()
            raise
        if not response.HasField("block"):
            return ChainStatus.waiting_to_start()
        return ChainStatus.moving(response.block.header.height)

    async def get_latest_block(self) -> LatestBlock:
        syncing = await self._is_syncing()
        response = await self._unary(
            GET_LATEST_BLOCK, proto.GetLatestBlockRequest(), proto.GetLatestBlockResponse
        )
        if not response.HasField("block"):
            return LatestBlock.waiting_to_start()
        if syncing:
            return LatestBlock.syncing(response.block)
        return LatestBlock.latest(response.block)

    async def get_block(self, height: int):
        response = await self._unary(
            GET_BLOCK_BY_HEIGHT,
            proto.GetBlockByHeightRequest(height=height),
            proto.GetBlockByHeightResponse,
        )
        return response.block if response.HasField("block") else None

    async def get_block_params(self) -> BlockParams:
        try:
            response = await self._unary(
                CONSENSUS_PARAMS, proto.ConsensusParamsRequest(), proto.ConsensusParamsResponse
            )
        except RequestError as e:
            if e.status_code != grpc.StatusCode.UNIMPLEMENTED:
                raise
            logger.info("Consensus params query unimplemented, using legacy params module")
            return await self._get_legacy_block_params()

        if not response.params.HasField("block"):
            raise BadResponse("Consensus params response has no block params")
        block = response.params.block
        return BlockParams(
            max_bytes=block.max_bytes,
            max_gas=block.max_gas if block.max_gas >= 0 else None,
        )

    async def _get_legacy_block_params(self) -> BlockParams:
        response = await self._unary(
            LEGACY_PARAMS,
            proto.LegacyParamsRequest(subspace="baseapp", key="BlockParams"),
            proto.LegacyParamsResponse,
        )
        return _parse_legacy_block_params(response.param.value)

    async def get_account_info(self, address: Address) -> BaseAccount:
        request = proto.QueryAccountRequest(address=address.to_bech32(self.contact.chain_prefix))
        try:
            response = await self._unary(ACCOUNT, request, proto.QueryAccountResponse)
        except RequestError as e:
            if e.status_code == grpc.StatusCode.NOT_FOUND:
                raise NoToken(f"Account {request.address} has no tokens") from e
            raise
        if not response.HasField("account"):
            raise BadResponse(f"Account query for {request.address} returned no account")
        return AccountType.decode(response.account).get_base_account()

    async def get_tx_by_hash(self, txhash: str) -> Optional[TxResponse]:
        response = await self._unary(GET_TX, proto.GetTxRequest(hash=txhash), proto.GetTxResponse)
        if not response.HasField("tx_response"):
            return None
        return TxResponse.from_proto(response.tx_response)

    async def _broadcast_tx(self, tx_bytes: bytes, mode: BroadcastMode) -> TxResponse:
        request = proto.BroadcastTxRequest(tx_bytes=tx_bytes, mode=int(mode))
        response = await self._unary(BROADCAST_TX, request, proto.BroadcastTxResponse)
        if not response.HasField("tx_response"):
            raise BadResponse("Broadcast returned no tx response")
        return TxResponse.from_proto(response.tx_response)

    async def simulate(self, tx_bytes: bytes) -> SimulationResult:
        response = await self._unary(
            SIMULATE, proto.SimulateRequest(tx_bytes=tx_bytes), proto.SimulateResponse
        )
        if not response.HasField("gas_info"):
            raise BadResponse("Simulation returned no gas info")
        return SimulationResult.from_proto(response)

    async def get_balances(self, address: Address) -> List[Coin]:
        request = proto.QueryAllBalancesRequest(
            address=address.to_bech32(self.contact.chain_prefix),
            pagination=proto.PageRequest(limit=PAGE_LIMIT),
        )
        response = await self._unary(ALL_BALANCES, request, proto.QueryAllBalancesResponse)
        return [Coin.from_proto(coin) for coin in response.balances]
