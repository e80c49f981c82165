"""
In-memory node gateway.

This module provides a deterministic stand-in for a Cosmos node, for
offline development and tests. It keeps accounts, balances, a block height
and a transaction store, and accepts any well-formed ``TxRaw`` bytes.
"""
import logging
from collections import deque
from typing import Deque, Dict, List, Optional

import grpc
from google.protobuf.message import DecodeError as ProtoDecodeError

from .. import proto
from .. import type_urls
from ..address import Address
from ..models import BlockParams, Coin
from ..public_key import CosmosPublicKey, EthermintPublicKey
from ..utils import tx_hash
from .exceptions import ChainNotRunning, NoToken, RequestError
from .transport import NodeGateway
from .types import (
    BaseAccount, BroadcastMode, ChainStatus, LatestBlock, SimulationResult, TxResponse
)

logger = logging.getLogger(__name__)

_PUBLIC_KEY_FAMILIES = {
    type_urls.SECP256K1_PUBKEY_TYPE_URL: (proto.Secp256k1PubKey, CosmosPublicKey),
    type_urls.ETHERMINT_PUBKEY_TYPE_URL: (proto.EthSecp256k1PubKey, EthermintPublicKey),
}


class StubGateway(NodeGateway):
    """
    A simple in-memory chain implementing the full gateway interface.

    Attributes:
        chain_id: Chain id reported in block headers
        block_height: Current height; 0 means the chain has not started
        syncing: Report the node as catching up
        auto_advance: Produce one block per chain status query
        simulate_gas: Gas reported as used by every simulation
        block_params: Consensus limits returned by ``get_block_params``
        inclusion_polls: Number of ``get_tx_by_hash`` lookups that report a
            new transaction as not found before it appears
    """

    def __init__(
        self,
        chain_id: str = "stub-chain",
        block_height: int = 1,
        simulate_gas: int = 100_000,
        block_params: Optional[BlockParams] = None,
    ):
        self.chain_id = chain_id
        self.block_height = block_height
        self.syncing = False
        self.auto_advance = False
        self.simulate_gas = simulate_gas
        self.block_params = block_params or BlockParams(max_bytes=22020096, max_gas=None)
        self.inclusion_polls = 0

        self.accounts: Dict[bytes, BaseAccount] = {}
        self.balances: Dict[bytes, List[Coin]] = {}
        self.transactions: Dict[str, TxResponse] = {}
        self.broadcasts: List[bytes] = []
        self._scripted: Deque[TxResponse] = deque()
        self._pending: Dict[str, int] = {}

    def add_account(
        self,
        address: Address,
        account_number: int = 0,
        sequence: int = 0,
        balances: Optional[List[Coin]] = None
    ) -> BaseAccount:
        """Register an account so that it can sign and be queried."""
        account = BaseAccount(address=address, account_number=account_number, sequence=sequence)
        self.accounts[address.as_bytes()] = account
        self.balances[address.as_bytes()] = list(balances or [])
        return account

    def advance_block(self, count: int = 1) -> int:
        self.block_height += count
        return self.block_height

    def script_broadcast(self, response: TxResponse) -> None:
        """Queue a response for the next broadcast instead of accepting the tx."""
        self._scripted.append(response)

    def _block(self, height: int):
        return proto.Block(
            header=proto.Header(chain_id=self.chain_id, height=height),
            last_commit=proto.Commit(height=max(height - 1, 0)),
        )

    def _decode_tx(self, tx_bytes: bytes):
        tx_raw = proto.TxRaw()
        auth_info = proto.AuthInfo()
        try:
            tx_raw.ParseFromString(tx_bytes)
            auth_info.ParseFromString(tx_raw.auth_info_bytes)
        except ProtoDecodeError as e:
            raise RequestError(f"tx parse error: {e}", grpc.StatusCode.INVALID_ARGUMENT) from e
        if not auth_info.signer_infos or not tx_raw.signatures:
            raise RequestError("tx has no signer", grpc.StatusCode.INVALID_ARGUMENT)
        return tx_raw, auth_info

    def _signer_address(self, auth_info) -> Optional[Address]:
        public_key_any = auth_info.signer_infos[0].public_key
        family = _PUBLIC_KEY_FAMILIES.get(public_key_any.type_url)
        if family is None:
            return None
        message_cls, key_cls = family
        message = message_cls()
        message.ParseFromString(public_key_any.value)
        return key_cls(message.key).to_address()

    async def get_chain_status(self) -> ChainStatus:
        if self.syncing:
            return ChainStatus.syncing()
        if self.block_height == 0:
            return ChainStatus.waiting_to_start()
        if self.auto_advance:
            self.advance_block()
        return ChainStatus.moving(self.block_height)

    async def get_latest_block(self) -> LatestBlock:
        if self.block_height == 0:
            return LatestBlock.waiting_to_start()
        block = self._block(self.block_height)
        if self.syncing:
            return LatestBlock.syncing(block)
        return LatestBlock.latest(block)

    async def get_block(self, height: int):
        if 0 < height <= self.block_height:
            return self._block(height)
        return None

    async def get_block_params(self) -> BlockParams:
        return self.block_params

    async def get_account_info(self, address: Address) -> BaseAccount:
        account = self.accounts.get(address.as_bytes())
        if account is None:
            raise NoToken(f"Account {address} has no tokens")
        return account

    async def get_tx_by_hash(self, txhash: str) -> Optional[TxResponse]:
        txhash = txhash.upper()
        remaining = self._pending.get(txhash, 0)
        if remaining > 0:
            self._pending[txhash] = remaining - 1
            raise RequestError(f"tx not found: {txhash}", grpc.StatusCode.NOT_FOUND)
        response = self.transactions.get(txhash)
        if response is None:
            raise RequestError(f"tx not found: {txhash}", grpc.StatusCode.NOT_FOUND)
        return response

    async def simulate(self, tx_bytes: bytes) -> SimulationResult:
        _, auth_info = self._decode_tx(tx_bytes)
        logger.debug(f"Simulated tx using {self.simulate_gas} gas")
        return SimulationResult(gas_wanted=auth_info.fee.gas_limit, gas_used=self.simulate_gas)

    async def _broadcast_tx(self, tx_bytes: bytes, mode: BroadcastMode) -> TxResponse:
        if self.block_height == 0:
            raise ChainNotRunning("Stub chain has not produced a block")
        _, auth_info = self._decode_tx(tx_bytes)
        txhash = tx_hash(tx_bytes)
        self.broadcasts.append(tx_bytes)

        if self._scripted:
            response = self._scripted.popleft()
            response.txhash = response.txhash or txhash
            logger.debug(f"Returning scripted response for {txhash} with code {response.code}")
            return response

        signer = self._signer_address(auth_info)
        account = self.accounts.get(signer.as_bytes()) if signer is not None else None
        if account is not None:
            self.accounts[signer.as_bytes()] = BaseAccount(
                address=account.address,
                account_number=account.account_number,
                sequence=account.sequence + 1,
                pubkey=auth_info.signer_infos[0].public_key,
            )

        response = TxResponse(
            txhash=txhash,
            height=self.block_height + 1,
            gas_wanted=auth_info.fee.gas_limit,
            gas_used=self.simulate_gas,
        )
        self.transactions[txhash] = response
        self._pending[txhash] = self.inclusion_polls
        logger.info(f"Accepted transaction {txhash} in {mode.name} mode")
        return response

    async def get_balances(self, address: Address) -> List[Coin]:
        return list(self.balances.get(address.as_bytes(), []))
