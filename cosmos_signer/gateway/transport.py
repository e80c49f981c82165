"""
Transport layer for talking to a Cosmos node.

This module defines the interface every node gateway implements, so the
client works the same over gRPC or against the in-memory stub.
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from ..address import Address
from ..models import BlockParams, Coin
from .sdk_errors import check_for_sdk_error
from .types import BaseAccount, BroadcastMode, ChainStatus, LatestBlock, SimulationResult, TxResponse

logger = logging.getLogger(__name__)


class NodeGateway(ABC):
    """
    Abstract base class for node gateway implementations.

    Every call is a coroutine bounded by the gateway's own timeout. Failures
    surface as :class:`~cosmos_signer.gateway.exceptions.GatewayError`
    subclasses, never as transport-library exceptions.
    """

    @abstractmethod
    async def get_chain_status(self) -> ChainStatus:
        """
        Report whether the chain is moving, syncing or waiting to start.

        Returns:
            ChainStatus carrying the latest height when moving
        """
        pass

    @abstractmethod
    async def get_latest_block(self) -> LatestBlock:
        """Latest block, tagged with the node's sync state."""
        pass

    @abstractmethod
    async def get_block(self, height: int):
        """
        Fetch the block at ``height``.

        Returns:
            The block, or None if the node has no block at that height
        """
        pass

    @abstractmethod
    async def get_block_params(self) -> BlockParams:
        """
        Consensus block limits.

        Implementations fall back to the legacy params module on chains that
        predate the consensus module.
        """
        pass

    @abstractmethod
    async def get_account_info(self, address: Address) -> BaseAccount:
        """
        Account number and sequence for ``address``.

        Raises:
            NoToken: If the chain has never seen the account
            DecodeError: If the account is of an unknown type
        """
        pass

    @abstractmethod
    async def get_tx_by_hash(self, txhash: str) -> Optional[TxResponse]:
        """
        Look up a transaction by its hex hash.

        Returns:
            The transaction response, or None if the node returned no response

        Raises:
            RequestError: If the node rejects the query, including with
                ``NOT_FOUND`` for transactions not yet in a block
        """
        pass

    @abstractmethod
    async def simulate(self, tx_bytes: bytes) -> SimulationResult:
        """Run signed ``TxRaw`` bytes without committing them."""
        pass

    @abstractmethod
    async def get_balances(self, address: Address) -> List[Coin]:
        pass

    @abstractmethod
    async def _broadcast_tx(self, tx_bytes: bytes, mode: BroadcastMode) -> TxResponse:
        """Submit ``tx_bytes`` and return the raw node response."""
        pass

    async def broadcast_tx(self, tx_bytes: bytes, mode: BroadcastMode = BroadcastMode.SYNC) -> TxResponse:
        """
        Broadcast signed ``TxRaw`` bytes and classify cosmos-sdk failures.

        Args:
            tx_bytes: Output of ``sign_std_msg``
            mode: Broadcast mode, ``SYNC`` waits for ``CheckTx``

        Returns:
            The node's response when no sdk error is reported

        Raises:
            InsufficientFees: If the node asks for a higher fee
            TransactionFailed: For any other error in the ``sdk`` codespace
        """
        response = await self._broadcast_tx(tx_bytes, mode)
        logger.debug(f"Broadcast {response.txhash} with code {response.code}")
        check_for_sdk_error(response)
        return response

    async def close(self) -> None:
        """Release any resources held by the gateway."""
        pass
