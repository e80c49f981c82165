"""
CosmosClient - high-level transaction sending for Cosmos SDK chains.
"""
import asyncio
import logging
import math
import time
from typing import List, Optional, Sequence, Tuple

import grpc

from . import proto
from . import type_urls
from ._rate_limited_log import rate_limited_log
from .address import Address
from .gateway.contact import Contact
from .gateway.exceptions import (
    BadInput, BadResponse, ChainNotRunning, GasRequiredExceedsBlockMaximum, GatewayError,
    NoBlockProduced, NodeNotSynced, RequestError, SystemClockError, TransactionFailed
)
from .gateway.grpc_gateway import GrpcGateway
from .gateway.transport import NodeGateway
from .gateway.types import BroadcastMode, ChainState, SimulationResult, TxResponse
from .models import MAX_U64, Coin, Fee, MessageArgs, Msg, VoteOption
from .private_key import PrivateKey

logger = logging.getLogger(__name__)

MEMO = "Sent with Deep Space"

DEFAULT_TRANSACTION_TIMEOUT_BLOCKS = 100

# Largest gas limit the sdk accepts; simulation must not run out of gas
SIMULATION_GAS_LIMIT = 9223372036854775807

IBC_TRANSFER_PORT = "transfer"

# Status codes GetTx returns for transactions not yet committed
_NOT_IN_CHAIN_YET = (
    grpc.StatusCode.NOT_FOUND,
    grpc.StatusCode.UNKNOWN,
    grpc.StatusCode.INVALID_ARGUMENT,
)


class CosmosClient:
    """
    Client for building, signing and submitting transactions to a Cosmos chain.

    This client handles:
    1. Fetching the account and chain state needed to sign
    2. Estimating gas by simulation
    3. Broadcasting and waiting for inclusion

    Args:
        contact: Node URL, timeout and chain prefix
        gateway: Node gateway, defaults to a gRPC gateway for ``contact``
        gas_multiplier: Factor applied to simulated gas to get the gas limit;
            simulation is known to under-estimate
    """

    # Seconds between polls while waiting for a tx or a block
    POLL_INTERVAL = 1.0

    def __init__(
        self,
        contact: Contact,
        gateway: Optional[NodeGateway] = None,
        gas_multiplier: float = 2.0
    ):
        if not gas_multiplier > 0:
            raise ValueError(f"Gas multiplier must be positive, got {gas_multiplier}")
        self.contact = contact
        self.gateway = gateway or GrpcGateway(contact)
        self.gas_multiplier = gas_multiplier

    @property
    def chain_prefix(self) -> str:
        return self.contact.chain_prefix

    async def close(self) -> None:
        await self.gateway.close()

    async def __aenter__(self) -> "CosmosClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def get_message_args(
        self,
        our_address: Address,
        fee: Fee,
        block_timeout: Optional[int] = None
    ) -> MessageArgs:
        """
        Fetch a fresh signing context for ``our_address``.

        Args:
            our_address: Signer address
            fee: Fee to embed
            block_timeout: Blocks from now the tx stays valid for, default 100

        Returns:
            MessageArgs with the current sequence, account number and chain id

        Raises:
            NoToken: If the account does not exist yet
            NodeNotSynced: If the node is still syncing
            ChainNotRunning: If the chain has no blocks yet
        """
        account = await self.gateway.get_account_info(our_address)
        latest = await self.gateway.get_latest_block()

        if latest.state is ChainState.SYNCING:
            raise NodeNotSynced("Node is syncing, account state may be stale")
        if latest.state is ChainState.WAITING_TO_START:
            raise ChainNotRunning("Chain has not produced a block")
        if not latest.block.HasField("header"):
            raise BadResponse("Latest block has no header")

        if block_timeout is None:
            block_timeout = DEFAULT_TRANSACTION_TIMEOUT_BLOCKS
        return MessageArgs(
            sequence=account.sequence,
            account_number=account.account_number,
            chain_id=latest.chain_id,
            fee=fee,
            timeout_height=latest.height + block_timeout,
        )

    async def simulate_tx(
        self,
        messages: Sequence[Msg],
        fee_coins: Optional[Sequence[Coin]] = None,
        *,
        private_key: PrivateKey
    ) -> SimulationResult:
        """Sign ``messages`` against the current account state and simulate them."""
        our_address = private_key.to_address(self.chain_prefix)
        fee = Fee(amount=list(fee_coins or []), gas_limit=SIMULATION_GAS_LIMIT)
        args = await self.get_message_args(our_address, fee)
        tx_bytes = private_key.sign_std_msg(messages, args, MEMO)
        return await self.gateway.simulate(tx_bytes)

    async def get_fee_info(
        self,
        messages: Sequence[Msg],
        fee_coins: Optional[Sequence[Coin]] = None,
        *,
        private_key: PrivateKey
    ) -> Fee:
        """
        Simulate ``messages`` and build a fee with a padded gas limit.

        Returns:
            Fee paying ``fee_coins`` with ``gas_limit = gas_used * gas_multiplier``

        Raises:
            GasRequiredExceedsBlockMaximum: If the simulation used more gas
                than a block allows
        """
        simulation = await self.simulate_tx(messages, fee_coins, private_key=private_key)
        gas_used = simulation.gas_used
        logger.debug(f"Simulation used {gas_used} gas")

        block_params = await self.gateway.get_block_params()
        max_gas = block_params.max_gas
        if max_gas is not None:
            if gas_used > max_gas:
                raise GasRequiredExceedsBlockMaximum(max_gas, gas_used)
            # A quotient of one means the tx needs more than half a block
            if gas_used > 0 and max_gas // gas_used == 1:
                rate_limited_log(
                    f"Tx simulation has gas usage {gas_used} which is close to max_gas {max_gas}. "
                    "Gas estimation is known to be inaccurate, a tx over the block maximum "
                    "fails with a timeout rather than an error.",
                    logger_instance=logger,
                    key="gas-near-block-maximum",
                )

        gas_limit = min(math.ceil(gas_used * self.gas_multiplier), MAX_U64)
        return Fee(amount=list(fee_coins or []), gas_limit=gas_limit)

    async def send_transaction(
        self,
        tx_bytes: bytes,
        mode: BroadcastMode = BroadcastMode.SYNC
    ) -> TxResponse:
        """Broadcast already signed ``TxRaw`` bytes, raising on sdk errors."""
        return await self.gateway.broadcast_tx(tx_bytes, mode)

    async def send_message(
        self,
        messages: Sequence[Msg],
        memo: Optional[str] = None,
        fee_coins: Optional[Sequence[Coin]] = None,
        wait_timeout: Optional[float] = None,
        block_timeout: Optional[int] = None,
        *,
        private_key: PrivateKey
    ) -> TxResponse:
        """
        Estimate gas, sign and broadcast ``messages``.

        Args:
            messages: Messages in execution order
            memo: Transaction memo, defaults to ``MEMO``
            fee_coins: Fee to pay, empty for a zero fee transaction
            wait_timeout: Seconds to wait for inclusion, None to return after ``CheckTx``
            block_timeout: Blocks from now the tx stays valid for, default 100
            private_key: Signing key

        Returns:
            The broadcast response, or the committed response when waiting

        Raises:
            GasRequiredExceedsBlockMaximum: If the tx cannot fit in a block
            InsufficientFees: If the node asks for a higher fee
            TransactionFailed: If the tx fails or is not included in time
        """
        our_address = private_key.to_address(self.chain_prefix)
        fee = await self.get_fee_info(messages, fee_coins, private_key=private_key)
        args = await self.get_message_args(our_address, fee, block_timeout)
        return await self.send_message_with_args(
            messages, memo, args, wait_timeout, private_key=private_key
        )

    async def send_message_with_args(
        self,
        messages: Sequence[Msg],
        memo: Optional[str],
        args: MessageArgs,
        wait_timeout: Optional[float] = None,
        *,
        private_key: PrivateKey
    ) -> TxResponse:
        """
        Sign with a caller-provided context and broadcast in sync mode.

        Useful for queueing several transactions with consecutive sequences.
        """
        tx_bytes = private_key.sign_std_msg(messages, args, MEMO if memo is None else memo)
        response = await self.send_transaction(tx_bytes, BroadcastMode.SYNC)
        logger.info(f"Broadcast transaction {response.txhash}")
        if wait_timeout is None:
            return response
        return await self.wait_for_tx(response, wait_timeout)

    async def wait_for_tx(self, response: TxResponse, timeout: float) -> TxResponse:
        """
        Poll for ``response.txhash`` until it is in a block.

        Raises:
            TransactionFailed: If the tx does not appear within ``timeout``
                seconds or the node rejects the lookup
        """
        start = time.monotonic()
        while time.monotonic() - start < timeout:
            try:
                committed = await self.gateway.get_tx_by_hash(response.txhash)
            except RequestError as e:
                if e.status_code not in _NOT_IN_CHAIN_YET:
                    raise TransactionFailed(response, time.monotonic() - start) from e
            else:
                if committed is not None:
                    return committed
            await asyncio.sleep(self.POLL_INTERVAL)
        raise TransactionFailed(response, timeout)

    async def wait_for_next_block(self, timeout: float) -> None:
        """
        Wait until the chain height increases.

        Raises:
            NodeNotSynced: If the node is syncing
            ChainNotRunning: If the chain has not started
            NoBlockProduced: If no block appears within ``timeout`` seconds
        """
        start = time.monotonic()
        last_height = None
        while time.monotonic() - start < timeout:
            try:
                status = await self.gateway.get_chain_status()
            except GatewayError as e:
                # One failed poll does not end the wait
                logger.debug(f"Chain status unavailable while waiting for a block: {e}")
            else:
                if status.state is ChainState.SYNCING:
                    raise NodeNotSynced("Node is syncing")
                if status.state is ChainState.WAITING_TO_START:
                    raise ChainNotRunning("Chain has not produced a block")
                if last_height is None:
                    last_height = status.block_height
                elif status.block_height > last_height:
                    return
            await asyncio.sleep(self.POLL_INTERVAL)
        raise NoBlockProduced(timeout)

    async def send_coins(
        self,
        amount: Coin,
        fee_coin: Optional[Coin],
        destination: Address,
        wait_timeout: Optional[float] = None,
        *,
        private_key: PrivateKey
    ) -> TxResponse:
        """Send ``amount`` to ``destination`` in a single ``MsgSend``."""
        our_address = private_key.to_address(self.chain_prefix)
        send = proto.MsgSend(
            from_address=our_address.to_bech32(self.chain_prefix),
            to_address=destination.to_bech32(self.chain_prefix),
            amount=[amount.to_proto()],
        )
        return await self._send_single(
            type_urls.MSG_SEND_TYPE_URL, send, fee_coin, wait_timeout, private_key
        )

    async def _send_single(
        self,
        type_url: str,
        message,
        fee_coin: Optional[Coin],
        wait_timeout: Optional[float],
        private_key: PrivateKey
    ) -> TxResponse:
        msg = Msg.new(type_url, message)
        fee_coins = [fee_coin] if fee_coin is not None else []
        return await self.send_message(
            [msg], None, fee_coins, wait_timeout, private_key=private_key
        )

    async def delegate_to_validator(
        self,
        validator_address: Address,
        amount: Coin,
        fee_coin: Optional[Coin],
        wait_timeout: Optional[float] = None,
        *,
        private_key: PrivateKey
    ) -> TxResponse:
        """
        Bond ``amount`` to a validator.

        Args:
            validator_address: Operator address, rendered with its own
                ``valoper`` prefix
            amount: Stake to delegate
            fee_coin: Fee to pay, None for a zero fee
            wait_timeout: Seconds to wait for inclusion
            private_key: Delegator key
        """
        delegate = proto.MsgDelegate(
            delegator_address=private_key.to_address(self.chain_prefix).to_bech32(),
            validator_address=str(validator_address),
            amount=amount.to_proto(),
        )
        return await self._send_single(
            type_urls.MSG_DELEGATE_TYPE_URL, delegate, fee_coin, wait_timeout, private_key
        )

    async def undelegate_from_validator(
        self,
        validator_address: Address,
        amount: Coin,
        fee_coin: Optional[Coin],
        wait_timeout: Optional[float] = None,
        *,
        private_key: PrivateKey
    ) -> TxResponse:
        """Start unbonding ``amount`` from a validator."""
        undelegate = proto.MsgUndelegate(
            delegator_address=private_key.to_address(self.chain_prefix).to_bech32(),
            validator_address=str(validator_address),
            amount=amount.to_proto(),
        )
        return await self._send_single(
            type_urls.MSG_UNDELEGATE_TYPE_URL, undelegate, fee_coin, wait_timeout, private_key
        )

    async def redelegate(
        self,
        source_validator: Address,
        destination_validator: Address,
        amount: Coin,
        fee_coin: Optional[Coin],
        wait_timeout: Optional[float] = None,
        *,
        private_key: PrivateKey
    ) -> TxResponse:
        """Move ``amount`` of stake between validators without unbonding."""
        redelegate = proto.MsgBeginRedelegate(
            delegator_address=private_key.to_address(self.chain_prefix).to_bech32(),
            validator_src_address=str(source_validator),
            validator_dst_address=str(destination_validator),
            amount=amount.to_proto(),
        )
        return await self._send_single(
            type_urls.MSG_BEGIN_REDELEGATE_TYPE_URL, redelegate, fee_coin, wait_timeout, private_key
        )

    async def withdraw_delegator_rewards(
        self,
        validator_address: Address,
        fee_coin: Optional[Coin],
        wait_timeout: Optional[float] = None,
        *,
        private_key: PrivateKey
    ) -> TxResponse:
        withdraw = proto.MsgWithdrawDelegatorReward(
            delegator_address=private_key.to_address(self.chain_prefix).to_bech32(),
            validator_address=str(validator_address),
        )
        return await self._send_single(
            type_urls.MSG_WITHDRAW_DELEGATOR_REWARD_TYPE_URL, withdraw, fee_coin, wait_timeout,
            private_key
        )

    async def withdraw_validator_commission(
        self,
        fee_coin: Optional[Coin],
        wait_timeout: Optional[float] = None,
        *,
        private_key: PrivateKey
    ) -> TxResponse:
        """Withdraw the commission of the validator operated by ``private_key``."""
        operator = private_key.to_address(f"{self.chain_prefix}valoper")
        withdraw = proto.MsgWithdrawValidatorCommission(validator_address=operator.to_bech32())
        return await self._send_single(
            type_urls.MSG_WITHDRAW_VALIDATOR_COMMISSION_TYPE_URL, withdraw, fee_coin, wait_timeout,
            private_key
        )

    async def fund_community_pool(
        self,
        amount: Coin,
        fee_coin: Optional[Coin],
        wait_timeout: Optional[float] = None,
        *,
        private_key: PrivateKey
    ) -> TxResponse:
        fund = proto.MsgFundCommunityPool(
            amount=[amount.to_proto()],
            depositor=private_key.to_address(self.chain_prefix).to_bech32(),
        )
        return await self._send_single(
            type_urls.MSG_FUND_COMMUNITY_POOL_TYPE_URL, fund, fee_coin, wait_timeout, private_key
        )

    async def vote_on_gov_proposal(
        self,
        proposal_id: int,
        vote: VoteOption,
        fee_coin: Optional[Coin],
        wait_timeout: Optional[float] = None,
        *,
        private_key: PrivateKey
    ) -> TxResponse:
        """
        Vote on a governance proposal.

        Raises:
            BadInput: If ``vote`` is ``VoteOption.UNSPECIFIED``
        """
        option = VoteOption(vote)
        if option is VoteOption.UNSPECIFIED:
            raise BadInput("A vote must choose an option")
        ballot = proto.MsgVote(
            proposal_id=proposal_id,
            voter=private_key.to_address(self.chain_prefix).to_bech32(),
            option=int(option),
        )
        return await self._send_single(
            type_urls.MSG_VOTE_TYPE_URL, ballot, fee_coin, wait_timeout, private_key
        )

    async def create_gov_proposal(
        self,
        content: Msg,
        deposit: Coin,
        fee_coin: Optional[Coin],
        wait_timeout: Optional[float] = None,
        *,
        private_key: PrivateKey
    ) -> TxResponse:
        """
        Submit a governance proposal with an initial deposit.

        Args:
            content: Proposal content, e.g. a ``TextProposal`` wrapped with
                ``Msg.new(TEXT_PROPOSAL_TYPE_URL, ...)``
            deposit: Initial deposit
            fee_coin: Fee to pay, None for a zero fee
            wait_timeout: Seconds to wait for inclusion
            private_key: Proposer key
        """
        proposal = proto.MsgSubmitProposal(
            content=content.to_any(),
            initial_deposit=[deposit.to_proto()],
            proposer=private_key.to_address(self.chain_prefix).to_bech32(),
        )
        return await self._send_single(
            type_urls.MSG_SUBMIT_PROPOSAL_TYPE_URL, proposal, fee_coin, wait_timeout, private_key
        )

    def _verify_invariant_msg(self, module_name: str, invariant_route: str, private_key: PrivateKey) -> Msg:
        verify = proto.MsgVerifyInvariant(
            sender=private_key.to_address(self.chain_prefix).to_bech32(),
            invariant_module_name=module_name,
            invariant_route=invariant_route,
        )
        return Msg.new(type_urls.MSG_VERIFY_INVARIANT_TYPE_URL, verify)

    async def invariant_check(
        self,
        module_name: str,
        invariant_route: str,
        fee_coin: Optional[Coin] = None,
        *,
        private_key: PrivateKey
    ) -> SimulationResult:
        """
        Simulate an invariant check without halting the chain.

        A broken invariant shows up as a simulation failure.
        """
        msg = self._verify_invariant_msg(module_name, invariant_route, private_key)
        fee_coins = [fee_coin] if fee_coin is not None else []
        return await self.simulate_tx([msg], fee_coins, private_key=private_key)

    async def invariant_halt(
        self,
        module_name: str,
        invariant_route: str,
        fee_coin: Optional[Coin] = None,
        wait_timeout: Optional[float] = None,
        *,
        private_key: PrivateKey
    ) -> TxResponse:
        """Broadcast an invariant check; the chain halts if the invariant is broken."""
        msg = self._verify_invariant_msg(module_name, invariant_route, private_key)
        logger.warning(f"Submitting chain-halting invariant check {module_name}/{invariant_route}")
        fee_coins = [fee_coin] if fee_coin is not None else []
        return await self.send_message(
            [msg], None, fee_coins, wait_timeout, private_key=private_key
        )

    async def send_ibc_transfer(
        self,
        amount: Coin,
        fee_coin: Optional[Coin],
        receiver: str,
        channel_id: str,
        ibc_timeout: float,
        wait_timeout: Optional[float] = None,
        memo: Optional[str] = None,
        *,
        private_key: PrivateKey
    ) -> TxResponse:
        """
        Send ``amount`` over IBC, timing out ``ibc_timeout`` seconds from now.

        Raises:
            BadInput: If ``ibc_timeout`` is negative or the timestamp overflows
            SystemClockError: If the local clock reads before the UNIX epoch
        """
        now_ns = time.time_ns()
        if now_ns < 0:
            raise SystemClockError("System clock reads before the UNIX epoch")
        if not math.isfinite(ibc_timeout) or ibc_timeout < 0:
            raise BadInput(f"IBC timeout must be a non-negative number of seconds, got {ibc_timeout}")
        timeout_timestamp = now_ns + int(ibc_timeout * 1_000_000_000)
        if timeout_timestamp > MAX_U64:
            raise BadInput("IBC timeout timestamp exceeds u64 range")
        return await self._send_ibc_transfer(
            amount, fee_coin, receiver, channel_id, None, timeout_timestamp,
            wait_timeout, memo, private_key
        )

    async def send_ibc_transfer_with_height(
        self,
        amount: Coin,
        fee_coin: Optional[Coin],
        receiver: str,
        channel_id: str,
        timeout_height: Tuple[int, int],
        wait_timeout: Optional[float] = None,
        memo: Optional[str] = None,
        *,
        private_key: PrivateKey
    ) -> TxResponse:
        """
        Send ``amount`` over IBC, timing out at a counterparty height.

        Args:
            timeout_height: ``(revision_number, revision_height)`` on the
                receiving chain
        """
        revision_number, revision_height = timeout_height
        height = proto.Height(revision_number=revision_number, revision_height=revision_height)
        return await self._send_ibc_transfer(
            amount, fee_coin, receiver, channel_id, height, 0,
            wait_timeout, memo, private_key
        )

    async def _send_ibc_transfer(
        self,
        amount: Coin,
        fee_coin: Optional[Coin],
        receiver: str,
        channel_id: str,
        timeout_height,
        timeout_timestamp: int,
        wait_timeout: Optional[float],
        memo: Optional[str],
        private_key: PrivateKey
    ) -> TxResponse:
        memo = MEMO if memo is None else memo
        transfer = proto.MsgTransfer(
            source_port=IBC_TRANSFER_PORT,
            source_channel=channel_id,
            token=amount.to_proto(),
            sender=private_key.to_address(self.chain_prefix).to_bech32(),
            receiver=receiver,
            timeout_timestamp=timeout_timestamp,
            memo=memo,
        )
        if timeout_height is not None:
            transfer.timeout_height.CopyFrom(timeout_height)
        msg = Msg.new(type_urls.MSG_TRANSFER_TYPE_URL, transfer)
        fee_coins = [fee_coin] if fee_coin is not None else []
        return await self.send_message(
            [msg], memo, fee_coins, wait_timeout, private_key=private_key
        )

    async def get_balances(self, address: Address) -> List[Coin]:
        return await self.gateway.get_balances(address)
