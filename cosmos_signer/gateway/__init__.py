"""
Gateway module for the cosmos-signer SDK.

This module provides access to a Cosmos node: chain status, blocks,
accounts, simulation and broadcast, over gRPC or an in-memory stub.
"""
from .contact import Contact
from .exceptions import (
    BadInput, BadResponse, ChainNotRunning, DecodeError, GasRequiredExceedsBlockMaximum,
    GatewayConnectionError, GatewayError, GatewayTimeoutError, InsufficientFees, NoBlockProduced,
    NodeNotSynced, NoToken, RequestError, SystemClockError, TransactionError, TransactionFailed
)
from .grpc_gateway import GrpcGateway
from .sdk_errors import SdkErrorCode, check_for_sdk_error, parse_required_fees
from .stub_gateway import StubGateway
from .transport import NodeGateway
from .types import (
    AccountKind, AccountType, BaseAccount, BroadcastMode, ChainState, ChainStatus, LatestBlock,
    SimulationResult, TxResponse
)

__all__ = [
    "Contact",
    "NodeGateway",
    "GrpcGateway",
    "StubGateway",
    "SdkErrorCode",
    "check_for_sdk_error",
    "parse_required_fees",
    "AccountKind",
    "AccountType",
    "BaseAccount",
    "BroadcastMode",
    "ChainState",
    "ChainStatus",
    "LatestBlock",
    "SimulationResult",
    "TxResponse",
    "GatewayError",
    "GatewayConnectionError",
    "GatewayTimeoutError",
    "RequestError",
    "NoToken",
    "ChainNotRunning",
    "NodeNotSynced",
    "NoBlockProduced",
    "BadResponse",
    "DecodeError",
    "BadInput",
    "SystemClockError",
    "TransactionError",
    "InsufficientFees",
    "GasRequiredExceedsBlockMaximum",
    "TransactionFailed",
]
