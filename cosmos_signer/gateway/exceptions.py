"""
Exceptions for node gateway calls and transaction submission.
"""
from typing import TYPE_CHECKING, Any, List, Optional

from ..exceptions import CosmosSignerError

if TYPE_CHECKING:
    from ..models import Coin


class GatewayError(CosmosSignerError):
    """Base exception for node gateway errors."""
    pass


class GatewayConnectionError(GatewayError):
    """Raised when the node cannot be reached."""
    pass


class GatewayTimeoutError(GatewayConnectionError):
    """Raised when a gateway call exceeds the contact timeout."""
    pass


class RequestError(GatewayError):
    """Raised when the node answers a request with a gRPC error status."""

    def __init__(self, message: str, status_code: Optional[Any] = None):
        self.status_code = status_code
        super().__init__(message)


class NoToken(GatewayError):
    """Raised when the queried account does not exist on chain yet."""
    pass


class ChainNotRunning(GatewayError):
    """Raised when the chain has not produced its first block."""
    pass


class NodeNotSynced(GatewayError):
    """Raised when the node is still catching up with the chain."""
    pass


class NoBlockProduced(GatewayError):
    """Raised when no new block appeared within the wait timeout."""

    def __init__(self, elapsed: float):
        self.elapsed = elapsed
        super().__init__(f"No block produced in {elapsed:.1f}s")


class BadResponse(GatewayError):
    """Raised when the node returns a response missing required data."""
    pass


class DecodeError(GatewayError):
    """Raised when an ``Any`` in a response has an unknown or invalid payload."""
    pass


class BadInput(GatewayError):
    """Raised when caller-supplied arguments are out of range."""
    pass


class SystemClockError(GatewayError):
    """Raised when the local clock reads before the UNIX epoch."""
    pass


class TransactionError(GatewayError):
    """Base exception for transactions rejected or lost by the chain."""
    pass


class InsufficientFees(TransactionError):
    """Raised when the chain wants a higher fee; ``min_fees`` is what it asked for."""

    def __init__(self, min_fees: List["Coin"]):
        self.min_fees = min_fees
        required = ",".join(str(coin) for coin in min_fees)
        super().__init__(f"Insufficient fees, required: {required}")


class GasRequiredExceedsBlockMaximum(TransactionError):
    """Raised when the simulated gas is above the block gas limit."""

    def __init__(self, max_gas: int, required: int):
        self.max_gas = max_gas
        self.required = required
        super().__init__(f"Transaction needs {required} gas, block maximum is {max_gas}")


class TransactionFailed(TransactionError):
    """
    Raised when a transaction fails or cannot be found before the deadline.

    Attributes:
        tx_response: Response returned by the node
        elapsed: Seconds spent waiting before giving up
        sdk_error: Classified cosmos-sdk error code, if any
    """

    def __init__(self, tx_response: Any, elapsed: float, sdk_error: Optional[Any] = None):
        self.tx_response = tx_response
        self.elapsed = elapsed
        self.sdk_error = sdk_error
        txhash = getattr(tx_response, "txhash", "")
        detail = f" ({sdk_error.name})" if sdk_error is not None else ""
        super().__init__(f"Transaction {txhash} failed after {elapsed:.1f}s{detail}")
