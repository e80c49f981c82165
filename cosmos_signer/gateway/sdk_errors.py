"""
Classification of cosmos-sdk error codes returned in transaction responses.
"""
import logging
import re
from enum import IntEnum
from typing import List, Optional

from ..exceptions import ParseError
from ..models import Coin
from .exceptions import InsufficientFees, TransactionFailed

logger = logging.getLogger(__name__)

SDK_CODESPACE = "sdk"

_REQUIRED_FEES = re.compile(r"insufficient fees; got: \S* required: ([^\s:]+)")


class SdkErrorCode(IntEnum):
    """Error codes registered by the cosmos-sdk ``sdk`` codespace."""
    ErrInternal = 1
    ErrTxDecode = 2
    ErrInvalidSequence = 3
    ErrUnauthorized = 4
    ErrInsufficientFunds = 5
    ErrUnknownRequest = 6
    ErrInvalidAddress = 7
    ErrInvalidPubKey = 8
    ErrUnknownAddress = 9
    ErrInvalidCoins = 10
    ErrOutOfGas = 11
    ErrMemoTooLarge = 12
    ErrInsufficientFee = 13
    ErrTooManySignatures = 14
    ErrNoSignatures = 15
    ErrJSONMarshal = 16
    ErrJSONUnmarshal = 17
    ErrInvalidRequest = 18
    ErrTxInMempoolCache = 19
    ErrMempoolIsFull = 20
    ErrTxTooLarge = 21
    ErrKeyNotFound = 22
    ErrWrongPassword = 23
    ErrInvalidSigner = 24
    ErrInvalidGasAdjustment = 25
    ErrInvalidHeight = 26
    ErrInvalidVersion = 27
    ErrInvalidChainID = 28
    ErrInvalidType = 29
    ErrTxTimeoutHeight = 30
    ErrUnknownExtensionOptions = 31
    ErrWrongSequence = 32
    ErrPackAny = 33
    ErrUnpackAny = 34
    ErrLogic = 35
    ErrConflict = 36
    ErrNotSupported = 37
    ErrNotFound = 38
    ErrIO = 39
    ErrAppConfig = 40
    ErrPanic = 111222

    @classmethod
    def from_code(cls, code: int) -> Optional["SdkErrorCode"]:
        """Return the matching member, or None for codes this enum does not know."""
        try:
            return cls(code)
        except ValueError:
            return None

    @classmethod
    def from_response(cls, tx_response) -> Optional["SdkErrorCode"]:
        if tx_response.codespace != SDK_CODESPACE:
            return None
        return cls.from_code(tx_response.code)


def parse_required_fees(raw_log: str) -> Optional[List[Coin]]:
    """
    Extract the required fee coins from an insufficient-fee raw log.

    Example log:
        ``insufficient fees; got: 1foo required: 50000ualtg,250000ufootoken: insufficient fee``

    Returns:
        The required coins, or None if the log does not match or a coin
        does not parse
    """
    match = _REQUIRED_FEES.search(raw_log or "")
    if not match:
        return None
    try:
        return [Coin.from_str(part) for part in match.group(1).split(",") if part]
    except ParseError as e:
        logger.debug(f"Could not parse required fees from raw log: {e}")
        return None


def check_for_sdk_error(tx_response) -> None:
    """
    Raise if a transaction response carries an sdk error.

    Raises:
        InsufficientFees: If the chain rejected the fee and reported the
            minimum it wants
        TransactionFailed: For any other non-zero code in the sdk codespace
    """
    if tx_response.code == 0:
        return

    sdk_error = SdkErrorCode.from_response(tx_response)
    if sdk_error is SdkErrorCode.ErrInsufficientFee:
        min_fees = parse_required_fees(tx_response.raw_log)
        if min_fees is not None:
            raise InsufficientFees(min_fees)

    if tx_response.codespace == SDK_CODESPACE:
        raise TransactionFailed(tx_response, 0.0, sdk_error)
