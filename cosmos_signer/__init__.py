"""
cosmos-signer SDK: keys, addresses and transaction signing for Cosmos SDK chains.
"""
import logging

from .address import DEFAULT_PREFIX, Address, get_module_account_address
from .client import MEMO, CosmosClient
from .exceptions import (
    AddressError, CosmosSignerError, CryptoError, EncodingError, HdWalletError, ParseError
)
from .gateway import (
    Contact, GatewayError, GrpcGateway, InsufficientFees, NodeGateway, SdkErrorCode, StubGateway,
    TransactionFailed
)
from .mnemonic import Language, Mnemonic
from .models import BlockParams, Coin, Fee, MessageArgs, Msg, Tip, VoteOption
from .private_key import (
    COSMOS_DEFAULT_PATH, ETHERMINT_DEFAULT_PATH, CosmosPrivateKey, EthermintPrivateKey, PrivateKey
)
from .public_key import CosmosPublicKey, EthermintPublicKey, PublicKey
from .tx_builder import SignedTx
from .version import __version__

# Library logging stays silent unless the application configures handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Address",
    "DEFAULT_PREFIX",
    "get_module_account_address",
    "CosmosPublicKey",
    "EthermintPublicKey",
    "PublicKey",
    "CosmosPrivateKey",
    "EthermintPrivateKey",
    "PrivateKey",
    "COSMOS_DEFAULT_PATH",
    "ETHERMINT_DEFAULT_PATH",
    "Mnemonic",
    "Language",
    "Coin",
    "Fee",
    "Tip",
    "Msg",
    "MessageArgs",
    "BlockParams",
    "VoteOption",
    "SignedTx",
    "CosmosClient",
    "MEMO",
    "Contact",
    "NodeGateway",
    "GrpcGateway",
    "StubGateway",
    "SdkErrorCode",
    "CosmosSignerError",
    "CryptoError",
    "EncodingError",
    "HdWalletError",
    "AddressError",
    "ParseError",
    "GatewayError",
    "InsufficientFees",
    "TransactionFailed",
    "__version__",
]
