"""
Transaction assembly in SIGN_MODE_DIRECT.

The builder is key-family agnostic: callers pass the public key already
wrapped in its ``Any`` and a signing callable, and get back the canonical
``TxRaw`` bytes.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Sequence, Tuple

from google.protobuf.message import EncodeError as ProtoEncodeError

from . import proto
from .exceptions import EncodeError
from .models import MessageArgs, Msg
from .utils import tx_hash

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignedTx:
    """The encoded parts of a signed transaction."""
    body_bytes: bytes
    auth_info_bytes: bytes
    sign_doc_bytes: bytes
    signature: bytes
    tx_raw: bytes

    @property
    def hash(self) -> str:
        """Uppercase hex SHA-256 of the raw transaction bytes."""
        return tx_hash(self.tx_raw)


def _encode(message) -> bytes:
    try:
        return message.SerializeToString(deterministic=True)
    except ProtoEncodeError as e:
        raise EncodeError(f"Failed to encode {message.DESCRIPTOR.full_name}: {e}") from e


def build_body_bytes(messages: Sequence[Msg], memo: str, timeout_height: int) -> bytes:
    body = proto.TxBody(
        messages=[msg.to_any() for msg in messages],
        memo=memo,
        timeout_height=timeout_height,
    )
    return _encode(body)


def build_auth_info_bytes(public_key_any, args: MessageArgs) -> bytes:
    signer_info = proto.SignerInfo(
        public_key=public_key_any,
        mode_info=proto.ModeInfo(single=proto.ModeInfoSingle(mode=proto.SIGN_MODE_DIRECT)),
        sequence=args.sequence,
    )
    auth_info = proto.AuthInfo(signer_infos=[signer_info], fee=args.fee.to_proto())
    if args.tip is not None:
        auth_info.tip.CopyFrom(args.tip.to_proto())
    return _encode(auth_info)


def build_sign_doc_bytes(
    body_bytes: bytes,
    auth_info_bytes: bytes,
    chain_id: str,
    account_number: int
) -> bytes:
    sign_doc = proto.SignDoc(
        body_bytes=body_bytes,
        auth_info_bytes=auth_info_bytes,
        chain_id=chain_id,
        account_number=account_number,
    )
    return _encode(sign_doc)


def build_unsigned_tx(
    messages: Sequence[Msg],
    args: MessageArgs,
    memo: str,
    public_key_any
) -> Tuple[bytes, bytes, bytes]:
    """
    Build the body, auth info and sign doc for one signer.

    Args:
        messages: Messages in execution order
        args: Sequence, account number, chain id, fee, tip and timeout height
        memo: Free-form memo
        public_key_any: Signer public key wrapped in ``google.protobuf.Any``

    Returns:
        Tuple of (body bytes, auth info bytes, sign doc bytes)
    """
    body_bytes = build_body_bytes(messages, memo, args.timeout_height)
    auth_info_bytes = build_auth_info_bytes(public_key_any, args)
    sign_doc_bytes = build_sign_doc_bytes(
        body_bytes, auth_info_bytes, args.chain_id, args.account_number
    )
    return body_bytes, auth_info_bytes, sign_doc_bytes


def build_tx(
    messages: Sequence[Msg],
    args: MessageArgs,
    memo: str,
    public_key_any,
    sign: Callable[[bytes], bytes]
) -> SignedTx:
    """
    Build and sign a transaction.

    Args:
        messages: Messages in execution order
        args: Signing context
        memo: Free-form memo
        public_key_any: Signer public key wrapped in ``google.protobuf.Any``
        sign: Callable returning the signature over the sign doc bytes

    Returns:
        SignedTx holding the ``TxRaw`` bytes and its parts
    """
    body_bytes, auth_info_bytes, sign_doc_bytes = build_unsigned_tx(
        messages, args, memo, public_key_any
    )
    signature = sign(sign_doc_bytes)
    tx_raw = _encode(proto.TxRaw(
        body_bytes=body_bytes,
        auth_info_bytes=auth_info_bytes,
        signatures=[signature],
    ))
    signed = SignedTx(body_bytes, auth_info_bytes, sign_doc_bytes, signature, tx_raw)
    logger.debug(f"Signed transaction {signed.hash}")
    return signed
