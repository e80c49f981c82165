#!/usr/bin/env python3
"""
Example of deriving keys and signing a transaction without contacting a node.
"""
import logging

from cosmos_signer import (
    Address, Coin, CosmosPrivateKey, EthermintPrivateKey, Fee, MessageArgs, Mnemonic, Msg
)
from cosmos_signer import proto
from cosmos_signer.type_urls import MSG_SEND_TYPE_URL
from cosmos_signer.utils import tx_hash

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    """
    Generate a phrase, derive both key families and sign a MsgSend offline.

    The account number and sequence would normally come from the node.
    """
    mnemonic = Mnemonic.generate(24)
    print("\n=== cosmos-signer offline signing ===\n")
    print(f"Phrase: {mnemonic}")

    cosmos_key = CosmosPrivateKey.from_phrase(str(mnemonic))
    ethermint_key = EthermintPrivateKey.from_phrase(str(mnemonic))
    sender = cosmos_key.to_address("cosmos")
    print(f"Cosmos address:    {sender}")
    print(f"Cosmos public key: {cosmos_key.to_public_key().to_bech32()}")
    print(f"Ethermint address: {ethermint_key.to_address('evmos')}")
    print(f"Ethereum address:  {ethermint_key.to_public_key().to_eth_address()}")

    destination = Address.from_bytes(bytes(20), "cosmos")
    send = proto.MsgSend(
        from_address=str(sender),
        to_address=str(destination),
        amount=[Coin(amount=1000, denom="uatom").to_proto()],
    )
    args = MessageArgs(
        sequence=0,
        account_number=0,
        chain_id="cosmoshub-4",
        fee=Fee(amount=[Coin.from_str("500uatom")], gas_limit=200000),
        timeout_height=0,
    )
    tx_bytes = cosmos_key.sign_std_msg([Msg.new(MSG_SEND_TYPE_URL, send)], args, "offline example")
    print(f"\nSigned {len(tx_bytes)} bytes, tx hash {tx_hash(tx_bytes)}")


if __name__ == "__main__":
    main()
