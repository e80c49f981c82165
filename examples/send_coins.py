#!/usr/bin/env python3
"""
Example of sending coins through a live node.

Configuration comes from the environment:
    COSMOS_SIGNER_GRPC_URL      gRPC endpoint, e.g. http://localhost:9090
    COSMOS_SIGNER_CHAIN_PREFIX  account prefix, defaults to cosmos
    SENDER_PHRASE               BIP-39 phrase of the funded sender
    DESTINATION                 bech32 address of the receiver
    AMOUNT / FEE                coins such as 1000stake (FEE is optional)
"""
import asyncio
import logging
import os
import sys

from cosmos_signer import (
    Address, Coin, Contact, CosmosClient, CosmosPrivateKey, GatewayError, InsufficientFees,
    TransactionFailed
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def run() -> int:
    phrase = os.environ.get("SENDER_PHRASE")
    destination = os.environ.get("DESTINATION")
    if not phrase or not destination:
        print("SENDER_PHRASE and DESTINATION must be set")
        return 1

    contact = Contact.from_env()
    key = CosmosPrivateKey.from_phrase(phrase)
    amount = Coin.from_str(os.environ.get("AMOUNT", "1000stake"))
    fee_text = os.environ.get("FEE")
    fee = Coin.from_str(fee_text) if fee_text else None

    print("\n=== cosmos-signer send example ===\n")
    print(f"Node:   {contact.url}")
    print(f"Sender: {key.to_address(contact.chain_prefix)}")

    async with CosmosClient(contact) as client:
        try:
            balances = await client.get_balances(key.to_address(contact.chain_prefix))
            print(f"Balances: {', '.join(str(coin) for coin in balances) or 'none'}")

            response = await client.send_coins(
                amount, fee, Address.from_bech32(destination), wait_timeout=60.0, private_key=key
            )
            print(f"Included at height {response.height}: {response.txhash}")

            await client.wait_for_next_block(30.0)
        except InsufficientFees as e:
            print(f"Fee too low, the node requires at least {', '.join(map(str, e.min_fees))}")
            return 1
        except TransactionFailed as e:
            print(f"Transaction failed: {e}")
            return 1
        except GatewayError as e:
            logger.error(f"Node error: {e}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(run()))
