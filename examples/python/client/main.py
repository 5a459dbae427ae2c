import asyncio
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

from addrconv.clients import AddressRpcClient
from addrconv.exceptions import RpcError
from addrconv.logging_config import setup_logging

load_dotenv(Path(__file__).parent.parent.parent.parent / ".env")

setup_logging(level=logging.INFO)

RPC_URL = os.getenv("ADDRCONV_RPC_URL", "http://localhost:8545")
DEFAULT_ADDRESS = "0x1234567890123456789012345678901234567890"


async def main(addresses: list[str]) -> int:
    print(f"RPC endpoint: {RPC_URL}")
    failures = 0
    async with AddressRpcClient(RPC_URL) as client:
        for address in addresses:
            try:
                converted = await client.convert_address(address)
            except RpcError as e:
                print(f"  {address} -> error {e.code}: {e.message}")
                failures += 1
                continue
            print(f"  {address} -> {converted}")
            # Round trip back to the original encoding
            print(f"  {converted} -> {await client.convert_address(converted)}")
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1:] or [DEFAULT_ADDRESS])))
