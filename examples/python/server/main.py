import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from addrconv.address import AddressConverter
from addrconv.codecs import EthHexCodec
from addrconv.config import NetworkConfig
from addrconv.fastapi import create_app
from addrconv.logging_config import setup_logging

load_dotenv(Path(__file__).parent.parent.parent.parent / ".env")

setup_logging(
    level=os.getenv("LOG_LEVEL", "INFO"),
    package_level=os.getenv("ADDRCONV_LOG_LEVEL"),
)
logging.getLogger("uvicorn.access").setLevel(logging.INFO)

logger = logging.getLogger(__name__)

# Configuration
NETWORK = os.getenv("ADDRCONV_NETWORK") or NetworkConfig.DEFAULT_NETWORK
BECH32_PREFIX = os.getenv("ADDRCONV_BECH32_PREFIX") or NetworkConfig.get_bech32_prefix(NETWORK)
CHECKSUM_HEX = os.getenv("ADDRCONV_CHECKSUM_HEX", "false").lower() in ("1", "true", "yes")
SERVER_HOST = os.getenv("SERVER_HOST", "0.0.0.0")
SERVER_PORT = int(os.getenv("SERVER_PORT", "8545"))

converter = AddressConverter(BECH32_PREFIX, hex_codec=EthHexCodec(checksum=CHECKSUM_HEX))
app = create_app(converter=converter, network=NETWORK, cors_origins=["*"])

if __name__ == "__main__":
    import uvicorn

    print("\n" + "=" * 80)
    print("Starting address conversion RPC server")
    print("=" * 80)
    print(f"Network: {NETWORK}")
    print(f"Bech32 prefix: {BECH32_PREFIX}")
    print(f"Checksummed hex output: {CHECKSUM_HEX}")
    print(f"Listening on {SERVER_HOST}:{SERVER_PORT}")
    print("=" * 80 + "\n")

    uvicorn.run(
        app,
        host=SERVER_HOST,
        port=SERVER_PORT,
        log_level="info",
        access_log=True,
    )
