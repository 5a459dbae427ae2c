"""
addrconv Network Configuration
Centralized bech32 account prefixes per network
"""

from typing import Dict

from addrconv.exceptions import UnsupportedNetworkError


class NetworkConfig:
    """Network configuration for bech32 account-address prefixes"""

    # Secret Network
    SECRET_MAINNET = "secret:mainnet"
    SECRET_TESTNET = "secret:testnet"

    # Other bech32 account chains
    COSMOS_MAINNET = "cosmos:mainnet"
    EVMOS_MAINNET = "evmos:mainnet"
    OSMOSIS_MAINNET = "osmosis:mainnet"
    ZILLIQA_MAINNET = "zilliqa:mainnet"

    DEFAULT_NETWORK = SECRET_MAINNET

    # Bech32 human-readable part of account addresses
    BECH32_PREFIXES: Dict[str, str] = {
        "secret:mainnet": "secret",
        "secret:testnet": "secret",
        "cosmos:mainnet": "cosmos",
        "evmos:mainnet": "evmos",
        "osmosis:mainnet": "osmo",
        "zilliqa:mainnet": "zil",
    }

    @classmethod
    def get_bech32_prefix(cls, network: str) -> str:
        """Get bech32 account prefix for network

        Args:
            network: Network identifier (e.g., "secret:mainnet", "evmos:mainnet")

        Returns:
            Human-readable prefix (e.g., "secret")

        Raises:
            UnsupportedNetworkError: If network is not supported
        """
        prefix = cls.BECH32_PREFIXES.get(network)
        if prefix is None:
            raise UnsupportedNetworkError(f"Unsupported network: {network}")
        return prefix

    @classmethod
    def supported_networks(cls) -> list[str]:
        """List configured network identifiers"""
        return sorted(cls.BECH32_PREFIXES)
