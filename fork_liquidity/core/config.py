"""Configuration loading and management"""

import os
import json
from pathlib import Path
from .exceptions import ConfigError


class Config:
    """Centralized configuration manager for addresses and ABIs"""

    _instance = None
    _addresses = None
    _abis = None

    # Package files (user may override addresses via FORK_LIQUIDITY_CONFIG_DIR)
    ADDRESSES_FILE = Path(__file__).parent.parent / "addresses.json"
    ABIS_FILE = Path(__file__).parent.parent / "abis.json"

    # Local hardhat/anvil fork
    DEFAULT_RPC_URL = "http://127.0.0.1:8545"

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if Config._addresses is None:
            self._load()

    @classmethod
    def reset(cls):
        """Drop cached files so the next Config() reloads them"""
        cls._addresses = None
        cls._abis = None

    def _find_config_dir(self):
        """Find user config directory, if one is set"""
        env_path = os.getenv("FORK_LIQUIDITY_CONFIG_DIR")
        if not env_path:
            return None

        path = Path(env_path)
        if not path.exists():
            raise ConfigError(f"FORK_LIQUIDITY_CONFIG_DIR does not exist: {path}")
        return path

    def _load(self):
        """Load configuration files"""
        if not self.ADDRESSES_FILE.exists():
            raise ConfigError(f"Addresses not found: {self.ADDRESSES_FILE}")
        with open(self.ADDRESSES_FILE) as f:
            addresses = json.load(f)

        # User overrides
        config_dir = self._find_config_dir()
        if config_dir is not None:
            user_file = config_dir / "addresses.json"
            if user_file.exists():
                with open(user_file) as f:
                    addresses.update(json.load(f))

        if not self.ABIS_FILE.exists():
            raise ConfigError(f"ABIs not found: {self.ABIS_FILE}")
        with open(self.ABIS_FILE) as f:
            abis = json.load(f)

        Config._addresses = addresses
        Config._abis = abis

    def get_address(self, name):
        """Get a configured contract/account address by key"""
        try:
            return Config._addresses[name]
        except KeyError:
            raise ConfigError(f"Address not configured: {name}")

    def get_abi(self, name):
        """Get ABI by name"""
        if name in Config._abis:
            return Config._abis[name]
        raise ConfigError(f"ABI not found: {name}")

    @property
    def rpc_url(self):
        """RPC endpoint of the forked node (RPC_URL in .env)"""
        return os.getenv("RPC_URL") or self.DEFAULT_RPC_URL

    @property
    def router_address(self):
        return self.get_address("uniswap_v2_router02")

    @property
    def usdc_address(self):
        return self.get_address("usdc")

    @property
    def eth_usdc_pair(self):
        return self.get_address("eth_usdc_pair")

    @property
    def token_holder(self):
        return self.get_address("token_holder")
