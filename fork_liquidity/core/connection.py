"""Web3 connection management for a forked node"""

from web3 import Web3
from dotenv import load_dotenv
from .config import Config
from .exceptions import ConnectionError, ImpersonationError


class Web3Manager:
    """Manages the Web3 connection and the impersonated account"""

    IMPERSONATE_METHOD = "hardhat_impersonateAccount"

    def __init__(self, rpc_url=None, w3=None):
        """
        Initialize Web3 connection.

        Args:
            rpc_url: Node endpoint (defaults to RPC_URL from .env)
            w3: Pre-built Web3 instance (skips connection setup)
        """
        load_dotenv()

        self.config = Config()
        if w3 is not None:
            self.w3 = w3
        else:
            self._setup_web3(rpc_url or self.config.rpc_url)

        self.account = None

    def _setup_web3(self, rpc_url):
        """Setup Web3 connection"""
        self.w3 = Web3(Web3.HTTPProvider(rpc_url))

        if not self.w3.is_connected():
            raise ConnectionError(f"Failed to connect to {rpc_url}")

    def impersonate(self, address):
        """
        Borrow signing authority for an address from the node.

        Only works on hardhat/anvil dev or forked networks. Afterwards every
        transaction sent "from" this address is signed by the node.

        Returns:
            Checksummed impersonated address
        """
        addr = self.checksum(address)
        response = self.w3.provider.make_request(self.IMPERSONATE_METHOD, [addr])
        if response.get("error"):
            raise ImpersonationError(f"Cannot impersonate {addr}: {response['error']}")

        self.account = addr
        return addr

    @property
    def address(self):
        """Impersonated account address (None until impersonate() is called)"""
        return self.account

    def get_balance(self, address=None):
        """Get ETH balance in wei"""
        addr = address or self.address
        if not addr:
            raise ValueError("No address provided")
        return self.w3.eth.get_balance(addr)

    def get_contract(self, address, abi_name):
        """Create contract instance"""
        abi = self.config.get_abi(abi_name)
        return self.w3.eth.contract(
            address=Web3.to_checksum_address(address),
            abi=abi
        )

    def checksum(self, address):
        """Convert address to checksum format"""
        return Web3.to_checksum_address(address)
