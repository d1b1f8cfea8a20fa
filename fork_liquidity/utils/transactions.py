"""Transaction utilities for impersonated accounts"""

import time
from web3 import Web3
from ..core.exceptions import TransactionError

# Router calls expire ten minutes after the run starts
DEFAULT_DEADLINE_SECONDS = 60 * 10


def deadline_from_now(seconds=DEFAULT_DEADLINE_SECONDS):
    """Unix timestamp `seconds` in the future"""
    return int(time.time()) + seconds


class TransactionBuilder:
    """Send transactions through the node on behalf of the impersonated account"""

    def __init__(self, manager):
        """
        Args:
            manager: Web3Manager instance (must have impersonated an account)
        """
        self.manager = manager

    def build(self, value=0):
        """
        Build the transaction fields for an eth_sendTransaction call.

        Gas, nonce and fees are left to the node.
        """
        if not self.manager.address:
            raise TransactionError("No impersonated account; call impersonate() first")

        tx = {"from": self.manager.address}
        if value > 0:
            tx["value"] = value
        return tx

    def send(self, contract_func, operation_type=None, value=0):
        """
        Send a contract call and block until it is mined.

        Args:
            contract_func: Contract function to call
            operation_type: Label used in error messages
            value: ETH value to attach in wei

        Returns:
            Transaction receipt

        Raises:
            TransactionError: If the mined transaction reverted
        """
        tx_hash = contract_func.transact(self.build(value))

        receipt = self.manager.w3.eth.wait_for_transaction_receipt(tx_hash)
        if receipt.status != 1:
            raise TransactionError(
                f"{operation_type or 'Transaction'} failed: {Web3.to_hex(tx_hash)}"
            )
        return receipt
