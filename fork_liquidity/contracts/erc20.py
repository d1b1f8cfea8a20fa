"""ERC20 token contract wrapper"""

from decimal import Decimal
from ..utils.transactions import TransactionBuilder


class ERC20:
    """Wrapper for ERC20 token interactions (also used for LP share tokens)"""

    def __init__(self, manager, address):
        """
        Args:
            manager: Web3Manager instance
            address: Token contract address
        """
        self.manager = manager
        self.address = manager.checksum(address)
        self.contract = manager.get_contract(self.address, "erc20")
        self._info = None

        self.tx_builder = TransactionBuilder(manager)

    @property
    def info(self):
        """Get token info (cached)"""
        if self._info is None:
            self._info = {
                "address": self.address,
                "symbol": self.contract.functions.symbol().call(),
                "decimals": self.contract.functions.decimals().call(),
            }
        return self._info

    @property
    def symbol(self):
        return self.info["symbol"]

    @property
    def decimals(self):
        return self.info["decimals"]

    def balance_of(self, address=None):
        """Get token balance in wei"""
        addr = address or self.manager.address
        return self.contract.functions.balanceOf(addr).call()

    def to_wei(self, amount):
        """Convert human amount to wei"""
        return int(Decimal(str(amount)) * (10 ** self.decimals))

    def from_wei(self, amount):
        """Convert wei to human amount"""
        return Decimal(amount) / (10 ** self.decimals)

    def approve(self, spender, amount_wei):
        """
        Approve spender to spend tokens. Always sends a transaction, even
        when the current allowance already covers the amount.

        Returns:
            Transaction receipt
        """
        spender = self.manager.checksum(spender)
        contract_func = self.contract.functions.approve(spender, amount_wei)
        return self.tx_builder.send(contract_func, operation_type="approve")
