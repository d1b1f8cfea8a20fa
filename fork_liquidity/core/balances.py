"""Balance snapshots for the impersonated account"""

from web3 import Web3


class BalanceQuery:
    """Read token, ETH and LP balances for an address in one go"""

    def __init__(self, manager, token, lp_token):
        """
        Args:
            manager: Web3Manager instance
            token: ERC20 wrapper of the pool's token side
            lp_token: ERC20 wrapper of the pair (LP share token)
        """
        self.manager = manager
        self.token = token
        self.lp_token = lp_token

    def snapshot(self):
        """
        Balances of the impersonated account.

        Returns:
            Dict of raw balances: {"token": int, "eth": int, "lp": int}
        """
        addr = self.manager.address
        return {
            "token": self.token.balance_of(addr),
            "eth": self.manager.get_balance(addr),
            "lp": self.lp_token.balance_of(addr),
        }

    def format_token(self, amount_wei):
        return self.token.from_wei(amount_wei)

    def format_eth(self, amount_wei):
        return Web3.from_wei(amount_wei, "ether")
