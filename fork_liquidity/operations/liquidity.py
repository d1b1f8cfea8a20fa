"""ETH liquidity add/remove operations against a Uniswap V2 router"""

from web3 import Web3
from ..core.connection import Web3Manager
from ..core.config import Config
from ..core.balances import BalanceQuery
from ..contracts.erc20 import ERC20
from ..contracts.router import UniswapV2Router
from ..utils.transactions import deadline_from_now


class LiquidityManager:
    """Add and remove token/ETH liquidity as an impersonated holder"""

    def __init__(self, manager=None, token=None, pair=None, holder=None, router=None):
        """
        Args:
            manager: Web3Manager instance (connected to RPC_URL if None)
            token: Token address (configured USDC if None)
            pair: Token/WETH pair address, i.e. the LP token (configured ETH/USDC pair if None)
            holder: Funded account to impersonate (configured holder if None)
            router: Router02 address (configured router if None)
        """
        self.manager = manager or Web3Manager()
        self.config = Config()

        self.holder = self.manager.impersonate(holder or self.config.token_holder)
        print(f"Impersonating {self.holder}")

        self.token = ERC20(self.manager, token or self.config.usdc_address)
        self.lp_token = ERC20(self.manager, pair or self.config.eth_usdc_pair)
        self.router = UniswapV2Router(self.manager, router)
        self.balances = BalanceQuery(self.manager, self.token, self.lp_token)

    def _print_balances(self, snapshot, when):
        symbol = self.token.symbol
        print(f"{symbol} balance {when}: {self.balances.format_token(snapshot['token'])}")
        print(f"ETH balance {when}: {self.balances.format_eth(snapshot['eth'])}")
        print(f"LP token balance {when}: {snapshot['lp']}")

    def add_liquidity_eth(self, amount_token, amount_token_min, amount_eth_min,
                          value_eth, deadline=None):
        """
        Approve the router and add token/ETH liquidity.

        Args:
            amount_token: Desired token amount (human readable)
            amount_token_min: Minimum token amount the router may use
            amount_eth_min: Minimum ETH amount the router may use
            value_eth: ETH attached to the call (excess is refunded)
            deadline: Unix timestamp (now + 10 minutes if None)

        Returns:
            Dict with before/after snapshots, amounts used and the receipt
        """
        amount_token_wei = self.token.to_wei(amount_token)
        amount_token_min_wei = self.token.to_wei(amount_token_min)
        amount_eth_min_wei = Web3.to_wei(amount_eth_min, "ether")
        value_wei = Web3.to_wei(value_eth, "ether")
        if deadline is None:
            deadline = deadline_from_now()

        # Approve spending
        self.token.approve(self.router.address, amount_token_wei)

        before = self.balances.snapshot()
        self._print_balances(before, "before")

        print(f"\nAdding liquidity: {amount_token} {self.token.symbol} + up to {value_eth} ETH")
        receipt = self.router.add_liquidity_eth(
            self.token.address,
            amount_token_wei,
            amount_token_min_wei,
            amount_eth_min_wei,
            self.holder,
            deadline,
            value=value_wei,
        )
        print(f"Confirmed in block {receipt.blockNumber}: {Web3.to_hex(receipt.transactionHash)}\n")

        after = self.balances.snapshot()
        token_used = before["token"] - after["token"]
        eth_used = before["eth"] - after["eth"]

        print("=" * 60)
        self._print_balances(after, "after")
        print(f"{self.token.symbol} used: {self.balances.format_token(token_used)}")
        print(f"ETH used: {self.balances.format_eth(eth_used)}")
        print("=" * 60)

        return {
            "before": before,
            "after": after,
            "token_used": token_used,
            "eth_used": eth_used,
            "lp_minted": after["lp"] - before["lp"],
            "deadline": deadline,
            "receipt": receipt,
        }

    def remove_liquidity_eth(self, liquidity=None, amount_token_min=0,
                             amount_eth_min=0, deadline=None):
        """
        Approve the router for LP tokens and remove liquidity.

        Args:
            liquidity: LP amount in wei (entire LP balance if None)
            amount_token_min: Minimum token return in wei
            amount_eth_min: Minimum ETH return in wei
            deadline: Unix timestamp (now + 10 minutes if None)

        Returns:
            Dict with before/after snapshots, amounts received and the receipt
        """
        if liquidity is None:
            liquidity = self.lp_token.balance_of(self.holder)
        if deadline is None:
            deadline = deadline_from_now()

        # Approve the router to pull LP tokens
        self.lp_token.approve(self.router.address, liquidity)

        before = self.balances.snapshot()

        print(f"Removing liquidity: {liquidity} LP tokens")
        receipt = self.router.remove_liquidity_eth(
            self.token.address,
            liquidity,
            amount_token_min,
            amount_eth_min,
            self.holder,
            deadline,
        )
        print(f"Confirmed in block {receipt.blockNumber}: {Web3.to_hex(receipt.transactionHash)}\n")

        after = self.balances.snapshot()
        self._print_balances(after, "after removing liquidity")

        return {
            "before": before,
            "after": after,
            "liquidity": liquidity,
            "token_received": after["token"] - before["token"],
            "eth_received": after["eth"] - before["eth"],
            "deadline": deadline,
            "receipt": receipt,
        }

    def add_and_remove_liquidity_eth(self, amount_token, amount_token_min,
                                     amount_eth_min, value_eth):
        """
        Add liquidity, then remove the whole resulting LP balance.

        Both router calls share one deadline. A failed add raises before any
        remove step runs; a failed remove leaves the added position in place.

        Returns:
            Dict with "add" and "remove" results
        """
        deadline = deadline_from_now()

        added = self.add_liquidity_eth(
            amount_token,
            amount_token_min,
            amount_eth_min,
            value_eth,
            deadline=deadline,
        )
        print()
        removed = self.remove_liquidity_eth(
            liquidity=added["after"]["lp"],
            amount_token_min=0,
            amount_eth_min=0,
            deadline=deadline,
        )
        return {"add": added, "remove": removed}
