"""Uniswap V2 Router02 contract wrapper"""

from ..core.config import Config
from ..utils.transactions import TransactionBuilder


class UniswapV2Router:
    """Wrapper for the ETH liquidity entry points of Router02"""

    def __init__(self, manager, address=None):
        """
        Args:
            manager: Web3Manager instance
            address: Router address (configured Router02 if None)
        """
        self.manager = manager
        self.config = Config()
        self.address = manager.checksum(address or self.config.router_address)
        self.contract = manager.get_contract(self.address, "uniswap_v2_router02")

        self.tx_builder = TransactionBuilder(manager)

    def add_liquidity_eth(self, token, amount_token_desired, amount_token_min,
                          amount_eth_min, to, deadline, value):
        """
        Add liquidity to a token/WETH pair, paying the ETH side natively.

        Args:
            token: Token address
            amount_token_desired: Max token amount in wei
            amount_token_min: Min token amount in wei
            amount_eth_min: Min ETH amount in wei
            to: Recipient of the LP tokens
            deadline: Unix timestamp after which the router reverts
            value: ETH to attach in wei (unused ETH is refunded)

        Returns:
            Transaction receipt
        """
        contract_func = self.contract.functions.addLiquidityETH(
            self.manager.checksum(token),
            amount_token_desired,
            amount_token_min,
            amount_eth_min,
            self.manager.checksum(to),
            deadline,
        )
        return self.tx_builder.send(
            contract_func,
            operation_type="addLiquidityETH",
            value=value,
        )

    def remove_liquidity_eth(self, token, liquidity, amount_token_min,
                             amount_eth_min, to, deadline):
        """
        Burn LP tokens of a token/WETH pair, receiving the ETH side natively.

        The router pulls `liquidity` LP tokens from the caller, so the pair
        token must be approved first.

        Returns:
            Transaction receipt
        """
        contract_func = self.contract.functions.removeLiquidityETH(
            self.manager.checksum(token),
            liquidity,
            amount_token_min,
            amount_eth_min,
            self.manager.checksum(to),
            deadline,
        )
        return self.tx_builder.send(contract_func, operation_type="removeLiquidityETH")
