"""
Add USDC/ETH liquidity, then remove the whole LP position, on a forked
mainnet node.

Usage: fork-remove-liquidity-eth
       python -m fork_liquidity.cli.remove_liquidity_eth
"""

from decimal import Decimal

from web3 import Web3

from ..operations.liquidity import LiquidityManager
from .runner import run

AMOUNT_TOKEN_DESIRED = Decimal("10")
AMOUNT_TOKEN_MIN = Decimal("7")
AMOUNT_ETH_MIN = Web3.from_wei(1, "ether")  # 1 wei
VALUE_ETH = Decimal("0.1")


def remove_liquidity():
    manager = LiquidityManager()
    return manager.add_and_remove_liquidity_eth(
        AMOUNT_TOKEN_DESIRED,
        AMOUNT_TOKEN_MIN,
        AMOUNT_ETH_MIN,
        VALUE_ETH,
    )


def main():
    run(remove_liquidity)


if __name__ == "__main__":
    main()
