"""
Add USDC/ETH liquidity on a forked mainnet node.

Usage: fork-add-liquidity-eth
       python -m fork_liquidity.cli.add_liquidity_eth
"""

from decimal import Decimal

from ..operations.liquidity import LiquidityManager
from .runner import run

AMOUNT_TOKEN_DESIRED = Decimal("10")
AMOUNT_TOKEN_MIN = Decimal("7")
AMOUNT_ETH_MIN = Decimal("0.001")  # adjust to the current ETH/USDC rate
VALUE_ETH = Decimal("0.1")


def add_liquidity():
    manager = LiquidityManager()
    return manager.add_liquidity_eth(
        AMOUNT_TOKEN_DESIRED,
        AMOUNT_TOKEN_MIN,
        AMOUNT_ETH_MIN,
        VALUE_ETH,
    )


def main():
    run(add_liquidity)


if __name__ == "__main__":
    main()
