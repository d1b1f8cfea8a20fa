"""Contract wrappers for ERC20 and Uniswap V2 router interactions"""

from .erc20 import ERC20
from .router import UniswapV2Router

__all__ = ["ERC20", "UniswapV2Router"]
