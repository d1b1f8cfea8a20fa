"""
Fork Liquidity - add/remove Uniswap V2 ETH liquidity as an impersonated holder on a forked node
"""

from .core.connection import Web3Manager
from .core.config import Config
from .core.exceptions import (
    ForkLiquidityError,
    ConfigError,
    ConnectionError,
    ImpersonationError,
    TransactionError,
)
from .operations.liquidity import LiquidityManager

__version__ = "0.1.0"
__all__ = [
    "Web3Manager",
    "Config",
    "LiquidityManager",
    "ForkLiquidityError",
    "ConfigError",
    "ConnectionError",
    "ImpersonationError",
    "TransactionError",
]
