"""Core module - configuration, connection, exceptions, and balance snapshots"""

from .config import Config
from .connection import Web3Manager
from .exceptions import (
    ForkLiquidityError,
    ConfigError,
    ConnectionError,
    ImpersonationError,
    TransactionError,
)
from .balances import BalanceQuery

__all__ = [
    "Config",
    "Web3Manager",
    "ForkLiquidityError",
    "ConfigError",
    "ConnectionError",
    "ImpersonationError",
    "TransactionError",
    "BalanceQuery",
]
