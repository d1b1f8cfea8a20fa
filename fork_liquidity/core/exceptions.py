"""Custom exceptions for fork liquidity operations"""


class ForkLiquidityError(Exception):
    """Base exception for all fork liquidity errors"""
    pass


class ConfigError(ForkLiquidityError):
    """Configuration-related errors"""
    pass


class ConnectionError(ForkLiquidityError):
    """Web3 connection errors"""
    pass


class ImpersonationError(ForkLiquidityError):
    """Node refused to impersonate an account (not a fork/dev network)"""
    pass


class TransactionError(ForkLiquidityError):
    """Transaction execution errors"""
    pass
