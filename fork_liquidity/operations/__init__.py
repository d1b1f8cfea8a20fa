"""High-level liquidity operations"""

from .liquidity import LiquidityManager

__all__ = ["LiquidityManager"]
