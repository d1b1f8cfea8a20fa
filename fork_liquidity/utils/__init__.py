"""Transaction utilities"""

from .transactions import TransactionBuilder, deadline_from_now, DEFAULT_DEADLINE_SECONDS

__all__ = [
    "TransactionBuilder",
    "deadline_from_now",
    "DEFAULT_DEADLINE_SECONDS",
]
