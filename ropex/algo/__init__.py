from .balance import is_balanced, rebalance

__all__ = ["is_balanced", "rebalance"]
