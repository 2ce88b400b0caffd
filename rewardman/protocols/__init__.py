"""Rewardman protocols."""

from rewardman.protocols.store import (
    CustomerRecord,
    RewardStore,
    TransactionRecord,
)

__all__ = [
    "CustomerRecord",
    "RewardStore",
    "TransactionRecord",
]
