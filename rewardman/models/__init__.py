"""Rewardman models."""

from rewardman.models.customer import Customer
from rewardman.models.transaction import Transaction

__all__ = [
    "Customer",
    "Transaction",
]
