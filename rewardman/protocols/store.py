"""Persistence protocol consumed by the reward service."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class CustomerRecord:
    """Read-only customer view."""

    id: int
    name: str


@dataclass(frozen=True)
class TransactionRecord:
    """Read-only purchase view."""

    amount: Decimal
    transaction_date: date


@runtime_checkable
class RewardStore(Protocol):
    """
    Protocol for reading customers and their purchases.

    Implemented by adapters/django_store.py.

    Configuration in settings.py:
        REWARDMAN = {
            "STORE_BACKEND": "rewardman.adapters.django_store.DjangoRewardStore",
        }
    """

    def find_customer_by_id(self, customer_id: int) -> CustomerRecord | None:
        """Return the customer, or None if it does not exist."""
        ...

    def list_customers(
        self,
        page_index: int | None = None,
        page_size: int | None = None,
    ) -> tuple[list[CustomerRecord], int]:
        """
        Return one page of customers ordered by id, and the total count.

        Without paging arguments, every customer is returned.
        """
        ...

    def find_transactions(
        self,
        customer_id: int,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[TransactionRecord]:
        """
        Return the customer's transactions.

        Args:
            customer_id: Customer primary key
            date_from: Inclusive lower bound (optional)
            date_to: Inclusive upper bound (optional)
        """
        ...
