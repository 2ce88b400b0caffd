"""
Rewardman public API.

CORE:
    RewardService.get_customer_summary(id, from, to) - One customer
    RewardService.get_paged_summaries(page, size, from, to) - One page of customers
    RewardService.get_all_summaries()                 - Every customer

HELPERS:
    RewardService.calculate_points(amount)            - Points for one purchase
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from django.utils.module_loading import import_string

from rewardman.aggregation import (
    CustomerRewardSummary,
    PagedRewardSummary,
    build_page,
    resolve_date_range,
    summarize,
)
from rewardman.conf import rewardman_settings
from rewardman.exceptions import CustomerNotFound
from rewardman.points import calculate_points
from rewardman.protocols.store import CustomerRecord, RewardStore


def get_store() -> RewardStore:
    """Instantiate the configured STORE_BACKEND."""
    backend_class = import_string(rewardman_settings.STORE_BACKEND)
    return backend_class()


class RewardService:
    """
    Reward summaries over a RewardStore.

    The store is injected; without one the configured STORE_BACKEND is used.
    Holds no state besides the store, so one instance can serve concurrent
    requests.
    """

    def __init__(self, store: RewardStore | None = None):
        self.store = store if store is not None else get_store()

    # ======================================================================
    # CORE API
    # ======================================================================

    def get_all_summaries(self) -> list[CustomerRewardSummary]:
        """Summaries for every customer, ordered by id, over all transactions."""
        customers, _ = self.store.list_customers()
        return [self._summarize_customer(c) for c in customers]

    def get_paged_summaries(
        self,
        page: int,
        size: int,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> PagedRewardSummary:
        """
        Summaries for one page of customers.

        Args:
            page: Zero-based page index
            size: Page size (> 0)
            date_from: Inclusive lower bound (optional)
            date_to: Inclusive upper bound (optional)

        Raises:
            InvalidDateRange: If date_from is after date_to
        """
        if page < 0:
            raise ValueError("Page index must not be negative")
        if size <= 0:
            raise ValueError("Page size must be positive")
        date_from, date_to = self._date_bounds(date_from, date_to)

        customers, total = self.store.list_customers(page, size)
        content = [self._summarize_customer(c, date_from, date_to) for c in customers]
        return build_page(content, page, size, total)

    def get_customer_summary(
        self,
        customer_id: int,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> CustomerRewardSummary:
        """
        Summary for a single customer.

        Raises:
            CustomerNotFound: If no customer has this id
            InvalidDateRange: If date_from is after date_to
        """
        customer = self.store.find_customer_by_id(customer_id)
        if customer is None:
            raise CustomerNotFound(customer_id)

        date_from, date_to = self._date_bounds(date_from, date_to)
        return self._summarize_customer(customer, date_from, date_to)

    # ======================================================================
    # HELPERS
    # ======================================================================

    @staticmethod
    def calculate_points(amount: Decimal | int | str) -> int:
        """Points earned by a single purchase amount."""
        return calculate_points(amount)

    @staticmethod
    def _date_bounds(
        date_from: date | None,
        date_to: date | None,
    ) -> tuple[date | None, date | None]:
        """Validate the range; leave it open when neither bound is given."""
        if date_from is None and date_to is None:
            return None, None
        return resolve_date_range(date_from, date_to)

    def _summarize_customer(
        self,
        customer: CustomerRecord,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> CustomerRewardSummary:
        transactions = self.store.find_transactions(customer.id, date_from, date_to)
        return summarize(customer, transactions)
