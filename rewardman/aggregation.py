"""Monthly reward aggregation and paging metadata."""

from __future__ import annotations

import calendar
import math
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Sequence

from rewardman.exceptions import InvalidDateRange
from rewardman.points import calculate_points
from rewardman.protocols.store import CustomerRecord, TransactionRecord


@dataclass(frozen=True)
class MonthlyReward:
    """Points earned by a customer in a single calendar month."""

    year: int
    month: str  # "JANUARY" .. "DECEMBER"
    points: int

    def as_dict(self) -> dict:
        return {"year": self.year, "month": self.month, "points": self.points}


@dataclass(frozen=True)
class CustomerRewardSummary:
    """Reward summary for one customer across all months."""

    customer_id: int
    customer_name: str
    monthly_rewards: tuple[MonthlyReward, ...] = ()
    total_points: int = 0

    def as_dict(self) -> dict:
        return {
            "customerId": self.customer_id,
            "customerName": self.customer_name,
            "monthlyRewards": [m.as_dict() for m in self.monthly_rewards],
            "totalPoints": self.total_points,
        }


@dataclass(frozen=True)
class PagedRewardSummary:
    """A page of customer summaries plus paging metadata."""

    content: tuple[CustomerRewardSummary, ...] = field(default_factory=tuple)
    page: int = 0
    size: int = 0
    total_elements: int = 0
    total_pages: int = 0
    last: bool = True

    def as_dict(self) -> dict:
        return {
            "content": [s.as_dict() for s in self.content],
            "page": self.page,
            "size": self.size,
            "totalElements": self.total_elements,
            "totalPages": self.total_pages,
            "last": self.last,
        }


def month_name(month: int) -> str:
    """Uppercase English month name (locale independent)."""
    return calendar.month_name[month].upper()


def summarize(
    customer: CustomerRecord,
    transactions: Iterable[TransactionRecord],
) -> CustomerRewardSummary:
    """
    Bucket a customer's transactions by calendar month.

    Input order does not matter: buckets are emitted in ascending
    (year, month) order. Transactions are expected to be date-filtered
    already.
    """
    buckets: dict[tuple[int, int], int] = {}
    for tx in transactions:
        key = (tx.transaction_date.year, tx.transaction_date.month)
        buckets[key] = buckets.get(key, 0) + calculate_points(tx.amount)

    monthly = tuple(
        MonthlyReward(year=year, month=month_name(month), points=points)
        for (year, month), points in sorted(buckets.items())
    )
    return CustomerRewardSummary(
        customer_id=customer.id,
        customer_name=customer.name,
        monthly_rewards=monthly,
        total_points=sum(m.points for m in monthly),
    )


def resolve_date_range(
    date_from: date | None = None,
    date_to: date | None = None,
) -> tuple[date, date]:
    """
    Fill open bounds and validate the range.

    Missing ``from`` becomes ``date.min``, missing ``to`` becomes
    ``date.max``. Both bounds are inclusive.

    Raises:
        InvalidDateRange: If ``from`` is after ``to``
    """
    effective_from = date_from if date_from is not None else date.min
    effective_to = date_to if date_to is not None else date.max
    if effective_from > effective_to:
        raise InvalidDateRange(effective_from, effective_to)
    return effective_from, effective_to


def total_pages(total_elements: int, size: int) -> int:
    if size <= 0:
        raise ValueError("Page size must be positive")
    return math.ceil(total_elements / size)


def build_page(
    content: Sequence[CustomerRewardSummary],
    page: int,
    size: int,
    total_elements: int,
) -> PagedRewardSummary:
    """Wrap summaries with consistent paging metadata."""
    pages = total_pages(total_elements, size)
    return PagedRewardSummary(
        content=tuple(content),
        page=page,
        size=size,
        total_elements=total_elements,
        total_pages=pages,
        # Pages past the end are also reported as last
        last=page >= pages - 1,
    )
