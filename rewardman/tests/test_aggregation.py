"""Tests for monthly aggregation, date ranges and paging metadata."""

import math
import random
from datetime import date

import pytest

from rewardman.aggregation import (
    CustomerRewardSummary,
    MonthlyReward,
    build_page,
    month_name,
    resolve_date_range,
    summarize,
    total_pages,
)
from rewardman.exceptions import InvalidDateRange, RewardmanError
from rewardman.points import calculate_points
from rewardman.protocols.store import CustomerRecord
from rewardman.tests.helpers import tx


ALICE = CustomerRecord(id=1, name="Alice Johnson")


class TestSummarize:

    def test_reference_scenario(self, alice_transactions):
        summary = summarize(ALICE, alice_transactions)

        assert summary.customer_id == 1
        assert summary.customer_name == "Alice Johnson"
        assert summary.monthly_rewards == (
            MonthlyReward(2024, "JANUARY", 115),
            MonthlyReward(2024, "FEBRUARY", 250),
            MonthlyReward(2024, "MARCH", 70),
        )
        assert summary.total_points == 435

    def test_no_transactions(self):
        summary = summarize(ALICE, [])

        assert summary.monthly_rewards == ()
        assert summary.monthly_rewards is not None
        assert summary.total_points == 0

    def test_input_order_does_not_matter(self, alice_transactions):
        shuffled = list(alice_transactions)
        random.Random(7).shuffle(shuffled)
        shuffled.reverse()

        assert summarize(ALICE, shuffled) == summarize(ALICE, alice_transactions)

    def test_same_month_is_summed(self):
        summary = summarize(ALICE, [tx("120", 2024, 5, 1), tx("120", 2024, 5, 31)])

        assert summary.monthly_rewards == (MonthlyReward(2024, "MAY", 180),)

    def test_same_month_different_years_are_separate(self):
        summary = summarize(
            ALICE,
            [tx("60", 2025, 1, 2), tx("70", 2023, 1, 9), tx("80", 2024, 12, 24)],
        )

        assert [(m.year, m.month) for m in summary.monthly_rewards] == [
            (2023, "JANUARY"),
            (2024, "DECEMBER"),
            (2025, "JANUARY"),
        ]

    def test_month_with_zero_points_is_kept(self):
        summary = summarize(ALICE, [tx("45.00", 2024, 2, 20)])

        assert summary.monthly_rewards == (MonthlyReward(2024, "FEBRUARY", 0),)
        assert summary.total_points == 0

    def test_strictly_ascending_without_duplicates(self):
        rng = random.Random(42)
        transactions = [
            tx(
                f"{rng.randint(0, 300)}.{rng.randint(0, 99):02d}",
                rng.randint(2020, 2024),
                rng.randint(1, 12),
                rng.randint(1, 28),
            )
            for _ in range(200)
        ]
        summary = summarize(ALICE, transactions)

        keys = [(m.year, month_index(m.month)) for m in summary.monthly_rewards]
        assert keys == sorted(set(keys))

    def test_totals_agree(self):
        rng = random.Random(3)
        transactions = [
            tx(f"{rng.randint(0, 500)}.{rng.randint(0, 99):02d}", 2024, rng.randint(1, 12), 1)
            for _ in range(100)
        ]
        summary = summarize(ALICE, transactions)

        assert summary.total_points == sum(m.points for m in summary.monthly_rewards)
        assert summary.total_points == sum(calculate_points(t.amount) for t in transactions)

    def test_as_dict(self, alice_transactions):
        data = summarize(ALICE, alice_transactions).as_dict()

        assert data["customerId"] == 1
        assert data["customerName"] == "Alice Johnson"
        assert data["monthlyRewards"][0] == {"year": 2024, "month": "JANUARY", "points": 115}
        assert data["totalPoints"] == 435

    def test_empty_as_dict_has_list(self):
        assert summarize(ALICE, []).as_dict()["monthlyRewards"] == []


def month_index(name):
    return [month_name(i) for i in range(1, 13)].index(name) + 1


class TestMonthName:

    def test_all_months_uppercase_english(self):
        assert [month_name(i) for i in range(1, 13)] == [
            "JANUARY", "FEBRUARY", "MARCH", "APRIL", "MAY", "JUNE",
            "JULY", "AUGUST", "SEPTEMBER", "OCTOBER", "NOVEMBER", "DECEMBER",
        ]


class TestResolveDateRange:

    def test_open_bounds(self):
        assert resolve_date_range() == (date.min, date.max)

    def test_missing_from(self):
        assert resolve_date_range(None, date(2024, 3, 31)) == (date.min, date(2024, 3, 31))

    def test_missing_to(self):
        assert resolve_date_range(date(2024, 1, 1), None) == (date(2024, 1, 1), date.max)

    def test_same_day_is_valid(self):
        day = date(2024, 2, 29)
        assert resolve_date_range(day, day) == (day, day)

    def test_from_after_to_raises(self):
        with pytest.raises(InvalidDateRange) as exc_info:
            resolve_date_range(date(2024, 3, 1), date(2024, 1, 1))

        err = exc_info.value
        assert isinstance(err, RewardmanError)
        assert err.code == "INVALID_DATE_RANGE"
        assert err.date_from == date(2024, 3, 1)
        assert err.date_to == date(2024, 1, 1)
        assert "2024-03-01" in err.message
        assert "2024-01-01" in err.message


class TestBuildPage:

    @pytest.mark.parametrize("total", [0, 1, 2, 9, 10, 11, 99, 100, 101])
    @pytest.mark.parametrize("size", [1, 3, 10])
    def test_metadata_consistent(self, total, size):
        pages = math.ceil(total / size)
        for page in range(max(pages, 1)):
            result = build_page([], page, size, total)

            assert result.total_pages == pages
            assert result.total_elements == total
            if total == 0:
                assert result.last is True
            else:
                assert result.last is (page == pages - 1)

    def test_empty_first_page_is_last(self):
        result = build_page([], 0, 10, 0)

        assert result.total_pages == 0
        assert result.last is True

    def test_page_past_end(self):
        result = build_page([], 5, 10, 12)

        assert result.total_pages == 2
        assert result.last is True

    def test_as_dict(self):
        summary = CustomerRewardSummary(customer_id=3, customer_name="Carol White")
        data = build_page([summary], 1, 2, 3).as_dict()

        assert data == {
            "content": [
                {"customerId": 3, "customerName": "Carol White", "monthlyRewards": [], "totalPoints": 0}
            ],
            "page": 1,
            "size": 2,
            "totalElements": 3,
            "totalPages": 2,
            "last": True,
        }

    def test_size_must_be_positive(self):
        with pytest.raises(ValueError):
            total_pages(10, 0)
