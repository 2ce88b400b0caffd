"""Pytest fixtures for Rewardman tests."""

from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command

from rewardman.models import Customer, Transaction
from rewardman.service import RewardService
from rewardman.tests.helpers import InMemoryStore, tx


@pytest.fixture
def alice_transactions():
    """Reference purchases: JAN 115, FEB 250, MAR 70 = 435 points."""
    return [
        tx("120.00", 2024, 1, 15),
        tx("75.50", 2024, 1, 28),
        tx("200.00", 2024, 2, 10),
        tx("45.00", 2024, 2, 20),
        tx("110.00", 2024, 3, 5),
    ]


@pytest.fixture
def memory_store(alice_transactions):
    return InMemoryStore(
        customers={1: "Alice Johnson", 2: "Bob Smith", 3: "Dormant Dan"},
        transactions={
            1: alice_transactions,
            2: [tx("55.00", 2024, 1, 5), tx("130.00", 2024, 1, 22), tx("150.00", 2024, 3, 18)],
        },
    )


@pytest.fixture
def service(memory_store):
    return RewardService(store=memory_store)


@pytest.fixture
def seeded(db):
    """Reference customers in the database (Alice 435, Bob 314, Carol 688)."""
    call_command("rewardman_seed", stdout=StringIO())
    return {c.name: c for c in Customer.objects.all()}


@pytest.fixture
def customer_without_purchases(db):
    return Customer.objects.create(name="Empty Ellen", email="ellen@example.com")


@pytest.fixture
def make_transaction(db):
    def _make(customer, amount, tx_date):
        return Transaction.objects.create(
            customer=customer,
            amount=Decimal(amount),
            transaction_date=tx_date,
        )

    return _make
