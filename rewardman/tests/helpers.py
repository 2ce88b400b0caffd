"""Test helpers: an in-memory RewardStore."""

from datetime import date
from decimal import Decimal

from rewardman.protocols.store import CustomerRecord, TransactionRecord


def tx(amount, year, month, day):
    return TransactionRecord(amount=Decimal(amount), transaction_date=date(year, month, day))


class InMemoryStore:
    """RewardStore over plain dicts, for service tests without the ORM."""

    def __init__(self, customers=None, transactions=None):
        # {id: name}, {id: [TransactionRecord]}
        self.customers = dict(customers or {})
        self.transactions = {k: list(v) for k, v in (transactions or {}).items()}
        self.calls = []

    def find_customer_by_id(self, customer_id):
        self.calls.append(("find_customer_by_id", customer_id))
        name = self.customers.get(customer_id)
        return CustomerRecord(id=customer_id, name=name) if name is not None else None

    def list_customers(self, page_index=None, page_size=None):
        self.calls.append(("list_customers", page_index, page_size))
        records = [CustomerRecord(id=k, name=v) for k, v in sorted(self.customers.items())]
        total = len(records)
        if page_index is not None and page_size is not None:
            records = records[page_index * page_size:(page_index + 1) * page_size]
        return records, total

    def find_transactions(self, customer_id, date_from=None, date_to=None):
        self.calls.append(("find_transactions", customer_id, date_from, date_to))
        return [
            t
            for t in self.transactions.get(customer_id, [])
            if (date_from is None or t.transaction_date >= date_from)
            and (date_to is None or t.transaction_date <= date_to)
        ]
