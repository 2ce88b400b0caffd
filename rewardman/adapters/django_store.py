"""Django ORM RewardStore adapter."""

import logging
from datetime import date

from rewardman.models import Customer, Transaction
from rewardman.protocols.store import CustomerRecord, TransactionRecord

logger = logging.getLogger(__name__)


class DjangoRewardStore:
    """
    Adapter that implements RewardStore with the rewardman models.

    Read-only: no query issued here writes to the database.

    Configuration in settings.py:
        REWARDMAN = {
            "STORE_BACKEND": "rewardman.adapters.django_store.DjangoRewardStore",
        }
    """

    def find_customer_by_id(self, customer_id: int) -> CustomerRecord | None:
        """Return customer by primary key, or None."""
        try:
            customer = Customer.objects.only("id", "name").get(pk=customer_id)
        except Customer.DoesNotExist:
            logger.debug("Customer %s not found", customer_id)
            return None
        return CustomerRecord(id=customer.pk, name=customer.name)

    def list_customers(
        self,
        page_index: int | None = None,
        page_size: int | None = None,
    ) -> tuple[list[CustomerRecord], int]:
        """Return customers ordered by id (one page if paging is given) and total count."""
        qs = Customer.objects.only("id", "name").order_by("id")
        total = qs.count()

        if page_index is not None and page_size is not None:
            offset = page_index * page_size
            qs = qs[offset:offset + page_size]

        customers = [CustomerRecord(id=c.pk, name=c.name) for c in qs]
        logger.debug(
            "Listed %d of %d customers (page=%s, size=%s)",
            len(customers),
            total,
            page_index,
            page_size,
        )
        return customers, total

    def find_transactions(
        self,
        customer_id: int,
        date_from: date | None = None,
        date_to: date | None = None,
    ) -> list[TransactionRecord]:
        """Return the customer's transactions within the inclusive range."""
        qs = Transaction.objects.filter(customer_id=customer_id)
        if date_from is not None:
            qs = qs.filter(transaction_date__gte=date_from)
        if date_to is not None:
            qs = qs.filter(transaction_date__lte=date_to)

        return [
            TransactionRecord(amount=amount, transaction_date=tx_date)
            for amount, tx_date in qs.values_list("amount", "transaction_date")
        ]
